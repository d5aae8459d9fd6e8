#!/usr/bin/env python3
"""
Error kinds raised by the file.io client.
Every error is terminal for the invocation; the CLI turns them into exit code 1.
"""


class FileIOClientError(Exception):
    """Base class for all client errors."""


class UsageError(FileIOClientError):
    """Bad, missing or conflicting command line arguments."""


class ValidationError(FileIOClientError):
    """An argument is present but not acceptable."""


class FileTooLargeError(ValidationError):
    """The file to upload exceeds the service size limit."""


class TransportError(FileIOClientError):
    """Network or HTTP failure during an upload or a download."""


class RemoteError(FileIOClientError):
    """The service answered with an explicit failure."""


class MalformedResponseError(FileIOClientError):
    """The service answer does not follow the key/value format."""
