#!/usr/bin/env python3
"""
Invocation options and their validation.

An InvocationOptions value is built once from the parsed command line and
then handed to the transport and the response formatter.
"""

import os
import re
from typing import List, Optional

from .config import config
from .exceptions import UsageError, ValidationError, FileTooLargeError
from .logging_utils import get_logger

logger = get_logger(__name__)

UPLOAD = "upload"
DOWNLOAD = "download"

EXPIRATION_PATTERN = re.compile(r"^[1-9][0-9]*[dwmy]$")


class InvocationOptions:
    """Validated options for a single upload or download."""

    def __init__(
        self,
        mode: str,
        source: str,
        destination: Optional[str] = None,
        expires: Optional[str] = None,
    ):
        """
        Args:
            mode: UPLOAD or DOWNLOAD
            source: File path to upload, or identifier/URL to download
            destination: Output path for downloads, None for stdout
            expires: Expiration specifier for uploads, None for the service default
        """
        self.mode = mode
        self.source = source
        self.destination = destination
        self.expires = expires

    @property
    def is_upload(self) -> bool:
        return self.mode == UPLOAD

    def __eq__(self, other):
        if not isinstance(other, InvocationOptions):
            return NotImplemented
        return (self.mode, self.source, self.destination, self.expires) == (
            other.mode,
            other.source,
            other.destination,
            other.expires,
        )

    def __repr__(self):
        return (
            f"InvocationOptions(mode={self.mode!r}, source={self.source!r}, "
            f"destination={self.destination!r}, expires={self.expires!r})"
        )


def validate_expiration(expires: str) -> str:
    """
    Check an expiration specifier such as '7d' or '3m'.

    Raises:
        ValidationError: If the value is empty or does not match n[dwmy]
    """
    if not expires:
        raise ValidationError("please provide an expiration period")
    if not EXPIRATION_PATTERN.match(expires):
        raise ValidationError("expiration period not valid")
    return expires


def format_limit(max_file_size: int) -> str:
    """Describe a size limit the way the service states it, e.g. '5GB'."""
    if max_file_size >= 1000000000 and max_file_size % 1000000000 == 0:
        return f"{max_file_size // 1000000000}GB"
    return f"{max_file_size} bytes"


def validate_upload_file(file_path: str, max_file_size: Optional[int] = None) -> str:
    """
    Check that a file can be uploaded.

    Args:
        file_path: Path to the file to upload
        max_file_size: Size limit in bytes (default: configured limit)

    Raises:
        UsageError: If the path is empty or not an existing file
        FileTooLargeError: If the file is larger than the limit
    """
    if max_file_size is None:
        max_file_size = config.get("max_file_size")

    if not file_path or not os.path.isfile(file_path):
        raise UsageError(f"file {file_path} is not valid")

    file_size = os.path.getsize(file_path)
    logger.debug(f"{file_path} is {file_size} bytes (limit {max_file_size})")
    if file_size > max_file_size:
        raise FileTooLargeError(
            f"{file_path} does not respect the {format_limit(max_file_size)} limit"
        )

    return file_path


def build_options(
    upload: Optional[str] = None,
    download: Optional[List[str]] = None,
    expires: Optional[str] = None,
) -> InvocationOptions:
    """
    Build validated invocation options from parsed flag values.

    Args:
        upload: Path given to -u/--upload, or None
        download: Operands given to -d/--download ([source] or [source, dest]), or None
        expires: Value given to -e/--expires, or None when the flag is absent

    Returns:
        InvocationOptions ready for the transport

    Raises:
        UsageError: For conflicting, missing or malformed arguments
        ValidationError: For unacceptable values
    """
    if upload is not None and download is not None:
        raise UsageError("cannot upload and download")
    if upload is None and download is None:
        raise UsageError("")

    if upload is not None:
        validate_upload_file(upload)
        if expires is not None:
            validate_expiration(expires)
        return InvocationOptions(UPLOAD, upload, expires=expires)

    if not download or len(download) > 2:
        raise UsageError("download takes a source and an optional output file")

    source = download[0]
    if not source:
        raise UsageError(f"file {source} is not valid")

    if expires is not None:
        validate_expiration(expires)
        logger.warning("-- expiration period is ignored when downloading")

    destination = download[1] if len(download) == 2 else None
    if destination is not None and not destination:
        raise UsageError("provide an output file")

    return InvocationOptions(DOWNLOAD, source, destination=destination)
