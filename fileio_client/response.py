#!/usr/bin/env python3
"""
Parsing and printing of file.io upload responses.

The service answers with a flat structure such as
{"success":true,"key":"abc","link":"https://file.io/abc","expiry":"14 days"}.
It is read as comma separated key:value tokens once quotes and braces are
stripped.
"""

import re
from typing import List, Optional, Tuple

from .clipboard import Clipboard, detect_clipboard
from .exceptions import MalformedResponseError, RemoteError
from .logging_utils import get_logger
from .utils import bold, pad_string

logger = get_logger(__name__)

KEY_WIDTH = 6
LINK_PATTERN = re.compile(r"https://file\.io/\w+")
STRIP_CHARS = re.compile(r'["{}]')


class UploadResponse:
    """Key/value pairs of an upload response, success flag first."""

    def __init__(self, success: bool, fields: List[Tuple[str, str]]):
        self.success = success
        self.fields = fields

    def tokens(self) -> List[str]:
        return [f"{key}:{value}" for key, value in self.fields]

    def find_link(self) -> Optional[str]:
        """Return the first file.io link found in the response, if any."""
        match = LINK_PATTERN.search(" ".join(self.tokens()))
        return match.group(0) if match else None


def tokenize(body: str) -> List[str]:
    """
    Split a response body into key:value tokens.

    Raises:
        MalformedResponseError: If the body is empty
    """
    stripped = STRIP_CHARS.sub("", body or "").strip()
    if not stripped:
        raise MalformedResponseError("empty response from server")
    return [token.strip() for token in stripped.split(",")]


def split_token(token: str) -> Tuple[str, str]:
    """Split a token on its first colon; values may contain colons."""
    key, sep, value = token.partition(":")
    key = key.strip()
    if not sep or not key:
        raise MalformedResponseError(f"unexpected token in response: {token!r}")
    return key, value.strip()


def parse_response(body: str) -> UploadResponse:
    """
    Parse a raw upload response.

    Args:
        body: Response body text

    Returns:
        UploadResponse with the success flag and remaining pairs

    Raises:
        MalformedResponseError: If any token is not key:value, or the first
            pair is not success:true / success:false
    """
    pairs = [split_token(token) for token in tokenize(body)]
    key, value = pairs[0]

    if key != "success" or value not in ("true", "false"):
        raise MalformedResponseError(
            f"response does not start with a success flag: {key}:{value}"
        )

    return UploadResponse(value == "true", pairs[1:])


def format_field(key: str, value: str) -> str:
    return f"{bold('[ ' + pad_string(key, KEY_WIDTH, align='right') + ' ]')} => {value}"


def print_response(body: str, clipboard: Optional[Clipboard] = None) -> UploadResponse:
    """
    Print an upload response and copy its link to the clipboard when possible.

    Args:
        body: Raw response body
        clipboard: Clipboard to copy the link to (default: detected at runtime)

    Returns:
        The parsed response

    Raises:
        RemoteError: If the service reported a failure
        MalformedResponseError: If the body cannot be parsed
    """
    response = parse_response(body)
    logger.debug(f"Parsed {len(response.fields)} fields, success={response.success}")

    if not response.success:
        raise RemoteError(" ".join(response.tokens()))

    for key, value in response.fields:
        print(format_field(key, value))

    if clipboard is None:
        clipboard = detect_clipboard()

    if clipboard.available:
        link = response.find_link()
        if link and clipboard.copy(link):
            print("-- link copied to clipboard")

    return response
