#!/usr/bin/env python3
"""
Utility functions for the file.io client.
"""

import sys
import wcwidth
from typing import Union

DAYS = 14  # file.io default expiry
BOLD = "\033[1m"
END = "\033[0m"


def format_size(size_bytes: Union[int, float]) -> str:
    """
    Format a size in bytes to a human-readable string.

    Args:
        size_bytes: Size in bytes

    Returns:
        Human-readable string with appropriate unit (B, KB, MB, GB)
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.2f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.2f} MB"
    else:
        return f"{size_bytes / (1024 * 1024 * 1024):.2f} GB"


def format_speed(bytes_per_second: float) -> str:
    """
    Format a speed in bytes/second to a human-readable string.

    Args:
        bytes_per_second: Speed in bytes per second

    Returns:
        Human-readable string with appropriate unit (B/s, KB/s, MB/s, GB/s)
    """
    if bytes_per_second < 1024:
        return f"{bytes_per_second:.2f} B/s"
    elif bytes_per_second < 1024 * 1024:
        return f"{bytes_per_second / 1024:.2f} KB/s"
    elif bytes_per_second < 1024 * 1024 * 1024:
        return f"{bytes_per_second / (1024 * 1024):.2f} MB/s"
    else:
        return f"{bytes_per_second / (1024 * 1024 * 1024):.2f} GB/s"


def get_visual_width(text) -> int:
    """
    Calculate the visual width of text, considering emojis and other wide characters.

    Args:
        text: The string to calculate visual width for

    Returns:
        int: The visual width of the text
    """
    width = wcwidth.wcswidth(str(text))
    # wcswidth returns -1 for non-printable characters
    return width if width >= 0 else len(str(text))


def pad_string(text, width, align="left") -> str:
    """
    Pad a string to the given visual width, taking into account wide characters like emojis.

    Args:
        text: The string to pad
        width: The desired visual width
        align: Alignment ('left', 'right', 'center')

    Returns:
        str: The padded string
    """
    text_str = str(text)
    visual_width = get_visual_width(text_str)
    padding_needed = max(0, width - visual_width)

    if align == "right":
        return " " * padding_needed + text_str
    elif align == "center":
        left_padding = padding_needed // 2
        right_padding = padding_needed - left_padding
        return " " * left_padding + text_str + " " * right_padding
    else:  # left align
        return text_str + " " * padding_needed


def bold(text: str) -> str:
    """Wrap text in ANSI bold escapes."""
    return f"{BOLD}{text}{END}"


def print_error(message: str) -> None:
    """Print a message to the error stream."""
    print(message, file=sys.stderr)
