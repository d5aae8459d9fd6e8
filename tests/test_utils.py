#!/usr/bin/env python3
"""Tests for utility functions."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from fileio_client.utils import (
    BOLD,
    END,
    bold,
    format_size,
    format_speed,
    get_visual_width,
    pad_string,
    print_error,
)


class TestFormatSize:
    """Tests for format_size function."""

    def test_bytes(self):
        """Should format bytes correctly."""
        assert format_size(0) == "0 B"
        assert format_size(512) == "512 B"
        assert format_size(1023) == "1023 B"

    def test_kilobytes(self):
        """Should format kilobytes correctly."""
        assert format_size(1024) == "1.00 KB"
        assert format_size(1536) == "1.50 KB"

    def test_megabytes(self):
        """Should format megabytes correctly."""
        assert format_size(1024 * 1024) == "1.00 MB"
        assert format_size(1024 * 1024 * 500) == "500.00 MB"

    def test_gigabytes(self):
        """Should format gigabytes correctly."""
        assert format_size(1024 * 1024 * 1024) == "1.00 GB"
        assert format_size(5000000000) == "4.66 GB"


class TestFormatSpeed:
    """Tests for format_speed function."""

    def test_bytes_per_second(self):
        assert format_speed(512) == "512.00 B/s"

    def test_kilobytes_per_second(self):
        assert format_speed(1024 * 100) == "100.00 KB/s"

    def test_megabytes_per_second(self):
        assert format_speed(1024 * 1024 * 50) == "50.00 MB/s"


class TestVisualWidth:
    """Tests for wide character handling."""

    def test_ascii(self):
        assert get_visual_width("expiry") == 6

    def test_wide_characters(self):
        assert get_visual_width("文件") == 4

    def test_non_printable_falls_back_to_length(self):
        assert get_visual_width("a\x1bb") == 3


class TestPadString:
    """Tests for pad_string function."""

    def test_right_align(self):
        assert pad_string("key", 6, align="right") == "   key"

    def test_left_align(self):
        assert pad_string("key", 6) == "key   "

    def test_center_align(self):
        assert pad_string("ab", 6, align="center") == "  ab  "

    def test_longer_than_width(self):
        assert pad_string("download", 6, align="right") == "download"

    def test_wide_characters(self):
        assert pad_string("文件", 6, align="right") == "  文件"


class TestOutputHelpers:
    def test_bold(self):
        assert bold("key") == f"{BOLD}key{END}"

    def test_print_error(self, capsys):
        print_error("-- error")
        captured = capsys.readouterr()
        assert captured.err == "-- error\n"
        assert captured.out == ""
