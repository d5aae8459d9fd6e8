#!/usr/bin/env python3
"""Pytest configuration and shared fixtures."""

import os
import sys
import logging
import tempfile
import pytest
from unittest.mock import Mock

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fileio_client.clipboard import Clipboard


SUCCESS_BODY = (
    '{"success":true,"key":"abc","link":"https://file.io/abc","expiry":"14 days"}'
)
FAILURE_BODY = '{"success":false,"message":"file not found"}'


@pytest.fixture
def temp_file():
    """Create a temporary file for upload testing."""
    fd, path = tempfile.mkstemp(suffix=".txt")
    os.write(fd, b"Test file content for upload testing")
    os.close(fd)
    yield path
    if os.path.exists(path):
        os.unlink(path)


@pytest.fixture
def temp_output_path():
    """Create a path for download output that does not exist yet."""
    directory = tempfile.mkdtemp()
    path = os.path.join(directory, "downloaded.bin")
    yield path
    if os.path.exists(path):
        os.unlink(path)
    os.rmdir(directory)


@pytest.fixture
def fake_clipboard():
    """A clipboard that records what was copied."""
    clipboard = Mock(spec=Clipboard)
    clipboard.available = True
    clipboard.copy.return_value = True
    return clipboard


@pytest.fixture
def no_clipboard(monkeypatch):
    """Pretend no clipboard utility is installed."""
    monkeypatch.setattr("shutil.which", lambda name: None)


def make_response(status_code=200, text="", chunks=None, headers=None):
    """Build a mocked requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.text = text
    response.headers = headers if headers is not None else {}
    response.iter_content.return_value = chunks or []
    response.raise_for_status = Mock()
    return response


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging so they don't outlive captured streams."""
    yield
    logging.getLogger().handlers = []
