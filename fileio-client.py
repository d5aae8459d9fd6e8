#!/usr/bin/env python3
"""
file.io client - Command Line Interface
A tool for uploading files to and downloading files from https://file.io
"""

import sys

from fileio_client import cli

if __name__ == "__main__":
    sys.exit(cli.main())
