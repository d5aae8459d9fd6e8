#!/usr/bin/env python3
"""
file.io client - Command Line Interface

Uploads a file to https://file.io and prints its link, or downloads a file
given its key or link.
"""

import argparse
import os
import sys

from . import __version__
from .config import config
from .exceptions import FileIOClientError, RemoteError, UsageError
from .fileio_client import FileIOClient
from .logging_utils import setup_logging, get_logger
from .options import InvocationOptions, build_options
from .response import print_response
from .utils import DAYS, print_error

logger = get_logger(__name__)

EPILOG = f"""\
Expiration period argument accepts this type of pattern: n[d(ays),w(eeks),m(onths),y(ears)]
where 'n' has to be an integer greater than 0, followed by one letter in [dwmy].
If the expiration period is not provided it will be the default value of {DAYS} days set by https://file.io/.
"""


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser reporting usage errors with exit status 1."""

    def error(self, message):
        if message:
            print_error(f"{self.prog}: {message}")
        print_error(f"{self.prog}: usage: {self.prog} -u [args] | -d [args] | -h")
        print_error(f"{self.prog} --help for further info")
        sys.exit(1)


def _create_argument_parser(prog=None) -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = UsageArgumentParser(
        prog=prog,
        allow_abbrev=False,
        usage="%(prog)s -u [args] | -d [args] | -h",
        description="file.io utility for uploading and downloading files.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-u",
        "--upload",
        metavar="FILE",
        help="uploads FILE to https://file.io/",
    )
    parser.add_argument(
        "-d",
        "--download",
        nargs="+",
        metavar=("SOURCE", "OUTPUT"),
        help="downloads SOURCE (key or link) and saves it into OUTPUT, or into stdout if not provided",
    )
    parser.add_argument(
        "-e",
        "--expires",
        metavar="PERIOD",
        help="set expiration period to PERIOD (use only with -u)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="show verbose output"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def _initialize_logging(args) -> None:
    setup_logging(
        log_folder=config.get("log_folder"),
        log_basename=config.get("log_basename"),
        max_bytes=config.get("max_log_size_mb", 5) * 1024 * 1024,
        backup_count=config.get("max_log_backups", 10),
        verbose=args.verbose,
    )


def run(options: InvocationOptions, client: FileIOClient) -> None:
    """
    Perform the upload or download described by the options.

    Args:
        options: Validated invocation options
        client: file.io client to use
    """
    if options.is_upload:
        body = client.upload_file(options.source, options.expires)
        print_response(body)
    else:
        client.download_file(options.source, options.destination)


def main(argv=None):
    """Parse the command line, run the requested transfer and report errors."""
    parser = _create_argument_parser(prog=os.path.basename(sys.argv[0]) or "fileio")
    args = parser.parse_args(argv)

    _initialize_logging(args)

    try:
        options = build_options(args.upload, args.download, args.expires)
    except UsageError as e:
        parser.error(str(e))
    except FileIOClientError as e:
        print_error(f"{parser.prog}: {e}")
        sys.exit(1)

    logger.debug(f"Running with {options!r}")
    client = FileIOClient.from_config()

    try:
        run(options, client)
    except RemoteError as e:
        print_error(f"-- error from {client.base_url}")
        print_error(str(e))
        sys.exit(1)
    except FileIOClientError as e:
        logger.debug(f"{type(e).__name__}: {e.__cause__ or e}")
        print_error(f"{parser.prog}: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print_error(f"\n{parser.prog}: interrupted")
        sys.exit(130)

    return 0


if __name__ == "__main__":
    sys.exit(main())
