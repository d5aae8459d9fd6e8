#!/usr/bin/env python3
"""
file.io HTTP client.
"""

import os
import sys
import time
import mimetypes
import requests
from requests_toolbelt import MultipartEncoder, MultipartEncoderMonitor
from typing import Optional
from tqdm import tqdm

from .config import config
from .exceptions import TransportError
from .logging_utils import get_logger
from .utils import format_size, format_speed

logger = get_logger(__name__)

DEFAULT_CHUNK_SIZE = 8192


class FileIOClient:
    """file.io client for uploading and downloading single files."""

    BASE_URL = "https://file.io"

    def __init__(
        self,
        base_url: Optional[str] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """
        Initialize the file.io client.

        Args:
            base_url: Service endpoint (default: https://file.io)
            chunk_size: Size in bytes of the chunks written while downloading
        """
        self.session = requests.Session()
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.chunk_size = chunk_size

    @classmethod
    def from_config(cls) -> "FileIOClient":
        return cls(
            base_url=config.get("base_url"),
            chunk_size=config.get("chunk_size", DEFAULT_CHUNK_SIZE),
        )

    def upload_url(self, expires: Optional[str] = None) -> str:
        """
        Build the upload URL.

        Args:
            expires: Optional expiration specifier, e.g. '7d'

        Returns:
            str: The base URL, with an expires query parameter when given
        """
        if expires:
            return f"{self.base_url}/?expires={expires}"
        return self.base_url

    def download_url(self, identifier: str) -> str:
        """
        Resolve a file identifier to a URL.

        Args:
            identifier: A file key such as 'abc123' or a full URL

        Returns:
            str: The identifier itself when it is already a URL, else base URL + '/' + identifier
        """
        if identifier.startswith("http"):
            return identifier
        return f"{self.base_url}/{identifier}"

    def upload_file(self, file_path: str, expires: Optional[str] = None) -> str:
        """
        Upload a file to file.io.

        Args:
            file_path: Path to the file to upload
            expires: Optional expiration specifier

        Returns:
            str: The raw response body

        Raises:
            TransportError: If the request could not be completed
        """
        url = self.upload_url(expires)
        file_name = os.path.basename(file_path)
        logger.info(f"-- uploading {file_path} to {self.base_url}/")

        try:
            return self._perform_upload(file_path, file_name, url)
        except (requests.exceptions.RequestException, OSError) as e:
            logger.debug(f"Upload failed: {e}")
            raise TransportError(f"error while uploading {file_path}") from e

    def _perform_upload(self, file_path: str, file_name: str, url: str) -> str:
        """
        Internal method to perform the actual upload with progress tracking.
        """
        file_size = os.path.getsize(file_path)
        start_time = time.time()

        mime_type = mimetypes.guess_type(file_name)[0] or "application/octet-stream"
        logger.debug(f"Using MIME type {mime_type} for file {file_name}")

        with open(file_path, "rb") as file_obj:
            encoder = MultipartEncoder(
                fields={"file": (file_name, file_obj, mime_type)}
            )

            with tqdm(
                total=file_size,
                unit="B",
                unit_scale=True,
                unit_divisor=1024,
                desc=f"↑ {file_name}",
                bar_format="{desc}: {percentage:3.0f}%|{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}]{postfix}",
                disable=None,
            ) as pbar:
                last_bytes = [0]

                def on_progress(monitor):
                    delta = min(monitor.bytes_read, file_size) - last_bytes[0]
                    if delta > 0:
                        pbar.update(delta)
                        last_bytes[0] += delta
                        elapsed = time.time() - start_time
                        if elapsed > 0:
                            pbar.set_postfix_str(format_speed(monitor.bytes_read / elapsed))

                monitor = MultipartEncoderMonitor(encoder, on_progress)

                response = self.session.post(
                    url,
                    data=monitor,
                    headers={"Content-Type": monitor.content_type},
                )

                if pbar.n < file_size:
                    pbar.update(file_size - pbar.n)

        elapsed_time = time.time() - start_time
        speed = file_size / elapsed_time if elapsed_time > 0 else 0
        logger.debug(
            f"Sent {file_name} ({format_size(file_size)}) at {format_speed(speed)}, "
            f"HTTP {response.status_code}"
        )

        # file.io reports its own failures in the body, even on error statuses
        return response.text

    def download_file(self, identifier: str, output: Optional[str] = None) -> str:
        """
        Download a file from file.io.

        Args:
            identifier: File key or full URL
            output: Path to write to, or None for stdout

        Returns:
            str: The URL that was downloaded

        Raises:
            TransportError: On HTTP error status, network or write failure
        """
        url = self.download_url(identifier)
        logger.info(f"-- downloading {url}")

        try:
            self._perform_download(url, output)
        except (requests.exceptions.RequestException, OSError) as e:
            logger.debug(f"Download failed: {e}")
            raise TransportError(f"error while downloading {url}") from e

        logger.info(f"-- {url} downloaded")
        return url

    def _perform_download(self, url: str, output: Optional[str]) -> None:
        response = self.session.get(url, stream=True)
        try:
            response.raise_for_status()

            total = int(response.headers.get("Content-Length", 0)) or None
            name = output or url.rsplit("/", 1)[-1]

            with tqdm(
                total=total,
                unit="B",
                unit_scale=True,
                unit_divisor=1024,
                desc=f"↓ {name}",
                disable=None,
            ) as pbar:
                if output is None:
                    self._write_chunks(response, sys.stdout.buffer, pbar)
                    sys.stdout.buffer.flush()
                else:
                    # only created once the status check passed
                    with open(output, "wb") as file_obj:
                        self._write_chunks(response, file_obj, pbar)
        finally:
            response.close()

    def _write_chunks(self, response, file_obj, pbar: tqdm) -> None:
        for chunk in response.iter_content(chunk_size=self.chunk_size):
            if chunk:
                file_obj.write(chunk)
                pbar.update(len(chunk))
