"""
URL document download task.

Downloads a remote document into a temp directory so it can be parsed like a
local file. A URL path suffix that ParsingTask understands is kept; otherwise
the suffix comes from the response Content-Type, so `/wiki/Python_3.12`
served as text/html is saved as `Python_3.12.html`.

Dependencies: httpx
System role: First stage of document ingestion pipeline (URL source)
"""

import os
import shutil
import tempfile
from pathlib import Path

import httpx

from ragdemo.core.document_processing.tasks.parsing_task import SUPPORTED_SUFFIXES
from ragdemo.core.exceptions import DocumentFetchError, ResourceNotFoundError
from ragdemo.core.media import parse_url

CONTENT_TYPE_SUFFIXES = {
    "application/pdf": ".pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ".docx",
    "text/html": ".html",
    "application/xhtml+xml": ".html",
    "text/plain": ".txt",
    "text/markdown": ".md",
    "text/csv": ".csv",
    "application/json": ".json",
    "application/xml": ".xml",
    "text/xml": ".xml",
}

# Statuses meaning the document is gone rather than the origin failing
NOT_FOUND_STATUSES = frozenset({404, 410})


def local_filename(url: httpx.URL, content_type: str) -> str:
    """Name for the downloaded file, with a suffix ParsingTask can dispatch on."""
    filename = Path(url.path).name or "document"
    suffix = Path(filename).suffix.lower()
    if suffix and suffix in SUPPORTED_SUFFIXES:
        return filename

    mime_type = content_type.split(";")[0].strip().lower()
    return filename + CONTENT_TYPE_SUFFIXES.get(mime_type, "")


class UrlDownloadTask:
    """Download documents over HTTP to a local temp directory."""

    def __init__(self, client: httpx.Client | None = None) -> None:
        """
        Args:
            client: HTTP client (library default timeout when None)
        """
        self._client = client or httpx.Client(follow_redirects=True)

    def download(self, locator: str) -> str:
        """
        Download document to a fresh temp directory.

        The caller owns the returned file and its parent directory.

        Args:
            locator: http(s) URL

        Returns:
            str: Local file path to downloaded document

        Raises:
            MalformedLocatorError: URL cannot be parsed
            ResourceNotFoundError: 404/410, or the origin cannot be reached
            DocumentFetchError: Any other error status
        """
        url = parse_url(locator)

        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            if status_code in NOT_FOUND_STATUSES:
                raise ResourceNotFoundError(locator, details={"status_code": status_code}) from e
            raise DocumentFetchError(locator, status_code) from e
        except httpx.TransportError as e:
            raise ResourceNotFoundError(locator, details={"reason": str(e)}) from e

        filename = local_filename(url, response.headers.get("content-type", ""))
        temp_dir = tempfile.mkdtemp(prefix="ragdemo_download_")
        local_path = os.path.join(temp_dir, filename)
        try:
            with open(local_path, "wb") as f:
                f.write(response.content)
        except OSError:
            shutil.rmtree(temp_dir, ignore_errors=True)
            raise
        return local_path

    def close(self) -> None:
        self._client.close()
