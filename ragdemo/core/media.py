"""
Locator helpers.

Decides whether a locator is a URL or a path, validates it, and picks the
media type for images by file suffix.

Dependencies: httpx
System role: Locator resolution for documents and images
"""

from pathlib import Path

import httpx

from ragdemo.core.exceptions import MalformedLocatorError, ResourceNotFoundError
from ragdemo.models.prompt import IMAGE_JPEG, IMAGE_PNG, MediaAttachment


def is_url(locator: str) -> bool:
    """Locators starting with "http" are URLs; everything else is a path."""
    return locator.startswith("http")


def parse_url(locator: str) -> httpx.URL:
    """
    Parse an http(s) locator.

    Raises:
        MalformedLocatorError: If the locator is not an absolute http(s) URL
    """
    try:
        url = httpx.URL(locator)
    except (httpx.InvalidURL, ValueError) as e:
        raise MalformedLocatorError(locator, reason=str(e)) from e

    if url.scheme not in ("http", "https") or not url.host:
        raise MalformedLocatorError(locator, reason="expected an absolute http(s) URL")
    return url


def require_local_file(locator: str) -> Path:
    """
    Resolve a filesystem locator.

    Raises:
        ResourceNotFoundError: If the path is missing or not a regular file
    """
    path = Path(locator).expanduser()
    if not path.is_file():
        raise ResourceNotFoundError(locator)
    return path


def image_media_type(locator: str) -> str:
    """PNG for a ".png" suffix, JPEG for anything else. No content sniffing."""
    return IMAGE_PNG if locator.endswith(".png") else IMAGE_JPEG


def resolve_image(locator: str) -> MediaAttachment:
    """
    Build the attachment for an image locator.

    Args:
        locator: Image URL or local path

    Returns:
        MediaAttachment: Media type and locator

    Raises:
        MalformedLocatorError: Bad URL
        ResourceNotFoundError: Missing local file
    """
    if is_url(locator):
        parse_url(locator)
    else:
        require_local_file(locator)
    return MediaAttachment(mime_type=image_media_type(locator), locator=locator)
