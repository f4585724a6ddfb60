"""Content type detection from message headers."""

from enum import Enum

import httpx


class ContentType(Enum):
    """Body kinds that get distinct rendering."""

    JSON = "json"
    XML = "xml"
    HTML = "html"
    MULTIPART = "multipart"
    OTHER = "other"


def detect_content_type(headers: httpx.Headers) -> ContentType:
    """Classify a message by its Content-Type header.

    Args:
        headers: The message headers

    Returns:
        The detected content type, OTHER when absent or unrecognized
    """
    value = headers.get("content-type")
    if value is None or not value.isascii():
        return ContentType.OTHER

    value = value.lower()
    if "json" in value:
        return ContentType.JSON
    if "html" in value:
        return ContentType.HTML
    if "xml" in value:
        return ContentType.XML
    if "multipart" in value:
        return ContentType.MULTIPART
    return ContentType.OTHER


def charset_from_content_type(headers: httpx.Headers) -> str | None:
    """Extract the charset parameter from the Content-Type header.

    Args:
        headers: The message headers

    Returns:
        The charset label, or None if not declared
    """
    value = headers.get("content-type")
    if not value:
        return None

    for param in value.split(";")[1:]:
        key, sep, label = param.partition("=")
        if sep and key.strip().lower() == "charset":
            label = label.strip().strip('"').strip()
            return label or None
    return None
