"""Simple predicates over URL strings.

All predicates are total: anything that is not a string is reported as
not matching instead of raising.
"""

import re
from typing import Iterable

from omniurl.classifier.scheme import get_scheme
from omniurl.core.constants import (
    DEFAULTS,
    FILE_SCHEME,
    HTTP_SCHEME,
    HTTPS_SCHEME,
    VIEW_SOURCE_PREFIX,
)
from omniurl.parsing.loose import loose_parse


def is_image_address(url: str, extensions: Iterable[str] = tuple(DEFAULTS["image_extensions"])) -> bool:
    """Check if a URL ends in an image extension (case-sensitive)."""
    if not isinstance(url, str):
        return False
    pattern = r"\.(" + "|".join(re.escape(ext) for ext in extensions) + r")$"
    return bool(re.search(pattern, url))


def is_file_type(url: str, ext: str) -> bool:
    """Check if a URL's path ends with ``.ext``, ignoring case.

    Args:
        url: URL to check
        ext: File extension without the dot

    Returns:
        True if the pathname ends with the extension
    """
    pathname = loose_parse(url).pathname
    if not pathname or not isinstance(ext, str):
        return False
    return pathname.lower().endswith("." + ext.lower())


def is_view_source_url(url: str) -> bool:
    return isinstance(url, str) and url.lower().startswith(VIEW_SOURCE_PREFIX)


def is_data_url(url: str) -> bool:
    return isinstance(url, str) and url.lower().startswith("data:")


def is_image_data_url(url: str) -> bool:
    return isinstance(url, str) and url.lower().startswith("data:image/")


def is_potential_phishing_url(url: str) -> bool:
    """Check if a URL uses a scheme that can impersonate other sites (data:, blob:)."""
    if not isinstance(url, str):
        return False
    protocol = loose_parse(url.strip().lower()).protocol
    return protocol in ("data:", "blob:")


def is_http_or_https(url: str) -> bool:
    return isinstance(url, str) and (url.startswith(HTTP_SCHEME) or url.startswith(HTTPS_SCHEME))


def is_file_scheme(url: str) -> bool:
    return get_scheme(url) == FILE_SCHEME


def is_local_file(origin: str, local_origins: Iterable[str] = tuple(DEFAULTS["local_file_origins"])) -> bool:
    """Check if an origin belongs to local content (file, blob, data, browser pages)."""
    if not origin or not isinstance(origin, str):
        return False
    return any(origin.startswith(prefix) for prefix in local_origins)
