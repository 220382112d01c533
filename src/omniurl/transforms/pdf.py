"""Redirection to and from the bundled PDF viewer extension.

PDF links are opened through the viewer as
``chrome-extension://<id>/<original url>``; the viewer page itself may
also carry the original location in a ``file`` query parameter.
"""

from typing import Optional
from urllib.parse import parse_qs

from omniurl.core.constants import DEFAULTS, PDFJS_VIEWER_PATH
from omniurl.parsing.loose import loose_parse
from omniurl.transforms.predicates import is_file_type, is_http_or_https


def _base_url(extension_id: str) -> str:
    return f"chrome-extension://{extension_id}/"


def get_location_if_pdf(url: Optional[str], *, extension_id: str = DEFAULTS["pdfjs_extension_id"]) -> Optional[str]:
    """Recover the original location from a PDF viewer URL.

    Args:
        url: URL that may point into the PDF viewer extension
        extension_id: PDF viewer extension identifier

    Returns:
        Original document URL, or the input unchanged
    """
    base = _base_url(extension_id)
    if not url or not isinstance(url, str) or base not in url:
        return url

    if PDFJS_VIEWER_PATH in url:
        query = loose_parse(url).query or ""
        files = parse_qs(query).get("file")
        if files:
            return files[0]

    return url.replace(base, "", 1)


def to_pdfjs_location(url: Optional[str], *, extension_id: str = DEFAULTS["pdfjs_extension_id"]) -> Optional[str]:
    """Route an http(s) ``.pdf`` URL through the PDF viewer extension.

    Only the file extension is checked, not the served MIME type.
    """
    if url and is_http_or_https(url) and is_file_type(url, "pdf"):
        return _base_url(extension_id) + url
    return url
