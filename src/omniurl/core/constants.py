"""Constants used throughout omniurl.

This module contains scheme tables, regular expressions and default
values shared by the parsers, the classifier and the transforms.
"""

import re
from enum import Enum


class Verdict(Enum):
    """Outcome of classifying a piece of address-bar input."""
    URL = "url"
    QUERY = "query"


# ============================================================================
# Schemes
# ============================================================================

HTTP_SCHEME = "http://"
HTTPS_SCHEME = "https://"
FILE_SCHEME = "file://"
VIEW_SOURCE_PREFIX = "view-source:"

# scheme chars, then ":" with optional "//", never followed by a digit
SCHEME_PATTERN = re.compile(r"^(?:[a-z\u00a1-\uffff0-9\-+]+)(?::(//)?)(?!\d)", re.IGNORECASE)

# Schemes with an authority and a default port
SPECIAL_SCHEMES = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

# Browser schemes whose origin is serialized like a tuple origin
BROWSER_ORIGIN_SCHEMES = {"chrome", "chrome-extension"}


# ============================================================================
# Classifier patterns
# ============================================================================

QUOTED_PATTERN = re.compile(r'^".*"$')
QUERY_PUNCTUATION_PATTERN = re.compile(r"(^\?)|(\?.+\s)|(^\.)|(^[^.+..+]*[^/]*\.$)")
URL_CHARACTERS_PATTERN = re.compile(r"[?./\s:]")
WHITESPACE_PATTERN = re.compile(r"\s")
PARSEABLE_SCHEME_PATTERN = re.compile(
    r"^(data|view-source|mailto|about|chrome-extension|chrome-devtools|magnet|chrome):.*",
    re.DOTALL,
)
SCHEME_DOMAIN_PATTERN = re.compile(r"^[A-Za-z0-9_]{2,5}://[^\s/]+/")


# ============================================================================
# Defaults
# ============================================================================

PDFJS_VIEWER_PATH = "content/web/viewer.html?file="

DEFAULTS = {
    "default_scheme": HTTP_SCHEME,
    "pdfjs_extension_id": "jdbefljfgobbmcidnmpjamcbhnbphjnb",
    "image_extensions": ["jpeg", "jpg", "gif", "png", "bmp"],
    "local_file_origins": ["file:", "blob:", "data:", "chrome-extension:", "chrome:"],
}
