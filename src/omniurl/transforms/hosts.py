"""Host, origin and display helpers."""

import logging
from typing import Optional

from omniurl.classifier.classifier import InputClassifier
from omniurl.classifier.scheme import has_scheme
from omniurl.core.constants import DEFAULTS
from omniurl.core.exceptions import URLParseError
from omniurl.parsing.loose import format_url, loose_parse
from omniurl.parsing.strict import StrictURLParser, URLParser, domain_to_ascii

logger = logging.getLogger(__name__)


def get_hostname(url: str, exclude_port: bool = False, *, parser: Optional[URLParser] = None) -> Optional[str]:
    """Extract the host of a URL.

    Args:
        url: URL to read
        exclude_port: Return the bare hostname instead of host:port
        parser: Strict URL parser

    Returns:
        Host string, or None if the URL does not parse
    """
    parser = parser or StrictURLParser()
    try:
        parsed = parser.parse(url)
    except URLParseError:
        return None
    if exclude_port:
        return parsed.hostname or ""
    return parsed.host


def get_hostname_patterns(url: str, *, default_scheme: str = DEFAULTS["default_scheme"]) -> list[str]:
    """Get the host patterns a rule set may use to target a URL.

    For ``x.y.google.com`` that is the host itself, the host with each
    label replaced by ``*`` in turn, then ``*.google.com`` and ``*.com``.

    Args:
        url: URL or bare hostname
        default_scheme: Scheme assumed for scheme-less input

    Returns:
        List of patterns, empty when no host can be found
    """
    if isinstance(url, str) and not has_scheme(url):
        url = default_scheme + url
    host = loose_parse(url).hostname
    if not host:
        return []

    patterns = [host]
    labels = host.split(".")

    # a target may hold a single wildcard, so try each label in turn
    for index in range(len(labels)):
        wildcarded = labels.copy()
        wildcarded[index] = "*"
        patterns.append(".".join(wildcarded))

    # then eat labels away from the left
    for index in range(2, len(labels)):
        patterns.append("*." + ".".join(labels[index:]))

    return patterns


def get_default_favicon_url(url: str, *, classifier: Optional[InputClassifier] = None) -> str:
    """Build ``<protocol>//<host>/favicon.ico`` for a URL, or "" if it is not one."""
    classifier = classifier or InputClassifier()
    if not classifier.is_url(url):
        return ""
    parsed = loose_parse(classifier.prepend_scheme(url.strip()))
    return f"{parsed.protocol}//{parsed.host or ''}/favicon.ico"


def get_punycode_url(url: str) -> str:
    """Rewrite the hostname of a URL in its ASCII (punycode) form.

    Returns:
        The rewritten URL, or the input unchanged on any failure
    """
    parsed = loose_parse(url)
    if not parsed.hostname:
        return url
    try:
        parsed.hostname = domain_to_ascii(parsed.hostname)
    except URLParseError as e:
        logger.debug(f"Keeping {url!r} as is: {e}")
        return url
    return format_url(parsed)


def get_host_pattern(url: str) -> str:
    return f"https?://{url}"


def get_url_origin(url: str, *, parser: Optional[URLParser] = None) -> Optional[str]:
    """Return the serialized origin of a URL, or None if it does not parse."""
    parser = parser or StrictURLParser()
    try:
        return parser.parse(url).origin
    except URLParseError:
        return None


def get_display_host(url: str) -> str:
    """Return the host of an http(s) URL, or the input for anything else."""
    parsed = loose_parse(url)
    if parsed.protocol in ("http:", "https:"):
        return parsed.host or ""
    return url
