"""Permissive URL parsing and formatting.

The loose parser never rejects a string: components it cannot find are
left as ``None``. It is used to read single components (pathname,
hostname, protocol, query) out of input that may not be a valid URL, and
``format_url`` writes a possibly modified result back to a string.
"""

import logging
from urllib.parse import urlsplit

from omniurl.core.constants import SPECIAL_SCHEMES
from omniurl.core.models import LooseURL

logger = logging.getLogger(__name__)


def _split_netloc(netloc: str) -> tuple[str | None, str, str | None]:
    """Split ``user:pass@host:port`` into auth, hostname and port."""
    auth, at, hostport = netloc.rpartition("@")
    if hostport.startswith("[") and "]" in hostport:
        end = hostport.index("]")
        hostname, after = hostport[1:end], hostport[end + 1:]
        port = after[1:] if after.startswith(":") else None
    else:
        hostname, colon, port = hostport.rpartition(":")
        if not colon or not port.isdigit():
            hostname, port = hostport, None
    return (auth if at else None), hostname.lower(), (port or None)


def loose_parse(text: str) -> LooseURL:
    """Parse a string into URL components without validating it.

    Args:
        text: Any string

    Returns:
        LooseURL with the components that could be found
    """
    if not isinstance(text, str):
        return LooseURL()

    text = text.strip()
    try:
        parts = urlsplit(text)
    except ValueError as e:
        logger.debug(f"Loose parse fell back to a bare path for {text!r}: {e}")
        return LooseURL(pathname=text)

    rest = text[len(parts.scheme) + 1:] if parts.scheme else text
    slashes = rest.startswith("//")

    auth = hostname = port = None
    if slashes:
        auth, hostname, port = _split_netloc(parts.netloc)

    pathname = parts.path or None
    if pathname is None and slashes and (parts.scheme in SPECIAL_SCHEMES or parts.scheme == "file"):
        pathname = "/"

    # urlsplit drops a bare "?" or "#"; keep them so format_url is lossless
    before_fragment, has_fragment, _ = text.partition("#")
    has_query = "?" in before_fragment

    return LooseURL(
        protocol=f"{parts.scheme}:" if parts.scheme else None,
        slashes=slashes,
        auth=auth,
        hostname=hostname,
        port=port,
        pathname=pathname,
        search=f"?{parts.query}" if has_query else None,
        hash=f"#{parts.fragment}" if has_fragment else None,
    )


def format_url(url: LooseURL) -> str:
    """Serialize a ``LooseURL`` back into a string."""
    out = url.protocol or ""
    host = url.hostname or ""
    if url.slashes or host:
        out += "//"
    if url.auth:
        out += url.auth + "@"
    if ":" in host:
        host = f"[{host}]"
    out += host
    if url.port:
        out += ":" + url.port

    pathname = url.pathname or ""
    if host and pathname and not pathname.startswith("/"):
        pathname = "/" + pathname
    return out + pathname + (url.search or "") + (url.hash or "")
