"""Strict URL parsing.

This module implements the subset of the WHATWG URL parsing algorithm that
address-bar classification relies on. Parsing is always done without a
base URL, so relative input is rejected. It handles:
- Scheme detection and lowercasing
- Special-scheme authorities (host required, default port removal)
- Host validation, IDNA conversion and IPv4/IPv6 canonicalization
- Path dot-segment resolution
- Percent-encoding of path, query and fragment
"""

import ipaddress
import re
from typing import Optional, Protocol
from urllib.parse import unquote_to_bytes

from omniurl.core.constants import SPECIAL_SCHEMES
from omniurl.core.exceptions import InvalidHostError, URLParseError
from omniurl.core.models import ParsedURL


_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
_TAB_OR_NEWLINE_RE = re.compile(r"[\t\n\r]")
_C0_CONTROL_OR_SPACE = "".join(chr(i) for i in range(0x21))

_DECIMAL_RE = re.compile(r"^[0-9]+$")
_OCTAL_RE = re.compile(r"^[0-7]+$")
_HEX_RE = re.compile(r"^[0-9A-Fa-f]+$")
_ENDS_IN_HEX_RE = re.compile(r"^0[xX][0-9A-Fa-f]*$")

# Percent-encode sets, on top of C0 controls and everything above U+007E
_FRAGMENT_SET = frozenset(' "<>`')
_QUERY_SET = frozenset(' "#<>')
_SPECIAL_QUERY_SET = _QUERY_SET | {"'"}
_PATH_SET = _QUERY_SET | frozenset("?`{}")
_USERINFO_SET = _PATH_SET | frozenset("/:;=@[\\]^|")

_FORBIDDEN_HOST = frozenset("\x00\t\n\r #/:<>?@[\\]^|")
_FORBIDDEN_DOMAIN = (
    _FORBIDDEN_HOST | frozenset(chr(i) for i in range(0x20)) | frozenset("%\x7f")
)


class URLParser(Protocol):
    """Anything that turns a string into a ``ParsedURL`` or raises ``URLParseError``."""

    def parse(self, text: str) -> ParsedURL:
        ...


def _percent_encode(text: str, encode_set: frozenset = frozenset()) -> str:
    out = []
    for ch in text:
        code = ord(ch)
        if code < 0x20 or code > 0x7E or ch in encode_set:
            if 0xD800 <= code <= 0xDFFF:
                ch = "�"
            out.append("".join(f"%{b:02X}" for b in ch.encode("utf-8")))
        else:
            out.append(ch)
    return "".join(out)


def _split_once(text: str, sep: str) -> tuple[str, Optional[str]]:
    head, found, tail = text.partition(sep)
    return head, (tail if found else None)


# ============================================================================
# Hosts
# ============================================================================

def _parse_ipv4_number(part: str) -> int:
    if not part:
        raise InvalidHostError("Empty IPv4 part")
    radix = 10
    if part[:2] in ("0x", "0X"):
        part, radix = part[2:], 16
    elif len(part) > 1 and part.startswith("0"):
        part, radix = part[1:], 8
    if not part:
        return 0
    pattern = {10: _DECIMAL_RE, 8: _OCTAL_RE, 16: _HEX_RE}[radix]
    if not pattern.match(part):
        raise InvalidHostError(f"Invalid IPv4 part: {part!r}")
    return int(part, radix)


def _ends_in_number(host: str) -> bool:
    labels = host.split(".")
    if labels[-1] == "":
        if len(labels) == 1:
            return False
        labels.pop()
    last = labels[-1]
    return bool(_DECIMAL_RE.match(last) or _ENDS_IN_HEX_RE.match(last))


def _parse_ipv4(host: str) -> str:
    parts = host.split(".")
    if parts[-1] == "" and len(parts) > 1:
        parts.pop()
    if len(parts) > 4:
        raise InvalidHostError(f"Too many IPv4 parts: {host!r}")

    numbers = [_parse_ipv4_number(part) for part in parts]
    if any(n > 255 for n in numbers[:-1]):
        raise InvalidHostError(f"IPv4 part out of range: {host!r}")
    if numbers[-1] >= 256 ** (5 - len(numbers)):
        raise InvalidHostError(f"IPv4 address out of range: {host!r}")

    address = numbers[-1]
    for index, number in enumerate(numbers[:-1]):
        address += number * 256 ** (3 - index)
    return str(ipaddress.IPv4Address(address))


def domain_to_ascii(domain: str) -> str:
    """Convert a Unicode domain to its lowercase ASCII (punycode) form.

    Raises:
        InvalidHostError: If the IDNA conversion fails
    """
    if domain.isascii():
        return domain.lower()
    try:
        return domain.encode("idna").decode("ascii").lower()
    except UnicodeError as e:
        raise InvalidHostError(f"IDNA conversion failed for {domain!r}: {e}") from e


def parse_host(text: str, *, special: bool = True) -> str:
    """Validate and canonicalize a host.

    Args:
        text: Raw host text (may be percent-encoded)
        special: Whether the host belongs to a special scheme

    Returns:
        Canonical host string

    Raises:
        InvalidHostError: If the host is not valid
    """
    if text.startswith("["):
        if not text.endswith("]"):
            raise InvalidHostError(f"Unterminated IPv6 address: {text!r}")
        try:
            address = ipaddress.IPv6Address(text[1:-1])
        except ValueError as e:
            raise InvalidHostError(f"Invalid IPv6 address: {text!r}") from e
        return f"[{address.compressed}]"

    if not special:
        if any(ch in _FORBIDDEN_HOST for ch in text):
            raise InvalidHostError(f"Forbidden code point in host: {text!r}")
        return _percent_encode(text)

    # lone surrogates (undecodable argv bytes) end up as U+FFFD, which IDNA rejects
    raw = text.encode("utf-8", errors="surrogatepass")
    domain = unquote_to_bytes(raw).decode("utf-8", errors="replace")
    ascii_domain = domain_to_ascii(domain)
    if not ascii_domain:
        raise InvalidHostError("Empty host")
    if any(ch in _FORBIDDEN_DOMAIN for ch in ascii_domain):
        raise InvalidHostError(f"Forbidden code point in domain: {ascii_domain!r}")
    if _ends_in_number(ascii_domain):
        return _parse_ipv4(ascii_domain)
    return ascii_domain


# ============================================================================
# Paths
# ============================================================================

def _normalize_path(path: str) -> str:
    """Resolve dot segments and percent-encode an absolute path."""
    segments = path.split("/")[1:]
    output: list[str] = []
    for index, segment in enumerate(segments):
        is_last = index == len(segments) - 1
        lowered = segment.lower()
        if lowered in ("..", ".%2e", "%2e.", "%2e%2e"):
            if output:
                output.pop()
            if is_last:
                output.append("")
        elif lowered in (".", "%2e"):
            if is_last:
                output.append("")
        else:
            output.append(_percent_encode(segment, _PATH_SET))
    return "/" + "/".join(output)


class StrictURLParser:
    """Parse absolute URLs the way a browser's ``URL`` constructor does."""

    def parse(self, text: str) -> ParsedURL:
        """Parse a string into a ``ParsedURL``.

        Args:
            text: Absolute URL string

        Returns:
            ParsedURL with canonical components

        Raises:
            URLParseError: If the string is not a valid absolute URL
        """
        if not isinstance(text, str):
            raise URLParseError(f"Expected a string, got {type(text).__name__}")

        text = _TAB_OR_NEWLINE_RE.sub("", text.strip(_C0_CONTROL_OR_SPACE))
        match = _SCHEME_RE.match(text)
        if not match:
            raise URLParseError(f"Missing scheme: {text!r}")

        scheme = match.group(1).lower()
        rest, fragment = _split_once(text[match.end():], "#")
        rest, query = _split_once(rest, "?")

        if scheme in SPECIAL_SCHEMES:
            parsed = self._parse_special(scheme, rest)
        elif scheme == "file":
            parsed = self._parse_file(rest)
        else:
            parsed = self._parse_non_special(scheme, rest)

        query_set = _SPECIAL_QUERY_SET if scheme in SPECIAL_SCHEMES else _QUERY_SET
        search = "" if query is None else "?" + _percent_encode(query, query_set)
        hash_ = "" if fragment is None else "#" + _percent_encode(fragment, _FRAGMENT_SET)

        inner_origin = None
        if scheme == "blob":
            inner_origin = self._blob_origin(parsed["pathname"])

        return ParsedURL(
            protocol=scheme + ":",
            search=search,
            hash=hash_,
            inner_origin=inner_origin,
            **parsed,
        )

    def _parse_authority(self, authority: str) -> tuple[str, str, str, str]:
        userinfo, at, hostport = authority.rpartition("@")
        if at and not hostport:
            raise URLParseError("Credentials without a host")
        username, _, password = userinfo.partition(":")

        if hostport.startswith("["):
            end = hostport.find("]")
            if end == -1:
                raise InvalidHostError(f"Unterminated IPv6 address: {hostport!r}")
            host, after = hostport[:end + 1], hostport[end + 1:]
            if after and not after.startswith(":"):
                raise InvalidHostError(f"Unexpected text after IPv6 address: {hostport!r}")
            port = after[1:]
        else:
            host, _, port = hostport.partition(":")

        if port and not _DECIMAL_RE.match(port):
            raise URLParseError(f"Invalid port: {port!r}")
        if port and int(port) > 65535:
            raise URLParseError(f"Port out of range: {port}")

        return (
            _percent_encode(username, _USERINFO_SET),
            _percent_encode(password, _USERINFO_SET),
            host,
            str(int(port)) if port else "",
        )

    def _parse_special(self, scheme: str, rest: str) -> dict:
        rest = rest.replace("\\", "/").lstrip("/")
        authority, slash, path = rest.partition("/")
        username, password, host, port = self._parse_authority(authority)
        if not host:
            raise InvalidHostError(f"Missing host for {scheme}: URL")
        if port and int(port) == SPECIAL_SCHEMES[scheme]:
            port = ""
        return {
            "hostname": parse_host(host, special=True),
            "port": port,
            "username": username,
            "password": password,
            "pathname": _normalize_path(slash + path) if slash else "/",
        }

    def _parse_file(self, rest: str) -> dict:
        rest = rest.replace("\\", "/")
        hostname = ""
        if rest.startswith("//"):
            host, slash, path = rest[2:].partition("/")
            path = slash + path
            if host:
                hostname = parse_host(host, special=True)
                if hostname == "localhost":
                    hostname = ""
        else:
            path = rest if rest.startswith("/") else "/" + rest
        return {
            "hostname": hostname,
            "pathname": _normalize_path(path) if path else "/",
        }

    def _parse_non_special(self, scheme: str, rest: str) -> dict:
        if rest.startswith("//"):
            authority, slash, path = rest[2:].partition("/")
            username, password, host, port = self._parse_authority(authority)
            if not host and (username or password or port):
                raise InvalidHostError(f"Missing host for {scheme}: URL")
            return {
                "hostname": parse_host(host, special=False) if host else "",
                "port": port,
                "username": username,
                "password": password,
                "pathname": _normalize_path(slash + path) if slash else "",
            }
        if rest.startswith("/"):
            return {"pathname": _normalize_path(rest)}
        # opaque path: mailto:, data:, about:, view-source:, ...
        return {"pathname": _percent_encode(rest)}

    def _blob_origin(self, pathname: str) -> Optional[str]:
        try:
            inner = self.parse(pathname)
        except URLParseError:
            return None
        if inner.scheme in ("http", "https"):
            return inner.origin
        return None


def can_parse(text: str, parser: Optional[URLParser] = None) -> bool:
    """Check whether ``parser`` accepts ``text``."""
    parser = parser or StrictURLParser()
    try:
        parser.parse(text)
    except URLParseError:
        return False
    return True
