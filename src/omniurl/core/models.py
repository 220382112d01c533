"""Core data models for omniurl.

This module defines the data structures shared across the package: the
strict and loose URL parse results, classifier results and the runtime
configuration.
"""

from dataclasses import dataclass, field
from typing import Optional

from omniurl.core.constants import (
    BROWSER_ORIGIN_SCHEMES,
    DEFAULTS,
    SPECIAL_SCHEMES,
    Verdict,
)


# ============================================================================
# Strict Parse Result
# ============================================================================

@dataclass(frozen=True)
class ParsedURL:
    """Canonical URL record produced by the strict parser.

    Field names follow the browser ``URL`` interface so ``protocol`` keeps
    its trailing colon and ``search``/``hash`` keep their leading marker.
    ``hostname`` is ``None`` for URLs without an authority (``mailto:x``)
    and ``""`` for an empty host (``file:///etc``).
    """
    protocol: str
    hostname: Optional[str] = None
    port: str = ""
    pathname: str = ""
    username: str = ""
    password: str = ""
    search: str = ""
    hash: str = ""
    inner_origin: Optional[str] = field(default=None, repr=False, compare=False)

    @property
    def scheme(self) -> str:
        """Scheme without the trailing colon."""
        return self.protocol[:-1]

    @property
    def host(self) -> str:
        """Hostname plus non-default port."""
        if not self.hostname:
            return ""
        if self.port:
            return f"{self.hostname}:{self.port}"
        return self.hostname

    @property
    def query(self) -> str:
        """Query string without the leading ``?``."""
        return self.search[1:]

    @property
    def is_special(self) -> bool:
        return self.scheme in SPECIAL_SCHEMES

    @property
    def origin(self) -> str:
        """Serialized origin of the URL."""
        if self.is_special or self.scheme in BROWSER_ORIGIN_SCHEMES:
            return f"{self.protocol}//{self.host}"
        if self.scheme == "file":
            return "file://"
        if self.scheme == "blob" and self.inner_origin:
            return self.inner_origin
        return "null"

    @property
    def href(self) -> str:
        """Serialized URL."""
        out = self.protocol
        if self.hostname is not None:
            out += "//"
            if self.username or self.password:
                out += self.username
                if self.password:
                    out += ":" + self.password
                out += "@"
            out += self.host
        elif self.pathname.startswith("//"):
            # keep a path like "//x" from reading back as an authority
            out += "/."
        out += self.pathname + self.search + self.hash
        return out

    def __str__(self) -> str:
        return self.href


# ============================================================================
# Loose Parse Result
# ============================================================================

@dataclass
class LooseURL:
    """Permissive URL components.

    Mutable so callers can change a component (for example ``hostname``)
    and reserialize with ``format_url``.
    """
    protocol: Optional[str] = None
    slashes: bool = False
    auth: Optional[str] = None
    hostname: Optional[str] = None
    port: Optional[str] = None
    pathname: Optional[str] = None
    search: Optional[str] = None
    hash: Optional[str] = None

    @property
    def host(self) -> Optional[str]:
        if self.hostname is None:
            return None
        if self.port:
            return f"{self.hostname}:{self.port}"
        return self.hostname

    @property
    def query(self) -> Optional[str]:
        if self.search is None:
            return None
        return self.search[1:]

    @property
    def path(self) -> Optional[str]:
        if self.pathname is None and self.search is None:
            return None
        return (self.pathname or "") + (self.search or "")


# ============================================================================
# Classification
# ============================================================================

@dataclass
class ClassificationResult:
    """Result of classifying one piece of input."""
    input: object
    verdict: Verdict
    rule: str                               # Name of the rule that decided
    normalized: Optional[str] = None        # Scheme-prepended form, when computed

    @property
    def is_url(self) -> bool:
        """Check if the input was classified as a URL."""
        return self.verdict is Verdict.URL

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary."""
        return {
            "input": self.input,
            "verdict": self.verdict.value,
            "rule": self.rule,
            "normalized": self.normalized,
        }


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class UrlUtilConfig:
    """Runtime settings for the classifier and the transforms."""
    default_scheme: str = DEFAULTS["default_scheme"]
    pdfjs_extension_id: str = DEFAULTS["pdfjs_extension_id"]
    image_extensions: tuple[str, ...] = field(
        default_factory=lambda: tuple(DEFAULTS["image_extensions"])
    )
    local_file_origins: tuple[str, ...] = field(
        default_factory=lambda: tuple(DEFAULTS["local_file_origins"])
    )

    @property
    def pdfjs_base_url(self) -> str:
        """Base URL of the bundled PDF viewer extension."""
        return f"chrome-extension://{self.pdfjs_extension_id}/"
