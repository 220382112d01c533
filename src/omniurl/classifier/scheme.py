"""Scheme extraction and prepending.

This module reads the scheme token at the head of a string and turns
path-like or scheme-less input into scheme-qualified input:
- ``~/`` paths are expanded against the home directory
- Absolute filesystem paths get ``file://``
- Anything else without a scheme gets the default scheme
"""

from pathlib import Path
from typing import Callable, Optional

from omniurl.core.constants import FILE_SCHEME, HTTP_SCHEME, SCHEME_PATTERN


def get_scheme(text: str) -> Optional[str]:
    """Extract the scheme token from the head of a string.

    Args:
        text: Input value

    Returns:
        ``scheme:`` or ``scheme://`` as written in the input, or None.
        ``localhost://`` is never reported as a scheme.
    """
    if not isinstance(text, str):
        return None
    match = SCHEME_PATTERN.match(text)
    if not match:
        return None
    scheme = match.group(0)
    return None if scheme == "localhost://" else scheme


def has_scheme(text: str) -> bool:
    """Check if a string starts with a scheme (e.g. ``http://`` or ``mailto:``)."""
    return bool(get_scheme(text))


def default_home_dir() -> str:
    return str(Path.home())


class SchemePrepender:
    """Prepend a scheme to input that does not carry one.

    Steps, in order:
    1. Expand a leading ``~`` of ``~/`` paths to the home directory
    2. Prefix absolute paths with ``file://``
    3. Prefix anything still without a scheme with the default scheme
    """

    def __init__(
        self,
        *,
        default_scheme: str = HTTP_SCHEME,
        home_dir: Optional[Callable[[], str]] = None,
    ):
        """Initialize SchemePrepender.

        Args:
            default_scheme: Scheme used for scheme-less input
            home_dir: Callable returning the home directory path
        """
        self.default_scheme = default_scheme
        self.home_dir = home_dir or default_home_dir

    def prepend(self, text: Optional[str]) -> Optional[str]:
        """Return ``text`` with a scheme, or None for None."""
        if text is None:
            return None

        if text.startswith("~/"):
            text = self.home_dir() + text[1:]

        if text.startswith("/"):
            text = FILE_SCHEME + text

        if not has_scheme(text):
            text = self.default_scheme + text

        return text
