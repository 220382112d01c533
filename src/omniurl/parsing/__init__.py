"""Strict and loose URL parsing.

- StrictURLParser: browser-compatible parsing used for validation and canonical href
- URLParser: protocol for injecting a different strict parser
- loose_parse / format_url: permissive component access and reserialization
"""

from omniurl.parsing.strict import StrictURLParser, URLParser, can_parse, domain_to_ascii
from omniurl.parsing.loose import loose_parse, format_url

__all__ = [
    "StrictURLParser",
    "URLParser",
    "can_parse",
    "domain_to_ascii",
    "loose_parse",
    "format_url",
]
