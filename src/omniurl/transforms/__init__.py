"""Auxiliary URL predicates and rewrites.

- predicates: scheme, image, data-URL and local-origin checks
- view_source: view-source: wrapping and unwrapping
- pdf: PDF viewer extension redirection
- hosts: hostname patterns, punycode, favicon, origin and display host
"""

from omniurl.transforms.predicates import (
    is_data_url,
    is_file_scheme,
    is_file_type,
    is_http_or_https,
    is_image_address,
    is_image_data_url,
    is_local_file,
    is_potential_phishing_url,
    is_view_source_url,
)
from omniurl.transforms.view_source import get_url_from_view_source_url, get_view_source_url_from_url
from omniurl.transforms.pdf import get_location_if_pdf, to_pdfjs_location
from omniurl.transforms.hosts import (
    get_default_favicon_url,
    get_display_host,
    get_host_pattern,
    get_hostname,
    get_hostname_patterns,
    get_punycode_url,
    get_url_origin,
)

__all__ = [
    "is_data_url",
    "is_file_scheme",
    "is_file_type",
    "is_http_or_https",
    "is_image_address",
    "is_image_data_url",
    "is_local_file",
    "is_potential_phishing_url",
    "is_view_source_url",
    "get_url_from_view_source_url",
    "get_view_source_url_from_url",
    "get_location_if_pdf",
    "to_pdfjs_location",
    "get_default_favicon_url",
    "get_display_host",
    "get_host_pattern",
    "get_hostname",
    "get_hostname_patterns",
    "get_punycode_url",
    "get_url_origin",
]
