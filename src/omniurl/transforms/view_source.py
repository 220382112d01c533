"""Conversion between URLs and view-source: URLs."""

from typing import Iterable, Optional

from omniurl.classifier.classifier import InputClassifier
from omniurl.core.constants import DEFAULTS, VIEW_SOURCE_PREFIX
from omniurl.transforms.predicates import (
    is_file_scheme,
    is_http_or_https,
    is_image_address,
    is_view_source_url,
)


def get_url_from_view_source_url(url: str, *, classifier: Optional[InputClassifier] = None) -> str:
    """Strip ``view-source:`` and normalize what is left.

    Args:
        url: Possibly wrapped URL
        classifier: Classifier used for normalization

    Returns:
        Normalized inner URL, or the input when it is not a view-source URL
    """
    if not is_view_source_url(url):
        return url
    classifier = classifier or InputClassifier()
    return classifier.get_url_from_input(url[len(VIEW_SOURCE_PREFIX):])


def get_view_source_url_from_url(
    url: str,
    *,
    classifier: Optional[InputClassifier] = None,
    image_extensions: Iterable[str] = tuple(DEFAULTS["image_extensions"]),
) -> Optional[str]:
    """Wrap an http(s) or file URL in ``view-source:``.

    Already wrapped input is returned unchanged. Images and other schemes
    have no source view.

    Args:
        url: URL to wrap
        classifier: Classifier used for normalization
        image_extensions: Extensions treated as images

    Returns:
        ``view-source:`` URL, or None when the URL cannot be viewed as source
    """
    if is_view_source_url(url):
        return url
    if not (is_http_or_https(url) or is_file_scheme(url)) or is_image_address(url, image_extensions):
        return None

    classifier = classifier or InputClassifier()
    return VIEW_SOURCE_PREFIX + classifier.get_url_from_input(url)
