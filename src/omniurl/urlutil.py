"""One-stop access to every omniurl operation.

``UrlUtil`` wires a config, a strict parser and an ``InputClassifier``
together and exposes the classifier, normalizer and transform functions
as methods bound to those collaborators.
"""

from functools import lru_cache
from typing import Callable, Optional

from omniurl.classifier.classifier import InputClassifier
from omniurl.classifier.scheme import get_scheme, has_scheme
from omniurl.core.config import load_config
from omniurl.core.models import ClassificationResult, UrlUtilConfig
from omniurl.parsing.strict import StrictURLParser, URLParser
from omniurl.transforms import hosts, pdf, predicates, view_source


class UrlUtil:
    """Address-bar URL helpers bound to one configuration."""

    def __init__(
        self,
        config: Optional[UrlUtilConfig] = None,
        *,
        parser: Optional[URLParser] = None,
        home_dir: Optional[Callable[[], str]] = None,
    ):
        """Initialize UrlUtil.

        Args:
            config: Settings (built-in defaults if None)
            parser: Strict URL parser (StrictURLParser if None)
            home_dir: Callable returning the home directory for ``~/`` paths
        """
        self.config = config or UrlUtilConfig()
        self.parser = parser or StrictURLParser()
        self.classifier = InputClassifier(
            parser=self.parser,
            default_scheme=self.config.default_scheme,
            home_dir=home_dir,
        )

    # Scheme and classification

    get_scheme = staticmethod(get_scheme)
    has_scheme = staticmethod(has_scheme)

    def prepend_scheme(self, text: Optional[str]) -> Optional[str]:
        return self.classifier.prepend_scheme(text)

    def can_parse_url(self, text: str) -> bool:
        return self.classifier.can_parse_url(text)

    def is_not_url(self, value: object) -> bool:
        return self.classifier.is_not_url(value)

    def is_url(self, value: object) -> bool:
        return self.classifier.is_url(value)

    def explain(self, value: object) -> ClassificationResult:
        return self.classifier.explain(value)

    def get_url_from_input(self, value: Optional[str]) -> str:
        return self.classifier.get_url_from_input(value)

    # Predicates

    def is_image_address(self, url: str) -> bool:
        return predicates.is_image_address(url, self.config.image_extensions)

    def is_local_file(self, origin: str) -> bool:
        return predicates.is_local_file(origin, self.config.local_file_origins)

    is_file_type = staticmethod(predicates.is_file_type)
    is_view_source_url = staticmethod(predicates.is_view_source_url)
    is_data_url = staticmethod(predicates.is_data_url)
    is_image_data_url = staticmethod(predicates.is_image_data_url)
    is_potential_phishing_url = staticmethod(predicates.is_potential_phishing_url)
    is_http_or_https = staticmethod(predicates.is_http_or_https)
    is_file_scheme = staticmethod(predicates.is_file_scheme)

    # Rewrites

    def get_url_from_view_source_url(self, url: str) -> str:
        return view_source.get_url_from_view_source_url(url, classifier=self.classifier)

    def get_view_source_url_from_url(self, url: str) -> Optional[str]:
        return view_source.get_view_source_url_from_url(
            url,
            classifier=self.classifier,
            image_extensions=self.config.image_extensions,
        )

    def get_location_if_pdf(self, url: Optional[str]) -> Optional[str]:
        return pdf.get_location_if_pdf(url, extension_id=self.config.pdfjs_extension_id)

    def to_pdfjs_location(self, url: Optional[str]) -> Optional[str]:
        return pdf.to_pdfjs_location(url, extension_id=self.config.pdfjs_extension_id)

    # Hosts

    def get_hostname(self, url: str, exclude_port: bool = False) -> Optional[str]:
        return hosts.get_hostname(url, exclude_port, parser=self.parser)

    def get_hostname_patterns(self, url: str) -> list[str]:
        return hosts.get_hostname_patterns(url, default_scheme=self.config.default_scheme)

    def get_default_favicon_url(self, url: str) -> str:
        return hosts.get_default_favicon_url(url, classifier=self.classifier)

    def get_url_origin(self, url: str) -> Optional[str]:
        return hosts.get_url_origin(url, parser=self.parser)

    get_punycode_url = staticmethod(hosts.get_punycode_url)
    get_host_pattern = staticmethod(hosts.get_host_pattern)
    get_display_host = staticmethod(hosts.get_display_host)


@lru_cache(maxsize=1)
def default_urlutil() -> UrlUtil:
    """Return a shared UrlUtil built from the default config lookup."""
    return UrlUtil(load_config())
