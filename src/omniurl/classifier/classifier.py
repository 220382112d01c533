"""Address-bar input classification and normalization.

This module decides whether typed input is a navigable URL or text that
should go to a search engine, and turns URL input into a canonical
absolute URL. The decision is made by an ordered list of
``ClassificationRule`` objects (see ``omniurl.classifier.rules``).
"""

import logging
from typing import Callable, Iterable, Optional

from omniurl.classifier.rules import (
    FALLBACK_RULE_NAME,
    ClassificationRule,
    RuleContext,
    create_default_rules,
)
from omniurl.classifier.scheme import SchemePrepender, get_scheme
from omniurl.core.constants import HTTP_SCHEME, Verdict
from omniurl.core.exceptions import URLParseError
from omniurl.core.models import ClassificationResult
from omniurl.parsing.strict import StrictURLParser, URLParser

logger = logging.getLogger(__name__)


class InputClassifier:
    """Classify and normalize address-bar input.

    Classification order (first verdict wins):
    - localhost: URL
    - quoted text, query punctuation, no URL characters, scheme-less
      whitespace: query
    - data:/view-source:/mailto:/about:/chrome URLs: URL if they parse
    - other schemes (not file://): URL if the host holds no whitespace
    - everything else: URL if it parses after prepending a scheme
    """

    def __init__(
        self,
        *,
        parser: Optional[URLParser] = None,
        default_scheme: str = HTTP_SCHEME,
        home_dir: Optional[Callable[[], str]] = None,
        custom_rules: Optional[list[ClassificationRule]] = None,
    ):
        """Initialize InputClassifier.

        Args:
            parser: Strict URL parser (creates StrictURLParser if None)
            default_scheme: Scheme prepended to scheme-less input
            home_dir: Callable returning the home directory for ``~/`` paths
            custom_rules: Extra rules evaluated before the parse fallback
        """
        self.parser = parser or StrictURLParser()
        self.prepender = SchemePrepender(default_scheme=default_scheme, home_dir=home_dir)
        self.rules = create_default_rules()

        for rule in custom_rules or []:
            self.add_rule(rule)

    def add_rule(self, rule: ClassificationRule) -> None:
        """Add a rule just ahead of the parse fallback.

        Args:
            rule: ClassificationRule to add
        """
        fallback = next(
            (i for i, existing in enumerate(self.rules) if existing.name == FALLBACK_RULE_NAME),
            len(self.rules),
        )
        self.rules.insert(fallback, rule)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def prepend_scheme(self, text: Optional[str]) -> Optional[str]:
        """Prepend ``file://`` or the default scheme where input has none."""
        return self.prepender.prepend(text)

    def can_parse_url(self, text: str) -> bool:
        """Check if the strict parser accepts ``text`` as an absolute URL."""
        try:
            self.parser.parse(text)
        except URLParseError as e:
            logger.debug(f"Strict parse rejected {text!r}: {e}")
            return False
        return True

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def explain(self, value: object) -> ClassificationResult:
        """Classify input and report which rule decided.

        Args:
            value: Raw input; anything but a string is not a URL

        Returns:
            ClassificationResult with verdict and deciding rule name
        """
        if not isinstance(value, str):
            return ClassificationResult(input=value, verdict=Verdict.QUERY, rule="not_a_string")

        text = value.strip()
        context = RuleContext(
            text=text,
            scheme=get_scheme(text),
            can_parse=self.can_parse_url,
            prepend=self.prepend_scheme,
        )

        for rule in self.rules:
            verdict = rule.evaluate(context)
            if verdict is not None:
                logger.debug(f"Rule {rule.name} classified {text!r} as {verdict.value}")
                return ClassificationResult(
                    input=value,
                    verdict=verdict,
                    rule=rule.name,
                    normalized=context.normalized,
                )

        # only reachable when the fallback rule was removed
        return ClassificationResult(input=value, verdict=Verdict.QUERY, rule="unmatched")

    def is_not_url(self, value: object) -> bool:
        """Check if input should be treated as a search query."""
        return not self.explain(value).is_url

    def is_url(self, value: object) -> bool:
        """Check if input is a navigable URL."""
        if isinstance(value, str):
            value = value.strip()
        return not self.is_not_url(value)

    def classify_batch(self, values: Iterable[object]) -> list[ClassificationResult]:
        """Classify a batch of inputs.

        Args:
            values: Inputs to classify

        Returns:
            List of ClassificationResult objects, in input order
        """
        return [self.explain(value) for value in values]

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------

    def get_url_from_input(self, value: Optional[str]) -> str:
        """Convert typed input into a URL string.

        Input classified as a query comes back scheme-prepended but
        otherwise untouched, so callers can still route it to search.

        Args:
            value: Raw input

        Returns:
            Canonical href, the scheme-prepended input, or "" for None
        """
        if value is None:
            return ""

        text = self.prepend_scheme(value.strip())
        if self.is_not_url(text):
            return text

        try:
            return self.parser.parse(text).href
        except URLParseError:
            return text
