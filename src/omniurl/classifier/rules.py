"""Ordered rules for telling URLs apart from search queries.

Each rule looks at trimmed address-bar input and either passes or returns
a verdict. The classifier walks the rules in order and stops at the first
verdict, so a rule only ever sees input that every earlier rule passed on.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, Optional, Pattern, Union

from omniurl.core.constants import (
    FILE_SCHEME,
    PARSEABLE_SCHEME_PATTERN,
    QUERY_PUNCTUATION_PATTERN,
    QUOTED_PATTERN,
    SCHEME_DOMAIN_PATTERN,
    URL_CHARACTERS_PATTERN,
    WHITESPACE_PATTERN,
    Verdict,
)


@dataclass
class RuleContext:
    """Input under classification plus the collaborators rules may call."""
    text: str
    scheme: Optional[str]
    can_parse: Callable[[str], bool]
    prepend: Callable[[str], str]
    normalized: Optional[str] = None


@dataclass
class ClassificationRule:
    """Rule deciding whether input is a URL or a query.

    A rule fires when any of its patterns matches the input or its
    condition holds. A firing rule returns ``verdict``, or the result of
    ``resolver`` when one is set.
    """
    name: str
    verdict: Optional[Verdict] = None
    patterns: list[Union[str, Pattern[str]]] = field(default_factory=list)
    condition: Optional[Callable[[RuleContext], bool]] = None
    resolver: Optional[Callable[[RuleContext], Verdict]] = None
    description: str = ""

    def __post_init__(self) -> None:
        """Compile regex patterns after initialization."""
        self.compiled_patterns = [re.compile(pattern) for pattern in self.patterns]
        if self.verdict is None and self.resolver is None:
            raise ValueError(f"Rule '{self.name}' needs a verdict or a resolver")

    def matches(self, context: RuleContext) -> bool:
        """Check if the rule fires for this input."""
        for pattern in self.compiled_patterns:
            if pattern.search(context.text):
                return True
        if self.condition is not None:
            return self.condition(context)
        return False

    def evaluate(self, context: RuleContext) -> Optional[Verdict]:
        """Return the rule's verdict, or None if the rule does not fire."""
        if not self.matches(context):
            return None
        if self.resolver is not None:
            return self.resolver(context)
        return self.verdict


def _verdict(is_url: bool) -> Verdict:
    return Verdict.URL if is_url else Verdict.QUERY


def _resolve_by_parse(context: RuleContext) -> Verdict:
    return _verdict(context.can_parse(context.text))


def _resolve_by_domain_shape(context: RuleContext) -> Verdict:
    return _verdict(bool(SCHEME_DOMAIN_PATTERN.match(context.text + "/")))


def _resolve_by_prepended_parse(context: RuleContext) -> Verdict:
    context.normalized = context.prepend(context.text)
    return _verdict(context.can_parse(context.normalized))


FALLBACK_RULE_NAME = "prepended_parse"


def create_default_rules() -> list[ClassificationRule]:
    """Create the default rule list, in evaluation order.

    Returns:
        List of classification rules; the last one always fires
    """
    rules = []

    rules.append(ClassificationRule(
        name="localhost",
        verdict=Verdict.URL,
        condition=lambda ctx: ctx.text.lower() == "localhost",
        description="Bare localhost is a host, not a search term",
    ))

    rules.append(ClassificationRule(
        name="quoted",
        verdict=Verdict.QUERY,
        patterns=[QUOTED_PATTERN],
        description="Double-quoted input is a literal search phrase",
    ))

    rules.append(ClassificationRule(
        name="query_punctuation",
        verdict=Verdict.QUERY,
        patterns=[QUERY_PUNCTUATION_PATTERN],
        description="Leading ?, '? ', leading dot, or a trailing dot without a domain",
    ))

    rules.append(ClassificationRule(
        name="no_url_characters",
        verdict=Verdict.QUERY,
        condition=lambda ctx: not URL_CHARACTERS_PATTERN.search(ctx.text),
        description="No ? . / : or whitespace anywhere",
    ))

    rules.append(ClassificationRule(
        name="whitespace_without_scheme",
        verdict=Verdict.QUERY,
        condition=lambda ctx: ctx.scheme is None and bool(WHITESPACE_PATTERN.search(ctx.text)),
        description="Scheme-less input with whitespace reads as words",
    ))

    rules.append(ClassificationRule(
        name="parseable_scheme",
        patterns=[PARSEABLE_SCHEME_PATTERN],
        resolver=_resolve_by_parse,
        description="data:, view-source:, mailto:, about:, chrome and magnet URLs must parse",
    ))

    rules.append(ClassificationRule(
        name="scheme_domain",
        condition=lambda ctx: bool(ctx.scheme) and ctx.scheme != FILE_SCHEME,
        resolver=_resolve_by_domain_shape,
        description="Scheme-qualified input needs a host without whitespace",
    ))

    rules.append(ClassificationRule(
        name=FALLBACK_RULE_NAME,
        condition=lambda ctx: True,
        resolver=_resolve_by_prepended_parse,
        description="Everything else is a URL if it parses once a scheme is added",
    ))

    return rules
