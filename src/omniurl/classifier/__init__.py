"""Address-bar input classification and normalization.

This package decides whether typed input is a URL or a search query:
- get_scheme / has_scheme: Read the scheme token at the head of input
- SchemePrepender: Add file:// or the default scheme to scheme-less input
- InputClassifier: Rule-ordered URL-vs-query decision and normalization
- ClassificationRule: Define custom classification rules
"""

from omniurl.classifier.scheme import SchemePrepender, get_scheme, has_scheme
from omniurl.classifier.rules import ClassificationRule, RuleContext, create_default_rules
from omniurl.classifier.classifier import InputClassifier

__all__ = [
    "SchemePrepender",
    "get_scheme",
    "has_scheme",
    "ClassificationRule",
    "RuleContext",
    "create_default_rules",
    "InputClassifier",
]
