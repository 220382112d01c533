"""Unit tests for the address-bar input classifier.

Tests for InputClassifier including URL-vs-query decisions, the rule that
decides each case, custom rules, and normalization with get_url_from_input.
"""

import sys
import unittest
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_path))

from omniurl.classifier.classifier import InputClassifier
from omniurl.classifier.rules import ClassificationRule
from omniurl.core.constants import Verdict
from omniurl.core.exceptions import URLParseError
from omniurl.core.models import ClassificationResult, ParsedURL


class TestIsURL(unittest.TestCase):
    """Test suite for is_url / is_not_url."""

    def setUp(self):
        """Set up test fixtures."""
        self.classifier = InputClassifier(home_dir=lambda: "/home/tester")

    def test_localhost_is_url(self):
        """Test that bare localhost is a URL, in any case."""
        self.assertTrue(self.classifier.is_url("localhost"))
        self.assertTrue(self.classifier.is_url("  LocalHost  "))

    def test_quoted_text_is_query(self):
        """Test that double-quoted input is a search phrase."""
        self.assertFalse(self.classifier.is_url('"search term"'))
        self.assertFalse(self.classifier.is_url('"example.com"'))

    def test_plain_word_is_query(self):
        """Test that input without URL characters is a query."""
        self.assertTrue(self.classifier.is_not_url("example"))

    def test_domain_is_url(self):
        """Test that a dotted domain is a URL."""
        self.assertFalse(self.classifier.is_not_url("example.com"))
        self.assertTrue(self.classifier.is_url("www.example.co.uk/path"))

    def test_query_punctuation_is_query(self):
        """Test leading ?, leading dot and trailing dot."""
        self.assertTrue(self.classifier.is_not_url("?what is this"))
        self.assertTrue(self.classifier.is_not_url(".hidden"))
        self.assertTrue(self.classifier.is_not_url("example."))

    def test_words_with_spaces_are_query(self):
        """Test that scheme-less input with whitespace is a query."""
        self.assertTrue(self.classifier.is_not_url("how to cook rice"))
        self.assertTrue(self.classifier.is_not_url("foo bar.com"))

    def test_scheme_with_whitespace_in_host_is_query(self):
        """Test that a scheme does not rescue a host with spaces."""
        self.assertTrue(self.classifier.is_not_url("http://foo bar.com"))

    def test_scheme_urls(self):
        """Test scheme-qualified URLs."""
        self.assertTrue(self.classifier.is_url("http://example.com"))
        self.assertTrue(self.classifier.is_url("https://example.com/a?b=c"))
        self.assertTrue(self.classifier.is_url("ftp://files.example.org/pub"))

    def test_long_custom_scheme_is_query(self):
        """Test that schemes longer than five characters fail the domain shape."""
        self.assertTrue(self.classifier.is_url("irc://irc.example.net"))
        self.assertTrue(self.classifier.is_not_url("custom://host"))

    def test_parseable_schemes(self):
        """Test data:, about:, mailto:, view-source: and chrome URLs."""
        self.assertTrue(self.classifier.is_url("data:text/html,hello"))
        self.assertTrue(self.classifier.is_url("about:blank"))
        self.assertTrue(self.classifier.is_url("mailto:user@example.com"))
        self.assertTrue(self.classifier.is_url("view-source:https://example.com"))
        self.assertTrue(self.classifier.is_url("chrome://settings"))
        self.assertTrue(self.classifier.is_url("magnet:?xt=urn:btih:abc123"))

    def test_file_urls_and_paths(self):
        """Test file URLs, absolute paths and home paths."""
        self.assertTrue(self.classifier.is_url("file:///etc/hosts"))
        self.assertTrue(self.classifier.is_url("/etc/hosts"))
        self.assertTrue(self.classifier.is_url("~/notes.txt"))

    def test_hosts_with_ports_and_ips(self):
        """Test host:port and IP address input."""
        self.assertTrue(self.classifier.is_url("localhost:3000"))
        self.assertTrue(self.classifier.is_url("192.168.1.1"))
        self.assertTrue(self.classifier.is_url("[::1]:8080"))

    def test_time_like_input_is_query(self):
        """Test that 3:30pm does not parse as host and port."""
        self.assertTrue(self.classifier.is_not_url("3:30pm"))

    def test_non_string_is_not_url(self):
        """Test that None and non-strings are never URLs."""
        self.assertTrue(self.classifier.is_not_url(None))
        self.assertTrue(self.classifier.is_not_url(42))
        self.assertFalse(self.classifier.is_url(None))

    def test_is_url_is_negation_of_is_not_url(self):
        """Test that is_url always mirrors is_not_url on trimmed input."""
        inputs = [
            "localhost", '"quoted"', "example", "example.com", "  example.com  ",
            "?q", "a b", "http://a b", "data:,x", "file:///x", "/tmp", "3:30pm",
        ]
        for text in inputs:
            self.assertEqual(
                self.classifier.is_url(text),
                not self.classifier.is_not_url(text.strip()),
                text,
            )


class TestExplain(unittest.TestCase):
    """Test suite for explain, the rule-reporting classification."""

    def setUp(self):
        """Set up test fixtures."""
        self.classifier = InputClassifier(home_dir=lambda: "/home/tester")

    def test_reports_deciding_rule(self):
        """Test that each case is decided by the expected rule."""
        cases = {
            "localhost": ("localhost", Verdict.URL),
            '"hello"': ("quoted", Verdict.QUERY),
            ".hidden": ("query_punctuation", Verdict.QUERY),
            "example": ("no_url_characters", Verdict.QUERY),
            "foo bar.com": ("whitespace_without_scheme", Verdict.QUERY),
            "about:blank": ("parseable_scheme", Verdict.URL),
            "http://foo bar.com": ("scheme_domain", Verdict.QUERY),
            "example.com": ("prepended_parse", Verdict.URL),
        }
        for text, (rule, verdict) in cases.items():
            result = self.classifier.explain(text)
            self.assertIsInstance(result, ClassificationResult)
            self.assertEqual(result.rule, rule, text)
            self.assertEqual(result.verdict, verdict, text)

    def test_fallback_records_normalized_input(self):
        """Test that the parse fallback keeps the prepended form."""
        result = self.classifier.explain("/etc/hosts")
        self.assertEqual(result.normalized, "file:///etc/hosts")
        self.assertTrue(result.is_url)

    def test_non_string_rule(self):
        """Test the rule name reported for non-string input."""
        result = self.classifier.explain(None)
        self.assertEqual(result.rule, "not_a_string")
        self.assertFalse(result.is_url)

    def test_to_dict(self):
        """Test dictionary conversion."""
        data = self.classifier.explain("example.com").to_dict()
        self.assertEqual(data["verdict"], "url")
        self.assertEqual(data["rule"], "prepended_parse")
        self.assertEqual(data["normalized"], "http://example.com")

    def test_classify_batch(self):
        """Test that a batch keeps input order."""
        results = self.classifier.classify_batch(["example.com", "hello world"])
        self.assertEqual([r.is_url for r in results], [True, False])


class TestCustomRules(unittest.TestCase):
    """Test suite for custom classification rules."""

    def test_custom_rule_runs_before_fallback(self):
        """Test that a custom rule can claim input before the parse fallback."""
        rule = ClassificationRule(
            name="internal_hosts",
            verdict=Verdict.QUERY,
            patterns=[r"\.internal$"],
        )
        classifier = InputClassifier(custom_rules=[rule])

        self.assertEqual(classifier.rules[-1].name, "prepended_parse")
        self.assertEqual(classifier.rules[-2].name, "internal_hosts")
        self.assertTrue(classifier.is_not_url("wiki.internal"))
        self.assertTrue(classifier.is_url("wiki.example.com"))

    def test_add_rule(self):
        """Test adding a rule after construction."""
        classifier = InputClassifier()
        classifier.add_rule(ClassificationRule(
            name="always_url",
            verdict=Verdict.URL,
            condition=lambda ctx: ctx.text.startswith("go/"),
        ))
        self.assertTrue(classifier.is_url("go/links"))

    def test_rule_requires_verdict_or_resolver(self):
        """Test that a rule without an outcome is rejected."""
        with self.assertRaises(ValueError):
            ClassificationRule(name="broken", patterns=["x"])


class _RejectingParser:
    """Parser that accepts nothing."""

    def parse(self, text):
        raise URLParseError(f"rejected {text!r}")


class _RecordingParser:
    """Parser that accepts everything and records calls."""

    def __init__(self):
        self.calls = []

    def parse(self, text):
        self.calls.append(text)
        return ParsedURL(protocol="http:", hostname="parsed.example", pathname="/")


class TestInjectedParser(unittest.TestCase):
    """Test suite for classification with an injected parser."""

    def test_rejecting_parser(self):
        """Test that parse-based rules follow the injected parser."""
        classifier = InputClassifier(parser=_RejectingParser())
        self.assertTrue(classifier.is_not_url("example.com"))
        self.assertTrue(classifier.is_not_url("about:blank"))
        # decided before any parsing
        self.assertTrue(classifier.is_url("localhost"))
        self.assertTrue(classifier.is_url("https://example.com"))

    def test_recording_parser(self):
        """Test that the fallback parses the prepended input."""
        parser = _RecordingParser()
        classifier = InputClassifier(parser=parser)
        self.assertEqual(classifier.get_url_from_input("example.com"), "http://parsed.example/")
        self.assertIn("http://example.com", parser.calls)


class TestGetUrlFromInput(unittest.TestCase):
    """Test suite for get_url_from_input."""

    def setUp(self):
        """Set up test fixtures."""
        self.classifier = InputClassifier(home_dir=lambda: "/home/tester")

    def test_none_is_empty_string(self):
        """Test that None becomes an empty string."""
        self.assertEqual(self.classifier.get_url_from_input(None), "")

    def test_trims_and_canonicalizes(self):
        """Test trimming, scheme prepending and lowercasing of the host."""
        self.assertEqual(self.classifier.get_url_from_input("  EXAMPLE.com  "), "http://example.com/")

    def test_canonical_href(self):
        """Test default port removal and dot-segment resolution."""
        self.assertEqual(
            self.classifier.get_url_from_input("HTTP://Example.COM:80/a/../b"),
            "http://example.com/b",
        )

    def test_query_input_is_prepended_only(self):
        """Test that search text comes back prepended but unparsed."""
        self.assertEqual(
            self.classifier.get_url_from_input("how to cook rice"),
            "http://how to cook rice",
        )

    def test_file_paths(self):
        """Test absolute and home-relative paths."""
        self.assertEqual(self.classifier.get_url_from_input("/etc/hosts"), "file:///etc/hosts")
        self.assertEqual(
            self.classifier.get_url_from_input("~/notes.txt"),
            "file:///home/tester/notes.txt",
        )

    def test_idn_host(self):
        """Test that internationalized hosts are punycode-encoded."""
        self.assertEqual(
            self.classifier.get_url_from_input("https://bücher.de/a b"),
            "https://xn--bcher-kva.de/a%20b",
        )

    def test_undecodable_bytes_do_not_raise(self):
        """Test that lone surrogates from undecodable argv bytes are rejected quietly."""
        self.assertFalse(self.classifier.is_url("\udcff.com"))
        self.assertEqual(self.classifier.get_url_from_input("\udcff.com"), "http://\udcff.com")
        self.assertEqual(
            self.classifier.get_url_from_input("http://\udcff.com/"),
            "http://\udcff.com/",
        )

    def test_opaque_urls(self):
        """Test that opaque URLs survive normalization."""
        self.assertEqual(self.classifier.get_url_from_input("about:blank"), "about:blank")
        self.assertEqual(
            self.classifier.get_url_from_input("mailto:user@example.com"),
            "mailto:user@example.com",
        )


if __name__ == "__main__":
    unittest.main()
