"""Unit tests for the loose URL parser and formatter."""

import unittest

from omniurl.core.models import LooseURL
from omniurl.parsing.loose import format_url, loose_parse


class TestLooseParse(unittest.TestCase):
    """Test suite for loose_parse."""

    def test_full_url(self):
        """Test that every component is split out."""
        url = loose_parse("http://User@Example.com:8080/a/b?x=1#h")
        self.assertEqual(url.protocol, "http:")
        self.assertTrue(url.slashes)
        self.assertEqual(url.auth, "User")
        self.assertEqual(url.hostname, "example.com")
        self.assertEqual(url.port, "8080")
        self.assertEqual(url.host, "example.com:8080")
        self.assertEqual(url.pathname, "/a/b")
        self.assertEqual(url.search, "?x=1")
        self.assertEqual(url.query, "x=1")
        self.assertEqual(url.hash, "#h")
        self.assertEqual(url.path, "/a/b?x=1")

    def test_scheme_less_input_has_no_host(self):
        """Test that a bare domain is read as a path."""
        url = loose_parse("a.b.c.d")
        self.assertIsNone(url.protocol)
        self.assertIsNone(url.hostname)
        self.assertEqual(url.pathname, "a.b.c.d")

    def test_protocol_relative(self):
        """Test input starting with //."""
        url = loose_parse("//example.com/x")
        self.assertIsNone(url.protocol)
        self.assertEqual(url.hostname, "example.com")
        self.assertEqual(url.pathname, "/x")

    def test_empty_special_path(self):
        """Test that http URLs without a path get /."""
        self.assertEqual(loose_parse("http://example.com").pathname, "/")

    def test_opaque(self):
        """Test scheme: URLs without slashes."""
        url = loose_parse("mailto:a@b.c")
        self.assertEqual(url.protocol, "mailto:")
        self.assertFalse(url.slashes)
        self.assertIsNone(url.hostname)
        self.assertEqual(url.pathname, "a@b.c")

    def test_ipv6(self):
        """Test bracketed hosts."""
        url = loose_parse("http://[::1]:8080/")
        self.assertEqual(url.hostname, "::1")
        self.assertEqual(url.port, "8080")

    def test_unparseable_falls_back_to_path(self):
        """Test that input urlsplit rejects comes back as a bare path."""
        url = loose_parse("http://[::1")
        self.assertEqual(url, LooseURL(pathname="http://[::1"))

    def test_non_string(self):
        """Test that non-strings give an empty result."""
        self.assertEqual(loose_parse(None), LooseURL())
        self.assertIsNone(loose_parse(None).path)


class TestFormatURL(unittest.TestCase):
    """Test suite for format_url."""

    def test_reformat(self):
        """Test that parse then format keeps the URL."""
        for text in ["http://example.com/", "https://u@a.com:81/p?q=1#f", "mailto:a@b.c"]:
            self.assertEqual(format_url(loose_parse(text)), text)

    def test_empty_query_and_fragment(self):
        """Test that a bare ? or # is kept."""
        url = loose_parse("http://a.com/?#")
        self.assertEqual(url.search, "?")
        self.assertEqual(url.query, "")
        self.assertEqual(url.hash, "#")
        for text in ["http://a.com/?", "http://a.com/#", "http://a.com/#x?y", "mailto:a@b.c?"]:
            self.assertEqual(format_url(loose_parse(text)), text)
        self.assertIsNone(loose_parse("http://a.com/#x?y").search)

    def test_modified_hostname(self):
        """Test writing back a changed hostname."""
        url = loose_parse("https://bücher.de/path?q=1")
        url.hostname = "xn--bcher-kva.de"
        self.assertEqual(format_url(url), "https://xn--bcher-kva.de/path?q=1")

    def test_ipv6_brackets(self):
        """Test that IPv6 hosts are bracketed again."""
        self.assertEqual(format_url(loose_parse("http://[::1]:8080/")), "http://[::1]:8080/")

    def test_empty(self):
        """Test formatting an empty result."""
        self.assertEqual(format_url(LooseURL()), "")


if __name__ == "__main__":
    unittest.main()
