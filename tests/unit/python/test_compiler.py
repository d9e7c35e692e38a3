#!/usr/bin/env python3
"""
Unit tests for match_pattern/compiler.py
"""

import sys
import pytest

sys.path.insert(0, '.')
from match_pattern import compile as compile_match_pattern
from match_pattern.compiler import (
    ALL_URLS,
    CompiledMatcher,
    ParsedPattern,
    compile_pattern,
    matches_any,
    matches_pattern,
    parse_pattern,
    pattern_to_regex,
)
from match_pattern.errors import InvalidHostError, InvalidPatternError


class TestParsePattern:
    """Tests for parse_pattern function."""

    def test_splits_scheme_host_path(self):
        parsed = parse_pattern("https://mozilla.org/a/b")
        assert parsed == ParsedPattern(scheme="https", host="mozilla.org", path="a/b")

    def test_wildcard_scheme_and_host(self):
        parsed = parse_pattern("*://*/*")
        assert parsed.scheme == "*"
        assert parsed.host == "*"
        assert parsed.path == "*"

    def test_subdomain_wildcard_host(self):
        assert parse_pattern("*://*.mozilla.org/").host == "*.mozilla.org"

    def test_empty_path(self):
        assert parse_pattern("http://mozilla.org/").path == ""

    def test_file_scheme_without_host(self):
        parsed = parse_pattern("file:///blah/*")
        assert parsed.host is None
        assert parsed.path == "blah/*"

    def test_file_scheme_with_host(self):
        assert parse_pattern("file://server/share").host == "server"

    def test_parsed_pattern_is_immutable(self):
        parsed = parse_pattern("http://mozilla.org/")
        with pytest.raises(AttributeError):
            parsed.scheme = "https"


class TestInvalidPatterns:
    """Patterns outside the grammar must raise, never return a matcher."""

    @pytest.mark.parametrize("pattern", [
        "mozilla.org",
        "http://mozilla.org",
        "https//mozilla.org/",
        "gopher://mozilla.org/",
        "HTTP://mozilla.org/",
        "http://",
        "http://*foo/",
        "http://foo*/bar",
        "http://*.mozilla.org*/",
        "http://*./",
        "*",
        "<all_urls>/",
        "http://mozilla.org/\npath",
    ])
    def test_raises_invalid_pattern(self, pattern):
        with pytest.raises(InvalidPatternError):
            compile_pattern(pattern)

    @pytest.mark.parametrize("pattern", [
        "http:///path",
        "*:///",
        "ftp:///*",
    ])
    def test_missing_host_raises_invalid_host(self, pattern):
        with pytest.raises(InvalidHostError):
            compile_pattern(pattern)

    def test_invalid_host_is_invalid_pattern(self):
        assert issubclass(InvalidHostError, InvalidPatternError)

    def test_invalid_pattern_is_value_error(self):
        with pytest.raises(ValueError):
            compile_pattern("not a pattern")

    def test_error_carries_pattern(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_pattern("gopher://x/")
        assert exc_info.value.pattern == "gopher://x/"
        assert "is not a valid match pattern" in str(exc_info.value)

    def test_host_error_message(self):
        with pytest.raises(InvalidHostError) as exc_info:
            compile_pattern("http:///path")
        assert "does not have a valid host" in str(exc_info.value)

    def test_non_string_raises_type_error(self):
        with pytest.raises(TypeError):
            compile_pattern(None)


class TestPatternToRegex:
    """Tests for the regex text produced by pattern_to_regex."""

    def test_empty_pattern_is_scheme_prefix(self):
        assert pattern_to_regex("") == "^(?:http|https|ws|wss|file|ftp|ftps)://"

    def test_all_urls_is_scheme_prefix(self):
        assert pattern_to_regex(ALL_URLS) == pattern_to_regex("")

    def test_wildcard_everything(self):
        assert pattern_to_regex("*://*/*") == r"^(?:http|https|ws|wss)://[^/]+?(?:/.*)?\Z"

    def test_literal_host_escapes_dots(self):
        assert pattern_to_regex("https://mozilla.org/a") == r"^https://mozilla\.org/a\Z"

    def test_subdomain_wildcard(self):
        regex = pattern_to_regex("https://*.mozilla.org/")
        assert regex == r"^https://(?:[^/]+?\.)?mozilla\.org/?\Z"

    def test_path_wildcards(self):
        assert pattern_to_regex("https://mozilla.org/*/b/*/") == r"^https://mozilla\.org/.*?/b/.*?/\Z"

    def test_path_dots_escaped(self):
        assert pattern_to_regex("https://mozilla.org/index.html") == r"^https://mozilla\.org/index\.html\Z"

    def test_file_pattern_has_empty_host(self):
        assert pattern_to_regex("file:///blah/*") == r"^file:///blah/.*?\Z"

    def test_leading_slash_in_path_not_duplicated(self):
        assert pattern_to_regex("https://mozilla.org//a") == r"^https://mozilla\.org/a\Z"


class TestEmptyPattern:

    def test_accepts_supported_schemes(self):
        matcher = compile_pattern("")
        assert matcher.test("http://example.org/") is True
        assert matcher.test("https://a.org/x") is True
        assert matcher.test("ftp://x/") is True
        assert matcher.test("file:///etc/hosts") is True

    def test_rejects_other_strings(self):
        matcher = compile_pattern("")
        assert matcher.test("gopher://x/") is False
        assert matcher.test("example.org") is False
        assert matcher.test("xhttp://example.org/") is False


class TestAllUrls:

    @pytest.mark.parametrize("url", [
        "http://example.org/",
        "https://a.org/some/path/",
        "ws://sockets.somewhere.org/",
        "wss://ws.example.com/stuff/",
        "ftp://files.somewhere.org/",
        "ftps://files.somewhere.org/",
    ])
    def test_accepts_supported_urls(self, url):
        assert compile_pattern("<all_urls>").test(url) is True

    def test_rejects_unsupported_scheme(self):
        assert compile_pattern("<all_urls>").test("gopher://x/") is False


class TestSchemeWildcard:

    @pytest.mark.parametrize("url", [
        "file:///mozilla.org/",
        "ftp://mozilla.org/",
        "ftps://mozilla.org/",
    ])
    def test_never_accepts_file_or_ftp(self, url):
        for pattern in ("*://*/*", "*://mozilla.org/*", "*://*.mozilla.org/*"):
            assert compile_pattern(pattern).test(url) is False

    @pytest.mark.parametrize("scheme", ["http", "https", "ws", "wss"])
    def test_accepts_web_schemes(self, scheme):
        assert compile_pattern("*://mozilla.org/").test(f"{scheme}://mozilla.org/") is True


class TestHostMatching:

    def test_subdomain_wildcard_accepts_subdomains(self):
        matcher = compile_pattern("*://*.mozilla.org/*")
        assert matcher.test("http://a.b.mozilla.org/") is True
        assert matcher.test("https://b.mozilla.org/path/") is True
        assert matcher.test("http://mozilla.org/") is True

    def test_subdomain_wildcard_rejects_other_domains(self):
        matcher = compile_pattern("*://*.mozilla.org/*")
        assert matcher.test("ftp://mozilla.org/") is False
        assert matcher.test("http://mozilla.com/") is False
        assert matcher.test("http://evilmozilla.org/") is False

    def test_literal_host_dot_is_not_wildcard(self):
        matcher = compile_pattern("https://mozilla.org/")
        assert matcher.test("https://mozillaxorg/") is False

    def test_literal_host_rejects_subdomain(self):
        assert compile_pattern("*://mozilla.org/").test("http://a.mozilla.org/") is False

    def test_wildcard_host_requires_a_host(self):
        assert compile_pattern("https://*/path").test("https:///path") is False


class TestPathMatching:

    def test_exact_path(self):
        matcher = compile_pattern("https://*/path")
        assert matcher.test("https://mozilla.org/path") is True
        assert matcher.test("https://mozilla.org/path/") is False
        assert matcher.test("https://mozilla.org/") is False

    def test_empty_path_matches_root_with_or_without_slash(self):
        matcher = compile_pattern("ftp://mozilla.org/")
        assert matcher.test("ftp://mozilla.org") is True
        assert matcher.test("ftp://mozilla.org/") is True
        assert matcher.test("ftp://mozilla.org/path") is False

    def test_star_path_matches_anything(self):
        matcher = compile_pattern("https://mozilla.org/*")
        assert matcher.test("https://mozilla.org") is True
        assert matcher.test("https://mozilla.org/") is True
        assert matcher.test("https://mozilla.org/path/to/doc") is True

    def test_mid_path_wildcards(self):
        matcher = compile_pattern("https://mozilla.org/*/b/*/")
        assert matcher.test("https://mozilla.org/a/b/c/") is True
        assert matcher.test("https://mozilla.org/d/b/f/") is True
        assert matcher.test("https://mozilla.org/a/b/") is False

    def test_file_paths(self):
        matcher = compile_pattern("file:///blah/*")
        assert matcher.test("file:///blah/") is True
        assert matcher.test("file:///blah/bleh") is True
        assert matcher.test("file:///bleh/") is False

    def test_regex_metacharacters_are_literal(self):
        matcher = compile_pattern("https://mozilla.org/search?q=*")
        assert matcher.test("https://mozilla.org/search?q=firefox") is True
        assert matcher.test("https://mozilla.org/searcq=firefox") is False

    def test_anchored_at_end(self):
        assert compile_pattern("https://mozilla.org/a").test("https://mozilla.org/a\n") is False


class TestCompiledMatcher:

    def test_returns_compiled_matcher(self):
        matcher = compile_pattern("*://*/*")
        assert isinstance(matcher, CompiledMatcher)
        assert matcher.pattern == "*://*/*"
        assert matcher.regex_source == pattern_to_regex("*://*/*")

    def test_package_compile_alias(self):
        assert compile_match_pattern("*://*/*") == compile_pattern("*://*/*")

    def test_compiling_twice_gives_same_behavior(self):
        first = compile_pattern("*://*.mozilla.org/*")
        second = compile_pattern("*://*.mozilla.org/*")
        probes = ["http://mozilla.org/", "ftp://mozilla.org/", "https://a.mozilla.org/x", "nope"]
        assert [first.test(p) for p in probes] == [second.test(p) for p in probes]

    def test_matcher_is_reusable(self):
        matcher = compile_pattern("https://mozilla.org/*")
        for _ in range(3):
            assert matcher.test("https://mozilla.org/path") is True
            assert matcher.test("http://mozilla.org/path") is False


class TestMatchesPattern:

    def test_matches(self):
        assert matches_pattern("https://mozilla.org/path", "https://*/path") is True

    def test_does_not_match(self):
        assert matches_pattern("http://mozilla.org/path", "https://*/path") is False

    def test_invalid_pattern_raises(self):
        with pytest.raises(InvalidPatternError):
            matches_pattern("http://mozilla.org/", "mozilla.org")


class TestMatchesAny:

    def test_matches_string_pattern(self):
        assert matches_any("http://mozilla.org/", "*://mozilla.org/") is True

    def test_matches_json_array_pattern(self):
        patterns = '["https://*/path", "ftp://mozilla.org/"]'
        assert matches_any("ftp://mozilla.org/", patterns) is True
        assert matches_any("https://a.org/path", patterns) is True
        assert matches_any("http://a.org/path", patterns) is False

    def test_matches_list_pattern(self):
        assert matches_any("file:///blah/x", ["https://*/path", "file:///blah/*"]) is True

    def test_empty_patterns_list(self):
        assert matches_any("http://mozilla.org/", []) is False


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
