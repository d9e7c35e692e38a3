#!/usr/bin/env python3
"""
Match Pattern Compiler
Converts browser-extension match patterns into compiled regular expressions.

Usage:
    from match_pattern.compiler import compile_pattern, matches_any
    matcher = compile_pattern("*://*.mozilla.org/*")
    if matcher.test("https://developer.mozilla.org/docs"):
        print("Match found")
"""

import json
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .errors import InvalidHostError, InvalidPatternError

ALL_URLS = "<all_urls>"

# Schemes a bare "*" expands to; file, ftp and ftps must be named explicitly
WILDCARD_SCHEMES = ("http", "https", "ws", "wss")
SUPPORTED_SCHEMES = WILDCARD_SCHEMES + ("file", "ftp", "ftps")

_ANY_SCHEME_PREFIX = f"^(?:{'|'.join(SUPPORTED_SCHEMES)})://"

_PATTERN_GRAMMAR = re.compile(
    r"^(\*|http|https|ws|wss|file|ftp|ftps)"
    r"://"
    r"(\*|(?:\*\.)?[^/*]+)?"
    r"/(.*)\Z"
)


@dataclass(frozen=True)
class ParsedPattern:
    """The three grammar groups of a ``scheme://host/path`` pattern."""

    scheme: str
    host: Optional[str]
    path: str


@dataclass(frozen=True)
class CompiledMatcher:
    """Immutable matcher built from a single match pattern."""

    pattern: str
    regex: "re.Pattern[str]"

    @property
    def regex_source(self) -> str:
        return self.regex.pattern

    def test(self, candidate: str) -> bool:
        """Return True if the candidate URL is covered by the pattern."""
        return self.regex.search(candidate) is not None


def parse_pattern(pattern: str) -> ParsedPattern:
    """
    Split a match pattern into scheme, host and path.

    Raises:
        InvalidPatternError: pattern does not fit scheme://host/path
        InvalidHostError: host is missing and the scheme is not file
    """
    match = _PATTERN_GRAMMAR.match(pattern)
    if not match:
        raise InvalidPatternError(pattern)

    scheme, host, path = match.groups()
    if not host and scheme != "file":
        raise InvalidHostError(pattern)

    return ParsedPattern(scheme=scheme, host=host, path=path)


def _scheme_regex(scheme: str) -> str:
    if scheme == "*":
        return f"(?:{'|'.join(WILDCARD_SCHEMES)})"
    return scheme


def _host_regex(host: Optional[str]) -> str:
    if not host:
        return ""
    if host == "*":
        return "[^/]+?"
    if host.startswith("*."):
        # Bare suffix matches too, so the subdomain label group is optional
        return r"(?:[^/]+?\.)?" + re.escape(host[2:])
    return re.escape(host)


def _path_regex(path: str) -> str:
    if not path:
        return "/?"
    if path == "*":
        return "(?:/.*)?"
    if not path.startswith("/"):
        path = "/" + path
    return ".*?".join(re.escape(part) for part in path.split("*"))


def pattern_to_regex(pattern: str) -> str:
    """
    Convert a match pattern to a regex pattern.

    Supports:
    - "" and <all_urls> match any supported scheme followed by ://
    - * as scheme matches http, https, ws and wss only
    - * as host matches any host, *.example.org matches it and its subdomains
    - * in the path matches any characters, including /
    """
    if not isinstance(pattern, str):
        raise TypeError(f"match pattern must be a string, not {type(pattern).__name__}")

    if pattern == "" or pattern == ALL_URLS:
        return _ANY_SCHEME_PREFIX

    parsed = parse_pattern(pattern)
    return (
        "^"
        + _scheme_regex(parsed.scheme)
        + "://"
        + _host_regex(parsed.host)
        + _path_regex(parsed.path)
        + r"\Z"
    )


def compile_pattern(pattern: str) -> CompiledMatcher:
    """Compile a match pattern into a reusable matcher."""
    return CompiledMatcher(pattern=pattern, regex=re.compile(pattern_to_regex(pattern)))


compile = compile_pattern


def matches_pattern(url: str, pattern: str) -> bool:
    """Check if a URL is covered by a single match pattern."""
    return compile_pattern(pattern).test(url)


def matches_any(url: str, patterns: Union[str, Iterable[str]]) -> bool:
    """
    Check if a URL is covered by any of the given patterns.

    Args:
        url: The URL to check
        patterns: A single pattern string, JSON array string, or list of patterns

    Returns:
        True if the URL matches any pattern, False otherwise
    """
    if isinstance(patterns, str):
        if patterns.startswith('['):
            patterns = json.loads(patterns)
        else:
            patterns = [patterns]

    for pattern in patterns:
        if matches_pattern(url, pattern):
            return True
    return False
