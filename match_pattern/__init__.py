"""
Match Pattern - browser-extension match patterns compiled to regular expressions.

This package converts WebExtension match patterns (``scheme://host/path``,
``<all_urls>`` or the empty pattern) into compiled matchers that test URLs
for membership.
"""

from .compiler import (
    ALL_URLS,
    CompiledMatcher,
    ParsedPattern,
    compile,
    compile_pattern,
    matches_any,
    matches_pattern,
    parse_pattern,
    pattern_to_regex,
)
from .errors import InvalidHostError, InvalidPatternError

__version__ = "0.1.0"

__all__ = [
    "ALL_URLS",
    "CompiledMatcher",
    "InvalidHostError",
    "InvalidPatternError",
    "ParsedPattern",
    "compile",
    "compile_pattern",
    "matches_any",
    "matches_pattern",
    "parse_pattern",
    "pattern_to_regex",
]
