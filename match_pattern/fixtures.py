#!/usr/bin/env python3
"""
Match Pattern - Harness Fixtures

The built-in table of (pattern, accepted URLs, rejected URLs) triples, plus
loading of additional tables from JSON files.

JSON fixture files hold a list whose entries are either triples:
    ["*://*/*", ["http://example.org/"], ["file:///a/"]]
or objects:
    {"pattern": "*://*/*", "accept": ["http://example.org/"], "reject": []}
"""

import json
from dataclasses import dataclass, field
from typing import List, Tuple


class FixtureError(ValueError):
    """A fixture file could not be read or has the wrong shape."""


@dataclass(frozen=True)
class Fixture:
    pattern: str
    accept: Tuple[str, ...] = field(default_factory=tuple)
    reject: Tuple[str, ...] = field(default_factory=tuple)


DEFAULT_FIXTURES: Tuple[Fixture, ...] = (
    Fixture(
        "",
        ("http://example.org/", "https://a.org/x", "ftp://x/"),
        ("gopher://x/", "example.org"),
    ),
    Fixture(
        "<all_urls>",
        (
            "http://example.org/",
            "https://a.org/some/path/",
            "ws://sockets.somewhere.org/",
            "wss://ws.example.com/stuff/",
            "ftp://files.somewhere.org/",
            "ftps://files.somewhere.org/",
        ),
    ),
    Fixture(
        "*://*/*",
        (
            "http://example.org/",
            "https://a.org/some/path/",
            "ws://sockets.somewhere.org/",
            "wss://ws.example.com/stuff/",
        ),
        ("ftp://ftp.example.org/", "ftps://ftp.example.org/", "file:///a/"),
    ),
    Fixture(
        "*://*.mozilla.org/*",
        (
            "http://mozilla.org/",
            "https://mozilla.org/",
            "http://a.mozilla.org/",
            "http://a.b.mozilla.org/",
            "https://b.mozilla.org/path/",
            "ws://ws.mozilla.org/",
            "wss://secure.mozilla.org/something",
        ),
        ("ftp://mozilla.org/", "http://mozilla.com/", "http://firefox.org/"),
    ),
    Fixture(
        "*://mozilla.org/",
        ("http://mozilla.org/", "https://mozilla.org/", "ws://mozilla.org/", "wss://mozilla.org/"),
        ("ftp://mozilla.org/", "http://a.mozilla.org/", "http://mozilla.org/a"),
    ),
    Fixture(
        "ftp://mozilla.org/",
        ("ftp://mozilla.org",),
        ("http://mozilla.org/", "ftp://sub.mozilla.org/", "ftp://mozilla.org/path"),
    ),
    Fixture(
        "https://*/path",
        ("https://mozilla.org/path", "https://a.mozilla.org/path", "https://something.com/path"),
        (
            "http://mozilla.org/path",
            "https://mozilla.org/path/",
            "https://mozilla.org/a",
            "https://mozilla.org/",
        ),
    ),
    Fixture(
        "https://*/path/",
        ("https://mozilla.org/path/", "https://a.mozilla.org/path/", "https://something.com/path/"),
        (
            "http://mozilla.org/path/",
            "https://mozilla.org/path",
            "https://mozilla.org/a",
            "https://mozilla.org/",
        ),
    ),
    Fixture(
        "https://mozilla.org/*",
        (
            "https://mozilla.org/",
            "https://mozilla.org/path",
            "https://mozilla.org/another",
            "https://mozilla.org/path/to/doc",
        ),
        ("http://mozilla.org/path", "https://mozilla.com/path"),
    ),
    Fixture(
        "https://mozilla.org/a/b/c/",
        ("https://mozilla.org/a/b/c/",),
        ("https://yomozilla.org/a/b/c/", "https://mozilla.org/a/b/c", "http://mozilla.org/a/b/c/"),
    ),
    Fixture(
        "https://mozilla.org/*/b/*/",
        ("https://mozilla.org/a/b/c/", "https://mozilla.org/d/b/f/", "https://mozilla.org/a/b/c/d/"),
        ("https://mozilla.org/b/*/", "https://mozilla.org/a/b/"),
    ),
    Fixture(
        "file:///blah/*",
        ("file:///blah/", "file:///blah/bleh"),
        ("file:///bleh/",),
    ),
)


def _string_tuple(value, what: str, index: int) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise FixtureError(f"Fixture {index}: {what} must be a list of strings")
    return tuple(value)


def fixture_from_entry(entry, index: int = 0) -> Fixture:
    """Build a Fixture from a JSON triple or object."""
    if isinstance(entry, dict):
        pattern = entry.get("pattern")
        accept = entry.get("accept")
        reject = entry.get("reject")
    elif isinstance(entry, list) and 1 <= len(entry) <= 3:
        pattern, accept, reject = (entry + [None, None])[:3]
    else:
        raise FixtureError(f"Fixture {index}: expected [pattern, accept, reject] or an object")

    if not isinstance(pattern, str):
        raise FixtureError(f"Fixture {index}: pattern must be a string")

    return Fixture(
        pattern=pattern,
        accept=_string_tuple(accept, "accept", index),
        reject=_string_tuple(reject, "reject", index),
    )


def load_fixtures(path: str) -> List[Fixture]:
    """Load a fixture table from a JSON file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise FixtureError(f"Cannot read fixture file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise FixtureError(f"Invalid JSON in fixture file {path}: {e}") from e

    if not isinstance(data, list):
        raise FixtureError(f"Fixture file {path} must contain a list")

    return [fixture_from_entry(entry, i) for i, entry in enumerate(data)]
