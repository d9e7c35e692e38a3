#!/usr/bin/env python3
"""
Match Pattern - Command-line interface.

Usage:
    python -m match_pattern compile <pattern>
    python -m match_pattern check <pattern> <url> [<url> ...]
    python -m match_pattern selftest [--fixtures FILE ...]

Examples:
    python -m match_pattern compile "*://*.mozilla.org/*"
    python -m match_pattern check "https://*/path" https://mozilla.org/path
    python -m match_pattern selftest --fixtures extra-fixtures.json

Environment Variables:
    MP_INSTALL_DIR   - Base directory for logs (default: ~/.match-pattern)
    MP_CONFIG_FILE   - Config file (default: $MP_INSTALL_DIR/config.json)
    NO_COLOR         - Disable rich output
"""

import argparse
import os
import sys
from typing import Optional

from .compiler import compile_pattern
from .config import MPConfig
from .display import HarnessDisplay
from .errors import InvalidPatternError
from .fixtures import DEFAULT_FIXTURES, FixtureError, load_fixtures
from .harness import run_harness, summarize
from .mp_logging import MPLogger


def get_logger(config: MPConfig) -> Optional[MPLogger]:
    """Logger for this run, or None when logging is disabled in config."""
    if not config.is_logging_enabled():
        return None
    return MPLogger(run_id=f"cli-{os.getpid()}")


def cmd_compile(args, config: MPConfig, display: HarnessDisplay) -> int:
    """Print the regex a pattern compiles to."""
    logger = get_logger(config)
    try:
        matcher = compile_pattern(args.pattern)
    except InvalidPatternError as e:
        if logger:
            logger.log_invalid(args.pattern, str(e))
        display.error(str(e))
        return 1

    if logger:
        logger.log_compile(args.pattern, matcher.regex_source)
    display.print(matcher.regex_source)
    return 0


def cmd_check(args, config: MPConfig, display: HarnessDisplay) -> int:
    """Test URLs against a pattern; succeeds only if every URL matches."""
    logger = get_logger(config)
    try:
        matcher = compile_pattern(args.pattern)
    except InvalidPatternError as e:
        if logger:
            logger.log_invalid(args.pattern, str(e))
        display.error(str(e))
        return 1

    all_matched = True
    for url in args.urls:
        if matcher.test(url):
            display.success(url)
        else:
            display.failure(url)
            all_matched = False
    return 0 if all_matched else 1


def cmd_selftest(args, config: MPConfig, display: HarnessDisplay) -> int:
    """Run the built-in fixture table plus any extra fixture files."""
    fixtures = list(DEFAULT_FIXTURES)
    for path in config.get_fixture_files() + (args.fixtures or []):
        try:
            fixtures.extend(load_fixtures(path))
        except FixtureError as e:
            display.error(str(e))
            return 1

    logger = get_logger(config)
    if logger:
        logger.log_session(f"Self-test started with {len(fixtures)} fixtures")

    results = run_harness(fixtures, logger=logger)
    display.report(results)

    totals = summarize(results)
    if logger:
        logger.log_session(f"Self-test finished: {totals['passed']}/{totals['total']} passed")
    return 0 if totals["failed"] == 0 else 1


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="match-pattern",
        description="Match Pattern - Compile browser-extension match patterns to regular expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--config", help="Config file path (overrides MP_CONFIG_FILE)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    compile_parser = subparsers.add_parser("compile", help="Print the regex for a pattern")
    compile_parser.add_argument("pattern", help="Match pattern, e.g. '*://*.mozilla.org/*'")
    compile_parser.set_defaults(func=cmd_compile)

    check_parser = subparsers.add_parser("check", help="Test URLs against a pattern")
    check_parser.add_argument("pattern", help="Match pattern")
    check_parser.add_argument("urls", nargs="+", help="URLs to test")
    check_parser.set_defaults(func=cmd_check)

    selftest_parser = subparsers.add_parser("selftest", help="Run the fixture harness")
    selftest_parser.add_argument("--fixtures", action="append",
                                 help="Extra JSON fixture file (repeatable)")
    selftest_parser.set_defaults(func=cmd_selftest)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args, MPConfig(args.config), HarnessDisplay())


if __name__ == "__main__":
    sys.exit(main())
