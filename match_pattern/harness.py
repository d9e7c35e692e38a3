#!/usr/bin/env python3
"""
Match Pattern - Self-Test Harness

Runs fixture tables through the compiler and reports, per pattern, which
expected-accepts were rejected and which expected-rejects were accepted.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .compiler import compile_pattern
from .errors import InvalidPatternError
from .fixtures import DEFAULT_FIXTURES, Fixture
from .mp_logging import MPLogger


@dataclass
class HarnessResult:
    """Outcome of running one fixture."""
    pattern: str
    regex: str = ""
    wrongly_rejected: List[str] = field(default_factory=list)
    wrongly_accepted: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.error is None and not self.wrongly_rejected and not self.wrongly_accepted

    def describe(self) -> str:
        """One-line summary of what went wrong, empty when passed."""
        if self.error:
            return self.error
        parts = []
        if self.wrongly_rejected:
            parts.append(f"rejected {', '.join(self.wrongly_rejected)}")
        if self.wrongly_accepted:
            parts.append(f"accepted {', '.join(self.wrongly_accepted)}")
        return "; ".join(parts)


def run_fixture(fixture: Fixture) -> HarnessResult:
    try:
        matcher = compile_pattern(fixture.pattern)
    except InvalidPatternError as e:
        return HarnessResult(pattern=fixture.pattern, error=str(e))

    return HarnessResult(
        pattern=fixture.pattern,
        regex=matcher.regex_source,
        wrongly_rejected=[url for url in fixture.accept if not matcher.test(url)],
        wrongly_accepted=[url for url in fixture.reject if matcher.test(url)],
    )


def run_harness(
    fixtures: Optional[Iterable[Fixture]] = None,
    logger: Optional[MPLogger] = None
) -> List[HarnessResult]:
    """
    Run every fixture through the compiler.

    Args:
        fixtures: Fixtures to run (defaults to the built-in table)
        logger: Optional logger receiving one HARNESS line per fixture

    Returns:
        One HarnessResult per fixture, in input order
    """
    if fixtures is None:
        fixtures = DEFAULT_FIXTURES

    results = []
    for fixture in fixtures:
        result = run_fixture(fixture)
        if logger:
            logger.log_harness(result.pattern, result.passed, result.describe())
        results.append(result)
    return results


def summarize(results: List[HarnessResult]) -> Dict[str, int]:
    """Count passed and failed fixtures."""
    passed = sum(1 for r in results if r.passed)
    return {
        "total": len(results),
        "passed": passed,
        "failed": len(results) - passed,
    }
