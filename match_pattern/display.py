#!/usr/bin/env python3
"""
Match Pattern - Terminal Display

Renders harness reports and CLI status lines. Uses the `rich` library for
panels and tables, and plain text when NO_COLOR is set or stdout is not a TTY.
"""

import os
import sys
from typing import List

from rich.box import HEAVY, ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .harness import HarnessResult, summarize


def format_report(results: List[HarnessResult]) -> str:
    """Plain-text harness report."""
    lines = ["=" * 60, "MATCH PATTERN SELF-TEST", "=" * 60]
    for result in results:
        status = "PASS" if result.passed else "FAIL"
        lines.append(f"[{status}] {result.pattern!r}")
        if result.regex:
            lines.append(f"    regex: {result.regex}")
        if result.error:
            lines.append(f"    error: {result.error}")
        for url in result.wrongly_rejected:
            lines.append(f"    should accept: {url}")
        for url in result.wrongly_accepted:
            lines.append(f"    should reject: {url}")

    totals = summarize(results)
    lines.append("-" * 60)
    lines.append(f"{totals['passed']}/{totals['total']} patterns passed, {totals['failed']} failed")
    lines.append("=" * 60)
    return "\n".join(lines)


class HarnessDisplay:
    """Terminal display for the match-pattern CLI."""

    def __init__(self) -> None:
        self._use_rich = (
            not os.environ.get("NO_COLOR")
            and sys.stdout.isatty()
        )
        if self._use_rich:
            self._console = Console()
        else:
            self._console = None

    def report(self, results: List[HarnessResult]) -> None:
        if not self._use_rich:
            print(format_report(results))
            return

        table = Table(title="Match Pattern Self-Test", box=ROUNDED, show_lines=True)
        table.add_column("Pattern", style="bold")
        table.add_column("Regex", style="dim")
        table.add_column("Result", justify="center")
        table.add_column("Details")

        for result in results:
            status = "[green]PASS[/green]" if result.passed else "[red]FAIL[/red]"
            details = []
            if result.error:
                details.append(f"[red]{escape(result.error)}[/red]")
            details.extend(f"should accept {escape(url)}" for url in result.wrongly_rejected)
            details.extend(f"should reject {escape(url)}" for url in result.wrongly_accepted)
            table.add_row(escape(repr(result.pattern)), escape(result.regex), status, "\n".join(details))

        totals = summarize(results)
        style = "green" if totals["failed"] == 0 else "red"
        self._console.print()
        self._console.print(table)
        self._console.print(Panel(
            f"[bold]{totals['passed']}/{totals['total']} patterns passed, "
            f"{totals['failed']} failed[/bold]",
            box=HEAVY,
            style=style,
        ))

    def success(self, text: str) -> None:
        if self._use_rich:
            self._console.print(f"[green]✓ {escape(text)}[/green]")
        else:
            print(f"✓ {text}")

    def failure(self, text: str) -> None:
        if self._use_rich:
            self._console.print(f"[red]✗ {escape(text)}[/red]")
        else:
            print(f"✗ {text}")

    def error(self, text: str) -> None:
        if self._use_rich:
            self._console.print(f"[red]✗ {escape(text)}[/red]")
        else:
            print(f"✗ {text}", file=sys.stderr)

    def print(self, text: str = "") -> None:
        """General purpose print, for output that should stay unstyled."""
        print(text)
