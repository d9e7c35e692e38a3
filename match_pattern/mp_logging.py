#!/usr/bin/env python3
"""
Match Pattern - Logging Library

Provides run logging for the CLI and self-test harness. The compiler itself
never logs. Named mp_logging to avoid conflict with stdlib logging module.
"""

import os
from datetime import datetime
from pathlib import Path


def get_install_dir() -> Path:
    """Base directory for logs and the default config file."""
    return Path(os.environ.get("MP_INSTALL_DIR", str(Path.home() / ".match-pattern")))


class MPLogger:
    """Logger for match pattern compile and harness events."""

    def __init__(self, run_id: str = "unknown"):
        """Initialize logger with run ID."""
        self.log_dir = get_install_dir() / "logs"
        self.run_log_dir = self.log_dir / "runs"
        self.run_id = run_id

        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.run_log_dir.mkdir(parents=True, exist_ok=True)

    def _get_timestamp(self) -> str:
        return datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    def _get_log_date(self) -> str:
        return datetime.now().strftime("%Y-%m-%d")

    def _sanitize_message(self, message: str) -> str:
        """Sanitize message by replacing newlines."""
        return message.replace("\n", "\\n")

    def log_event(self, category: str, message: str) -> None:
        """Write one line to the run log and the daily log."""
        timestamp = self._get_timestamp()
        log_date = self._get_log_date()
        safe_message = self._sanitize_message(message)

        log_line = f"[{timestamp}] [{category}] {safe_message}"

        run_log = self.run_log_dir / f"{log_date}-{self.run_id}.log"
        try:
            with open(run_log, "a") as f:
                f.write(log_line + "\n")
        except OSError:
            pass

        daily_log = self.log_dir / f"{log_date}.log"
        try:
            with open(daily_log, "a") as f:
                f.write(f"[{self.run_id}] {log_line}\n")
        except OSError:
            pass

        current_log = self.log_dir / "current.log"
        try:
            if current_log.is_symlink() or current_log.exists():
                current_log.unlink()
            current_log.symlink_to(run_log)
        except OSError:
            pass

    def log_compile(self, pattern: str, regex: str) -> None:
        self.log_event("COMPILE", f"{pattern!r} -> {regex}")

    def log_invalid(self, pattern: str, reason: str) -> None:
        self.log_event("INVALID", f"{pattern!r}: {reason}")

    def log_harness(self, pattern: str, passed: bool, details: str = "") -> None:
        """Log the outcome of one harness fixture."""
        msg = f"{pattern!r} {'PASS' if passed else 'FAIL'}"
        if details:
            msg = f"{msg} - {details}"
        self.log_event("HARNESS", msg)

    def log_error(self, message: str) -> None:
        self.log_event("ERROR", message)

    def log_session(self, event: str) -> None:
        self.log_event("SESSION", event)
