#!/usr/bin/env python3
"""
Match Pattern - Configuration

Reads values from a JSON configuration file using dot-notation paths.

Example config (~/.match-pattern/config.json):
    {
        "harness": {"fixtures": ["/path/to/extra-fixtures.json"]},
        "logging": {"enabled": true}
    }
"""

import json
import os
from typing import List

from .mp_logging import get_install_dir


def get_config_value(path: str, config_file: str):
    """Read a value from JSON config using dot-notation path. Returns the value or None."""
    parts = path.split('.')

    try:
        with open(config_file, 'r') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return None

    for part in parts:
        if isinstance(data, dict):
            data = data.get(part)
        else:
            return None

    return data


class MPConfig:
    """Configuration manager for the CLI and harness."""

    def __init__(self, config_file: str = None):
        self.config_file = config_file or os.environ.get(
            "MP_CONFIG_FILE",
            str(get_install_dir() / "config.json")
        )

    def get_fixture_files(self) -> List[str]:
        """Extra fixture files to run in addition to the built-in table."""
        value = get_config_value("harness.fixtures", self.config_file)
        if isinstance(value, str):
            return [os.path.expanduser(value)]
        if isinstance(value, list):
            return [os.path.expanduser(v) for v in value if isinstance(v, str)]
        return []

    def is_logging_enabled(self) -> bool:
        value = get_config_value("logging.enabled", self.config_file)
        if value is None:
            return True
        return bool(value)
