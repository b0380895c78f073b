"""
Configuration Manager - Handle diff backend settings persistence
"""

from __future__ import annotations

import copy
import json
import os
import tempfile
from pathlib import Path
from typing import Any

from docdiff.models.diff import DiffMode, TieBreak


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        try:
            # 1. Environment variable
            config_dir = os.environ.get("DOCDIFF_CONFIG_DIR")

            # 2. Home directory ~/.docdiff
            if not config_dir:
                config_dir = os.path.expanduser("~/.docdiff")

            if config_dir:
                config_path = Path(config_dir)
                try:
                    config_path.mkdir(parents=True, exist_ok=True)
                    self._config_file = config_path / "config.json"
                except OSError as e:
                    print(f"[ConfigManager] Warning: Cannot write to {config_dir}: {e}")
                    self._config_file = None

            # 3. Fallback: temporary directory
            if not self._config_file:
                tmp_dir = Path(tempfile.gettempdir()) / "docdiff"
                tmp_dir.mkdir(parents=True, exist_ok=True)
                self._config_file = tmp_dir / "config.json"
                print(f"[ConfigManager] Using temporary config path: {self._config_file}")

        except OSError as e:
            print(f"[ConfigManager] Critical Error in init: {e}")
            self._config_file = Path(tempfile.gettempdir()) / "docdiff_config_fallback.json"

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next get_instance() re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, filling missing keys from defaults"""
        if not self._config_file.exists():
            return self._default_config()

        try:
            with open(self._config_file, encoding="utf-8") as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"[ConfigManager] Error loading config: {e}")
            return self._default_config()

        if not isinstance(stored, dict):
            print(f"[ConfigManager] Ignoring malformed config in {self._config_file}")
            return self._default_config()

        return self._merge(self._default_config(), stored)

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "diff": {
                "mode": "paired",
                "tieBreak": "consume_modified",
                "maxLines": 5000,  # Per side; the LCS table is quadratic
                "cacheSize": 128,  # 0 disables result caching
            },
            "server": {"host": "0.0.0.0", "port": 8000},
        }

    @staticmethod
    def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Merge one level of nested sections over the defaults"""
        merged = copy.deepcopy(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = {**merged[key], **value}
            else:
                merged[key] = value
        return merged

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return copy.deepcopy(self._config)

    def diff_settings(self) -> dict[str, Any]:
        """Get the diff section, with invalid hand-edited values replaced by defaults"""
        section = self.get_config()["diff"]
        defaults = self._default_config()["diff"]
        if not isinstance(section, dict):
            print(f"[ConfigManager] Invalid diff section {section!r}, using defaults")
            return defaults

        checks = {
            "mode": lambda v: v in {m.value for m in DiffMode},
            "tieBreak": lambda v: v in {t.value for t in TieBreak},
            "maxLines": lambda v: isinstance(v, int) and not isinstance(v, bool) and v >= 0,
            "cacheSize": lambda v: isinstance(v, int) and not isinstance(v, bool) and v >= 0,
        }
        for key, is_valid in checks.items():
            if not is_valid(section.get(key)):
                print(f"[ConfigManager] Invalid diff.{key} {section.get(key)!r}, using {defaults[key]!r}")
                section[key] = defaults[key]
        return section

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        # Merge with existing config
        self._config = self._merge(self._config, config)

        # Ensure config directory exists
        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        # Write to file
        try:
            with open(self._config_file, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self.save_config({key: value})
