"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas.config import AppConfig, load_config


class ConfigManager:
    """YAML-backed configuration loader rooted at a directory."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    @staticmethod
    def load_path(path: str | Path) -> dict[str, Any]:
        """Load the YAML document at ``path`` as given, whatever its extension."""
        with Path(path).open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}

    @classmethod
    def app_config_from(cls, path: str | Path) -> AppConfig:
        """Load and validate the YAML document at ``path`` as :class:`AppConfig`."""
        return load_config(cls.load_path(path))

    def load(self, name: str) -> dict[str, Any]:
        """Load a YAML configuration by name without file extension."""
        path = self._base_path / f"{name}.yaml"
        if not path.exists():
            path = self._base_path / f"{name}.yml"
        return self.load_path(path)

    def app_config(self, name: str) -> AppConfig:
        """Load and validate a named configuration as :class:`AppConfig`."""
        return load_config(self.load(name))


__all__ = ["ConfigManager"]
