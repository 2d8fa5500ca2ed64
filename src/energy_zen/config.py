"""Configuration management for energy-zen."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path


def _default_config_dir() -> Path:
    return Path.home() / ".config" / "energy-zen"


@dataclass
class Config:
    log_file: Path = field(default_factory=lambda: _default_config_dir() / "logs.json")
    report_dir: Path = field(default_factory=lambda: _default_config_dir() / "reports")
    verbose: bool = False

    @classmethod
    def load(cls, overrides: dict | None = None) -> Config:
        """Load config from TOML file, then apply CLI overrides."""
        config = cls()

        config_path = _default_config_dir() / "config.toml"
        if config_path.exists():
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            config = cls._apply_dict(config, data)

        if overrides:
            config = cls._apply_dict(config, overrides)

        return config

    @classmethod
    def _apply_dict(cls, config: Config, data: dict) -> Config:
        if "log_file" in data:
            config.log_file = Path(data["log_file"]).expanduser()
        if "report_dir" in data:
            config.report_dir = Path(data["report_dir"]).expanduser()
        if "verbose" in data:
            config.verbose = bool(data["verbose"])
        return config
