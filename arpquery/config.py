"""Run settings, optionally loaded from a YAML file."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .defaults import (
    DEFAULT_ARP_COMMAND,
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_COMMAND_TIMEOUT,
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
)
from .util import ConfigError


@dataclass
class Settings:
    column_width: int = DEFAULT_COLUMN_WIDTH
    output_format: str = DEFAULT_OUTPUT_FORMAT
    command: List[str] = field(default_factory=lambda: list(DEFAULT_ARP_COMMAND))
    command_timeout: int = DEFAULT_COMMAND_TIMEOUT

    def validate(self):
        if not isinstance(self.column_width, int) or isinstance(self.column_width, bool) \
                or self.column_width < 1:
            raise ConfigError(f"column_width must be a positive integer, got {self.column_width!r}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"format must be one of {', '.join(OUTPUT_FORMATS)}, got {self.output_format!r}"
            )
        if not self.command:
            raise ConfigError("command must not be empty")
        if not isinstance(self.command_timeout, int) or isinstance(self.command_timeout, bool) \
                or self.command_timeout < 1:
            raise ConfigError(f"command_timeout must be a positive integer, got {self.command_timeout!r}")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Settings":
        unknown = set(d) - {"column_width", "format", "command", "command_timeout"}
        if unknown:
            raise ConfigError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

        command = d.get("command", list(DEFAULT_ARP_COMMAND))
        if isinstance(command, str):
            command = command.split()
        elif not isinstance(command, list):
            raise ConfigError(f"command must be a string or a list, got {command!r}")

        settings = cls(
            column_width=d.get("column_width", DEFAULT_COLUMN_WIDTH),
            output_format=d.get("format", DEFAULT_OUTPUT_FORMAT),
            command=[str(c) for c in command],
            command_timeout=d.get("command_timeout", DEFAULT_COMMAND_TIMEOUT),
        )
        settings.validate()
        return settings

    @classmethod
    def from_yaml(cls, yaml_text: str) -> "Settings":
        try:
            data = yaml.safe_load(yaml_text)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML settings: {e}") from e
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("Settings file must contain a mapping")
        return cls.from_dict(data)


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read settings from path, or return the defaults when path is None."""
    if path is None:
        return Settings()
    if not path.exists():
        raise ConfigError(f"Settings file not found: {path}")
    return Settings.from_yaml(path.read_text(encoding="utf-8"))
