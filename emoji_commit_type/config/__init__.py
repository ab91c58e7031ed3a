"""Configuration Management Package"""

import json
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

# Valid configuration values
VALID_FORMATS = {"list", "table", "json"}


@dataclass
class Config:
    """Display configuration with sensible defaults."""
    format: str = "list"
    show_bump: bool = False
    show_header: bool = True

    def to_dict(self) -> dict:
        return asdict(self)

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults silently after warning.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.format, str) or self.format not in VALID_FORMATS:
            warnings.append(f"Invalid format '{self.format}', using '{defaults.format}'")
            self.format = defaults.format

        if not isinstance(self.show_bump, bool):
            warnings.append(f"Invalid show_bump '{self.show_bump}', using {str(defaults.show_bump).lower()}")
            self.show_bump = defaults.show_bump

        if not isinstance(self.show_header, bool):
            warnings.append(f"Invalid show_header '{self.show_header}', using {str(defaults.show_header).lower()}")
            self.show_header = defaults.show_header

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Manages loading and saving configuration."""

    CONFIG_FILENAME = ".ectrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                self._config = self._load_from_file(path)
                self._config_path = path
                return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()
        if not isinstance(data, dict):
            print(f"Warning: Could not load {path}: expected a JSON object", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    def save(self, config: Config, global_config: bool = True) -> Path:
        path = Path.home() / self.CONFIG_FILENAME if global_config else Path.cwd() / self.CONFIG_FILENAME
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
        return path

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def save_config(config: Config, global_config: bool = True) -> Path:
    return _manager.save(config, global_config)


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "save_config",
    "get_config_path",
    "VALID_FORMATS",
]
