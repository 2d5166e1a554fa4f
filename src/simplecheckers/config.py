"""Configuration management for Simple Checkers."""

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError
from .logger import get_logger
from .rules import FORCED_CAPTURE, MULTI_JUMP

PLAYER_TYPES = ("human", "random")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_config_dir() -> Path:
    """Get the configuration directory."""
    # Use XDG on Linux/WSL, or fallback
    if os.name == 'nt':
        config_base = Path(os.environ.get('APPDATA', Path.home() / 'AppData' / 'Roaming'))
    else:
        config_base = Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config'))

    return config_base / 'simplecheckers'


def get_config_file() -> Path:
    """Get the configuration file path."""
    return get_config_dir() / 'settings.yaml'


@dataclass
class UISettings:
    """Console rendering settings."""
    p1_glyph: str = "W"
    p2_glyph: str = "R"
    empty_glyph: str = " "


@dataclass
class RuleSettings:
    """Game rule settings."""
    forced_capture: bool = FORCED_CAPTURE
    multi_jump: bool = MULTI_JUMP


@dataclass
class GameSettings:
    """Game-related settings."""
    rules: RuleSettings = field(default_factory=RuleSettings)


@dataclass
class PlayerSettings:
    """Player configuration."""
    p1_type: str = "human"  # human, random
    p2_type: str = "random"
    seed: Optional[int] = None


@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Main configuration class."""
    ui: UISettings = field(default_factory=UISettings)
    game: GameSettings = field(default_factory=GameSettings)
    players: PlayerSettings = field(default_factory=PlayerSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'ui': asdict(self.ui),
            'game': {
                'rules': asdict(self.game.rules),
            },
            'players': asdict(self.players),
            'logging': asdict(self.logging),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        config = cls()

        unknown = set(data) - {'ui', 'game', 'players', 'logging'}
        if unknown:
            raise ConfigurationError(", ".join(sorted(unknown)), "unknown section")

        try:
            if 'ui' in data:
                config.ui = UISettings(**data['ui'])

            if 'game' in data:
                game_data = data['game'] or {}
                if 'rules' in game_data:
                    config.game.rules = RuleSettings(**game_data['rules'])

            if 'players' in data:
                config.players = PlayerSettings(**data['players'])

            if 'logging' in data:
                config.logging = LoggingSettings(**data['logging'])
        except TypeError as e:
            raise ConfigurationError("settings", str(e)) from e

        return config

    def validate(self) -> "Config":
        """Check value ranges. Returns self so calls can be chained."""
        for name in ('p1_type', 'p2_type'):
            value = getattr(self.players, name)
            if value not in PLAYER_TYPES:
                raise ConfigurationError(f"players.{name}", f"expected one of {PLAYER_TYPES}, got {value!r}")

        if self.players.seed is not None and not isinstance(self.players.seed, int):
            raise ConfigurationError("players.seed", "must be an integer or null")

        for name in ('p1_glyph', 'p2_glyph', 'empty_glyph'):
            value = getattr(self.ui, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ConfigurationError(f"ui.{name}", "must be a single character")

        if str(self.logging.level).upper() not in LOG_LEVELS:
            raise ConfigurationError("logging.level", f"unknown level {self.logging.level!r}")

        return self

    def save(self, path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = get_config_file()
        path = Path(path)

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration from file, falling back to defaults if it is missing."""
        if path is None:
            path = get_config_file()
        path = Path(path)

        if not path.exists():
            return cls()

        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(str(path), f"invalid YAML: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(str(path), "top level must be a mapping")

        get_logger("config").debug("Loaded settings from %s", path)
        return cls.from_dict(data).validate()


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def set_config(config: Optional[Config]) -> None:
    """Replace the global configuration. None forces a reload on next access."""
    global _config
    _config = config


def save_config() -> None:
    """Save the global configuration."""
    if _config is not None:
        _config.save()


def reset_config() -> Config:
    """Reset configuration to defaults."""
    global _config
    _config = Config()
    _config.save()
    return _config
