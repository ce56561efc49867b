"""Configuration management for Duke.

Settings only shape how replies are presented and how much is logged; they
never change how commands are interpreted.
"""

import os
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional
import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DUKE_CONFIG"


@dataclass
class ConfigModel:
    """Presenter and logging settings."""

    # Reply framing
    reply_indent: str = "~\t"
    divider_width: int = 60

    # Display preferences
    show_banner: bool = True
    no_color: bool = False

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self):
        self._check_types()
        if self.divider_width < 1:
            logger.warning(f"Invalid divider_width {self.divider_width}, using 60")
            self.divider_width = 60
        self.log_level = self.log_level.upper()

    def _check_types(self) -> None:
        """Raise TypeError for any setting of the wrong type."""
        expected = {
            "reply_indent": str,
            "divider_width": int,
            "show_banner": bool,
            "no_color": bool,
            "log_level": str,
        }
        for name, kind in expected.items():
            value = getattr(self, name)
            # bool is a subclass of int but never a valid width
            if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
                raise TypeError(
                    f"Config value '{name}' must be {kind.__name__}, got {type(value).__name__}"
                )

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "reply_indent": self.reply_indent,
            "divider_width": self.divider_width,
            "show_banner": self.show_banner,
            "no_color": self.no_color,
            "log_level": self.log_level,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

        return cls(**{key: value for key, value in data.items() if key in known})


def default_config_path() -> Path:
    """Config file location; ``DUKE_CONFIG`` overrides ``~/.duke/config.yaml``."""
    env = os.getenv(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return Path.home() / ".duke" / "config.yaml"


class Config:
    """Configuration manager for Duke."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file, falling back to defaults."""
        if config_path is None:
            if cls._instance is not None:
                return cls._instance
            config_path = default_config_path()

        config = ConfigModel()

        if config_path.exists():
            try:
                with open(config_path, 'r') as f:
                    yaml_content = f.read()
                config = ConfigModel.from_yaml(yaml_content)
                logger.debug(f"Loaded configuration from {config_path}")
            except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
        else:
            logger.debug(f"No configuration at {config_path}, using defaults")

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, 'w') as f:
            f.write(config.to_yaml())
        logger.info(f"Configuration saved to {config_path}")

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Drop the cached configuration and load it again."""
        cls._instance = None
        return cls.load(config_path)


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)
