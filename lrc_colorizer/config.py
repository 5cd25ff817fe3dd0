"""
Configuration management for lrc-colorizer
"""
import json
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, asdict

from .colors import (
    DEFAULT_ACTIVE, DEFAULT_INACTIVE, DEFAULT_TRANSITION, DEFAULT_WHITE, Palette,
)


@dataclass
class LyricConfig:
    """Configuration for lyric rendering"""
    render_mode: str = "smooth"      # simple, smooth, wave or glow
    show_translation: bool = True    # Append translated lyric after the line
    refresh_rate: float = 0.05       # UI refresh interval (seconds)
    colors_enabled: bool = True


@dataclass
class ColorConfig:
    """Lyric palette as #RRGGBB strings"""
    active: str = DEFAULT_ACTIVE
    transition: str = DEFAULT_TRANSITION
    inactive: str = DEFAULT_INACTIVE
    white: str = DEFAULT_WHITE

    def palette(self) -> Palette:
        return Palette.from_hex(self.active, self.transition, self.inactive, self.white)


def _update(section, name: str, values: Optional[Dict[str, Any]]):
    if values is None:
        return
    if not isinstance(values, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {type(values).__name__}")

    for key, value in values.items():
        if not hasattr(section, key):
            continue
        if isinstance(getattr(section, key), float):
            # bool is an int subclass but never a valid rate
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Config value '{name}.{key}' must be a number, got {value!r}")
            value = float(value)
        setattr(section, key, value)


def _apply(config, data):
    if data is None:
        return
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping of sections, got {type(data).__name__}")
    _update(config.lyric, 'lyric', data.get('lyric'))
    _update(config.colors, 'colors', data.get('colors'))


class Config:
    """Main configuration manager"""

    def __init__(self, config_file: Optional[Path] = None):
        self.lyric = LyricConfig()
        self.colors = ColorConfig()

        if config_file and config_file.exists():
            self.load(config_file)

    def load(self, config_file: Path):
        """Load configuration from YAML or JSON file"""
        if config_file.suffix in ['.yaml', '.yml']:
            with open(config_file, 'r') as f:
                data = yaml.safe_load(f)
        elif config_file.suffix == '.json':
            with open(config_file, 'r') as f:
                data = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {config_file.suffix}")

        _apply(self, data)

    def save(self, config_file: Path):
        """Save configuration to YAML or JSON file"""
        data = self.to_dict()

        if config_file.suffix in ['.yaml', '.yml']:
            with open(config_file, 'w') as f:
                yaml.dump(data, f, default_flow_style=False)
        elif config_file.suffix == '.json':
            with open(config_file, 'w') as f:
                json.dump(data, f, indent=2)
        else:
            raise ValueError(f"Unsupported config file format: {config_file.suffix}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'lyric': asdict(self.lyric),
            'colors': asdict(self.colors),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        config = cls()
        _apply(config, data)
        return config
