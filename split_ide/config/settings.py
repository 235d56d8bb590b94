"""Configuration settings for split-ide."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from ..exceptions import ConfigError
from ..models.pane import DIRECTIONS
from .defaults import DEFAULT_DIRECTION, DEFAULT_RESIZE_STEP

logger = logging.getLogger(__name__)


@dataclass
class LayoutConfig:
    """Pane layout settings."""

    default_direction: str = DEFAULT_DIRECTION
    resize_step: float = DEFAULT_RESIZE_STEP
    show_close_button: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LayoutConfig":
        """Build from a ``[layout]`` table.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        config = cls()
        if "default_direction" in data:
            direction = data["default_direction"]
            if direction not in DIRECTIONS:
                raise ConfigError(
                    f"layout.default_direction must be one of {DIRECTIONS}, got {direction!r}"
                )
            config.default_direction = direction
        if "resize_step" in data:
            step = data["resize_step"]
            if isinstance(step, bool) or not isinstance(step, (int, float)):
                raise ConfigError(f"layout.resize_step must be a number, got {step!r}")
            if not 0 < step <= 0.6:
                raise ConfigError(f"layout.resize_step must be in (0, 0.6], got {step}")
            config.resize_step = float(step)
        if "show_close_button" in data:
            config.show_close_button = _as_bool(data["show_close_button"], "layout.show_close_button")
        return config


@dataclass
class EditorConfig:
    """Editor-related settings."""

    show_line_numbers: bool = True
    tab_size: int = 4

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EditorConfig":
        """Build from an ``[editor]`` table.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        config = cls()
        if "show_line_numbers" in data:
            config.show_line_numbers = _as_bool(data["show_line_numbers"], "editor.show_line_numbers")
        if "tab_size" in data:
            tab_size = data["tab_size"]
            if isinstance(tab_size, bool) or not isinstance(tab_size, int):
                raise ConfigError(f"editor.tab_size must be an integer, got {tab_size!r}")
            if not 1 <= tab_size <= 16:
                raise ConfigError(f"editor.tab_size must be between 1 and 16, got {tab_size}")
            config.tab_size = tab_size
        return config


def _as_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{name} must be true or false, got {value!r}")
    return value


@dataclass
class Config:
    """Main configuration class for split-ide."""

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    editor: EditorConfig = field(default_factory=EditorConfig)

    # XDG config directory
    CONFIG_DIR = Path(os.environ.get("XDG_CONFIG_HOME") or (Path.home() / ".config")) / "split-ide"
    CONFIG_FILE = CONFIG_DIR / "config.toml"
    PROJECT_CONFIG_FILE = ".split-ide.toml"

    @classmethod
    def load(cls, project_path: Optional[Path] = None) -> "Config":
        """Load configuration from files.

        Priority (highest to lowest):
        1. Project-specific config (.split-ide.toml in project root)
        2. User config (~/.config/split-ide/config.toml)
        3. Default values
        """
        config = cls()

        if cls.CONFIG_FILE.exists():
            config._load_from_file(cls.CONFIG_FILE)

        if project_path:
            project_config = project_path / cls.PROJECT_CONFIG_FILE
            if project_config.exists():
                config._load_from_file(project_config)

        return config

    def _load_from_file(self, path: Path) -> None:
        """Load configuration from a TOML file.

        Note:
            Invalid files and invalid sections are logged and skipped.
            The section keeps its previous values.
        """
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            return
        except tomllib.TOMLDecodeError as e:
            logger.warning("Invalid TOML in %s: %s", path, e)
            return
        except OSError as e:
            logger.warning("Cannot read config file %s: %s", path, e)
            return

        self.apply(data, source=str(path))

    def apply(self, data: dict[str, Any], source: str = "<dict>") -> None:
        """Override sections present in ``data``; invalid sections are skipped."""
        if "layout" in data:
            try:
                self.layout = LayoutConfig.from_dict(_merged(self.layout, data["layout"]))
            except ConfigError as e:
                logger.warning("Ignoring [layout] in %s: %s", source, e)

        if "editor" in data:
            try:
                self.editor = EditorConfig.from_dict(_merged(self.editor, data["editor"]))
            except ConfigError as e:
                logger.warning("Ignoring [editor] in %s: %s", source, e)

    def save(self) -> None:
        """Save configuration to user config file."""
        self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)

        content = f"""# split-ide configuration

[layout]
default_direction = "{self.layout.default_direction}"  # "vertical" or "horizontal"
resize_step = {self.layout.resize_step}
show_close_button = {str(self.layout.show_close_button).lower()}

[editor]
show_line_numbers = {str(self.editor.show_line_numbers).lower()}
tab_size = {self.editor.tab_size}
"""
        with open(self.CONFIG_FILE, "w") as f:
            f.write(content)


def _merged(current: Any, table: Any) -> dict[str, Any]:
    """Current section values overlaid with a TOML table."""
    if not isinstance(table, dict):
        raise ConfigError(f"Expected a table, got {type(table).__name__}")
    merged = dict(vars(current))
    merged.update(table)
    return merged
