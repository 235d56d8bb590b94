"""Configuration module for split-ide."""

from .settings import Config, EditorConfig, LayoutConfig

__all__ = ["Config", "LayoutConfig", "EditorConfig"]
