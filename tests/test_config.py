"""Tests for split-ide configuration."""

import tempfile
from pathlib import Path

import pytest

from split_ide.config import Config, EditorConfig, LayoutConfig
from split_ide.config import defaults
from split_ide.exceptions import ConfigError


class TestDefaults:
    """Tests for layout constants."""

    def test_ratio_bounds(self):
        assert defaults.MIN_RATIO == 0.2
        assert defaults.MAX_RATIO == 0.8
        assert defaults.DEFAULT_RATIO == 0.5

    def test_initial_pane(self):
        assert defaults.INITIAL_PANE_ID == "pane-initial"


class TestLayoutConfig:
    """Tests for LayoutConfig dataclass."""

    def test_default_values(self):
        config = LayoutConfig()

        assert config.default_direction == "vertical"
        assert config.resize_step == 0.05
        assert config.show_close_button is True

    def test_from_dict(self):
        config = LayoutConfig.from_dict(
            {"default_direction": "horizontal", "resize_step": 0.1, "show_close_button": False}
        )

        assert config.default_direction == "horizontal"
        assert config.resize_step == 0.1
        assert config.show_close_button is False

    def test_bad_direction(self):
        with pytest.raises(ConfigError):
            LayoutConfig.from_dict({"default_direction": "diagonal"})

    def test_bad_resize_step(self):
        with pytest.raises(ConfigError):
            LayoutConfig.from_dict({"resize_step": 0})
        with pytest.raises(ConfigError):
            LayoutConfig.from_dict({"resize_step": "big"})
        with pytest.raises(ConfigError):
            LayoutConfig.from_dict({"resize_step": True})

    def test_bad_bool(self):
        with pytest.raises(ConfigError):
            LayoutConfig.from_dict({"show_close_button": "yes"})


class TestEditorConfig:
    """Tests for EditorConfig dataclass."""

    def test_default_values(self):
        config = EditorConfig()

        assert config.show_line_numbers is True
        assert config.tab_size == 4

    def test_bad_tab_size(self):
        with pytest.raises(ConfigError):
            EditorConfig.from_dict({"tab_size": 0})
        with pytest.raises(ConfigError):
            EditorConfig.from_dict({"tab_size": 2.5})


class TestConfig:
    """Tests for main Config class."""

    def test_load_returns_config(self):
        config = Config.load()

        assert isinstance(config, Config)
        assert isinstance(config.layout, LayoutConfig)
        assert isinstance(config.editor, EditorConfig)

    def test_config_file_paths(self):
        assert Config.CONFIG_FILE.name == "config.toml"
        assert Config.CONFIG_DIR.name == "split-ide"
        assert Config.PROJECT_CONFIG_FILE == ".split-ide.toml"

    def test_project_file_overrides(self):
        """Project config values are applied."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir)
            (path / Config.PROJECT_CONFIG_FILE).write_text(
                '[layout]\ndefault_direction = "horizontal"\n\n[editor]\ntab_size = 2\n'
            )
            config = Config.load(path)

        assert config.layout.default_direction == "horizontal"
        assert config.editor.tab_size == 2
        assert config.editor.show_line_numbers is True

    def test_invalid_toml_falls_back(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir)
            (path / Config.PROJECT_CONFIG_FILE).write_text("[layout\n")
            config = Config.load(path)

        assert config.layout == LayoutConfig()

    def test_invalid_section_is_skipped(self, caplog):
        """A bad section keeps its defaults, other sections still apply."""
        config = Config()
        config.apply(
            {"layout": {"resize_step": 5}, "editor": {"tab_size": 8}},
            source="test",
        )

        assert config.layout.resize_step == 0.05
        assert config.editor.tab_size == 8
        assert "Ignoring [layout]" in caplog.text

    def test_section_must_be_table(self):
        config = Config()
        config.apply({"editor": "wide"})
        assert config.editor == EditorConfig()

    def test_partial_section_keeps_earlier_values(self):
        """A later file only overrides the keys it sets."""
        config = Config()
        config.apply({"layout": {"resize_step": 0.1}})
        config.apply({"layout": {"show_close_button": False}})

        assert config.layout.resize_step == 0.1
        assert config.layout.show_close_button is False

    def test_save_round_trip(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Config, "CONFIG_DIR", tmp_path)
        monkeypatch.setattr(Config, "CONFIG_FILE", tmp_path / "config.toml")

        config = Config()
        config.layout.default_direction = "horizontal"
        config.editor.tab_size = 2
        config.save()

        loaded = Config()
        loaded._load_from_file(tmp_path / "config.toml")
        assert loaded.layout.default_direction == "horizontal"
        assert loaded.editor.tab_size == 2
