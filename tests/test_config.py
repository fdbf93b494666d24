import pytest
import yaml

from mdconverter.config import (
    AppConfig,
    ConfigError,
    DEFAULT_THEME_PATH,
    load_config,
    load_theme,
    save_theme,
)


class TestLoadConfig:
    def test_none_returns_defaults(self):
        config = load_config(None)
        assert isinstance(config, AppConfig)
        assert config.theme is None
        assert config.output.format == "markdown"
        assert config.output.directory is None
        assert config.debug.enabled is False
        assert config.is_html is False

    def test_loads_valid_config(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({
            "theme": "Dark",
            "output": {"format": "html", "directory": "out"},
            "debug": {"enabled": True, "trace": False, "verbose": True},
            "theme_path": str(tmp_path / "theme.txt"),
        }))
        config = load_config(str(config_file))
        assert config.theme == "dark"
        assert config.output.format == "html"
        assert config.output.directory == "out"
        assert config.is_html is True
        assert config.debug.enabled is True
        assert config.debug.verbose is True
        assert config.theme_path == str(tmp_path / "theme.txt")

    def test_missing_file_raises(self):
        with pytest.raises(ConfigError, match="not found"):
            load_config("/nonexistent/config.yaml")

    def test_empty_file_uses_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        config = load_config(str(config_file))
        assert config.output.format == "markdown"

    def test_null_sections_use_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("output:\ndebug:\n")
        config = load_config(str(config_file))
        assert config.output.format == "markdown"
        assert config.debug.trace is False

    def test_unknown_theme_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"theme": "solarized"}))
        with pytest.raises(ConfigError, match="theme"):
            load_config(str(config_file))

    def test_unknown_format_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"output": {"format": "pdf"}}))
        with pytest.raises(ConfigError, match="output.format"):
            load_config(str(config_file))

    def test_non_mapping_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- just\n- a list\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(str(config_file))

    def test_invalid_yaml_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("theme: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(str(config_file))

    @pytest.mark.parametrize("text", ["output: html\n", "debug: yes\n"])
    def test_scalar_section_raises(self, tmp_path, text):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(text)
        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config(str(config_file))

    def test_null_theme_path_uses_default(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("theme_path:\n")
        config = load_config(str(config_file))
        assert config.theme_path == str(DEFAULT_THEME_PATH)

    def test_non_string_theme_path_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("theme_path: [a, b]\n")
        with pytest.raises(ConfigError, match="theme_path"):
            load_config(str(config_file))

    def test_paths_expand_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "theme_path: ~/prefs/theme.txt\noutput:\n  directory: ~/out\n"
        )
        config = load_config(str(config_file))
        assert config.theme_path == str(tmp_path / "prefs" / "theme.txt")
        assert config.output.directory == str(tmp_path / "out")


class TestThemeStore:
    def test_missing_file_is_light(self, tmp_path):
        assert load_theme(tmp_path / "nope.txt") == "light"

    def test_dark_is_case_and_whitespace_insensitive(self, tmp_path):
        path = tmp_path / "theme.txt"
        path.write_text("  DARK \n")
        assert load_theme(path) == "dark"

    def test_unknown_value_is_light(self, tmp_path):
        path = tmp_path / "theme.txt"
        path.write_text("blue")
        assert load_theme(path) == "light"

    def test_save_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "a" / "b" / "theme.txt"
        assert save_theme("dark", path) is True
        assert path.read_text() == "dark"
        assert load_theme(path) == "dark"

    def test_save_normalizes_unknown_theme(self, tmp_path):
        path = tmp_path / "theme.txt"
        save_theme("neon", path)
        assert path.read_text() == "light"

    def test_save_failure_returns_false(self, tmp_path):
        blocker = tmp_path / "file.txt"
        blocker.write_text("not a dir")
        assert save_theme("dark", blocker / "theme.txt") is False

    def test_tilde_path_resolves_to_home(self, tmp_path, monkeypatch):
        home = tmp_path / "home"
        monkeypatch.setenv("HOME", str(home))
        monkeypatch.chdir(tmp_path)
        assert save_theme("dark", "~/.config/mdconverter/theme.txt") is True
        assert (home / ".config" / "mdconverter" / "theme.txt").read_text() == "dark"
        assert not (tmp_path / "~").exists()
        assert load_theme("~/.config/mdconverter/theme.txt") == "dark"
