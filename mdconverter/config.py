from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")
OUTPUT_FORMATS = ("markdown", "html")
DEFAULT_THEME_PATH = Path.home() / ".config" / "mdconverter" / "theme.txt"


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


@dataclass
class OutputConfig:
    """Where and in which format converted documents are written."""

    format: str = "markdown"
    directory: str | None = None


@dataclass
class DebugConfig:
    """Debug mode settings."""

    enabled: bool = False
    trace: bool = False
    verbose: bool = False


@dataclass
class AppConfig:
    """Top-level application configuration aggregating all subsections."""

    theme: str | None = None
    output: OutputConfig = field(default_factory=OutputConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)
    theme_path: str = str(DEFAULT_THEME_PATH)

    @property
    def is_html(self) -> bool:
        return self.output.format == "html"


def _section(raw: dict, name: str) -> dict:
    """Return an optional mapping section, raising ConfigError for scalars."""
    # `or {}` fallback handles YAML null values for optional sections
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be a mapping, got {section!r}")
    return section


def load_config(path: str | None) -> AppConfig:
    """Load and validate application configuration from a YAML file.

    Every section is optional; a missing or ``null`` section falls back to
    its defaults.

    Args:
        path: Filesystem path to the YAML configuration file, or None to
            use defaults only.

    Returns:
        A fully populated AppConfig instance.

    Raises:
        ConfigError: If the file does not exist, is not a YAML mapping, has
            a scalar where a section or path is expected, or names an
            unknown theme or output format.
    """
    if path is None:
        return AppConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {path}")

    with open(config_path, encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    # An empty file loads as None
    raw = raw or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")

    theme = raw.get("theme")
    if theme is not None:
        theme = str(theme).strip().lower()
        if theme not in THEMES:
            raise ConfigError(f"theme must be one of {THEMES}, got {raw['theme']!r}")

    output_raw = _section(raw, "output")
    debug_raw = _section(raw, "debug")

    output_format = output_raw.get("format", "markdown")
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output.format must be one of {OUTPUT_FORMATS}, got {output_format!r}"
        )

    theme_path = raw.get("theme_path") or str(DEFAULT_THEME_PATH)
    if not isinstance(theme_path, str):
        raise ConfigError(f"theme_path must be a path string, got {theme_path!r}")
    directory = output_raw.get("directory")
    if directory is not None and not isinstance(directory, str):
        raise ConfigError(f"output.directory must be a path string, got {directory!r}")

    logger.debug("Loaded config from %s", path)
    logger.debug("theme=%s output.format=%s", theme, output_format)

    return AppConfig(
        theme=theme,
        output=OutputConfig(
            format=output_format,
            directory=str(Path(directory).expanduser()) if directory else None,
        ),
        debug=DebugConfig(
            enabled=bool(debug_raw.get("enabled", False)),
            trace=bool(debug_raw.get("trace", False)),
            verbose=bool(debug_raw.get("verbose", False)),
        ),
        theme_path=str(Path(theme_path).expanduser()),
    )


# --- Theme preference store ---

def load_theme(path: str | Path = DEFAULT_THEME_PATH) -> str:
    """Read the stored theme preference.

    Anything other than ``dark`` (case and surrounding whitespace ignored),
    including a missing or unreadable file, means ``light``.
    """
    try:
        stored = Path(path).expanduser().read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("No theme preference at %s (%s), using light", path, exc)
        return "light"
    return "dark" if stored.strip().lower() == "dark" else "light"


def save_theme(theme: str, path: str | Path = DEFAULT_THEME_PATH) -> bool:
    """Persist the theme preference, creating parent directories.

    Returns:
        True if the preference was written, False if the write failed.
    """
    theme = "dark" if theme == "dark" else "light"
    target = Path(path).expanduser()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(theme, encoding="utf-8")
    except OSError as exc:
        logger.warning("Could not save theme preference to %s: %s", target, exc)
        return False
    logger.debug("Saved theme %s to %s", theme, target)
    return True
