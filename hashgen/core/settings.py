"""
Settings loading for hashgen.

Values are merged from, highest priority first:

1. keyword arguments to HashgenSettings
2. ``HASHGEN_<SECTION>__<FIELD>`` environment variables
3. ``.hashgen/config.toml`` or the ``[tool.hashgen]`` table of a
   pyproject.toml, whichever is found first walking up from the start
   directory
4. model defaults

A config file that cannot be parsed is logged and skipped; the reason is
kept on ``HashgenSettings.config_error``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .exceptions import ConfigFileError, ConfigValidationError
from .models.config import HashConfig, LoggingConfig

CONFIG_DIR_NAME = ".hashgen"
CONFIG_FILE_NAME = "config.toml"


def _get_logger():
    from ..services.logging import NullLogger
    from .container import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def _read_hashgen_table(path: Path) -> dict[str, Any]:
    """Parse path and return the part of it that configures hashgen."""
    with open(path, "rb") as f:
        data = tomllib.load(f)
    if path.name == "pyproject.toml":
        return data.get("tool", {}).get("hashgen", {})
    return data


def find_config_file(start_dir: str | None = None) -> Path | None:
    """Return the nearest hashgen config file at or above start_dir (default cwd)."""
    start = Path(start_dir) if start_dir else Path.cwd()

    for directory in (start, *start.parents):
        candidate = directory / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if candidate.exists():
            return candidate

        pyproject = directory / "pyproject.toml"
        if not pyproject.exists():
            continue
        try:
            if _read_hashgen_table(pyproject):
                return pyproject
        except (tomllib.TOMLDecodeError, OSError) as e:
            _get_logger().debug("Skipping unreadable %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Settings source backed by the hashgen table of one TOML file."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self.config_file: str | None = None
        self.config_error: str | None = None

        path = config_path or find_config_file(start_dir)
        self._values = self._load(path) if path is not None else {}

    def _load(self, path: Path) -> dict[str, Any]:
        try:
            values = _read_hashgen_table(path)
        except tomllib.TOMLDecodeError as e:
            self.config_error = f"Failed to parse config file: {e}"
        except OSError as e:
            self.config_error = f"Failed to read config file: {e}"
        else:
            self.config_file = str(path)
            return values

        _get_logger().warning("Ignoring config file %s: %s", path, self.config_error)
        return {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._values.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return dict(self._values)


# Source prepared by load_settings() for the next HashgenSettings() call
_pending_source: TomlConfigSource | None = None


class HashgenSettings(BaseSettings):
    """Merged hashgen configuration plus where it was read from."""

    model_config = SettingsConfigDict(
        env_prefix="HASHGEN_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    hash: HashConfig = HashConfig()
    logging: LoggingConfig = LoggingConfig()

    config_file: str | None = None
    config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_source = _pending_source
        if toml_source is None:
            toml_source = TomlConfigSource(settings_cls)
        return init_settings, env_settings, toml_source


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> HashgenSettings:
    """Load hashgen settings.

    Args:
        config_path: Config file to use instead of searching for one
        start_dir: Directory the search starts from (default cwd)

    Raises:
        ConfigFileError: config_path was given but does not exist
        ConfigValidationError: A value failed validation; ``key`` names it
    """
    global _pending_source

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigFileError("Config file not found", file_path=str(config_path))

    source = TomlConfigSource(HashgenSettings, config_path, start_dir)
    _pending_source = source
    try:
        settings = HashgenSettings()
    except ValidationError as e:
        error = e.errors()[0]
        key = ".".join(str(part) for part in error["loc"]) or None
        raise ConfigValidationError(
            f"Invalid configuration: {error['msg']}", key=key, cause=e
        ) from e
    finally:
        _pending_source = None

    settings.config_file = source.config_file
    settings.config_error = source.config_error
    return settings
