"""
Configuration settings using pydantic-settings.

Supports configuration via environment variables and the
~/.config/termai/config.json file written by ``termai --setup``.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    SettingsError,
)

from .errors import ConfigError
from .formatter import DEFAULT_INSTRUCTION
from .xdg import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE = Path("/tmp/current_terminal.log")


class TermaiSettings(BaseSettings):
    """termai configuration settings.

    Configuration is loaded from (in order of priority):
    1. Explicit keyword arguments
    2. Environment variables (TERMAI_*)
    3. Config file (~/.config/termai/config.json)
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="TERMAI_",
        extra="ignore",
    )

    # Model backend
    default_model: Optional[str] = Field(
        default=None,
        description="llm model id (default: llm's configured default model)",
    )
    default_prompt: str = Field(
        default=DEFAULT_INSTRUCTION,
        description="Instruction sent with the terminal context",
    )
    default_blocks: int = Field(
        default=1,
        ge=1,
        description="Number of trailing command blocks to explain",
    )

    # Capture files
    log_file: Path = Field(
        default=DEFAULT_LOG_FILE,
        description="Raw terminal transcript written by script(1)",
    )
    history_file: Path = Field(
        default_factory=lambda: Path.home() / ".command_log",
        description="Command-history log written by the .bashrc DEBUG trap",
    )
    settle_delay: float = Field(
        default=0.15,
        ge=0,
        description="Seconds to wait for script(1) to flush before reading the log",
    )
    log_size_max_kb: int = Field(
        default=50,
        ge=1,
        description="Trim the transcript to half when it grows past this size",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )

    @field_validator("log_file", "history_file", mode="after")
    @classmethod
    def _expand_user(cls, value: Path) -> Path:
        return value.expanduser()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            JsonConfigSettingsSource(settings_cls, json_file=get_config_path()),
        )


def load_settings() -> TermaiSettings:
    """Load settings from environment and config file.

    Raises:
        ConfigError: If the config file is not valid JSON or holds invalid values
    """
    try:
        return TermaiSettings()
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {get_config_path()}: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
    except SettingsError as e:
        raise ConfigError(f"Cannot load settings: {e}") from e


@lru_cache
def get_settings() -> TermaiSettings:
    """Get cached settings instance.

    Returns:
        TermaiSettings instance (cached after first call)
    """
    return load_settings()


def read_config_file(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the values stored in the JSON config file.

    Environment overrides are not included. A missing file yields ``{}``.

    Raises:
        ConfigError: If the file is unreadable or not a JSON object
    """
    path = path or get_config_path()
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid configuration in {path}: expected a JSON object")
    return data


def save_settings(updates: Dict[str, Any], path: Optional[Path] = None) -> Path:
    """Merge values into the JSON config file.

    Only the file's own values and ``updates`` are written, so TERMAI_*
    overrides active in the calling process never end up in the file.

    Returns:
        Path the settings were written to
    """
    path = path or get_config_path()
    unknown = set(updates) - set(TermaiSettings.model_fields)
    if unknown:
        raise ConfigError(f"Unknown settings: {', '.join(sorted(unknown))}")
    data = read_config_file(path)
    data.update(updates)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot write {path}: {e}") from e
    logger.debug("Saved %s to %s", ", ".join(sorted(updates)), path)
    return path
