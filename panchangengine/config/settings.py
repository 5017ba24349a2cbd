"""Configuration models and helpers for panchangengine settings."""

from __future__ import annotations

import os
from copy import deepcopy
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

__all__ = [
    "CONFIG_FILENAME",
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "EphemerisCfg",
    "LocationCfg",
    "LoggingCfg",
    "Settings",
    "config_path",
    "default_settings",
    "get_config_home",
    "get_settings",
    "load_settings",
    "save_settings",
    "use_settings",
]


CURRENT_SETTINGS_SCHEMA_VERSION = 1

# -------------------- Settings Schema --------------------


class LocationCfg(BaseModel):
    """Reference location used when callers omit coordinates."""

    latitude: float = 28.6139
    longitude: float = 77.2090
    label: str = "New Delhi"

    @field_validator("latitude", mode="before")
    @classmethod
    def _cap_latitude(cls, value: float) -> float:
        numeric = float(value)
        return max(-90.0, min(90.0, numeric))

    @field_validator("longitude", mode="before")
    @classmethod
    def _wrap_longitude(cls, value: float) -> float:
        numeric = float(value)
        if -180.0 <= numeric <= 180.0:
            return numeric
        return ((numeric + 180.0) % 360.0) - 180.0


class EphemerisCfg(BaseModel):
    """Ephemeris source configuration."""

    source: str = "swiss"
    path: Optional[str] = None
    ayanamsa: Literal[
        "lahiri",
        "fagan_bradley",
        "krishnamurti",
        "raman",
    ] = "lahiri"


class LoggingCfg(BaseModel):
    """Logging level applied by the command line interface."""

    level: str = "WARNING"


class Settings(BaseModel):
    """Top-level settings model persisted on disk."""

    schema_version: int = Field(
        default=CURRENT_SETTINGS_SCHEMA_VERSION,
        ge=1,
        description="Version marker for persisted configuration payloads.",
    )
    language: Literal["sanskrit", "english"] = "sanskrit"
    location: LocationCfg = Field(default_factory=LocationCfg)
    ephemeris: EphemerisCfg = Field(default_factory=EphemerisCfg)
    logging: LoggingCfg = Field(default_factory=LoggingCfg)


# -------------------- Active settings --------------------

_ACTIVE_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Return the settings installed with :func:`use_settings` or the defaults.

    The library never reads the configuration file implicitly; entry points
    such as the CLI load it and install it once at start-up.
    """

    if _ACTIVE_SETTINGS is None:
        return default_settings()
    return _ACTIVE_SETTINGS


def use_settings(settings: Settings | None) -> None:
    """Install ``settings`` process-wide (``None`` restores the defaults)."""

    global _ACTIVE_SETTINGS
    _ACTIVE_SETTINGS = settings


# -------------------- I/O Helpers --------------------

CONFIG_FILENAME = "config.yaml"


def get_config_home() -> Path:
    """Return the directory where settings should be stored."""

    if os.name == "nt":
        base = Path(
            os.environ.get(
                "LOCALAPPDATA", str(Path.home() / "AppData" / "Local")
            )
        )
        return base / "panchangengine"
    return Path(
        os.environ.get("PANCHANGENGINE_HOME", str(Path.home() / ".panchangengine"))
    )


def config_path() -> Path:
    """Return the full path to the configuration file, creating directories as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    """Instantiate a Settings object populated with defaults."""

    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist the given settings to disk as YAML."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def _coerce_schema_version(raw: object) -> int:
    """Return a normalised schema version value with sane bounds."""

    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1
    return max(1, value)


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        settings = default_settings()
        save_settings(settings, source_path)
        return settings
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        raw = {}
    data = deepcopy(raw)
    data["schema_version"] = _coerce_schema_version(raw.get("schema_version"))
    return Settings(**data)
