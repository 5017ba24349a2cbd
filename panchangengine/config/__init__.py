"""Configuration helpers exposed at :mod:`panchangengine.config`."""

from __future__ import annotations

from .settings import (
    EphemerisCfg,
    LocationCfg,
    LoggingCfg,
    Settings,
    config_path,
    default_settings,
    get_config_home,
    get_settings,
    load_settings,
    save_settings,
    use_settings,
)

__all__ = [
    "Settings",
    "LocationCfg",
    "EphemerisCfg",
    "LoggingCfg",
    "config_path",
    "get_config_home",
    "get_settings",
    "default_settings",
    "load_settings",
    "save_settings",
    "use_settings",
]
