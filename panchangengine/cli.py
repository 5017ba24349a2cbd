"""Typer application for the panchangengine command line."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Optional

import typer
from typer.main import get_command

from .boot import configure_logging
from .config import get_config_home, get_settings, load_settings, use_settings
from .config.settings import CONFIG_FILENAME
from .utils.i18n import normalize_language
from .vedic import (
    calculate_accurate_panchang,
    calculate_accurate_shiv_vaas,
    calculate_accurate_tithi,
    calculate_accurate_tithi_at_time,
    calculate_shiv_vaas,
    get_shiva_puja_time,
)

LOG = logging.getLogger(__name__)

__all__ = ["app", "console_main", "main"]


app = typer.Typer(help="Panchang, Shiv Vaas and puja timing calculators.")


def _parse_moment(value: str | None, *, option: str) -> datetime | None:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(
            f"Invalid ISO 8601 timestamp '{value}'", param_hint=option
        ) from exc


def _resolve_inputs(
    date: str | None,
    lat: float | None,
    lon: float | None,
    language: str | None,
) -> tuple[datetime, float, float, str]:
    settings = get_settings()
    moment = _parse_moment(date, option="--date") or datetime.now(UTC)
    latitude = settings.location.latitude if lat is None else lat
    longitude = settings.location.longitude if lon is None else lon
    try:
        lang = normalize_language(language or settings.language)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--language") from exc
    return moment, latitude, longitude, lang


def _emit(payload: Mapping[str, object], json_output: bool) -> None:
    if json_output:
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    for key, value in payload.items():
        if isinstance(value, Mapping):
            value = ", ".join(f"{k}={v}" for k, v in value.items())
        elif isinstance(value, list):
            value = "; ".join(str(item) for item in value)
        typer.echo(f"{key}: {value}")


_DATE_OPTION = typer.Option(None, "--date", metavar="ISO", help="Date/time (default: now, UTC).")
_LAT_OPTION = typer.Option(None, "--lat", help="Latitude in degrees (default from settings).")
_LON_OPTION = typer.Option(None, "--lon", help="Longitude in degrees (default from settings).")
_LANGUAGE_OPTION = typer.Option(None, "--language", help="sanskrit or english.")
_AT_OPTION = typer.Option(None, "--at", metavar="ISO", help="Sample the Moon and Sun at this time.")
_JSON_OPTION = typer.Option(False, "--json", help="Emit the result as JSON.")


@app.callback()
def _bootstrap(
    config: Optional[Path] = typer.Option(
        None, "--config", help="Settings YAML file (default: the config home)."
    ),
) -> None:
    """Load settings and configure logging before executing subcommands."""

    path = config or (get_config_home() / CONFIG_FILENAME)
    if config is not None or path.exists():
        use_settings(load_settings(path))
    configure_logging()
    LOG.debug("Using settings from %s", path if path.exists() else "defaults")


@app.command("panchang")
def panchang_command(
    date: Optional[str] = _DATE_OPTION,
    lat: Optional[float] = _LAT_OPTION,
    lon: Optional[float] = _LON_OPTION,
    language: Optional[str] = _LANGUAGE_OPTION,
    at: Optional[str] = _AT_OPTION,
    json_output: bool = _JSON_OPTION,
) -> None:
    """Print the daily panchang."""

    moment, latitude, longitude, lang = _resolve_inputs(date, lat, lon, language)
    result = calculate_accurate_panchang(
        moment, latitude, longitude, lang, _parse_moment(at, option="--at")
    )
    _emit(result.to_payload(), json_output)


@app.command("tithi")
def tithi_command(
    date: Optional[str] = _DATE_OPTION,
    lat: Optional[float] = _LAT_OPTION,
    lon: Optional[float] = _LON_OPTION,
    language: Optional[str] = _LANGUAGE_OPTION,
    at: Optional[str] = _AT_OPTION,
    json_output: bool = _JSON_OPTION,
) -> None:
    """Print the tithi at sunrise, or at ``--at`` when given."""

    moment, latitude, longitude, lang = _resolve_inputs(date, lat, lon, language)
    specific = _parse_moment(at, option="--at")
    if specific is not None:
        result = calculate_accurate_tithi_at_time(moment, latitude, longitude, specific, lang)
    else:
        result = calculate_accurate_tithi(moment, latitude, longitude, lang)
    _emit(result.to_payload(), json_output)


@app.command("shiv-vaas")
def shiv_vaas_command(
    date: Optional[str] = _DATE_OPTION,
    lat: Optional[float] = _LAT_OPTION,
    lon: Optional[float] = _LON_OPTION,
    language: Optional[str] = _LANGUAGE_OPTION,
    at: Optional[str] = _AT_OPTION,
    accurate: bool = typer.Option(
        False, "--accurate", help="Report Shiva's abode instead of fasting observances."
    ),
    json_output: bool = _JSON_OPTION,
) -> None:
    """Print the Shiv Vaas for the day."""

    moment, latitude, longitude, lang = _resolve_inputs(date, lat, lon, language)
    if accurate:
        result = calculate_accurate_shiv_vaas(
            moment, latitude, longitude, lang, _parse_moment(at, option="--at")
        )
    else:
        result = calculate_shiv_vaas(moment, lang)
    _emit(result.to_payload(), json_output)


@app.command("puja-time")
def puja_time_command(
    date: Optional[str] = _DATE_OPTION,
    language: Optional[str] = _LANGUAGE_OPTION,
    json_output: bool = _JSON_OPTION,
) -> None:
    """Print the Shiva worship period for the given time of day."""

    moment, _lat, _lon, lang = _resolve_inputs(date, None, None, language)
    _emit(get_shiva_puja_time(moment, lang).to_payload(), json_output)


def main(argv: Sequence[str] | None = None) -> int:
    """Invoke the Typer application and return its exit code.

    The command runs in standalone mode so usage errors are rendered and
    mapped to exit codes by Typer itself; the resulting ``SystemExit`` is
    converted back into a return value.
    """

    command = get_command(app)
    args = list(argv) if argv is not None else None
    try:
        command.main(args=args, prog_name="panchangengine", standalone_mode=True)
    except SystemExit as exc:
        if isinstance(exc.code, str):
            typer.echo(exc.code, err=True)
            return 1
        return int(exc.code or 0)
    return 0


def console_main() -> None:
    raise SystemExit(main())
