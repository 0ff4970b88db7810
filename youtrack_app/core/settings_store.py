"""Load connection/report settings from YAML (with fallbacks)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytz
import yaml

from .config import TIMEZONE, ReportSettings

logger = logging.getLogger(__name__)

SETTINGS_FILE = "youtrack.yaml"


def checked_timezone(name: str | None) -> str:
    """Return ``name`` if pytz knows it, else the default zone."""
    if not name:
        return TIMEZONE
    try:
        pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        logger.warning("Unknown timezone %r, using %s", name, TIMEZONE)
        return TIMEZONE
    return name


def settings_from_mapping(data: Mapping[str, Any] | None) -> ReportSettings:
    """Build settings from a flat mapping (YAML section or Streamlit secrets)."""
    defaults = ReportSettings()
    data = data or {}
    timeout = data.get("timeout")
    try:
        timeout = float(timeout) if timeout is not None else defaults.timeout
    except (TypeError, ValueError):
        timeout = defaults.timeout
    return ReportSettings(
        remote_host=data.get("host") or defaults.remote_host,
        auth_token=data.get("token") or defaults.auth_token,
        link_base=data.get("link_base") or defaults.link_base,
        timezone=checked_timezone(data.get("timezone")),
        timeout=timeout,
        default_fields=data.get("fields") or defaults.default_fields,
    )


def load_settings(base_path: str | Path | None = None) -> ReportSettings:
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / SETTINGS_FILE if base.is_dir() else base
    if not yaml_path.exists():
        return ReportSettings()
    try:
        data = yaml.safe_load(yaml_path.read_text()) or {}
    except yaml.YAMLError as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", yaml_path, exc)
        return ReportSettings()
    section = data.get("youtrack", data) if isinstance(data, dict) else {}
    return settings_from_mapping(section if isinstance(section, dict) else {})
