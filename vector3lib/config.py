"""Environment driven display settings for vector diagnostics."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


LOGGER = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class DisplayConfig:
    """Resolved settings controlling how vectors are printed."""

    # //1.- Decimal places rendered for each component.
    precision: int = 4
    # //2.- Append the vector length below the components when printing.
    show_length: bool = True
    # //3.- Level handed to ``logging.basicConfig`` by the demo program.
    log_level: str = "INFO"


def _parse_precision(raw: str) -> int:
    try:
        precision = int(raw)
    except ValueError as exc:
        raise ValueError(f"VECTOR3_PRECISION must be an integer, got {raw!r}") from exc
    if precision < 0:
        raise ValueError("VECTOR3_PRECISION must be non-negative")
    return precision


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"VECTOR3_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {raw!r}")
    return level


def load_config_from_env(env: Optional[Mapping[str, str]] = None) -> DisplayConfig:
    """Construct a :class:`DisplayConfig` instance from environment variables."""

    # //1.- Allow dependency injection during testing by accepting a custom mapping.
    source = env if env is not None else os.environ
    defaults = DisplayConfig()
    # //2.- Only override the defaults for variables that are actually set.
    precision = defaults.precision
    if "VECTOR3_PRECISION" in source:
        precision = _parse_precision(source["VECTOR3_PRECISION"])
    show_length = defaults.show_length
    if "VECTOR3_SHOW_LENGTH" in source:
        show_length = _parse_bool("VECTOR3_SHOW_LENGTH", source["VECTOR3_SHOW_LENGTH"])
    log_level = defaults.log_level
    if "VECTOR3_LOG_LEVEL" in source:
        log_level = _parse_log_level(source["VECTOR3_LOG_LEVEL"])
    config = DisplayConfig(precision=precision, show_length=show_length, log_level=log_level)
    LOGGER.debug("Resolved display config: %s", config)
    return config
