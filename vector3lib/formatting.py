"""Human readable rendering used for manual smoke testing."""
from __future__ import annotations

from typing import Optional

from .config import DisplayConfig
from .vector import Vector3


def _format_component(value: float, precision: int) -> str:
    # Fixed-point formatting already renders "nan", "inf" and "-inf".
    return f"{float(value):.{precision}f}"


def format_components(vector: Vector3, precision: int = 4) -> str:
    return "(" + ", ".join(_format_component(c, precision) for c in vector) + ")"


def describe(vector: Vector3, config: Optional[DisplayConfig] = None) -> str:
    """Render ``vector`` as ``Vector3(x=.., y=.., z=..)`` plus an optional length line."""

    config = config or DisplayConfig()
    x, y, z = (_format_component(c, config.precision) for c in vector)
    text = f"Vector3(x={x}, y={y}, z={z})"
    if config.show_length:
        text += f"\nlen: {_format_component(vector.length(), config.precision)}"
    return text
