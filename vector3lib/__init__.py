"""Single-precision 3D vector arithmetic.

The package is intentionally tiny: one immutable value type plus the
helpers needed to configure and print it for quick manual checks.
"""

from .vector import DEFAULT_TOLERANCE, Vector3
from .config import DisplayConfig, load_config_from_env
from .formatting import describe, format_components

__all__ = [
    "Vector3",
    "DEFAULT_TOLERANCE",
    "DisplayConfig",
    "load_config_from_env",
    "describe",
    "format_components",
]
