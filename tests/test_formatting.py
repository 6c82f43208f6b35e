"""Tests for the diagnostic vector rendering."""
from __future__ import annotations

import math

from vector3lib.config import DisplayConfig
from vector3lib.formatting import describe, format_components
from vector3lib.vector import Vector3


def test_format_components_uses_fixed_precision() -> None:
    assert format_components(Vector3(1.0, -2.5, 0.125), precision=2) == "(1.00, -2.50, 0.12)"


def test_format_components_renders_non_finite_values() -> None:
    assert format_components(Vector3(math.nan, math.inf, -math.inf)) == "(nan, inf, -inf)"


def test_describe_includes_length_by_default() -> None:
    text = describe(Vector3(3.0, 4.0, 0.0))
    assert text.splitlines() == ["Vector3(x=3.0000, y=4.0000, z=0.0000)", "len: 5.0000"]


def test_describe_respects_config() -> None:
    config = DisplayConfig(precision=1, show_length=False)
    assert describe(Vector3(0.25, 1.0, 2.0), config) == "Vector3(x=0.2, y=1.0, z=2.0)"


def test_describe_zero_vector_normalization() -> None:
    text = describe(Vector3.zero().norm())
    assert text == "Vector3(x=nan, y=nan, z=nan)\nlen: nan"
