"""Small demonstration harness: add a scalar to a vector and normalize it."""
from __future__ import annotations

import argparse
import dataclasses
import logging
from typing import Optional, Sequence

from .config import DisplayConfig, load_config_from_env
from .formatting import describe
from .vector import Vector3


LOGGER = logging.getLogger(__name__)


def non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not a valid integer") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("Precision must be non-negative")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Build a vector, add a scalar to every component, normalize the "
            "result and print it together with its length."
        )
    )
    # Input vector
    parser.add_argument("--x", type=float, default=4.0, help="X component (default: 4.0).")
    parser.add_argument("--y", type=float, default=5.0, help="Y component (default: 5.0).")
    parser.add_argument("--z", type=float, default=6.0, help="Z component (default: 6.0).")
    parser.add_argument(
        "--add",
        type=float,
        default=3.0,
        metavar="SCALAR",
        help="Scalar added to each component before normalizing (default: 3).",
    )
    # Output
    parser.add_argument(
        "--precision",
        type=non_negative_int,
        default=None,
        metavar="DIGITS",
        help="Decimals printed per component (overrides VECTOR3_PRECISION).",
    )
    parser.add_argument(
        "--no-length",
        action="store_true",
        help="Do not print the length line (overrides VECTOR3_SHOW_LENGTH).",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def apply_overrides(config: DisplayConfig, args: argparse.Namespace) -> DisplayConfig:
    """Fold command line flags on top of the environment derived config."""

    if args.precision is not None:
        config = dataclasses.replace(config, precision=args.precision)
    if args.no_length:
        config = dataclasses.replace(config, show_length=False)
    return config


def run(args: argparse.Namespace, config: DisplayConfig) -> Vector3:
    # //1.- Construct the input vector and shift every component by the scalar.
    start = Vector3(args.x, args.y, args.z)
    LOGGER.debug("Input vector: %r", start)
    shifted = start.add(args.add)
    LOGGER.debug("After adding %s: %r (length %s)", args.add, shifted, shifted.length())
    # //2.- Normalize without guarding against zero length; NaN is a valid outcome.
    result = shifted.norm()
    LOGGER.debug("Normalized: %r", result)
    print(describe(result, config))
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console script entry point invoked via ``vector3-demo`` or ``python -m``."""

    parser = build_parser()
    args = parser.parse_args(argv)
    # //1.- Resolve environment settings, reporting malformed values as usage errors.
    try:
        config = apply_overrides(load_config_from_env(), args)
    except ValueError as exc:
        parser.error(str(exc))
    # //2.- Enable a default logging configuration suitable for terminal output.
    logging.basicConfig(level=config.log_level, format="[%(asctime)s] %(levelname)s %(message)s")
    run(args, config)
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via ``python -m`` execution
    raise SystemExit(main())
