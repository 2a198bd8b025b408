"""Utility functions for the project tracker."""

import sys
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from pathlib import Path
from typing import Final

#: The application name, used for per-user directories.
APP_NAME: Final[str] = "Project Tracker"

#: Fixed-point values are kept at exactly two fractional digits.
FIXED_POINT_QUANTUM: Final[Decimal] = Decimal("0.01")


def to_fixed_point(value: Decimal | float | str) -> Decimal:
    """
    Convert a number to a :class:`~decimal.Decimal` with two fractional digits.

    Floats are converted through their shortest ``repr`` so ``0.1`` becomes
    ``Decimal("0.10")`` rather than its binary expansion.  Extra digits are
    rounded half up.

    Args:
        value: The value to convert

    Raises:
        ValueError: ``value`` is not a finite number

    Returns:
        The quantized decimal

    """
    if isinstance(value, bool):
        msg = f"{value!r} is not a valid decimal number"
        raise ValueError(msg)
    if isinstance(value, float):
        value = repr(value)
    try:
        number = Decimal(value)
    except (InvalidOperation, TypeError):
        msg = f"{value!r} is not a valid decimal number"
        raise ValueError(msg) from None
    if not number.is_finite():
        msg = f"{value!r} is not a valid decimal number"
        raise ValueError(msg)
    return number.quantize(FIXED_POINT_QUANTUM, rounding=ROUND_HALF_UP)


def get_app_dir() -> Path:
    """
    Get the per-user application directory.

    - On Windows: ``AppData/Local/Project Tracker``
    - On macOS: ``~/Library/Application Support/Project Tracker``
    - On Linux: ``~/.config/Project Tracker``
    - If the platform is not supported, raise a ValueError.

    Returns:
        Path to the application directory (not created)

    """
    if sys.platform not in ["win32", "darwin", "linux"]:
        msg = f"Unsupported platform: {sys.platform}"
        raise ValueError(msg)
    if sys.platform == "win32":
        return Path.home() / "AppData" / "Local" / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    return Path.home() / ".config" / APP_NAME
