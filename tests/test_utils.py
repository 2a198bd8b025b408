"""Unit tests for utility functions."""

import sys
from decimal import Decimal
from pathlib import Path

import pytest

from projtracker.utils import get_app_dir, to_fixed_point


class TestToFixedPoint:
    """Test cases for to_fixed_point()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Decimal("10"), Decimal("10.00")),
            ("2.5", Decimal("2.50")),
            (3, Decimal("3.00")),
            (0.1, Decimal("0.10")),
            ("1.005", Decimal("1.01")),
            (" 7.25 ", Decimal("7.25")),
        ],
    )
    def test_quantizes_to_two_digits(self, value, expected):
        """Test values come back with exactly two fractional digits."""
        result = to_fixed_point(value)
        assert result == expected
        assert result.as_tuple().exponent == -2

    @pytest.mark.parametrize("value", ["abc", "", "NaN", "Infinity", True, None])
    def test_rejects_non_numbers(self, value):
        """Test non-numeric and non-finite values raise ValueError."""
        with pytest.raises(ValueError, match="not a valid decimal number"):
            to_fixed_point(value)


class TestGetAppDir:
    """Test cases for get_app_dir()."""

    def test_returns_path_on_darwin(self, monkeypatch):
        """Test returns correct path on macOS."""
        monkeypatch.setattr(sys, "platform", "darwin")
        app_dir = get_app_dir()
        assert isinstance(app_dir, Path)
        assert "Application Support" in str(app_dir)
        assert app_dir.name == "Project Tracker"

    def test_returns_path_on_linux(self, monkeypatch):
        """Test returns correct path on Linux."""
        monkeypatch.setattr(sys, "platform", "linux")
        app_dir = get_app_dir()
        assert ".config" in str(app_dir)
        assert app_dir.name == "Project Tracker"

    def test_returns_path_on_windows(self, monkeypatch):
        """Test returns correct path on Windows."""
        monkeypatch.setattr(sys, "platform", "win32")
        app_dir = get_app_dir()
        assert "AppData" in str(app_dir)
        assert "Local" in str(app_dir)

    def test_raises_value_error_for_unsupported_platform(self, monkeypatch):
        """Test raises ValueError for unsupported platform."""
        monkeypatch.setattr(sys, "platform", "unsupported")
        with pytest.raises(ValueError, match="Unsupported platform"):
            get_app_dir()
