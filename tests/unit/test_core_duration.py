"""Unit tests for duration expression parsing.

Tests cover:
- Human-readable unit expressions (singular, plural, abbreviated)
- Numeric seconds (int, float, numeric strings)
- timedelta passthrough
- Rejection of malformed, unknown-unit and non-positive values
- Rejection of durations beyond MAX_DURATION or outside the timedelta range
"""

from datetime import UTC, datetime, timedelta

import pytest

from src.core.duration import MAX_DURATION, parse_duration


@pytest.mark.unit
class TestParseDurationValid:
    """Test accepted duration expressions."""

    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            ("1 minute", timedelta(minutes=1)),
            ("90 minutes", timedelta(minutes=90)),
            ("2years", timedelta(days=730.5)),
            ("1 year", timedelta(days=365.25)),
            ("30d", timedelta(days=30)),
            ("1.5h", timedelta(hours=1.5)),
            ("2 weeks", timedelta(weeks=2)),
            ("1 month", timedelta(days=30)),
            ("500ms", timedelta(milliseconds=500)),
            ("  45 SECONDS  ", timedelta(seconds=45)),
        ],
    )
    def test_unit_expressions(self, expression, expected):
        """Test unit strings convert to the expected timedelta."""
        assert parse_duration(expression) == expected

    def test_numeric_string_is_seconds(self):
        """Test a bare number string is read as seconds."""
        assert parse_duration("3600") == timedelta(hours=1)

    def test_int_and_float_are_seconds(self):
        """Test numbers are read as seconds."""
        assert parse_duration(60) == timedelta(minutes=1)
        assert parse_duration(0.5) == timedelta(milliseconds=500)

    def test_timedelta_passthrough(self):
        """Test timedelta input is returned unchanged."""
        ttl = timedelta(days=3)

        assert parse_duration(ttl) is ttl


@pytest.mark.unit
class TestParseDurationInvalid:
    """Test rejected duration expressions."""

    @pytest.mark.parametrize(
        "expression",
        ["", "abc", "1 fortnight", "-5 minutes", "1 year ago", "1.2.3s"],
    )
    def test_malformed_strings_raise(self, expression):
        """Test malformed expressions raise ValueError."""
        with pytest.raises(ValueError):
            parse_duration(expression)

    @pytest.mark.parametrize("value", [0, "0", "0 seconds", timedelta(0), -10])
    def test_non_positive_durations_raise(self, value):
        """Test zero and negative durations are rejected."""
        with pytest.raises(ValueError, match="positive|Invalid"):
            parse_duration(value)

    @pytest.mark.parametrize("value", [None, True, [1], object()])
    def test_unsupported_types_raise(self, value):
        """Test non-duration types are rejected."""
        with pytest.raises(ValueError):
            parse_duration(value)

    @pytest.mark.parametrize(
        "value", ["9999999999 years", "9" * 400, float("inf"), 10**20]
    )
    def test_out_of_range_values_raise_value_error(self, value):
        """Test values too large for timedelta raise ValueError, not OverflowError."""
        with pytest.raises(ValueError, match="out of range"):
            parse_duration(value)

    @pytest.mark.parametrize(
        "value", ["9000 years", "1001 years", MAX_DURATION + timedelta(seconds=1)]
    )
    def test_durations_beyond_cap_raise(self, value):
        """Test lifetimes whose expiry datetime could overflow are rejected."""
        with pytest.raises(ValueError, match="exceeds"):
            parse_duration(value)

    def test_cap_itself_is_accepted(self):
        """Test the longest accepted lifetime still yields a valid expiry."""
        # Act
        ttl = parse_duration("1000 years")

        # Assert
        assert ttl == MAX_DURATION
        assert datetime.now(UTC) + ttl > datetime.now(UTC)
