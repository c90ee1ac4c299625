"""Unit tests for parsing of identifiers and local date-times."""

from datetime import datetime

import pytest
from hypothesis import given
from hypothesis import strategies as st

from casework.domain.errors import UnparsableValueError
from casework.domain.parsing import (
    format_local_datetime,
    parse_identifier,
    parse_local_datetime,
    parse_text,
    try_parse_identifier,
)

CANONICAL = "0b9f3f6e-5c1a-4d3e-9a57-1f2e3d4c5b6a"

# pylint: disable=magic-value-comparison


def test_parse_text_is_identity():
    """Free text is taken as given, whitespace included."""
    assert parse_text("  Open ") == "  Open "


class TestIdentifiers:
    """Identifier parsing."""

    @staticmethod
    @pytest.mark.parametrize(
        "raw",
        [
            CANONICAL,
            CANONICAL.upper(),
            CANONICAL.replace("-", ""),
            f"  {CANONICAL}\n",
        ],
    )
    def test_accepted_forms_canonicalize(raw):
        """Case, hyphens and padding do not matter; output is canonical."""
        assert try_parse_identifier(raw) == CANONICAL
        assert parse_identifier(raw) == CANONICAL

    @staticmethod
    @pytest.mark.parametrize("raw", ["", "abc", "CASE-2024-0001", "1234", None])
    def test_non_identifiers(raw):
        """Non-identifiers give None from the lenient parser."""
        assert try_parse_identifier(raw) is None

    @staticmethod
    def test_strict_parser_raises():
        """The strict parser rejects non-identifiers with an invalid-argument error."""
        with pytest.raises(UnparsableValueError) as exc:
            parse_identifier("not-an-id")
        assert exc.value.expected == "identifier"
        assert exc.value.value == "not-an-id"

    @staticmethod
    @given(st.uuids())
    def test_any_uuid_round_trips(value):
        """Every UUID's string form parses back to itself."""
        assert parse_identifier(str(value)) == str(value)


class TestLocalDateTimes:
    """Local date-time parsing and formatting."""

    @staticmethod
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("2024-05-01T09:30:00", datetime(2024, 5, 1, 9, 30, 0)),
            ("2024-05-01T09:30", datetime(2024, 5, 1, 9, 30, 0)),
            ("2024-05-01T09:30:15.999", datetime(2024, 5, 1, 9, 30, 15)),
            (" 2024-05-01T09:30:15 ", datetime(2024, 5, 1, 9, 30, 15)),
            ("2024-05-01t09:30:15", datetime(2024, 5, 1, 9, 30, 15)),
            ("2024-05-01T09:30:15.123456789", datetime(2024, 5, 1, 9, 30, 15)),
        ],
    )
    def test_accepted(raw, expected):
        """Seconds are optional and fractions are truncated."""
        assert parse_local_datetime(raw) == expected

    @staticmethod
    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "2024-05-01",
            "2024-05-01 09:30:00",
            "2024-05-01T09:30:00+02:00",
            "2024-05-01T09:30:00Z",
            "20240501T093000",
            "2024-05-01T0930",
            "2024-W18-3T09:30:00",
            "2024-05-01T09",
            "2024-13-01T09:30:00",
            "yesterday",
        ],
    )
    def test_rejected(raw):
        """Date-only, space-separated, zoned, basic-form and invalid values are rejected."""
        with pytest.raises(UnparsableValueError) as exc:
            parse_local_datetime(raw)
        assert exc.value.expected == "date"

    @staticmethod
    def test_format_none_passes_through():
        """A missing date-time renders as None."""
        assert format_local_datetime(None) is None

    @staticmethod
    def test_format_drops_fraction():
        """Formatting always gives YYYY-MM-DDTHH:MM:SS."""
        value = datetime(2024, 1, 2, 3, 4, 5, 678)
        assert format_local_datetime(value) == "2024-01-02T03:04:05"

    @staticmethod
    @given(
        st.datetimes(
            min_value=datetime(1000, 1, 1), max_value=datetime(9999, 12, 31)
        )
    )
    def test_format_then_parse_truncates_to_seconds(value):
        """Formatted values parse back to the same second."""
        parsed = parse_local_datetime(format_local_datetime(value))
        assert parsed == value.replace(microsecond=0)
