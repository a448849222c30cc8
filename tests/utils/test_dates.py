"""Tests for utils/dates.py - event date handling."""

from datetime import date, datetime, timezone

import pytest

from utils.dates import TBD, now_utc, normalize_event_date, sort_event_dates


class TestNowUtc:
    """Tests for now_utc()."""

    def test_returns_aware_utc(self):
        assert now_utc().tzinfo == timezone.utc


class TestNormalizeEventDate:
    """Tests for normalize_event_date()."""

    def test_iso_date_unchanged(self):
        assert normalize_event_date("2025-03-10") == "2025-03-10"

    def test_iso_datetime_keeps_date(self):
        assert normalize_event_date("2025-03-10T14:30:00Z") == "2025-03-10"

    def test_date_objects(self):
        assert normalize_event_date(date(2025, 3, 10)) == "2025-03-10"
        assert normalize_event_date(datetime(2025, 3, 10, 9, 0)) == "2025-03-10"

    @pytest.mark.parametrize("value", [None, "", "   ", "TBD", "tbd"])
    def test_blank_and_tbd(self, value):
        assert normalize_event_date(value) == TBD

    def test_invalid_rejected(self):
        with pytest.raises(ValueError, match="Invalid event date"):
            normalize_event_date("next tuesday")


class TestSortEventDates:
    """Tests for sort_event_dates()."""

    def test_chronological_with_tbd_last(self):
        dates = ["TBD", "2025-05-01", "2025-03-01", "2025-05-01"]
        assert sort_event_dates(dates) == ["2025-03-01", "2025-05-01", "TBD"]

    def test_empty(self):
        assert sort_event_dates([]) == []

    def test_non_string_rejected(self):
        with pytest.raises(ValueError, match="Invalid event date"):
            normalize_event_date(20250310)
