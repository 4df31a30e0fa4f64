#!/usr/bin/env python3
"""Tests for MaintenanceRecord and its sorting helpers."""

from datetime import date, datetime

import pytest

from garage import MaintenanceRecord, MaintenanceValidationError, sort_history, sort_upcoming

TODAY = date(2025, 6, 15)


class TestMaintenanceRecord:
    """Tests for MaintenanceRecord construction."""

    def test_parses_iso_date_and_cost(self):
        record = MaintenanceRecord("2025-01-15", "Oil change", "450")
        assert record.date == date(2025, 1, 15)
        assert record.cost == 450.0
        assert record.description is None

    def test_accepts_date_and_datetime(self):
        assert MaintenanceRecord(date(2025, 1, 15), "Oil", 1).date == date(2025, 1, 15)
        assert MaintenanceRecord(datetime(2025, 1, 15, 9, 30), "Oil", 1).date == date(2025, 1, 15)

    def test_strips_text(self):
        record = MaintenanceRecord("2025-01-15", "  Tires ", 100, "  front pair ")
        assert record.service_type == "Tires"
        assert record.description == "front pair"

    def test_blank_description_is_none(self):
        assert MaintenanceRecord("2025-01-15", "Tires", 100, "   ").description is None

    @pytest.mark.parametrize(
        "bad_date", ["", "not-a-date", None, "2025-13-40", "2025", "2025-06", "2025-W24-1", "20250615"]
    )
    def test_invalid_date_raises(self, bad_date):
        with pytest.raises(MaintenanceValidationError):
            MaintenanceRecord(bad_date, "Oil", 10)

    def test_date_with_time_part(self):
        assert MaintenanceRecord("2025-01-15T09:30:00", "Oil", 10).date == date(2025, 1, 15)

    @pytest.mark.parametrize(
        "bad_cost", ["abc", -1, True, float("nan"), None, "inf", "1e400", float("inf")]
    )
    def test_invalid_cost_raises(self, bad_cost):
        with pytest.raises(MaintenanceValidationError):
            MaintenanceRecord("2025-01-15", "Oil", bad_cost)

    def test_missing_type_raises(self):
        with pytest.raises(MaintenanceValidationError):
            MaintenanceRecord("2025-01-15", "  ", 10)

    def test_format(self):
        record = MaintenanceRecord("2025-01-15", "Oil change", 1450, "synthetic")
        assert record.format() == "2025-01-15 - Oil change - $1,450.00 (synthetic)"


class TestClassification:
    """A record is upcoming only when dated strictly after today."""

    def test_today_is_history(self):
        record = MaintenanceRecord(TODAY, "Oil", 10)
        assert record.is_history(TODAY)
        assert not record.is_upcoming(TODAY)

    def test_yesterday_is_history(self):
        assert MaintenanceRecord("2025-06-14", "Oil", 10).is_history(TODAY)

    def test_tomorrow_is_upcoming(self):
        assert MaintenanceRecord("2025-06-16", "Oil", 10).is_upcoming(TODAY)


class TestSorting:
    """Tests for sort_history and sort_upcoming."""

    def setup_method(self):
        self.records = [
            MaintenanceRecord("2025-03-01", "B", 1),
            MaintenanceRecord("2025-07-01", "D", 1),
            MaintenanceRecord("2025-05-01", "C", 1),
            MaintenanceRecord("2025-06-20", "E", 1),
            MaintenanceRecord("2025-01-01", "A", 1),
        ]

    def test_history_most_recent_first(self):
        assert [r.service_type for r in sort_history(self.records, TODAY)] == ["C", "B", "A"]

    def test_upcoming_soonest_first(self):
        assert [r.service_type for r in sort_upcoming(self.records, TODAY)] == ["E", "D"]


class TestPersistable:
    """Tests for to_persistable / from_persistable."""

    def test_round_trip(self):
        record = MaintenanceRecord("2025-01-15", "Oil change", 450, "synthetic")
        assert MaintenanceRecord.from_persistable(record.to_persistable()) == record

    def test_description_omitted_when_none(self):
        assert MaintenanceRecord("2025-01-15", "Oil", 10).to_persistable() == {
            "date": "2025-01-15",
            "type": "Oil",
            "cost": 10.0,
        }

    def test_non_dict_raises(self):
        with pytest.raises(MaintenanceValidationError):
            MaintenanceRecord.from_persistable(["2025-01-15"])
