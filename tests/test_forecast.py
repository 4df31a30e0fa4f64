#!/usr/bin/env python3
"""Tests for summarize_forecast."""

from garage.forecast import DailyForecast, summarize_forecast


def entry(dt_txt, temp, description="clear sky", icon="01d"):
    return {
        "dt_txt": dt_txt,
        "main": {"temp": temp},
        "weather": [{"description": description, "icon": icon}],
    }


class TestSummarizeForecast:
    """Tests for grouping forecast entries by day."""

    def test_groups_by_day_with_min_max(self):
        payload = {
            "list": [
                entry("2025-06-15 09:00:00", 18.26),
                entry("2025-06-15 12:00:00", 24.04, "few clouds", "02d"),
                entry("2025-06-15 15:00:00", 22.5),
                entry("2025-06-16 09:00:00", 15.0, "light rain", "10d"),
            ]
        }
        days = summarize_forecast(payload)
        assert days[0] == DailyForecast("2025-06-15", 18.3, 24.0, "Few clouds", "02d")
        assert days[1].date == "2025-06-16"
        assert days[1].temp_min == days[1].temp_max == 15.0

    def test_uses_middle_entry_without_noon(self):
        payload = {
            "list": [
                entry("2025-06-15 15:00:00", 20, "a"),
                entry("2025-06-15 18:00:00", 19, "b"),
                entry("2025-06-15 21:00:00", 17, "c"),
            ]
        }
        assert summarize_forecast(payload)[0].description == "B"

    def test_skips_malformed_entries(self):
        payload = {"list": [{"dt_txt": "2025-06-15 12:00:00"}, entry("2025-06-15 15:00:00", 20)]}
        days = summarize_forecast(payload)
        assert len(days) == 1
        assert days[0].temp_max == 20

    def test_skips_entries_with_non_object_weather(self):
        payload = {
            "list": [
                {"dt_txt": "2025-06-15 12:00:00", "main": {"temp": 20}, "weather": ["rain"]},
                {"dt_txt": "2025-06-15 15:00:00", "main": {"temp": 22}, "weather": [None]},
            ]
        }
        assert summarize_forecast(payload) == []

    def test_empty_payloads(self):
        assert summarize_forecast({}) == []
        assert summarize_forecast({"list": []}) == []
        assert summarize_forecast(None) == []
