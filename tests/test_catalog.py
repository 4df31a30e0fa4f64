#!/usr/bin/env python3
"""Tests for the static vehicle catalog."""

import json

import pytest

from garage.catalog import Catalog, CatalogError, format_details, humanize_key
from garage.config import PROJECT_DIR


class TestFromFile:
    """Tests for Catalog.from_file."""

    def test_bundled_catalog_has_every_kind(self):
        catalog = Catalog.from_file(PROJECT_DIR / "data" / "catalog.json")
        for catalog_id in range(1, 7):
            assert catalog.lookup(catalog_id) is not None

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError, match="not found"):
            Catalog.from_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{oops")
        with pytest.raises(CatalogError, match="not valid JSON"):
            Catalog.from_file(path)

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text('{"id": 1}')
        with pytest.raises(CatalogError, match="array"):
            Catalog.from_file(path)


class TestLookup:
    """Tests for Catalog.lookup."""

    def setup_method(self):
        self.catalog = Catalog([{"id": 1, "category": "Sedan"}, {"id": 2, "category": "Truck"}])

    def test_by_int_and_str(self):
        assert self.catalog.lookup(2)["category"] == "Truck"
        assert self.catalog.lookup("1")["category"] == "Sedan"

    def test_unknown_id(self):
        assert self.catalog.lookup(99) is None

    @pytest.mark.parametrize("bad_id", ["abc", 1.9, True, "1.0", None, float("inf")])
    def test_invalid_id(self, bad_id):
        with pytest.raises(CatalogError):
            self.catalog.lookup(bad_id)

    def test_integral_float(self):
        assert self.catalog.lookup(2.0)["category"] == "Truck"


class TestFormatting:
    """Tests for humanize_key and format_details."""

    @pytest.mark.parametrize(
        "key, expected",
        [("topSpeed", "Top speed"), ("recall_pending", "Recall pending"), ("category", "Category")],
    )
    def test_humanize_key(self, key, expected):
        assert humanize_key(key) == expected

    def test_format_details(self):
        entry = json.loads(
            '{"id": 3, "topSpeed": "900 km/h", "recall_pending": true, "fuelType": null, "notes": ""}'
        )
        assert format_details(entry) == [
            ("Top speed", "900 km/h"),
            ("Recall pending", "Yes"),
            ("Fuel type", "Not provided"),
            ("Notes", "Not provided"),
        ]
