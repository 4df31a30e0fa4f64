#!/usr/bin/env python3
"""Tests for Garage slots and whole-garage persistence."""

import json

import pytest

from garage import (
    Car,
    Garage,
    GarageSession,
    JsonFileStorage,
    Level,
    MemoryStorage,
    MusicTrack,
    Plane,
    Truck,
    VehicleKind,
)

KEY = "virtualGarage"


class TestSlots:
    """Tests for get/set."""

    def test_starts_empty(self):
        garage = Garage()
        assert len(garage) == 0
        assert all(vehicle is None for _, vehicle in garage.items())

    def test_set_and_get(self):
        garage = Garage()
        car = Car("Civic", "blue")
        garage.set(VehicleKind.CAR, car)
        assert garage.get(VehicleKind.CAR) is car
        assert garage.occupied() == [(VehicleKind.CAR, car)]

    def test_wrong_slot_raises(self):
        with pytest.raises(ValueError):
            Garage().set(VehicleKind.TRUCK, Car("Civic", "blue"))

    def test_replacing_stops_previous_music(self):
        garage = Garage()
        old = Car("Civic", "blue", music=MusicTrack("data:audio/mpeg;base64,AAA", "a.mp3"))
        old.play_music()
        garage.set(VehicleKind.CAR, old)
        garage.set(VehicleKind.CAR, Car("Golf", "grey"))
        assert old.music.playing is False


class TestSaveAll:
    """Tests for save_all."""

    def test_every_category_present(self):
        storage = MemoryStorage()
        garage = Garage()
        garage.set(VehicleKind.CAR, Car("Civic", "blue"))
        garage.save_all(storage)

        document = json.loads(storage.get_item(KEY))
        assert set(document) == {k.value for k in VehicleKind}
        assert document["car"]["model"] == "Civic"
        assert document["truck"] is None


class TestLoadAll:
    """Tests for load_all."""

    def test_nothing_stored(self):
        garage = Garage()
        report = garage.load_all(MemoryStorage())
        assert report.ok
        assert len(garage) == 0

    def test_save_then_load(self):
        storage = MemoryStorage()
        garage = Garage()
        truck = Truck("FH16", "white", cargo_capacity=1000, current_cargo=200)
        garage.set(VehicleKind.TRUCK, truck)
        garage.set(VehicleKind.PLANE, Plane("Cessna", "white", wingspan=11))
        garage.save_all(storage)

        loaded = Garage()
        report = loaded.load_all(storage)
        assert report.ok
        assert report.loaded == [VehicleKind.TRUCK, VehicleKind.PLANE]
        assert loaded.get(VehicleKind.TRUCK).to_persistable() == truck.to_persistable()
        assert loaded.get(VehicleKind.CAR) is None

    def test_bad_slot_is_skipped(self):
        good = Car("Civic", "blue").to_persistable()
        document = {kind.value: None for kind in VehicleKind}
        document["car"] = good
        document["plane"] = {"kind": "zeppelin", "model": "LZ", "color": "silver"}
        storage = MemoryStorage({KEY: json.dumps(document)})

        garage = Garage()
        report = garage.load_all(storage)
        assert report.loaded == [VehicleKind.CAR]
        assert len(report.warnings) == 1
        assert "plane" in report.warnings[0]
        assert garage.get(VehicleKind.PLANE) is None

    def test_record_in_wrong_slot_is_skipped(self):
        document = {"truck": Car("Civic", "blue").to_persistable()}
        garage = Garage()
        report = garage.load_all(MemoryStorage({KEY: json.dumps(document)}))
        assert garage.get(VehicleKind.TRUCK) is None
        assert garage.get(VehicleKind.CAR) is None
        assert len(report.warnings) == 1

    @pytest.mark.parametrize("raw", ["{not json", "[1, 2]", '"text"'])
    def test_corrupt_document_is_reset(self, raw):
        storage = MemoryStorage({KEY: raw})
        garage = Garage()
        garage.set(VehicleKind.CAR, Car("Civic", "blue"))

        report = garage.load_all(storage)
        assert report.reset
        assert not report.ok
        assert len(garage) == 0
        assert storage.get_item(KEY) is None

    def test_undecodable_file_is_reset(self, tmp_path):
        path = tmp_path / f"{KEY}.json"
        path.write_bytes(b'{"car": "\xff\xfe"}')
        storage = JsonFileStorage(tmp_path)

        garage = Garage()
        report = garage.load_all(storage)
        assert report.reset
        assert len(garage) == 0
        assert not path.exists()

    def test_session_survives_undecodable_file(self, tmp_path):
        (tmp_path / f"{KEY}.json").write_bytes(b'{"car": "\xff"}')
        session = GarageSession(JsonFileStorage(tmp_path))
        report = session.load()
        assert report.reset
        assert session.drain_notifications()[0].level is Level.ERROR
