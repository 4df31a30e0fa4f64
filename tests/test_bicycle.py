#!/usr/bin/env python3
"""Tests for Bicycle."""

import pytest

from garage import BikeType, Bicycle, Level


class TestBicycle:
    """A bicycle has no ignition and no fuel."""

    def setup_method(self):
        self.bike = Bicycle("Caloi 10", "green", bike_type="speed")

    def test_bike_type(self):
        assert self.bike.bike_type is BikeType.SPEED

    def test_invalid_bike_type_raises(self):
        with pytest.raises(ValueError):
            Bicycle("Caloi 10", "green", bike_type="tandem")

    def test_always_ready(self):
        assert self.bike.ready
        assert self.bike.status_text == "Ready"

    def test_accelerates_without_ignition(self):
        assert self.bike.accelerate(15).accepted
        assert self.bike.speed == 15

    def test_top_speed(self):
        self.bike.accelerate(100)
        assert self.bike.speed == 40

    def test_turn_on_is_rejected(self):
        result = self.bike.turn_on()
        assert result.rejected
        assert result.level is Level.INFO
        assert self.bike.ignition is False

    def test_has_no_fuel(self):
        assert not hasattr(self.bike, "fuel_level")
        assert not hasattr(self.bike, "refuel")

    def test_honk(self):
        assert "Ring ring!" in self.bike.honk().message

    def test_persistable_round_trip(self):
        self.bike.accelerate(10)
        data = self.bike.to_persistable()
        assert data["bikeType"] == "speed"
        assert "fuelLevel" not in data
        assert Bicycle.from_persistable(data).to_persistable() == data
