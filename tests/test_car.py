#!/usr/bin/env python3
"""Tests for Car and SportsCar."""

import pytest

from garage import Car, SportsCar, VehicleKind


class TestCar:
    def test_kind_and_top_speed(self):
        car = Car("Civic", "blue")
        assert car.kind is VehicleKind.CAR
        assert car.MAX_SPEED == 180


class TestSportsCar:
    """Tests for the turbo."""

    def setup_method(self):
        self.car = SportsCar("911", "red")

    def test_is_a_car(self):
        assert isinstance(self.car, Car)
        assert self.car.kind is VehicleKind.SPORTSCAR
        assert self.car.MAX_SPEED == 300

    def test_turbo_requires_ignition(self):
        assert self.car.activate_turbo().rejected
        assert self.car.turbo_active is False

    def test_turbo_boosts_acceleration(self):
        self.car.turn_on()
        assert self.car.activate_turbo().accepted
        self.car.accelerate(20)
        assert self.car.speed == 30
        assert self.car.fuel_level == 48

    def test_activate_twice_is_rejected(self):
        self.car.turn_on()
        self.car.activate_turbo()
        assert self.car.activate_turbo().rejected
        assert self.car.turbo_active is True

    def test_deactivate(self):
        self.car.turn_on()
        assert self.car.deactivate_turbo().rejected
        self.car.activate_turbo()
        assert self.car.deactivate_turbo().accepted
        assert self.car.turbo_active is False

    def test_turn_off_clears_turbo(self):
        self.car.turn_on()
        self.car.activate_turbo()
        assert self.car.turn_off().accepted
        assert self.car.turbo_active is False

    def test_turbo_without_ignition_raises(self):
        with pytest.raises(ValueError):
            SportsCar("911", "red", turbo_active=True)

    def test_honk(self):
        assert "VROOOM!" in self.car.honk().message

    def test_describe_shows_turbo(self):
        assert ("Turbo", "Off") in self.car.describe()

    def test_persistable_round_trip(self):
        self.car.turn_on()
        self.car.activate_turbo()
        data = self.car.to_persistable()
        assert data["turboActive"] is True
        rebuilt = SportsCar.from_persistable(data)
        assert rebuilt.turbo_active is True
        assert rebuilt.ignition is True
