"""
Virtual garage models.

This package provides the vehicle domain and its persistence:
- VehicleKind / BikeType: garage categories and bicycle styles
- ActionResult / Level: outcome of a user-triggered operation
- MaintenanceRecord: dated service entries and appointments
- Vehicle, MotorizedVehicle and the Car, SportsCar, Truck, Plane,
  Motorcycle and Bicycle variants
- Garage: one slot per kind, saved to and loaded from storage
- GarageSession: selection, edit mode and notifications for the UI
"""

from .kind import VehicleKind, BikeType
from .outcome import ActionResult, Level
from .maintenance import (
    MaintenanceRecord,
    MaintenanceValidationError,
    sort_history,
    sort_upcoming,
)
from .audio import MusicTrack
from .vehicle import Vehicle, MotorizedVehicle
from .car import Car, SportsCar
from .truck import Truck
from .plane import Plane
from .motorcycle import Motorcycle
from .bicycle import Bicycle
from .loader import PersistenceError, build_vehicle, vehicle_from_persistable
from .storage import MemoryStorage, JsonFileStorage, StorageError
from .garage import Garage, LoadReport
from .session import GarageSession, VehicleForm

__all__ = [
    "VehicleKind",
    "BikeType",
    "ActionResult",
    "Level",
    "MaintenanceRecord",
    "MaintenanceValidationError",
    "sort_history",
    "sort_upcoming",
    "MusicTrack",
    "Vehicle",
    "MotorizedVehicle",
    "Car",
    "SportsCar",
    "Truck",
    "Plane",
    "Motorcycle",
    "Bicycle",
    "PersistenceError",
    "build_vehicle",
    "vehicle_from_persistable",
    "MemoryStorage",
    "JsonFileStorage",
    "StorageError",
    "Garage",
    "LoadReport",
    "GarageSession",
    "VehicleForm",
]
