"""Shared defaults for vehicles and persistence."""

# Key of the persisted garage document in local storage
STORAGE_KEY = "virtualGarage"

DEFAULT_FUEL = 50
FUEL_CAPACITY = 100
DEFAULT_VOLUME = 0.5

# Speed that fills the speedometer bar
MAX_VISUAL_SPEED = 200

FUEL_PER_SPEED = 0.1
TURBO_BOOST = 1.5
TAKEOFF_ALTITUDE = 1000
