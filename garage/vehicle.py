"""Vehicle base classes: shared behavior for every garage occupant."""

import math
from datetime import date, timedelta
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from .audio import MusicTrack, stop_track
from .constants import DEFAULT_FUEL, DEFAULT_VOLUME, FUEL_CAPACITY, FUEL_PER_SPEED
from .kind import VehicleKind
from .maintenance import MaintenanceRecord, sort_history, sort_upcoming
from .outcome import ActionResult, Level, accepted, rejected


def parse_amount(value: Any) -> Optional[float]:
    """Parse a user-supplied quantity. Returns None unless it is a finite number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount):
        return None
    return amount


def _require_text(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field} is required")
    return value.strip()


def _require_number(value: Any, field: str) -> float:
    amount = parse_amount(value)
    if amount is None or amount < 0:
        raise ValueError(f"{field} must be a non-negative number: {value!r}")
    return value if isinstance(value, (int, float)) else amount


class Vehicle:
    """
    Base vehicle: identity, ignition, speed and maintenance history.

    Operations never raise for invalid requests; they return a rejected
    ActionResult and leave the vehicle untouched. Constructors do raise
    ValueError when given state that breaks an invariant.
    """

    kind: ClassVar[VehicleKind]
    MAX_SPEED: ClassVar[float] = 180
    HONK: ClassVar[str] = "Beep beep!"
    has_ignition: ClassVar[bool] = True

    def __init__(
        self,
        model: str,
        color: str,
        nickname: Optional[str] = None,
        image: Optional[str] = None,
        ignition: bool = False,
        speed: float = 0,
        maintenance: Optional[List[MaintenanceRecord]] = None,
        catalog_id: Optional[int] = None,
    ):
        self.model = _require_text(model, "Model")
        self.color = _require_text(color, "Color")
        self.nickname = nickname.strip() if nickname and nickname.strip() else None
        self.image = image or None
        self.ignition = bool(ignition) and self.has_ignition
        self.speed = _require_number(speed, "Speed")
        if self.speed > self.MAX_SPEED:
            raise ValueError(f"Speed {self.speed} exceeds maximum {self.MAX_SPEED}")
        self.maintenance = list(maintenance or [])
        self.catalog_id = catalog_id

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def identifier(self) -> str:
        """Nickname if set, otherwise model and color."""
        return self.nickname or f"{self.model} ({self.color})"

    @property
    def ready(self) -> bool:
        """Whether the vehicle can move right now."""
        return self.ignition

    @property
    def status_text(self) -> str:
        return "On" if self.ignition else "Off"

    def describe(self) -> List[Tuple[str, str]]:
        """Label/value pairs for display."""
        rows = [
            ("Kind", self.kind.label),
            ("Model", self.model),
            ("Color", self.color),
            ("Nickname", self.nickname or "-"),
            ("Status", self.status_text),
            ("Speed", f"{self.speed:g} km/h"),
        ]
        return rows + self._describe_extra()

    def _describe_extra(self) -> List[Tuple[str, str]]:
        return []

    # ------------------------------------------------------------------
    # Ignition and movement
    # ------------------------------------------------------------------

    def turn_on(self) -> ActionResult:
        if not self.has_ignition:
            return rejected(f"{self.identifier} has no ignition.", Level.INFO)
        if self.ignition:
            return rejected(f"{self.identifier} is already on.")
        self.ignition = True
        return accepted(f"{self.identifier} turned on.")

    def turn_off(self) -> ActionResult:
        if not self.has_ignition:
            return rejected(f"{self.identifier} has no ignition.", Level.INFO)
        if not self.ignition:
            return rejected(f"{self.identifier} is already off.")
        self.ignition = False
        return accepted(f"{self.identifier} turned off.")

    def accelerate(self, delta: Any) -> ActionResult:
        amount = parse_amount(delta)
        if amount is None or amount <= 0:
            return rejected(f"Invalid acceleration: {delta!r}", Level.ERROR)
        if self.has_ignition and not self.ignition:
            return rejected(f"Turn on {self.identifier} before accelerating.")
        if self.speed >= self.MAX_SPEED:
            return rejected(f"{self.identifier} is already at top speed ({self.MAX_SPEED:g} km/h).")
        return self._increase_speed(amount)

    def _increase_speed(self, gain: float) -> ActionResult:
        self.speed = min(self.MAX_SPEED, self.speed + gain)
        if self.speed >= self.MAX_SPEED:
            return accepted(f"{self.identifier} reached top speed ({self.MAX_SPEED:g} km/h).", Level.INFO)
        return accepted(f"{self.identifier} accelerated to {self.speed:g} km/h.")

    def brake(self, delta: Any) -> ActionResult:
        amount = parse_amount(delta)
        if amount is None or amount <= 0:
            return rejected(f"Invalid braking amount: {delta!r}", Level.ERROR)
        if self.speed <= 0:
            return rejected(f"{self.identifier} is already stopped.", Level.INFO)
        self.speed = max(0, self.speed - amount)
        if self.speed == 0:
            return accepted(f"{self.identifier} stopped.")
        return accepted(f"{self.identifier} slowed to {self.speed:g} km/h.")

    def honk(self) -> ActionResult:
        return accepted(f"{self.identifier}: {self.HONK}", Level.INFO)

    def release(self) -> None:
        """Free runtime resources when the vehicle leaves the garage."""

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------

    def add_maintenance_record(self, record: MaintenanceRecord) -> ActionResult:
        """Append a record; callers validate it by constructing it."""
        if not isinstance(record, MaintenanceRecord):
            return rejected(f"Not a maintenance record: {record!r}", Level.ERROR)
        self.maintenance.append(record)
        what = "Appointment scheduled" if record.is_upcoming() else "Service recorded"
        return accepted(f"{what} for {self.identifier}: {record.service_type}.")

    def history(self, today: Optional[date] = None) -> List[MaintenanceRecord]:
        return sort_history(self.maintenance, today)

    def upcoming(self, today: Optional[date] = None) -> List[MaintenanceRecord]:
        return sort_upcoming(self.maintenance, today)

    def reminders(self, today: Optional[date] = None) -> List[ActionResult]:
        """Reminders for services dated today or appointments dated tomorrow."""
        today = today or date.today()
        tomorrow = today + timedelta(days=1)
        notes = []
        for record in self.maintenance:
            if record.date == today:
                notes.append(accepted(
                    f"Reminder TODAY: {record.service_type} for {self.identifier}", Level.WARNING
                ))
            elif record.date == tomorrow:
                notes.append(accepted(
                    f"Reminder TOMORROW: {record.service_type} for {self.identifier}", Level.INFO
                ))
        return notes

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_persistable(self) -> Dict[str, Any]:
        """Flat dict holding everything needed to rebuild this vehicle."""
        d: Dict[str, Any] = {
            "kind": self.kind.value,
            "model": self.model,
            "color": self.color,
            "nickname": self.nickname,
            "image": self.image,
            "ignition": self.ignition,
            "speed": self.speed,
            "maintenance": [m.to_persistable() for m in self.maintenance],
            "catalogId": self.catalog_id,
        }
        d.update(self._persistable_extra())
        return d

    def _persistable_extra(self) -> Dict[str, Any]:
        return {}

    @classmethod
    def from_persistable(cls, data: Dict[str, Any]) -> "Vehicle":
        """Rebuild a vehicle from to_persistable() output."""
        return cls(**cls._init_kwargs(data))

    @classmethod
    def _init_kwargs(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "model": data.get("model"),
            "color": data.get("color"),
            "nickname": data.get("nickname"),
            "image": data.get("image"),
            "speed": data.get("speed", 0),
            "maintenance": _records_from(data.get("maintenance")),
            "catalog_id": data.get("catalogId", cls.kind.default_catalog_id),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.model!r}, {self.color!r})"


def _records_from(items: Optional[List[Dict[str, Any]]]) -> List[MaintenanceRecord]:
    return [MaintenanceRecord.from_persistable(item) for item in items or []]


class MotorizedVehicle(Vehicle):
    """A vehicle with an engine: ignition, a fuel tank and a music player."""

    def __init__(
        self,
        model: str,
        color: str,
        nickname: Optional[str] = None,
        image: Optional[str] = None,
        ignition: bool = False,
        speed: float = 0,
        maintenance: Optional[List[MaintenanceRecord]] = None,
        catalog_id: Optional[int] = None,
        fuel_level: float = DEFAULT_FUEL,
        fuel_capacity: float = FUEL_CAPACITY,
        volume: float = DEFAULT_VOLUME,
        music: Optional[MusicTrack] = None,
    ):
        super().__init__(model, color, nickname, image, ignition, speed, maintenance, catalog_id)
        self.fuel_capacity = _require_number(fuel_capacity, "Fuel capacity")
        if self.fuel_capacity <= 0:
            raise ValueError("Fuel capacity must be positive")
        self.fuel_level = _require_number(fuel_level, "Fuel level")
        if self.fuel_level > self.fuel_capacity:
            raise ValueError(
                f"Fuel level {self.fuel_level} exceeds capacity {self.fuel_capacity}"
            )
        self.volume = min(1.0, max(0.0, float(volume)))
        self.music = music

    @property
    def fuel_percent(self) -> int:
        return max(0, min(100, round(self.fuel_level / self.fuel_capacity * 100)))

    @property
    def music_name(self) -> Optional[str]:
        return self.music.name if self.music else None

    def _describe_extra(self) -> List[Tuple[str, str]]:
        return [
            ("Fuel", f"{self.fuel_level:g} / {self.fuel_capacity:g} ({self.fuel_percent}%)"),
            ("Music", self.music_name or "None"),
        ]

    def accelerate(self, delta: Any) -> ActionResult:
        amount = parse_amount(delta)
        if amount is None or amount <= 0:
            return rejected(f"Invalid acceleration: {delta!r}", Level.ERROR)
        if not self.ignition:
            return rejected(f"Turn on {self.identifier} before accelerating.")
        if self.fuel_level <= 0:
            return rejected(f"{self.identifier} is out of fuel.", Level.ERROR)
        if self.speed >= self.MAX_SPEED:
            return rejected(f"{self.identifier} is already at top speed ({self.MAX_SPEED:g} km/h).")
        self.fuel_level = max(0, round(self.fuel_level - amount * FUEL_PER_SPEED, 2))
        return self._increase_speed(self._speed_gain(amount))

    def _speed_gain(self, amount: float) -> float:
        return amount

    def refuel(self, amount: Any) -> ActionResult:
        liters = parse_amount(amount)
        if liters is None or liters <= 0:
            return rejected(f"Invalid fuel amount: {amount!r}", Level.ERROR)
        if self.fuel_level >= self.fuel_capacity:
            return rejected(f"{self.identifier} is already full.", Level.INFO)
        added = min(liters, self.fuel_capacity - self.fuel_level)
        self.fuel_level += added
        return accepted(f"{self.identifier} refueled with {added:g} (now {self.fuel_percent}%).")

    # ------------------------------------------------------------------
    # Music
    # ------------------------------------------------------------------

    def set_music(self, source: str, name: str) -> ActionResult:
        """Load a new track, stopping the current one if it is playing."""
        try:
            track = MusicTrack(source, name, self.volume)
        except ValueError as e:
            return rejected(str(e), Level.ERROR)
        stop_track(self.music)
        self.music = track
        return accepted(f'Music "{track.name}" loaded for {self.identifier}.')

    def play_music(self) -> ActionResult:
        if self.music is None:
            return rejected(f"No music loaded for {self.identifier}.")
        if self.music.playing:
            return rejected(f'"{self.music.name}" is already playing.', Level.INFO)
        self.music.play()
        return accepted(f'Playing "{self.music.name}".', Level.INFO)

    def stop_music(self) -> ActionResult:
        if self.music is None or not self.music.playing:
            return rejected("No music is playing.", Level.INFO)
        self.music.stop()
        return accepted(f'Stopped "{self.music.name}".', Level.INFO)

    def release(self) -> None:
        stop_track(self.music)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _persistable_extra(self) -> Dict[str, Any]:
        return {
            "fuelLevel": self.fuel_level,
            "fuelCapacity": self.fuel_capacity,
            "volume": self.volume,
            "musicName": self.music.name if self.music else None,
            "musicSource": self.music.source if self.music else None,
        }

    @classmethod
    def _init_kwargs(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        kwargs = super()._init_kwargs(data)
        capacity = data.get("fuelCapacity")
        volume = data.get("volume", DEFAULT_VOLUME)
        music = None
        if data.get("musicSource"):
            music = MusicTrack(data["musicSource"], data.get("musicName"), volume)
        kwargs.update(
            ignition=data.get("ignition", False),
            fuel_level=data.get("fuelLevel", capacity if capacity is not None else DEFAULT_FUEL),
            fuel_capacity=capacity if capacity is not None else FUEL_CAPACITY,
            volume=volume,
            music=music,
        )
        return kwargs
