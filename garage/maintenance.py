"""MaintenanceRecord class for service history and scheduled appointments."""

import math
import re
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Union

from dateutil.parser import isoparse

# Calendar date, optionally followed by a time part
FULL_DATE = re.compile(r"\d{4}-\d{2}-\d{2}(?:[T ].*)?$")


class MaintenanceValidationError(ValueError):
    """Raised when a maintenance record is built from invalid input."""


def _parse_date(value: Union[date, str]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise MaintenanceValidationError("Maintenance date is required")
    # isoparse also accepts "2025" or "2025-06" and fills in the missing day
    if not FULL_DATE.match(value.strip()):
        raise MaintenanceValidationError(f"Invalid maintenance date: '{value}' (expected YYYY-MM-DD)")
    try:
        return isoparse(value.strip()).date()
    except ValueError:
        raise MaintenanceValidationError(f"Invalid maintenance date: '{value}'") from None


def _parse_cost(value: Union[float, int, str]) -> float:
    if isinstance(value, bool):
        raise MaintenanceValidationError(f"Invalid maintenance cost: {value!r}")
    try:
        cost = float(value)
    except (TypeError, ValueError):
        raise MaintenanceValidationError(f"Invalid maintenance cost: {value!r}") from None
    if not math.isfinite(cost) or cost < 0:
        raise MaintenanceValidationError(f"Maintenance cost must be non-negative: {value!r}")
    return cost


class MaintenanceRecord:
    """
    A dated service entry.

    Whether a record is past history or an upcoming appointment is not
    stored: it is derived from its date every time it is read.
    """

    def __init__(
        self,
        date: Union[date, str],
        service_type: str,
        cost: Union[float, int, str],
        description: Optional[str] = None,
    ):
        if not isinstance(service_type, str) or not service_type.strip():
            raise MaintenanceValidationError("Maintenance type is required")
        self.date = _parse_date(date)
        self.service_type = service_type.strip()
        self.cost = _parse_cost(cost)
        self.description = description.strip() if description and description.strip() else None

    def is_upcoming(self, today: Optional[date] = None) -> bool:
        """True if the record is dated strictly after today."""
        return self.date > (today or date.today())

    def is_history(self, today: Optional[date] = None) -> bool:
        return not self.is_upcoming(today)

    def format(self) -> str:
        """One-line display text."""
        text = f"{self.date.isoformat()} - {self.service_type} - ${self.cost:,.2f}"
        if self.description:
            text += f" ({self.description})"
        return text

    def to_persistable(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "date": self.date.isoformat(),
            "type": self.service_type,
            "cost": self.cost,
        }
        if self.description is not None:
            d["description"] = self.description
        return d

    @classmethod
    def from_persistable(cls, data: Dict[str, Any]) -> "MaintenanceRecord":
        if not isinstance(data, dict):
            raise MaintenanceValidationError(f"Invalid maintenance record: {data!r}")
        return cls(data.get("date"), data.get("type"), data.get("cost"), data.get("description"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MaintenanceRecord):
            return NotImplemented
        return self.to_persistable() == other.to_persistable()

    def __repr__(self) -> str:
        return f"MaintenanceRecord({self.date.isoformat()!r}, {self.service_type!r}, {self.cost!r})"


def sort_history(
    records: Iterable[MaintenanceRecord], today: Optional[date] = None
) -> List[MaintenanceRecord]:
    """Past records, most recent first."""
    past = [r for r in records if r.is_history(today)]
    return sorted(past, key=lambda r: r.date, reverse=True)


def sort_upcoming(
    records: Iterable[MaintenanceRecord], today: Optional[date] = None
) -> List[MaintenanceRecord]:
    """Future appointments, soonest first."""
    future = [r for r in records if r.is_upcoming(today)]
    return sorted(future, key=lambda r: r.date)
