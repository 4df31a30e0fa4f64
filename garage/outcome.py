"""ActionResult dataclass for the outcome of a user-triggered operation."""

from dataclasses import dataclass
from enum import Enum


class Level(Enum):
    """Notification severity, in the order the UI styles them."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ActionResult:
    """Result of an operation; rejected results never changed any state."""

    accepted: bool
    message: str
    level: Level = Level.SUCCESS

    @property
    def rejected(self) -> bool:
        return not self.accepted

    def __str__(self) -> str:
        return f"[{self.level.value}] {self.message}"


def accepted(message: str, level: Level = Level.SUCCESS) -> ActionResult:
    return ActionResult(True, message, level)


def rejected(message: str, level: Level = Level.WARNING) -> ActionResult:
    return ActionResult(False, message, level)
