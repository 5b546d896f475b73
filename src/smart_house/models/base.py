"""Base capabilities shared by devices, rooms and houses."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum


class DeviceStatus(Enum):
    """Device connection status, fixed when the device is built."""

    ONLINE = "online"
    OFFLINE = "offline"


class Reporter(ABC):
    """Anything that can render itself into a textual status report."""

    @abstractmethod
    def create_report(self) -> str:
        """Return the status report.

        Raises:
            SmartHouseError: if the report cannot be produced.
        """


class BaseRoom(Reporter):
    """A named container of devices that can be placed in a house."""

    @abstractmethod
    def get_name(self) -> str:
        """Return the room name."""

    @abstractmethod
    def get_devices_names(self) -> list[str]:
        """Return the names of the devices in the room, in order."""


def find_duplicate(names: Iterable[str]) -> str | None:
    """Return the first name that occurs twice, or None if all are unique."""
    seen: set[str] = set()
    for name in names:
        if name in seen:
            return name
        seen.add(name)
    return None
