"""House model for Smart House."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from smart_house.errors import (
    ChildReportError,
    DuplicateNameError,
    NameScope,
    RoomNotFoundError,
    SmartHouseError,
)
from smart_house.models.base import BaseRoom, Reporter, find_duplicate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class House(Reporter):
    """A named house holding rooms with unique names.

    Rooms are referenced, not copied; any BaseRoom implementation can be
    placed in a house.
    """

    name: str
    rooms: Sequence[BaseRoom] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "rooms", tuple(self.rooms))
        duplicate = find_duplicate(room.get_name() for room in self.rooms)
        if duplicate is not None:
            raise DuplicateNameError(NameScope.HOUSE, self.name, duplicate)
        logger.debug(f"Created house: {self.name} ({len(self.rooms)} rooms)")

    def get_name(self) -> str:
        return self.name

    def get_room_names(self) -> list[str]:
        return [room.get_name() for room in self.rooms]

    def get_room_devices_names(self, room_name: str) -> list[str]:
        """Return the device names of the room called ``room_name``.

        Raises:
            RoomNotFoundError: if no room has that exact name.
        """
        for room in self.rooms:
            if room.get_name() == room_name:
                return room.get_devices_names()
        raise RoomNotFoundError(room_name)

    def create_report(self) -> str:
        """Build the house report from the reports of all rooms, in order."""
        parts = [f"Отчёт по дому '{self.name}':\n"]
        for room in self.rooms:
            try:
                parts.append(room.create_report())
            except SmartHouseError as e:
                logger.warning(f"Report failed for room {room.get_name()} in house {self.name}: {e}")
                raise ChildReportError(NameScope.HOUSE, room.get_name(), self.name, e) from e
        return "".join(parts)
