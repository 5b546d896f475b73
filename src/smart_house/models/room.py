"""Room model for Smart House."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from smart_house.errors import ChildReportError, DuplicateNameError, NameScope, SmartHouseError
from smart_house.models.base import BaseRoom, find_duplicate
from smart_house.models.device import Device

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Room(BaseRoom):
    """A named room holding devices with unique names.

    Devices are stored as a tuple and never copied. Passing a list gives the
    room a sequence of its own; passing a tuple makes the room share that
    very tuple with whoever else holds it (``tuple()`` returns its argument
    unchanged), so several rooms or callers can reference one externally
    held device list.
    """

    name: str
    devices: Sequence[Device] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "devices", tuple(self.devices))
        duplicate = find_duplicate(device.get_name() for device in self.devices)
        if duplicate is not None:
            raise DuplicateNameError(NameScope.ROOM, self.name, duplicate)
        logger.debug(f"Created room: {self.name} ({len(self.devices)} devices)")

    def get_name(self) -> str:
        return self.name

    def get_devices_names(self) -> list[str]:
        return [device.get_name() for device in self.devices]

    def create_report(self) -> str:
        """Build the room report, one indented line per device.

        Stops at the first device whose report fails and raises a
        ChildReportError naming both the device and this room.
        """
        lines = [f" * комната '{self.name}':\n"]
        for device in self.devices:
            try:
                device_report = device.create_report()
            except SmartHouseError as e:
                logger.warning(f"Report failed for device {device.get_name()} in room {self.name}: {e}")
                raise ChildReportError(NameScope.ROOM, device.get_name(), self.name, e) from e
            lines.append(f"   - {device_report}\n")
        return "".join(lines)
