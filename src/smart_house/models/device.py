"""Device models for Smart House."""

from abc import abstractmethod
from dataclasses import dataclass

from smart_house.errors import DeviceOfflineError
from smart_house.models.base import DeviceStatus, Reporter


@dataclass(frozen=True)
class Device(Reporter):
    """Base class for all devices.

    A device is a named leaf of the house. Its name is not validated; only
    the room it is placed in cares about names being unique. Subclasses
    provide the canned status text through ``describe``.
    """

    name: str
    status: DeviceStatus = DeviceStatus.ONLINE

    def get_name(self) -> str:
        return self.name

    @abstractmethod
    def describe(self) -> str:
        """Return the status text of a working device."""

    def create_report(self) -> str:
        """Return the device status, failing if the device is offline."""
        if self.status is DeviceStatus.OFFLINE:
            raise DeviceOfflineError(self.name)
        return self.describe()


@dataclass(frozen=True)
class SmartSocket(Device):
    """A smart power socket."""

    def describe(self) -> str:
        return f"Это умная розетка '{self.name}'. Работает штатно."


@dataclass(frozen=True)
class SmartThermometer(Device):
    """A smart thermometer."""

    def describe(self) -> str:
        return f"Это умный термометр '{self.name}'. Работает штатно."
