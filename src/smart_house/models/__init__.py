"""Data models for Smart House."""

from smart_house.models.base import BaseRoom, DeviceStatus, Reporter
from smart_house.models.device import Device, SmartSocket, SmartThermometer
from smart_house.models.house import House
from smart_house.models.room import Room

__all__ = [
    "BaseRoom",
    "Device",
    "DeviceStatus",
    "House",
    "Reporter",
    "Room",
    "SmartSocket",
    "SmartThermometer",
]
