"""Build houses from configuration."""

import logging
from collections.abc import Callable

from smart_house.config import DeviceConfig, HouseConfig
from smart_house.errors import ConfigError, UnknownDeviceTypeError
from smart_house.models import Device, House, Room, SmartSocket, SmartThermometer

logger = logging.getLogger(__name__)

DeviceFactory = Callable[..., Device]

# Device type to factory mapping
DEVICE_FACTORIES: dict[str, DeviceFactory] = {
    "socket": SmartSocket,
    "thermometer": SmartThermometer,
}


def register_device_type(device_type: str, factory: DeviceFactory) -> None:
    """Register a factory for a device type.

    The factory is called as ``factory(name, status=...)`` and must return a
    Device.
    """
    DEVICE_FACTORIES[device_type] = factory


def create_device(device_config: DeviceConfig) -> Device:
    """Create a device from config."""
    factory = DEVICE_FACTORIES.get(device_config.type)
    if factory is None:
        raise UnknownDeviceTypeError(device_config.type, sorted(DEVICE_FACTORIES))
    return factory(device_config.name, status=device_config.status)


def build_house(config: HouseConfig) -> House:
    """Create a house, its rooms and their devices from config.

    Each device group becomes one tuple of devices, shared by every room
    that references it.
    """
    groups: dict[str, tuple[Device, ...]] = {
        group_name: tuple(create_device(d) for d in devices)
        for group_name, devices in config.device_groups.items()
    }

    rooms = []
    for room_config in config.rooms:
        if room_config.device_group is not None:
            devices = groups.get(room_config.device_group)
            if devices is None:
                raise ConfigError(
                    f"Room '{room_config.name}' references unknown device group "
                    f"'{room_config.device_group}'"
                )
            rooms.append(Room(room_config.name, devices))
        else:
            rooms.append(Room(room_config.name, [create_device(d) for d in room_config.devices]))

    house = House(config.name, rooms)
    logger.info(f"Built house {house.name} with {len(rooms)} rooms")
    return house


def sample_house() -> House:
    """Build the demonstration house.

    The hall owns its device list; the kitchen and the storeroom reference
    device tuples held outside of them.
    """
    socket1 = SmartSocket("розетка для телевизора")
    socket2 = SmartSocket("розетка для аквариума")
    thermo2 = SmartThermometer("термометр для аквариума")
    thermo3 = SmartThermometer("термометр для самогонного аппарата")

    kitchen_devices = (socket2, thermo2)
    storage_devices = (thermo3,)

    hall = Room("Зал", [socket1])
    kitchen = Room("Кухня", kitchen_devices)
    storage = Room("Кладовка", storage_devices)

    return House("Дом, милый дом", [hall, kitchen, storage])
