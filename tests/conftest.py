"""Pytest configuration and fixtures for Smart House tests."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from smart_house.errors import SmartHouseError
from smart_house.models import Device, House, Room, SmartSocket, SmartThermometer


@dataclass(frozen=True)
class DisconnectedSensor(Device):
    """Device whose report always fails."""

    def describe(self) -> str:
        return f"Это датчик '{self.name}'."

    def create_report(self) -> str:
        raise SmartHouseError(f"Датчик '{self.name}' отключён")


SAMPLE_REPORT = (
    "Отчёт по дому 'Дом, милый дом':\n"
    " * комната 'Зал':\n"
    "   - Это умная розетка 'розетка для телевизора'. Работает штатно.\n"
    " * комната 'Кухня':\n"
    "   - Это умная розетка 'розетка для аквариума'. Работает штатно.\n"
    "   - Это умный термометр 'термометр для аквариума'. Работает штатно.\n"
    " * комната 'Кладовка':\n"
    "   - Это умный термометр 'термометр для самогонного аппарата'. Работает штатно.\n"
)


@pytest.fixture
def tv_socket() -> SmartSocket:
    return SmartSocket("розетка для телевизора")


@pytest.fixture
def kitchen_devices() -> tuple[Device, ...]:
    """Externally held device tuple, shared with the kitchen room."""
    return (
        SmartSocket("розетка для аквариума"),
        SmartThermometer("термометр для аквариума"),
    )


@pytest.fixture
def storage_devices() -> tuple[Device, ...]:
    return (SmartThermometer("термометр для самогонного аппарата"),)


@pytest.fixture
def hall(tv_socket: SmartSocket) -> Room:
    return Room("Зал", [tv_socket])


@pytest.fixture
def kitchen(kitchen_devices: tuple[Device, ...]) -> Room:
    return Room("Кухня", kitchen_devices)


@pytest.fixture
def storage(storage_devices: tuple[Device, ...]) -> Room:
    return Room("Кладовка", storage_devices)


@pytest.fixture
def house(hall: Room, kitchen: Room, storage: Room) -> House:
    """The sample house with its three rooms."""
    return House("Дом, милый дом", [hall, kitchen, storage])


@pytest.fixture
def sensor() -> DisconnectedSensor:
    return DisconnectedSensor("датчик протечки")


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Write a sample house.yaml and return its directory."""
    (tmp_path / "house.yaml").write_text(
        """\
name: Дом, милый дом
device_groups:
  aquarium:
    - name: розетка для аквариума
      type: socket
    - name: термометр для аквариума
      type: thermometer
rooms:
  - name: Зал
    devices:
      - name: розетка для телевизора
        type: socket
  - name: Кухня
    device_group: aquarium
  - name: Кладовка
    devices:
      - name: термометр для самогонного аппарата
        type: thermometer
""",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def malformed_config_dir(tmp_path: Path) -> Path:
    """Write a house.yaml that is not valid YAML."""
    (tmp_path / "house.yaml").write_text("rooms: [\n  - name: x\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def root_logging():
    """Let setup_logging install its own handler, restoring root logging afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    root.handlers = []
    yield root
    root.handlers = handlers
    root.setLevel(level)
