"""Error types for Smart House.

Every error carries its context as attributes so callers can branch on the
kind of failure, while ``str(error)`` stays a readable message suitable for
printing as-is.
"""

from enum import Enum


class NameScope(Enum):
    """Containment level at which a name must be unique."""

    ROOM = "room"
    HOUSE = "house"


class SmartHouseError(Exception):
    """Base class for all Smart House errors."""


class DuplicateNameError(SmartHouseError, ValueError):
    """Raised when children of one container share a name."""

    def __init__(self, scope: NameScope, container: str, name: str):
        self.scope = scope
        self.container = container
        self.name = name
        if scope is NameScope.ROOM:
            message = f"Устройства в комнате '{container}' имеют неуникальные названия: '{name}'"
        else:
            message = f"Комнаты в доме '{container}' имеют неуникальные названия: '{name}'"
        super().__init__(message)


class RoomNotFoundError(SmartHouseError, LookupError):
    """Raised when a house has no room with the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"В доме нет комнаты с названием '{name}'")


class DeviceOfflineError(SmartHouseError):
    """Raised when an offline device is asked for a report."""

    def __init__(self, device_name: str):
        self.device_name = device_name
        super().__init__(f"Устройство '{device_name}' не в сети")


class ChildReportError(SmartHouseError):
    """Raised when a child's report fails inside its parent's report.

    The cause is kept both as ``cause`` and as ``__cause__`` so the chain
    can be walked down to the failure that started it.
    """

    def __init__(
        self,
        scope: NameScope,
        child_name: str,
        parent_name: str,
        cause: Exception,
    ):
        self.scope = scope
        self.child_name = child_name
        self.parent_name = parent_name
        self.cause = cause
        if scope is NameScope.ROOM:
            message = (
                f"Возникла ошибка при формировании отчёта с устройством "
                f"'{child_name}' в комнате '{parent_name}': {cause}"
            )
        else:
            message = (
                f"Возникла ошибка при формировании отчёта по дому "
                f"'{parent_name}' (комната '{child_name}'): {cause}"
            )
        super().__init__(message)

    @property
    def root_cause(self) -> Exception:
        """Return the innermost error of a nested report failure."""
        error: Exception = self
        while isinstance(error, ChildReportError):
            error = error.cause
        return error


class UnknownDeviceTypeError(SmartHouseError, ValueError):
    """Raised when a configured device type has no registered factory."""

    def __init__(self, device_type: str, known: list[str]):
        self.device_type = device_type
        self.known = known
        super().__init__(
            f"Unknown device type '{device_type}' (known: {', '.join(known) or 'none'})"
        )


class ConfigError(SmartHouseError):
    """Raised when a house configuration cannot be turned into a house."""
