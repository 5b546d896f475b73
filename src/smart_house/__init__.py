"""Smart House: rooms, devices and their status reports."""

__version__ = "0.1.0"
