"""
Design (errors.py)
- Purpose: Error taxonomy raised by the configuration store.
- Classes:
    RobotConfigError: base class, catch this to handle any store failure.
    ConfigurationLoadError: file present but content unusable.
    ConfigurationValidationError: required field missing on write.
    ConfigurationIOError: filesystem-level failure.
- Thread-safety: N/A.
"""

from typing import Dict, List, Optional


class RobotConfigError(Exception):
    """Base class for robot configuration store errors."""


class ConfigurationLoadError(RobotConfigError):
    """
    Raised when the config file (or a certificate it references) cannot be decoded.
    serial_number names the failing section when the failure is per-section.
    """

    def __init__(self, message: str, serial_number: Optional[str] = None) -> None:
        super().__init__(message)
        self.serial_number = serial_number


class ConfigurationValidationError(RobotConfigError, ValueError):
    """
    Raised before any write when one or more entries are incomplete or malformed.
    missing maps serial number -> list of offending field names.
    """

    def __init__(self, missing: Dict[str, List[str]], message: Optional[str] = None) -> None:
        if message is None:
            parts = [f"{serial}: {', '.join(fields)}" for serial, fields in missing.items()]
            message = "Invalid robot configuration (" + "; ".join(parts) + ")"
        super().__init__(message)
        self.missing = missing


class ConfigurationIOError(RobotConfigError):
    """Raised when a directory, config file or certificate file cannot be created, read or written."""

    def __init__(self, message: str, path=None) -> None:
        super().__init__(message)
        self.path = path
