"""
Design (vector_config)
- Purpose: Robot credential/configuration store for the SDK config file
           (~/.anki_vector/sdk_config.ini) and the certificate files beside it.
- Public API: RobotConfiguration, load_robots, load_default, add_or_update,
              save_robots, get_sdk_config_path, and the error classes.
"""

from .errors import (
    ConfigurationIOError,
    ConfigurationLoadError,
    ConfigurationValidationError,
    RobotConfigError,
)
from .models import RobotConfiguration
from .storage import add_or_update, get_sdk_config_path, load_default, load_robots, save_robots

__all__ = [
    "ConfigurationIOError",
    "ConfigurationLoadError",
    "ConfigurationValidationError",
    "RobotConfigError",
    "RobotConfiguration",
    "add_or_update",
    "get_sdk_config_path",
    "load_default",
    "load_robots",
    "save_robots",
]
