"""
Design (models.py)
- Purpose: Define the domain entity (RobotConfiguration): one robot's connection profile.
- Inputs: Field values (str, IP address).
- Outputs: RobotConfiguration instances.
- Side effects: Setting ip_address/remote_host notifies subscribed handlers.
- Thread-safety: Plain objects; mutate from one thread at a time.
"""

from typing import Dict, List

from .errors import ConfigurationValidationError
from .observable import ObservableObject
from .utils import IPAddress, is_blank, parse_ip

# Fields that must be present before an entry may be written to disk
REQUIRED_FIELDS = ("serial_number", "robot_name", "guid", "certificate")

# Stored as INI values, so surrounding whitespace would not survive a reload
PADDING_CHECKED_FIELDS = ("serial_number", "robot_name", "guid")


class RobotConfiguration(ObservableObject):
    """
    Design (RobotConfiguration)
    - Purpose: Identity, network and credential fields for a single robot.
    - Fields:
        serial_number: section key in the config file (e.g. "00e20142").
        robot_name: human label, "Vector-XXXX".
        guid: authentication token issued when the robot was registered.
        certificate: PEM text of the robot's TLS certificate (held in memory).
        ip_address: last known address (observable).
        remote_host: "host[:port]" override for reaching the robot (observable).
        has_remote_host: derived; re-announced whenever remote_host changes.
    - validate() is only called by the store before writing, so a partially built
      entry can exist in memory.
    """

    def __init__(
        self,
        serial_number: str | None = None,
        robot_name: str | None = None,
        guid: str | None = None,
        certificate: str | None = None,
        ip_address: str | IPAddress | None = None,
        remote_host: str | None = None,
    ) -> None:
        super().__init__()
        self._serial_number = serial_number
        self.robot_name = robot_name
        self.guid = guid
        self.certificate = certificate
        self._ip_address: IPAddress | None = parse_ip(ip_address)
        self._remote_host: str | None = remote_host

    @property
    def serial_number(self) -> str | None:
        """Section key; fixed at construction."""
        return self._serial_number

    @property
    def ip_address(self) -> IPAddress | None:
        return self._ip_address

    @ip_address.setter
    def ip_address(self, value: str | IPAddress | None) -> None:
        self.set_property("_ip_address", parse_ip(value), "ip_address")

    @property
    def remote_host(self) -> str | None:
        return self._remote_host

    @remote_host.setter
    def remote_host(self, value: str | None) -> None:
        if self.set_property("_remote_host", value, "remote_host"):
            self.raise_changed("has_remote_host")

    @property
    def has_remote_host(self) -> bool:
        return not is_blank(self._remote_host)

    def missing_fields(self) -> List[str]:
        """Names of required fields that are None or blank."""
        return [name for name in REQUIRED_FIELDS if is_blank(getattr(self, name))]

    def padded_fields(self) -> List[str]:
        """Names of INI-stored fields with leading/trailing whitespace (the INI reader strips it)."""
        values = {name: getattr(self, name) for name in PADDING_CHECKED_FIELDS}
        if self.has_remote_host:
            values["remote_host"] = self._remote_host
        return [
            name for name, value in values.items()
            if not is_blank(value) and str(value) != str(value).strip()
        ]

    def invalid_fields(self) -> List[str]:
        return self.missing_fields() + [f"{name} (surrounding whitespace)" for name in self.padded_fields()]

    def validate(self) -> None:
        """
        Purpose: Check the fields required for persistence.
        Outputs: None
        Raises ConfigurationValidationError naming every missing or padded field.
        """
        invalid = self.invalid_fields()
        if invalid:
            raise ConfigurationValidationError({self.serial_number or "<unknown>": invalid})

    def as_dict(self) -> Dict[str, object]:
        return {
            "serial_number": self.serial_number,
            "robot_name": self.robot_name,
            "guid": self.guid,
            "certificate": self.certificate,
            "ip_address": self.ip_address,
            "remote_host": self.remote_host,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RobotConfiguration):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        ip = str(self.ip_address) if self.ip_address is not None else None
        return (
            f"RobotConfiguration(serial_number={self.serial_number!r}, robot_name={self.robot_name!r}, "
            f"ip_address={ip!r}, "
            f"remote_host={self.remote_host!r})"
        )
