"""
Design (utils.py)
- Purpose: Reusable helpers: blank-string checks, IP address parsing/formatting, and
           deterministic certificate file naming.
- Inputs: Various helper parameters (strings, addresses, names).
- Outputs: Helper results (bools, ip address objects, file names).
- Side effects: None.
- Thread-safety: Stateless; safe to call from any thread.
"""

import ipaddress
from typing import Union

from .config import CERT_SUFFIX

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def is_blank(value: str | None) -> bool:
    """
    Purpose: True for None, empty, or whitespace-only strings.
    Inputs: value (str or None)
    Outputs: bool
    Side Effects: None.
    Thread-safety: Safe.
    """
    return value is None or not str(value).strip()


def parse_ip(value: str | IPAddress | None) -> IPAddress | None:
    """
    Purpose: Normalize an IP address given as text or as an ipaddress object.
    Inputs: value ("192.168.1.20", "fe80::1", IPv4Address, IPv6Address, or None)
    Outputs: IPv4Address/IPv6Address, or None for None/blank input.
    Side Effects: None.
    Thread-safety: Safe.
    Raises ValueError when the text is not an IP address.
    """
    if value is None:
        return None
    if isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return value
    if is_blank(value):
        return None
    return ipaddress.ip_address(str(value).strip())


def cert_filename(robot_name: str, serial_number: str) -> str:
    """
    Purpose: Build the default certificate file name for a robot.
    Inputs: robot_name ("Vector-E5S6"), serial_number ("00e20142")
    Outputs: "Vector-E5S6-00e20142.cert"
    """
    return f"{robot_name}-{serial_number}{CERT_SUFFIX}"
