"""
Design (codec.py)
- Purpose: Translate between one [<serial number>] INI section and a RobotConfiguration.
- Inputs: decode: serial number + section mapping; encode: entry + base directory + section.
- Outputs: decode returns RobotConfiguration; encode mutates the section in place.
- Side effects: decode reads the certificate file the section points at; encode writes
                the certificate file when none exists at the resolved path yet.
- Thread-safety: Stateless; file access is not coordinated between processes.
"""

import logging
from pathlib import Path
from typing import Mapping, MutableMapping

from .config import CERT_KEY, FILE_ENCODING, GUID_KEY, IP_KEY, NAME_KEY, REMOTE_KEY
from .errors import ConfigurationIOError, ConfigurationLoadError
from .models import RobotConfiguration
from .utils import cert_filename, parse_ip

logger = logging.getLogger(__name__)


def resolve_cert_path(cert_value: str, base_dir: Path | None) -> Path:
    """Relative cert paths are taken relative to the config file's directory."""
    path = Path(cert_value).expanduser()
    if not path.is_absolute() and base_dir is not None:
        path = Path(base_dir) / path
    return path


def decode_section(
    serial_number: str,
    section: Mapping[str, str],
    base_dir: Path | None = None,
) -> RobotConfiguration:
    """
    Purpose: Build a RobotConfiguration from one section.
    Inputs:
        serial_number: the section name
        section: key/value pairs of the section
        base_dir: directory used to resolve a relative cert path (config file's directory)
    Outputs: RobotConfiguration with certificate set to the *contents* of the cert file.
    Raises ConfigurationLoadError when a required key is missing, ip is not an address,
    or the certificate cannot be read. The whole section fails; nothing is skipped.
    """
    missing = [key for key in (GUID_KEY, NAME_KEY, CERT_KEY) if key not in section]
    if missing:
        raise ConfigurationLoadError(
            f"Invalid robot configuration in file: section [{serial_number}] is missing "
            + ", ".join(missing),
            serial_number,
        )

    try:
        ip_address = parse_ip(section[IP_KEY]) if IP_KEY in section else None
    except ValueError as exc:
        raise ConfigurationLoadError(
            f"Invalid robot configuration in file: bad ip {section[IP_KEY]!r} in [{serial_number}]",
            serial_number,
        ) from exc

    cert_path = resolve_cert_path(section[CERT_KEY], base_dir)
    try:
        # newline="" keeps the certificate's own line endings
        with open(cert_path, "r", encoding=FILE_ENCODING, newline="") as f:
            certificate = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationLoadError(
            f"Invalid robot configuration in file: cannot read certificate {cert_path} for [{serial_number}]",
            serial_number,
        ) from exc

    return RobotConfiguration(
        serial_number=serial_number,
        robot_name=section[NAME_KEY],
        guid=section[GUID_KEY],
        certificate=certificate,
        ip_address=ip_address,
        remote_host=section[REMOTE_KEY] if REMOTE_KEY in section else None,
    )


def encode_section(
    robot: RobotConfiguration,
    base_dir: Path,
    section: MutableMapping[str, str],
    overwrite_certificate: bool = False,
) -> Path:
    """
    Purpose: Write robot's fields into section, leaving unknown keys untouched.
    Inputs:
        robot: a validated RobotConfiguration
        base_dir: directory for a newly derived certificate path
        section: target section, mutated in place
        overwrite_certificate: rewrite an existing certificate file with robot.certificate
    Outputs: Resolved certificate path.
    Side effects:
        - cert path is derived as {base_dir}/{robot_name}-{serial}.cert only when the section
          has none, so re-saving never moves an existing certificate.
        - ip is written when set and left as-is when unset; remote is written when non-blank
          and removed otherwise.
        - The certificate file is written only when no file exists at the cert path
          (unless overwrite_certificate). An existing file always wins over the
          in-memory copy, which protects certificates rotated outside this store.
    Raises ConfigurationIOError when the certificate file cannot be written.
    """
    section[GUID_KEY] = robot.guid
    section[NAME_KEY] = robot.robot_name
    if CERT_KEY not in section:
        section[CERT_KEY] = str(Path(base_dir) / cert_filename(robot.robot_name, robot.serial_number))
    if robot.ip_address is not None:
        section[IP_KEY] = str(robot.ip_address)
    if robot.has_remote_host:
        section[REMOTE_KEY] = robot.remote_host
    elif REMOTE_KEY in section:
        del section[REMOTE_KEY]

    cert_path = resolve_cert_path(section[CERT_KEY], base_dir)
    try:
        exists = cert_path.exists()
        if exists and not overwrite_certificate:
            return cert_path
        cert_path.parent.mkdir(parents=True, exist_ok=True)
        with open(cert_path, "w", encoding=FILE_ENCODING, newline="") as f:
            f.write(robot.certificate)
    except OSError as exc:
        raise ConfigurationIOError(f"Cannot write certificate {cert_path}", cert_path) from exc
    if exists:
        logger.warning("Overwrote certificate %s for robot %s", cert_path, robot.serial_number)
    else:
        logger.info("Wrote certificate %s for robot %s", cert_path, robot.serial_number)
    return cert_path
