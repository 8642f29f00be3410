"""
Design (storage.py)
- Purpose: Load and save robot configurations to/from the SDK config file (INI).
- Inputs: Path (default from get_sdk_config_path()), RobotConfiguration entries for save.
- Outputs: Iterable of RobotConfiguration on load; None on save.
- Side effects: Reads/writes the config file, creates its directory, writes certificate
                files on first save. Every call opens, reads/writes and closes the file;
                nothing is cached between calls.
- Errors: ConfigurationIOError (filesystem), ConfigurationLoadError (bad content),
          ConfigurationValidationError (incomplete entry on write). Nothing is retried.
- Thread-safety: No file locking; concurrent writers to one path are last-writer-wins.
"""

import configparser
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

from .codec import decode_section, encode_section
from .config import FILE_ENCODING, SDK_CONFIG_DIRNAME, SDK_CONFIG_FILENAME, UNUSED_DEFAULT_SECTION
from .errors import ConfigurationIOError, ConfigurationLoadError, ConfigurationValidationError
from .models import RobotConfiguration

logger = logging.getLogger(__name__)


def get_sdk_config_path(home: Path | None = None) -> Path:
    """
    Resolve <home>/.anki_vector/sdk_config.ini. home defaults to the user's profile
    directory; pass another directory to point the store elsewhere (e.g. in tests).
    """
    base = Path(home) if home is not None else Path.home()
    return base / SDK_CONFIG_DIRNAME / SDK_CONFIG_FILENAME


def _resolve(path: Path | str | None) -> Path:
    # absolute, so derived cert paths stay valid regardless of the working directory
    return (Path(path) if path is not None else get_sdk_config_path()).absolute()


def _new_parser() -> configparser.ConfigParser:
    # No interpolation ('%' is legal in paths) and keys kept verbatim
    parser = configparser.ConfigParser(interpolation=None, default_section=UNUSED_DEFAULT_SECTION)
    parser.optionxform = str  # type: ignore[assignment]
    return parser


def _read_parser(path: Path) -> configparser.ConfigParser:
    """
    Purpose: Parse the config file, or return an empty parser when it does not exist.
    Raises ConfigurationIOError / ConfigurationLoadError.
    """
    parser = _new_parser()
    try:
        if not path.exists():
            return parser
        with open(path, "r", encoding=FILE_ENCODING) as f:
            parser.read_file(f)
    except OSError as exc:
        raise ConfigurationIOError(f"Cannot read robot configuration file {path}", path) from exc
    except (configparser.Error, UnicodeDecodeError) as exc:
        raise ConfigurationLoadError(f"Invalid robot configuration file {path}") from exc
    return parser


def _write_parser(parser: configparser.ConfigParser, path: Path) -> None:
    """Write to a sibling temp file, then move it over path."""
    tmp = path.with_name(path.name + ".tmp")
    try:
        with open(tmp, "w", encoding=FILE_ENCODING) as f:
            parser.write(f, space_around_delimiters=False)
        os.replace(tmp, path)
    except OSError as exc:
        try:
            tmp.unlink()
        except OSError:
            pass
        raise ConfigurationIOError(f"Cannot write robot configuration file {path}", path) from exc


class RobotConfigurations:
    """
    Design (RobotConfigurations)
    - Purpose: Lazy, restartable view over the robots in one config file.
    - Each iteration re-reads the file; a missing file yields nothing.
    - Any bad section raises ConfigurationLoadError and ends the iteration.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def __iter__(self) -> Iterator[RobotConfiguration]:
        parser = _read_parser(self.path)
        base_dir = self.path.parent
        for serial_number in parser.sections():
            yield decode_section(serial_number, parser[serial_number], base_dir)

    def first(self) -> Optional[RobotConfiguration]:
        return next(iter(self), None)


def load_robots(path: Path | str | None = None) -> RobotConfigurations:
    """
    Load all robot configurations from path (default SDK config file).
    The file is read when the result is iterated.
    """
    return RobotConfigurations(_resolve(path))


def load_default(path: Path | str | None = None) -> Optional[RobotConfiguration]:
    """Return the first robot configuration in the file, or None if there are none."""
    return load_robots(path).first()


def add_or_update(robot: RobotConfiguration, path: Path | str | None = None, *, overwrite_certificates: bool = False) -> None:
    """
    Append robot to the config file, or update its section if the serial number exists.
    Other sections are left untouched.
    """
    _save_file(_resolve(path), [robot], replace_all=False, overwrite_certificates=overwrite_certificates)


def save_robots(robots: Iterable[RobotConfiguration], path: Path | str | None = None, *, overwrite_certificates: bool = False) -> None:
    """
    Store exactly the given robot configurations: sections for robots not in the list
    are removed. Passing an empty list empties the file.
    """
    if robots is None:
        raise TypeError("robots must not be None")
    _save_file(_resolve(path), list(robots), replace_all=True, overwrite_certificates=overwrite_certificates)


def _validate_all(robots: List[RobotConfiguration]) -> None:
    """
    Purpose: Check every entry before touching the disk.
    Raises ConfigurationValidationError listing all incomplete entries and duplicated serial numbers.
    """
    missing: Dict[str, List[str]] = {}
    seen = set()
    for robot in robots:
        fields = robot.invalid_fields()
        if fields:
            missing.setdefault(robot.serial_number or "<unknown>", []).extend(fields)
        elif robot.serial_number in seen:
            missing.setdefault(robot.serial_number, []).append("serial_number (duplicate)")
        seen.add(robot.serial_number)
    if missing:
        raise ConfigurationValidationError(missing)


def _save_file(path: Path, robots: List[RobotConfiguration], replace_all: bool, overwrite_certificates: bool) -> None:
    """
    Purpose: Shared read-merge-write for add_or_update() and save_robots().
    Inputs:
        path: config file
        robots: entries to write
        replace_all: remove sections whose serial number is not among robots
        overwrite_certificates: rewrite existing certificate files
    Side effects: Creates the directory, writes certificate files, rewrites the config file.
    """
    _validate_all(robots)

    config_dir = path.parent
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigurationIOError(f"Cannot create configuration directory {config_dir}", config_dir) from exc

    parser = _read_parser(path)
    serial_numbers = []
    for robot in robots:
        if not parser.has_section(robot.serial_number):
            parser.add_section(robot.serial_number)
            logger.debug("Adding robot %s to %s", robot.serial_number, path)
        encode_section(robot, config_dir, parser[robot.serial_number], overwrite_certificates)
        serial_numbers.append(robot.serial_number)

    if replace_all:
        for section in parser.sections():
            if section not in serial_numbers:
                parser.remove_section(section)
                logger.debug("Removed robot %s from %s", section, path)

    _write_parser(parser, path)
    logger.debug("Saved %d robot configuration(s) to %s", len(robots), path)
