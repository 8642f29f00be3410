"""Shared pytest fixtures for the robot configuration store tests."""

from pathlib import Path

import pytest

from vector_config.models import RobotConfiguration

PEM = "-----BEGIN CERTIFICATE-----\nMIIBszCCAVmgAwIBAgIU\n-----END CERTIFICATE-----\n"


@pytest.fixture()
def config_path(tmp_path) -> Path:
    return tmp_path / ".anki_vector" / "sdk_config.ini"


@pytest.fixture()
def make_robot():
    def _make(serial="00e20142", name="Vector-E5S6", guid="g1", certificate=PEM, **kwargs):
        return RobotConfiguration(
            serial_number=serial,
            robot_name=name,
            guid=guid,
            certificate=certificate,
            **kwargs,
        )

    return _make


@pytest.fixture()
def pem() -> str:
    return PEM
