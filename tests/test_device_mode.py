"""Tests for device mode decoding."""

from __future__ import annotations

import pytest

from specparse.devices.mode import parse_device_mode, valid_device_mode
from specparse.devices.models import DeviceMode
from specparse.errors import InvalidModeError


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        ("r", DeviceMode.READ),
        ("w", DeviceMode.WRITE),
        ("m", DeviceMode.MKNOD),
        ("rw", DeviceMode.READ | DeviceMode.WRITE),
        ("mr", DeviceMode.READ | DeviceMode.MKNOD),
        ("rwm", DeviceMode.READ | DeviceMode.WRITE | DeviceMode.MKNOD),
        ("mwr", DeviceMode.full()),
    ],
)
def test_parse_valid_modes(mode: str, expected: DeviceMode) -> None:
    assert parse_device_mode(mode) == expected
    assert valid_device_mode(mode) is True


@pytest.mark.parametrize("mode", ["", "x", "rr", "rwmr", "R", "rw ", "rwx", "r:w"])
def test_parse_invalid_modes(mode: str) -> None:
    with pytest.raises(InvalidModeError):
        _ = parse_device_mode(mode)
    assert valid_device_mode(mode) is False


def test_repeated_flag_is_named_in_message() -> None:
    with pytest.raises(InvalidModeError, match="repeated flag 'r'"):
        _ = parse_device_mode("rwr")


def test_invalid_mode_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        _ = parse_device_mode("q")


def test_mode_renders_in_canonical_order() -> None:
    assert str(parse_device_mode("mwr")) == "rwm"
    assert str(parse_device_mode("wr")) == "rw"
    assert str(DeviceMode.MKNOD) == "m"
