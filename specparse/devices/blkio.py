"""
Validators for the block IO flags.

  --blkio-weight-device   <device-path>:<weight>
  --device-read-bps       <device-path>:<number>[<unit>]
  --device-write-bps      <device-path>:<number>[<unit>]
  --device-read-iops      <device-path>:<number>
  --device-write-iops     <device-path>:<number>
"""
from typing import Tuple
from logpkg.log_kcld import LogKCld, log_to_file
from specparse.ReadConfig import ReadConfig as rc
from specparse.devices.models import MAX_WEIGHT, MIN_WEIGHT, UINT64_MAX, ThrottleDevice, WeightDevice
from specparse.devices.units import parse_uint, ram_in_bytes
from specparse.errors import (
    BadFormatError,
    InvalidPathError,
    InvalidRateError,
    InvalidWeightError,
)

logger = LogKCld()

BPS_FORMAT = ("The correct format is <device-path>:<number>[<unit>]. "
              "Number must be a positive integer. Unit is optional and can be kb, mb, or gb")
IOPS_FORMAT = "The correct format is <device-path>:<number>. Number must be a positive integer"


def _device_root() -> str:
    return rc().device_config['device_root']


def _split_device_value(val: str) -> Tuple[str, str]:
    split = val.split(":", 1)
    if len(split) != 2 or not split[0] or not split[1]:
        raise BadFormatError(f"bad format: {val}", val)
    root = _device_root()
    path = split[0]
    if not path.startswith(root) or path == root:
        raise InvalidPathError(f"bad format for device path: {val}", val)
    return path, split[1]


@log_to_file(logger)
def validate_weight_device(val: str) -> WeightDevice:
    """
    Validate a device-weight pair for the blkio-weight-device flag.

    Weight 0 means "use the default"; anything else must fall in [10, 1000].
    """
    path, raw = _split_device_value(val)
    try:
        weight = parse_uint(raw)
    except ValueError as e:
        raise InvalidWeightError(f"invalid weight for device: {val}", val) from e
    if weight > 0 and (weight < MIN_WEIGHT or weight > MAX_WEIGHT):
        raise InvalidWeightError(f"invalid weight for device: {val}", val)
    return WeightDevice(path=path, weight=weight)


@log_to_file(logger)
def validate_bps_device(val: str) -> ThrottleDevice:
    """Validate a device-rate pair for the device-read-bps and device-write-bps flags."""
    path, raw = _split_device_value(val)
    try:
        rate = ram_in_bytes(raw)
    except ValueError as e:
        raise InvalidRateError(f"invalid rate for device: {val}. {BPS_FORMAT}", val) from e
    if rate < 0 or rate > UINT64_MAX:
        raise InvalidRateError(f"invalid rate for device: {val}. {BPS_FORMAT}", val)
    return ThrottleDevice(path=path, rate=rate)


@log_to_file(logger)
def validate_iops_device(val: str) -> ThrottleDevice:
    """Validate a device-rate pair for the device-read-iops and device-write-iops flags."""
    path, raw = _split_device_value(val)
    try:
        rate = parse_uint(raw)
    except ValueError as e:
        raise InvalidRateError(f"invalid rate for device: {val}. {IOPS_FORMAT}", val) from e
    return ThrottleDevice(path=path, rate=rate)
