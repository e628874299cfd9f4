from specparse.devices.models import DeviceMode, MODE_CHARS
from specparse.errors import InvalidModeError


def parse_device_mode(mode: str) -> DeviceMode:
    """
    Decode a device mode string ("r", "rw", "rwm", "mr", ...) into flags.

    Valid mode is a composition of r (read), w (write), and m (mknod),
    each at most once.
    """
    if not mode:
        raise InvalidModeError("invalid device mode: empty mode", mode)
    seen = DeviceMode(0)
    for c in mode:
        flag = MODE_CHARS.get(c)
        if flag is None:
            raise InvalidModeError(f"invalid device mode: {mode} (unknown flag {c!r})", mode)
        if flag in seen:
            raise InvalidModeError(f"invalid device mode: {mode} (repeated flag {c!r})", mode)
        seen |= flag
    return seen


def valid_device_mode(mode: str) -> bool:
    try:
        parse_device_mode(mode)
    except InvalidModeError:
        return False
    return True
