import re
from decimal import Decimal, localcontext

# binary multipliers: k = 1024, m = 1024**2, ...
_BINARY_UNITS = {
    "": 1,
    "k": 1024,
    "m": 1024**2,
    "g": 1024**3,
    "t": 1024**4,
    "p": 1024**5,
}

# "512", "1.5k", "10 MiB", "2gb", "4G"
_RAM_RE = re.compile(r"(\d+(?:\.\d+)?) ?([kmgtp])?i?b?", re.IGNORECASE | re.ASCII)


def ram_in_bytes(size: str) -> int:
    """
    Parse a human-readable memory/rate size into bytes.

    Accepts a non-negative decimal number, an optional space and an optional
    unit (k, m, g, t, p with optional 'i' and 'b'), case-insensitive. Units
    are always binary. Fractional byte counts are truncated.

    :raises ValueError: when the string does not match the grammar.
    """
    m = _RAM_RE.fullmatch(size)
    if not m:
        raise ValueError(f"invalid size: {size!r}")
    number, unit = m.group(1), (m.group(2) or "").lower()
    with localcontext() as ctx:
        # exact product: the default 28 digits would round near 2**64
        ctx.prec = len(number) + 20
        return int(Decimal(number) * _BINARY_UNITS[unit])


def parse_uint(value: str, bits: int = 64) -> int:
    """Unsigned base-10 integer: ASCII digits only, no sign, bounded by ``bits``."""
    if not value or not value.isascii() or not value.isdigit():
        raise ValueError(f"invalid syntax: {value!r}")
    n = int(value)
    if n > 2**bits - 1:
        raise ValueError(f"value out of range: {value!r}")
    return n
