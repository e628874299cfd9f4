"""
Errors raised while parsing resource and namespace specifiers.

Every error is a ValueError so callers that only care about "bad input"
can catch that; ``kind`` is a stable tag for API responses.
"""


class SpecError(ValueError):
    kind = "spec_error"

    def __init__(self, message: str, value: str | None = None):
        super().__init__(message)
        self.value = value


class BadFormatError(SpecError):
    """Wrong number of colon-delimited fields."""
    kind = "bad_format"


class InvalidPathError(SpecError):
    """Device path is missing the device root prefix."""
    kind = "invalid_path"


class InvalidWeightError(SpecError):
    kind = "invalid_weight"


class InvalidRateError(SpecError):
    kind = "invalid_rate"


class InvalidModeError(SpecError):
    kind = "invalid_mode"


class InvalidDeviceSpecError(SpecError):
    kind = "invalid_device_spec"


class InvalidNamespaceError(SpecError):
    kind = "invalid_namespace"
