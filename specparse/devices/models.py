# specparse/devices/models.py
import enum
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from specparse.ReadConfig import ReadConfig as rc

UINT16_MAX = 2**16 - 1
UINT64_MAX = 2**64 - 1
MIN_WEIGHT = 10
MAX_WEIGHT = 1000


class DeviceMode(enum.Flag):
    READ = enum.auto()
    WRITE = enum.auto()
    MKNOD = enum.auto()

    @classmethod
    def full(cls) -> "DeviceMode":
        return cls.READ | cls.WRITE | cls.MKNOD

    def __str__(self) -> str:
        # canonical r, w, m ordering regardless of how it was written
        return "".join(c for c, flag in MODE_CHARS.items() if flag in self)


MODE_CHARS = {
    "r": DeviceMode.READ,
    "w": DeviceMode.WRITE,
    "m": DeviceMode.MKNOD,
}


def _check_device_path(path: str) -> str:
    root = rc().device_config["device_root"]
    if not path.startswith(root) or path == root:
        raise ValueError(f"device path must start with {root}: {path!r}")
    return path


class WeightDevice(BaseModel):
    """device:weight pair for --blkio-weight-device"""
    model_config = ConfigDict(extra="forbid", frozen=True)
    path: str = Field(min_length=1)
    weight: int = Field(ge=0, le=UINT16_MAX)

    @field_validator("path")
    @classmethod
    def _under_device_root(cls, v: str) -> str:
        return _check_device_path(v)

    @field_validator("weight")
    @classmethod
    def _weight_range(cls, v: int) -> int:
        # 0 means "use the default"
        if v > 0 and (v < MIN_WEIGHT or v > MAX_WEIGHT):
            raise ValueError(f"weight must be 0 or within [{MIN_WEIGHT}, {MAX_WEIGHT}], got {v}")
        return v

    def __str__(self) -> str:
        return f"{self.path}:{self.weight}"


class ThrottleDevice(BaseModel):
    """device:rate_per_second pair for --device-{read,write}-{bps,iops}"""
    model_config = ConfigDict(extra="forbid", frozen=True)
    path: str = Field(min_length=1)
    rate: int = Field(ge=0, le=UINT64_MAX)

    @field_validator("path")
    @classmethod
    def _under_device_root(cls, v: str) -> str:
        return _check_device_path(v)

    def __str__(self) -> str:
        return f"{self.path}:{self.rate}"


class DeviceSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    src: str = Field(min_length=1)
    dst: str = Field(min_length=1)
    permissions: DeviceMode = Field(default_factory=DeviceMode.full)

    @field_serializer("permissions")
    def _permissions_as_mode(self, permissions: DeviceMode) -> str:
        return str(permissions)

    def __str__(self) -> str:
        return f"{self.src}:{self.dst}:{self.permissions}"
