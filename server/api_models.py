# server/api_models.py
from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator
from specparse.devices.blkio import validate_bps_device, validate_iops_device, validate_weight_device
from specparse.devices.device_spec import parse_device
from specparse.devices.models import DeviceSpec, ThrottleDevice, WeightDevice
from specparse.namespaces.modes import MODES_BY_KIND


class SpecifierRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')
    value: str


class NamespaceRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')
    value: str
    kind: str

    @field_validator("kind")
    @classmethod
    def _known_kind(cls, v: str) -> str:
        if v not in MODES_BY_KIND:
            raise ValueError(f"kind must be one of {', '.join(MODES_BY_KIND)}")
        return v


class BlkioRequest(BaseModel):
    """All block IO and device flags of one container, as raw flag values."""
    model_config = ConfigDict(extra='forbid')
    weight_device: List[str] = Field(default_factory=list)
    read_bps: List[str] = Field(default_factory=list)
    write_bps: List[str] = Field(default_factory=list)
    read_iops: List[str] = Field(default_factory=list)
    write_iops: List[str] = Field(default_factory=list)
    devices: List[str] = Field(default_factory=list)


class BlkioResponse(BaseModel):
    weight_device: List[WeightDevice]
    read_bps: List[ThrottleDevice]
    write_bps: List[ThrottleDevice]
    read_iops: List[ThrottleDevice]
    write_iops: List[ThrottleDevice]
    devices: List[DeviceSpec]

    @classmethod
    def from_request(cls, request: BlkioRequest) -> "BlkioResponse":
        # the first bad value raises its SpecError unchanged
        return cls(
            weight_device=[validate_weight_device(v) for v in request.weight_device],
            read_bps=[validate_bps_device(v) for v in request.read_bps],
            write_bps=[validate_bps_device(v) for v in request.write_bps],
            read_iops=[validate_iops_device(v) for v in request.read_iops],
            write_iops=[validate_iops_device(v) for v in request.write_iops],
            devices=[parse_device(v) for v in request.devices],
        )
