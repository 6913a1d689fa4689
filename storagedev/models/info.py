"""Serializable snapshot of a storage device."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DeviceInfo(BaseModel):
    """Every descriptor attribute captured at one point in time."""

    model_config = ConfigDict(extra='forbid', frozen=True)

    device_file: str
    device_name: str
    device_file_by_id: Optional[str] = None
    description: str = ""
    size: int = Field(0, ge=0, description="Size in bytes")
    block_size: int = Field(0, ge=0)
    sector_size: int = Field(0, ge=0)
    model: str = ""
    vendor: str = ""
    serial_number: str = ""
    wwn: str = ""
    rotational: bool = True
    removable: bool = False
    usb: bool = False
    ata: bool = False
    raid: bool = False
    read_only: bool = False
    smart_support: bool = False
    smart_device_type: str = ""
    device_links: List[str] = Field(default_factory=list)

    @classmethod
    def from_device(cls, device) -> "DeviceInfo":
        """Build a snapshot by calling each getter of ``device``.

        Command failures from the size getters propagate.
        """
        return cls(
            device_file=device.device_file,
            device_name=device.get_device_name(canonical=True),
            device_file_by_id=device.get_device_file_by_id(),
            description=device.get_description(),
            size=device.get_size(),
            block_size=device.get_block_size(),
            sector_size=device.get_sector_size(),
            model=device.get_model(),
            vendor=device.get_vendor(),
            serial_number=device.get_serial_number(),
            wwn=device.get_wwn(),
            rotational=device.is_rotational(),
            removable=device.is_removable(),
            usb=device.is_usb(),
            ata=device.is_ata(),
            raid=device.is_raid(),
            read_only=device.is_read_only(),
            smart_support=device.has_smart_support(),
            smart_device_type=device.get_smart_device_type(),
            device_links=device.get_device_links(),
        )

    def summary(self) -> Dict[str, Any]:
        """Subset of fields shown in device listings."""
        return self.model_dump(include={
            'device_file', 'model', 'size', 'rotational', 'usb', 'smart_support',
        })
