from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

REQUIRED_VEHICLE_FIELDS = ("year", "make", "model")
UPGRADE_DIAMETERS = ("20", "22", "24")


class FitmentQuery(BaseModel):
    """Vehicle identification sent by the caller."""

    model_config = ConfigDict(extra="ignore")

    year: Optional[Union[int, str]] = None
    make: Optional[Union[int, str]] = None
    model: Optional[Union[int, str]] = None
    trim: Optional[Union[int, str]] = None

    def missing_fields(self) -> list[str]:
        """Required fields that are absent or empty."""
        missing = []
        for name in REQUIRED_VEHICLE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, str):
                value = value.strip()
            if not value:
                missing.append(name)
        return missing


class FitmentSpec(BaseModel):
    """One wheel/tire combination. All values are free-form model output."""

    model_config = ConfigDict(extra="allow")

    wheelSize: Optional[str] = None
    tireSize: Optional[str] = None
    boltPattern: Optional[str] = None
    hubSize: Optional[str] = None
    offset: Optional[str] = None
    tpms: Optional[str] = None
    notes: Optional[str] = None


class FitmentResult(BaseModel):
    """OEM setup plus upgrade options keyed by wheel diameter ("20", "22", "24")."""

    model_config = ConfigDict(extra="allow")

    oem: Optional[FitmentSpec] = None
    upgrades: dict[str, list[FitmentSpec]] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
