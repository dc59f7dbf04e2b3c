"""Camera configuration snapshot: the five form fields."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from pynpf.ingestion.normalize import to_enum
from pynpf.models._base import NpfBaseModel, NpfEnum

__all__ = [
    "CameraConfiguration",
    "SensorSize",
    "TrailType",
]


class SensorSize(NpfEnum):
    """Sensor format category."""

    FULL = "full"
    APSC_CANON = "apsc-c"
    APSC_OTHER = "apsc-x"
    MFT = "mft"

    @classmethod
    def _labels(cls) -> dict[str, str]:
        return {
            "full": "Full frame",
            "apsc-c": "APS-C (Canon)",
            "apsc-x": "APS-C (other)",
            "mft": "Micro Four Thirds",
        }


class TrailType(NpfEnum):
    """Tolerated amount of star movement."""

    PIN_POINT = "pin-point"
    SLIGHT = "slight"
    VISIBLE = "visible"

    @classmethod
    def _labels(cls) -> dict[str, str]:
        return {
            "pin-point": "Pin-point",
            "slight": "Slight trail",
            "visible": "Visible trail",
        }


class CameraConfiguration(NpfBaseModel):
    """Immutable snapshot of the calculator inputs.

    Values are stored exactly as parsed: out-of-set choice strings stay raw
    strings, and unparsable numbers are ``float("nan")``.
    """

    sensor_size: SensorSize | str = SensorSize.FULL
    """Sensor format; a raw string when not one of the known variants."""
    pixel_width: int | float = 6000
    """Image width in pixels. Intended range 1-10000."""
    focal_length: int | float = 50
    """Actual focal length in mm. Intended range 1-1000."""
    f_number: float = 1.4
    """Aperture. Intended range 0.7-36, step 0.1."""
    trail_type: TrailType | str = TrailType.PIN_POINT
    """Trail tolerance; a raw string when not one of the known variants."""

    @field_validator("sensor_size", mode="before")
    @classmethod
    def _coerce_sensor_size(cls, value: Any) -> Any:
        return to_enum(SensorSize, value) if isinstance(value, str) else value

    @field_validator("trail_type", mode="before")
    @classmethod
    def _coerce_trail_type(cls, value: Any) -> Any:
        return to_enum(TrailType, value) if isinstance(value, str) else value

    def as_dict(self) -> dict[str, Any]:
        """Return the snapshot keyed by the camelCase form field names.

        Choice fields are plain strings; NaN stays ``float("nan")``.
        """
        dumped = self.model_dump(by_alias=True)
        return {key: value.value if isinstance(value, NpfEnum) else value for key, value in dumped.items()}
