"""Data models for the calculator state and its derived values."""

from pynpf.models._base import NpfBaseModel, NpfEnum
from pynpf.models.camera import CameraConfiguration, SensorSize, TrailType
from pynpf.models.exposure import ExposureEstimate

__all__ = [
    "CameraConfiguration",
    "ExposureEstimate",
    "NpfBaseModel",
    "NpfEnum",
    "SensorSize",
    "TrailType",
]
