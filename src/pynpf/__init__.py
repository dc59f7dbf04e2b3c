"""pynpf - NPF rule exposure calculator for astrophotography."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pynpf")
except PackageNotFoundError:
    __version__ = "0+local"
from pynpf.app import NpfApp
from pynpf.config import NpfConfig
from pynpf.exceptions import NpfConfigError, NpfError, UnknownFieldError
from pynpf.models import CameraConfiguration, ExposureEstimate, SensorSize, TrailType
from pynpf.npf import estimate_exposure
from pynpf.state.events import (
    SetFNumber,
    SetFocalLength,
    SetPixelWidth,
    SetSensorSize,
    SetTrailType,
    UpdateCommand,
)
from pynpf.state.store import StateStore
from pynpf.view.form import FormView

__all__ = [
    "__version__",
    "CameraConfiguration",
    "ExposureEstimate",
    "FormView",
    "NpfApp",
    "NpfConfig",
    "NpfConfigError",
    "NpfError",
    "SensorSize",
    "SetFNumber",
    "SetFocalLength",
    "SetPixelWidth",
    "SetSensorSize",
    "SetTrailType",
    "StateStore",
    "TrailType",
    "UnknownFieldError",
    "UpdateCommand",
    "estimate_exposure",
]
