"""Typed update commands.

One command per camera configuration field, each carrying a value of that
field's type. Only the state/store layer is allowed to apply them.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from pynpf.models.camera import SensorSize, TrailType


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True)


class SetSensorSize(_Command):
    field: Literal["sensorSize"] = "sensorSize"
    value: SensorSize | str


class SetPixelWidth(_Command):
    field: Literal["pixelWidth"] = "pixelWidth"
    value: int | float


class SetFocalLength(_Command):
    field: Literal["focalLength"] = "focalLength"
    value: int | float


class SetFNumber(_Command):
    field: Literal["fNumber"] = "fNumber"
    value: float


class SetTrailType(_Command):
    field: Literal["trailType"] = "trailType"
    value: TrailType | str


UpdateCommand = Annotated[
    SetSensorSize | SetPixelWidth | SetFocalLength | SetFNumber | SetTrailType,
    Field(discriminator="field"),
]
"""Discriminated union of all update commands, tagged by ``field``."""

FIELD_NAMES: tuple[str, ...] = ("sensorSize", "pixelWidth", "focalLength", "fNumber", "trailType")
