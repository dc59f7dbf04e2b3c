"""Raw form input -> update command.

This is the only place that knows how each field's raw text is read:

- choices (sensor size, trail type) are taken verbatim
- integers (pixel width, focal length) use leading-prefix integer parsing
- the f-number uses leading-prefix float parsing

Unparsable numbers become NaN; the command is still produced.
"""

from __future__ import annotations

from collections.abc import Callable

from pynpf.exceptions import UnknownFieldError
from pynpf.ingestion.normalize import parse_float, parse_int, to_enum
from pynpf.models.camera import SensorSize, TrailType
from pynpf.state.events import (
    FIELD_NAMES,
    SetFNumber,
    SetFocalLength,
    SetPixelWidth,
    SetSensorSize,
    SetTrailType,
    UpdateCommand,
)

_SNAKE_TO_CAMEL: dict[str, str] = {
    "sensor_size": "sensorSize",
    "pixel_width": "pixelWidth",
    "focal_length": "focalLength",
    "f_number": "fNumber",
    "trail_type": "trailType",
}

_BUILDERS: dict[str, Callable[[str], UpdateCommand]] = {
    "sensorSize": lambda raw: SetSensorSize(value=to_enum(SensorSize, raw)),
    "pixelWidth": lambda raw: SetPixelWidth(value=parse_int(raw)),
    "focalLength": lambda raw: SetFocalLength(value=parse_int(raw)),
    "fNumber": lambda raw: SetFNumber(value=parse_float(raw)),
    "trailType": lambda raw: SetTrailType(value=to_enum(TrailType, raw)),
}


def canonical_field_name(field_name: str) -> str:
    """Map a camelCase or snake_case field name to its camelCase form.

    Raises :class:`UnknownFieldError` for anything else.
    """
    name = _SNAKE_TO_CAMEL.get(field_name, field_name)
    if name not in FIELD_NAMES:
        raise UnknownFieldError(field_name)
    return name


def parse_update(field_name: str, raw_value: str) -> UpdateCommand:
    """Build the typed update command for *field_name* from raw text."""
    return _BUILDERS[canonical_field_name(field_name)](raw_value)


def apply_raw_update(
    store_apply: Callable[[UpdateCommand], None],
    field_name: str,
    raw_value: str,
) -> UpdateCommand:
    """Parse and apply a raw update to a store."""
    command = parse_update(field_name, raw_value)
    store_apply(command)
    return command
