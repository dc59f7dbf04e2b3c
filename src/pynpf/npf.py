"""NPF rule evaluation.

The NPF rule (Frédéric Michaud, Société d'Astronomie Populaire) estimates
the longest exposure before stars trail, from the aperture N, the pixel
pitch p in micrometres and the focal length F in millimetres:

* simple form: ``t = (35 N + 30 p) / F``
* detailed form: ``t = k (16.856 N + 0.0997 F + 13.713 p) / (F cos d)``
  where ``k`` is the trail tolerance and ``d`` the declination.

The classic "500 rule" is computed alongside for comparison.

Evaluation never raises: NaN inputs give NaN, zero divisors give inf.
"""

from __future__ import annotations

import math

from pynpf._constants import CROP_FACTOR, SENSOR_WIDTH_MM, TRAIL_FACTOR
from pynpf.ingestion.normalize import to_float
from pynpf.models.camera import CameraConfiguration
from pynpf.models.exposure import ExposureEstimate


def _lookup(table: dict[str, float], key: object) -> float:
    return table.get(str(key), math.nan)


def _divide(numerator: float, denominator: float) -> float:
    if math.isnan(numerator) or math.isnan(denominator):
        return math.nan
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def pixel_pitch_um(sensor_size: object, pixel_width: object) -> float:
    """Pixel pitch in micrometres for a sensor category and image width."""
    return _divide(_lookup(SENSOR_WIDTH_MM, sensor_size) * 1000.0, to_float(pixel_width))


def simple_npf(f_number: float, pitch_um: float, focal_length: float) -> float:
    return _divide(35.0 * f_number + 30.0 * pitch_um, focal_length)


def detailed_npf(
    f_number: float,
    pitch_um: float,
    focal_length: float,
    *,
    trail_factor: float = 1.0,
    declination_deg: float = 0.0,
) -> float:
    numerator = trail_factor * (16.856 * f_number + 0.0997 * focal_length + 13.713 * pitch_um)
    return _divide(numerator, focal_length * math.cos(math.radians(declination_deg)))


def rule_500(focal_length: float, crop_factor: float) -> float:
    return _divide(500.0, focal_length * crop_factor)


def estimate_exposure(config: CameraConfiguration, *, declination_deg: float = 0.0) -> ExposureEstimate:
    """Compute every exposure estimate for *config*."""
    f_number = to_float(config.f_number)
    focal_length = to_float(config.focal_length)
    pitch = pixel_pitch_um(config.sensor_size, config.pixel_width)

    return ExposureEstimate(
        pixel_pitch_um=pitch,
        simple_seconds=simple_npf(f_number, pitch, focal_length),
        detailed_seconds=detailed_npf(
            f_number,
            pitch,
            focal_length,
            trail_factor=_lookup(TRAIL_FACTOR, config.trail_type),
            declination_deg=declination_deg,
        ),
        rule_500_seconds=rule_500(focal_length, _lookup(CROP_FACTOR, config.sensor_size)),
    )
