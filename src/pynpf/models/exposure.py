"""Computed NPF exposure estimate."""

from __future__ import annotations

import math

from pynpf.models._base import NpfBaseModel


class ExposureEstimate(NpfBaseModel):
    """Maximum exposure times derived from a camera configuration.

    Any value may be NaN (an input is NaN or unknown) or infinite (a zero
    divisor). Times are in seconds.
    """

    pixel_pitch_um: float = math.nan
    simple_seconds: float = math.nan
    """``(35 N + 30 p) / F``."""
    detailed_seconds: float = math.nan
    """``k (16.856 N + 0.0997 F + 13.713 p) / (F cos d)``."""
    rule_500_seconds: float = math.nan
    """``500 / (F * crop)``, shown for comparison."""
