"""Runtime configuration for pynpf."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any

from pynpf.exceptions import NpfConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def parse_log_level(value: str) -> int:
    """Return the numeric logging level named by *value* (case-insensitive)."""
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise NpfConfigError(f"not a logging level: {value!r}")
    return level


@dataclasses.dataclass(frozen=True)
class NpfConfig:
    """Application configuration.

    None of these values seed the camera configuration itself; the five
    form fields always start from their fixed defaults.

    Parameters
    ----------
    declination : float
        Declination of the photographed field, in degrees. Used by the
        detailed NPF formula (``cos(declination)``). ``0`` is the celestial
        equator, the worst case for trailing.
    log_level : int
        Root logging level configured by the CLI.
    log_snapshots : bool
        Subscribe the diagnostic logger that emits every new snapshot.
    """

    declination: float = 0.0
    log_level: int = logging.WARNING
    log_snapshots: bool = True

    def __post_init__(self) -> None:
        if not -90.0 <= self.declination <= 90.0:
            raise NpfConfigError(f"declination must be between -90 and 90 degrees, got {self.declination}")

    @classmethod
    def from_env(cls, **overrides: Any) -> NpfConfig:
        """Create configuration from environment variables.

        Reads ``NPF_DECLINATION``, ``NPF_LOG_LEVEL`` and
        ``NPF_LOG_SNAPSHOTS``. Explicit keyword arguments override
        environment values.

        Raises
        ------
        NpfConfigError
            When an environment value cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        declination_env = env.get("NPF_DECLINATION")
        if declination_env is not None and "declination" not in overrides:
            try:
                config_kwargs["declination"] = float(declination_env)
            except ValueError as exc:
                raise NpfConfigError(f"NPF_DECLINATION is not a number: {declination_env!r}") from exc

        level_env = env.get("NPF_LOG_LEVEL")
        if level_env is not None and "log_level" not in overrides:
            config_kwargs["log_level"] = parse_log_level(level_env)

        if "log_snapshots" not in overrides:
            config_kwargs["log_snapshots"] = _env_bool(env.get("NPF_LOG_SNAPSHOTS"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
