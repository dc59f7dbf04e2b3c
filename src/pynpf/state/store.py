"""In-memory state store for the calculator inputs.

This is the only component allowed to replace the camera configuration
snapshot. Every replacement is announced synchronously to subscribers.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from typing import assert_never

from pynpf.ingestion.apply import apply_raw_update
from pynpf.models.camera import CameraConfiguration
from pynpf.state.events import (
    SetFNumber,
    SetFocalLength,
    SetPixelWidth,
    SetSensorSize,
    SetTrailType,
    UpdateCommand,
)

_logger = logging.getLogger(__name__)

Subscriber = Callable[[CameraConfiguration], None]
Unsubscribe = Callable[[], None]


class StateStore:
    """Holder of the current :class:`CameraConfiguration`.

    One store is created per running session and handed to the views that
    need it. Updates are total replacements of a single field; the other
    four fields are carried over unchanged.
    """

    def __init__(self, *, initial: CameraConfiguration | None = None) -> None:
        self._snapshot = initial if initial is not None else CameraConfiguration()
        self._subscribers: dict[int, Subscriber] = {}
        self._tokens = itertools.count()

    @property
    def snapshot(self) -> CameraConfiguration:
        """The current configuration."""
        return self._snapshot

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        """Register *callback* for every new snapshot.

        Returns a handle that removes the registration. Calling the handle
        more than once is a no-op.
        """
        token = next(self._tokens)
        self._subscribers[token] = callback

        def _unsubscribe() -> None:
            self._subscribers.pop(token, None)

        return _unsubscribe

    def apply(self, command: UpdateCommand) -> None:
        """Apply a typed update command and notify subscribers."""
        match command:
            case SetSensorSize(value=value):
                update = {"sensor_size": value}
            case SetPixelWidth(value=value):
                update = {"pixel_width": value}
            case SetFocalLength(value=value):
                update = {"focal_length": value}
            case SetFNumber(value=value):
                update = {"f_number": value}
            case SetTrailType(value=value):
                update = {"trail_type": value}
            case _:
                assert_never(command)

        # model_copy skips validation: raw choice strings and NaN are kept as-is.
        self._snapshot = self._snapshot.model_copy(update=update)
        _logger.debug("Applied %s=%r", command.field, command.value)
        self._notify()

    def apply_update(self, field_name: str, raw_value: str) -> CameraConfiguration:
        """Parse *raw_value* for *field_name* and apply it.

        Never fails on the value: unparsable numbers are stored as NaN and
        unknown choice strings are stored verbatim. An unknown
        *field_name* raises :class:`pynpf.exceptions.UnknownFieldError`.
        """
        command = apply_raw_update(self.apply, field_name, raw_value)
        _logger.debug("Raw %s text parsed as %s", field_name, type(command).__name__)
        return self._snapshot

    def _notify(self) -> None:
        snapshot = self._snapshot
        for callback in list(self._subscribers.values()):
            try:
                callback(snapshot)
            except Exception:
                _logger.debug("Snapshot subscriber %r failed", callback, exc_info=True)


def log_snapshot(snapshot: CameraConfiguration) -> None:
    """Diagnostic subscriber: log the full snapshot."""
    _logger.info("Camera configuration: %s", snapshot.as_dict())
