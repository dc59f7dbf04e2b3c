"""Application session: one store, its form, its diagnostic logger."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from rich.console import Console

from pynpf.config import NpfConfig
from pynpf.models.camera import CameraConfiguration
from pynpf.models.exposure import ExposureEstimate
from pynpf.npf import estimate_exposure
from pynpf.state.store import StateStore, Unsubscribe, log_snapshot
from pynpf.view.form import FormView

_logger = logging.getLogger(__name__)


class NpfApp:
    """A running calculator session.

    Owns the :class:`StateStore` and hands it to the :class:`FormView`;
    nothing else holds calculator state.

    Usage::

        app = NpfApp(NpfConfig.from_env())
        app.store.apply_update("focalLength", "85")
        app.estimate().detailed_seconds
    """

    def __init__(
        self,
        config: NpfConfig | None = None,
        *,
        console: Console | None = None,
        initial: Mapping[str, str] | None = None,
    ) -> None:
        self._config = config if config is not None else NpfConfig()
        self._store = StateStore()
        self._unsubscribe_log: Unsubscribe | None = None
        if self._config.log_snapshots:
            self._unsubscribe_log = self._store.subscribe(log_snapshot)
        # Raw start-up values go through the normal update path before the
        # form subscribes, so the first render already shows them.
        for field_name, raw_value in (initial or {}).items():
            self._store.apply_update(field_name, raw_value)
        self._view = FormView(self._store, console=console, declination=self._config.declination)
        _logger.debug("Session started with %s", self._config)

    @property
    def config(self) -> NpfConfig:
        return self._config

    @property
    def store(self) -> StateStore:
        return self._store

    @property
    def view(self) -> FormView:
        return self._view

    @property
    def snapshot(self) -> CameraConfiguration:
        return self._store.snapshot

    def estimate(self) -> ExposureEstimate:
        return estimate_exposure(self._store.snapshot, declination_deg=self._config.declination)

    def close(self) -> None:
        """End the session: detach the view and the diagnostic logger."""
        self._view.close()
        if self._unsubscribe_log is not None:
            self._unsubscribe_log()
            self._unsubscribe_log = None
