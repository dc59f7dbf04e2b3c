"""Terminal form bound to a :class:`StateStore`.

The view keeps no copy of the field values: every render reads the store's
current snapshot, and every edit goes straight to the store. The store's
notification re-renders the form synchronously.
"""

from __future__ import annotations

import dataclasses
import logging
import math

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pynpf._constants import (
    F_NUMBER_RANGE,
    FOCAL_LENGTH_RANGE,
    PIXEL_WIDTH_RANGE,
    REFERENCE_TITLE,
    REFERENCE_URL,
)
from pynpf.ingestion.normalize import is_nan, to_float
from pynpf.models.camera import CameraConfiguration, SensorSize, TrailType
from pynpf.npf import estimate_exposure
from pynpf.state.store import StateStore

_logger = logging.getLogger(__name__)

_SLIDER_WIDTH = 30


@dataclasses.dataclass(frozen=True)
class Dropdown:
    """A select control with a fixed list of ``(value, label)`` options."""

    name: str
    label: str
    options: tuple[tuple[str, str], ...]

    def offers(self, value: str) -> bool:
        return any(option == value for option, _ in self.options)


@dataclasses.dataclass(frozen=True)
class RangeInput:
    """A text field and a slider sharing one bound value."""

    name: str
    label: str
    minimum: float
    maximum: float
    step: float
    prefix: str = ""
    unit: str = ""

    @property
    def decimals(self) -> int:
        text = f"{self.step:g}"
        return len(text.split(".")[1]) if "." in text else 0

    def snap(self, position: float) -> str:
        """Return the text a slider dragged to *position* reports."""
        if math.isnan(position):
            raise ValueError(f"{self.label} slider position must be a number")
        clamped = min(max(position, self.minimum), self.maximum)
        steps = round((clamped - self.minimum) / self.step)
        value = min(self.minimum + steps * self.step, self.maximum)
        if self.decimals == 0:
            return str(int(round(value)))
        return f"{round(value, self.decimals):g}"


SENSOR_SIZE = Dropdown(
    name="sensorSize",
    label="Sensor size",
    options=tuple((member.value, member.label) for member in SensorSize),
)
PIXEL_WIDTH = RangeInput("pixelWidth", "Image width", *PIXEL_WIDTH_RANGE, unit="px")
FOCAL_LENGTH = RangeInput("focalLength", "Actual focal length", *FOCAL_LENGTH_RANGE, unit="mm")
F_NUMBER = RangeInput("fNumber", "Aperture", *F_NUMBER_RANGE, prefix="F")
TRAIL_TYPE = Dropdown(
    name="trailType",
    label="Star trailing",
    options=tuple((member.value, member.label) for member in TrailType),
)

CONTROLS: dict[str, Dropdown | RangeInput] = {
    control.name: control for control in (SENSOR_SIZE, PIXEL_WIDTH, FOCAL_LENGTH, F_NUMBER, TRAIL_TYPE)
}


def format_value(value: object) -> str:
    """Format a field value the way the form displays it."""
    if is_nan(value):
        return "NaN"
    if isinstance(value, float):
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return f"{value:g}"
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError:
            # Too many digits for str(); show it the way the slider sees it.
            return format_value(to_float(value))
    return str(value)


def format_seconds(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞"
    return f"{value:.2f} s"


def render_slider(control: RangeInput, value: object) -> Text:
    """Draw the slider track with its knob; NaN draws an empty track."""
    track = ["─"] * _SLIDER_WIDTH
    if isinstance(value, (int, float)) and not is_nan(value):
        # The knob is clamped for display only; the stored value is untouched.
        clamped = min(max(to_float(value), control.minimum), control.maximum)
        ratio = (clamped - control.minimum) / (control.maximum - control.minimum)
        track[round(ratio * (_SLIDER_WIDTH - 1))] = "●"
    return Text.assemble(
        (f"{control.minimum:g} ", "dim"),
        ("".join(track), "cyan"),
        (f" {control.maximum:g}", "dim"),
    )


def render_dropdown(control: Dropdown, value: object) -> Text:
    text = Text()
    selected = str(value)
    for index, (option, label) in enumerate(control.options):
        if index:
            text.append(" | ", style="dim")
        if option == selected:
            text.append(f"[{label}]", style="bold green")
        else:
            text.append(label)
    if not control.offers(selected):
        text.append(f"  ({selected})", style="yellow")
    return text


class FormView:
    """The calculator form.

    Constructed in the single "ready" state, subscribed to *store*.
    ``close()`` removes the subscription.
    """

    def __init__(
        self,
        store: StateStore,
        *,
        console: Console | None = None,
        declination: float = 0.0,
    ) -> None:
        self._store = store
        self._console = console if console is not None else Console()
        self._declination = declination
        self._unsubscribe = store.subscribe(self._on_change)

    @property
    def console(self) -> Console:
        return self._console

    def close(self) -> None:
        self._unsubscribe()

    # ------------------------------------------------------------------
    # User edits
    # ------------------------------------------------------------------

    def select(self, control_name: str, option: str) -> None:
        """Pick *option* in a dropdown.

        Raises :class:`ValueError` when the dropdown does not offer it.
        """
        control = self._control(control_name, Dropdown)
        if not control.offers(option):
            raise ValueError(f"{control.label} has no option {option!r}")
        self._store.apply_update(control.name, option)

    def edit_text(self, control_name: str, raw: str) -> None:
        """Type *raw* into the text half of a range control."""
        control = self._control(control_name, RangeInput)
        self._store.apply_update(control.name, raw)

    def slide(self, control_name: str, position: float) -> None:
        """Drag the slider half of a range control to *position*."""
        control = self._control(control_name, RangeInput)
        self._store.apply_update(control.name, control.snap(position))

    def edit(self, control_name: str, raw: str) -> None:
        """Route *raw* to ``select`` or ``edit_text`` by control kind."""
        if isinstance(CONTROLS.get(control_name), Dropdown):
            self.select(control_name, raw)
        else:
            self.edit_text(control_name, raw)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> RenderableType:
        snapshot = self._store.snapshot
        return Group(
            Text("NPF rule", style="bold", justify="center"),
            Text.assemble("Theory: ", (REFERENCE_TITLE, f"link {REFERENCE_URL}"), justify="center"),
            Panel(self._controls_table(snapshot), border_style="dim"),
            self._estimate_table(snapshot),
        )

    def _controls_table(self, snapshot: CameraConfiguration) -> Table:
        values = snapshot.as_dict()
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        for control in CONTROLS.values():
            value = values[control.name]
            if isinstance(control, Dropdown):
                table.add_row(control.label, render_dropdown(control, value))
                continue
            field = Text.assemble(control.prefix, (format_value(value), "reverse"))
            if control.unit:
                field.append(f" [{control.unit}]", style="dim")
            table.add_row(control.label, field)
            table.add_row("", render_slider(control, value))
        return table

    def _estimate_table(self, snapshot: CameraConfiguration) -> Table:
        estimate = estimate_exposure(snapshot, declination_deg=self._declination)
        table = Table(title="Maximum exposure", show_header=False, header_style="bold magenta")
        table.add_column(style="cyan")
        table.add_column(style="green", justify="right")
        table.add_row("Pixel pitch", f"{format_value(round(estimate.pixel_pitch_um, 2))} µm")
        table.add_row("NPF (simple)", format_seconds(estimate.simple_seconds))
        table.add_row("NPF (detailed)", format_seconds(estimate.detailed_seconds))
        table.add_row("500 rule", format_seconds(estimate.rule_500_seconds))
        return table

    def _on_change(self, snapshot: CameraConfiguration) -> None:
        _logger.debug("Re-rendering form")
        self._console.print(self.render())

    def _control(self, name: str, kind: type) -> Dropdown | RangeInput:
        control = CONTROLS.get(name)
        if not isinstance(control, kind):
            raise ValueError(f"no {kind.__name__.lower()} control named {name!r}")
        return control
