"""Views rendering the calculator state."""

from pynpf.view.form import CONTROLS, Dropdown, FormView, RangeInput

__all__ = ["CONTROLS", "Dropdown", "FormView", "RangeInput"]
