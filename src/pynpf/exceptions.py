"""Custom exception hierarchy for pynpf."""

from __future__ import annotations


class NpfError(Exception):
    """Base exception for all pynpf errors."""


class NpfConfigError(NpfError):
    """Invalid ambient configuration (environment or overrides)."""


class UnknownFieldError(NpfError, KeyError):
    """Update addressed to a field the camera configuration does not have.

    Raised at the update boundary only. Field *values* never raise: bad
    numeric text is stored as NaN instead.
    """

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"unknown configuration field: {field_name!r}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])
