"""Base model and enum for calculator state.

Every snapshot model inherits from :class:`NpfBaseModel` which provides:

* ``alias_generator=to_camel`` so the snake_case fields dump to the
  camelCase keys the form controls are named after (``pixelWidth``...).
* Frozen instances: a snapshot is replaced, never mutated.

Choice enums inherit from :class:`NpfEnum`, a string enum whose values are
the raw option strings offered by the form, plus a display ``label``.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class NpfEnum(enum.StrEnum):
    """Base for the fixed-choice form fields.

    Subclasses register their display strings in ``_labels()``.
    """

    @classmethod
    def _labels(cls) -> dict[str, str]:
        return {}

    @property
    def label(self) -> str:
        """Fixed display string for this option."""
        return type(self)._labels().get(self.value, self.value)


class NpfBaseModel(BaseModel):
    """Base for immutable calculator models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )
