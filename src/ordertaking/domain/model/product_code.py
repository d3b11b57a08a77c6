"""Product codes.

In this context a product is only represented by its code. Widgets and
Gizmos come from different catalogs and follow different code rules, so
``ProductCode`` is a closed choice between the two rather than a string
with a tag.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ordertaking.domain.model import constrained_type
from ordertaking.domain.model.constrained_type import ConstrainedValue
from ordertaking.domain.model.errors import ConstraintViolation
from ordertaking.domain.model.result import Err, Result

WIDGET_CODE_PATTERN = re.compile(r"W\d{4}")
GIZMO_CODE_PATTERN = re.compile(r"G\d{3}")

_PRODUCT_CODE_VARIANTS = ("Widget", "Gizmo")


@dataclass(frozen=True)
class WidgetCode(ConstrainedValue):
    """A "W" followed by four digits."""

    value: str

    @classmethod
    def create(cls, field_name: str, raw: str) -> Result[WidgetCode, ConstraintViolation]:
        return constrained_type.create_like(field_name, cls._wrap, WIDGET_CODE_PATTERN, raw)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GizmoCode(ConstrainedValue):
    """A "G" followed by three digits."""

    value: str

    @classmethod
    def create(cls, field_name: str, raw: str) -> Result[GizmoCode, ConstraintViolation]:
        return constrained_type.create_like(field_name, cls._wrap, GIZMO_CODE_PATTERN, raw)

    def __str__(self) -> str:
        return self.value


class ProductCode(ABC):
    """Either a ``Widget`` or a ``Gizmo``; no other variant can be declared.

    Consumers should branch on every variant and raise ``TypeError`` in
    a final fallback so a new variant cannot slip through unnoticed.
    """

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _PRODUCT_CODE_VARIANTS:
            raise TypeError(
                f"ProductCode is closed; cannot declare variant {cls.__qualname__}"
            )

    @property
    @abstractmethod
    def value(self) -> str:
        """The plain value inside whichever variant this is."""

    @staticmethod
    def create(field_name: str, raw: str) -> Result[ProductCode, ConstraintViolation]:
        """Pick the variant from the first character, then validate it.

        Empty input is ``EMPTY_INPUT``; anything not starting with "W" or
        "G" is ``UNRECOGNIZED_FORMAT``.
        """
        if not raw:
            return Err(ConstraintViolation.empty_input(field_name))
        if raw.startswith("W"):
            return WidgetCode.create(field_name, raw).map(Widget)
        if raw.startswith("G"):
            return GizmoCode.create(field_name, raw).map(Gizmo)
        return Err(ConstraintViolation.unrecognized_format(field_name, raw))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Widget(ProductCode):
    code: WidgetCode

    @property
    def value(self) -> str:
        return self.code.value


@dataclass(frozen=True)
class Gizmo(ProductCode):
    code: GizmoCode

    @property
    def value(self) -> str:
        return self.code.value
