"""Validation failures as plain values.

A ``ConstraintViolation`` is what every factory hands back on failure.
It names the field, the rule that was broken and, where there is one,
the bound or pattern involved.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    EMPTY_INPUT = "EMPTY_INPUT"
    TOO_LONG = "TOO_LONG"
    BELOW_MIN = "BELOW_MIN"
    ABOVE_MAX = "ABOVE_MAX"
    PATTERN_MISMATCH = "PATTERN_MISMATCH"
    UNRECOGNIZED_FORMAT = "UNRECOGNIZED_FORMAT"
    UNRECOGNIZED_VALUE = "UNRECOGNIZED_VALUE"


@dataclass(frozen=True)
class ConstraintViolation:
    """A single field failed its validation rule."""

    field_name: str
    kind: ErrorKind
    message: str
    bound: object = None  # max length, min/max value, pattern or raw input

    def __str__(self) -> str:
        return self.message

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def empty_input(field_name: str) -> ConstraintViolation:
        return ConstraintViolation(
            field_name, ErrorKind.EMPTY_INPUT, f"{field_name} must not be empty"
        )

    @staticmethod
    def too_long(field_name: str, max_len: int) -> ConstraintViolation:
        return ConstraintViolation(
            field_name,
            ErrorKind.TOO_LONG,
            f"{field_name} must not be more than {max_len} chars",
            max_len,
        )

    @staticmethod
    def below_min(field_name: str, min_val: object) -> ConstraintViolation:
        return ConstraintViolation(
            field_name,
            ErrorKind.BELOW_MIN,
            f"{field_name}: Must not be less than {min_val}",
            min_val,
        )

    @staticmethod
    def above_max(field_name: str, max_val: object) -> ConstraintViolation:
        return ConstraintViolation(
            field_name,
            ErrorKind.ABOVE_MAX,
            f"{field_name}: Must not be greater than {max_val}",
            max_val,
        )

    @staticmethod
    def pattern_mismatch(field_name: str, raw: str, pattern: str) -> ConstraintViolation:
        return ConstraintViolation(
            field_name,
            ErrorKind.PATTERN_MISMATCH,
            f"{field_name}: '{raw}' must match the pattern '{pattern}'",
            pattern,
        )

    @staticmethod
    def unrecognized_format(field_name: str, raw: str) -> ConstraintViolation:
        return ConstraintViolation(
            field_name,
            ErrorKind.UNRECOGNIZED_FORMAT,
            f"{field_name}: Format not recognized '{raw}'",
            raw,
        )

    @staticmethod
    def unrecognized_value(
        field_name: str, raw: str, choices: tuple[str, ...]
    ) -> ConstraintViolation:
        allowed = ", ".join(f"'{c}'" for c in choices)
        return ConstraintViolation(
            field_name,
            ErrorKind.UNRECOGNIZED_VALUE,
            f"{field_name}: Must be one of {allowed}",
            raw,
        )
