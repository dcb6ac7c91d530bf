"""Error value hierarchy -- calculators return these inside Err, never raise them.

Every error is a frozen dataclass that can be pattern-matched and
serialized. Base class CreditSupportError, two @final subclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final


@dataclass(frozen=True, slots=True)
class CreditSupportError:
    """Base error value. NOT @final -- has subclasses."""

    message: str
    code: str
    source: str  # "module.function" that produced this error

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class FieldViolation:
    """Describes a single field validation failure."""

    path: str  # e.g. "rounding.delivery_amount"
    constraint: str  # e.g. "must be >= 0"
    actual_value: str  # e.g. "-0.5"


@final
@dataclass(frozen=True, slots=True)
class InvalidInputError(CreditSupportError):
    """A required argument is absent or violates its contract."""

    fields: tuple[FieldViolation, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            **CreditSupportError.to_dict(self),
            "fields": [
                {"path": f.path, "constraint": f.constraint, "actual_value": f.actual_value}
                for f in self.fields
            ],
        }


@final
@dataclass(frozen=True, slots=True)
class CurrencyMismatchError(CreditSupportError):
    """A Money argument is not denominated in the base currency."""

    field: str
    expected: str
    actual: str

    def to_dict(self) -> dict[str, object]:
        return {
            **CreditSupportError.to_dict(self),
            "field": self.field,
            "expected": self.expected,
            "actual": self.actual,
        }
