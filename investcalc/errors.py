"""Exceptions raised by the calculator registry and compute functions."""

from __future__ import annotations

from typing import Dict, List, Tuple


class CalculatorNotFound(LookupError):
    def __init__(self, slug: str):
        super().__init__(f"Calculator not found: {slug}")
        self.slug = slug


class CalculatorUnavailable(LookupError):
    """The calculator is catalogued but has no compute function yet."""

    def __init__(self, slug: str):
        super().__init__(f"Calculator coming soon: {slug}")
        self.slug = slug


class CalculatorInputError(ValueError):
    """Input passed schema validation but cannot be calculated.

    Carries ``(field, message)`` pairs so the API can report them next to the
    offending form field, in the same shape as pydantic validation errors.
    """

    def __init__(self, errors: List[Tuple[str, str]]):
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors))
        self.errors = errors

    @classmethod
    def for_field(cls, field: str, message: str) -> "CalculatorInputError":
        return cls([(field, message)])

    def to_detail(self) -> List[Dict[str, object]]:
        return [
            {"loc": [field], "msg": message, "type": "value_error"}
            for field, message in self.errors
        ]
