"""
Domain errors raised by the recommendation engine.
"""

from __future__ import annotations

from pydantic import ValidationError


class InvalidInput(ValueError):
    """A profile, constraint or equipment value is outside its fixed domain."""

    def __init__(self, field: str, value: object = None, detail: str | None = None):
        self.field = field
        self.value = value
        message = f"Invalid value for {field}: {value!r}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)

    @classmethod
    def from_validation_error(cls, prefix: str, err: ValidationError) -> InvalidInput:
        """Name the first offending field of a pydantic validation error."""
        first = err.errors()[0]
        loc = ".".join(str(part) for part in first.get("loc", ()))
        field = f"{prefix}.{loc}" if loc else prefix
        return cls(field, first.get("input"), first.get("msg"))
