from contextlib import contextmanager
from enum import IntEnum
from typing import Any, Generator

from pydantic import BaseModel


class BoundedError(IntEnum):
    """Reason a value was rejected by a checked constructor."""

    LessThanMinimum = 1
    GreaterThanMaximum = 2


class BoundedValueError(ValueError):
    """Raised when a value falls outside its inclusive bounds.

    Parameters
    ----------
    error : BoundedError
        Which bound was violated.
    value : Any
        The rejected value.
    minimum, maximum : Any
        The bounds the value was checked against.

    """

    def __init__(
        self, error: BoundedError, value: Any, minimum: Any, maximum: Any
    ) -> None:
        self.error = error
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(self.describe(error, value, minimum, maximum))

    @staticmethod
    def describe(
        error: BoundedError, value: Any, minimum: Any, maximum: Any
    ) -> str:
        if error is BoundedError.LessThanMinimum:
            return f"Value {value!r} is less than the minimum {minimum!r}."
        return f"Value {value!r} is greater than the maximum {maximum!r}."


class ValidationErrorReport(BaseModel):
    type_name: str
    error: BoundedError
    message: str
    details: dict[str, Any] | None = None


class ValidationErrorCollector(BaseModel):
    errors: list[ValidationErrorReport] = []

    def add_error(
        self,
        type_name: str,
        error: BoundedError,
        message: str,
        details: dict | None = None,
    ) -> None:
        error_report = ValidationErrorReport(
            type_name=type_name, error=error, message=message, details=details
        )
        self.errors.append(error_report)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def get_errors(self) -> list[ValidationErrorReport]:
        return self.errors


@contextmanager
def validation_context() -> Generator[ValidationErrorCollector, None, None]:
    """Context manager yielding a fresh collector for batch validation."""
    yield ValidationErrorCollector()


def handle_error(
    type_name: str,
    error: BoundedValueError,
    collector: ValidationErrorCollector | None = None,
) -> None:
    """Handle an error by either raising it or adding it to the collector."""
    if collector is None:
        raise error
    collector.add_error(
        type_name,
        error.error,
        str(error),
        details={
            "value": error.value,
            "minimum": error.minimum,
            "maximum": error.maximum,
        },
    )
