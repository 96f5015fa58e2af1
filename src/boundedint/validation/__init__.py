from boundedint.validation.bounds import bounds, check_bounds
from boundedint.validation.error_handling import (
    BoundedError,
    BoundedValueError,
    ValidationErrorCollector,
    ValidationErrorReport,
    handle_error,
    validation_context,
)

__all__ = [
    "BoundedError",
    "BoundedValueError",
    "ValidationErrorCollector",
    "ValidationErrorReport",
    "bounds",
    "check_bounds",
    "handle_error",
    "validation_context",
]
