from loguru import logger

from boundedint.types import (
    Bounded,
    BoundedI8,
    BoundedI16,
    BoundedI32,
    BoundedI64,
    BoundedI128,
    BoundedInteger,
    BoundedU8,
    BoundedU16,
    BoundedU32,
    BoundedU64,
    BoundedU128,
)
from boundedint.validation import (
    BoundedError,
    BoundedValueError,
    ValidationErrorCollector,
    ValidationErrorReport,
    bounds,
    check_bounds,
    validation_context,
)

# Silent unless the application calls logger.enable("boundedint")
logger.disable("boundedint")

__all__ = [
    "Bounded",
    "BoundedError",
    "BoundedInteger",
    "BoundedValueError",
    "BoundedU8",
    "BoundedU16",
    "BoundedU32",
    "BoundedU64",
    "BoundedU128",
    "BoundedI8",
    "BoundedI16",
    "BoundedI32",
    "BoundedI64",
    "BoundedI128",
    "ValidationErrorCollector",
    "ValidationErrorReport",
    "bounds",
    "check_bounds",
    "validation_context",
]
