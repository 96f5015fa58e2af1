from boundedint.types.bounded import Bounded
from boundedint.types.bounded_integer import (
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

__all__ = [
    "Bounded",
    "BoundedInteger",
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
]
