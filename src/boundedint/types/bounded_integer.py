"""Integer types whose bounds are part of the class.

Notes
-----
Each width type (``BoundedU8`` ... ``BoundedI128``) is bounded by the
full range of its width. ``with_bounds`` narrows it to a subclass that
carries ``MIN`` and ``MAX`` as class variables, so every instance of
``BoundedU8.with_bounds(10, 20)`` shares the same bounds and stores
only its value. Narrowed classes are created once per
``(width, MIN, MAX)`` and cached, so repeated calls return the same
class and instances compare equal across call sites.

"""

import types
from typing import Any, ClassVar, Dict, Tuple, Type

from loguru import logger
from pydantic import BaseModel, ConfigDict, StrictInt, field_validator
from typing_extensions import Self

from boundedint.validation.bounds import bounds, check_bounds
from boundedint.validation.error_handling import (
    BoundedError,
    BoundedValueError,
    ValidationErrorCollector,
    handle_error,
)


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class BoundedInteger(BaseModel):
    """An integer known to lie in the inclusive range ``MIN..=MAX``.

    Use one of the width types, optionally narrowed with
    :meth:`with_bounds`; this base class has no bounds of its own.

    """

    model_config = ConfigDict(frozen=True)

    value: StrictInt

    BITS: ClassVar[int] = 0
    SIGNED: ClassVar[bool] = False
    MIN: ClassVar[int | None] = None
    MAX: ClassVar[int | None] = None

    @classmethod
    def width(cls) -> Type["BoundedInteger"]:
        """Return the width type this class derives from."""
        for klass in cls.__mro__:
            if BoundedInteger in klass.__bases__:
                return klass
        raise TypeError(
            f"{cls.__name__} has no integer width; "
            "use one of the BoundedU*/BoundedI* types."
        )

    @classmethod
    def with_bounds(cls, minimum: int, maximum: int) -> Type[Self]:
        """Factory method to create a custom bound subclass of this width.

        Bounds must be representable in the width. ``minimum > maximum``
        is accepted; such a class rejects every value.
        """
        width = cls.width()
        for bound in (minimum, maximum):
            if not _is_plain_int(bound):
                raise TypeError(
                    f"Bounds must be integers, got {type(bound).__name__}."
                )
            if check_bounds(bound, width.MIN, width.MAX) is not None:
                raise ValueError(
                    f"Bound {bound} is not representable in {width.__name__} "
                    f"({width.MIN}..={width.MAX})."
                )

        key = (width, minimum, maximum)
        bounded_type = _BOUNDED_TYPE_REGISTRY.get(key)
        if bounded_type is None:
            bounded_type = _BOUNDED_TYPE_REGISTRY.setdefault(
                key,
                _create_bounded_type(
                    f"{width.__name__}[{minimum}, {maximum}]",
                    width,
                    MIN=minimum,
                    MAX=maximum,
                ),
            )
            logger.debug(f"Registered bounded type {bounded_type.__name__}")
        return bounded_type

    @classmethod
    def check(cls, value: int) -> BoundedError | None:
        """Return the bound ``value`` violates, or ``None`` if it fits."""
        cls.width()
        if not _is_plain_int(value):
            raise TypeError(
                f"{cls.__name__} expects an int, got {type(value).__name__}."
            )
        return check_bounds(value, cls.MIN, cls.MAX)

    @classmethod
    def new(
        cls, value: int, collector: ValidationErrorCollector | None = None
    ) -> Self | None:
        """Create an instance holding ``value``.

        Raises
        ------
        BoundedValueError
            If ``value`` is outside ``MIN..=MAX`` and no collector is
            given. With a collector the error is recorded on it and
            ``None`` is returned.
        TypeError
            If ``value`` is not an int.

        """
        error = cls.check(value)
        if error is not None:
            handle_error(
                cls.__name__,
                BoundedValueError(error, value, cls.MIN, cls.MAX),
                collector,
            )
            return None
        return cls.new_unchecked(value)

    @classmethod
    def new_unchecked(cls, value: int) -> Self:
        """Create an instance without any validation.

        The caller must guarantee ``MIN <= value <= MAX``; an
        out-of-range value yields an instance that breaks the class
        invariant without any error.
        """
        return cls.model_construct(value=value)

    @field_validator("value")
    @classmethod
    def validate_bounds(cls, value: int) -> int:
        cls.width()
        return bounds(cls.MIN, cls.MAX)(value)

    def get(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value >= other.value


# Narrowed classes keyed by (width type, MIN, MAX)
_BOUNDED_TYPE_REGISTRY: Dict[
    Tuple[Type[BoundedInteger], int, int], Type[BoundedInteger]
] = {}


def _create_bounded_type(
    name: str, base: Type[BoundedInteger], **class_vars: Any
) -> Type[BoundedInteger]:
    namespace = {"__module__": __name__, "__qualname__": name, **class_vars}
    return types.new_class(
        name, (base,), exec_body=lambda ns: ns.update(namespace)
    )


def _integer_type(bits: int, signed: bool) -> Type[BoundedInteger]:
    if signed:
        name = f"BoundedI{bits}"
        minimum, maximum = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        name = f"BoundedU{bits}"
        minimum, maximum = 0, (1 << bits) - 1
    width_type = _create_bounded_type(
        name,
        BoundedInteger,
        BITS=bits,
        SIGNED=signed,
        MIN=minimum,
        MAX=maximum,
        __doc__=(
            f"A {bits}-bit {'signed' if signed else 'unsigned'} bounded "
            f"integer, {minimum}..={maximum} unless narrowed."
        ),
    )
    _BOUNDED_TYPE_REGISTRY[(width_type, minimum, maximum)] = width_type
    return width_type


BoundedU8 = _integer_type(8, signed=False)
BoundedU16 = _integer_type(16, signed=False)
BoundedU32 = _integer_type(32, signed=False)
BoundedU64 = _integer_type(64, signed=False)
BoundedU128 = _integer_type(128, signed=False)
BoundedI8 = _integer_type(8, signed=True)
BoundedI16 = _integer_type(16, signed=True)
BoundedI32 = _integer_type(32, signed=True)
BoundedI64 = _integer_type(64, signed=True)
BoundedI128 = _integer_type(128, signed=True)
