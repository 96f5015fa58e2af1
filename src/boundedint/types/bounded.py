from typing import Any, Generic, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from typing_extensions import Self

from boundedint.validation.bounds import bounds, check_bounds
from boundedint.validation.error_handling import (
    BoundedValueError,
    ValidationErrorCollector,
    handle_error,
)

T = TypeVar("T")


class Bounded(BaseModel, Generic[T]):
    """A value known to lie in the inclusive range ``minimum..=maximum``.

    Unlike the static integer types, the bounds are stored on each
    instance, so two instances of the same class may carry different
    bounds. Any type supporting ``>=`` and ``<=`` can be wrapped.

    Examples
    --------
    >>> Bounded.new(5, 0, 10).get()
    5
    >>> Bounded.new(11, 0, 10)
    Traceback (most recent call last):
        ...
    boundedint.validation.error_handling.BoundedValueError: Value 11 is greater than the maximum 10.

    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    minimum: T
    maximum: T
    value: T

    @classmethod
    def new(
        cls,
        value: T,
        minimum: T,
        maximum: T,
        collector: ValidationErrorCollector | None = None,
    ) -> Self | None:
        """Create an instance holding ``value`` within the given bounds.

        ``minimum > maximum`` is not rejected up front; no value can
        satisfy such bounds, so construction always fails.

        Raises
        ------
        BoundedValueError
            If ``value`` is outside ``minimum..=maximum`` and no
            collector is given. With a collector the error is recorded on
            it and ``None`` is returned.

        """
        error = check_bounds(value, minimum, maximum)
        if error is not None:
            handle_error(
                cls.__name__,
                BoundedValueError(error, value, minimum, maximum),
                collector,
            )
            return None
        return cls.new_unchecked(value, minimum, maximum)

    @classmethod
    def new_unchecked(cls, value: T, minimum: T, maximum: T) -> Self:
        """Create an instance without any validation.

        The caller must guarantee ``minimum <= value <= maximum``.
        """
        return cls.model_construct(
            minimum=minimum, maximum=maximum, value=value
        )

    @model_validator(mode="after")
    def validate_bounds(self) -> Self:
        bounds(self.minimum, self.maximum)(self.value)
        return self

    def get(self) -> T:
        return self.value

    def _origin(self) -> type:
        return self.__pydantic_generic_metadata__["origin"] or type(self)

    def _comparable(self, other: Any) -> bool:
        return isinstance(other, Bounded) and other._origin() is self._origin()

    def _key(self) -> Tuple[T, T, T]:
        return (self.minimum, self.maximum, self.value)

    def __lt__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._key() >= other._key()
