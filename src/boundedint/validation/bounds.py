from typing import Any, Callable, TypeVar

from boundedint.validation.error_handling import BoundedError, BoundedValueError

T = TypeVar("T")


def check_bounds(value: Any, minimum: Any, maximum: Any) -> BoundedError | None:
    """
    Returns the bound violated by ``value``, or ``None`` if it is in range.

    The minimum is tested first, so with ``minimum > maximum`` a value
    below ``minimum`` reports ``LessThanMinimum``. Unordered values such
    as NaN, in either the value or a bound, fail the test they are
    compared in.

    Parameters
    ----------
    value : Any
        Value to check.
    minimum : Any
        Smallest allowed value (inclusive).
    maximum : Any
        Largest allowed value (inclusive).

    Examples
    --------
    >>> check_bounds(5, 10, 20)
    <BoundedError.LessThanMinimum: 1>
    >>> check_bounds(25, 10, 20)
    <BoundedError.GreaterThanMaximum: 2>
    >>> check_bounds(15, 10, 20) is None
    True

    """
    if not value >= minimum:
        return BoundedError.LessThanMinimum
    if not value <= maximum:
        return BoundedError.GreaterThanMaximum
    return None


def bounds(minimum: T, maximum: T) -> Callable[[T], T]:
    """
    Returns a function that checks a single value against inclusive bounds.

    Parameters
    ----------
    minimum (T): Minimum allowed value (inclusive)
    maximum (T): Maximum allowed value (inclusive)

    Examples
    --------
    >>> validate = bounds(0, 100)
    >>> validate(42)
    42
    >>> validate(101)
    Traceback (most recent call last):
        ...
    boundedint.validation.error_handling.BoundedValueError: Value 101 is greater than the maximum 100.

    Returns
    -------
        callable: Function returning the value unchanged, usable with
        pydantic's ``AfterValidator``

    """

    def validate(value: T) -> T:
        error = check_bounds(value, minimum, maximum)
        if error is not None:
            raise BoundedValueError(error, value, minimum, maximum)
        return value

    return validate
