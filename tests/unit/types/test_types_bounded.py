from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from boundedint import Bounded, BoundedError, BoundedValueError


@pytest.mark.unit
def test_new_within_bounds():
    bounded = Bounded.new(5, 0, 10)
    assert bounded.get() == 5
    assert bounded.value == 5
    assert bounded.minimum == 0
    assert bounded.maximum == 10


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, error",
    [
        (-1, BoundedError.LessThanMinimum),
        (11, BoundedError.GreaterThanMaximum),
    ],
)
def test_new_outside_bounds(value, error):
    with pytest.raises(BoundedValueError) as excinfo:
        Bounded.new(value, 0, 10)
    assert excinfo.value.error is error
    assert excinfo.value.value == value


@pytest.mark.unit
@pytest.mark.parametrize("value", [0, 10])
def test_bounds_are_inclusive(value):
    assert Bounded.new(value, 0, 10).get() == value


@pytest.mark.unit
@pytest.mark.parametrize("value", [-5, 0, 3, 5, 8, 12])
def test_inverted_bounds_reject_everything(value):
    with pytest.raises(BoundedValueError):
        Bounded.new(value, 5, 3)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, minimum, maximum",
    [
        (0.5, 0.0, 1.0),
        (Decimal("2.50"), Decimal("0"), Decimal("10")),
        (date(2024, 6, 1), date(2024, 1, 1), date(2024, 12, 31)),
        ("m", "a", "z"),
    ],
)
def test_any_orderable_type(value, minimum, maximum):
    assert Bounded.new(value, minimum, maximum).get() == value


@pytest.mark.unit
def test_new_unchecked_skips_validation():
    bounded = Bounded.new_unchecked(42, 0, 10)
    assert bounded.get() == 42
    assert bounded.maximum == 10


@pytest.mark.unit
def test_new_with_collector(validation_collector):
    assert Bounded.new(-1, 0, 10, collector=validation_collector) is None
    assert Bounded.new(11, 0, 10, collector=validation_collector) is None
    assert Bounded.new(5, 0, 10, collector=validation_collector).get() == 5

    assert [report.error for report in validation_collector.get_errors()] == [
        BoundedError.LessThanMinimum,
        BoundedError.GreaterThanMaximum,
    ]


@pytest.mark.unit
def test_instances_carry_their_own_bounds():
    narrow = Bounded.new(5, 0, 10)
    wide = Bounded.new(5, 0, 100)
    assert type(narrow) is type(wide)
    assert narrow != wide
    assert narrow == Bounded.new(5, 0, 10)
    assert hash(narrow) == hash(Bounded.new(5, 0, 10))


@pytest.mark.unit
def test_ordering_is_lexicographic():
    items = [
        Bounded.new(5, 1, 10),
        Bounded.new(3, 0, 10),
        Bounded.new(7, 0, 10),
    ]
    assert [(b.minimum, b.value) for b in sorted(items)] == [
        (0, 3),
        (0, 7),
        (1, 5),
    ]


@pytest.mark.unit
def test_instances_are_frozen():
    bounded = Bounded.new(5, 0, 10)
    with pytest.raises(ValidationError):
        bounded.value = 50


@pytest.mark.unit
def test_direct_construction_validates():
    assert Bounded(value=5, minimum=0, maximum=10).get() == 5

    with pytest.raises(ValidationError) as excinfo:
        Bounded(value=11, minimum=0, maximum=10)
    errors = excinfo.value.errors()
    assert len(errors) == 1
    assert errors[0]["type"] == "value_error"
    assert "greater than the maximum 10" in errors[0]["msg"]


@pytest.mark.unit
def test_parametrized_type_validates_field_types():
    assert Bounded[int](value=5, minimum=0, maximum=10).get() == 5
    with pytest.raises(ValidationError):
        Bounded[int](value="five", minimum=0, maximum=10)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, minimum, maximum",
    [
        (float("nan"), 0.0, 1.0),
        (0.5, float("nan"), 1.0),
        (0.5, 0.0, float("nan")),
    ],
)
def test_nan_is_rejected(value, minimum, maximum):
    with pytest.raises(BoundedValueError):
        Bounded.new(value, minimum, maximum)
    with pytest.raises(ValidationError):
        Bounded(value=value, minimum=minimum, maximum=maximum)


@pytest.mark.unit
def test_parametrized_and_bare_forms_order_together():
    typed = Bounded[int].new(5, 0, 10)
    bare = Bounded.new(5, 0, 10)
    assert typed == bare
    assert hash(typed) == hash(bare)
    assert typed <= bare
    assert bare >= typed
    assert Bounded[int].new(4, 0, 10) < bare
