import random

import pytest

from gmpw.allocator import _resolution_order, resolve_allocation
from gmpw.errors import (
    InvalidCategoryCountError,
    InvalidLengthError,
    LengthMismatchError,
)
from gmpw.models import Allocation, Category, PasswordPolicy, PasswordRequest
from gmpw.trace import TraceStep


def _resolve(seed: int = 0, **kwargs) -> Allocation:
    return resolve_allocation(PasswordRequest(**kwargs), random.Random(seed))


def test_fully_specified_counts_are_kept() -> None:
    allocation = _resolve(length=10, digit_count=3, upper_count=2, lower_count=5)
    assert allocation == Allocation(digit=3, upper=2, lower=5)


def test_single_specified_count_fixes_that_category() -> None:
    for seed in range(50):
        allocation = _resolve(seed, length=5, digit_count=2)
        assert allocation.digit == 2
        assert allocation.upper + allocation.lower == 3


def test_two_specified_counts_leave_remainder_to_unset() -> None:
    allocation = _resolve(length=12, digit_count=4, lower_count=5)
    assert allocation == Allocation(digit=4, upper=3, lower=5)


@pytest.mark.parametrize("length", [2, 0, -1, 21, 100])
def test_length_out_of_range(length: int) -> None:
    with pytest.raises(InvalidLengthError, match=r"\[3-20\]"):
        _resolve(length=length)


@pytest.mark.parametrize("length", [3, 20])
def test_length_bounds_are_inclusive(length: int) -> None:
    assert _resolve(length=length).total == length


def test_policy_changes_length_bounds() -> None:
    policy = PasswordPolicy(min_length=8, max_length=64)
    allocation = resolve_allocation(
        PasswordRequest(length=40), random.Random(1), policy
    )
    assert allocation.total == 40
    with pytest.raises(InvalidLengthError, match=r"\[8-64\]"):
        resolve_allocation(PasswordRequest(length=5), random.Random(1), policy)


def test_fully_specified_mismatch_over() -> None:
    with pytest.raises(LengthMismatchError) as exc_info:
        _resolve(length=10, digit_count=3, upper_count=2, lower_count=6)
    assert exc_info.value.allocated == 11
    assert 'Option "length", Argument "10"' in str(exc_info.value)


def test_fully_specified_mismatch_under() -> None:
    with pytest.raises(LengthMismatchError):
        _resolve(length=10, digit_count=3, upper_count=2, lower_count=4)


def test_fully_specified_zero_counts_mismatch() -> None:
    with pytest.raises(LengthMismatchError):
        _resolve(length=3, digit_count=0, upper_count=0, lower_count=0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"digit_count": -1},
        {"upper_count": -5, "lower_count": 2},
        {"digit_count": 4, "upper_count": 4, "lower_count": -2},
    ],
)
def test_negative_count_is_invalid(kwargs: dict[str, int]) -> None:
    with pytest.raises(InvalidCategoryCountError):
        _resolve(length=6, **kwargs)


def test_count_exceeding_length_is_invalid() -> None:
    with pytest.raises(InvalidCategoryCountError) as exc_info:
        _resolve(length=6, upper_count=7)
    assert exc_info.value.option == "upper"
    assert exc_info.value.value == 7


def test_partial_counts_exceeding_remaining_budget() -> None:
    with pytest.raises(InvalidCategoryCountError) as exc_info:
        _resolve(length=6, digit_count=4, lower_count=3)
    assert exc_info.value.option == "lower"


def test_zero_counts_leave_everything_to_unset() -> None:
    allocation = _resolve(length=6, digit_count=0, upper_count=0)
    assert allocation == Allocation(digit=0, upper=0, lower=6)


def test_resolution_order_descending_with_unset_last() -> None:
    request = PasswordRequest(length=10, digit_count=1, lower_count=4)
    order = _resolution_order(request)
    assert order == [
        (4, Category.LOWER),
        (1, Category.DIGIT),
        (None, Category.UPPER),
    ]


def test_resolution_order_ties_keep_category_order() -> None:
    order = _resolution_order(PasswordRequest(length=6))
    assert [category for _, category in order] == [
        Category.DIGIT,
        Category.UPPER,
        Category.LOWER,
    ]


def test_random_share_never_takes_all_remaining() -> None:
    # With nothing specified, digit draws from [0, length) and can never
    # reach the full length.
    for seed in range(200):
        allocation = _resolve(seed, length=3)
        assert allocation.digit < 3


def test_zero_remaining_capacity_assigns_zero() -> None:
    allocation = _resolve(length=4, digit_count=4)
    assert allocation == Allocation(digit=4, upper=0, lower=0)


def test_same_seed_same_allocation() -> None:
    first = _resolve(7, length=15)
    second = _resolve(7, length=15)
    assert first == second


def test_trace_records_each_category() -> None:
    trace: list[TraceStep] = []
    resolve_allocation(
        PasswordRequest(length=8, upper_count=3),
        random.Random(3),
        trace=trace,
    )
    steps = [step.step for step in trace]
    assert steps[0] == "resolve_upper"
    assert sorted(steps) == ["resolve_digit", "resolve_lower", "resolve_upper"]
    assert trace[0].value == 3
    assert sum(step.value for step in trace) == 8


@pytest.mark.slow
def test_allocation_always_sums_to_length() -> None:
    rng = random.Random(1234)
    for _ in range(2000):
        length = rng.randint(3, 20)
        counts = [None, None, None]
        for index in range(3):
            if rng.random() < 0.3:
                counts[index] = rng.randint(0, length)
        request = PasswordRequest(
            length=length,
            digit_count=counts[0],
            upper_count=counts[1],
            lower_count=counts[2],
        )
        try:
            allocation = resolve_allocation(request, rng)
        except (InvalidCategoryCountError, LengthMismatchError):
            continue
        assert allocation.total == length
        for category, count in zip(Category, counts):
            if count is not None:
                assert allocation.count_for(category) == count
