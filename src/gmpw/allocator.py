import logging
import random

from gmpw.errors import (
    InternalInvariantError,
    InvalidCategoryCountError,
    InvalidLengthError,
    LengthMismatchError,
)
from gmpw.models import Allocation, Category, PasswordPolicy, PasswordRequest
from gmpw.trace import TraceStep, trace_step

logger = logging.getLogger(__name__)


def _resolution_order(
    request: PasswordRequest,
) -> list[tuple[int | None, Category]]:
    """Order categories by requested count, largest first, unset last.

    ``sorted`` is stable, so ties keep Category declaration order.
    """
    pairs = [(request.count_for(category), category) for category in Category]
    return sorted(
        pairs,
        key=lambda pair: (pair[0] is None, -(pair[0] or 0)),
    )


def validate_length(length: int, policy: PasswordPolicy) -> None:
    if length < policy.min_length or length > policy.max_length:
        raise InvalidLengthError(
            length=length,
            min_length=policy.min_length,
            max_length=policy.max_length,
        )


def resolve_allocation(
    request: PasswordRequest,
    rng: random.Random,
    policy: PasswordPolicy | None = None,
    trace: list[TraceStep] | None = None,
) -> Allocation:
    """Split ``request.length`` across digit, upper and lower categories.

    Specified counts are honored first. Unset counts draw a random share of
    what is left, and the last category resolved absorbs the remainder, so
    the result always sums to ``request.length``.
    """
    if policy is None:
        policy = PasswordPolicy()

    length = request.length
    validate_length(length, policy)

    counts = [request.count_for(category) for category in Category]
    if all(count is not None and count >= 0 for count in counts):
        total = sum(counts)
        if total != length:
            raise LengthMismatchError(length=length, allocated=total)

    order = _resolution_order(request)
    logger.debug(
        "Resolving length %d in order %s",
        length,
        [category.value for _, category in order],
    )

    resolved: dict[Category, int] = {}
    for index, (count, category) in enumerate(order):
        used_capacity = sum(resolved.values())
        if used_capacity > length:
            raise InternalInvariantError(
                f"allocated {used_capacity} characters for a password of "
                f"length {length}"
            )
        remaining = length - used_capacity
        is_last = index == len(order) - 1

        if count is None:
            if is_last:
                number = remaining
                choice = f"{category.value}: remainder {number}"
            else:
                # Exclusive bound: a random share never takes all that is left.
                number = rng.randrange(remaining) if remaining > 0 else 0
                choice = f"{category.value}: random {number} of [0, {remaining})"
        else:
            if count < 0 or count > remaining:
                raise InvalidCategoryCountError(
                    option=category.value, value=count
                )
            if is_last and used_capacity + count != length:
                raise LengthMismatchError(
                    length=length, allocated=used_capacity + count
                )
            number = count
            choice = f"{category.value}: requested {number}"

        resolved[category] = number
        logger.debug("Resolved %s -> %d", category.value, number)
        trace_step(trace, f"resolve_{category.value}", choice, number)

    return Allocation(
        digit=resolved[Category.DIGIT],
        upper=resolved[Category.UPPER],
        lower=resolved[Category.LOWER],
    )
