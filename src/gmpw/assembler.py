import logging
import random

from gmpw.models import Allocation, Category, PasswordPolicy
from gmpw.picker import draw_char
from gmpw.trace import TraceStep, trace_step

logger = logging.getLogger(__name__)

# Index order of the category draw.
_PICK_ORDER: tuple[Category, ...] = (
    Category.DIGIT,
    Category.LOWER,
    Category.UPPER,
)


def assemble_password(
    allocation: Allocation,
    rng: random.Random,
    avoid_ambiguous: bool,
    policy: PasswordPolicy | None = None,
    trace: list[TraceStep] | None = None,
) -> str:
    """Interleave characters from each category until every quota is spent.

    Each round picks a category uniformly. A category whose quota is already
    zero is skipped and the round is retried, as is a rejected ambiguous
    draw, so only accepted characters consume quota.
    """
    if policy is None:
        policy = PasswordPolicy()

    quotas = allocation.quotas()
    chars: list[str] = []
    skipped = 0
    rejected = 0
    while any(quota > 0 for quota in quotas.values()):
        category = _PICK_ORDER[rng.randrange(len(_PICK_ORDER))]
        if quotas[category] == 0:
            skipped += 1
            continue
        char = draw_char(category, rng, avoid_ambiguous, policy)
        if char is None:
            rejected += 1
            continue
        chars.append(char)
        quotas[category] -= 1

    logger.debug(
        "Assembled %d chars: %d skipped draws, %d rejected ambiguous",
        len(chars),
        skipped,
        rejected,
    )
    trace_step(
        trace,
        "assemble_password",
        f"{len(chars)} chars, {skipped} skipped, {rejected} rejected",
        {"skipped": skipped, "rejected": rejected},
    )
    return "".join(chars)
