import random

from gmpw.allocator import resolve_allocation
from gmpw.assembler import assemble_password
from gmpw.models import PasswordPolicy, PasswordRequest, PasswordResult
from gmpw.trace import GenerationTrace, TraceStep


def generate_password(
    request: PasswordRequest,
    rng: random.Random | None = None,
    policy: PasswordPolicy | None = None,
    seed: int | None = None,
) -> PasswordResult:
    """Resolve an allocation for ``request`` and assemble a password from it.

    When ``rng`` is omitted a fresh one is seeded from ``seed``, or from
    system entropy when ``seed`` is None too.
    """
    if policy is None:
        policy = PasswordPolicy()
    if rng is None:
        rng = random.Random(seed)

    trace_steps: list[TraceStep] = []
    allocation = resolve_allocation(request, rng, policy, trace=trace_steps)
    password = assemble_password(
        allocation,
        rng,
        request.avoid_ambiguous,
        policy,
        trace=trace_steps,
    )

    return PasswordResult(
        password=password,
        allocation=allocation,
        request=request,
        seed=seed,
        trace=GenerationTrace(length=request.length, steps=trace_steps),
    )
