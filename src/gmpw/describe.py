from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gmpw.models import Allocation


def describe_allocation(allocation: Allocation) -> str:
    """Render the per-category counts in the order the CLI prints them."""
    return (
        f"numbers : {allocation.digit}\n"
        f"lower letters: {allocation.lower}\n"
        f"upper letters: {allocation.upper}"
    )
