"""gmpw: random passwords built from per-category character budgets."""

from gmpw.allocator import resolve_allocation
from gmpw.assembler import assemble_password
from gmpw.describe import describe_allocation
from gmpw.errors import (
    InternalInvariantError,
    InvalidCategoryCountError,
    InvalidLengthError,
    InvalidOptionError,
    LengthMismatchError,
    PasswordError,
)
from gmpw.generate import generate_password
from gmpw.models import (
    Allocation,
    Category,
    PasswordPolicy,
    PasswordRequest,
    PasswordResult,
)
from gmpw.picker import draw_char, is_ambiguous, pick_char

__version__ = "0.1.0"

__all__ = [
    "Allocation",
    "Category",
    "InternalInvariantError",
    "InvalidCategoryCountError",
    "InvalidLengthError",
    "InvalidOptionError",
    "LengthMismatchError",
    "PasswordError",
    "PasswordPolicy",
    "PasswordRequest",
    "PasswordResult",
    "assemble_password",
    "describe_allocation",
    "draw_char",
    "generate_password",
    "is_ambiguous",
    "pick_char",
    "resolve_allocation",
]
