import string
from enum import Enum

from pydantic import BaseModel, Field, model_validator

from gmpw.describe import describe_allocation
from gmpw.trace import GenerationTrace


class Category(str, Enum):
    DIGIT = "digit"
    UPPER = "upper"
    LOWER = "lower"


CATEGORY_ALPHABETS: dict[Category, str] = {
    Category.DIGIT: string.digits,
    Category.UPPER: string.ascii_uppercase,
    Category.LOWER: string.ascii_lowercase,
}


class PasswordPolicy(BaseModel):
    min_length: int = Field(default=3)
    max_length: int = Field(default=20)
    ambiguous_chars: str = Field(default="oO0l1")

    @model_validator(mode="after")
    def validate_policy(self) -> "PasswordPolicy":
        if self.min_length < 1:
            raise ValueError("min_length must be >= 1")
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) must be <= "
                f"max_length ({self.max_length})"
            )
        ambiguous = set(self.ambiguous_chars)
        for category, alphabet in CATEGORY_ALPHABETS.items():
            if set(alphabet) <= ambiguous:
                raise ValueError(
                    f"ambiguous_chars would exclude every "
                    f"{category.value} character"
                )
        return self


class PasswordRequest(BaseModel):
    length: int
    digit_count: int | None = None
    upper_count: int | None = None
    lower_count: int | None = None
    avoid_ambiguous: bool = True

    def count_for(self, category: Category) -> int | None:
        return getattr(self, f"{category.value}_count")


class Allocation(BaseModel):
    digit: int = Field(ge=0)
    upper: int = Field(ge=0)
    lower: int = Field(ge=0)

    @property
    def total(self) -> int:
        return self.digit + self.upper + self.lower

    def count_for(self, category: Category) -> int:
        return getattr(self, category.value)

    def quotas(self) -> dict[Category, int]:
        """Mutable per-category counters, in Category declaration order."""
        return {category: self.count_for(category) for category in Category}


class PasswordResult(BaseModel):
    password: str
    allocation: Allocation
    request: PasswordRequest
    seed: int | None = None
    trace: GenerationTrace

    def summary(self) -> str:
        return describe_allocation(self.allocation)
