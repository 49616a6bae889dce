import random

from gmpw.models import CATEGORY_ALPHABETS, Category, PasswordPolicy


def is_ambiguous(char: str, policy: PasswordPolicy | None = None) -> bool:
    if policy is None:
        policy = PasswordPolicy()
    return char in policy.ambiguous_chars


def draw_char(
    category: Category,
    rng: random.Random,
    avoid_ambiguous: bool,
    policy: PasswordPolicy | None = None,
) -> str | None:
    """Draw one character from ``category``.

    Returns None when the draw lands on an ambiguous character and
    ``avoid_ambiguous`` is set; the caller decides whether to draw again.
    """
    char = rng.choice(CATEGORY_ALPHABETS[category])
    if avoid_ambiguous and is_ambiguous(char, policy):
        return None
    return char


def pick_char(
    category: Category,
    rng: random.Random,
    avoid_ambiguous: bool,
    policy: PasswordPolicy | None = None,
) -> str:
    """Draw from ``category`` until a character is accepted."""
    while True:
        char = draw_char(category, rng, avoid_ambiguous, policy)
        if char is not None:
            return char
