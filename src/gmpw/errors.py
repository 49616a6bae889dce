"""Errors raised while resolving and generating a password."""


class PasswordError(Exception):
    """Base class for every user-facing generation failure."""


def _invalid_argument_message(option: str, value: object) -> str:
    return f'Invalid option argument. Option "{option}", Argument "{value}".'


class InvalidLengthError(PasswordError):
    def __init__(self, *, length: int, min_length: int, max_length: int):
        self.length = length
        self.min_length = min_length
        self.max_length = max_length
        super().__init__(
            f"Need a number between [{min_length}-{max_length}] as argument."
        )


class InvalidCategoryCountError(PasswordError):
    def __init__(self, *, option: str, value: int):
        self.option = option
        self.value = value
        super().__init__(_invalid_argument_message(option, value))


class LengthMismatchError(PasswordError):
    """Specified counts leave the total short of, or beyond, the length."""

    def __init__(self, *, length: int, allocated: int):
        self.length = length
        self.allocated = allocated
        super().__init__(_invalid_argument_message("length", length))


class InvalidOptionError(PasswordError):
    def __init__(self, *, option: str, value: str):
        self.option = option
        self.value = value
        super().__init__(_invalid_argument_message(option, value))


class InternalInvariantError(PasswordError):
    pass
