from gmpw.errors import InvalidOptionError


def parse_bool_option(option: str, value: str) -> bool:
    """Parse a 'true'/'false' option value, ignoring case and padding."""
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise InvalidOptionError(option=option, value=value)
