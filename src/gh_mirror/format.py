"""String formatting for repository metadata values."""


def format_optional_int(value: int | None) -> str:
    """Format an optional integer as a decimal string.

    Args:
        value: Integer to format, or None.

    Returns:
        Decimal representation, or an empty string when value is None.
    """
    if value is None:
        return ""
    return str(value)


def format_bool(value: bool) -> str:
    """Format a boolean as "1" or "0"."""
    return "1" if value else "0"
