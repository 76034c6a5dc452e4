"""Small string helpers shared by the shell modules."""

_C_WHITESPACE = " \t\n\v\f\r"


def trim_whitespace(text: str) -> str:
    """Return *text* without leading and trailing ASCII whitespace."""
    return text.strip(_C_WHITESPACE)