"""Registration token resolution."""

from typing import Optional

from ..config import INVALID_TOKEN
from .errors import InvalidTokenError


def resolve_token(raw: Optional[str]) -> str:
    """Trim the supplied token and reject empty or default values.

    Args:
        raw: Token as given on the command line (None if not supplied)

    Returns:
        Token with surrounding whitespace removed

    Raises:
        InvalidTokenError: If the token is empty or still the sentinel default

    Examples:
        >>> resolve_token("  abc  ")
        'abc'
    """
    token = (raw if raw is not None else INVALID_TOKEN).strip()

    # The option defaults to the sentinel, so seeing it means it was never set
    if token == INVALID_TOKEN or token == "":
        raise InvalidTokenError('"-token" flag can not be empty')

    return token
