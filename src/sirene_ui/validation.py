"""
Input validation performed before any network call.

Each validator returns the trimmed value or raises ValidationError with a
user-facing message. Only emptiness is checked; commune codes are not
checked for a numeric format.
"""

from sirene_ui.errors import ValidationError

SEARCH_TERM_REQUIRED = "a search term is required"
POSTAL_CODE_REQUIRED = "a postal code is required"
ADDRESS_REQUIRED = "an address is required"


def require_text(value: str | None, message: str) -> str:
    """
    Return *value* trimmed, or raise ValidationError(*message*) if empty.

    Args:
        value: Candidate text, possibly None.
        message: Error message used when the text is empty.
    """
    text = value.strip() if value else ""
    if not text:
        raise ValidationError(message)
    return text


def search_term(value: str | None) -> str:
    return require_text(value, SEARCH_TERM_REQUIRED)


def commune_code(value: str | None) -> str:
    return require_text(value, POSTAL_CODE_REQUIRED)


def address(value: str | None) -> str:
    return require_text(value, ADDRESS_REQUIRED)
