"""Client for the Géoplateforme address autocomplete service."""

from sirene_ui import normalize, validation
from sirene_ui.api.base import api_boundary, get_json
from sirene_ui.config import COMPLETION_URL, DEFAULT_TIMEOUT
from sirene_ui.models import AddressSuggestion


@api_boundary("address suggestions")
def suggest_addresses(
    text: str | None,
    *,
    url: str = COMPLETION_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[AddressSuggestion]:
    """Return autocomplete candidates for partially typed *text*."""
    term = validation.search_term(text)
    payload = get_json(url, {"text": term}, timeout=timeout)
    return normalize.parse_suggestions(payload)
