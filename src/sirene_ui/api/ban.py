"""
Client for the BAN (Base Adresse Nationale) geocoding service.

Only the single best match is requested; an empty feature collection is a
"no address found" failure.
"""

from sirene_ui import normalize, validation
from sirene_ui.api.base import api_boundary, get_json
from sirene_ui.config import ADDRESS_URL, DEFAULT_TIMEOUT
from sirene_ui.lib import logs
from sirene_ui.models import AddressDetails

LOG = logs.logger(__file__)


@api_boundary("address resolution")
def resolve_address(
    query: str | None,
    *,
    url: str = ADDRESS_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> AddressDetails:
    """Return the best structured match for a full address string."""
    text = validation.address(query)
    LOG.info("Resolving address: %s", text)
    payload = get_json(url, {"q": text, "limit": 1}, timeout=timeout)
    return normalize.parse_address(payload)
