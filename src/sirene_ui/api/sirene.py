"""
Client for the INSEE SIRENE establishment registry (/siret endpoint).

Two query predicates hit the same endpoint:
- by commune code: every establishment of the municipality
- by address identifier: active establishments with at least one employee
  registered at that exact address

Every request needs the INSEE integration key; without it the call fails
before touching the network.
"""

from sirene_ui import normalize, validation
from sirene_ui.api.base import api_boundary, get_json
from sirene_ui.config import DEFAULT_TIMEOUT, SIRENE_URL
from sirene_ui.errors import ConfigurationError
from sirene_ui.lib import logs
from sirene_ui.models import CompanyPage

LOG = logs.logger(__file__)

API_KEY_HEADER = "X-INSEE-Api-Key-Integration"

# Separator embedded in BAN identifiers, dropped from registry queries.
ADDRESS_ID_SEPARATOR = "_"
# Appended to the stripped identifier to form the registry's address key.
ADDRESS_ID_SUFFIX = "_B"


def commune_query(code: str) -> str:
    return f"codeCommuneEtablissement:{code}"


def address_identifier(address_id: str) -> str:
    """Map a BAN identifier ("75102_7022_00012") to the registry key ("75102702200012_B")."""
    return address_id.replace(ADDRESS_ID_SEPARATOR, "") + ADDRESS_ID_SUFFIX


def address_query(address_id: str) -> str:
    return (
        f"identifiantAdresseEtablissement:{address_identifier(address_id)}"
        " AND periode(etatAdministratifEtablissement:A"
        " AND caractereEmployeurEtablissement:O)"
    )


def _search(
    query: str, api_key: str | None, url: str, timeout: float
) -> CompanyPage:
    if not api_key:
        raise ConfigurationError()
    LOG.info("Querying SIRENE: %s", query)
    payload = get_json(
        url,
        {"q": query},
        headers={API_KEY_HEADER: api_key},
        timeout=timeout,
    )
    page = normalize.parse_company_page(payload)
    LOG.info("SIRENE returned %d of %d establishments", len(page.items), page.total)
    return page


@api_boundary("company lookup by commune")
def companies_by_commune(
    code: str | None,
    *,
    api_key: str | None,
    url: str = SIRENE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> CompanyPage:
    """Return the establishments whose commune code matches *code*."""
    return _search(commune_query(validation.commune_code(code)), api_key, url, timeout)


@api_boundary("company lookup by address")
def companies_at_address(
    address_id: str | None,
    *,
    api_key: str | None,
    url: str = SIRENE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> CompanyPage:
    """Return active employer establishments at a BAN address identifier."""
    return _search(address_query(validation.address(address_id)), api_key, url, timeout)
