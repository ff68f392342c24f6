"""
Demo implementation of SireneService using bundled fixture payloads.

This service is useful for:
- Local development without an INSEE integration key
- Exercising the UI offline with realistic upstream-shaped data

Fixtures go through the same normalizer as live responses, so the demo
exercises the same mapping code.
"""

from sirene_ui import normalize, validation
from sirene_ui.api.base import api_boundary
from sirene_ui.api.sirene import address_identifier
from sirene_ui.data.demo_payloads import (
    DEMO_ADDRESSES,
    DEMO_COMPANIES,
    DEMO_COMPLETIONS,
)
from sirene_ui.errors import NotFoundError
from sirene_ui.models import (
    AddressDetails,
    AddressSuggestion,
    CompanyPage,
    OperationResult,
)
from sirene_ui.services.sirene_service import SireneService


class DemoSireneService(SireneService):
    """In-memory service answering from DEMO_* fixture payloads."""

    def suggest_addresses(self, text: str) -> OperationResult[list[AddressSuggestion]]:
        return _suggest(text)

    def resolve_address(self, query: str) -> OperationResult[AddressDetails]:
        return _resolve(query)

    def companies_by_commune(self, code: str) -> OperationResult[CompanyPage]:
        return _by_commune(code)

    def companies_at_address(self, address_id: str) -> OperationResult[CompanyPage]:
        return _at_address(address_id)


@api_boundary("demo address suggestions")
def _suggest(text: str) -> list[AddressSuggestion]:
    needle = validation.search_term(text).lower()
    payload = {
        "results": [
            result
            for result in DEMO_COMPLETIONS["results"]
            if needle in result["fulltext"].lower()
        ]
    }
    return normalize.parse_suggestions(payload)


@api_boundary("demo address resolution")
def _resolve(query: str) -> AddressDetails:
    text = validation.address(query).lower()
    # Exact label first, then the first label containing the typed text.
    matches = [label for label in DEMO_ADDRESSES if label.lower() == text] or [
        label for label in DEMO_ADDRESSES if text in label.lower()
    ]
    if not matches:
        raise NotFoundError()
    return normalize.parse_address(DEMO_ADDRESSES[matches[0]])


@api_boundary("demo company lookup by commune")
def _by_commune(code: str) -> CompanyPage:
    code = validation.commune_code(code)
    establishments = [
        etab
        for etab in DEMO_COMPANIES["etablissements"]
        if etab["adresseEtablissement"].get("codeCommuneEtablissement") == code
    ]
    return normalize.parse_company_page(
        {"header": {"total": len(establishments)}, "etablissements": establishments}
    )


@api_boundary("demo company lookup by address")
def _at_address(address_id: str) -> CompanyPage:
    identifier = address_identifier(validation.address(address_id))
    establishments = [
        etab
        for etab in DEMO_COMPANIES["etablissements"]
        if etab["adresseEtablissement"].get("identifiantAdresseEtablissement")
        == identifier
    ]
    return normalize.parse_company_page(
        {"header": {"total": len(establishments)}, "etablissements": establishments}
    )
