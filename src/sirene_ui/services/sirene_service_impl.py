"""
Live implementation of SireneService backed by the public APIs.

Endpoints, timeout and the INSEE credential come from Settings. The
credential is read per call, so a missing key surfaces as a failed result
on each company lookup instead of preventing startup.
"""

from sirene_ui import api
from sirene_ui.config import Settings, get_settings
from sirene_ui.models import (
    AddressDetails,
    AddressSuggestion,
    CompanyPage,
    OperationResult,
)
from sirene_ui.services.sirene_service import SireneService


class SireneServiceImpl(SireneService):
    """
    Production service calling Géoplateforme, BAN and INSEE SIRENE.

    Attributes:
        settings: Endpoint, timeout and credential configuration.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    @property
    def live(self) -> bool:
        return True

    def suggest_addresses(self, text: str) -> OperationResult[list[AddressSuggestion]]:
        return api.suggest_addresses(
            text,
            url=self.settings.completion_url,
            timeout=self.settings.request_timeout,
        )

    def resolve_address(self, query: str) -> OperationResult[AddressDetails]:
        return api.resolve_address(
            query,
            url=self.settings.address_url,
            timeout=self.settings.request_timeout,
        )

    def companies_by_commune(self, code: str) -> OperationResult[CompanyPage]:
        return api.companies_by_commune(
            code,
            api_key=self.settings.insee_api_key,
            url=self.settings.sirene_url,
            timeout=self.settings.request_timeout,
        )

    def companies_at_address(self, address_id: str) -> OperationResult[CompanyPage]:
        return api.companies_at_address(
            address_id,
            api_key=self.settings.insee_api_key,
            url=self.settings.sirene_url,
            timeout=self.settings.request_timeout,
        )
