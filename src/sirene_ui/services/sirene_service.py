"""
Abstract base class defining the address and company lookup contract.

Every method returns an OperationResult; implementations never raise.

Implementations:
- SireneServiceImpl: live Géoplateforme, BAN and INSEE SIRENE APIs
- DemoSireneService: bundled fixture payloads, no network access
"""

from abc import ABC, abstractmethod

from sirene_ui.models import (
    AddressDetails,
    AddressSuggestion,
    CompanyPage,
    OperationResult,
)


class SireneService(ABC):
    """Data access for address search and establishment lookup."""

    @abstractmethod
    def suggest_addresses(self, text: str) -> OperationResult[list[AddressSuggestion]]:
        """Return autocomplete candidates for partially typed text."""

    @abstractmethod
    def resolve_address(self, query: str) -> OperationResult[AddressDetails]:
        """Return the single best match for a full address string."""

    @abstractmethod
    def companies_by_commune(self, code: str) -> OperationResult[CompanyPage]:
        """Return the establishments registered in a commune."""

    @abstractmethod
    def companies_at_address(self, address_id: str) -> OperationResult[CompanyPage]:
        """
        Return active employer establishments at a BAN address.

        Args:
            address_id: BAN identifier as returned by resolve_address(),
                separators included.
        """

    @property
    def live(self) -> bool:
        """
        Check whether results come from the real upstream services.

        Default implementation returns False.
        """
        return False
