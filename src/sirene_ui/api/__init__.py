"""
Upstream API clients.

Modules:
- completion: Géoplateforme address autocomplete
- ban: BAN address resolution
- sirene: INSEE SIRENE establishment lookup

Every public function returns an OperationResult and never raises.
"""

from sirene_ui.api.ban import resolve_address
from sirene_ui.api.completion import suggest_addresses
from sirene_ui.api.sirene import companies_at_address, companies_by_commune

__all__ = [
    "companies_at_address",
    "companies_by_commune",
    "resolve_address",
    "suggest_addresses",
]
