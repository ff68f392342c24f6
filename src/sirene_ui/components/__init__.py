"""
Reflex UI components for the Sirene UI application.

This package provides:
- address_search: Explanation panel and address search card
- address_result: Resolved address card with the company section
- commune_search: Commune code form and results
- company_table: Establishment table and status banners

All components are functions returning rx.Component trees bound to the
state classes in sirene_ui.state.
"""

from sirene_ui.components.address_result import address_results
from sirene_ui.components.address_search import address_search_card, explanation_panel
from sirene_ui.components.commune_search import commune_results, commune_search_panel

__all__ = [
    "address_results",
    "address_search_card",
    "commune_results",
    "commune_search_panel",
    "explanation_panel",
]
