"""
Commune code search form and results.
"""

import reflex as rx

from sirene_ui.components.company_table import (
    company_table,
    empty_companies,
    error_banner,
    loading_banner,
)
from sirene_ui.state import CommuneState
from sirene_ui.utils import COMMUNE_COMPANIES_TITLE


def commune_search_panel() -> rx.Component:
    """Build the form that submits a commune code."""
    return rx.box(
        rx.heading("Chercher le répertoire Sirene", size="5", as_="h2"),
        rx.form(
            rx.input(
                name="commune_code",
                placeholder="Indiquez un code commune INSEE...",
                class_name="search-input",
            ),
            rx.box(
                rx.button(
                    rx.cond(CommuneState.is_loading, "Recherche en cours...", "Rechercher"),
                    type="submit",
                    disabled=CommuneState.is_loading,
                    class_name="primary-button",
                ),
                rx.cond(
                    CommuneState.has_result,
                    rx.button(
                        "Réinitialiser",
                        type="button",
                        on_click=CommuneState.reset_search,
                        class_name="secondary-button",
                    ),
                ),
                class_name="status-row",
            ),
            on_submit=CommuneState.submit,
            reset_on_submit=False,
        ),
        class_name="card search-card",
    )


def commune_results() -> rx.Component:
    """Build the commune search outcome: loading, error, table or empty state."""
    return rx.box(
        rx.cond(CommuneState.is_loading, loading_banner()),
        rx.cond(CommuneState.error != "", error_banner(CommuneState.error)),
        rx.cond(
            CommuneState.phase == "commune_resolved",
            rx.cond(
                CommuneState.has_companies,
                company_table(
                    CommuneState.companies,
                    CommuneState.company_heading,
                    title=COMMUNE_COMPANIES_TITLE,
                ),
                empty_companies("Aucun établissement trouvé."),
            ),
        ),
        id="commune-results",
    )
