"""
Resolved address card and company results for the home page.

Displays the address in three columns (main address, administrative
information, spatial data), then the company lookup outcome. A failed
company lookup still leaves the address card in place.
"""

import reflex as rx

from sirene_ui.components.company_table import (
    company_table,
    empty_companies,
    error_banner,
    loading_banner,
)
from sirene_ui.state import SearchState


def address_results() -> rx.Component:
    """
    Build the results container.

    Returns:
        The address card or error banner, followed by the company section.
    """
    return rx.box(
        rx.cond(SearchState.address_error != "", error_banner(SearchState.address_error)),
        rx.cond(SearchState.has_address, _address_card()),
        rx.cond(
            SearchState.is_company_loading,
            loading_banner("Recherche des établissements..."),
        ),
        rx.cond(SearchState.has_company_outcome, _company_section()),
        id="results-container",
        on_click=SearchState.dismiss_suggestions,
    )


def _address_card() -> rx.Component:
    address = SearchState.address
    return rx.box(
        rx.heading("Adresse trouvée", size="4", as_="h3", class_name="success"),
        rx.grid(
            rx.box(
                _column_title("map-pin", "Adresse principale"),
                _field("Adresse", address["label"]),
                rx.cond(address["housenumber"] != "", _field("Numéro", address["housenumber"])),
                rx.cond(address["street"] != "", _field("Rue", address["street"])),
                _field("Type", address["type"]),
            ),
            rx.box(
                _column_title("landmark", "Informations administratives"),
                _field("Code postal", address["postcode"]),
                _field("Ville", address["city"]),
                _field("Code INSEE", address["citycode"]),
                _field("Contexte", address["context"]),
                _field("ID", address["id"]),
            ),
            rx.box(
                _column_title("globe", "Données spatiales"),
                _field("Importance", address["importance"]),
                _field("Score", address["score"]),
                _field("Coordonnées GPS", address["gps"]),
                _field("X", address["x"]),
                _field("Y", address["y"]),
            ),
            columns="3",
            spacing="4",
        ),
        class_name="card address-card",
    )


def _company_section() -> rx.Component:
    return rx.cond(
        SearchState.company_error != "",
        error_banner(SearchState.company_error),
        rx.cond(
            SearchState.has_companies,
            company_table(SearchState.companies, SearchState.company_heading),
            empty_companies(),
        ),
    )


def _column_title(icon: str, title: str) -> rx.Component:
    return rx.box(
        rx.icon(icon, size=16),
        rx.text(title, class_name="column-title"),
        class_name="title-row",
    )


def _field(label: str, value) -> rx.Component:
    return rx.text(
        rx.text.span(f"{label} : ", class_name="label"),
        rx.text.span(value),
    )
