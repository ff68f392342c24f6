"""
Address search card and explanation panel for the home page.

Provides the address input with its suggestion dropdown, the searching
indicator and the reset button.
"""

import reflex as rx

from sirene_ui.components.company_table import loading_banner
from sirene_ui.state import SearchState


def explanation_panel() -> rx.Component:
    """Build the introduction shown before the search card."""
    return rx.box(
        rx.text("Trouvez facilement des informations sur les entreprises françaises."),
        rx.text(
            "Avec une adresse vous pouvez trouver des informations administratives "
            "détaillées (code postal, ville, coordonnées GPS)."
        ),
        rx.text(
            "Vous pouvez également accéder aux données sur les entreprises actives "
            "avec au moins un employé situé à cette adresse."
        ),
        rx.button(
            "Rechercher",
            on_click=SearchState.toggle_explanation,
            class_name="primary-button",
        ),
        class_name="explanation muted",
    )


def address_search_card() -> rx.Component:
    """
    Build the search card with input, suggestions and status row.

    Returns:
        The search card component.
    """
    return rx.box(
        rx.button(
            "← Retour aux informations",
            on_click=SearchState.toggle_explanation,
            class_name="secondary-button",
        ),
        rx.box(
            rx.box(
                rx.icon("search", class_name="input-icon"),
                rx.input(
                    placeholder="Saisir une adresse...",
                    value=SearchState.query,
                    on_change=SearchState.on_query_change,
                    on_key_down=SearchState.on_key_down,
                    auto_complete=False,
                    class_name="search-input",
                ),
                class_name="input-with-icon",
            ),
            rx.cond(SearchState.show_suggestions, _suggestion_list()),
            class_name="search-field",
        ),
        rx.box(
            rx.cond(SearchState.is_resolving, loading_banner()),
            rx.cond(
                SearchState.has_result,
                rx.button(
                    rx.icon("rotate-ccw", size=16),
                    "Réinitialiser",
                    on_click=SearchState.reset_search,
                    class_name="secondary-button",
                ),
            ),
            class_name="status-row",
        ),
        class_name="card search-card",
    )


def _suggestion_list() -> rx.Component:
    return rx.box(
        rx.foreach(SearchState.suggestions, _suggestion_item),
        class_name="suggestions",
    )


def _suggestion_item(suggestion, index) -> rx.Component:
    return rx.box(
        rx.text(suggestion["label"]),
        rx.cond(
            suggestion["detail"] != "",
            rx.text(suggestion["detail"], class_name="muted small"),
        ),
        on_click=SearchState.select_suggestion(index),
        class_name="suggestion",
    )
