"""
Establishment table and status banners shared by both search pages.
"""

import reflex as rx

from sirene_ui.utils import ADDRESS_COMPANIES_TITLE

_COLUMNS = ("Nom", "SIRET", "Adresse", "Activité", "Date création")


def error_banner(message) -> rx.Component:
    """Build the red banner used for resolution and lookup failures."""
    return rx.box(
        rx.icon("circle-alert", class_name="banner-icon"),
        rx.text("Erreur : ", message),
        class_name="banner error-banner",
    )


def loading_banner(text: str = "Recherche en cours...") -> rx.Component:
    return rx.box(
        rx.box(class_name="spinner"),
        rx.text(text, class_name="muted"),
        class_name="banner loading-banner",
    )


def company_table(rows, heading, title: str = ADDRESS_COMPANIES_TITLE) -> rx.Component:
    """
    Build the establishment table.

    Args:
        rows: List var of row dicts produced by utils.company_rows().
        heading: String var with the total and displayed counts.
        title: Heading text describing which establishments are listed.

    Returns:
        A card with the heading and one table row per establishment.
    """
    return rx.box(
        rx.heading(
            title,
            " (",
            heading,
            ")",
            size="4",
            as_="h3",
        ),
        rx.table.root(
            rx.table.header(
                rx.table.row(
                    *[rx.table.column_header_cell(title) for title in _COLUMNS]
                ),
            ),
            rx.table.body(rx.foreach(rows, _company_row)),
            width="100%",
        ),
        class_name="card company-card",
    )


def empty_companies(text: str = "Aucune entreprise trouvée à cette adresse") -> rx.Component:
    return rx.box(
        rx.icon("building-2", class_name="banner-icon"),
        rx.text(text),
        class_name="banner warning-banner",
    )


def _company_row(row) -> rx.Component:
    return rx.table.row(
        rx.table.cell(row["name"], class_name="strong"),
        rx.table.cell(row["siret"]),
        rx.table.cell(row["address"]),
        rx.table.cell(row["activity"]),
        rx.table.cell(row["created"]),
    )
