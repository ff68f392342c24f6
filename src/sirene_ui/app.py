"""
Reflex application entry point for the Sirene UI.

Two pages: the address search (home) and the commune code search.
"""

import reflex as rx

from sirene_ui.components import (
    address_results,
    address_search_card,
    commune_results,
    commune_search_panel,
    explanation_panel,
)
from sirene_ui.config import get_settings
from sirene_ui.lib import logs
from sirene_ui.state import APP_TITLE, SearchState

LOG = logs.logger(__file__)

_SETTINGS = get_settings()
LOG.info("SIRENE_UI_SERVICE: %s", _SETTINGS.service_kind)

_FONT_URL = "https://fonts.googleapis.com/css2?family=Source+Sans+3:wght@300;400;600;700&display=swap"


def page_header() -> rx.Component:
    """Build the title area and the navigation links."""
    return rx.box(
        rx.heading(APP_TITLE, size="6", as_="h1"),
        rx.cond(
            SearchState.demo_mode,
            rx.badge("Mode démonstration", color_scheme="amber", class_name="demo-badge"),
        ),
        rx.box(
            rx.link("Recherche par adresse", href="/"),
            rx.link("Recherche par commune", href="/commune"),
            class_name="nav-links",
        ),
        class_name="page-header",
        on_click=SearchState.dismiss_suggestions,
    )


def index() -> rx.Component:
    """
    Build the address search page.

    Returns:
        The page with header, explanation or search card, and results.
    """
    return rx.box(
        rx.box(
            page_header(),
            rx.cond(
                SearchState.show_explanation,
                explanation_panel(),
                rx.fragment(address_search_card(), address_results()),
            ),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


def commune() -> rx.Component:
    """Build the commune code search page."""
    return rx.box(
        rx.box(
            page_header(),
            commune_search_panel(),
            commune_results(),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

app.add_page(index, route="/", title="Répertoire Sirene", on_load=SearchState.on_load)
app.add_page(
    commune,
    route="/commune",
    title="Répertoire Sirene - Commune",
    on_load=SearchState.on_load,
)


def main() -> None:
    """Entrypoint used by `sirene-ui`; runs `reflex run` on the configured port."""
    import subprocess
    import sys

    subprocess.run(
        [sys.executable, "-m", "reflex", "run", "--frontend-port", str(_SETTINGS.app_port)],
        check=False,
    )


if __name__ == "__main__":
    main()
