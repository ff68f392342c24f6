"""
Reflex state management for the Sirene UI application.

The state classes are thin adapters: SearchSession and CommuneSession
(backend vars) own the transitions, and after every step the state copies
their tagged values into primitive frontend vars for rendering.
"""

from typing import Generator, Iterator

import reflex as rx

from sirene_ui.lib import logs
from sirene_ui.models.session import (
    AddressFailed,
    CommuneFailed,
    CommuneResolved,
    CompanyFailed,
    CompanyResolved,
)
from sirene_ui.services import SireneService, get_sirene_service
from sirene_ui.session import CommuneSession, SearchSession
from sirene_ui.utils import address_fields, company_rows, company_summary

LOG = logs.logger(__file__)

APP_TITLE = "Une application simple pour vérifier le répertoire Sirene"


def _get_service() -> SireneService:
    """Get the configured service (lazy loaded)."""
    return get_sirene_service()


class SearchState(rx.State):
    """
    Address search page state.

    Handles typing with suggestions, suggestion selection, the chained
    company lookup and reset.
    """

    _session: SearchSession = SearchSession()

    demo_mode: bool = False
    show_explanation: bool = True

    query: str = ""
    suggestion_phase: str = "idle"
    suggestions: list[dict[str, str]] = []

    search_phase: str = "idle"
    address: dict[str, str] = {}
    address_error: str = ""
    companies: list[dict[str, str]] = []
    company_heading: str = ""
    company_error: str = ""

    @rx.var
    def show_suggestions(self) -> bool:
        return self.suggestion_phase == "suggestions_shown" and len(self.suggestions) > 0

    @rx.var
    def is_resolving(self) -> bool:
        return self.search_phase == "address_resolving"

    @rx.var
    def has_address(self) -> bool:
        return len(self.address) > 0

    @rx.var
    def has_result(self) -> bool:
        """Check if a finished search result (success or failure) is shown."""
        return self.search_phase not in ("idle", "address_resolving")

    @rx.var
    def is_company_loading(self) -> bool:
        return self.search_phase == "company_loading"

    @rx.var
    def has_company_outcome(self) -> bool:
        return self.search_phase in ("company_resolved", "company_failed")

    @rx.var
    def has_companies(self) -> bool:
        return len(self.companies) > 0

    def toggle_explanation(self):
        """Switch between the explanation panel and the search card."""
        self.show_explanation = not self.show_explanation

    def on_load(self):
        """Event handler for page load: flag fixture data in the header."""
        self.demo_mode = not _get_service().live

    def on_query_change(self, text: str) -> Generator:
        """
        Event handler for keystrokes in the address field.

        Args:
            text: Full content of the field.
        """
        yield from self._run(self._session.type_text(_get_service(), text))

    def select_suggestion(self, index: int) -> Generator:
        """
        Event handler for a click on a suggestion.

        Args:
            index: Position of the suggestion in the visible list.
        """
        suggestions = self._session.visible_suggestions
        if not 0 <= index < len(suggestions):
            LOG.warning("Ignoring selection of unknown suggestion %s", index)
            return
        yield from self._run(
            self._session.select_suggestion(_get_service(), suggestions[index])
        )

    def on_key_down(self, key: str) -> Generator:
        """Resolve the typed text on Enter, hide suggestions on Escape."""
        if key == "Enter":
            yield from self._run(
                self._session.search_address(_get_service(), self._session.query)
            )
        elif key == "Escape":
            self.dismiss_suggestions()

    def dismiss_suggestions(self):
        self._session.dismiss_suggestions()
        self._publish()

    def reset_search(self):
        """Clear the query, suggestions, address and company results."""
        self._session.reset()
        self._publish()

    def _run(self, steps: Iterator[None]) -> Generator:
        """Publish the session after each step so loading states render."""
        for _ in steps:
            self._publish()
            yield
        self._publish()

    def _publish(self) -> None:
        """Copy the session's tagged state into the frontend vars."""
        session = self._session
        self.query = session.query
        self.suggestion_phase = session.suggestions.phase
        self.suggestions = [
            {
                "label": suggestion.label,
                "detail": " ".join(
                    part for part in (suggestion.zipcode, suggestion.city) if part
                ),
            }
            for suggestion in session.visible_suggestions
        ]

        search = session.search
        self.search_phase = search.phase
        address = getattr(search, "address", None)
        self.address = address_fields(address) if address is not None else {}
        self.address_error = search.error if isinstance(search, AddressFailed) else ""
        self.company_error = search.error if isinstance(search, CompanyFailed) else ""
        if isinstance(search, CompanyResolved):
            self.companies = company_rows(search.page)
            self.company_heading = company_summary(search.page)
        else:
            self.companies = []
            self.company_heading = ""


class CommuneState(rx.State):
    """Commune code search page state."""

    _session: CommuneSession = CommuneSession()

    phase: str = "idle"
    companies: list[dict[str, str]] = []
    company_heading: str = ""
    total: int = 0
    error: str = ""

    @rx.var
    def is_loading(self) -> bool:
        return self.phase == "commune_loading"

    @rx.var
    def has_result(self) -> bool:
        return self.phase in ("commune_resolved", "commune_failed")

    @rx.var
    def has_companies(self) -> bool:
        return len(self.companies) > 0

    def submit(self, form_data: dict) -> Generator:
        """
        Event handler for the commune code form.

        Args:
            form_data: Submitted form fields, keyed by input name.
        """
        code = str(form_data.get("commune_code") or "")
        for _ in self._session.submit(_get_service(), code):
            self._publish()
            yield
        self._publish()

    def reset_search(self):
        self._session.reset()
        self._publish()

    def _publish(self) -> None:
        search = self._session.search
        self.phase = search.phase
        self.error = search.error if isinstance(search, CommuneFailed) else ""
        if isinstance(search, CommuneResolved):
            self.companies = company_rows(search.page)
            self.company_heading = company_summary(search.page)
            self.total = search.page.total
        else:
            self.companies = []
            self.company_heading = ""
            self.total = 0
