"""
Search orchestration independent of the UI framework.

SearchSession sequences validation, suggestion, resolution and company
lookup calls for one user session and records the outcome as tagged
state values (see models.session). Transitions that perform network calls
are generators: they yield once the loading state is set, so the caller
can push that intermediate state to the browser before the call blocks.

Suggestion requests carry a ticket from a monotonically increasing
counter; a response whose ticket is no longer the latest is dropped, so
a slow early response never overwrites newer suggestions. Address and
commune searches carry their own ticket, which reset() also advances.
"""

from dataclasses import dataclass, field
from typing import Iterator

from sirene_ui.lib import logs
from sirene_ui.models import AddressSuggestion
from sirene_ui.models.session import (
    AddressFailed,
    AddressResolved,
    AddressResolving,
    AddressSearchState,
    CommuneFailed,
    CommuneLoading,
    CommuneResolved,
    CommuneSearchState,
    CompanyFailed,
    CompanyLoading,
    CompanyResolved,
    Idle,
    SuggestionsIdle,
    SuggestionsLoading,
    SuggestionsShown,
    SuggestionState,
)
from sirene_ui.services import SireneService

LOG = logs.logger(__file__)

# Suggestions are only requested once this many characters are typed.
MIN_SUGGESTION_LENGTH = 3


@dataclass
class SearchSession:
    """
    Address search state machine for one user session.

    Attributes:
        query: Text currently in the search field.
        suggestions: Suggestion dropdown state.
        search: Address resolution and company lookup state.
    """

    query: str = ""
    suggestions: SuggestionState = field(default_factory=SuggestionsIdle)
    search: AddressSearchState = field(default_factory=Idle)
    _suggestion_ticket: int = field(default=0, repr=False)
    _search_ticket: int = field(default=0, repr=False)

    @property
    def visible_suggestions(self) -> tuple[AddressSuggestion, ...]:
        if isinstance(self.suggestions, SuggestionsShown):
            return tuple(self.suggestions.items)
        return ()

    def type_text(self, service: SireneService, text: str) -> Iterator[None]:
        """
        Update the query and refresh suggestions.

        Below MIN_SUGGESTION_LENGTH characters (after trimming) the list is
        cleared and the service is not called. Provider failures produce
        an empty list rather than an error.
        """
        self.query = text
        self._suggestion_ticket += 1
        if len(text.strip()) < MIN_SUGGESTION_LENGTH:
            self.suggestions = SuggestionsIdle()
            return

        ticket = self._suggestion_ticket
        self.suggestions = SuggestionsLoading(ticket)
        yield

        result = service.suggest_addresses(text)
        if ticket != self._suggestion_ticket:
            LOG.debug("Dropping stale suggestions for %r", text)
            return
        if not result.success:
            LOG.info("Suggestions unavailable for %r: %s", text, result.error)
        self.suggestions = SuggestionsShown(tuple(result.data or ()))

    def dismiss_suggestions(self) -> None:
        """Hide the dropdown and drop any suggestion response still pending."""
        self._suggestion_ticket += 1
        self.suggestions = SuggestionsIdle()

    def select_suggestion(
        self, service: SireneService, suggestion: AddressSuggestion
    ) -> Iterator[None]:
        """Resolve a chosen suggestion, then look up companies at that address."""
        self.query = suggestion.label
        yield from self.search_address(service, suggestion.label)

    def search_address(self, service: SireneService, text: str) -> Iterator[None]:
        """
        Resolve *text* to one address and chain into the company lookup.

        The lookup only runs when the resolved address has an identifier;
        an address failure skips it entirely.
        """
        self.dismiss_suggestions()
        self._search_ticket += 1
        ticket = self._search_ticket
        self.search = AddressResolving(text)
        yield

        result = service.resolve_address(text)
        if ticket != self._search_ticket:
            return
        if not result.success:
            self.search = AddressFailed(result.error)
            return

        address = result.data
        self.search = AddressResolved(address)
        if not address.id:
            LOG.info("Resolved address %r has no identifier", address.label)
            return

        self.search = CompanyLoading(address)
        yield

        companies = service.companies_at_address(address.id)
        if ticket != self._search_ticket:
            return
        if companies.success:
            self.search = CompanyResolved(address, companies.data)
        else:
            self.search = CompanyFailed(address, companies.error)

    def reset(self) -> None:
        """Clear query, suggestions and results, discarding pending responses."""
        self.query = ""
        self.dismiss_suggestions()
        self._search_ticket += 1
        self.search = Idle()


@dataclass
class CommuneSession:
    """Company lookup by commune code for one user session."""

    code: str = ""
    search: CommuneSearchState = field(default_factory=Idle)
    _ticket: int = field(default=0, repr=False)

    def submit(self, service: SireneService, code: str) -> Iterator[None]:
        """Look up the establishments of commune *code*."""
        self.code = code
        self._ticket += 1
        ticket = self._ticket
        self.search = CommuneLoading(code)
        yield

        result = service.companies_by_commune(code)
        if ticket != self._ticket:
            return
        if result.success:
            self.search = CommuneResolved(code, result.data)
        else:
            self.search = CommuneFailed(code, result.error)

    def reset(self) -> None:
        self.code = ""
        self._ticket += 1
        self.search = Idle()
