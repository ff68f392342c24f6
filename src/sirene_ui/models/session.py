"""
Tagged state values for the search orchestrator.

Each UI phase is its own frozen dataclass carrying exactly the data that
phase owns, so illegal combinations (a company lookup running after the
address failed, an error banner next to a resolved result) cannot be
represented. ``phase`` gives the stable name used by the presentation
layer.

Suggestions:  SuggestionsIdle -> SuggestionsLoading -> SuggestionsShown
Address flow: Idle -> AddressResolving -> AddressFailed
                                       -> AddressResolved -> CompanyLoading
                                          -> CompanyResolved | CompanyFailed
Commune flow: Idle -> CommuneLoading -> CommuneResolved | CommuneFailed
"""

from dataclasses import dataclass
from typing import ClassVar, Sequence, Union

from sirene_ui.models.address import AddressDetails, AddressSuggestion
from sirene_ui.models.company import CompanyPage


@dataclass(frozen=True, slots=True)
class SuggestionsIdle:
    phase: ClassVar[str] = "idle"


@dataclass(frozen=True, slots=True)
class SuggestionsLoading:
    phase: ClassVar[str] = "suggestions_loading"

    ticket: int


@dataclass(frozen=True, slots=True)
class SuggestionsShown:
    phase: ClassVar[str] = "suggestions_shown"

    items: Sequence[AddressSuggestion] = ()


SuggestionState = Union[SuggestionsIdle, SuggestionsLoading, SuggestionsShown]


@dataclass(frozen=True, slots=True)
class Idle:
    phase: ClassVar[str] = "idle"


@dataclass(frozen=True, slots=True)
class AddressResolving:
    phase: ClassVar[str] = "address_resolving"

    query: str


@dataclass(frozen=True, slots=True)
class AddressFailed:
    phase: ClassVar[str] = "address_failed"

    error: str


@dataclass(frozen=True, slots=True)
class AddressResolved:
    phase: ClassVar[str] = "address_resolved"

    address: AddressDetails


@dataclass(frozen=True, slots=True)
class CompanyLoading:
    phase: ClassVar[str] = "company_loading"

    address: AddressDetails


@dataclass(frozen=True, slots=True)
class CompanyResolved:
    phase: ClassVar[str] = "company_resolved"

    address: AddressDetails
    page: CompanyPage


@dataclass(frozen=True, slots=True)
class CompanyFailed:
    phase: ClassVar[str] = "company_failed"

    address: AddressDetails
    error: str


AddressSearchState = Union[
    Idle,
    AddressResolving,
    AddressFailed,
    AddressResolved,
    CompanyLoading,
    CompanyResolved,
    CompanyFailed,
]


@dataclass(frozen=True, slots=True)
class CommuneLoading:
    phase: ClassVar[str] = "commune_loading"

    code: str


@dataclass(frozen=True, slots=True)
class CommuneResolved:
    phase: ClassVar[str] = "commune_resolved"

    code: str
    page: CompanyPage


@dataclass(frozen=True, slots=True)
class CommuneFailed:
    phase: ClassVar[str] = "commune_failed"

    code: str
    error: str


CommuneSearchState = Union[Idle, CommuneLoading, CommuneResolved, CommuneFailed]
