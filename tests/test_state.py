from sirene_ui import state as state_module
from sirene_ui.config import Settings
from sirene_ui.models import AddressDetails, CompanyPage, CompanyRecord
from sirene_ui.models.session import (
    AddressFailed,
    CommuneFailed,
    CommuneResolved,
    CompanyFailed,
    CompanyResolved,
)
from sirene_ui.services import DemoSireneService, SireneServiceImpl
from sirene_ui.session import CommuneSession, SearchSession
from sirene_ui.state import CommuneState, SearchState

ADDRESS = AddressDetails(
    label="12 Rue de la Paix 75002 Paris",
    coordinates=(2.331289, 48.869268),
    postcode="75002",
    city="Paris",
    citycode="75102",
    id="75102_7022_00012",
)
PAGE = CompanyPage(
    items=(
        CompanyRecord(
            siret="55208131700012",
            name="ACME",
            address="12 RUE DE LA PAIX",
            postal_code="75002",
            city="PARIS 2",
            activity_code="47.77Z",
            creation_date="2017-06-15",
        ),
    ),
    total=3,
)


def _published(session_state):
    state = SearchState()
    state._session = SearchSession(query=ADDRESS.label, search=session_state)
    state._publish()
    return state


def test_company_failure_keeps_address_card():
    state = _published(CompanyFailed(ADDRESS, "API key not configured"))

    assert state.search_phase == "company_failed"
    assert state.address["postcode"] == "75002"
    assert state.address["id"] == "75102_7022_00012"
    assert state.company_error == "API key not configured"
    assert state.address_error == ""
    assert state.companies == []


def test_company_result_fills_rows_and_heading():
    state = _published(CompanyResolved(ADDRESS, PAGE))

    assert state.company_error == ""
    assert state.company_heading == "3 au total et 1 affichés"
    assert state.companies[0]["siret"] == "55208131700012"
    assert state.companies[0]["created"] == "15/06/2017"


def test_address_failure_clears_address_card():
    state = _published(AddressFailed("no address found"))

    assert state.address_error == "no address found"
    assert state.address == {}
    assert state.company_heading == ""


def test_commune_publish_success_and_failure():
    state = CommuneState()
    state._session = CommuneSession(code="75108", search=CommuneResolved("75108", PAGE))
    state._publish()
    assert state.phase == "commune_resolved"
    assert state.total == 3
    assert len(state.companies) == 1

    state._session = CommuneSession(
        code="75108", search=CommuneFailed("75108", "API request failed with status: 500")
    )
    state._publish()
    assert state.error == "API request failed with status: 500"
    assert state.companies == []
    assert state.total == 0


def test_on_load_flags_demo_service(monkeypatch):
    state = SearchState()

    monkeypatch.setattr(state_module, "_get_service", lambda: DemoSireneService())
    SearchState.on_load.fn(state)
    assert state.demo_mode

    monkeypatch.setattr(state_module, "_get_service", lambda: SireneServiceImpl(Settings()))
    SearchState.on_load.fn(state)
    assert not state.demo_mode
