import pytest

from sirene_ui.config import Settings
from sirene_ui.services import (
    DemoSireneService,
    SireneServiceImpl,
    get_sirene_service,
)


def test_registry_resolves_kinds():
    assert isinstance(get_sirene_service("demo"), DemoSireneService)
    assert isinstance(get_sirene_service("DEMO"), DemoSireneService)
    assert get_sirene_service("demo") is get_sirene_service("demo")


def test_registry_rejects_unknown_kind():
    with pytest.raises(ValueError, match="Unknown sirene service kind: sqlite"):
        get_sirene_service("sqlite")


def test_demo_suggestions_filter_fixtures():
    result = DemoSireneService().suggest_addresses("rue de la paix")
    assert result.success
    assert [s.city for s in result.data] == ["Paris", "Bordeaux"]


def test_demo_flow_matches_live_shapes():
    service = DemoSireneService()
    assert not service.live

    address = service.resolve_address("12 Rue de la Paix, 75002 Paris").data
    assert address.id == "75102_7022_00012"
    assert address.street == "Rue de la Paix"

    page = service.companies_at_address(address.id).data
    assert [record.name for record in page.items] == [
        "MAISON DE JOAILLERIE DE LA PAIX",
        "MARTIN CLAIRE",
    ]
    assert page.total == 2


def test_demo_street_level_address_has_no_housenumber():
    address = DemoSireneService().resolve_address("Place de la Concorde, 75008 Paris").data
    assert address.housenumber is None
    assert address.street is None


def test_demo_failures_use_result_contract():
    service = DemoSireneService()
    assert service.resolve_address("1 rue inconnue").error == "no address found"
    assert service.suggest_addresses("").error == "a search term is required"
    assert service.companies_by_commune(" ").error == "a postal code is required"


def test_demo_commune_lookup():
    page = DemoSireneService().companies_by_commune("75108").data
    assert [record.siret for record in page.items] == ["41236985000035"]
    assert page.items[0].address == "PL DE LA CONCORDE"


def test_live_service_without_key_makes_no_request(http):
    service = SireneServiceImpl(Settings(insee_api_key=None))
    assert service.live
    assert service.companies_by_commune("75056").error == "API key not configured"
    assert http.calls == []


def test_live_service_uses_configured_endpoints(http):
    from conftest import DummyResponse

    http.response = DummyResponse(payload={"results": []})
    service = SireneServiceImpl(
        Settings(completion_url="http://localhost/completion", request_timeout=2.5)
    )
    assert service.suggest_addresses("rue de la Paix").data == []
    assert http.calls[0]["url"] == "http://localhost/completion"
    assert http.calls[0]["timeout"] == 2.5


def test_demo_resolves_partial_text():
    address = DemoSireneService().resolve_address("rue de la paix, 75002").data
    assert address.citycode == "75102"
