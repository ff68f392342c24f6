from urllib.parse import parse_qs

from sirene_ui.api import companies_at_address, companies_by_commune
from sirene_ui.api.sirene import API_KEY_HEADER, address_identifier, address_query
from sirene_ui.config import SIRENE_URL

from conftest import DummyResponse, establishment


def test_missing_key_fails_without_network_call(http):
    result = companies_at_address("75102_7022_00012", api_key=None)
    assert not result.success
    assert result.error == "API key not configured"
    assert http.calls == []

    assert companies_by_commune("75056", api_key="").error == "API key not configured"
    assert http.calls == []


def test_address_lookup_strips_separators_and_adds_suffix(http):
    http.response = DummyResponse(payload={"header": {"total": 0}, "etablissements": []})

    companies_at_address("75102_7022_00012", api_key="secret")

    call = http.calls[0]
    assert call["url"] == SIRENE_URL
    assert call["headers"] == {API_KEY_HEADER: "secret"}
    assert parse_qs(call["params"])["q"] == [
        "identifiantAdresseEtablissement:75102702200012_B"
        " AND periode(etatAdministratifEtablissement:A"
        " AND caractereEmployeurEtablissement:O)"
    ]


def test_address_identifier_without_separator_only_gets_suffix():
    assert address_identifier("751087508") == "751087508_B"
    assert address_query("751087508").startswith("identifiantAdresseEtablissement:751087508_B ")


def test_commune_lookup_query(http):
    http.response = DummyResponse(payload={"header": {"total": 1}, "etablissements": [establishment()]})

    result = companies_by_commune(" 75056 ", api_key="secret")

    assert result.success
    assert parse_qs(http.calls[0]["params"])["q"] == ["codeCommuneEtablissement:75056"]
    record = result.data.items[0]
    assert record.siret == "55208131700012"
    assert record.name == "ACME"
    assert record.address == "12 RUE DE LA PAIX"
    assert record.creation_date == "2017-06-15"


def test_empty_commune_code_is_rejected_before_request(http):
    result = companies_by_commune("", api_key="secret")
    assert result.error == "a postal code is required"
    assert http.calls == []


def test_total_comes_from_header_and_rows_keep_order(http):
    rows = [establishment(siret=f"{index:014d}") for index in range(25)]
    http.response = DummyResponse(payload={"header": {"total": 42}, "etablissements": rows})

    page = companies_at_address("75102_7022_00012", api_key="secret").data

    assert page.total == 42
    assert [record.siret for record in page.items] == [row["siret"] for row in rows]
    assert len(page.displayed) == 20
    assert page.displayed[0].siret == rows[0]["siret"]


def test_missing_blocks_default_to_empty(http):
    http.response = DummyResponse(payload={})
    page = companies_by_commune("75056", api_key="secret").data
    assert page.total == 0
    assert page.items == ()


def test_http_error_status(http):
    http.response = DummyResponse(status_code=404)
    result = companies_at_address("75102_7022_00012", api_key="secret")
    assert result.error == "API request failed with status: 404"
