from urllib.parse import parse_qs

from sirene_ui.api import resolve_address

from conftest import DummyResponse, ban_payload


def test_resolves_first_feature(http):
    http.response = DummyResponse(payload=ban_payload())

    result = resolve_address("12 rue de la Paix 75002")

    assert result.success
    address = result.data
    assert address.postcode == "75002"
    assert address.city == "Paris"
    assert address.id == "75102_7022_00012"
    assert address.coordinates == (2.331289, 48.869268)
    assert (address.longitude, address.latitude) == (2.331289, 48.869268)

    query = parse_qs(http.calls[0]["params"])
    assert query == {"q": ["12 rue de la Paix 75002"], "limit": ["1"]}


def test_absent_optional_fields_stay_none(http):
    http.response = DummyResponse(
        payload=ban_payload(housenumber=None, street=None, context=None, importance=None)
    )
    address = resolve_address("Place de la Concorde").data
    assert address.housenumber is None
    assert address.street is None
    assert address.context is None
    assert address.importance is None


def test_zero_and_empty_values_are_preserved(http):
    http.response = DummyResponse(payload=ban_payload(x=0, y=0, name="", score=0))
    address = resolve_address("somewhere").data
    assert address.x == 0
    assert address.y == 0
    assert address.name == ""
    assert address.score == 0


def test_no_feature_is_not_found(http):
    http.response = DummyResponse(payload={"type": "FeatureCollection", "features": []})
    result = resolve_address("nowhere at all")
    assert not result.success
    assert result.error == "no address found"


def test_same_query_twice_gives_identical_details(http):
    http.response = DummyResponse(payload=ban_payload())
    assert resolve_address("12 rue de la Paix").data == resolve_address("12 rue de la Paix").data
    assert len(http.calls) == 2


def test_missing_geometry_is_reported_as_failure(http):
    http.response = DummyResponse(payload={"features": [{"properties": {"label": "x"}}]})
    result = resolve_address("broken")
    assert not result.success
    assert result.error


def test_http_error(http):
    http.response = DummyResponse(status_code=400)
    assert resolve_address("x").error == "API request failed with status: 400"


def test_empty_query_makes_no_request(http):
    result = resolve_address("")
    assert result.error == "an address is required"
    assert http.calls == []
