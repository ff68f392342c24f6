import pytest

from sirene_ui.lib import clients


class DummyResponse:
    def __init__(self, status_code=200, payload=None, json_error=None):
        self.status_code = status_code
        self._payload = payload if payload is not None else {}
        self._json_error = json_error

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class DummySession:
    """Records GET calls and answers with the response routed by URL fragment."""

    def __init__(self):
        self.calls = []
        self.response = DummyResponse()
        self.routes = {}
        self.error = None

    def route(self, fragment, response):
        self.routes[fragment] = response

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        for fragment, response in self.routes.items():
            if fragment in url:
                return response
        return self.response


@pytest.fixture
def http(monkeypatch):
    session = DummySession()
    monkeypatch.setattr(clients, "http_session", lambda: session)
    return session


def ban_payload(**properties):
    base = {
        "label": "12 Rue de la Paix 75002 Paris",
        "score": 0.97,
        "housenumber": "12",
        "id": "75102_7022_00012",
        "type": "housenumber",
        "name": "12 Rue de la Paix",
        "postcode": "75002",
        "citycode": "75102",
        "x": 651337.06,
        "y": 6863262.09,
        "city": "Paris",
        "context": "75, Paris, Île-de-France",
        "importance": 0.70,
        "street": "Rue de la Paix",
    }
    base.update(properties)
    base = {key: value for key, value in base.items() if value is not None}
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [2.331289, 48.869268]},
                "properties": base,
            }
        ],
    }


def establishment(siret="55208131700012", **legal_unit):
    return {
        "siret": siret,
        "nic": siret[-5:],
        "dateCreationEtablissement": "2017-06-15",
        "uniteLegale": legal_unit or {"denominationUniteLegale": "ACME"},
        "adresseEtablissement": {
            "numeroVoieEtablissement": "12",
            "typeVoieEtablissement": "RUE",
            "libelleVoieEtablissement": "DE LA PAIX",
            "codePostalEtablissement": "75002",
            "libelleCommuneEtablissement": "PARIS 2",
        },
    }
