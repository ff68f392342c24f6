"""
Mapping of upstream JSON payloads onto the internal models.

The Géoplateforme, BAN and SIRENE shapes are external contracts; nothing
outside this module reads them. benedict keypaths give safe nested access
so absent blocks resolve to None instead of raising KeyError.
"""

from typing import Any, Mapping

from benedict import benedict

from sirene_ui.errors import NotFoundError, TransportError
from sirene_ui.models import (
    AddressDetails,
    AddressSuggestion,
    CompanyPage,
    CompanyRecord,
)


def _wrap(payload: Any) -> benedict:
    if not isinstance(payload, Mapping):
        raise TransportError("malformed response body")
    return benedict(dict(payload))


def parse_suggestions(payload: Mapping[str, Any]) -> list[AddressSuggestion]:
    """
    Map a completion payload to suggestions, preserving upstream order.

    ``city`` and ``zipcode`` stay None when the upstream result omits them.
    """
    return [
        AddressSuggestion(
            label=result.get("fulltext", ""),
            type=result.get("type", ""),
            city=result.get("city"),
            zipcode=result.get("zipcode"),
        )
        for result in (_wrap(item) for item in _wrap(payload).get("results") or [])
    ]


def parse_address(payload: Mapping[str, Any]) -> AddressDetails:
    """
    Flatten the first feature of a BAN payload into AddressDetails.

    Raises:
        NotFoundError: If the payload holds no feature.
    """
    features = _wrap(payload).get("features") or []
    if not features:
        raise NotFoundError()

    feature = _wrap(features[0])
    lon, lat = feature.get("geometry.coordinates")
    return AddressDetails(
        label=feature.get("properties.label", ""),
        coordinates=(lon, lat),
        postcode=feature.get("properties.postcode", ""),
        city=feature.get("properties.city", ""),
        citycode=feature.get("properties.citycode", ""),
        id=feature.get("properties.id", ""),
        housenumber=feature.get("properties.housenumber"),
        street=feature.get("properties.street"),
        type=feature.get("properties.type"),
        name=feature.get("properties.name"),
        x=feature.get("properties.x"),
        y=feature.get("properties.y"),
        context=feature.get("properties.context"),
        importance=feature.get("properties.importance"),
        score=feature.get("properties.score"),
    )


def company_name(legal_unit: Mapping[str, Any]) -> str:
    """
    Return the registered denomination, else "<last name> <first name>".

    Absent name parts are skipped so no stray whitespace remains.
    """
    denomination = legal_unit.get("denominationUniteLegale")
    if denomination:
        return denomination
    parts = (legal_unit.get("nomUniteLegale"), legal_unit.get("prenom1UniteLegale"))
    return " ".join(part for part in parts if part)


def street_address(location: Mapping[str, Any]) -> str:
    """Join street number, street type and street name, skipping absent parts."""
    parts = (
        location.get("numeroVoieEtablissement"),
        location.get("typeVoieEtablissement"),
        location.get("libelleVoieEtablissement"),
    )
    words = (str(part).strip() for part in parts if part is not None)
    return " ".join(word for word in words if word)


def parse_company(b: benedict) -> CompanyRecord:
    """Map one SIRENE establishment onto a CompanyRecord."""
    legal_unit = b.get("uniteLegale") or {}
    location = b.get("adresseEtablissement") or {}
    return CompanyRecord(
        siret=b.get("siret", ""),
        name=company_name(legal_unit),
        address=street_address(location),
        postal_code=location.get("codePostalEtablissement") or "",
        city=location.get("libelleCommuneEtablissement") or "",
        activity_code=legal_unit.get("activitePrincipaleUniteLegale") or "",
        creation_date=b.get("dateCreationEtablissement"),
    )


def parse_company_page(payload: Mapping[str, Any]) -> CompanyPage:
    """
    Map a SIRENE /siret payload onto a CompanyPage.

    A missing header block gives a total of 0, a missing establishment
    list gives no items. Upstream order is kept.
    """
    b = _wrap(payload)
    establishments = b.get("etablissements") or []
    return CompanyPage(
        items=tuple(parse_company(_wrap(item)) for item in establishments),
        total=int(b.get("header.total") or 0),
    )
