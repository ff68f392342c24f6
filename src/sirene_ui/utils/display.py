"""
Display formatting for address and establishment results.

Reflex state only holds primitives, so these helpers turn the domain
models into flat string dictionaries ready for rx.foreach and rx.cond.
Absent optional values get French fallback labels; 0 and "" are real
values and are shown as such.
"""

from datetime import datetime
from typing import Any

from sirene_ui.models import DISPLAY_LIMIT, AddressDetails, CompanyPage, CompanyRecord

NOT_SPECIFIED = "Non spécifié"
NOT_AVAILABLE = "Non disponible"

# Table headings. Only address lookups filter on active employer establishments.
ADDRESS_COMPANIES_TITLE = "Liste des établissements actifs et employeurs"
COMMUNE_COMPANIES_TITLE = "Liste des établissements de la commune"


def _text(value: Any, fallback: str = "") -> str:
    return fallback if value is None else str(value)


def format_creation_date(value: str | None) -> str:
    """
    Format an ISO creation date as dd/mm/YYYY.

    Args:
        value: Date string such as "2017-06-15", or None.

    Returns:
        The French display date, the raw value if it cannot be parsed,
        or "" when absent.
    """
    if not value:
        return ""
    try:
        return datetime.fromisoformat(value.strip()).strftime("%d/%m/%Y")
    except ValueError:
        return value


def address_fields(address: AddressDetails) -> dict[str, str]:
    """Return the resolved address as display strings."""
    return {
        "label": address.label,
        "housenumber": _text(address.housenumber),
        "street": _text(address.street),
        "type": _text(address.type, NOT_SPECIFIED),
        "postcode": address.postcode,
        "city": address.city,
        "citycode": address.citycode,
        "context": _text(address.context, NOT_AVAILABLE),
        "id": address.id,
        "importance": _text(address.importance, NOT_SPECIFIED),
        "score": _text(address.score, NOT_SPECIFIED),
        "gps": f"{address.latitude}, {address.longitude}",
        "x": _text(address.x, NOT_AVAILABLE),
        "y": _text(address.y, NOT_AVAILABLE),
    }


def company_row(company: CompanyRecord) -> dict[str, str]:
    """Return one establishment as a table row."""
    return {
        "siret": company.siret,
        "name": company.name,
        "address": company.full_address,
        "activity": company.activity_code,
        "created": format_creation_date(company.creation_date),
    }


def company_rows(page: CompanyPage) -> list[dict[str, str]]:
    """Return the displayed rows of *page*, at most DISPLAY_LIMIT of them."""
    return [company_row(company) for company in page.displayed]


def company_summary(page: CompanyPage) -> str:
    """Return the table heading counts, e.g. "42 au total et 20 affichés"."""
    shown = min(len(page.items), DISPLAY_LIMIT)
    return f"{page.total} au total et {shown} affichés"
