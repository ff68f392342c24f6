"""Utility functions shared across the Sirene UI package."""

from sirene_ui.utils.display import (
    ADDRESS_COMPANIES_TITLE,
    COMMUNE_COMPANIES_TITLE,
    NOT_AVAILABLE,
    NOT_SPECIFIED,
    address_fields,
    company_row,
    company_rows,
    company_summary,
    format_creation_date,
)

__all__ = [
    "ADDRESS_COMPANIES_TITLE",
    "COMMUNE_COMPANIES_TITLE",
    "NOT_AVAILABLE",
    "NOT_SPECIFIED",
    "address_fields",
    "company_row",
    "company_rows",
    "company_summary",
    "format_creation_date",
]
