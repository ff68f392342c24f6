"""
Data models for the Sirene UI.

This package provides:
- OperationResult, the success/failure contract of every upstream call
- Address models (suggestions and resolved details)
- Establishment models (records and result pages)

All models are frozen dataclasses; nothing here depends on upstream JSON.
"""

from sirene_ui.models.address import AddressDetails, AddressSuggestion
from sirene_ui.models.common import UNKNOWN_ERROR, OperationResult
from sirene_ui.models.company import DISPLAY_LIMIT, CompanyPage, CompanyRecord

__all__ = [
    "DISPLAY_LIMIT",
    "UNKNOWN_ERROR",
    "AddressDetails",
    "AddressSuggestion",
    "CompanyPage",
    "CompanyRecord",
    "OperationResult",
]
