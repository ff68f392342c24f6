"""
Establishment models produced by the SIRENE registry client.
"""

from dataclasses import dataclass, field
from typing import Sequence

# Rows rendered per search; the upstream total is kept separately.
DISPLAY_LIMIT = 20


@dataclass(frozen=True, slots=True)
class CompanyRecord:
    """One establishment (SIRET) row."""

    siret: str
    name: str
    address: str
    postal_code: str
    city: str
    activity_code: str
    creation_date: str | None = None

    @property
    def full_address(self) -> str:
        """Street address followed by postal code and city."""
        locality = " ".join(part for part in (self.postal_code, self.city) if part)
        return ", ".join(part for part in (self.address, locality) if part)


@dataclass(frozen=True, slots=True)
class CompanyPage:
    """Establishments in upstream order plus the upstream total count."""

    items: Sequence[CompanyRecord] = field(default_factory=tuple)
    total: int = 0

    @property
    def displayed(self) -> Sequence[CompanyRecord]:
        """Return the rows shown to the user, capped at DISPLAY_LIMIT."""
        return self.items[:DISPLAY_LIMIT]
