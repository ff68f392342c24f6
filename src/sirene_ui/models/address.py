"""
Address models produced by the autocomplete and resolution clients.

Optional upstream fields stay None when absent so the presentation layer
can tell a missing value from a real 0 or empty string.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AddressSuggestion:
    """One autocomplete candidate for partially typed text."""

    label: str
    type: str
    city: str | None = None
    zipcode: str | None = None


@dataclass(frozen=True, slots=True)
class AddressDetails:
    """The single best match for a resolved address."""

    label: str
    coordinates: tuple[float, float]
    postcode: str
    city: str
    citycode: str
    id: str
    housenumber: str | None = None
    street: str | None = None
    type: str | None = None
    name: str | None = None
    x: float | None = None
    y: float | None = None
    context: str | None = None
    importance: float | None = None
    score: float | None = None

    @property
    def longitude(self) -> float:
        return self.coordinates[0]

    @property
    def latitude(self) -> float:
        return self.coordinates[1]
