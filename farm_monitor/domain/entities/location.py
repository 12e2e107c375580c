"""Location entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Location:
    """Represents a geographic point, optionally resolved to a city."""

    latitude: float
    longitude: float
    city: Optional[str] = None
    country: Optional[str] = None

    @property
    def display_name(self) -> str:
        """City and country when known, coordinates otherwise."""
        if self.city and self.country:
            return f"{self.city}, {self.country}"
        return f"{self.latitude:.2f}, {self.longitude:.2f}"

    def __str__(self) -> str:
        return self.display_name
