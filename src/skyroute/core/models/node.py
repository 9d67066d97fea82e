"""
City models for the flight network.

Cities are the vertices of the network. Their metadata is used only for
presentation; searches work purely on city codes.
"""

from dataclasses import dataclass

from .base import validate_dataclass, validate_non_empty


@validate_dataclass
@dataclass(frozen=True)
class City:
    """
    A city (airport) in the flight network.

    Attributes:
        code (str): Unique short code, e.g. "KHI"
        name (str): Display name of the city
        airport_name (str): Name of the airport serving the city
        country (str): Country or region
        timezone (str): Timezone label
        latitude (float): Latitude in degrees
        longitude (float): Longitude in degrees
    """

    code: str
    name: str
    airport_name: str = ""
    country: str = ""
    timezone: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    def __post_init__(self):
        """Validate city after initialization."""
        validate_non_empty("code", self.code)
        validate_non_empty("name", self.name)

    @property
    def display_name(self) -> str:
        """Name followed by the code, e.g. "Karachi (KHI)"."""
        return f"{self.name} ({self.code})"
