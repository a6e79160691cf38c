"""Data models shared by the search parser, detail flattener and client."""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

from funda_listings.exceptions import InvalidURL


@dataclass
class Listing:
    """A single property as exposed by the client.

    ``id`` and ``image_url`` are set by the search parser. The remaining
    fields are filled in from the detail response and stay empty when the
    API does not report them.
    """
    # Required fields
    id: int
    address: str
    image_url: str

    # Detail fields
    url: str = ""
    price: str = ""  # e.g. "€ 400.000 k.k."
    surface_area: str = ""  # e.g. "68 m²"
    rooms: str = ""  # e.g. "3 kamers (1 slaapkamer)"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for output."""
        return {
            "id": self.id,
            "address": self.address,
            "url": self.url,
            "image_url": self.image_url,
            "price": self.price,
            "surface_area": self.surface_area,
            "rooms": self.rooms,
        }


@dataclass
class ListingResult:
    """Outcome of resolving the details of one listing."""
    listing: Listing
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_absolute_url(url: str) -> str:
    """Check that ``url`` is an absolute URI and return it unchanged.

    Raises:
        InvalidURL: If the string has no scheme or host, or cannot be parsed
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidURL(url, str(e)) from e

    if not parts.scheme or not parts.netloc:
        raise InvalidURL(url)
    return url
