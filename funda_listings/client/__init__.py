"""Client for the Funda mobile API.

This module searches funda.io's mobile API and completes each listing with
the fields found in its detail response.

Main exports:
- FundaClient: Search and detail resolution with per-listing failure handling
- FundaTransport: HTTP requests with the mobile app's headers
- parse_search_result, populate_details: Pure payload parsers
- Listing, ListingResult: Data models

Example usage:
    from funda_listings.client import FundaClient

    client = FundaClient.from_settings()
    for listing in client.search("/amsterdam/", page=1):
        print(listing.address, listing.price)
"""

from funda_listings.exceptions import (
    DecodeError,
    DetailTreeTooDeep,
    FundaError,
    InvalidURL,
    MalformedResult,
    TransportError,
)

from .base import Listing, ListingResult, parse_absolute_url
from .client import FundaClient
from .detail import LABEL_FIELDS, flatten_lines, iter_detail_lines, populate_details
from .search import parse_search_result
from .transport import FundaTransport

__all__ = [
    # Main interface
    "FundaClient",
    "FundaTransport",
    # Parsers
    "parse_search_result",
    "populate_details",
    "flatten_lines",
    "iter_detail_lines",
    "LABEL_FIELDS",
    "parse_absolute_url",
    # Data models
    "Listing",
    "ListingResult",
    # Exceptions
    "FundaError",
    "MalformedResult",
    "InvalidURL",
    "DecodeError",
    "DetailTreeTooDeep",
    "TransportError",
]
