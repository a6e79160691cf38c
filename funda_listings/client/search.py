"""Parse search result pages into partially populated listings."""

import logging
from typing import List

from funda_listings.exceptions import MalformedResult
from funda_listings.validation import SearchEntry, decode_search_result
from funda_listings.validation.converters import Payload

from .base import Listing, parse_absolute_url

logger = logging.getLogger(__name__)

# Item type of an actual listing; other types are promoted insertions (ads).
LISTING_ITEM_TYPE = 1

# Number of info blocks a listing entry carries at minimum.
MIN_INFO_BLOCKS = 4


def _check_entry(entry: SearchEntry) -> None:
    """Ensure the entry has the structure address and photo extraction need."""
    if not entry.photos:
        raise MalformedResult(f"result {entry.global_id} does not have photos")

    if len(entry.info) < MIN_INFO_BLOCKS:
        raise MalformedResult(
            f"result {entry.global_id} does not have enough info values "
            f"({len(entry.info)} < {MIN_INFO_BLOCKS})"
        )

    for block in entry.info:
        if not block.lines:
            raise MalformedResult(
                f"result {entry.global_id} does not have enough info lines"
            )


def parse_search_result(payload: Payload) -> List[Listing]:
    """Parse a search response body into listings.

    Promotional entries are skipped. The returned listings have their id,
    address and image URL set; everything else comes from the detail call.

    Args:
        payload: Raw JSON body of a search request

    Returns:
        Listings in the order they appear in the payload

    Raises:
        DecodeError: If the payload is not an array of search entries
        MalformedResult: If a listing entry lacks photos or info lines
        InvalidURL: If the first photo link is not an absolute URI
    """
    entries = decode_search_result(payload)

    listings = []
    for entry in entries:
        if entry.item_type != LISTING_ITEM_TYPE:
            logger.debug(f"Skipping promoted entry (type {entry.item_type})")
            continue

        _check_entry(entry)

        listings.append(
            Listing(
                id=entry.global_id,
                address=entry.info[0].lines[0].text,
                image_url=parse_absolute_url(entry.photos[0].link),
            )
        )

    logger.debug(f"Parsed {len(listings)} listings from {len(entries)} entries")
    return listings
