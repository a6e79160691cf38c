"""Client combining the transport, search parser and detail flattener."""

import logging
from typing import List, Optional

from funda_listings.exceptions import FundaError

from .base import Listing, ListingResult
from .detail import DEFAULT_MAX_DEPTH, populate_details
from .search import parse_search_result
from .transport import FundaTransport

logger = logging.getLogger(__name__)


class FundaClient:
    """Search the Funda mobile API and resolve listing details.

    A failed search page is an error for the whole call. A listing whose
    detail call or detail parsing fails is logged and left out, so one bad
    listing does not cost the rest of the page.

    Usage:
        client = FundaClient.from_settings()
        listings = client.search("/amsterdam/", page=1, page_size=25)
    """

    def __init__(self, transport: FundaTransport, max_depth: int = DEFAULT_MAX_DEPTH):
        """Initialize client.

        Args:
            transport: Transport used for all API requests
            max_depth: Deepest detail line nesting that is accepted
        """
        self.transport = transport
        self.max_depth = max_depth

    @classmethod
    def from_settings(cls, settings=None) -> "FundaClient":
        """Build a client from application settings (FUNDA_* environment)."""
        if settings is None:
            from funda_listings.config import settings

        transport = FundaTransport(
            api_key=settings.api_key,
            base_url=settings.base_url,
            user_agent=settings.user_agent,
            timeout=settings.timeout,
        )
        return cls(transport, max_depth=settings.max_tree_depth)

    def fetch_page(self, search_opts: str = "", page: int = 0, page_size: int = 25) -> List[Listing]:
        """Fetch and parse one search page without resolving details.

        Raises:
            TransportError: If the search request fails
            DecodeError, MalformedResult, InvalidURL: If the page cannot be parsed
        """
        logger.info(f"Searching '{search_opts}' (page {page}, page size {page_size})")
        payload = self.transport.search(search_opts, page, page_size)
        listings = parse_search_result(payload)
        logger.info(f"Found {len(listings)} listings")
        return listings

    def resolve_details(self, listings: List[Listing]) -> List[ListingResult]:
        """Fetch and apply details for each listing.

        Returns:
            One result per listing, in input order; failures carry the error
        """
        results = []
        for listing in listings:
            try:
                payload = self.transport.detail(listing.id)
                populate_details(listing, payload, max_depth=self.max_depth)
            except FundaError as e:
                logger.error(f"Could not get listing ({listing.id}): {e}")
                results.append(ListingResult(listing=listing, error=e))
                continue
            results.append(ListingResult(listing=listing))

        failed = sum(1 for r in results if not r.ok)
        logger.info(f"Resolved details: {len(results) - failed} succeeded, {failed} failed")
        return results

    def search_results(
        self, search_opts: str = "", page: int = 0, page_size: int = 25
    ) -> List[ListingResult]:
        """Search one page and resolve details, keeping failed listings as results."""
        return self.resolve_details(self.fetch_page(search_opts, page, page_size))

    def search(self, search_opts: str = "", page: int = 0, page_size: int = 25) -> List[Listing]:
        """Search one page and return the listings whose details resolved.

        Args:
            search_opts: Raw path suffix selecting area and filters, e.g. "/amsterdam/"
            page: Page index
            page_size: Listings per page

        Returns:
            Completed listings in search order

        Raises:
            FundaError: If the search page itself fails
        """
        results = self.search_results(search_opts, page, page_size)
        return [r.listing for r in results if r.ok]

    def close(self) -> None:
        self.transport.close()
