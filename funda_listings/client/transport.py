"""HTTP transport for the Funda mobile API."""

import logging
from typing import Dict, Optional

import requests

from funda_listings.exceptions import TransportError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://mobile.funda.io/api/v1"
DEFAULT_USER_AGENT = "Funda/2.17.0 (com.funda.two; build:80; Android 25) okhttp/3.5.0"


class FundaTransport:
    """Issues the search and detail GET requests of the mobile API.

    The transport only moves bytes: it attaches the fixed header set, checks
    the status code and hands the body back for parsing.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the transport.

        Args:
            api_key: Value of the ``api_key`` header
            base_url: API root, without trailing slash
            user_agent: User-Agent header the mobile app sends
            timeout: Seconds before a request is abandoned
            session: Optional requests session (created if None)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def headers(self) -> Dict[str, str]:
        """Headers the mobile app sends with every request."""
        return {
            "accepted_cookie_policy": "10",
            "api_key": self.api_key,
            "User-Agent": self.user_agent,
            "Cookie": "X-Stored-Data=null; expires=Fri, 31 Dec 9999 23:59:59 GMT; path=/; samesite=lax; httponly",
            "Accept": "application/json",
            "Accept-Language": "nl-NL",
        }

    def search_url(self, search_opts: str = "") -> str:
        """URL of the buy search endpoint; ``search_opts`` is a raw path suffix."""
        return f"{self.base_url}/Aanbod/koop{search_opts}"

    def detail_url(self, listing_id: int) -> str:
        return f"{self.base_url}/Aanbod/Detail/Koop/{listing_id}"

    def _get(self, url: str, params: Optional[Dict[str, int]] = None) -> bytes:
        logger.debug(f"GET {url} params={params}")
        try:
            resp = self.session.get(
                url, params=params, headers=self.headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"could not execute http request: {e}") from e

        if resp.status_code != 200:
            raise TransportError(
                f"unexpected HTTP response code ({resp.status_code}) received",
                status_code=resp.status_code,
            )
        return resp.content

    def search(self, search_opts: str = "", page: int = 0, page_size: int = 25) -> bytes:
        """Fetch one page of buy search results.

        Raises:
            TransportError: If the request fails or returns a non-200 status
        """
        return self._get(
            self.search_url(search_opts), params={"page": page, "pageSize": page_size}
        )

    def detail(self, listing_id: int) -> bytes:
        """Fetch the detail response of one listing.

        Raises:
            TransportError: If the request fails or returns a non-200 status
        """
        return self._get(self.detail_url(listing_id))

    def close(self) -> None:
        self.session.close()
