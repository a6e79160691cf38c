"""Tests for FundaClient (mocked transport)."""

import pytest
from unittest.mock import MagicMock

from funda_listings.client import FundaClient, Listing, ListingResult
from funda_listings.client.transport import FundaTransport
from funda_listings.config import Settings
from funda_listings.exceptions import (
    DecodeError,
    InvalidURL,
    MalformedResult,
    TransportError,
)
from tests.conftest import dump, load_payload, make_entry, make_line, make_node


def detail_payload(price="€ 400.000 k.k.", url="https://www.funda.nl/1"):
    return dump([make_node([make_line("Vraagprijs", price)], url=url)])


@pytest.fixture
def transport():
    return MagicMock(spec=FundaTransport)


@pytest.fixture
def client(transport):
    return FundaClient(transport)


class TestFundaClientSearch:
    """Tests for FundaClient.search."""

    def test_end_to_end(self, client, transport):
        transport.search.return_value = load_payload("search_response.json")
        transport.detail.return_value = load_payload("house_response.json")

        listings = client.search("", 0, 0)

        assert listings == [
            Listing(
                id=4094475,
                address="Buiksloterbreek 65",
                url="https://www.funda.nl/40443683",
                image_url="https://cloud.funda.nl/valentina_media/090/700/422_720x480.jpg",
                price="€ 400.000 k.k.",
                surface_area="68 m²",
                rooms="3 kamers (1 slaapkamer)",
            )
        ]
        transport.search.assert_called_once_with("", 0, 0)
        transport.detail.assert_called_once_with(4094475)

    def test_empty_page(self, client, transport):
        transport.search.return_value = b"[]"

        assert client.search("/amsterdam/") == []
        transport.detail.assert_not_called()

    def test_detail_call_per_listing(self, client, transport):
        transport.search.return_value = dump([
            make_entry(global_id=1),
            make_entry(global_id=2, item_type=2),
            make_entry(global_id=3),
        ])
        transport.detail.side_effect = lambda gid: detail_payload(price=f"€ {gid}")

        listings = client.search()

        assert [l.id for l in listings] == [1, 3]
        assert [l.price for l in listings] == ["€ 1", "€ 3"]
        assert [c.args[0] for c in transport.detail.call_args_list] == [1, 3]

    @pytest.mark.parametrize("error", [
        TransportError("unexpected HTTP response code (404) received", status_code=404),
        DecodeError("could not decode detail response"),
        InvalidURL("/relative"),
    ])
    def test_failed_listing_is_skipped(self, client, transport, error):
        transport.search.return_value = dump([
            make_entry(global_id=1),
            make_entry(global_id=2),
            make_entry(global_id=3),
        ])

        def detail(gid):
            if gid == 2:
                raise error
            return detail_payload()

        transport.detail.side_effect = detail

        listings = client.search()

        assert [l.id for l in listings] == [1, 3]

    def test_failed_listing_is_logged(self, client, transport, caplog):
        transport.search.return_value = dump([make_entry(global_id=7)])
        transport.detail.return_value = b"not json"

        with caplog.at_level("ERROR"):
            assert client.search() == []

        assert "Could not get listing (7)" in caplog.text

    def test_search_transport_error_propagates(self, client, transport):
        transport.search.side_effect = TransportError("unexpected HTTP response code (500) received", 500)

        with pytest.raises(TransportError):
            client.search()
        transport.detail.assert_not_called()

    def test_malformed_page_propagates(self, client, transport):
        transport.search.return_value = dump([make_entry(photos=())])

        with pytest.raises(MalformedResult):
            client.search()
        transport.detail.assert_not_called()

    def test_unexpected_error_propagates(self, client, transport):
        transport.search.return_value = dump([make_entry()])
        transport.detail.side_effect = RuntimeError("bug")

        with pytest.raises(RuntimeError):
            client.search()


class TestFundaClientResults:
    """Tests for per-listing results."""

    def test_results_account_for_every_listing(self, client, transport):
        transport.search.return_value = dump([make_entry(global_id=i) for i in range(1, 6)])
        bad = {2, 5}

        def detail(gid):
            if gid in bad:
                raise TransportError("unexpected HTTP response code (404) received", 404)
            return detail_payload()

        transport.detail.side_effect = detail

        results = client.search_results()

        assert len(results) == 5
        assert [r.listing.id for r in results] == [1, 2, 3, 4, 5]
        assert {r.listing.id for r in results if not r.ok} == bad
        assert all(isinstance(r.error, TransportError) for r in results if not r.ok)

    def test_resolve_details(self, client, transport, listing):
        transport.detail.return_value = load_payload("house_response.json")

        results = client.resolve_details([listing])

        assert results == [ListingResult(listing=listing)]
        assert results[0].ok
        assert listing.rooms == "3 kamers (1 slaapkamer)"

    def test_max_depth_is_applied(self, transport, listing):
        client = FundaClient(transport, max_depth=1)
        transport.detail.return_value = dump([
            make_node([make_line("Overdracht", children=[make_line("Vraagprijs", "€ 1")])])
        ])

        result = client.resolve_details([listing])[0]

        assert not result.ok
        assert isinstance(result.error, DecodeError)

    def test_fetch_page_does_not_resolve(self, client, transport):
        transport.search.return_value = dump([make_entry()])

        listings = client.fetch_page("/utrecht/", 1, 10)

        assert len(listings) == 1
        assert listings[0].price == ""
        transport.search.assert_called_once_with("/utrecht/", 1, 10)
        transport.detail.assert_not_called()


class TestFundaClientSetup:
    """Tests for client construction."""

    def test_from_settings(self):
        settings = Settings(
            api_key="secret",
            base_url="https://api.test/v1",
            user_agent="agent/2",
            timeout=7.5,
            max_tree_depth=12,
        )

        client = FundaClient.from_settings(settings)

        assert client.max_depth == 12
        assert client.transport.api_key == "secret"
        assert client.transport.base_url == "https://api.test/v1"
        assert client.transport.user_agent == "agent/2"
        assert client.transport.timeout == 7.5
        client.close()

    def test_from_default_settings(self):
        client = FundaClient.from_settings()

        assert client.transport.api_key == "test-api-key"
        client.close()

    def test_close(self, client, transport):
        client.close()
        transport.close.assert_called_once()
