"""Shared fixtures for the test suite."""

import json
from pathlib import Path

import pytest

from funda_listings.client.base import Listing

DATA_DIR = Path(__file__).parent / "data"


def load_payload(name: str) -> bytes:
    """Read a recorded API response body from tests/data."""
    return (DATA_DIR / name).read_bytes()


def make_line(label="", value="", text="", children=None) -> dict:
    """Factory for a raw detail line as the API sends it."""
    line = {"Label": label, "Value": value, "Text": text}
    if children is not None:
        line["List"] = children
    return line


def make_node(lines=None, url=None, section=1) -> dict:
    """Factory for a raw top-level detail section."""
    node = {"Section": section, "List": lines or []}
    if url is not None:
        node["URL"] = url
    return node


def make_entry(
    global_id=4094475,
    address="Buiksloterbreek 65",
    item_type=1,
    photos=("https://cloud.funda.nl/valentina_media/090/700/422_720x480.jpg",),
    info_blocks=4,
    **overrides,
) -> dict:
    """Factory for a raw search result entry."""
    info = [{"Line": [{"Text": address}]}]
    info += [{"Line": [{"Text": f"info {i}"}]} for i in range(1, info_blocks)]
    entry = {
        "ItemType": item_type,
        "GlobalId": global_id,
        "Link": f"https://www.funda.nl/koop/amsterdam/{global_id}/",
        "Fotos": [{"Link": link} for link in photos],
        "Info": info[:info_blocks],
    }
    entry.update(overrides)
    return entry


def dump(items) -> bytes:
    return json.dumps(items).encode("utf-8")


def nest(line: dict, depth: int) -> dict:
    """Wrap ``line`` in ``depth`` unlabeled parent lines."""
    for _ in range(depth):
        line = make_line(children=[line])
    return line


@pytest.fixture
def listing():
    """A listing as returned by the search parser."""
    return Listing(
        id=4094475,
        address="Buiksloterbreek 65",
        image_url="https://cloud.funda.nl/valentina_media/090/700/422_720x480.jpg",
    )


@pytest.fixture
def search_payload():
    return load_payload("search_response.json")


@pytest.fixture
def house_payload():
    return load_payload("house_response.json")
