"""Flatten detail responses and map known labels onto listing fields.

A detail response is a list of sections. Each section holds lines, and every
line may hold further lines, to any depth. The meaning of a line is decided
by its label only, so the whole tree is walked and every line whose label
appears in :data:`LABEL_FIELDS` sets the corresponding listing field.

Lines are applied children first, then the parent, in document order. When
a label occurs more than once the line applied last wins.
"""

import logging
from types import MappingProxyType
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Tuple

from funda_listings.exceptions import DetailTreeTooDeep
from funda_listings.validation import DetailLine, DetailNode, decode_detail_response, decode_line
from funda_listings.validation.converters import Payload

from .base import Listing, parse_absolute_url

logger = logging.getLogger(__name__)

# Section holding the photo gallery; it carries no label/value data.
PHOTO_SECTION = 3

DEFAULT_MAX_DEPTH = 64


def _setter(field_name: str) -> Callable[[Listing, str], None]:
    def apply(listing: Listing, value: str) -> None:
        setattr(listing, field_name, value)

    return apply


LABEL_FIELDS: Mapping[str, Callable[[Listing, str], None]] = MappingProxyType({
    "Vraagprijs": _setter("price"),
    "Wonen (= woonoppervlakte)": _setter("surface_area"),
    "Aantal kamers": _setter("rooms"),
})


def flatten_lines(raw_lines: Iterable[Any], max_depth: int = DEFAULT_MAX_DEPTH) -> Iterator[DetailLine]:
    """Yield every line of a subtree, children before their parent.

    Walks with an explicit stack so the nesting depth of the input never
    turns into Python recursion depth.

    Args:
        raw_lines: Raw ``List`` elements of a section or line
        max_depth: Deepest nesting level that is accepted

    Raises:
        DecodeError: If an element does not decode as a line
        DetailTreeTooDeep: If lines nest deeper than ``max_depth``
    """
    # (item, depth, expanded): item is a raw element until expanded, then a line
    stack: List[Tuple[Any, int, bool]] = [(raw, 1, False) for raw in reversed(list(raw_lines))]

    while stack:
        item, depth, expanded = stack.pop()
        if expanded:
            yield item
            continue

        if depth > max_depth:
            raise DetailTreeTooDeep(f"detail tree nests deeper than {max_depth} levels")

        line = decode_line(item)
        stack.append((line, depth, True))
        stack.extend((raw, depth + 1, False) for raw in reversed(line.children))


def iter_detail_lines(
    nodes: Iterable[DetailNode], max_depth: int = DEFAULT_MAX_DEPTH
) -> Iterator[Tuple[str, str]]:
    """Yield ``(label, value)`` pairs of all non-photo sections in apply order."""
    for node in nodes:
        if node.section == PHOTO_SECTION:
            continue
        for line in flatten_lines(node.children, max_depth):
            yield line.label, line.value


def apply_line(listing: Listing, label: str, value: str) -> bool:
    """Set the listing field mapped to ``label``; unknown labels are ignored.

    Returns:
        True if the label is mapped to a field
    """
    setter = LABEL_FIELDS.get(label)
    if setter is None:
        return False
    setter(listing, value)
    return True


def populate_details(listing: Listing, payload: Payload, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
    """Fill in a listing's detail fields from a detail response body.

    The listing is modified in place. A section carrying a URL sets the
    listing's canonical URL, later sections overriding earlier ones.

    Args:
        listing: Listing returned by the search parser
        payload: Raw JSON body of the detail request
        max_depth: Deepest line nesting that is accepted

    Raises:
        DecodeError: If the payload or any nested line is malformed
        InvalidURL: If a section URL is not an absolute URI
    """
    nodes = decode_detail_response(payload)

    applied = 0
    for node in nodes:
        if node.url:
            listing.url = parse_absolute_url(node.url)

        if node.section == PHOTO_SECTION:
            continue

        for line in flatten_lines(node.children, max_depth):
            if apply_line(listing, line.label, line.value):
                applied += 1

    logger.debug(f"Listing {listing.id}: {applied} fields applied from {len(nodes)} sections")
