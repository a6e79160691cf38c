"""Decode raw API payloads into validated wire models.

Every pydantic ``ValidationError`` is re-raised as :class:`DecodeError` so
callers only ever deal with the client's own exception hierarchy.
"""

import logging
from typing import Any, List, Union

from pydantic import TypeAdapter, ValidationError

from funda_listings.exceptions import DecodeError
from .models import DetailLine, DetailNode, SearchEntry

logger = logging.getLogger(__name__)

Payload = Union[bytes, str]

_search_result = TypeAdapter(List[SearchEntry])
_detail_response = TypeAdapter(List[DetailNode])


def decode_search_result(payload: Payload) -> List[SearchEntry]:
    """Decode a search response body into a list of entries.

    Raises:
        DecodeError: If the body is not JSON or not an array of entries
    """
    try:
        return _search_result.validate_json(payload)
    except ValidationError as e:
        logger.debug(f"Search result errors: {e.errors()}")
        raise DecodeError(
            f"could not decode search result: {e.error_count()} errors"
        ) from e


def decode_detail_response(payload: Payload) -> List[DetailNode]:
    """Decode a detail response body into its top-level nodes.

    Raises:
        DecodeError: If the body is not JSON or not an array of nodes
    """
    try:
        return _detail_response.validate_json(payload)
    except ValidationError as e:
        logger.debug(f"Detail response errors: {e.errors()}")
        raise DecodeError(
            f"could not decode detail response: {e.error_count()} errors"
        ) from e


def decode_line(raw: Any) -> DetailLine:
    """Decode one raw ``List`` element into a :class:`DetailLine`.

    Raises:
        DecodeError: If the element is not a well-formed line object
    """
    try:
        return DetailLine.model_validate(raw)
    except ValidationError as e:
        raise DecodeError(f"could not decode detail line: {raw!r:.80}") from e
