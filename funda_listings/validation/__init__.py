"""Wire models and decoders for the Funda mobile API.

Main exports:
- SearchEntry, DetailNode, DetailLine: validated response shapes
- decode_search_result, decode_detail_response, decode_line: payload decoders
"""

from .converters import decode_detail_response, decode_line, decode_search_result
from .models import DetailLine, DetailNode, InfoBlock, Photo, SearchEntry

__all__ = [
    "SearchEntry",
    "DetailNode",
    "DetailLine",
    "InfoBlock",
    "Photo",
    "decode_search_result",
    "decode_detail_response",
    "decode_line",
]
