"""Pydantic models for the Funda mobile API wire format.

The mobile API answers with loosely typed JSON: missing keys, explicit
``null`` values and keys the client does not know about are all common.
These models accept that and normalize it, while still rejecting values of
the wrong type so that a truly malformed element surfaces as an error.

Nested ``List`` members are kept as raw JSON values and decoded one level at
a time by the detail flattener, so these models never recurse on their own.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WireModel(BaseModel):
    """Base for all API models: ignore unknown keys, allow field names."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def null_to_default(cls, v: Any, info) -> Any:
        """Treat JSON ``null`` as an absent value."""
        if v is None:
            field = cls.model_fields[info.field_name]
            return field.get_default(call_default_factory=True)
        return v


class DetailLine(WireModel):
    """A labeled key/value line, possibly holding nested lines.

    Example:
        {"Label": "Vraagprijs", "Value": "€ 400.000 k.k.", "List": []}
    """

    label: str = Field("", alias="Label")
    value: str = Field("", alias="Value")
    text: str = Field("", alias="Text")
    children: List[Any] = Field(default_factory=list, alias="List")


class DetailNode(WireModel):
    """Top-level section of a detail response."""

    url: str = Field("", alias="URL")
    section: int = Field(0, alias="Section")
    children: List[Any] = Field(default_factory=list, alias="List")


class Photo(WireModel):
    link: str = Field("", alias="Link")


class InfoBlock(WireModel):
    lines: List[DetailLine] = Field(default_factory=list, alias="Line")


class SearchEntry(WireModel):
    """One item of a search result page.

    ``item_type`` is 1 for an actual listing; anything else is a
    promotional insertion.
    """

    item_type: int = Field(0, alias="ItemType")
    global_id: int = Field(0, alias="GlobalId")
    link: str = Field("", alias="Link")
    photos: List[Photo] = Field(default_factory=list, alias="Fotos")
    info: List[InfoBlock] = Field(default_factory=list, alias="Info")
