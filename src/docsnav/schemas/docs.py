"""Docs config models."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from docsnav.schemas.headers import Header, NavNode


class Section(BaseModel):
    """One documentation file with its headers and navigation tree.

    Attributes:
        id: Identifier derived from the filename.
        title: Display title derived from the filename.
        filename: Source file name inside the docs directory.
        order: Sort key, taken from the numeric filename prefix.
        headers: Headers in document order.
        navigation: Nested navigation forest built from ``headers``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    filename: str
    order: int
    headers: list[Header] = Field(default_factory=list)
    navigation: list[NavNode] = Field(default_factory=list)


class DocsStructure(BaseModel):
    """The full docs config: a timestamp plus sections sorted by order."""

    model_config = ConfigDict(frozen=True)

    generated: datetime
    sections: list[Section] = Field(default_factory=list)

    @field_serializer("generated")
    def _serialize_generated(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        stamp = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
        return stamp.replace("+00:00", "Z")
