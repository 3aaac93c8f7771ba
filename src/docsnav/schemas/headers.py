"""Header and navigation tree models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Header(BaseModel):
    """A single Markdown heading occurrence."""

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1)
    title: str
    id: str


class NavNode(BaseModel):
    """A node of the navigation tree built from headers."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    level: int = Field(..., ge=1)
    children: list["NavNode"] = Field(default_factory=list)

    @classmethod
    def from_header(cls, header: Header) -> "NavNode":
        """Create a childless node for ``header``."""
        return cls(id=header.id, title=header.title, level=header.level)
