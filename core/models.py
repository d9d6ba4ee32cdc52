# =============================================================================
# core/models.py  —  Data Models (the records the Dragon Ball API returns)
# =============================================================================
#
# These dataclasses describe the *shape* of every record the upstream API
# sends back.  They are used to derive the tools' output schemas, so an MCP
# client knows what the structured content will look like.
#
# IMPORTANT:
#   The tools never rebuild a response from these classes.  The upstream JSON
#   body is passed through to the client exactly as received.  Field names
#   therefore follow the API's camelCase spelling, not Python's snake_case.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import TypeAdapter


# -----------------------------------------------------------------------------
# Planet — a character's home world
# -----------------------------------------------------------------------------
@dataclass
class Planet:
    """A planet record, as embedded in a character detail."""

    id: int
    name: str
    isDestroyed: bool
    description: str
    image: str                         # Absolute image URL
    deletedAt: None = None             # Always null upstream


# -----------------------------------------------------------------------------
# Transformation — one of a character's forms (Kaioken, Super Saiyan, ...)
# -----------------------------------------------------------------------------
@dataclass
class Transformation:
    """A transformation record."""

    id: int
    name: str
    image: str
    ki: str                            # Power level as display text, e.g. "3 Billion"
    deletedAt: None = None


# -----------------------------------------------------------------------------
# Character — the listing variant (no nested planet or transformations)
# -----------------------------------------------------------------------------
@dataclass
class Character:
    """A character as it appears in the paginated listing."""

    id: int
    name: str
    ki: str
    maxKi: str
    race: str
    gender: str
    description: str
    image: str
    affiliation: str
    deletedAt: None = None


@dataclass
class CharacterDetail(Character):
    """A character with its origin planet and transformations.

    Both nested fields are optional: the upstream omits them for some
    characters, and the text summary falls back to "Unknown" and 0.
    """

    originPlanet: Optional[Planet] = None
    transformations: list[Transformation] = field(default_factory=list)


# -----------------------------------------------------------------------------
# Paginated listing envelope
# -----------------------------------------------------------------------------
@dataclass
class PageMeta:
    """Pagination counters for one page of results."""

    totalItems: int
    itemCount: int
    itemsPerPage: int
    totalPages: int
    currentPage: int


@dataclass
class PageLinks:
    """Navigation URLs.  Empty string when a link does not apply."""

    first: str
    previous: str
    next: str
    last: str


@dataclass
class CharacterPage:
    """One page of the character listing."""

    items: list[Character]
    meta: PageMeta
    links: PageLinks


def json_schema(model: type) -> dict[str, Any]:
    """Return the JSON Schema of a model, for use as a tool output schema."""
    return TypeAdapter(model).json_schema()
