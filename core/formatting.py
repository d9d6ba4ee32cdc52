# =============================================================================
# core/formatting.py  —  Text Summaries for Tool Responses
# =============================================================================
#
# Each tool answers on two channels:
#   - content:            a short human-readable summary (built here)
#   - structured content: the upstream JSON body, passed through unchanged
#
# These functions only READ the payload.  They never modify it, because the
# same dict is handed to the client as structured content.
# =============================================================================

from typing import Any


def summarize_character_page(data: dict[str, Any], page: int) -> str:
    """One-line summary of a listing page.

    `page` is the page the caller asked for, not meta.currentPage.
    """
    meta = data["meta"]
    return (
        f"Retrieved {meta['itemCount']} characters from page {page}. "
        f"Total: {meta['totalItems']} characters available."
    )


def summarize_character(data: dict[str, Any]) -> str:
    """Multi-line summary of a character detail record.

    A missing origin planet (or one without a name) reads as "Unknown";
    missing transformations count as 0.
    """
    origin_planet = data.get("originPlanet") or {}
    transformations = data.get("transformations") or []

    lines = [
        f"Character: {data.get('name')}",
        f"Race: {data.get('race')}",
        f"Gender: {data.get('gender')}",
        f"Affiliation: {data.get('affiliation')}",
        f"Max Power: {data.get('maxKi')}",
        f"Origin Planet: {origin_planet.get('name') or 'Unknown'}",
        f"Transformations: {len(transformations)} available",
    ]
    return "\n".join(lines)
