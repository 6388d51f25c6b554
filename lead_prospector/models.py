"""Data models shared by the prospecting pipeline, exporters, and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TypedDict


DEFAULT_QUERY = "cafeterías"
DEFAULT_CITY = "Málaga"
DEFAULT_LIMIT = 10
MIN_LIMIT = 1
MAX_LIMIT = 50

CSV_HEADERS = (
    "Name",
    "Address",
    "Phone",
    "Email",
    "Maps Link",
    "Stars",
    "Email Subject",
    "Email Body",
    "Chat Message",
)


# --- Request Models ---

@dataclass(slots=True)
class SearchRequest:
    """Parameters for a single prospecting search."""

    query: str = DEFAULT_QUERY
    city: str = DEFAULT_CITY
    limit: int = DEFAULT_LIMIT

    def validate(self) -> "SearchRequest":
        """Return ``self`` or raise :class:`ValueError` if a parameter is unusable."""

        if not self.query or not self.query.strip():
            raise ValueError("A business type to search for is required.")
        if not self.city or not self.city.strip():
            raise ValueError("A city to search in is required.")
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise ValueError(f"limit must be a whole number, got {self.limit!r}")
        if not MIN_LIMIT <= self.limit <= MAX_LIMIT:
            raise ValueError(f"limit must be between {MIN_LIMIT} and {MAX_LIMIT}, got {self.limit}")
        return self


# --- Boundary Models ---

class RawLeadCandidate(TypedDict, total=False):
    """Untrusted record as returned by the search collaborator."""

    nombre: Any
    direccion: Any
    telefono: Any
    enlaceMaps: Any
    email: Any
    estrellas: Any


# --- Canonical Lead ---

@dataclass(slots=True)
class NormalizedLead:
    """A fully populated lead enriched with outreach text."""

    name: str
    email: str
    stars: int
    slug: str
    email_subject: str
    email_body: str
    chat_message: str
    address: Optional[str] = None
    phone: Optional[str] = None
    maps_link: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def star_rating(self) -> str:
        """Return the rating as filled and empty stars, e.g. ``★★★☆☆``."""

        return "★" * self.stars + "☆" * (5 - self.stars)

    def as_row(self) -> Dict[str, Any]:
        """Return the export columns in order, keyed by header."""

        values = (
            self.name,
            self.address,
            self.phone,
            self.email,
            self.maps_link,
            self.stars,
            self.email_subject,
            self.email_body,
            self.chat_message,
        )
        return dict(zip(CSV_HEADERS, values))


LeadCollection = List[NormalizedLead]
