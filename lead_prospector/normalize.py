"""Mapping of untrusted search candidates onto :class:`NormalizedLead`."""
from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from .models import NormalizedLead
from .slug import slugify
from .templates import DEFAULT_SITE_BASE_URL, build_outreach

DEFAULT_NAME = "el establecimiento"
EMAIL_NOT_AVAILABLE = "No disponible"
MAX_STARS = 5

_KNOWN_KEYS = {"nombre", "direccion", "telefono", "enlaceMaps", "email", "estrellas"}


def _clean_value(value: Any) -> Optional[str]:
    if not value:
        return None
    text = str(value).strip()
    return text or None


def normalise_stars(value: Any) -> int:
    """Coerce a star rating into an integer between 0 and 5."""

    if not value or isinstance(value, bool):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(number):
        return 0
    # Halves round up.
    return math.floor(max(0.0, min(float(MAX_STARS), number)) + 0.5)


def normalize_candidate(
    candidate: Mapping[str, Any] | Any,
    *,
    site_base_url: str = DEFAULT_SITE_BASE_URL,
) -> NormalizedLead:
    """Return a complete lead for ``candidate``, filling defaults and outreach text."""

    if not isinstance(candidate, Mapping):
        candidate = {}

    name = _clean_value(candidate.get("nombre")) or DEFAULT_NAME
    slug = slugify(name)
    outreach = build_outreach(name, slug, site_base_url=site_base_url)

    return NormalizedLead(
        name=name,
        address=_clean_value(candidate.get("direccion")),
        phone=_clean_value(candidate.get("telefono")),
        maps_link=_clean_value(candidate.get("enlaceMaps")),
        email=_clean_value(candidate.get("email")) or EMAIL_NOT_AVAILABLE,
        stars=normalise_stars(candidate.get("estrellas")),
        slug=slug,
        email_subject=outreach.email_subject,
        email_body=outreach.email_body,
        chat_message=outreach.chat_message,
        extra={key: value for key, value in candidate.items() if key not in _KNOWN_KEYS},
    )
