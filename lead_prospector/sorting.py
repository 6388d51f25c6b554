"""Ordering helpers for lead collections."""
from __future__ import annotations

from dataclasses import fields
from typing import Iterable, List

from .models import NormalizedLead

_SORTABLE_FIELDS = {item.name for item in fields(NormalizedLead)} - {"extra"}


def sort_leads(leads: Iterable[NormalizedLead], key: str = "stars", *, reverse: bool = False) -> List[NormalizedLead]:
    """Return a new list of ``leads`` ordered by ``key``.

    The sort is stable, so leads with equal keys keep their extraction order.
    Missing optional values sort as empty strings.
    """

    if key not in _SORTABLE_FIELDS:
        raise ValueError(f"Cannot sort leads by '{key}'. Choose one of: {sorted(_SORTABLE_FIELDS)}")

    def sort_value(lead: NormalizedLead):
        value = getattr(lead, key)
        return "" if value is None else value

    return sorted(leads, key=sort_value, reverse=reverse)
