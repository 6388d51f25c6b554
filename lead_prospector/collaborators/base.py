"""Interface shared by search collaborators."""
from __future__ import annotations

from typing import Protocol


class SearchCollaborator(Protocol):
    """Protocol defining the interface that search back-ends must follow."""

    name: str

    def search(self, prompt: str, *, use_maps: bool = True) -> str:  # pragma: no cover - runtime protocol
        """Return the raw text produced for ``prompt``."""
