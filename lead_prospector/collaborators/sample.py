"""Offline collaborator that replays a stored response."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union


class CannedResponseSearch:
    """Returns the same text for every prompt.

    Useful for replaying a saved model response without network access.
    """

    name = "canned"

    def __init__(self, text: Optional[str] = None, path: Optional[Union[str, Path]] = None) -> None:
        if (text is None) == (path is None):
            raise ValueError("Provide exactly one of 'text' or 'path'.")
        self._text = text
        self._path = Path(path) if path is not None else None
        self.prompts: List[str] = []

    def search(self, prompt: str, *, use_maps: bool = True) -> str:
        self.prompts.append(prompt)
        if self._path is not None:
            return self._path.read_text(encoding="utf-8")
        return self._text or ""
