"""Search back-ends that turn a prompt into raw response text."""

from .base import SearchCollaborator  # noqa: F401
from .gemini import GeminiMapsSearch  # noqa: F401
from .sample import CannedResponseSearch  # noqa: F401

__all__ = [
    "SearchCollaborator",
    "GeminiMapsSearch",
    "CannedResponseSearch",
]
