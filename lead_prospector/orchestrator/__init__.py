"""Search orchestration and the single-flight session built on top of it."""

from .service import ProspectingOrchestrator, SearchFailed
from .session import SearchInProgress, SearchSession

__all__ = ["ProspectingOrchestrator", "SearchFailed", "SearchInProgress", "SearchSession"]
