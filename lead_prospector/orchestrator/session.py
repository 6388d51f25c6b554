"""Single-flight search session holding the current in-memory results."""
from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

from ..exporters import export_leads, leads_to_csv
from ..models import LeadCollection, SearchRequest
from .service import ProspectingOrchestrator, SearchFailed

LOGGER = logging.getLogger(__name__)


class SearchInProgress(RuntimeError):
    """Raised when a search is submitted while another one is still running."""


class SearchSession:
    """Runs searches in the background, one at a time.

    The session owns the collection shown to the user: it is cleared when a
    search starts, replaced when one succeeds, and left empty when one fails.
    """

    def __init__(
        self,
        orchestrator: ProspectingOrchestrator,
        *,
        executor: Optional[ThreadPoolExecutor] = None,
    ) -> None:
        self._orchestrator = orchestrator
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="lead-search")
        self._lock = threading.Lock()
        self._pending: Optional[Future] = None
        self._results: LeadCollection = []
        self._error: Optional[str] = None

    @property
    def is_busy(self) -> bool:
        with self._lock:
            return self._pending is not None and not self._pending.done()

    @property
    def results(self) -> LeadCollection:
        with self._lock:
            return list(self._results)

    @property
    def error(self) -> Optional[str]:
        with self._lock:
            return self._error

    def submit(self, request: Optional[SearchRequest] = None) -> "Future[LeadCollection]":
        """Start a search and return a future resolving to the leads or :class:`SearchFailed`."""

        request = request or SearchRequest()
        with self._lock:
            if self._pending is not None and not self._pending.done():
                raise SearchInProgress("A search is already running")
            self._results = []
            self._error = None
            self._pending = self._executor.submit(self._run, request)
            return self._pending

    def search(self, request: Optional[SearchRequest] = None) -> LeadCollection:
        """Submit a search and block until it finishes."""

        return self.submit(request).result()

    def _run(self, request: SearchRequest) -> LeadCollection:
        try:
            leads = self._orchestrator.run(request)
        except SearchFailed as exc:
            with self._lock:
                self._results = []
                self._error = exc.user_message
            raise
        with self._lock:
            self._results = list(leads)
        return leads

    def to_csv(self) -> Optional[str]:
        return leads_to_csv(self.results)

    def export(self, path: Union[str, Path]) -> Optional[Path]:
        """Write the current results to ``path``; does nothing when there are none."""

        return export_leads(self.results, path)

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> "SearchSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
