"""Prospecting orchestrator that turns a search request into sorted leads."""
from __future__ import annotations

import logging
from typing import List, Optional

from ..collaborators.base import SearchCollaborator
from ..extraction import extract_json_array
from ..models import LeadCollection, NormalizedLead, SearchRequest
from ..normalize import normalize_candidate
from ..prompts import build_search_prompt
from ..sorting import sort_leads
from ..templates import DEFAULT_SITE_BASE_URL

LOGGER = logging.getLogger(__name__)

USER_ERROR_MESSAGE = (
    "No se pudieron obtener los resultados. Es posible que no se hayan encontrado establecimientos "
    "que cumplan los criterios. Intenta de nuevo."
)


class SearchFailed(RuntimeError):
    """Raised when a search cannot produce a lead collection."""

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        user_message: str = USER_ERROR_MESSAGE,
    ) -> None:
        super().__init__(message)
        self.cause = cause
        self.user_message = user_message


class ProspectingOrchestrator:
    """Builds the prompt, calls the collaborator once, and post-processes the answer."""

    def __init__(
        self,
        collaborator: SearchCollaborator,
        *,
        use_maps: bool = True,
        site_base_url: str = DEFAULT_SITE_BASE_URL,
        sort_key: str = "stars",
    ) -> None:
        self._collaborator = collaborator
        self._use_maps = use_maps
        self._site_base_url = site_base_url
        self._sort_key = sort_key

    @property
    def collaborator(self) -> SearchCollaborator:
        return self._collaborator

    def run_search(self, query: str, city: str, limit: int) -> LeadCollection:
        """Search for up to ``limit`` businesses of type ``query`` in ``city``."""

        return self.run(SearchRequest(query=query, city=city, limit=limit))

    def run(self, request: SearchRequest) -> LeadCollection:
        """Execute the whole pipeline for ``request``.

        Either every step succeeds and the full collection is returned, or
        :class:`SearchFailed` is raised and nothing is returned.
        """

        try:
            request.validate()
            prompt = build_search_prompt(request)
            LOGGER.info(
                "Searching for %s '%s' in %s via %s",
                request.limit,
                request.query,
                request.city,
                getattr(self._collaborator, "name", self._collaborator.__class__.__name__),
            )
            response_text = self._collaborator.search(prompt, use_maps=self._use_maps)
            leads = self.process_response(response_text)
        except Exception as exc:
            LOGGER.exception("Search for '%s' in %s failed", request.query, request.city)
            raise SearchFailed(f"Search failed: {exc}", cause=exc) from exc

        LOGGER.info("Search produced %s leads", len(leads))
        return leads

    def process_response(self, text: str) -> LeadCollection:
        """Extract, normalise, and sort the leads contained in ``text``."""

        candidates = extract_json_array(text)
        LOGGER.debug("Extracted %s candidates from response", len(candidates))
        leads: List[NormalizedLead] = [
            normalize_candidate(candidate, site_base_url=self._site_base_url) for candidate in candidates
        ]
        return sort_leads(leads, key=self._sort_key)
