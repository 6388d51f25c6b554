"""Google Gemini search collaborator with Google Maps grounding.

Prerequisites
-------------
* Requires the :mod:`google.genai` SDK (``pip install google-genai``).
* An API key must be supplied explicitly or through one of the
  ``GEMINI_API_KEY``, ``GOOGLE_API_KEY`` or ``API_KEY`` environment variables.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Optional

from google import genai
from google.genai import types

from ..config import ConfigurationError

LOGGER = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY")


def _api_key_from_env() -> Optional[str]:
    for variable in API_KEY_ENV_VARS:
        value = os.environ.get(variable)
        if value:
            return value
    return None


class GeminiMapsSearch:
    """Runs prospecting prompts through Gemini.

    Parameters
    ----------
    api_key:
        Gemini API key.  Falls back to the environment when omitted.
    model:
        Model name passed to ``generate_content``.
    client:
        Pre-built :class:`google.genai.Client`.  Construct one per process and
        share it between searches.
    """

    name = "gemini"

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        model: str = DEFAULT_MODEL,
        client: Optional[Any] = None,
    ) -> None:
        if client is None:
            resolved_key = api_key or _api_key_from_env()
            if not resolved_key:
                raise ConfigurationError(
                    f"A Gemini API key is required. Set one of {', '.join(API_KEY_ENV_VARS)} or pass api_key."
                )
            client = genai.Client(api_key=resolved_key)
        self._client = client
        self.model = model

    def _build_config(self, use_maps: bool) -> Optional[types.GenerateContentConfig]:
        if not use_maps:
            return None
        return types.GenerateContentConfig(tools=[types.Tool(google_maps=types.GoogleMaps())])

    def search(self, prompt: str, *, use_maps: bool = True) -> str:
        LOGGER.debug("Sending prompt to %s (maps=%s)", self.model, use_maps)
        response = self._client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=self._build_config(use_maps),
        )
        text = getattr(response, "text", None) or ""
        if not text:
            LOGGER.warning("%s returned an empty response", self.model)
        return text
