"""Configuration helpers for the prospecting pipeline."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .models import DEFAULT_CITY, DEFAULT_LIMIT, DEFAULT_QUERY, SearchRequest
from .templates import DEFAULT_SITE_BASE_URL

LOGGER = logging.getLogger(__name__)

DEFAULT_COLLABORATOR_CLASS = "lead_prospector.collaborators.gemini.GeminiMapsSearch"


class ConfigurationError(RuntimeError):
    """Raised when configuration files are missing or malformed."""


_SUPPORTED_EXTENSIONS = {".json", ".yaml", ".yml"}


def load_configuration(path: str | Path) -> Dict[str, Any]:
    """Load configuration data from a JSON or YAML file."""

    file_path = Path(path)
    if not file_path.exists():
        raise ConfigurationError(f"Configuration file '{file_path}' was not found")

    if file_path.suffix.lower() not in _SUPPORTED_EXTENSIONS:
        raise ConfigurationError(
            f"Unsupported configuration format '{file_path.suffix}'. Supported extensions: {sorted(_SUPPORTED_EXTENSIONS)}"
        )

    text = file_path.read_text(encoding="utf-8")
    try:
        if file_path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Configuration file '{file_path}' could not be parsed: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file '{file_path}' must contain a mapping at the top level")
    return data


@dataclass
class ProspectorSettings:
    """Resolved settings used to build the collaborator and orchestrator."""

    collaborator_class: str = DEFAULT_COLLABORATOR_CLASS
    collaborator_options: Dict[str, Any] = field(default_factory=dict)
    use_maps: bool = True
    site_base_url: str = DEFAULT_SITE_BASE_URL
    defaults: SearchRequest = field(default_factory=SearchRequest)

    @classmethod
    def from_mapping(cls, config: Optional[Mapping[str, Any]] = None) -> "ProspectorSettings":
        config = dict(config or {})
        collaborator = config.get("collaborator") or {}
        if not isinstance(collaborator, Mapping):
            raise ConfigurationError("'collaborator' must be a mapping with 'class' and 'options'")
        options = collaborator.get("options") or {}
        if not isinstance(options, Mapping):
            raise ConfigurationError("'collaborator.options' must be a mapping")

        defaults = config.get("defaults") or {}
        if not isinstance(defaults, Mapping):
            raise ConfigurationError("'defaults' must be a mapping with query, city and limit")
        try:
            limit = int(defaults.get("limit", DEFAULT_LIMIT))
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid default limit {defaults.get('limit')!r}") from exc

        settings = cls(
            collaborator_class=collaborator.get("class") or DEFAULT_COLLABORATOR_CLASS,
            collaborator_options=dict(options),
            use_maps=bool(config.get("use_maps", True)),
            site_base_url=str(config.get("site_base_url") or DEFAULT_SITE_BASE_URL),
            defaults=SearchRequest(
                query=str(defaults.get("query") or DEFAULT_QUERY),
                city=str(defaults.get("city") or DEFAULT_CITY),
                limit=limit,
            ),
        )
        LOGGER.debug("Resolved settings: collaborator=%s maps=%s", settings.collaborator_class, settings.use_maps)
        return settings
