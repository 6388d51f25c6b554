"""Factory helpers for constructing the search collaborator from configuration."""
from __future__ import annotations

import importlib

from .collaborators.base import SearchCollaborator
from .config import ConfigurationError, ProspectorSettings


def _load_class(path: str):
    module_name, _, attr = path.rpartition(".")
    if not module_name:
        raise ConfigurationError(f"Invalid collaborator class path '{path}'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"Could not import collaborator module '{module_name}': {exc}") from exc
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise ConfigurationError(f"Module '{module_name}' does not define '{attr}'") from exc


def build_collaborator(settings: ProspectorSettings) -> SearchCollaborator:
    """Instantiate the collaborator class named in ``settings``."""

    collaborator_cls = _load_class(settings.collaborator_class)
    try:
        return collaborator_cls(**settings.collaborator_options)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid options for '{settings.collaborator_class}': {exc}") from exc
