from __future__ import annotations

import pytest

from lead_prospector.models import NormalizedLead
from lead_prospector.normalize import normalize_candidate

SAMPLE_RESPONSE = (
    'Aquí están: [{"nombre":"Bar Pepe","estrellas":3},{"nombre":"Café Luz"}]'
)


class RecordingCollaborator:
    """Collaborator double that records prompts and returns canned text."""

    name = "recording"

    def __init__(self, text: str = SAMPLE_RESPONSE, error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[tuple[str, bool]] = []

    def search(self, prompt: str, *, use_maps: bool = True) -> str:
        self.calls.append((prompt, use_maps))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def sample_leads() -> list[NormalizedLead]:
    return [
        normalize_candidate(
            {
                "nombre": 'Bar "El Quijote", Tapas',
                "direccion": "Calle Larios 1, Málaga",
                "telefono": "+34 952 000 000",
                "enlaceMaps": "https://maps.google.com/?cid=1",
                "estrellas": 4,
            }
        ),
        normalize_candidate({"nombre": "Café Luz"}),
    ]


@pytest.fixture
def sample_response() -> str:
    return SAMPLE_RESPONSE


@pytest.fixture
def make_collaborator():
    return RecordingCollaborator
