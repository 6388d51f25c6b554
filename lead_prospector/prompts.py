"""Prompt text sent to the search collaborator."""
from __future__ import annotations

from .models import SearchRequest


def build_search_prompt(request: SearchRequest) -> str:
    """Return the prospecting instructions for ``request``."""

    return (
        "Actúa como un agente de prospección local experto. "
        f"Busca en Google Maps hasta {request.limit} establecimientos del tipo \"{request.query}\" "
        f"en la ciudad de {request.city}, España, que explícitamente NO tengan un sitio web listado "
        "en su perfil de Google. Para cada establecimiento encontrado, extrae su nombre, dirección "
        "completa, número de teléfono (con prefijo +34 si es posible), el enlace directo de Google Maps "
        "y su calificación en estrellas (un número de 1 a 5). Devuelve los resultados únicamente como "
        "un array JSON válido. Cada objeto del array debe tener las siguientes claves: \"nombre\", "
        "\"direccion\", \"telefono\", \"enlaceMaps\", \"email\" (si está disponible) y \"estrellas\". "
        "No incluyas texto explicativo, solo el JSON."
    )
