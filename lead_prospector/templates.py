"""Spanish outreach templates generated for every lead."""
from __future__ import annotations

from dataclasses import dataclass
from textwrap import dedent

DEFAULT_SITE_BASE_URL = "https://tuguiamalaga.com"

EMAIL_SUBJECT = "Colaboración: Tu cafetería en la nueva GuíaDigital de Málaga"

EMAIL_BODY = dedent(
    """
    Hola, {name},

    Somos el equipo de GuíaDigital Málaga. Estamos creando una guía exclusiva con las mejores cafeterías de la ciudad y nos encantaría incluir la vuestra.

    Para ayudar a que más gente os descubra, os ofrecemos crear y mantener vuestra página web profesional (1 página, hosting incluido) sin coste alguno. A cambio, solo pedimos aparecer en nuestra guía.

    ¿Qué os parece la idea? Quedamos a la espera de vuestra respuesta.

    Un saludo,
    Equipo GuíaDigital Málaga
    """
).strip()

CHAT_MESSAGE = (
    "¡Hola! 😊 Soy del equipo de GuíaDigital Málaga. {name} nos encanta y queremos destacarlo "
    "en nuestra nueva guía. Para ayudaros a tener más visibilidad online, os regalamos una web "
    "profesional como esta: {url}. ¿Hablamos? ¡Es sin coste!"
)


@dataclass(frozen=True)
class OutreachTemplates:
    """Outreach texts for a single business."""

    email_subject: str
    email_body: str
    chat_message: str


def build_site_url(slug: str, site_base_url: str = DEFAULT_SITE_BASE_URL) -> str:
    return f"{site_base_url.rstrip('/')}/{slug}"


def build_outreach(name: str, slug: str, *, site_base_url: str = DEFAULT_SITE_BASE_URL) -> OutreachTemplates:
    """Render the email subject, email body, and chat message for ``name``."""

    url = build_site_url(slug, site_base_url)
    return OutreachTemplates(
        email_subject=EMAIL_SUBJECT,
        email_body=EMAIL_BODY.format(name=name),
        chat_message=CHAT_MESSAGE.format(name=name, url=url),
    )
