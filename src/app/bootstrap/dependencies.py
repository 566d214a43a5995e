"""Factories da agenda — criação das implementações concretas."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.http import AgendaApiClient, HttpClientConfig
from app.sessions import AgendaViewSession
from config.settings import AgendaSettings, get_agenda_settings

if TYPE_CHECKING:
    from app.protocols.agenda_request import AgendaRequestProtocol

logger = logging.getLogger(__name__)


def create_agenda_api_client(settings: AgendaSettings | None = None) -> AgendaApiClient:
    """Cria o cliente HTTP da API a partir das settings.

    Raises:
        ValueError: Se PRONTIO_API_BASE_URL não estiver configurado
    """
    settings = settings if settings is not None else get_agenda_settings()
    if not settings.api_base_url:
        msg = "PRONTIO_API_BASE_URL não configurado"
        raise ValueError(msg)
    client = AgendaApiClient(
        settings.api_base_url,
        config=HttpClientConfig(timeout_seconds=settings.api_timeout_seconds),
    )
    logger.info(
        "agenda_api_client_created",
        extra={"component": "bootstrap", "timeout_seconds": settings.api_timeout_seconds},
    )
    return client


def create_agenda_view_session(
    request: AgendaRequestProtocol | None = None,
    settings: AgendaSettings | None = None,
) -> AgendaViewSession:
    """Monta a sessão da agenda.

    Sem `request` explícito usa o cliente HTTP configurado por env.
    """
    settings = settings if settings is not None else get_agenda_settings()
    return AgendaViewSession(
        request or create_agenda_api_client(settings),
        settings=settings,
    )
