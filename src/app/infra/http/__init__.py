"""Transporte HTTP da agenda."""

from app.infra.http.agenda_api_client import AgendaApiClient, HttpClientConfig

__all__ = ["AgendaApiClient", "HttpClientConfig"]
