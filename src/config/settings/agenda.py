"""Settings de integração da agenda com o backend.

Toda leitura de env referente à agenda fica aqui.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ViewMode = Literal["dia", "semana"]


class AgendaSettings(BaseModel):
    """Configurações usadas pelo núcleo de agendamento."""

    model_config = ConfigDict(extra="ignore")

    api_base_url: str = Field(
        default="",
        description="URL do endpoint único da API (POST {action, payload}).",
    )
    api_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout de cada chamada à API em segundos.",
    )
    lock_terminal_statuses: bool = Field(
        default=False,
        description="Bloqueia mudança de status a partir de Faltou/Cancelado/Concluído.",
    )
    default_view_mode: ViewMode = Field(
        default="dia",
        description="Visão inicial da agenda.",
    )
    patient_search_limit: int = Field(
        default=30,
        ge=1,
        description="Quantidade máxima de pacientes retornados na busca.",
    )
    patient_search_min_chars: int = Field(
        default=2,
        ge=1,
        description="Tamanho mínimo do termo de busca de pacientes.",
    )

    def validate_settings(self) -> list[str]:
        """Retorna erros de configuração (lista vazia se válida)."""
        errors: list[str] = []
        if not self.api_base_url:
            errors.append("PRONTIO_API_BASE_URL não configurado")
        elif not self.api_base_url.startswith(("http://", "https://")):
            errors.append("PRONTIO_API_BASE_URL deve começar com http:// ou https://")
        return errors


def _parse_bool(value: str) -> bool:
    """Converte texto de env em bool."""
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_view_mode(value: str) -> ViewMode:
    return "semana" if value.strip().lower() == "semana" else "dia"


def _load_agenda_from_env() -> AgendaSettings:
    """Carrega AgendaSettings a partir de variáveis de ambiente."""
    return AgendaSettings(
        api_base_url=os.getenv("PRONTIO_API_BASE_URL", "").strip(),
        api_timeout_seconds=float(os.getenv("PRONTIO_API_TIMEOUT_SECONDS", "20")),
        lock_terminal_statuses=_parse_bool(os.getenv("AGENDA_LOCK_TERMINAL_STATUS", "false")),
        default_view_mode=_parse_view_mode(os.getenv("AGENDA_DEFAULT_VIEW", "dia")),
        patient_search_limit=int(os.getenv("AGENDA_PATIENT_SEARCH_LIMIT", "30")),
        patient_search_min_chars=int(os.getenv("AGENDA_PATIENT_SEARCH_MIN_CHARS", "2")),
    )


@lru_cache(maxsize=1)
def get_agenda_settings() -> AgendaSettings:
    """Retorna instância cacheada de AgendaSettings."""
    return _load_agenda_from_env()


__all__ = ["AgendaSettings", "ViewMode", "get_agenda_settings"]
