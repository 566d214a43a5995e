"""
Status canônicos de um agendamento.

Os valores são exatamente as strings trocadas com o backend
(campo `status` / `novo_status`).
"""

from __future__ import annotations

import unicodedata
from enum import StrEnum


class AppointmentStatus(StrEnum):
    """
    Status possíveis de um agendamento.

    Status em andamento:
        - AGENDADO: Criado, aguardando confirmação
        - CONFIRMADO: Paciente confirmou presença
        - EM_ATENDIMENTO: Paciente sendo atendido

    Status terminais (encerram o ciclo da consulta):
        - FALTOU: Paciente não compareceu
        - CANCELADO: Consulta cancelada
        - CONCLUIDO: Atendimento finalizado
    """

    AGENDADO = "Agendado"
    CONFIRMADO = "Confirmado"
    EM_ATENDIMENTO = "Em atendimento"

    FALTOU = "Faltou"
    CANCELADO = "Cancelado"
    CONCLUIDO = "Concluído"

    def __str__(self) -> str:
        return self.value


TERMINAL_STATUSES: frozenset[AppointmentStatus] = frozenset({
    AppointmentStatus.FALTOU,
    AppointmentStatus.CANCELADO,
    AppointmentStatus.CONCLUIDO,
})

# Status assumido quando o backend não informa nenhum
DEFAULT_STATUS: AppointmentStatus = AppointmentStatus.AGENDADO


def _fold(value: str) -> str:
    """Remove acentos e normaliza caixa/espaços para comparação."""
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return " ".join(stripped.lower().split())


_BY_FOLDED: dict[str, AppointmentStatus] = {_fold(s.value): s for s in AppointmentStatus}


def parse_status(value: object) -> AppointmentStatus | None:
    """
    Converte texto livre em AppointmentStatus.

    Aceita variações de caixa, acento e espaços ("concluido",
    "EM  ATENDIMENTO"). Retorna None se não reconhecer.
    """
    if isinstance(value, AppointmentStatus):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    return _BY_FOLDED.get(_fold(value))


def is_terminal(status: AppointmentStatus) -> bool:
    """Verifica se o status encerra o ciclo da consulta."""
    return status in TERMINAL_STATUSES


def is_valid_status(status: object) -> bool:
    """Verifica se o valor é reconhecido como status de agendamento."""
    return parse_status(status) is not None
