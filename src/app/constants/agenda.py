"""Ações do backend e códigos de conflito consumidos pela agenda."""

from __future__ import annotations

from enum import StrEnum


class AgendaAction(StrEnum):
    """Nomes de ação aceitos pelo endpoint único `{action, payload}`."""

    CONFIG_OBTER = "AgendaConfig_Obter"
    LISTAR_DIA = "Agenda_ListarDia"
    LISTAR_SEMANA = "Agenda_ListarSemana"
    MUDAR_STATUS = "Agenda_MudarStatus"
    REMOVER_BLOQUEIO = "Agenda_RemoverBloqueio"
    CRIAR = "Agenda_Criar"
    ATUALIZAR = "Agenda_Atualizar"
    BLOQUEAR_HORARIO = "Agenda_BloquearHorario"
    PACIENTES_BUSCAR_SIMPLES = "Pacientes_BuscarSimples"


class ConflictCode(StrEnum):
    """Códigos de erro de conflito devolvidos em Agenda_Criar/Atualizar."""

    BLOQUEIO = "AGENDA_CONFLITO_BLOQUEIO"
    CONSULTA = "AGENDA_CONFLITO_CONSULTA"


__all__ = ["AgendaAction", "ConflictCode"]
