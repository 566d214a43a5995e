"""Normaliza os formatos de `data` devolvidos por cada ação.

O backend devolve algumas respostas com formatos diferentes (lista
plana de agendamentos em vez de `horarios`, `config` aninhado, `data`
nulo). Aqui tudo vira um único formato canônico antes de chegar aos
serviços da agenda.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from app.constants.agenda import AgendaAction

_CONFIG_KEYS = ("hora_inicio_padrao", "hora_fim_padrao", "duracao_grade_minutos")


def normalize_config_response(data: Any) -> dict[str, Any]:
    """Canônico: `{hora_inicio_padrao?, hora_fim_padrao?, duracao_grade_minutos?}`."""
    if not isinstance(data, dict):
        return {}
    source = data.get("config") if isinstance(data.get("config"), dict) else data
    return {key: source[key] for key in _CONFIG_KEYS if key in source}


def normalize_day_response(data: Any) -> dict[str, Any]:
    """Canônico: `{resumo: dict | None, horarios: [{hora, agendamentos}]}`."""
    if isinstance(data, list):
        return {"resumo": None, "horarios": _slots_from_flat(data)}
    if not isinstance(data, dict):
        return {"resumo": None, "horarios": []}
    resumo = data.get("resumo")
    return {
        "resumo": resumo if isinstance(resumo, dict) else None,
        "horarios": _extract_slots(data),
    }


def normalize_week_response(data: Any) -> dict[str, Any]:
    """Canônico: `{dias: [{data, horarios: [{hora, agendamentos}]}]}`."""
    if isinstance(data, dict):
        raw_days = data.get("dias")
    elif isinstance(data, list):
        raw_days = data
    else:
        raw_days = None
    if not isinstance(raw_days, list):
        return {"dias": []}

    days: list[dict[str, Any]] = []
    for raw_day in raw_days:
        if not isinstance(raw_day, dict) or not raw_day.get("data"):
            continue
        day_date = raw_day["data"]
        slots = [
            {
                "hora": slot["hora"],
                "agendamentos": [
                    item if item.get("data") else {**item, "data": day_date}
                    for item in slot["agendamentos"]
                ],
            }
            for slot in _extract_slots(raw_day)
        ]
        days.append({"data": day_date, "horarios": slots})
    return {"dias": days}


def normalize_patients_response(data: Any) -> dict[str, Any]:
    """Canônico: `{pacientes: [dict]}`."""
    if isinstance(data, dict):
        raw = data.get("pacientes")
    elif isinstance(data, list):
        raw = data
    else:
        raw = None
    if not isinstance(raw, list):
        return {"pacientes": []}
    return {"pacientes": [item for item in raw if isinstance(item, dict)]}


RESPONSE_NORMALIZERS: dict[str, Callable[[Any], Any]] = {
    AgendaAction.CONFIG_OBTER: normalize_config_response,
    AgendaAction.LISTAR_DIA: normalize_day_response,
    AgendaAction.LISTAR_SEMANA: normalize_week_response,
    AgendaAction.PACIENTES_BUSCAR_SIMPLES: normalize_patients_response,
}


def normalize_response(action: str, data: Any) -> Any:
    """Aplica o normalizador da ação; ações de escrita passam intactas."""
    normalizer = RESPONSE_NORMALIZERS.get(action)
    return normalizer(data) if normalizer else data


def _extract_slots(container: dict[str, Any]) -> list[dict[str, Any]]:
    raw_slots = container.get("horarios")
    if isinstance(raw_slots, list):
        return [
            slot
            for raw_slot in raw_slots
            if (slot := _normalize_slot(raw_slot)) is not None
        ]
    flat = container.get("agendamentos")
    if isinstance(flat, list):
        return _slots_from_flat(flat)
    return []


def _normalize_slot(raw_slot: Any) -> dict[str, Any] | None:
    if not isinstance(raw_slot, dict):
        return None
    hour = raw_slot.get("hora")
    items = raw_slot.get("agendamentos")
    if not isinstance(items, list):
        items = []
    # Agendamento sem hora_inicio herda a hora do slot que o contém
    return {
        "hora": hour,
        "agendamentos": [
            item if item.get("hora_inicio") or not hour else {**item, "hora_inicio": hour}
            for item in items
            if isinstance(item, dict)
        ],
    }


def _slots_from_flat(items: list[Any]) -> list[dict[str, Any]]:
    slots: dict[Any, list[dict[str, Any]]] = {}
    for item in items:
        if isinstance(item, dict):
            slots.setdefault(item.get("hora_inicio"), []).append(item)
    return [{"hora": hour, "agendamentos": group} for hour, group in slots.items()]
