"""Modelos de domínio da agenda: agendamentos, resumo do dia e pacientes.

Os aliases são os nomes de campo do backend; o código usa os nomes
Python. `model_dump(by_alias=True)` devolve o formato de fio.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.agenda_time import normalize_date, normalize_time, time_to_minutes
from fsm.states.status import AppointmentStatus, parse_status

_TRUE_STRINGS = frozenset({"true", "1", "sim", "yes", "s"})


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


class Appointment(BaseModel):
    """Agendamento ou bloqueio de horário de um dia.

    Um registro com `is_block=True` não tem dados de paciente e
    representa um intervalo reservado.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: str = Field(default="", alias="ID_Agenda")
    patient_id: str | None = Field(default=None, alias="ID_Paciente")
    patient_name: str | None = Field(default=None, alias="nome_paciente")
    patient_document: str | None = Field(default=None, alias="documento_paciente")
    patient_phone: str | None = Field(default=None, alias="telefone_paciente")
    date: str | None = Field(default=None, alias="data")
    start_time: str | None = Field(default=None, alias="hora_inicio")
    end_time: str | None = Field(default=None, alias="hora_fim")
    duration_minutes: int | None = Field(default=None, alias="duracao_minutos")
    type: str = Field(default="", alias="tipo")
    reason: str = Field(default="", alias="motivo")
    origin: str = Field(default="", alias="origem")
    channel: str = Field(default="", alias="canal")
    status: str = Field(default="", alias="status")
    is_block: bool = Field(default=False, alias="bloqueio")

    @field_validator("id", "type", "reason", "origin", "channel", "status", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator(
        "patient_id", "patient_name", "patient_document", "patient_phone", mode="before"
    )
    @classmethod
    def _coerce_optional_text(cls, value: Any) -> str | None:
        return _as_text(value) or None

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _normalize_time(cls, value: Any) -> str | None:
        return normalize_time(value)

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: Any) -> str | None:
        return normalize_date(value)

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def _coerce_duration(cls, value: Any) -> int | None:
        if value is None or value == "":
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    @field_validator("is_block", mode="before")
    @classmethod
    def _coerce_block(cls, value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in _TRUE_STRINGS
        return bool(value)

    @property
    def time_key(self) -> int | None:
        """Minutos desde a meia-noite (TimeSlotKey); None sem horário válido."""
        return time_to_minutes(self.start_time)

    @property
    def status_value(self) -> AppointmentStatus | None:
        """Status como enum, quando reconhecido."""
        return parse_status(self.status)

    @property
    def has_patient(self) -> bool:
        return bool(self.patient_id)


class DaySummary(BaseModel):
    """Contadores do dia (`resumo` de `Agenda_ListarDia`)."""

    model_config = ConfigDict(extra="ignore")

    total: int = 0
    confirmados: int = 0
    faltas: int = 0
    cancelados: int = 0
    concluidos: int = 0
    em_atendimento: int = 0

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_count(cls, value: Any) -> int:
        try:
            return max(int(value or 0), 0)
        except (TypeError, ValueError):
            return 0

    @classmethod
    def from_appointments(cls, appointments: Iterable[Appointment]) -> DaySummary:
        """Calcula o resumo localmente (bloqueios não contam)."""
        counters = {
            AppointmentStatus.CONFIRMADO: 0,
            AppointmentStatus.FALTOU: 0,
            AppointmentStatus.CANCELADO: 0,
            AppointmentStatus.CONCLUIDO: 0,
            AppointmentStatus.EM_ATENDIMENTO: 0,
        }
        total = 0
        for appointment in appointments:
            if appointment.is_block:
                continue
            total += 1
            status = appointment.status_value
            if status in counters:
                counters[status] += 1
        return cls(
            total=total,
            confirmados=counters[AppointmentStatus.CONFIRMADO],
            faltas=counters[AppointmentStatus.FALTOU],
            cancelados=counters[AppointmentStatus.CANCELADO],
            concluidos=counters[AppointmentStatus.CONCLUIDO],
            em_atendimento=counters[AppointmentStatus.EM_ATENDIMENTO],
        )


class PatientSummary(BaseModel):
    """Paciente devolvido pela busca simples."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    patient_id: str = Field(default="", alias="ID_Paciente")
    name: str = Field(default="", alias="nome")
    document: str = Field(default="", alias="documento")
    phone: str = Field(default="", alias="telefone")
    birth_date: str = Field(default="", alias="data_nascimento")

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)

    @property
    def details_line(self) -> str:
        """Linha secundária exibida na lista de resultados."""
        parts = [self.document, self.phone]
        if self.birth_date:
            parts.append(f"Nasc.: {self.birth_date}")
        return " • ".join(part for part in parts if part)


__all__ = ["Appointment", "DaySummary", "PatientSummary"]
