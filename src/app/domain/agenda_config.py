"""Parâmetros de grade da agenda (início, fim e granularidade)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.agenda_time import minutes_to_label, normalize_time, time_to_minutes

DEFAULT_START_TIME = "08:00"
DEFAULT_END_TIME = "18:00"
DEFAULT_SLOT_GRANULARITY_MINUTES = 15

# Fim efetivo quando o fim configurado não é posterior ao início
FALLBACK_SPAN_MINUTES = 60


class AgendaConfig(BaseModel):
    """Configuração da grade de horários da clínica.

    Os aliases são os nomes de campo devolvidos por `AgendaConfig_Obter`.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    start_time: str = Field(
        default=DEFAULT_START_TIME,
        alias="hora_inicio_padrao",
        description="Início do expediente (HH:MM).",
    )
    end_time: str = Field(
        default=DEFAULT_END_TIME,
        alias="hora_fim_padrao",
        description="Fim do expediente (HH:MM).",
    )
    slot_granularity_minutes: int = Field(
        default=DEFAULT_SLOT_GRANULARITY_MINUTES,
        gt=0,
        alias="duracao_grade_minutos",
        description="Passo da grade em minutos.",
    )

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def _normalize_time(cls, value: object) -> str:
        normalized = normalize_time(value)
        if normalized is None:
            raise ValueError(f"horário inválido: {value!r}")
        return normalized

    @property
    def start_minutes(self) -> int:
        return time_to_minutes(self.start_time) or 0

    @property
    def effective_end_minutes(self) -> int:
        """Fim em minutos, aplicando início + 60 quando fim <= início."""
        end = time_to_minutes(self.end_time) or 0
        if end <= self.start_minutes:
            return self.start_minutes + FALLBACK_SPAN_MINUTES
        return end

    @property
    def effective_end_time(self) -> str:
        return minutes_to_label(self.effective_end_minutes)


__all__ = [
    "DEFAULT_END_TIME",
    "DEFAULT_SLOT_GRANULARITY_MINUTES",
    "DEFAULT_START_TIME",
    "AgendaConfig",
]
