"""Busca simples de pacientes para vincular ao agendamento."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.constants.agenda import AgendaAction
from app.domain.appointment import PatientSummary
from app.domain.errors import AgendaRequestError
from app.domain.messages import UserMessage

if TYPE_CHECKING:
    from app.protocols.agenda_request import AgendaRequestProtocol

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 30
DEFAULT_MIN_CHARS = 2


@dataclass(frozen=True, slots=True)
class PatientSearchResult:
    """Pacientes encontrados e, quando houver, a mensagem a exibir."""

    patients: tuple[PatientSummary, ...] = ()
    message: UserMessage | None = None

    @property
    def found(self) -> bool:
        return bool(self.patients)


class PatientSearch:
    """Executa `Pacientes_BuscarSimples {termo, limite}`."""

    def __init__(
        self,
        request: AgendaRequestProtocol,
        *,
        limit: int = DEFAULT_SEARCH_LIMIT,
        min_chars: int = DEFAULT_MIN_CHARS,
    ) -> None:
        self._request = request
        self._limit = limit
        self._min_chars = min_chars

    async def search_patients(self, term: str) -> PatientSearchResult:
        """Busca por nome, documento ou telefone.

        Termos curtos demais não geram requisição.
        """
        cleaned = (term or "").strip()
        if len(cleaned) < self._min_chars:
            return PatientSearchResult(
                message=UserMessage.info(
                    f"Digite pelo menos {self._min_chars} caracteres para buscar."
                )
            )

        try:
            data = await self._request.request(
                AgendaAction.PACIENTES_BUSCAR_SIMPLES,
                {"termo": cleaned, "limite": self._limit},
            )
        except AgendaRequestError as exc:
            logger.info(
                "patient_search_failed",
                extra={"component": "patient_search", "result": exc.kind},
            )
            return PatientSearchResult(
                message=UserMessage.error(f"Erro ao buscar pacientes: {exc.message}")
            )

        raw = data.get("pacientes") if isinstance(data, dict) else None
        patients = tuple(PatientSummary.model_validate(item) for item in raw or [])
        if not patients:
            return PatientSearchResult(
                message=UserMessage.info("Nenhum paciente encontrado para este termo.")
            )
        return PatientSearchResult(patients=patients)


__all__ = [
    "DEFAULT_MIN_CHARS",
    "DEFAULT_SEARCH_LIMIT",
    "PatientSearch",
    "PatientSearchResult",
]
