"""Tradução de erros do backend em mensagens para o usuário.

Conflitos de agenda (bloqueio ou consulta existente) viram frases
específicas; qualquer outro erro usa a mensagem do próprio erro.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from app.constants.agenda import ConflictCode
from app.domain.errors import DEFAULT_APPLICATION_MESSAGE
from app.domain.messages import UserMessage

ConflictOperation = Literal["agendar", "reagendar"]


def classify(
    error: BaseException | Mapping[str, Any] | None,
    *,
    operation: ConflictOperation = "agendar",
    fallback_prefix: str = "",
) -> UserMessage:
    """Classifica um erro de requisição.

    Args:
        error: Exceção com `message/code/details` ou um dict equivalente
        operation: Verbo usado na frase ("agendar" na criação e na troca
            de status, "reagendar" na edição)
        fallback_prefix: Prefixo aplicado só a erros que não são conflito
            (ex: "Erro ao salvar agendamento: ")

    Returns:
        UserMessage de nível "erro" com o código original do erro.
    """
    code, message, details = _error_fields(error)
    start = _detail_text(details, "hora_inicio")
    end = _detail_text(details, "hora_fim")

    if code == ConflictCode.BLOQUEIO:
        if start and end:
            text = f"Não é possível {operation}: horário está bloqueado das {start} às {end}."
        else:
            text = f"Não é possível {operation}: horário está bloqueado nesse intervalo."
        return UserMessage.error(text, code=code)

    if code == ConflictCode.CONSULTA:
        if start and end:
            patient = _detail_text(details, "nome_paciente")
            suffix = f" ({patient})." if patient else "."
            text = f"Não é possível {operation}: já existe consulta das {start} às {end}{suffix}"
        else:
            text = f"Não é possível {operation}: já existe consulta neste horário."
        return UserMessage.error(text, code=code)

    return UserMessage.error(
        f"{fallback_prefix}{message or DEFAULT_APPLICATION_MESSAGE}",
        code=code,
    )


def _error_fields(error: Any) -> tuple[str | None, str, Mapping[str, Any]]:
    if isinstance(error, Mapping):
        code = error.get("code")
        message = error.get("message")
        details = error.get("details")
    else:
        code = getattr(error, "code", None)
        message = getattr(error, "message", None)
        if message is None and isinstance(error, BaseException):
            message = str(error)
        details = getattr(error, "details", None)
    return (
        str(code) if code else None,
        str(message).strip() if message else "",
        details if isinstance(details, Mapping) else {},
    )


def _detail_text(details: Mapping[str, Any], key: str) -> str:
    value = details.get(key)
    return str(value).strip() if value else ""


__all__ = ["ConflictOperation", "classify"]
