"""Erros do contrato de requisição da agenda.

Toda falha de `request(action, payload)` chega como AgendaRequestError
com `message`, `code` e `details`, no formato que o ConflictPolicy
consome.
"""

from __future__ import annotations

from typing import Any

DEFAULT_APPLICATION_MESSAGE = "Erro ao processar a requisição no servidor."
NETWORK_ERROR_MESSAGE = "Não foi possível se comunicar com o servidor."
TIMEOUT_MESSAGE = "Tempo de resposta da API excedido. Tente novamente."
INVALID_JSON_MESSAGE = "Resposta inválida do servidor (JSON esperado)."
UNEXPECTED_RESPONSE_MESSAGE = "Resposta inesperada do servidor."


class AgendaRequestError(Exception):
    """Falha de uma chamada ao backend da agenda."""

    kind = "request"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.code, "details": dict(self.details)}


class AgendaTransportError(AgendaRequestError):
    """Falha de rede, timeout ou status HTTP fora de 2xx."""

    kind = "transport"

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AgendaFormatError(AgendaRequestError):
    """Resposta não-JSON ou sem o envelope esperado."""

    kind = "format"


class AgendaApplicationError(AgendaRequestError):
    """Backend respondeu `success: false`."""

    kind = "application"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        errors: list[dict[str, Any]] | None = None,
        data: Any = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
        self.errors = errors or []
        self.data = data


__all__ = [
    "DEFAULT_APPLICATION_MESSAGE",
    "INVALID_JSON_MESSAGE",
    "NETWORK_ERROR_MESSAGE",
    "TIMEOUT_MESSAGE",
    "UNEXPECTED_RESPONSE_MESSAGE",
    "AgendaApplicationError",
    "AgendaFormatError",
    "AgendaRequestError",
    "AgendaTransportError",
]
