"""Desembrulha o envelope `{success, data, errors}` do backend.

Formato:
    {
        "success": true/false,
        "data": {...} ou null,
        "errors": [{"code": ..., "message": ..., "details": {...}}]
    }
"""

from __future__ import annotations

from typing import Any

from app.domain.errors import (
    DEFAULT_APPLICATION_MESSAGE,
    UNEXPECTED_RESPONSE_MESSAGE,
    AgendaApplicationError,
    AgendaFormatError,
)


def unwrap_envelope(body: Any) -> Any:
    """Retorna `data` em caso de sucesso.

    Raises:
        AgendaFormatError: corpo sem o campo `success`.
        AgendaApplicationError: `success` falso; usa o primeiro erro.
    """
    if not isinstance(body, dict) or "success" not in body:
        raise AgendaFormatError(UNEXPECTED_RESPONSE_MESSAGE)

    if body.get("success"):
        return body.get("data")

    errors = [item for item in (body.get("errors") or []) if isinstance(item, dict)]
    first = errors[0] if errors else {}
    details = first.get("details")
    code = first.get("code")
    raise AgendaApplicationError(
        str(first.get("message") or DEFAULT_APPLICATION_MESSAGE),
        code=str(code) if code else None,
        details=details if isinstance(details, dict) else None,
        errors=errors,
        data=body.get("data"),
    )
