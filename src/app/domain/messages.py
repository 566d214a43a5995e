"""Mensagens exibidas ao usuário e resultados de ações da agenda."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

MessageLevel = Literal["erro", "sucesso", "info"]


@dataclass(frozen=True, slots=True)
class UserMessage:
    """Texto pronto para exibição, com nível e código de origem."""

    text: str
    level: MessageLevel = "erro"
    code: str | None = None

    @classmethod
    def error(cls, text: str, code: str | None = None) -> UserMessage:
        return cls(text=text, level="erro", code=code)

    @classmethod
    def success(cls, text: str) -> UserMessage:
        return cls(text=text, level="sucesso")

    @classmethod
    def info(cls, text: str) -> UserMessage:
        return cls(text=text, level="info")


@dataclass(frozen=True, slots=True)
class ActionOutcome:
    """Resultado de uma ação disparada pela UI.

    Attributes:
        success: Se a ação foi concluída no backend
        message: Mensagem para o usuário (erro ou confirmação)
        reason: Motivo curto de falha (ou de recarga falha após sucesso),
            seguro para log
    """

    success: bool
    message: UserMessage | None = None
    reason: str | None = None

    @classmethod
    def ok(
        cls, message: UserMessage | None = None, reason: str | None = None
    ) -> ActionOutcome:
        return cls(success=True, message=message, reason=reason)

    @classmethod
    def failed(cls, reason: str, message: UserMessage | None = None) -> ActionOutcome:
        return cls(success=False, message=message, reason=reason)


__all__ = ["ActionOutcome", "MessageLevel", "UserMessage"]
