"""Normalizers de respostas do backend para o formato canônico."""

from .agenda import normalize_response, unwrap_envelope

__all__ = [
    "normalize_response",
    "unwrap_envelope",
]
