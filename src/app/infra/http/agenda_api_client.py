"""Client HTTP concreto do contrato de requisição da agenda.

Contrato com o backend (endpoint único):
    Request (POST, corpo texto): {"action": "Agenda_ListarDia", "payload": {...}}
    Response (JSON): {"success": bool, "data": ..., "errors": [...]}

O client resolve com o `data` normalizado (api/normalizers/agenda) ou
levanta AgendaTransportError / AgendaFormatError / AgendaApplicationError.
Não há retry: mutações repetidas poderiam duplicar agendamentos.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any

import httpx

from api.normalizers.agenda import normalize_response, unwrap_envelope
from app.domain.errors import (
    INVALID_JSON_MESSAGE,
    NETWORK_ERROR_MESSAGE,
    TIMEOUT_MESSAGE,
    AgendaFormatError,
    AgendaRequestError,
    AgendaTransportError,
)
from app.observability import get_correlation_id, record_latency
from app.protocols.agenda_request import AgendaRequestProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "agenda_api_client"


@dataclass
class HttpClientConfig:
    """Configuração do transporte HTTP."""

    timeout_seconds: float = 20.0
    # text/plain evita preflight CORS no Apps Script
    default_headers: dict[str, str] = field(
        default_factory=lambda: {"Content-Type": "text/plain;charset=UTF-8"}
    )
    verify_ssl: bool = True
    # Apps Script responde com 302 para googleusercontent.com
    follow_redirects: bool = True


class AgendaApiClient(AgendaRequestProtocol):
    """Implementação httpx de `request(action, payload)`."""

    __slots__ = ("_base_url", "_config", "_http_client")

    def __init__(
        self,
        base_url: str,
        config: HttpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Args:
            base_url: URL do endpoint da API.
            config: Configuração HTTP (timeout, headers, TLS).
            http_client: Client compartilhado; sem ele, um client é aberto
                por chamada.

        Raises:
            ValueError: Se base_url estiver vazia.
        """
        if not base_url or not base_url.strip():
            raise ValueError("URL base da API não definida. Verifique PRONTIO_API_BASE_URL.")
        self._base_url = base_url.strip()
        self._config = config or HttpClientConfig()
        self._http_client = http_client

    async def request(self, action: str, payload: dict[str, Any] | None = None) -> Any:
        if not action or not isinstance(action, str):
            raise ValueError('request: parâmetro "action" é obrigatório e deve ser string.')

        body = json.dumps(
            {"action": action, "payload": payload or {}},
            ensure_ascii=False,
            default=str,
        )
        started = time.perf_counter()
        result = "ok"
        try:
            response = await self._post(body, action)
            data = unwrap_envelope(self._decode_json(response))
            return normalize_response(action, data)
        except AgendaRequestError as exc:
            result = exc.kind
            self._log_failure(action, exc)
            raise
        finally:
            record_latency(
                _COMPONENT,
                action,
                (time.perf_counter() - started) * 1000,
                result=result,
                correlation_id=get_correlation_id(),
            )

    async def aclose(self) -> None:
        """Fecha o client compartilhado, se houver."""
        if self._http_client is not None:
            await self._http_client.aclose()

    async def _post(self, body: str, action: str) -> httpx.Response:
        try:
            if self._http_client is not None:
                response = await self._send(self._http_client, body)
            else:
                async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
                    response = await self._send(client, body)
        except httpx.TimeoutException as exc:
            raise AgendaTransportError(TIMEOUT_MESSAGE) from exc
        except httpx.HTTPError as exc:
            raise AgendaTransportError(NETWORK_ERROR_MESSAGE) from exc

        if not response.is_success:
            raise AgendaTransportError(
                f"Erro de comunicação com o servidor (HTTP {response.status_code}).",
                status_code=response.status_code,
            )
        logger.debug(
            "agenda_api_response",
            extra={"component": _COMPONENT, "action": action, "status_code": response.status_code},
        )
        return response

    async def _send(self, client: httpx.AsyncClient, body: str) -> httpx.Response:
        return await client.post(
            self._base_url,
            content=body.encode("utf-8"),
            headers=self._config.default_headers,
            timeout=self._config.timeout_seconds,
            follow_redirects=self._config.follow_redirects,
        )

    @staticmethod
    def _decode_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise AgendaFormatError(INVALID_JSON_MESSAGE) from exc

    @staticmethod
    def _log_failure(action: str, exc: AgendaRequestError) -> None:
        extra: dict[str, Any] = {
            "component": _COMPONENT,
            "action": action,
            "result": exc.kind,
            "correlation_id": get_correlation_id(),
        }
        if exc.code:
            extra["error_code"] = exc.code
        status_code = getattr(exc, "status_code", None)
        if status_code is not None:
            extra["status_code"] = status_code
        # Falha de aplicação é esperada (conflitos, validação); o resto é erro
        if exc.kind == "application":
            logger.info("agenda_api_application_error", extra=extra)
        else:
            logger.error("agenda_api_request_failed", extra=extra)
