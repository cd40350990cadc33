"""Transporte HTTP com retry em rate limiting (429)."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from utils.errors import ContentfulTransportError

logger = logging.getLogger(__name__)

RATE_LIMIT_STATUS = 429
RATE_LIMIT_RESET_HEADER = "X-Contentful-RateLimit-Reset"

SleepFunc = Callable[[float], Awaitable[None]]


@dataclass
class HttpClientConfig:
    """Configuração do transporte HTTP.

    Attributes:
        base_url: Host único da API (ex: https://api.contentful.com)
        timeout_seconds: Timeout por requisição
        max_attempts: Total de tentativas (não retries extras)
        default_headers: Headers enviados em toda requisição
    """

    base_url: str
    timeout_seconds: float = 30.0
    max_attempts: int = 3
    default_headers: dict[str, str] = field(default_factory=dict)


class HttpClient:
    """Executa requisições e retenta apenas respostas 429.

    Qualquer outra resposta (sucesso ou erro) retorna imediatamente.
    Esgotadas as tentativas, a última resposta é devolvida mesmo se 429.
    Falhas de conexão propagam sem retry.

    Args:
        config: Configuração do transporte
        http_client: AsyncClient compartilhado (opcional). Sem ele, cada
            requisição abre e fecha o próprio client.
        sleep: Espera entre tentativas (asyncio.sleep por padrão)
    """

    def __init__(
        self,
        config: HttpClientConfig,
        http_client: httpx.AsyncClient | None = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        self._config = config
        self._http_client = http_client
        self._sleep = sleep

    async def request(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        url = self._config.base_url.rstrip("/") + path
        merged_headers = {**self._config.default_headers, **(headers or {})}
        max_attempts = max(self._config.max_attempts, 1)

        for attempt in range(1, max_attempts + 1):
            response = await self._send(method, url, merged_headers, json)
            if response.status_code != RATE_LIMIT_STATUS or attempt == max_attempts:
                return response
            await _backoff_sleep(self._sleep, attempt, response)

        raise ContentfulTransportError("http_retry_exhausted")

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        json: Any,
    ) -> httpx.Response:
        try:
            if self._http_client is not None:
                return await self._http_client.request(
                    method,
                    url,
                    json=json,
                    headers=headers,
                    timeout=self._config.timeout_seconds,
                )
            async with httpx.AsyncClient() as client:
                return await client.request(
                    method,
                    url,
                    json=json,
                    headers=headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TransportError as exc:
            logger.warning(
                "http_connection_error",
                extra={"method": method, "error_type": type(exc).__name__},
            )
            raise ContentfulTransportError(
                f"http_connection_error: {method} {url}: {exc}"
            ) from exc


def compute_backoff(attempt: int, response: httpx.Response) -> float:
    """Espera em segundos antes da próxima tentativa.

    2**attempt (tentativas numeradas a partir de 1), exceto quando o
    header de reset traz um inteiro válido, que tem precedência.
    """
    reset_hint = response.headers.get(RATE_LIMIT_RESET_HEADER)
    if reset_hint:
        try:
            return float(int(reset_hint))
        except ValueError:
            pass
    return float(2**attempt)


async def _backoff_sleep(sleep: SleepFunc, attempt: int, response: httpx.Response) -> None:
    backoff = compute_backoff(attempt, response)
    logger.info(
        "http_backoff",
        extra={
            "attempt": attempt,
            "backoff_seconds": backoff,
            "reset_hint": response.headers.get(RATE_LIMIT_RESET_HEADER),
        },
    )
    await sleep(backoff)
