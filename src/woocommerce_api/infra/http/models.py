"""Descritores de requisição e resposta trocados com o transporte."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from woocommerce_api.constants import HttpMethod

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True)
class RequestDescriptor:
    """Requisição pronta para envio. Criada nova a cada chamada.

    Attributes:
        method: Verbo HTTP
        url: URL completa, sem query string
        query_params: Parâmetros de query na ordem de envio
        body: Valor JSON do corpo (None = sem corpo)
        headers: Headers da requisição
        auth: Par (usuário, senha) para Basic Auth, quando em modo TLS
        timeout_seconds: Timeout da requisição (None = sem timeout)
    """

    method: HttpMethod
    url: str
    query_params: tuple[tuple[str, str], ...] = ()
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)
    auth: tuple[str, str] | None = None
    timeout_seconds: float | None = None

    @property
    def has_body(self) -> bool:
        return self.body is not None


@dataclass(frozen=True)
class TransportResponse:
    """Resposta crua do transporte: status, headers e corpo em texto."""

    status_code: int
    headers: Mapping[str, str]
    body: str
    raw: httpx.Response | None = None

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")
