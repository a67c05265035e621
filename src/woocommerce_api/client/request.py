"""Executor de requisições da API WooCommerce.

Para cada chamada:
- monta a URL (base_url + caminho) e o descritor da requisição
- autentica: Basic Auth + credenciais na query (TLS) ou assinatura
  OAuth 1.0a HMAC-SHA256 na query (HTTP simples)
- envia pelo transporte e classifica a resposta

Sem estado mutável entre chamadas: cada uma cria seu próprio descritor.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl, urlsplit, urlunsplit

from woocommerce_api.client.oauth import OAuthSigner
from woocommerce_api.client.query import flatten_params
from woocommerce_api.client.request_logging import (
    log_basic_auth,
    log_request_completed,
    log_request_failed,
    log_request_started,
)
from woocommerce_api.client.responses import classify_response
from woocommerce_api.config.logging import ClientLogAdapter
from woocommerce_api.constants import ACCEPT_HEADER, USER_AGENT, HttpMethod
from woocommerce_api.errors import WooCommerceError
from woocommerce_api.infra.http import HttpTransport, RequestDescriptor
from woocommerce_api.observability import reset_request_id, set_request_id

if TYPE_CHECKING:
    from woocommerce_api.config.settings import ClientConfig

logger = logging.getLogger(__name__)


class RequestExecutor:
    """Assina, envia e classifica uma chamada à API.

    Args:
        config: Configuração imutável do cliente.
        transport: Transporte HTTP (padrão: HttpTransport com httpx).
        log: Adapter de log da instância (padrão: limiar ERROR).
        signer: Assinador OAuth (padrão: criado a partir do config).
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: HttpTransport | None = None,
        log: logging.LoggerAdapter | None = None,
        signer: OAuthSigner | None = None,
    ) -> None:
        self._config = config
        self._transport = transport or HttpTransport()
        self._log = log or ClientLogAdapter(logger)
        self._signer: OAuthSigner | None = None
        if not config.use_tls:
            self._signer = signer or OAuthSigner(
                config.consumer_key,
                config.secret,
                legacy=config.legacy,
            )

    @property
    def uses_basic_auth(self) -> bool:
        return self._signer is None

    async def execute(
        self,
        method: HttpMethod | str,
        path: str,
        data: Any = None,
    ) -> Any:
        """Executa uma chamada e devolve o payload de sucesso.

        Args:
            method: Verbo HTTP.
            path: Caminho completo a partir do host (já com api_base_path).
            data: Query (GET) ou corpo JSON (demais verbos).

        Returns:
            JSON interpretado ou corpo cru quando a resposta não é JSON.

        Raises:
            WooCommerceError: Subclasse conforme a classificação da falha.
        """
        method = HttpMethod(method.upper())
        token = set_request_id()
        try:
            descriptor = self.build_request(method, path, data)
            log_request_started(self._log, method.value, descriptor.url)
            if self.uses_basic_auth:
                log_basic_auth(self._log)
            try:
                response = await self._transport.send(descriptor)
                payload = classify_response(response)
            except WooCommerceError as exc:
                log_request_failed(self._log, exc, method.value, descriptor.url)
                raise
            log_request_completed(self._log, method.value, descriptor.url, response.status_code)
            return payload
        finally:
            reset_request_id(token)

    def build_request(
        self,
        method: HttpMethod,
        path: str,
        data: Any = None,
    ) -> RequestDescriptor:
        """Monta o descritor assinado/autenticado de uma chamada."""
        url, query = self._split_url(f"{self._config.base_url}{path}")

        body = None
        if data is not None:
            if method is HttpMethod.GET:
                if not isinstance(data, Mapping):
                    raise TypeError("GET data must be a mapping of query parameters")
                query.extend(flatten_params(data))
            else:
                body = data

        auth = None
        if self._signer is None:
            auth = (self._config.consumer_key, self._config.secret)
            query.extend(
                [
                    ("consumer_key", self._config.consumer_key),
                    ("consumer_secret", self._config.secret),
                ]
            )
        else:
            query = self._signer.sign(method.value, url, query)

        return RequestDescriptor(
            method=method,
            url=url,
            query_params=tuple(query),
            body=body,
            headers=self._headers(),
            auth=auth,
            timeout_seconds=self._config.timeout_seconds,
        )

    def _headers(self) -> dict[str, str]:
        return {
            "User-Agent": USER_AGENT,
            "Accept": ACCEPT_HEADER,
            **self._config.headers,
        }

    @staticmethod
    def _split_url(url: str) -> tuple[str, list[tuple[str, str]]]:
        """Separa a query string já presente no caminho (co-assinada em OAuth)."""
        parts = urlsplit(url)
        query = parse_qsl(parts.query, keep_blank_values=True)
        return urlunsplit((parts.scheme, parts.netloc, parts.path, "", "")), query
