"""Fachada da API WooCommerce: get/post/put/delete sobre o executor."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from woocommerce_api.client.request import RequestExecutor
from woocommerce_api.config.logging import ClientLogAdapter, resolve_log_level
from woocommerce_api.config.settings import (
    ClientConfig,
    build_client_config,
    load_settings_from_env,
)
from woocommerce_api.constants import HttpMethod
from woocommerce_api.errors import ConfigurationError
from woocommerce_api.infra.http import HttpTransport

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)


class WooCommerce:
    """Cliente assíncrono da API REST WooCommerce.

    Opções (camelCase ou snake_case):
        url: URL da loja, com ou sem esquema (obrigatória)
        consumerKey: Consumer key gerada no painel (obrigatória)
        secret: Consumer secret gerado no painel (obrigatório)
        ssl: True = Basic Auth sobre TLS (padrão: inferido de https na URL)
        port: Porta explícita
        apiPath: Caminho da API (padrão: /wc-api/v2)
        timeout: Timeout em segundos (padrão 30; None explícito = sem timeout)
        headers: Headers extras para toda requisição
        logLevel: Limiar de log da instância (0/1 legados ou nome do nível)

    Raises:
        ConfigurationError: Na construção, se faltar URL ou credenciais.

    Exemplo:
        wc = WooCommerce({"url": "https://loja.com", "consumerKey": "ck", "secret": "cs"})
        orders = await wc.get("/orders", {"filter": {"limit": 10}})
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        transport: httpx.AsyncBaseTransport | HttpTransport | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._config = build_client_config(options)

        try:
            threshold = resolve_log_level(self._config.log_level)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
        self._log = ClientLogAdapter(log or logger, threshold)

        if not isinstance(transport, HttpTransport):
            transport = HttpTransport(transport)
        self._request = RequestExecutor(self._config, transport=transport, log=self._log)

        self._log.info(
            "woocommerce_client_configured",
            extra={
                "base_url": self._config.base_url,
                "api_base_path": self._config.api_base_path,
                "use_tls": self._config.use_tls,
                "legacy": self._config.legacy,
            },
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> WooCommerce:
        """Cria o cliente a partir das variáveis WOOCOMMERCE_*."""
        return cls(load_settings_from_env(), **kwargs)

    @property
    def options(self) -> ClientConfig:
        return self._config

    def full_path(self, path: str) -> str:
        return self._config.full_path(path)

    async def get(self, path: str, data: Mapping[str, Any] | None = None) -> Any:
        return await self._request.execute(HttpMethod.GET, self.full_path(path), data)

    async def post(self, path: str, data: Any) -> Any:
        return await self._request.execute(HttpMethod.POST, self.full_path(path), data)

    async def put(self, path: str, data: Any) -> Any:
        return await self._request.execute(HttpMethod.PUT, self.full_path(path), data)

    async def delete(self, path: str) -> Any:
        return await self._request.execute(HttpMethod.DELETE, self.full_path(path))
