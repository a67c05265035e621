"""Settings de conexão com a loja WooCommerce.

Aceita o "saco de opções" no formato camelCase da API original e também
snake_case. Defaults:
- api_base_path: caminho legado (/wc-api/v2)
- use_tls: inferido do esquema https da URL
- legacy: verdadeiro enquanto o caminho não estiver sob wp-json
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any
from urllib.parse import urlsplit, urlunsplit

from woocommerce_api.constants import (
    DEFAULT_API_PATH,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
    MODERN_API_NAMESPACE,
)
from woocommerce_api.errors import ConfigurationError

# Aliases aceitos para cada campo; o primeiro presente vence
_OPTION_ALIASES: dict[str, tuple[str, ...]] = {
    "url": ("url", "hostname", "base_url"),
    "consumer_key": ("consumerKey", "consumer_key"),
    "secret": ("secret", "consumer_secret", "consumerSecret"),
    "use_tls": ("ssl", "useTls", "use_tls"),
    "port": ("port",),
    "api_base_path": ("apiPath", "apiBasePath", "api_base_path"),
    "timeout": ("timeout", "timeout_seconds"),
    "headers": ("headers",),
    "log_level": ("logLevel", "log_level"),
}


@dataclass(frozen=True)
class ClientConfig:
    """Configuração imutável de uma instância do cliente.

    Attributes:
        base_url: URL da loja com esquema e sem barra final
        use_tls: True = Basic Auth sobre TLS, False = assinatura OAuth 1.0a
        port: Porta explícita (None = padrão do esquema)
        consumer_key: Consumer key gerada no painel WooCommerce
        secret: Consumer secret gerado no painel WooCommerce
        api_base_path: Prefixo da API (ex: /wc-api/v2, /wp-json/wc/v3)
        timeout_seconds: Timeout por requisição (None = sem timeout)
        headers: Headers extras enviados em toda requisição
        legacy: API antiga (assinatura sem "&" final na chave)
        log_level: Limiar de log da instância
    """

    base_url: str
    consumer_key: str
    secret: str
    use_tls: bool = False
    port: int | None = None
    api_base_path: str = DEFAULT_API_PATH
    timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    legacy: bool = True
    log_level: str | int = DEFAULT_LOG_LEVEL

    def full_path(self, path: str) -> str:
        """Prefixa o caminho do recurso com api_base_path."""
        return f"{self.api_base_path}{path}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.consumer_key or not self.secret:
            errors.append("The consumer key and secret are required")

        if not self.base_url:
            errors.append("The URL is required")

        if self.port is not None and not 0 < self.port < 65536:
            errors.append(f"Invalid port: {self.port}")

        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            errors.append("timeout must be > 0")

        return errors


def _pick(options: Mapping[str, Any], name: str) -> Any:
    for alias in _OPTION_ALIASES[name]:
        value = options.get(alias)
        if value is not None:
            return value
    return None


def _has_option(options: Mapping[str, Any], name: str) -> bool:
    return any(alias in options for alias in _OPTION_ALIASES[name])


def _normalize_url(url: str, use_tls: bool, port: int | None) -> str:
    """Garante esquema, aplica porta explícita e remove barra final."""
    if "://" not in url:
        url = f"{'https' if use_tls else 'http'}://{url}"

    parts = urlsplit(url.rstrip("/"))
    netloc = parts.netloc
    if port is not None and parts.port is None:
        netloc = f"{netloc}:{port}"
    return urlunsplit((parts.scheme, netloc, parts.path, "", ""))


def build_client_config(options: Mapping[str, Any] | None) -> ClientConfig:
    """Constrói ClientConfig a partir do saco de opções do chamador.

    Falha rápido, antes de qualquer atividade de rede.

    Raises:
        ConfigurationError: Se consumer key/secret ou URL estiverem ausentes,
            ou se algum valor for inválido.
    """
    options = options or {}

    consumer_key = _pick(options, "consumer_key")
    secret = _pick(options, "secret")
    if not consumer_key or not secret:
        raise ConfigurationError("The consumer key and secret are required")

    url = _pick(options, "url")
    if not url:
        raise ConfigurationError("The URL is required")

    api_base_path = _pick(options, "api_base_path") or DEFAULT_API_PATH
    ssl_option = _pick(options, "use_tls")
    use_tls = bool(ssl_option) if ssl_option is not None else _is_https(url)

    port = _pick(options, "port")
    timeout = _pick(options, "timeout")
    try:
        port = int(port) if port is not None else None
        if timeout is not None:
            timeout_seconds = float(timeout)
        elif _has_option(options, "timeout"):
            # timeout=None explícito desliga o timeout
            timeout_seconds = None
        else:
            timeout_seconds = DEFAULT_TIMEOUT_SECONDS
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid option value: {exc}") from exc

    config = ClientConfig(
        base_url=_normalize_url(str(url), use_tls, port),
        consumer_key=str(consumer_key),
        secret=str(secret),
        use_tls=use_tls,
        port=port,
        api_base_path=api_base_path,
        timeout_seconds=timeout_seconds,
        headers=MappingProxyType(dict(_pick(options, "headers") or {})),
        legacy=MODERN_API_NAMESPACE not in api_base_path,
        log_level=_pick(options, "log_level") or DEFAULT_LOG_LEVEL,
    )

    errors = config.validate()
    if errors:
        raise ConfigurationError("; ".join(errors))
    return config


def _is_https(url: str) -> bool:
    return url.lower().startswith("https://")


def load_settings_from_env() -> dict[str, Any]:
    """Lê as opções do cliente a partir de variáveis de ambiente.

    Retorna o saco de opções (não validado); a validação acontece em
    build_client_config.
    """
    options: dict[str, Any] = {
        "url": os.getenv("WOOCOMMERCE_URL", ""),
        "consumer_key": os.getenv("WOOCOMMERCE_CONSUMER_KEY", ""),
        "secret": os.getenv("WOOCOMMERCE_CONSUMER_SECRET", ""),
        "api_base_path": os.getenv("WOOCOMMERCE_API_PATH") or None,
        "port": os.getenv("WOOCOMMERCE_PORT") or None,
        "log_level": os.getenv("WOOCOMMERCE_LOG_LEVEL") or None,
    }

    timeout = os.getenv("WOOCOMMERCE_TIMEOUT_SECONDS")
    if timeout:
        options["timeout"] = timeout

    use_tls = os.getenv("WOOCOMMERCE_USE_TLS")
    if use_tls:
        options["use_tls"] = use_tls.lower() in ("true", "1", "yes")
    return options


@lru_cache(maxsize=1)
def get_woocommerce_settings() -> ClientConfig:
    """Retorna ClientConfig cacheado, carregado do ambiente."""
    return build_client_config(load_settings_from_env())
