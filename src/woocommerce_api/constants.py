"""Constantes e enums compartilhados pelo cliente WooCommerce."""

from __future__ import annotations

from enum import StrEnum

VERSION: str = "1.4.0"

# Caminho usado antes da API REST migrar para o namespace wp-json
DEFAULT_API_PATH: str = "/wc-api/v2"
MODERN_API_NAMESPACE: str = "wp-json"

USER_AGENT: str = f"woocommerce-api-client/{VERSION}"
ACCEPT_HEADER: str = "application/json, */*"

DEFAULT_TIMEOUT_SECONDS: float = 30.0
DEFAULT_LOG_LEVEL: str = "ERROR"


class HttpMethod(StrEnum):
    """Verbos HTTP suportados pela API REST."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class FailureKind(StrEnum):
    """Classificação do desfecho de falha de uma chamada."""

    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    HTTP = "http"
    MALFORMED_RESPONSE = "malformed_response"
    SERVER_REPORTED = "server_reported"
