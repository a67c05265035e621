"""Configuração de logging estruturado do cliente.

Uso:
    from woocommerce_api.config.logging import configure_logging, get_logger

    # Na inicialização da aplicação que usa o cliente
    configure_logging(level="INFO", service_name="minha_loja")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("woocommerce_request_completed", extra={"status_code": 200})

Credenciais (consumer_key/secret) e corpos de resposta nunca vão para os logs.
"""

from woocommerce_api.config.logging.adapter import ClientLogAdapter, resolve_log_level
from woocommerce_api.config.logging.config import configure_logging, get_logger
from woocommerce_api.config.logging.filters import RequestIdFilter
from woocommerce_api.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    STATIC_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "STATIC_LOG_FIELDS",
    # Adapter por instância do cliente
    "ClientLogAdapter",
    # Filters
    "RequestIdFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "resolve_log_level",
]
