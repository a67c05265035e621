"""Handler JSON opcional para os logs do cliente.

A biblioteca não configura logging sozinha. Quem quiser logs estruturados
chama configure_logging, que instala um único handler no logger
"woocommerce_api" e deixa o root logger da aplicação intocado.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from woocommerce_api.config.logging.filters import RequestIdFilter
from woocommerce_api.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "woocommerce_api"
LIBRARY_LOGGER_NAME = "woocommerce_api"


class _ClientJsonHandler(logging.StreamHandler):
    """Marca os handlers instalados aqui para reconfiguração idempotente."""


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    request_id_getter: Callable[[], str] | None = None,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Instala o handler JSON no logger da biblioteca.

    Chamadas repetidas substituem o handler anterior; handlers adicionados
    pela aplicação no mesmo logger são preservados.

    Args:
        level: Nível do logger da biblioteca (DEBUG ... CRITICAL).
        service_name: Valor do campo `service` em cada linha.
        request_id_getter: Fonte do request_id (padrão: ContextVar da chamada).
        stream: Destino das linhas (padrão: stderr).

    Returns:
        O handler instalado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = _ClientJsonHandler(stream)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(RequestIdFilter(service_name, request_id_getter))

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    library_logger.setLevel(level_upper)
    library_logger.handlers = [
        h for h in library_logger.handlers if not isinstance(h, _ClientJsonHandler)
    ] + [handler]
    return handler


def get_logger(name: str) -> logging.Logger:
    """Logger de um módulo do cliente (geralmente __name__)."""
    return logging.getLogger(name)
