"""Limiar de log por instância do cliente.

Cada WooCommerce guarda o próprio nível; nada de estado global mutável
compartilhado entre instâncias.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from woocommerce_api.observability import get_request_id

# Níveis numéricos herdados da API antiga: 0 = só erros, 1 = info e erros
_LEGACY_LEVELS = {0: logging.ERROR, 1: logging.INFO}


def resolve_log_level(level: str | int | None) -> int:
    """Converte nível configurado (nome ou 0/1 legado) em nível do logging.

    Raises:
        ValueError: Se o nível não for reconhecido.
    """
    if level is None:
        return logging.ERROR
    if isinstance(level, bool):
        raise ValueError(f"Nível de log inválido: {level!r}")
    if isinstance(level, int):
        if level in _LEGACY_LEVELS:
            return _LEGACY_LEVELS[level]
        raise ValueError(f"Nível de log inválido: {level!r}")

    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Nível de log inválido: {level!r}")
    return resolved


class ClientLogAdapter(logging.LoggerAdapter):
    """LoggerAdapter que aplica o limiar da instância e anexa request_id."""

    def __init__(
        self,
        logger: logging.Logger,
        threshold: int = logging.ERROR,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(logger, extra or {})
        self.threshold = threshold

    def isEnabledFor(self, level: int) -> bool:  # noqa: N802
        return level >= self.threshold and self.logger.isEnabledFor(level)

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = {**(self.extra or {}), **kwargs.get("extra", {})}
        extra.setdefault("request_id", get_request_id())
        kwargs["extra"] = extra
        return msg, kwargs
