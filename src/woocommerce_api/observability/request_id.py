"""Gerenciamento de request_id por chamada à API.

Usa ContextVar: chamadas concorrentes (asyncio.gather) enxergam cada
uma o seu próprio valor.

Uso:
    token = set_request_id()
    try:
        # executar chamada
    finally:
        reset_request_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_request_id: ContextVar[str] = ContextVar("woocommerce_request_id", default="")


def get_request_id() -> str:
    """Retorna o request_id do contexto atual (string vazia se ausente)."""
    return _request_id.get()


def set_request_id(request_id: str | None = None) -> Token[str]:
    """Define o request_id no contexto atual.

    Args:
        request_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_request_id().
    """
    return _request_id.set(request_id or generate_request_id())


def reset_request_id(token: Token[str]) -> None:
    """Restaura o request_id ao valor anterior."""
    _request_id.reset(token)


def generate_request_id() -> str:
    """Gera um novo request_id (UUID v4)."""
    return str(uuid.uuid4())
