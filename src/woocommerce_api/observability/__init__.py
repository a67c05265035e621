"""Observabilidade: request_id propagado para os logs de cada chamada.

Uso:
    from woocommerce_api.observability import get_request_id, set_request_id
"""

from woocommerce_api.observability.request_id import (
    generate_request_id,
    get_request_id,
    reset_request_id,
    set_request_id,
)

__all__ = [
    "generate_request_id",
    "get_request_id",
    "reset_request_id",
    "set_request_id",
]
