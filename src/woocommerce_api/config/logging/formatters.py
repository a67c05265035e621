"""Formatter JSON das linhas de log do cliente."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

from woocommerce_api.constants import VERSION

# Ordem em que os campos aparecem em cada linha
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "service",
    "request_id",
    "message",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

STATIC_LOG_FIELDS = {
    "library": "woocommerce-api-client",
    "library_version": VERSION,
}


def create_json_formatter() -> JsonFormatter:
    """Formatter com campos fixos, identificação da biblioteca e UTF-8 legível.

    Campos passados via `extra` (method, url, status_code, failure_kind)
    entram na mesma linha.
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        static_fields=STATIC_LOG_FIELDS,
        json_ensure_ascii=False,
    )
