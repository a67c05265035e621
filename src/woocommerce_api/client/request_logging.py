"""Helpers de logging das chamadas à API (sem credenciais nem corpos)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from woocommerce_api.errors import WooCommerceError


def log_request_started(log: logging.LoggerAdapter, method: str, url: str) -> None:
    log.info(
        "woocommerce_request_started",
        extra={"method": method, "url": url},
    )


def log_basic_auth(log: logging.LoggerAdapter) -> None:
    log.info("woocommerce_basic_auth")


def log_request_failed(
    log: logging.LoggerAdapter,
    error: WooCommerceError,
    method: str,
    url: str,
) -> None:
    """Loga a falha com sua classificação; a mensagem nunca carrega segredos."""
    log.error(
        "woocommerce_request_failed: %s",
        error.message,
        extra={
            "method": method,
            "url": url,
            "failure_kind": error.kind.value,
            "status_code": error.status_code,
        },
    )


def log_request_completed(
    log: logging.LoggerAdapter,
    method: str,
    url: str,
    status_code: int,
) -> None:
    log.info(
        "woocommerce_request_completed",
        extra={"method": method, "url": url, "status_code": status_code},
    )
