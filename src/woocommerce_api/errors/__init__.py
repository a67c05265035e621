"""Exceções públicas do cliente WooCommerce."""

from .exceptions import (
    ConfigurationError,
    HttpError,
    MalformedResponseError,
    ServerReportedError,
    TransportError,
    WooCommerceError,
)

__all__ = [
    "ConfigurationError",
    "HttpError",
    "MalformedResponseError",
    "ServerReportedError",
    "TransportError",
    "WooCommerceError",
]
