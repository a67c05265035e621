"""Transporte HTTP assíncrono (httpx)."""

from woocommerce_api.infra.http.models import RequestDescriptor, TransportResponse
from woocommerce_api.infra.http.transport import HttpTransport

__all__ = [
    "HttpTransport",
    "RequestDescriptor",
    "TransportResponse",
]
