"""Cliente assíncrono para a API REST WooCommerce.

Uso:
    from woocommerce_api import WooCommerce

    wc = WooCommerce({"url": "https://loja.com", "consumerKey": "ck", "secret": "cs"})
    product = await wc.get("/products/42")
"""

from woocommerce_api.client import WooCommerce
from woocommerce_api.config.logging import configure_logging
from woocommerce_api.constants import VERSION, FailureKind, HttpMethod
from woocommerce_api.errors import (
    ConfigurationError,
    HttpError,
    MalformedResponseError,
    ServerReportedError,
    TransportError,
    WooCommerceError,
)

__version__ = VERSION

__all__ = [
    "ConfigurationError",
    "FailureKind",
    "HttpError",
    "HttpMethod",
    "MalformedResponseError",
    "ServerReportedError",
    "TransportError",
    "WooCommerce",
    "WooCommerceError",
    "__version__",
    "configure_logging",
]
