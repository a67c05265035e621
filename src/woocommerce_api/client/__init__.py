"""Cliente da API REST WooCommerce."""

from woocommerce_api.client.oauth import OAuthSigner
from woocommerce_api.client.query import flatten_params
from woocommerce_api.client.request import RequestExecutor
from woocommerce_api.client.responses import classify_response
from woocommerce_api.client.woocommerce import WooCommerce

__all__ = [
    "OAuthSigner",
    "RequestExecutor",
    "WooCommerce",
    "classify_response",
    "flatten_params",
]
