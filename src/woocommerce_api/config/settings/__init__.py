"""Settings do cliente WooCommerce.

Re-exporta a configuração imutável e os loaders (opções e ambiente).
"""

from __future__ import annotations

from woocommerce_api.config.settings.woocommerce import (
    ClientConfig,
    build_client_config,
    get_woocommerce_settings,
    load_settings_from_env,
)

__all__ = [
    "ClientConfig",
    "build_client_config",
    "get_woocommerce_settings",
    "load_settings_from_env",
]
