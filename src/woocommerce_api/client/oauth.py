"""Assinatura OAuth 1.0a (HMAC-SHA256) em query string.

A canonicalização (URI base, normalização e ordenação de parâmetros,
base string) fica com o oauthlib. Apenas a chave de assinatura varia:
a API legada (/wc-api) espera a chave sem o "&" final quando não há
token secret.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
from collections.abc import Callable, Iterable

from oauthlib.common import generate_nonce, generate_timestamp
from oauthlib.oauth1.rfc5849 import signature, utils

SIGNATURE_METHOD = "HMAC-SHA256"
OAUTH_VERSION = "1.0"


class OAuthSigner:
    """Gera o conjunto de parâmetros assinados para uma requisição.

    Args:
        consumer_key: Consumer key da loja.
        secret: Consumer secret da loja.
        legacy: True para a API /wc-api (chave sem "&" final).
        nonce_factory: Gerador de nonce (injetável em testes).
        timestamp_factory: Gerador de timestamp (injetável em testes).
    """

    def __init__(
        self,
        consumer_key: str,
        secret: str,
        legacy: bool = False,
        nonce_factory: Callable[[], str] = generate_nonce,
        timestamp_factory: Callable[[], str] = generate_timestamp,
    ) -> None:
        self._consumer_key = consumer_key
        self._secret = secret
        self._legacy = legacy
        self._nonce_factory = nonce_factory
        self._timestamp_factory = timestamp_factory

    def sign(
        self,
        method: str,
        url: str,
        params: Iterable[tuple[str, str]] = (),
    ) -> list[tuple[str, str]]:
        """Retorna params + oauth_* + oauth_signature, prontos para a query.

        Args:
            method: Verbo HTTP.
            url: URL do recurso (query string, se houver, é ignorada aqui).
            params: Parâmetros de query já achatados, co-assinados.
        """
        request_params = [(str(key), str(value)) for key, value in params]
        oauth_params = [
            ("oauth_consumer_key", self._consumer_key),
            ("oauth_nonce", self._nonce_factory()),
            ("oauth_signature_method", SIGNATURE_METHOD),
            ("oauth_timestamp", self._timestamp_factory()),
            ("oauth_version", OAUTH_VERSION),
        ]

        base_string = signature.signature_base_string(
            method.upper(),
            signature.base_string_uri(url),
            signature.normalize_parameters(request_params + oauth_params),
        )
        oauth_signature = self._hmac_sha256(base_string)

        return request_params + oauth_params + [("oauth_signature", oauth_signature)]

    def _hmac_sha256(self, base_string: str) -> str:
        key = utils.escape(self._secret)
        if not self._legacy:
            key += "&"
        digest = hmac.new(key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha256).digest()
        return base64.b64encode(digest).decode("utf-8")
