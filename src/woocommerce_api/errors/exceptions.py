"""Hierarquia de erros do cliente WooCommerce.

Cada chamada termina uma única vez: retornando o payload ou levantando
uma subclasse de WooCommerceError marcada com seu FailureKind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from woocommerce_api.constants import FailureKind

if TYPE_CHECKING:
    import httpx


class WooCommerceError(Exception):
    """Base para todas as falhas do cliente.

    Attributes:
        kind: Classificação da falha.
        message: Mensagem legível (sem credenciais).
        status_code: Status HTTP, quando houve resposta.
        body: Corpo bruto da resposta, quando houve resposta.
        response: Resposta httpx original para inspeção do chamador.
    """

    kind: ClassVar[FailureKind]

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: Any = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
        self.response = response


class ConfigurationError(WooCommerceError):
    """Configuração inválida ou endpoint aparentemente mal configurado."""

    kind = FailureKind.CONFIGURATION


class TransportError(WooCommerceError):
    """Falha de transporte (timeout, DNS, conexão recusada)."""

    kind = FailureKind.TRANSPORT


class HttpError(WooCommerceError):
    """A loja respondeu com status 4xx/5xx."""

    kind = FailureKind.HTTP


class MalformedResponseError(WooCommerceError):
    """Resposta declarada como JSON que não pôde ser interpretada."""

    kind = FailureKind.MALFORMED_RESPONSE


class ServerReportedError(WooCommerceError):
    """Resposta 2xx cujo JSON traz `error` ou `errors`."""

    kind = FailureKind.SERVER_REPORTED
