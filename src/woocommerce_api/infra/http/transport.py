"""Cliente HTTP base (httpx) para envio de RequestDescriptor.

Uma requisição por chamada, sem retry: falhas de rede sobem como
TransportError para o chamador.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from woocommerce_api.errors import TransportError
from woocommerce_api.infra.http.models import TransportResponse

if TYPE_CHECKING:
    from woocommerce_api.infra.http.models import RequestDescriptor

logger = logging.getLogger(__name__)


class HttpTransport:
    """Envia descritores via httpx.AsyncClient.

    Args:
        transport: Transporte httpx opcional (ex: httpx.MockTransport em testes).
        verify_ssl: Verifica certificados TLS.
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        verify_ssl: bool = True,
    ) -> None:
        self._transport = transport
        self._verify_ssl = verify_ssl

    async def send(self, descriptor: RequestDescriptor) -> TransportResponse:
        """Envia a requisição e devolve status, headers e corpo.

        Raises:
            TransportError: Timeout, DNS, conexão recusada ou erro de protocolo.
        """
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                verify=self._verify_ssl,
                timeout=descriptor.timeout_seconds,
            ) as client:
                response = await client.request(
                    descriptor.method.value,
                    descriptor.url,
                    params=list(descriptor.query_params),
                    json=descriptor.body if descriptor.has_body else None,
                    headers=dict(descriptor.headers),
                    auth=descriptor.auth,
                )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"method": descriptor.method.value})
            raise TransportError(f"Request timed out: {exc}") from exc
        except httpx.TransportError as exc:
            logger.warning(
                "http_connection_error",
                extra={"method": descriptor.method.value, "error_type": type(exc).__name__},
            )
            raise TransportError(f"Request could not be sent: {exc}") from exc
        except httpx.RequestError as exc:
            logger.warning(
                "http_response_error",
                extra={"method": descriptor.method.value, "error_type": type(exc).__name__},
            )
            raise TransportError(f"Response could not be read: {exc}") from exc

        return TransportResponse(
            status_code=response.status_code,
            headers=response.headers,
            body=response.text,
            raw=response,
        )
