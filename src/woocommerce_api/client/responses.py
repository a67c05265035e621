"""Classificação da resposta da loja em payload de sucesso ou erro tipado."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from woocommerce_api.errors import (
    ConfigurationError,
    HttpError,
    MalformedResponseError,
    ServerReportedError,
)
from woocommerce_api.infra.http.models import TransportResponse

_JSON_CONTENT_TYPE = re.compile(r"application/json", re.IGNORECASE)

# Corpo devolvido pelo WordPress quando a requisição não chega à API
NO_CONNECTION_SENTINEL = "-1"


def classify_response(response: TransportResponse) -> Any:
    """Devolve o payload de sucesso ou levanta o erro correspondente.

    Returns:
        JSON interpretado (dict/list) ou o corpo cru quando não é JSON.

    Raises:
        ConfigurationError: Corpo sentinela "-1".
        HttpError: Status entre 400 e 599.
        MalformedResponseError: JSON declarado mas inválido ou `null`.
        ServerReportedError: JSON com chave `error` ou `errors`.
    """
    context = {
        "status_code": response.status_code,
        "body": response.body,
        "response": response.raw,
    }

    if response.body.strip() == NO_CONNECTION_SENTINEL:
        raise ConfigurationError(
            "A meaningless error has occurred, returning -1. "
            "This could be the result of an incorrect folder setup.",
            **context,
        )

    if 400 <= response.status_code < 600:
        raise HttpError(f"Request failed with code: {response.status_code}", **context)

    if not _JSON_CONTENT_TYPE.search(response.content_type):
        return response.body

    payload = _parse_json(response.body, context)
    if payload is None:
        raise MalformedResponseError(
            "Error parsing response body: null is not a JSON value the API returns",
            **context,
        )

    if isinstance(payload, Mapping) and ("error" in payload or "errors" in payload):
        raise ServerReportedError(server_error_message(payload), **context)

    return payload


def _parse_json(body: str, context: dict[str, Any]) -> Any:
    text = body.strip()
    if not text:
        return {}
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(f"Error parsing response body: {exc}", **context) from exc


def server_error_message(payload: Mapping[str, Any]) -> str:
    """Mensagem do erro reportado: `error` se presente, senão `errors` em JSON."""
    error = payload.get("error")
    if error:
        return error if isinstance(error, str) else _to_json(error)
    return _to_json(payload.get("errors"))


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
