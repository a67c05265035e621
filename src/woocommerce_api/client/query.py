"""Achatamento de dados aninhados para query string em notação de colchetes.

{"filter": {"limit": 10}} -> [("filter[limit]", "10")]
{"include": [1, 2]}       -> [("include[0]", "1"), ("include[1]", "2")]
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def flatten_params(data: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Converte um mapeamento (possivelmente aninhado) em pares de query.

    Valores None são descartados; booleanos viram "true"/"false".
    """
    pairs: list[tuple[str, str]] = []
    for key, value in (data or {}).items():
        _flatten(str(key), value, pairs)
    return pairs


def _flatten(prefix: str, value: Any, pairs: list[tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, nested in value.items():
            _flatten(f"{prefix}[{key}]", nested, pairs)
    elif isinstance(value, (list, tuple)):
        for index, nested in enumerate(value):
            _flatten(f"{prefix}[{index}]", nested, pairs)
    else:
        pairs.append((prefix, _scalar(value)))


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
