"""Testes de flatten_params (notação de colchetes)."""

from __future__ import annotations

from woocommerce_api.client.query import flatten_params


def test_flat_mapping_is_kept() -> None:
    assert flatten_params({"page": 2, "status": "processing"}) == [
        ("page", "2"),
        ("status", "processing"),
    ]


def test_nested_mapping_uses_brackets() -> None:
    assert flatten_params({"filter": {"limit": 10, "meta": {"key": "sku"}}}) == [
        ("filter[limit]", "10"),
        ("filter[meta][key]", "sku"),
    ]


def test_lists_use_indexes() -> None:
    assert flatten_params({"include": [3, 5]}) == [
        ("include[0]", "3"),
        ("include[1]", "5"),
    ]


def test_booleans_and_none() -> None:
    assert flatten_params({"featured": True, "on_sale": False, "sku": None}) == [
        ("featured", "true"),
        ("on_sale", "false"),
    ]


def test_empty_or_missing_data() -> None:
    assert flatten_params(None) == []
    assert flatten_params({}) == []


def test_already_flat_bracket_keys_pass_through() -> None:
    assert flatten_params({"filter[limit]": 10}) == [("filter[limit]", "10")]
