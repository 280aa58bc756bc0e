"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from food_lookup.adapters.fdc_client import HttpFdcSearchClient, StubFdcSearchClient
from food_lookup.adapters.http_client import HttpMethod, HttpRequest, HttpxHttpClient
from food_lookup.adapters.off_client import HttpOffSearchClient, StubOffSearchClient
from food_lookup.domain.errors import (
    DecodingError,
    InvalidResponseError,
    NetworkFailureError,
    StatusCodeError,
)
from food_lookup.domain.foods import FoodSource


def _transport(handler) -> HttpxHttpClient:  # type: ignore[no-untyped-def]
    return HttpxHttpClient(
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )


def test_http_client_returns_decoded_json() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    client = _transport(handler)
    payload = asyncio.run(
        client.send(
            HttpRequest(
                url="https://api.test/items",
                method=HttpMethod.POST,
                headers={"X-Test": "1"},
                params={"page": 2},
                json={"query": "rice"},
            )
        )
    )

    assert payload == {"ok": True}
    assert seen[0].method == "POST"
    assert seen[0].headers["X-Test"] == "1"
    assert seen[0].url.params["page"] == "2"
    assert json.loads(seen[0].content.decode()) == {"query": "rice"}


def test_http_client_maps_status_errors() -> None:
    client = _transport(lambda request: httpx.Response(503, json={}))

    with pytest.raises(StatusCodeError) as excinfo:
        asyncio.run(client.send(HttpRequest(url="https://api.test/items")))

    assert excinfo.value.status_code == 503


def test_http_client_maps_decode_errors() -> None:
    client = _transport(lambda request: httpx.Response(200, content=b"<html>"))

    with pytest.raises(DecodingError):
        asyncio.run(client.send(HttpRequest(url="https://api.test/items")))


def test_http_client_maps_network_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _transport(handler)

    with pytest.raises(NetworkFailureError):
        asyncio.run(client.send(HttpRequest(url="https://api.test/items")))


def test_fdc_client_search_maps_foods() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "foods": [
                    {
                        "fdcId": 123456,
                        "description": "Kirkland Signature Chicken Breast",
                        "brandOwner": "Costco",
                        "brandName": "Kirkland",
                        "foodNutrients": [
                            {"nutrientId": 1008, "value": 165},
                            {"nutrientId": 1003, "value": 31},
                            {"nutrientId": 1004, "value": 3.6},
                            {"nutrientId": 1005, "value": 0},
                        ],
                    },
                    {"fdcId": 2, "description": "Plain rice", "foodNutrients": []},
                    {"description": "missing id"},
                ]
            },
        )

    client = HttpFdcSearchClient(
        http_client=_transport(handler),
        api_key="key",
        base_url="https://api.test",
        page_size=5,
    )

    results = asyncio.run(client.search_foods("chicken", page=3))

    assert seen[0].url.path == "/foods/search"
    assert seen[0].url.params["api_key"] == "key"
    assert json.loads(seen[0].content.decode()) == {
        "query": "chicken",
        "pageNumber": 3,
        "pageSize": 5,
    }
    assert [item.id for item in results] == ["fdc_123456", "fdc_2"]
    first = results[0]
    assert first.name == "Kirkland Signature Chicken Breast"
    assert first.brand == "Kirkland"
    assert first.calories_per_100g == 165
    assert first.protein_per_100g == 31
    assert first.fat_per_100g == 3.6
    assert first.carbs_per_100g == 0
    assert first.source is FoodSource.FDC
    assert results[1].brand is None
    assert results[1].calories_per_100g is None


def test_fdc_client_labels_provider_errors() -> None:
    client = HttpFdcSearchClient(
        http_client=_transport(lambda request: httpx.Response(500)),
        api_key="key",
        base_url="https://api.test",
    )

    with pytest.raises(StatusCodeError) as excinfo:
        asyncio.run(client.search_foods("rice", page=1))

    assert excinfo.value.provider == "fdc"


def test_fdc_client_rejects_malformed_payload() -> None:
    client = HttpFdcSearchClient(
        http_client=_transport(lambda request: httpx.Response(200, json={"foods": 1})),
        api_key="key",
        base_url="https://api.test",
    )

    with pytest.raises(InvalidResponseError):
        asyncio.run(client.search_foods("rice", page=1))


def test_off_client_search_maps_products() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "products": [
                    {
                        "code": "3017620422003",
                        "product_name": "Nutella",
                        "brands": "Ferrero, Nutella",
                        "nutriments": {
                            "energy-kcal_100g": 539,
                            "proteins_100g": 6.3,
                            "carbohydrates_100g": "57.5",
                            "fat_100g": 30.9,
                        },
                    },
                    {"code": 42, "generic_name": "Oat drink"},
                    {"product_name": "no code"},
                ]
            },
        )

    client = HttpOffSearchClient(
        http_client=_transport(handler),
        base_url="https://off.test",
        page_size=10,
    )

    results = asyncio.run(client.search_foods("nutella", page=2))

    params = seen[0].url.params
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/cgi/search.pl"
    assert params["search_terms"] == "nutella"
    assert params["page"] == "2"
    assert params["page_size"] == "10"
    assert params["json"] == "1"
    assert [item.id for item in results] == ["off_3017620422003", "off_42"]
    first = results[0]
    assert first.name == "Nutella"
    assert first.brand == "Ferrero"
    assert first.calories_per_100g == 539
    assert first.carbs_per_100g == 57.5
    assert first.source is FoodSource.OFF
    assert results[1].name == "Oat drink"
    assert results[1].fat_per_100g is None


def test_off_client_rejects_non_object_payload() -> None:
    client = HttpOffSearchClient(
        http_client=_transport(lambda request: httpx.Response(200, json=[1, 2])),
        base_url="https://off.test",
    )

    with pytest.raises(InvalidResponseError) as excinfo:
        asyncio.run(client.search_foods("rice", page=1))

    assert excinfo.value.provider == "off"


def test_stub_clients_return_one_item_per_page() -> None:
    fdc = asyncio.run(StubFdcSearchClient().search_foods("apple", page=2))
    off = asyncio.run(StubOffSearchClient().search_foods("apple", page=3))

    assert [item.id for item in fdc] == ["fdc_stub_2"]
    assert [item.id for item in off] == ["off_stub_3"]
    assert asyncio.run(StubFdcSearchClient().search_foods(" ", page=1)) == []
