"""Tests for the HTTP ledger client."""

from unittest.mock import MagicMock

import httpx
import pytest

from ledger_dashboard.application.ports.ledger_client import LedgerClientError
from ledger_dashboard.infrastructure.hledger_client import HttpLedgerClient


def _client(handler) -> HttpLedgerClient:
    http = httpx.Client(
        base_url="http://ledger.test",
        transport=httpx.MockTransport(handler),
    )
    return HttpLedgerClient(
        "http://ledger.test",
        logger=MagicMock(),
        client=http,
    )


def test_list_account_names() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json=["asset", "asset:bank", ""])

    client = _client(handler)

    assert client.list_account_names() == ["asset", "asset:bank"]
    assert seen == ["/accountnames"]


def test_list_transactions_for_account_quotes_name() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.raw_path.decode())
        return httpx.Response(200, json=[])

    client = _client(handler)

    assert client.list_transactions_for_account("asset:my bank") == []
    assert seen == ["/accounttransactions/asset:my%20bank"]


def test_list_all_transactions_maps_payload() -> None:
    payload = [
        {
            "tdate": "2024-02-02",
            "tdescription": "Coffee",
            "tindex": 3,
            "ttags": [["txid", "c1"]],
            "tpostings": [
                {
                    "paccount": "expense:coffee",
                    "pamount": [
                        {
                            "acommodity": "vnd",
                            "aquantity": {
                                "decimalMantissa": 45000,
                                "decimalPlaces": 0,
                            },
                        }
                    ],
                },
                {"paccount": "asset:cash", "pamount": []},
            ],
        }
    ]

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/transactions"
        return httpx.Response(200, json=payload)

    transactions = _client(handler).list_all_transactions()

    assert [tx.description for tx in transactions] == ["Coffee"]
    assert transactions[0].tags == (("txid", "c1"),)


def test_list_accounts() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json=[{"aname": "asset:bank", "aparent_": "asset"}],
        )

    accounts = _client(handler).list_accounts()

    assert accounts[0].name == "asset:bank"
    assert accounts[0].parent_name == "asset"


def test_non_success_status_raises_with_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="maintenance")

    with pytest.raises(LedgerClientError) as excinfo:
        _client(handler).list_account_names()

    assert excinfo.value.status_code == 503
    assert excinfo.value.body == "maintenance"


def test_transport_error_raises_ledger_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(LedgerClientError) as excinfo:
        _client(handler).list_all_transactions()

    assert excinfo.value.status_code is None


def test_invalid_json_raises_ledger_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>")

    with pytest.raises(LedgerClientError):
        _client(handler).list_account_names()


def test_context_manager_closes_pooled_client() -> None:
    http = MagicMock()

    with HttpLedgerClient(
        "http://ledger.test",
        logger=MagicMock(),
        client=http,
    ) as client:
        assert isinstance(client, HttpLedgerClient)

    http.close.assert_called_once()
