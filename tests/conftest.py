"""Shared fixtures for Expense Report tests."""

import json

import pytest

from expense_report.currency import CurrencyTable
from expense_report.ledger import Ledger
from expense_report.participants import ParticipantRegistry

GROUP = ("Alice", "Bob", "Charlie", "Deidre", "DG")


@pytest.fixture
def registry():
    """The five-person trip group."""
    return ParticipantRegistry(GROUP)


@pytest.fixture
def currencies():
    """NOK base with a EUR rate."""
    return CurrencyTable("nok", {"eur": 11.8375})


@pytest.fixture
def ledger(registry, currencies):
    """An empty ledger for the trip group."""
    return Ledger(registry, currencies)


@pytest.fixture
def trip_document():
    """Input document for the deposit/stay/food trip."""
    return {
        "currency": "nok",
        "exchange_rates": {"eur": 11.8375},
        "participants": list(GROUP),
        "transfers": [
            {
                "from": "Alice",
                "to": "DG",
                "amount": 20,
                "currency": "nok",
                "what": "Deposit",
            },
            {
                "from": "Bob",
                "to": "DG",
                "amount": 20,
                "currency": "nok",
                "what": "Deposit",
            },
            {
                "from": "Deidre",
                "to": "DG",
                "amount": 8,
                "currency": "eur",
                "what": "Deposit",
            },
        ],
        "expenses": [
            {
                "by": "DG",
                "amount": 52,
                "currency": "nok",
                "what": "Stay",
                "split": {"Alice": 1, "Bob": 1, "Charlie": 1, "Deidre": 1},
            },
            {
                "by": "Charlie",
                "amount": 120,
                "currency": "nok",
                "what": "Food",
                "split": {"Bob": 1, "Charlie": 1, "Deidre": 1},
            },
        ],
    }


@pytest.fixture
def trip_file(tmp_path, trip_document):
    """The trip document written to disk."""
    path = tmp_path / "trip.json"
    path.write_text(json.dumps(trip_document), encoding="utf-8")
    return path
