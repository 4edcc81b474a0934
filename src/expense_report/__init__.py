"""Expense Report - Settle shared multi-currency expenses within a group."""

__version__ = "0.1.0"

from .care_of import CareOfGraph
from .config import Settings, load_settings
from .currency import CurrencyTable
from .ledger import Ledger
from .models import (
    ExpenseInput,
    Posting,
    ReportInput,
    Residual,
    SettlementEntry,
    SettlementPlan,
    TransferInput,
)
from .participants import ParticipantRegistry
from .report import ExpenseReport, load_report
from .settlement import settle

__all__ = [
    "CareOfGraph",
    "Settings",
    "load_settings",
    "CurrencyTable",
    "Ledger",
    "ExpenseInput",
    "Posting",
    "ReportInput",
    "Residual",
    "SettlementEntry",
    "SettlementPlan",
    "TransferInput",
    "ParticipantRegistry",
    "ExpenseReport",
    "load_report",
    "settle",
]
