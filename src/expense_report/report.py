"""Report facade that builds a ledger from an input document.

The report is constructed once from the ordered events and then treated as
read-only; history, balances and the settlement plan are pure queries.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from .care_of import CareOfGraph
from .currency import CurrencyTable
from .exceptions import ReportInputError
from .ledger import Ledger
from .models import ReportInput, SettlementPlan
from .participants import ParticipantRegistry
from .settlement import aggregate_balances, settle

logger = logging.getLogger(__name__)


class ExpenseReport:
    """Ledger, care-of relationships and settlement for one group."""

    def __init__(
        self,
        ledger: Ledger,
        care_of: CareOfGraph | None = None,
    ):
        """Initialize the report around an already recorded ledger."""
        self.ledger = ledger
        self.care_of = care_of if care_of is not None else CareOfGraph(ledger.registry)

    @classmethod
    def from_input(cls, document: ReportInput) -> "ExpenseReport":
        """
        Build a report by replaying every event in the document.

        Care-of edges are registered first, then all transfers, then all
        expenses, each in document order. Any failure aborts the build.

        Args:
            document: Validated input document

        Returns:
            The constructed report
        """
        registry = ParticipantRegistry(document.participants)
        currencies = CurrencyTable(document.currency, document.exchange_rates)
        ledger = Ledger(registry, currencies)

        care_of = CareOfGraph(registry)
        for child, parent in document.in_care_of.items():
            care_of.fold(child, parent)

        for transfer in document.transfers:
            ledger.record_transfer(
                transfer.source,
                transfer.to,
                transfer.what,
                transfer.amount,
                transfer.currency,
            )

        for expense in document.expenses:
            ledger.record_expense(
                expense.by,
                expense.split,
                expense.what,
                expense.amount,
                expense.currency,
            )

        logger.info(
            f"Built report for {len(registry)} participants: "
            f"{len(document.transfers)} transfers, {len(document.expenses)} expenses"
        )

        return cls(ledger, care_of)

    @classmethod
    def from_json(cls, text: str | bytes) -> "ExpenseReport":
        """
        Build a report from a JSON document.

        Raises:
            ReportInputError: If the JSON is malformed or fails validation
        """
        try:
            document = ReportInput.model_validate_json(text)
        except ValidationError as e:
            raise ReportInputError(f"Invalid report input:\n{e}") from e

        return cls.from_input(document)

    @property
    def registry(self) -> ParticipantRegistry:
        return self.ledger.registry

    def base_currency(self) -> str:
        return self.ledger.base_currency

    def participant_names(self) -> tuple[str, ...]:
        return self.registry.names

    def history(self) -> tuple[str, ...]:
        return self.ledger.history()

    def balances(self) -> list[int]:
        """Net balance per participant before care-of folding."""
        return aggregate_balances(self.ledger)

    def settle(self) -> SettlementPlan:
        return settle(self.ledger, self.care_of)


def load_report(path: Path) -> ExpenseReport:
    """
    Read and build a report from a JSON file.

    Raises:
        ReportInputError: If the file cannot be read or is invalid
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ReportInputError(f"Cannot read report file {path}: {e}") from e

    logger.debug(f"Loaded report input from {path}")
    return ExpenseReport.from_json(text)
