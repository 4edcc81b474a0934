"""Transaction ledger: postings and the human-readable event history."""

import logging
from collections.abc import Mapping
from decimal import Decimal

from .currency import CurrencyTable
from .exceptions import InvalidShareWeightError, NoShareRecipientsError
from .models import Posting
from .money import format_minor, to_decimal, to_minor_units
from .participants import ParticipantRegistry

logger = logging.getLogger(__name__)


class Ledger:
    """Append-only record of postings built from transfers and expenses.

    Each record call validates every lookup before appending anything, so a
    failing call leaves both postings and history untouched.
    """

    def __init__(self, registry: ParticipantRegistry, currencies: CurrencyTable):
        """Initialize an empty ledger over a registry and currency table."""
        self.registry = registry
        self.currencies = currencies
        self._postings: list[Posting] = []
        self._history: list[str] = []

    @property
    def base_currency(self) -> str:
        return self.currencies.base_currency

    @property
    def postings(self) -> tuple[Posting, ...]:
        return tuple(self._postings)

    def history(self) -> tuple[str, ...]:
        """Event descriptions in recording order."""
        return tuple(self._history)

    def record_transfer(
        self,
        source: str,
        to: str,
        what: str,
        amount: Decimal | float | int | str,
        currency: str,
    ) -> None:
        """
        Record a direct payment from ``source`` to ``to``.

        Args:
            source: Name of the paying participant
            to: Name of the receiving participant
            what: Free-text label
            amount: Amount in ``currency``
            currency: Currency code of ``amount``

        Raises:
            UnknownParticipantError: If either name is unknown
            UnknownCurrencyError: If the currency has no rate
        """
        amount = to_decimal(amount)
        rate = self.currencies.rate(currency)
        source_id = self.registry.index(source)
        to_id = self.registry.index(to)

        amount_minor = to_minor_units(amount * rate)
        shown = format_minor(to_minor_units(amount))

        self._history.append(
            f"{self.registry.name(source_id)} gave {shown} {currency}"
            f"{self._base_currency_text(amount, currency)} "
            f"to {self.registry.name(to_id)} for '{what}'."
        )
        self._postings.append(
            Posting(participant_id=source_id, amount_minor=-amount_minor)
        )
        self._postings.append(Posting(participant_id=to_id, amount_minor=amount_minor))

        logger.debug(
            f"Transfer {source} -> {to}: {format_minor(amount_minor)} {self.base_currency}"
        )

    def record_expense(
        self,
        by: str,
        split: Mapping[str, int],
        what: str,
        amount: Decimal | float | int | str,
        currency: str,
    ) -> None:
        """
        Record an expense paid by ``by`` and shared by weight.

        Each recipient's share is ``amount * rate * weight / total_weight``,
        rounded to minor units independently. The recipients' postings can
        therefore differ from the payer's posting by up to one minor unit
        per recipient; that drift surfaces as a settlement residual.

        Args:
            by: Name of the paying participant
            split: Participant name -> non-negative integer weight
            what: Free-text label
            amount: Amount in ``currency``
            currency: Currency code of ``amount``

        Raises:
            UnknownParticipantError: If the payer or a split name is unknown
            UnknownCurrencyError: If the currency has no rate
            InvalidShareWeightError: If a weight is negative
            NoShareRecipientsError: If every weight is zero
        """
        amount = to_decimal(amount)

        # Weights indexed by participant identity
        weights = [0] * len(self.registry)
        for name, weight in split.items():
            if weight < 0:
                raise InvalidShareWeightError(
                    f"Expense '{what}' has negative weight {weight} for '{name}'"
                )
            weights[self.registry.index(name)] = weight

        denominator = sum(weights)
        if denominator == 0:
            raise NoShareRecipientsError(what)

        rate = self.currencies.rate(currency)
        by_id = self.registry.index(by)
        amount_base = amount * rate
        shown = format_minor(to_minor_units(amount))

        entry = [
            f"{self.registry.name(by_id)} paid {shown} {currency}"
            f"{self._base_currency_text(amount, currency)} "
            f"for '{what}', which is split:"
        ]
        postings = [
            Posting(participant_id=by_id, amount_minor=-to_minor_units(amount_base))
        ]

        for participant_id, weight in enumerate(weights):
            if weight == 0:
                continue

            share_minor = to_minor_units(amount_base * weight / denominator)
            postings.append(
                Posting(participant_id=participant_id, amount_minor=share_minor)
            )
            entry.append(
                f"    {self.registry.name(participant_id)} {weight}/{denominator} "
                f"({format_minor(share_minor)} {self.base_currency})"
            )

        self._postings.extend(postings)
        self._history.append("\n".join(entry))

        logger.debug(
            f"Expense '{what}' by {by}: {format_minor(-postings[0].amount_minor)} "
            f"{self.base_currency} split {len(postings) - 1} ways"
        )

    def _base_currency_text(self, amount: Decimal, currency: str) -> str:
        """Parenthetical base-currency equivalent, empty for the base itself."""
        if currency == self.base_currency:
            return ""

        base_minor = to_minor_units(abs(amount) * self.currencies.rate(currency))
        return f" ({format_minor(base_minor)} {self.base_currency})"
