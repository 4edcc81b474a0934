"""Settlement engine: balances, care-of folding and greedy pairing.

Balances are a list indexed by participant identity. The pairing pass walks
that list left to right, so for a fixed participant order the output is
deterministic, though not minimal in number of payments.
"""

import logging

from .care_of import CareOfGraph
from .ledger import Ledger
from .models import Residual, SettlementEntry, SettlementPlan
from .money import format_minor

logger = logging.getLogger(__name__)


def aggregate_balances(ledger: Ledger) -> list[int]:
    """
    Sum postings into one signed balance per participant.

    Positive means the participant owes the group, negative means they are
    owed.

    Returns:
        Balances in minor units, in registry order
    """
    balances = [0] * len(ledger.registry)

    for posting in ledger.postings:
        balances[posting.participant_id] += posting.amount_minor

    return balances


def fold_care_of(balances: list[int], care_of: CareOfGraph) -> list[SettlementEntry]:
    """
    Move each child's balance onto its guardian, in registry order.

    Mutates ``balances``. Each child is handled on its own, so two children
    of one guardian can produce opposing payments.

    Returns:
        One care_of entry per child with a nonzero balance
    """
    entries = []

    for child_id in range(len(balances)):
        parent_id = care_of.parent_of(child_id)
        amount = balances[child_id]

        if parent_id is None or amount == 0:
            continue

        if amount > 0:
            payer_id, payee_id = child_id, parent_id
        else:
            payer_id, payee_id = parent_id, child_id

        entries.append(
            SettlementEntry(
                payer_id=payer_id,
                payee_id=payee_id,
                amount_minor=abs(amount),
                kind="care_of",
            )
        )

        balances[parent_id] += amount
        balances[child_id] = 0

    return entries


def greedy_pairing(balances: list[int]) -> list[SettlementEntry]:
    """
    Drain each balance against every later balance of opposite sign.

    Mutates ``balances``. For participant i, every j > i is visited once in
    order; the amount moved is the smaller of the two magnitudes.

    Returns:
        Pairwise entries in emission order
    """
    entries = []
    count = len(balances)

    for i in range(count - 1):
        j = i + 1

        while balances[i] != 0 and j < count:
            if balances[i] * balances[j] < 0:
                sign = 1 if balances[i] > 0 else -1
                amount = sign * min(abs(balances[i]), abs(balances[j]))

                balances[i] -= amount
                balances[j] += amount

                if amount > 0:
                    payer_id, payee_id = i, j
                else:
                    payer_id, payee_id = j, i

                entries.append(
                    SettlementEntry(
                        payer_id=payer_id, payee_id=payee_id, amount_minor=abs(amount)
                    )
                )

            j += 1

    return entries


def settle(ledger: Ledger, care_of: CareOfGraph | None = None) -> SettlementPlan:
    """
    Compute the settlement plan for a ledger.

    Pure with respect to the ledger: calling it again yields the same plan.

    Args:
        ledger: The fully recorded ledger
        care_of: Optional guardian relationships folded before pairing

    Returns:
        Care-of entries followed by pairwise entries, plus residuals
    """
    balances = aggregate_balances(ledger)

    entries = []
    if care_of is not None:
        entries.extend(fold_care_of(balances, care_of))

    entries.extend(greedy_pairing(balances))

    residuals = [
        Residual(participant_id=participant_id, amount_minor=amount)
        for participant_id, amount in enumerate(balances)
        if amount != 0
    ]

    logger.info(
        f"Settled {len(balances)} participants with {len(entries)} payments "
        f"({len(residuals)} residuals)"
    )
    for residual in residuals:
        logger.warning(
            f"Residual for {ledger.registry.name(residual.participant_id)}: "
            f"{format_minor(residual.amount_minor)} {ledger.base_currency}"
        )

    return SettlementPlan(entries=tuple(entries), residuals=tuple(residuals))
