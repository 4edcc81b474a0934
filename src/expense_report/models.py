"""Pydantic domain models for Expense Report."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# ============================================================================
# Input Models
# ============================================================================


class TransferInput(BaseModel):
    """A direct payment from one participant to another."""

    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(alias="from")
    to: str
    amount: Decimal
    currency: str
    what: str


class ExpenseInput(BaseModel):
    """A payment by one participant, split by weight across others."""

    by: str
    amount: Decimal
    currency: str
    what: str
    split: dict[str, int]

    @field_validator("split")
    @classmethod
    def _weights_not_negative(cls, split: dict[str, int]) -> dict[str, int]:
        for name, weight in split.items():
            if weight < 0:
                raise ValueError(f"Share weight for '{name}' must not be negative")
        return split


class ReportInput(BaseModel):
    """The complete input document for one report."""

    currency: str
    exchange_rates: dict[str, Decimal] = Field(default_factory=dict)
    participants: list[str] = Field(min_length=1)
    in_care_of: dict[str, str] = Field(default_factory=dict)
    transfers: list[TransferInput] = Field(default_factory=list)
    expenses: list[ExpenseInput] = Field(default_factory=list)

    @field_validator("exchange_rates")
    @classmethod
    def _rates_positive(cls, rates: dict[str, Decimal]) -> dict[str, Decimal]:
        for code, rate in rates.items():
            if rate <= 0:
                raise ValueError(f"Exchange rate for '{code}' must be positive")
        return rates

    @model_validator(mode="after")
    def _base_rate_is_one(self) -> "ReportInput":
        rate = self.exchange_rates.get(self.currency)
        if rate is not None and rate != 1:
            raise ValueError(
                f"Base currency '{self.currency}' must have rate 1, got {rate}"
            )
        return self

    @model_validator(mode="after")
    def _participants_unique(self) -> "ReportInput":
        seen = set()
        for name in self.participants:
            if name in seen:
                raise ValueError(f"Participant '{name}' is listed more than once")
            seen.add(name)
        return self


# ============================================================================
# Ledger Models
# ============================================================================


class Posting(BaseModel):
    """A signed amount attributed to one participant."""

    model_config = ConfigDict(frozen=True)

    participant_id: int
    amount_minor: int  # signed: negative=paid out, positive=received


# ============================================================================
# Settlement Models
# ============================================================================


class SettlementEntry(BaseModel):
    """A single instruction: payer pays payee this amount."""

    model_config = ConfigDict(frozen=True)

    payer_id: int
    payee_id: int
    amount_minor: int = Field(gt=0)
    kind: Literal["care_of", "pairwise"] = "pairwise"


class Residual(BaseModel):
    """A nonzero balance left over after settlement (rounding dust)."""

    model_config = ConfigDict(frozen=True)

    participant_id: int
    amount_minor: int


class SettlementPlan(BaseModel):
    """Settlement entries in emission order plus any residuals."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[SettlementEntry, ...] = ()
    residuals: tuple[Residual, ...] = ()

    @property
    def is_balanced(self) -> bool:
        """True when settlement zeroed every balance."""
        return not self.residuals
