"""Exchange rate lookup relative to the base currency."""

import logging
from collections.abc import Mapping
from decimal import Decimal

from .exceptions import UnknownCurrencyError
from .money import to_decimal

logger = logging.getLogger(__name__)


class CurrencyTable:
    """Maps currency codes to "units of base per 1 unit of this currency".

    The base currency is registered first with rate 1; later entries for the
    same code overwrite earlier ones.
    """

    def __init__(
        self,
        base_currency: str,
        rates: Mapping[str, Decimal | float | int | str] | None = None,
    ):
        """Initialize the table with the base currency and optional rates."""
        self.base_currency = base_currency
        self._rates: dict[str, Decimal] = {base_currency: Decimal("1")}

        for code, rate in (rates or {}).items():
            self.register(code, rate)

    def register(self, code: str, rate: Decimal | float | int | str) -> None:
        """Register (or overwrite) the rate for a currency code."""
        value = to_decimal(rate)
        if value <= 0:
            raise ValueError(f"Exchange rate for '{code}' must be positive, got {rate}")
        if code == self.base_currency and value != 1:
            raise ValueError(
                f"Base currency '{code}' must have rate 1, got {rate}"
            )

        if code in self._rates:
            logger.debug(f"Overwriting exchange rate for {code}: {value}")
        self._rates[code] = value

    def rate(self, code: str) -> Decimal:
        """
        Look up the conversion rate for a currency.

        Raises:
            UnknownCurrencyError: If the code was never registered
        """
        try:
            return self._rates[code]
        except KeyError:
            raise UnknownCurrencyError(code) from None

    def to_base(self, amount: Decimal, code: str) -> Decimal:
        """Convert an amount in ``code`` to the base currency (unrounded)."""
        return amount * self.rate(code)

    def __contains__(self, code: object) -> bool:
        return code in self._rates
