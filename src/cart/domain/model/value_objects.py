"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from cart.domain.exceptions import InvalidPriceError, InvalidQuantityError

# Prices are persisted as signed 64-bit integers.
MAX_PRICE_AMOUNT = 2**63 - 1


@dataclass(frozen=True)
class Price:
    """Non-negative monetary amount in the smallest currency unit.

    Amounts are plain integers; there is a single currency, so no
    fractional units or currency codes are carried around.
    """

    amount: int

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise InvalidPriceError(
                f"Price amount must be an integer, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise InvalidPriceError(f"Price amount cannot be negative, got {self.amount}")
        if self.amount > MAX_PRICE_AMOUNT:
            raise InvalidPriceError(f"Price amount {self.amount} exceeds the supported maximum")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Price) -> Price:
        return Price(self.amount + other.amount)

    def __sub__(self, other: Price) -> Price:
        result = self.amount - other.amount
        if result < 0:
            raise InvalidPriceError("Price subtraction would result in a negative amount")
        return Price(result)

    def __mul__(self, factor: int) -> Price:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Price by int, got {type(factor).__name__}")
        return Price(self.amount * factor)

    def __str__(self) -> str:
        return f"{self.amount:,}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Price:
        return Price(0)

    @staticmethod
    def of(amount: str | int) -> Price:
        """Convenient factory that coerces digit strings safely."""
        if isinstance(amount, str):
            try:
                amount = int(amount.strip().replace(",", ""))
            except ValueError as exc:
                raise InvalidPriceError(f"Invalid price amount: {amount!r}") from exc
        return Price(amount)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidQuantityError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise InvalidQuantityError("Quantity must be positive")

    def increased(self, by: int = 1) -> Quantity:
        return Quantity(self.value + by)

    def __str__(self) -> str:
        return str(self.value)
