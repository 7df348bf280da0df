"""Fixed-point currency amounts."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

# The POS API quotes whole-currency amounts (VND), so the minor unit is 1.
MINOR_UNIT = Decimal("1")
CURRENCY_SYMBOL = "đ"

AmountLike = Union["Money", Decimal, int, str, float]


@dataclass(frozen=True, order=True)
class Money:
    """Non-negative currency amount quantized to the minor unit."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise TypeError("Money amount must be a Decimal")
        if not self.amount.is_finite():
            raise ValueError("Money amount must be finite")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")
        object.__setattr__(self, "amount", quantize(self.amount))

    @classmethod
    def of(cls, value: AmountLike) -> "Money":
        if isinstance(value, Money):
            return value
        if isinstance(value, float):
            # str() keeps the shortest decimal repr instead of the binary expansion.
            value = str(value)
        try:
            return cls(Decimal(value))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid money amount: {value!r}") from exc

    @classmethod
    def zero(cls) -> "Money":
        return cls(Decimal(0))

    def format(self) -> str:
        return f"{self.amount:,f} {CURRENCY_SYMBOL}"

    def __str__(self) -> str:
        return f"{self.amount:f}"


def quantize(value: Decimal) -> Decimal:
    """Round half up to the currency's minor unit."""

    return value.quantize(MINOR_UNIT, rounding=ROUND_HALF_UP)


__all__ = ["Money", "quantize", "MINOR_UNIT", "CURRENCY_SYMBOL"]
