"""Fixed-point currency amounts.

An amount is held as a whole-dollar part and a cents part so that repeated
arithmetic never accumulates binary floating-point drift. Amounts are never
negative: subtracting a larger amount from a smaller one raises
MoneyUnderflowError, and anything above MAX_WHOLE raises MoneyOverflowError.
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from stockclerk.exceptions import MoneyOverflowError, MoneyUnderflowError

CENTS_PER_UNIT = 100
MAX_WHOLE = 2**32 - 1


@dataclass(frozen=True, order=True, slots=True)
class Money:
    """A non-negative currency amount with exact two-digit precision.

    Field order matters: ordering compares ``whole`` first, then ``cents``.
    """

    whole: int
    cents: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.cents < CENTS_PER_UNIT:
            raise ValueError(f"cents must be in [0, 99], got {self.cents}")
        if self.whole < 0:
            raise ValueError(f"whole must be non-negative, got {self.whole}")
        if self.whole > MAX_WHOLE:
            raise MoneyOverflowError(self.whole, MAX_WHOLE)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, amount: "Money | int | float | Decimal | str") -> "Money":
        """Build an amount from a number, truncating the whole part and
        rounding the fraction half-up to the nearest cent."""
        if isinstance(amount, Money):
            return amount
        if isinstance(amount, bool):
            raise ValueError("Money cannot be built from a bool")
        if isinstance(amount, float):
            if not math.isfinite(amount):
                raise ValueError(f"Money must be finite, got {amount}")
            if amount < 0:
                raise ValueError(f"Money must be non-negative, got {amount}")
            whole = int(amount)
            cents = math.floor((amount - whole) * CENTS_PER_UNIT + 0.5)
            return cls.from_parts(whole, cents)

        try:
            value = Decimal(amount.strip() if isinstance(amount, str) else amount)
        except (InvalidOperation, TypeError):
            raise ValueError(f"Not a currency amount: {amount!r}") from None
        if not value.is_finite():
            raise ValueError(f"Money must be finite, got {amount}")
        if value < 0:
            raise ValueError(f"Money must be non-negative, got {amount}")
        whole = int(value)
        cents = int(((value - whole) * CENTS_PER_UNIT).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        return cls.from_parts(whole, cents)

    @classmethod
    def from_parts(cls, whole: int, cents: int) -> "Money":
        """Normalize a cents count of 100 or more into the whole part."""
        return cls(whole + cents // CENTS_PER_UNIT, cents % CENTS_PER_UNIT)

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        return cls.from_parts(0, cents)

    @classmethod
    def zero(cls) -> "Money":
        return cls(0, 0)

    @classmethod
    def max_value(cls) -> "Money":
        return cls(MAX_WHOLE, CENTS_PER_UNIT - 1)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    @property
    def in_cents(self) -> int:
        return self.whole * CENTS_PER_UNIT + self.cents

    def to_decimal(self) -> Decimal:
        return (Decimal(self.in_cents) / CENTS_PER_UNIT).quantize(Decimal("0.01"))

    def __str__(self) -> str:
        return f"${self.whole:,}.{self.cents:02d}"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return format(self.to_decimal(), format_spec)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money.from_parts(self.whole + other.whole, self.cents + other.cents)

    def __radd__(self, other: object) -> "Money":
        # Lets the builtin sum() start from 0.
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        if self < other:
            raise MoneyUnderflowError(self, other)
        whole = self.whole - other.whole
        cents = self.cents - other.cents
        if cents < 0:
            return Money(whole - 1, cents + CENTS_PER_UNIT)
        return Money(whole, cents)

    def __mul__(self, multiplier: object) -> "Money":
        if isinstance(multiplier, bool):
            return NotImplemented
        if isinstance(multiplier, int):
            if multiplier < 0:
                raise ValueError(f"Cannot multiply money by a negative count: {multiplier}")
            return Money.from_parts(self.whole * multiplier, self.cents * multiplier)
        if isinstance(multiplier, float):
            if multiplier < 0 or not math.isfinite(multiplier):
                raise ValueError(f"Invalid rate multiplier: {multiplier}")
            # The cents contribution is truncated, not rounded.
            cents = Money.from_cents(int(multiplier * self.cents))
            whole = Money.new(multiplier * self.whole)
            return whole + cents
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> float:
        if not isinstance(other, Money):
            return NotImplemented
        return self.in_cents / other.in_cents

    # ------------------------------------------------------------------
    # pydantic integration
    # ------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda money: str(money.to_decimal()), when_used="json"
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> "Money":
        if isinstance(value, (Money, int, float, Decimal, str)):
            return cls.new(value)
        raise ValueError(f"Not a currency amount: {value!r}")
