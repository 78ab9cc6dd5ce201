"""Vested and unvested stock positions derived from a grant."""

from pydantic import BaseModel, ConfigDict, Field

from stockclerk.models.money import Money


class StockPosition(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = Field(ge=0)
    cost: Money
    revenue: Money

    @classmethod
    def priced(cls, count: int, grant_price: Money, share_price: Money) -> "StockPosition":
        """Position of ``count`` shares bought at ``grant_price`` and sold at ``share_price``."""
        return cls(count=count, cost=grant_price * count, revenue=share_price * count)

    @classmethod
    def empty(cls) -> "StockPosition":
        return cls(count=0, cost=Money.zero(), revenue=Money.zero())

    @property
    def is_underwater(self) -> bool:
        return self.revenue < self.cost

    @property
    def gross_profit(self) -> Money:
        """Revenue minus cost. Raises MoneyUnderflowError for underwater positions."""
        return self.revenue - self.cost

    def __add__(self, other: object) -> "StockPosition":
        if not isinstance(other, StockPosition):
            return NotImplemented
        return StockPosition(
            count=self.count + other.count,
            cost=self.cost + other.cost,
            revenue=self.revenue + other.revenue,
        )


class Equity(BaseModel):
    model_config = ConfigDict(frozen=True)

    vested: StockPosition
    unvested: StockPosition

    @classmethod
    def empty(cls) -> "Equity":
        return cls(vested=StockPosition.empty(), unvested=StockPosition.empty())

    @property
    def total_shares(self) -> int:
        return self.vested.count + self.unvested.count

    def __add__(self, other: object) -> "Equity":
        if not isinstance(other, Equity):
            return NotImplemented
        return Equity(vested=self.vested + other.vested, unvested=self.unvested + other.unvested)
