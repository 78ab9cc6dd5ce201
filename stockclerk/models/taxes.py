"""Tax table and taxed-amount models."""

from itertools import pairwise
from typing import assert_never

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stockclerk.models.enums import FilingStatus
from stockclerk.models.money import Money


class TaxBracket(BaseModel):
    """A marginal bracket on taxable income, starting at ``start``.

    Rates are whole percentages. ``base_amount`` is the tax owed on all
    taxable income below ``start``.
    """

    model_config = ConfigDict(frozen=True)

    start: Money
    rate: int = Field(ge=0, le=100)
    capital_gain_rate: int = Field(default=0, ge=0, le=100)
    base_amount: Money = Field(default_factory=Money.zero)


class TaxInformation(BaseModel):
    """Brackets and standard deduction for one filing status."""

    model_config = ConfigDict(frozen=True)

    brackets: list[TaxBracket]
    deduction: Money

    @field_validator("brackets")
    @classmethod
    def _check_brackets(cls, brackets: list[TaxBracket]) -> list[TaxBracket]:
        if not brackets:
            raise ValueError("bracket list is empty")
        for lower, upper in pairwise(brackets):
            if upper.start <= lower.start:
                raise ValueError(
                    f"bracket starts must strictly increase: {upper.start} follows {lower.start}"
                )
        return brackets

    def ranges(self) -> list[tuple[TaxBracket, Money | None]]:
        """Pair each bracket with its exclusive upper bound; the top bracket has none."""
        uppers: list[Money | None] = [b.start for b in self.brackets[1:]]
        uppers.append(None)
        return list(zip(self.brackets, uppers))

    @property
    def top_rate(self) -> int:
        return self.brackets[-1].rate


class TaxTable(BaseModel):
    model_config = ConfigDict(frozen=True)

    single: TaxInformation
    married: TaxInformation
    married_separately: TaxInformation
    head_of_household: TaxInformation

    def for_status(self, status: FilingStatus) -> TaxInformation:
        match status:
            case FilingStatus.SINGLE:
                return self.single
            case FilingStatus.MFJ:
                return self.married
            case FilingStatus.MFS:
                return self.married_separately
            case FilingStatus.HOH:
                return self.head_of_household
            case _:
                assert_never(status)


class TaxedAmount(BaseModel):
    """Portion of profit taxed at a single marginal rate."""

    model_config = ConfigDict(frozen=True)

    rate: int = Field(ge=0, le=100)
    amount: Money

    @property
    def taxes(self) -> Money:
        return self.amount * (self.rate / 100)
