"""Tests for marginal bracket allocation of exercise profit."""

import pytest

from stockclerk.engines.allocator import TaxBracketAllocator
from stockclerk.models.enums import FilingStatus
from stockclerk.models.money import Money
from stockclerk.models.taxes import TaxedAmount


@pytest.fixture
def allocator():
    return TaxBracketAllocator()


def _pairs(allocations: list[TaxedAmount]) -> list[tuple[int, Money]]:
    return [(a.rate, a.amount) for a in allocations]


class TestScenarios:
    def test_zero_profit_is_empty(self, allocator, table_2024):
        result = allocator.allocate(
            Money.zero(), Money.new(170000), FilingStatus.SINGLE, table_2024
        )
        assert result == []

    def test_profit_within_one_bracket(self, allocator, flat_table):
        result = allocator.allocate(
            Money.new(35000), Money.new(160000), FilingStatus.SINGLE, flat_table
        )
        assert _pairs(result) == [(32, Money.new(35000))]
        assert result[0].taxes == Money.new(11200)

    def test_profit_spanning_brackets(self, allocator, flat_table):
        result = allocator.allocate(
            Money.new(100000), Money.new(150000), FilingStatus.SINGLE, flat_table
        )
        assert _pairs(result) == [
            (35, Money.new(50000)),
            (32, Money.new(42500)),
            (24, Money.new(7500)),
        ]

    def test_income_above_top_bracket(self, allocator, table_2024):
        result = allocator.allocate(
            Money.new(40000), Money.new(1000000), FilingStatus.SINGLE, table_2024
        )
        assert _pairs(result) == [(37, Money.new(40000))]

    def test_uses_filing_status(self, allocator, table_2024):
        married = allocator.allocate(
            Money.new(10000), Money.new(200000), FilingStatus.MFJ, table_2024
        )
        single = allocator.allocate(
            Money.new(10000), Money.new(200000), FilingStatus.SINGLE, table_2024
        )
        assert _pairs(married) == [(22, Money.new(10000))]
        assert _pairs(single) == [(32, Money.new(3450)), (24, Money.new(6550))]


class TestBoundaries:
    def test_income_reaching_bracket_start_stays_in_lower_bracket(self, allocator, flat_table):
        # 150,000 + 50,000 ends exactly at the 35% start.
        result = allocator.allocate(
            Money.new(50000), Money.new(150000), FilingStatus.SINGLE, flat_table
        )
        assert _pairs(result) == [(32, Money.new(42500)), (24, Money.new(7500))]

    def test_first_cent_above_bracket_start(self, allocator, flat_table):
        result = allocator.allocate(
            Money.new("0.01"), Money.new(200000), FilingStatus.SINGLE, flat_table
        )
        assert _pairs(result) == [(35, Money.new("0.01"))]

    def test_deduction_shifts_brackets(self, allocator, table_2024):
        # Single 2024: 10% covers gross income 14,600 to 26,200.
        result = allocator.allocate(
            Money.new(11600), Money.new(14600), FilingStatus.SINGLE, table_2024
        )
        assert _pairs(result) == [(10, Money.new(11600))]

    def test_profit_below_deduction_is_untaxed(self, allocator, table_2024):
        result = allocator.allocate(
            Money.new(10000), Money.new(10000), FilingStatus.SINGLE, table_2024
        )
        assert _pairs(result) == [(10, Money.new(5400)), (0, Money.new(4600))]

    def test_no_income(self, allocator, table_2024):
        result = allocator.allocate(
            Money.new(5000), Money.zero(), FilingStatus.SINGLE, table_2024
        )
        assert _pairs(result) == [(0, Money.new(5000))]


class TestProperties:
    @pytest.mark.parametrize("status", list(FilingStatus))
    @pytest.mark.parametrize("income", ["0", "20000", "95000.55", "250000", "800000"])
    @pytest.mark.parametrize("profit", ["0.01", "3262.50", "75000", "1200000.99"])
    def test_amounts_sum_to_profit_in_decreasing_rate_order(
        self, allocator, table_2024, status, income, profit
    ):
        profit = Money.new(profit)
        result = allocator.allocate(profit, Money.new(income), status, table_2024)
        assert sum((a.amount for a in result), Money.zero()) == profit
        rates = [a.rate for a in result]
        assert all(high > low for high, low in zip(rates, rates[1:]))
        assert all(a.amount > Money.zero() for a in result)

    def test_deterministic(self, allocator, table_2024):
        args = (Money.new(123456.78), Money.new(98765.43), FilingStatus.HOH, table_2024)
        assert allocator.allocate(*args) == allocator.allocate(*args)
