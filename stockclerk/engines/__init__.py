"""Calculation engines."""

from stockclerk.engines.allocator import TaxBracketAllocator
from stockclerk.engines.brackets import tax_table_for_year
from stockclerk.engines.clerk import StockClerk
from stockclerk.engines.vesting import VestingEvaluator, vesting_schedule

__all__ = [
    "StockClerk",
    "TaxBracketAllocator",
    "VestingEvaluator",
    "tax_table_for_year",
    "vesting_schedule",
]
