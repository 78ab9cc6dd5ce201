"""Data models for Stock Clerk."""

from stockclerk.models.calculation import GrantPosition, StockCalculation
from stockclerk.models.enums import FilingStatus
from stockclerk.models.equity import Equity, StockPosition
from stockclerk.models.grant import Filer, Grant, UserData
from stockclerk.models.money import Money
from stockclerk.models.taxes import TaxBracket, TaxedAmount, TaxInformation, TaxTable

__all__ = [
    "Equity",
    "Filer",
    "FilingStatus",
    "Grant",
    "GrantPosition",
    "Money",
    "StockCalculation",
    "StockPosition",
    "TaxBracket",
    "TaxedAmount",
    "TaxInformation",
    "TaxTable",
    "UserData",
]
