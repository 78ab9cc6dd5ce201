"""Custom exceptions for Stock Clerk."""

from pathlib import Path


class StockClerkError(Exception):
    """Base exception for stock clerk errors."""


class MoneyUnderflowError(StockClerkError, ArithmeticError):
    """Raised when a subtraction would produce a negative amount."""

    def __init__(self, minuend: object, subtrahend: object):
        self.minuend = minuend
        self.subtrahend = subtrahend
        super().__init__(f"Cannot subtract {subtrahend} from {minuend}: result is negative")


class MoneyOverflowError(StockClerkError, ArithmeticError):
    """Raised when an amount exceeds the largest representable value."""

    def __init__(self, whole: int, limit: int):
        self.whole = whole
        self.limit = limit
        super().__init__(f"Amount overflow: {whole} whole units exceeds {limit}")


class UnderwaterPositionError(StockClerkError):
    """Raised when vested shares are worth less than it costs to exercise them."""

    def __init__(self, cost: object, revenue: object):
        self.cost = cost
        self.revenue = revenue
        super().__init__(
            f"Vested position is underwater: cost={cost}, revenue={revenue}"
        )


class DataValidationError(StockClerkError):
    """Raised when user input data fails validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error on '{field}': {message}")


class TaxTableError(StockClerkError):
    """Raised when a tax table cannot be loaded or is inconsistent."""

    def __init__(self, source: str | Path, message: str):
        self.source = str(source)
        super().__init__(f"Tax table error from {source}: {message}")


class PriceFetchError(StockClerkError):
    """Raised when the current share price cannot be fetched."""

    def __init__(self, ticker: str, message: str):
        self.ticker = ticker
        super().__init__(f"Could not fetch share price for {ticker}: {message}")
