"""Data ingestion adapters."""

from stockclerk.ingestion.tax_table import TaxTableAdapter
from stockclerk.ingestion.user_data import UserDataAdapter

__all__ = ["TaxTableAdapter", "UserDataAdapter"]
