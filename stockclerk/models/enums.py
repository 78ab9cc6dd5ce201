"""Enumerations for Stock Clerk."""

from enum import StrEnum


class FilingStatus(StrEnum):
    SINGLE = "SINGLE"
    MFJ = "MARRIED_FILING_JOINTLY"
    MFS = "MARRIED_FILING_SEPARATELY"
    HOH = "HEAD_OF_HOUSEHOLD"

    @classmethod
    def parse(cls, raw: str) -> "FilingStatus":
        """Resolve a filing status from a short code, table key or enum value."""
        key = raw.strip().upper()
        try:
            return cls(_ALIASES.get(key, key))
        except ValueError:
            valid = ", ".join(sorted(set(_ALIASES) | {status.value for status in cls}))
            raise ValueError(f"Invalid filing status '{raw}'. Valid: {valid}") from None


_ALIASES: dict[str, str] = {
    "SINGLE": "SINGLE",
    "MFJ": "MARRIED_FILING_JOINTLY",
    "MARRIED": "MARRIED_FILING_JOINTLY",
    "MFS": "MARRIED_FILING_SEPARATELY",
    "MARRIED_SEPARATELY": "MARRIED_FILING_SEPARATELY",
    "HOH": "HEAD_OF_HOUSEHOLD",
}
