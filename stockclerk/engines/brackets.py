"""Tax bracket configuration.

Federal ordinary income brackets, long-term capital gains thresholds and
standard deductions, keyed by tax year and filing status. Never hardcode
brackets in computation functions; build a TaxTable with tax_table_for_year().

Sources:
  - 2024: IRS Rev. Proc. 2023-34
  - 2025: IRS Rev. Proc. 2024-40
"""

import logging
from decimal import Decimal

from stockclerk.exceptions import TaxTableError
from stockclerk.models.enums import FilingStatus
from stockclerk.models.money import Money
from stockclerk.models.taxes import TaxBracket, TaxInformation, TaxTable

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Federal ordinary income brackets: {year: {filing_status: [(upper_bound, rate), ...]}}
# Upper bound is Decimal or None for the top bracket. Rates are whole percentages.
# ---------------------------------------------------------------------------
FEDERAL_BRACKETS: dict[int, dict[FilingStatus, list[tuple[Decimal | None, int]]]] = {
    2024: {
        FilingStatus.SINGLE: [
            (Decimal("11600"), 10),
            (Decimal("47150"), 12),
            (Decimal("100525"), 22),
            (Decimal("191950"), 24),
            (Decimal("243725"), 32),
            (Decimal("609350"), 35),
            (None, 37),
        ],
        FilingStatus.MFJ: [
            (Decimal("23200"), 10),
            (Decimal("94300"), 12),
            (Decimal("201050"), 22),
            (Decimal("383900"), 24),
            (Decimal("487450"), 32),
            (Decimal("731200"), 35),
            (None, 37),
        ],
        FilingStatus.MFS: [
            (Decimal("11600"), 10),
            (Decimal("47150"), 12),
            (Decimal("100525"), 22),
            (Decimal("191950"), 24),
            (Decimal("243725"), 32),
            (Decimal("365600"), 35),
            (None, 37),
        ],
        FilingStatus.HOH: [
            (Decimal("16550"), 10),
            (Decimal("63100"), 12),
            (Decimal("100500"), 22),
            (Decimal("191950"), 24),
            (Decimal("243700"), 32),
            (Decimal("609350"), 35),
            (None, 37),
        ],
    },
    2025: {
        FilingStatus.SINGLE: [
            (Decimal("11925"), 10),
            (Decimal("48475"), 12),
            (Decimal("103350"), 22),
            (Decimal("197300"), 24),
            (Decimal("250525"), 32),
            (Decimal("626350"), 35),
            (None, 37),
        ],
        FilingStatus.MFJ: [
            (Decimal("23850"), 10),
            (Decimal("96950"), 12),
            (Decimal("206700"), 22),
            (Decimal("394600"), 24),
            (Decimal("501050"), 32),
            (Decimal("751600"), 35),
            (None, 37),
        ],
        FilingStatus.MFS: [
            (Decimal("11925"), 10),
            (Decimal("48475"), 12),
            (Decimal("103350"), 22),
            (Decimal("197300"), 24),
            (Decimal("250525"), 32),
            (Decimal("375800"), 35),
            (None, 37),
        ],
        FilingStatus.HOH: [
            (Decimal("17000"), 10),
            (Decimal("64850"), 12),
            (Decimal("103350"), 22),
            (Decimal("197300"), 24),
            (Decimal("250500"), 32),
            (Decimal("626350"), 35),
            (None, 37),
        ],
    },
}

# ---------------------------------------------------------------------------
# Federal standard deduction
# ---------------------------------------------------------------------------
FEDERAL_STANDARD_DEDUCTION: dict[int, dict[FilingStatus, Decimal]] = {
    2024: {
        FilingStatus.SINGLE: Decimal("14600"),
        FilingStatus.MFJ: Decimal("29200"),
        FilingStatus.MFS: Decimal("14600"),
        FilingStatus.HOH: Decimal("21900"),
    },
    2025: {
        FilingStatus.SINGLE: Decimal("15000"),
        FilingStatus.MFJ: Decimal("30000"),
        FilingStatus.MFS: Decimal("15000"),
        FilingStatus.HOH: Decimal("22500"),
    },
}

# ---------------------------------------------------------------------------
# Federal LTCG rate brackets: (upper_bound, rate)
# Taxable-income thresholds for the 0%/15%/20% rates, IRC Section 1(h).
# ---------------------------------------------------------------------------
FEDERAL_LTCG_BRACKETS: dict[int, dict[FilingStatus, list[tuple[Decimal | None, int]]]] = {
    2024: {
        FilingStatus.SINGLE: [(Decimal("47025"), 0), (Decimal("518900"), 15), (None, 20)],
        FilingStatus.MFJ: [(Decimal("94050"), 0), (Decimal("583750"), 15), (None, 20)],
        FilingStatus.MFS: [(Decimal("47025"), 0), (Decimal("291850"), 15), (None, 20)],
        FilingStatus.HOH: [(Decimal("63000"), 0), (Decimal("551350"), 15), (None, 20)],
    },
    2025: {
        FilingStatus.SINGLE: [(Decimal("48350"), 0), (Decimal("533400"), 15), (None, 20)],
        FilingStatus.MFJ: [(Decimal("96700"), 0), (Decimal("600050"), 15), (None, 20)],
        FilingStatus.MFS: [(Decimal("48350"), 0), (Decimal("300000"), 15), (None, 20)],
        FilingStatus.HOH: [(Decimal("64750"), 0), (Decimal("566700"), 15), (None, 20)],
    },
}

AVAILABLE_TAX_YEARS: list[int] = sorted(FEDERAL_BRACKETS)
DEFAULT_TAX_YEAR = AVAILABLE_TAX_YEARS[-1]


def tax_table_for_year(year: int) -> TaxTable:
    """Build the bundled federal TaxTable for ``year``."""
    if year not in FEDERAL_BRACKETS:
        available = ", ".join(str(y) for y in AVAILABLE_TAX_YEARS)
        raise TaxTableError(f"bundled {year} table", f"no brackets for {year}; available: {available}")
    logger.debug("Building bundled tax table for %d", year)
    return TaxTable(
        single=_tax_information(year, FilingStatus.SINGLE),
        married=_tax_information(year, FilingStatus.MFJ),
        married_separately=_tax_information(year, FilingStatus.MFS),
        head_of_household=_tax_information(year, FilingStatus.HOH),
    )


def _tax_information(year: int, status: FilingStatus) -> TaxInformation:
    """Convert upper-bound brackets into start-based brackets with base amounts."""
    brackets: list[TaxBracket] = []
    start = Decimal("0")
    base = Decimal("0")
    for upper_bound, rate in FEDERAL_BRACKETS[year][status]:
        brackets.append(
            TaxBracket(
                start=Money.new(start),
                rate=rate,
                capital_gain_rate=_ltcg_rate_at(year, status, start),
                base_amount=Money.new(base),
            )
        )
        if upper_bound is None:
            break
        base += (upper_bound - start) * rate / 100
        start = upper_bound
    return TaxInformation(
        brackets=brackets,
        deduction=Money.new(FEDERAL_STANDARD_DEDUCTION[year][status]),
    )


def _ltcg_rate_at(year: int, status: FilingStatus, taxable_income: Decimal) -> int:
    for upper_bound, rate in FEDERAL_LTCG_BRACKETS[year][status]:
        if upper_bound is None or taxable_income < upper_bound:
            return rate
    raise TaxTableError(f"bundled {year} table", f"LTCG brackets for {status} have no top bracket")
