"""Report generation for Stock Clerk."""

from stockclerk.reports.console import render_brackets, render_calculation, render_schedule
from stockclerk.reports.summary import CalculationSummaryGenerator

__all__ = [
    "CalculationSummaryGenerator",
    "render_brackets",
    "render_calculation",
    "render_schedule",
]
