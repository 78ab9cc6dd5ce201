"""Plain-text calculation summary report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from stockclerk.models.calculation import StockCalculation

TEMPLATE_DIR = Path(__file__).parent / "templates"


class CalculationSummaryGenerator:
    """Generates a human-readable summary of a stock calculation."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(self, calculation: StockCalculation) -> str:
        template = self.env.get_template("calculation_summary.txt")
        return template.render(calc=calculation)

    def write(self, calculation: StockCalculation, output: Path) -> Path:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(self.render(calculation))
        return output
