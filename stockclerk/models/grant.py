"""Grant and filer input models."""

from datetime import date
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from stockclerk.models.enums import FilingStatus
from stockclerk.models.money import Money


class Grant(BaseModel):
    """An option award: a fixed share count at a fixed price, vesting from ``start``.

    Grants are frozen and compared by value, so identical grants in the input
    collapse into a single entry when used as mapping keys.
    """

    model_config = ConfigDict(frozen=True)

    price: Money
    total: int = Field(ge=0)
    start: date

    def __str__(self) -> str:
        return f"{self.total:,} shares @ {self.price} from {self.start.isoformat()}"


def _coerce_status(value: object) -> object:
    if isinstance(value, str):
        return FilingStatus.parse(value)
    return value


StatusField = Annotated[FilingStatus, BeforeValidator(_coerce_status)]


class Filer(BaseModel):
    model_config = ConfigDict(frozen=True)

    income: Money
    filing_status: StatusField


class UserData(BaseModel):
    """Contents of a user data file: the filer plus their grants."""

    income: Money
    filing_status: StatusField
    grants: list[Grant] = Field(default_factory=list)

    @property
    def filer(self) -> Filer:
        return Filer(income=self.income, filing_status=self.filing_status)
