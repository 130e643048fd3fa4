from datetime import date, datetime
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator

# Short forms PostgreSQL's DATE input also takes (MDY date style)
DATE_INPUT_FORMATS = (
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%m/%d/%y",
    "%d.%m.%Y",
    "%b %d %Y",
    "%a %b %d %Y",
    "%B %d, %Y",
    "%b %d, %Y",
)


def parse_date(v):
    if not isinstance(v, str):
        return v
    text = " ".join(v.split())
    for fmt in DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    # let pydantic report the failure
    return text


class ExpenseCreate(BaseModel):
    """Create schema for an expense."""
    amount: Decimal = Field(..., description="Expense amount, two decimals")
    memo: str = Field(..., min_length=1, description="Free text description")
    created_on: date = Field(default_factory=date.today, description="Date of the expense")

    @field_validator("amount", mode="before")
    @classmethod
    def _strip_amount(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("created_on", mode="before")
    @classmethod
    def _parse_created_on(cls, v):
        return parse_date(v)
