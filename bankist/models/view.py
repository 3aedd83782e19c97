"""
View Models

These are the fully computed structures handed to the presentation
surface. The renderer never reads an Account directly; it only sees
these models.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class MovementKind(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class MovementRow(BaseModel):
    """One row of the movements list."""

    position: int = Field(
        ...,
        ge=1,
        description="1-based position of the movement in chronological order"
    )
    kind: MovementKind
    amount: Decimal
    date: datetime
    date_label: str = Field(
        ...,
        description="'Today', 'Yesterday', 'N days ago' or a locale date"
    )
    formatted_amount: str


class LedgerView(BaseModel):
    """
    Derived figures for one account.

    Rows are in display order: chronological, or ascending by amount
    when sorted_by_amount is set.
    """

    rows: list[MovementRow] = Field(default_factory=list)
    sorted_by_amount: bool = False

    balance: Decimal
    total_in: Decimal
    total_out: Decimal
    interest: Decimal

    formatted_balance: str
    formatted_total_in: str
    formatted_total_out: str
    formatted_interest: str


class DashboardView(BaseModel):
    """Everything the page shows at a given moment."""

    visible: bool = Field(
        ...,
        description="Whether the account area is shown at all"
    )
    welcome_text: str
    countdown_display: str = Field(
        default="",
        description="Remaining session time as MM:SS"
    )
    as_of_label: str = Field(
        default="",
        description="Locale-formatted current date and time"
    )
    ledger: Optional[LedgerView] = None
