"""
Account Model for Bankist

An account is the only piece of ground truth in the system. Everything
the user sees about it (balance, totals, interest) is derived from the
movement list on demand.

DESIGN DECISION: The login handle is derived once, when the account is
constructed, from the owner's name. Balance is a read-only property over
the movements so it can never drift out of sync with them.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


def derive_user_handle(owner_name: str) -> str:
    """
    Derive the login handle from an owner name.

    Lowercase initials of each word: "Jessica Davis" -> "jd".
    """
    return "".join(word[0] for word in owner_name.lower().split())


class Account(BaseModel):
    """
    A bank account held in memory.

    CRITICAL: movements and movement_dates are parallel sequences.
    Always append through record_movement() so they stay the same length.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    owner_name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Full display name of the account holder"
    )
    pin: int = Field(
        ...,
        description="Numeric credential, compared in plaintext"
    )
    movements: list[Decimal] = Field(
        default_factory=list,
        description="Signed amounts: positive = deposit, negative = withdrawal"
    )
    movement_dates: list[datetime] = Field(
        default_factory=list,
        description="Timestamp of each movement, same index as movements"
    )
    interest_rate: Decimal = Field(
        ...,
        ge=0,
        description="Interest percentage paid on each deposit"
    )
    currency: str = Field(
        default="USD",
        min_length=3,
        max_length=3,
        description="ISO currency code used for display"
    )
    locale: str = Field(
        default="en-US",
        description="Locale tag used for display"
    )

    # Derived at construction, see derive_user_handle
    user_handle: str = Field(
        default="",
        description="Login/transfer identifier (owner initials)"
    )

    @field_validator('currency')
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        return v.upper()

    @model_validator(mode='after')
    def derive_handle_and_check_dates(self) -> 'Account':
        """Derive the handle and enforce the parallel-sequence invariant."""
        if len(self.movements) != len(self.movement_dates):
            raise ValueError(
                "movements and movement_dates must have the same length "
                f"({len(self.movements)} != {len(self.movement_dates)})"
            )
        self.user_handle = derive_user_handle(self.owner_name)
        if not self.user_handle:
            raise ValueError("Owner name must contain at least one word")
        return self

    @property
    def balance(self) -> Decimal:
        """Sum of all movements."""
        return sum(self.movements, Decimal("0"))

    @property
    def first_name(self) -> str:
        return self.owner_name.split()[0]

    def record_movement(self, amount: Decimal, when: datetime) -> None:
        """Append a movement and its timestamp together."""
        self.movements.append(Decimal(amount))
        self.movement_dates.append(when)

    def matches_credentials(self, handle: str, pin: int) -> bool:
        """Check a handle/PIN pair against this account."""
        return self.user_handle == handle and self.pin == pin
