"""
Demo account seed data.

The two accounts the demo ships with. Handles are derived from the owner
names on construction: "js" and "jd".
"""

from bankist.models.account import Account
from bankist.services.storage.memory import InMemoryAccountRegistry

DEMO_ACCOUNTS = [
    {
        "owner_name": "Jonas Schmedtmann",
        "movements": ["200", "455.23", "-306.5", "25000", "-642.21", "-133.9", "79.97", "1300"],
        "interest_rate": "1.2",
        "pin": 1111,
        "movement_dates": [
            "2019-11-18T21:31:17.178Z",
            "2019-12-23T07:42:02.383Z",
            "2020-01-28T09:15:04.904Z",
            "2020-04-01T10:17:24.185Z",
            "2020-05-08T14:11:59.604Z",
            "2020-05-27T17:01:17.194Z",
            "2020-11-21T23:36:17.929Z",
            "2020-11-23T10:51:36.790Z",
        ],
        "currency": "EUR",
        "locale": "pt-PT",
    },
    {
        "owner_name": "Jessica Davis",
        "movements": ["5000", "3400", "-150", "-790", "-3210", "-1000", "8500", "-30"],
        "interest_rate": "1.5",
        "pin": 2222,
        "movement_dates": [
            "2019-11-01T13:15:33.035Z",
            "2019-11-30T09:48:16.867Z",
            "2019-12-25T06:04:23.907Z",
            "2020-01-25T14:18:46.235Z",
            "2020-02-05T16:33:06.386Z",
            "2020-04-10T14:43:26.374Z",
            "2020-06-25T18:49:59.371Z",
            "2020-11-23T12:01:20.894Z",
        ],
        "currency": "USD",
        "locale": "en-US",
    },
]


def load_demo_accounts() -> list[Account]:
    """Build fresh Account objects from the seed data."""
    return [Account.model_validate(data) for data in DEMO_ACCOUNTS]


def create_demo_registry() -> InMemoryAccountRegistry:
    """Registry pre-populated with the demo accounts."""
    return InMemoryAccountRegistry(load_demo_accounts())
