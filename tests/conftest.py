import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Make the project root importable without installing
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from ledger_engine.core.accounts import AccountSummary  # noqa: E402


def make_account(**overrides) -> AccountSummary:
    fields = {
        "id": "1",
        "name": "Test",
        "type": "CHECKING",
        "balance": Decimal("0"),
        "credit_limit": None,
        "owner": None,
        "is_active": True,
    }
    fields.update(overrides)
    return AccountSummary(**fields)


@pytest.fixture
def household_accounts():
    return [
        make_account(id="1", name="Joint Checking", type="CHECKING", balance=Decimal("5000")),
        make_account(id="2", name="Emergency Fund", type="SAVINGS", balance=Decimal("3000")),
        make_account(id="3", name="Visa", type="CREDIT_CARD", balance=Decimal("-2000"),
                     credit_limit=Decimal("10000"), owner="Sam"),
        make_account(id="4", name="Home", type="MORTGAGE", balance=Decimal("-100000")),
    ]
