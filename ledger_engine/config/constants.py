from enum import Enum


class AccountType(str, Enum):
    CHECKING = "CHECKING"
    SAVINGS = "SAVINGS"
    CREDIT_CARD = "CREDIT_CARD"
    LOAN = "LOAN"
    MORTGAGE = "MORTGAGE"

    @property
    def label(self) -> str:
        return ACCOUNT_TYPE_LABELS[self.value]


ACCOUNT_TYPE_LABELS = {
    "CHECKING": "Checking",
    "SAVINGS": "Savings",
    "CREDIT_CARD": "Credit Card",
    "LOAN": "Loan",
    "MORTGAGE": "Mortgage",
}

# Debt accounts, balances stored negative
LIABILITY_TYPES = frozenset({
    AccountType.CREDIT_CARD.value,
    AccountType.LOAN.value,
    AccountType.MORTGAGE.value,
})

# Default display order for account groups
DEFAULT_ACCOUNT_TYPE_ORDER = [
    AccountType.CHECKING.value,
    AccountType.SAVINGS.value,
    AccountType.CREDIT_CARD.value,
    AccountType.LOAN.value,
    AccountType.MORTGAGE.value,
]

# Column definitions
AMORTIZATION_SCHEDULE_COLUMNS = [
    "month", "payment", "principal", "interest", "remaining_balance",
    "cumulative_principal", "cumulative_interest",
]

BALANCE_HISTORY_COLUMNS = ["month_key", "balance"]

