"""Account aggregation: groups by type, net worth, credit utilization"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Optional

from ledger_engine.config.constants import (
    ACCOUNT_TYPE_LABELS,
    DEFAULT_ACCOUNT_TYPE_ORDER,
    LIABILITY_TYPES,
    AccountType,
)
from ledger_engine.utils.rounding import round_cents, sum_cents, to_decimal


@dataclass(frozen=True)
class AccountSummary:
    id: str
    name: str
    type: str
    balance: Decimal
    credit_limit: Optional[Decimal] = None
    owner: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True)
class AccountTypeGroup:
    type: str
    label: str
    accounts: List[AccountSummary] = field(default_factory=list)
    total: Decimal = Decimal("0.00")


@dataclass(frozen=True)
class NetWorthResult:
    assets: Decimal
    liabilities: Decimal
    net_worth: Decimal


def _field(account, name: str, default=None):
    if isinstance(account, Mapping):
        return account.get(name, default)
    return getattr(account, name, default)


def _type_value(account_type) -> str:
    if isinstance(account_type, AccountType):
        return account_type.value
    return str(account_type)


def group_accounts_by_type(
    accounts: Iterable,
    type_order: List[str] = DEFAULT_ACCOUNT_TYPE_ORDER,
    labels: Optional[Dict[str, str]] = None,
) -> List[AccountTypeGroup]:
    """
    Bucket accounts by type, in type_order.

    Types with no accounts are dropped; types missing from type_order are
    not emitted. Totals are the exact sum of member balances, rounded once.
    """
    labels = labels if labels is not None else ACCOUNT_TYPE_LABELS
    grouped: Dict[str, List[AccountSummary]] = {}
    for account in accounts:
        grouped.setdefault(_type_value(_field(account, "type")), []).append(account)

    groups = []
    for account_type in type_order:
        account_type = _type_value(account_type)
        members = grouped.get(account_type)
        if not members:
            continue
        groups.append(AccountTypeGroup(
            type=account_type,
            label=labels.get(account_type) or ACCOUNT_TYPE_LABELS.get(account_type, account_type),
            accounts=members,
            total=sum_cents(_field(a, "balance") for a in members),
        ))
    return groups


def compute_net_worth(accounts: Iterable) -> NetWorthResult:
    """
    Assets minus liabilities.

    Credit cards, loans and mortgages are liabilities and carry negative
    balances, so net worth is assets + liabilities.
    """
    assets = Decimal(0)
    liabilities = Decimal(0)
    for account in accounts:
        balance = to_decimal(_field(account, "balance"))
        if _type_value(_field(account, "type")) in LIABILITY_TYPES:
            liabilities += balance
        else:
            assets += balance

    assets = round_cents(assets)
    liabilities = round_cents(liabilities)
    return NetWorthResult(
        assets=assets,
        liabilities=liabilities,
        net_worth=round_cents(assets + liabilities),
    )


def compute_utilization(balance, credit_limit) -> Decimal:
    """|balance| / limit as a percentage. Not clamped at 100."""
    limit = to_decimal(credit_limit)
    if limit <= 0:
        return Decimal("0.00")
    return round_cents(abs(to_decimal(balance)) / limit * 100)


def compute_credit_utilization(accounts: Iterable) -> List[dict]:
    """Utilization rows for every active credit card"""
    rows = []
    for account in accounts:
        if _type_value(_field(account, "type")) != AccountType.CREDIT_CARD.value:
            continue
        if not _field(account, "is_active", True):
            continue
        balance = round_cents(abs(to_decimal(_field(account, "balance"))))
        limit = round_cents(_field(account, "credit_limit"))
        rows.append({
            "id": _field(account, "id"),
            "name": _field(account, "name"),
            "balance": balance,
            "limit": limit,
            "utilization": compute_utilization(balance, limit),
            "owner": _field(account, "owner"),
        })
    return rows
