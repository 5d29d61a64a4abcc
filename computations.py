"""
Balance computations for SplitBills
"""
from __future__ import annotations
from typing import List

from models import OWNER, Expense, ExpenseSummary, Ledger


def expenses_for(ledger: Ledger, friend_name: str) -> List[Expense]:
    """Expenses split with the given friend, in insertion order"""
    return [e for e in ledger.expenses if e.split_with == friend_name]


def summary(ledger: Ledger, friend_name: str) -> ExpenseSummary:
    """Total shared with a friend, the owner's direct payment, and the remainder"""
    total = sum(float(e.amount) for e in expenses_for(ledger, friend_name))
    you_paid = ledger.direct_payments.get(friend_name, 0.0)
    return ExpenseSummary(total_expenses=total, you_paid=you_paid, they_paid=total - you_paid)


def expected_share(ledger: Ledger, friend_name: str) -> float:
    return summary(ledger, friend_name).total_expenses / 2


def balance(ledger: Ledger, friend_name: str) -> float:
    """
    Owner's payment minus an equal half of the total.
    Positive -> friend owes the owner; negative -> owner owes the friend.
    """
    s = summary(ledger, friend_name)
    return s.you_paid - s.total_expenses / 2


def share_percent(part: float, total: float) -> float:
    """Percentage of total; 0 when total is 0"""
    if not total:
        return 0.0
    return part / total * 100


def friend_report(ledger: Ledger, friend_name: str) -> dict:
    """
    Figures shown for one friend.
    Returns dict with total_expenses, you_paid, they_paid, expected_share, balance,
    you_paid_percent, they_paid_percent
    """
    s = summary(ledger, friend_name)
    return {
        "friend": friend_name,
        "total_expenses": s.total_expenses,
        "you_paid": s.you_paid,
        "they_paid": s.they_paid,
        "expected_share": s.total_expenses / 2,
        "balance": s.you_paid - s.total_expenses / 2,
        "you_paid_percent": share_percent(s.you_paid, s.total_expenses),
        "they_paid_percent": share_percent(s.they_paid, s.total_expenses),
    }


def friend_reports(ledger: Ledger) -> List[dict]:
    """Reports for every friend except the owner"""
    return [friend_report(ledger, f.name) for f in ledger.friends if f.name != OWNER]
