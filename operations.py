"""
Mutations of the SplitBills ledger.

Every operation edits the Ledger in place and reports whether anything changed;
invalid input is ignored rather than raised.
"""
from __future__ import annotations
import logging
from typing import Optional

from models import DEFAULT_IMAGE, OWNER, Expense, Friend, Ledger
from computations import summary
from utils import clamp, new_expense_id, safe_float

logger = logging.getLogger(__name__)

EXPENSE_FIELDS = ("description", "amount", "paid_by", "split_with")


def add_friend(ledger: Ledger, name: str, image: Optional[str] = None,
               default_image: str = DEFAULT_IMAGE) -> bool:
    """Append a friend unless the trimmed name is blank or already taken"""
    name = (name or "").strip()
    if not name:
        logger.debug("add_friend ignored: blank name")
        return False
    if name in ledger.friend_names():
        logger.debug("add_friend ignored: %r already exists", name)
        return False
    ledger.friends.append(Friend(name, (image or "").strip() or default_image))
    logger.info("Added friend %s", name)
    return True


def remove_friend(ledger: Ledger, name: str) -> bool:
    """Remove a friend with their expenses and direct payment; the owner stays"""
    if name == OWNER:
        logger.debug("remove_friend ignored: owner cannot be removed")
        return False
    if name not in ledger.friend_names():
        logger.debug("remove_friend ignored: no friend %r", name)
        return False
    friends = [f for f in ledger.friends if f.name != name]
    expenses = [e for e in ledger.expenses if e.paid_by != name and e.split_with != name]
    payments = {k: v for k, v in ledger.direct_payments.items() if k != name}
    dropped = len(ledger.expenses) - len(expenses)
    ledger.friends, ledger.expenses, ledger.direct_payments = friends, expenses, payments
    logger.info("Removed friend %s and %d expense(s)", name, dropped)
    return True


def remove_friend_at(ledger: Ledger, index: int) -> bool:
    """Remove the friend at a list position, as selected in the friends list"""
    if index < 0 or index >= len(ledger.friends):
        return False
    return remove_friend(ledger, ledger.friends[index].name)


def add_expense(ledger: Ledger, split_with: str) -> Expense:
    """Append a blank expense paid by the owner and shared with split_with"""
    e = Expense(id=new_expense_id(), description="", amount=0.0, paid_by=OWNER, split_with=split_with)
    ledger.expenses.append(e)
    logger.info("Added expense %s with %s", e.id, split_with)
    return e


def update_expense(ledger: Ledger, expense_id: int, field: str, value) -> bool:
    """Replace one field of one expense"""
    if field not in EXPENSE_FIELDS:
        logger.debug("update_expense ignored: unknown field %r", field)
        return False
    e = ledger.find_expense(expense_id)
    if e is None:
        logger.debug("update_expense ignored: no expense %s", expense_id)
        return False
    if field == "amount":
        value = safe_float(value, 0.0)
    setattr(e, field, value)
    return True


def remove_expense(ledger: Ledger, expense_id: int) -> bool:
    remaining = [e for e in ledger.expenses if e.id != expense_id]
    if len(remaining) == len(ledger.expenses):
        logger.debug("remove_expense ignored: no expense %s", expense_id)
        return False
    ledger.expenses = remaining
    logger.info("Removed expense %s", expense_id)
    return True


def set_direct_payment(ledger: Ledger, friend_name: str, amount) -> float:
    """
    Record how much of the friend's total the owner paid, clamped to [0, total].
    Returns the stored value. The clamp is applied only here, never retroactively.
    """
    total = summary(ledger, friend_name).total_expenses
    stored = clamp(safe_float(amount, 0.0), 0.0, total)
    ledger.direct_payments[friend_name] = stored
    logger.info("Direct payment for %s set to %.2f", friend_name, stored)
    return stored
