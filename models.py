"""
Data models for SplitBills application
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional

OWNER = "Me"
DEFAULT_IMAGE = "default.png"


@dataclass
class Friend:
    """Someone expenses are split with; the name is the identity"""
    name: str
    image: Optional[str] = None


@dataclass
class Expense:
    """Single expense shared between the owner and one friend"""
    id: int
    description: str
    amount: float
    paid_by: str
    split_with: str  # friend name


@dataclass
class ExpenseSummary:
    """Totals for one friend"""
    total_expenses: float
    you_paid: float
    they_paid: float  # negative when a stored payment outlived a deleted expense


@dataclass
class Ledger:
    """Complete in-memory state: friends, expenses and direct payments"""
    friends: List[Friend] = field(default_factory=lambda: [Friend(OWNER)])
    expenses: List[Expense] = field(default_factory=list)
    direct_payments: Dict[str, float] = field(default_factory=dict)  # friend -> amount the owner paid

    def friend_names(self) -> List[str]:
        return [f.name for f in self.friends]

    def find_expense(self, expense_id: int) -> Optional[Expense]:
        return next((e for e in self.expenses if e.id == expense_id), None)
