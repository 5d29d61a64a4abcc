"""
Dialog windows for SplitBills GUI
"""
from __future__ import annotations
from typing import Optional, Tuple

try:
    import tkinter as tk
    from tkinter import ttk
except ModuleNotFoundError:
    tk = None
    ttk = None

from models import Expense
from labels import label
from utils import non_negative_amount


class ExpenseDialog(tk.Toplevel):
    """Dialog for editing an expense's description and amount"""

    def __init__(self, master, expense: Expense, lang: str = "en"):
        super().__init__(master)
        self.title(label(lang, "edit_expense"))
        self.resizable(False, False)
        self.expense = expense
        self.result: Optional[Tuple[str, float]] = None

        self._bind_enter_to_ok()

        frm = ttk.Frame(self, padding=10)
        frm.grid(row=0, column=0, sticky="nsew")

        self.v_description = tk.StringVar(value=expense.description)
        self.v_amount = tk.StringVar(value=str(expense.amount))

        ttk.Label(frm, text=label(lang, "description")).grid(row=0, column=0, sticky="w", pady=2)
        desc_entry = ttk.Entry(frm, textvariable=self.v_description, width=32)
        desc_entry.grid(row=0, column=1, sticky="w")

        ttk.Label(frm, text=label(lang, "amount")).grid(row=1, column=0, sticky="w", pady=2)
        ttk.Entry(frm, textvariable=self.v_amount, width=14).grid(row=1, column=1, sticky="w")

        btns = ttk.Frame(frm)
        btns.grid(row=2, column=0, columnspan=2, sticky="e", pady=(10, 0))
        ttk.Button(btns, text=label(lang, "ok"), command=self._ok).grid(row=0, column=0, padx=4)
        ttk.Button(btns, text=label(lang, "cancel"), command=self._cancel).grid(row=0, column=1, padx=4)

        desc_entry.focus_set()
        self.grab_set()
        self.transient(master)

    def _bind_enter_to_ok(self):
        """Bind Enter/Return to OK"""

        def on_enter(event=None):
            self._ok()
            return "break"

        self.bind("<Return>", on_enter)
        self.bind("<KP_Enter>", on_enter)

    def _ok(self):
        """Save and close; unparseable or negative amounts become 0"""
        amt = non_negative_amount(self.v_amount.get())
        self.result = (self.v_description.get(), amt)
        self.destroy()

    def _cancel(self):
        """Cancel and close"""
        self.result = None
        self.destroy()
