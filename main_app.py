"""
Main application window for SplitBills GUI
"""
from __future__ import annotations
import logging
from typing import List, Optional

try:
    import tkinter as tk
    from tkinter import ttk, messagebox, filedialog
except ModuleNotFoundError:
    tk = None
    ttk = None
    messagebox = None
    filedialog = None

from models import OWNER, Ledger
from config import Settings, get_default_ledger
from computations import expenses_for, friend_report
from operations import (
    add_expense,
    add_friend,
    remove_expense,
    remove_friend_at,
    set_direct_payment,
    update_expense,
)
from labels import label, balance_message, toggle_language
from utils import format_friend, format_money, format_percent, format_signed_money, safe_float
from excel_export import export_excel
from gui_dialogs import ExpenseDialog

logger = logging.getLogger(__name__)


class SplitBillsApp(ttk.Frame):
    """Main application window"""

    def __init__(self, master: tk.Tk, settings: Optional[Settings] = None):
        super().__init__(master, padding=8)
        self.master = master
        self.master.geometry("900x600")
        self.grid(row=0, column=0, sticky="nsew")
        self.master.rowconfigure(0, weight=1)
        self.master.columnconfigure(0, weight=1)

        self.settings = settings or Settings()
        self.lang = self.settings.language
        self.ledger: Ledger = get_default_ledger()

        self.selected_friend = tk.StringVar(value="")
        self._build_all()

    def t(self, key: str, **kwargs) -> str:
        return label(self.lang, key, **kwargs)

    def money(self, x: float) -> str:
        return format_money(x, self.settings.currency_symbol)

    def _build_all(self):
        """(Re)build menu and widgets in the current language"""
        for child in self.winfo_children():
            child.destroy()
        self.master.title(self.t("title"))
        self._build_menu()
        self._build_ui()
        self.refresh_all()

    # ---------- Menu ----------
    def _build_menu(self):
        """Build application menu bar"""
        menubar = tk.Menu(self.master)
        filem = tk.Menu(menubar, tearoff=0)
        filem.add_command(label=self.t("export_excel"), command=self.export_excel_dialog)
        filem.add_separator()
        filem.add_command(label=self.t("exit"), command=self.master.destroy)
        menubar.add_cascade(label=self.t("file"), menu=filem)

        settingsm = tk.Menu(menubar, tearoff=0)
        settingsm.add_command(label=self.t("toggle_language"), command=self._toggle_language)
        menubar.add_cascade(label=self.t("settings"), menu=settingsm)

        self.master.config(menu=menubar)

    def _toggle_language(self):
        """Switch between English and Arabic labels"""
        self.lang = toggle_language(self.lang)
        logger.info("Language switched to %s", self.lang)
        self._build_all()

    # ---------- UI ----------
    def _build_ui(self):
        """Build main UI with tabs"""
        ttk.Label(self, text=self.t("subtitle")).grid(row=0, column=0, sticky="w", pady=(0, 6))
        nb = ttk.Notebook(self)
        nb.grid(row=1, column=0, sticky="nsew")
        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self.tab_friends = ttk.Frame(nb, padding=8)
        self.tab_expenses = ttk.Frame(nb, padding=8)
        nb.add(self.tab_friends, text=self.t("friends"))
        nb.add(self.tab_expenses, text=self.t("expenses"))

        self._build_friends_tab()
        self._build_expenses_tab()

    def _build_friends_tab(self):
        """Build friends management tab"""
        self.tab_friends.columnconfigure(0, weight=1)
        controls = ttk.Frame(self.tab_friends)
        controls.grid(row=0, column=0, sticky="ew")

        self.new_friend_var = tk.StringVar()
        self.new_image_var = tk.StringVar()
        ttk.Label(controls, text=self.t("friend_name")).pack(side="left")
        ttk.Entry(controls, textvariable=self.new_friend_var, width=18).pack(side="left", padx=4)
        ttk.Label(controls, text=self.t("image_url")).pack(side="left")
        ttk.Entry(controls, textvariable=self.new_image_var, width=24).pack(side="left", padx=4)
        ttk.Button(controls, text=self.t("add_friend"), command=self.add_friend).pack(side="left", padx=4)

        self.friends_list = tk.Listbox(self.tab_friends, height=16)
        self.friends_list.grid(row=1, column=0, sticky="nsew", pady=6)
        self.tab_friends.rowconfigure(1, weight=1)

        ttk.Button(self.tab_friends, text=self.t("remove_friend"),
                   command=self.remove_selected_friend).grid(row=2, column=0, sticky="w")

    def _build_expenses_tab(self):
        """Build per-friend expenses tab"""
        tab = self.tab_expenses
        tab.columnconfigure(0, weight=1)

        top = ttk.Frame(tab)
        top.grid(row=0, column=0, sticky="ew")
        ttk.Label(top, text=self.t("friend")).pack(side="left")
        self.friend_combo = ttk.Combobox(top, textvariable=self.selected_friend, width=18, state="readonly")
        self.friend_combo.pack(side="left", padx=4)
        self.friend_combo.bind("<<ComboboxSelected>>", lambda *_: self.refresh_expenses())
        ttk.Button(top, text=self.t("add_expense"), command=self.add_expense).pack(side="left", padx=3)
        ttk.Button(top, text=self.t("edit_expense"), command=self.edit_selected_expense).pack(side="left", padx=3)
        ttk.Button(top, text=self.t("delete_expense"), command=self.delete_selected_expense).pack(side="left", padx=3)

        stats = ttk.Frame(tab, padding=(0, 8))
        stats.grid(row=1, column=0, sticky="ew")
        self.total_var = tk.StringVar()
        self.you_paid_pct_var = tk.StringVar()
        self.they_paid_var = tk.StringVar()
        self.they_paid_pct_var = tk.StringVar()
        self.they_paid_title_var = tk.StringVar()
        self.each_var = tk.StringVar()
        self.payment_var = tk.StringVar(value="0")

        ttk.Label(stats, text=self.t("total_expenses")).grid(row=0, column=0, padx=8)
        ttk.Label(stats, textvariable=self.total_var).grid(row=1, column=0, padx=8)

        ttk.Label(stats, text=self.t("your_payment")).grid(row=0, column=1, padx=8)
        pay = ttk.Frame(stats)
        pay.grid(row=1, column=1, padx=8)
        pay_entry = ttk.Entry(pay, textvariable=self.payment_var, width=10)
        pay_entry.pack(side="left")
        pay_entry.bind("<Return>", lambda *_: self.set_payment())
        ttk.Button(pay, text=self.t("set_payment"), command=self.set_payment).pack(side="left", padx=2)
        ttk.Label(stats, textvariable=self.you_paid_pct_var).grid(row=2, column=1, padx=8)

        ttk.Label(stats, textvariable=self.they_paid_title_var).grid(row=0, column=2, padx=8)
        ttk.Label(stats, textvariable=self.they_paid_var).grid(row=1, column=2, padx=8)
        ttk.Label(stats, textvariable=self.they_paid_pct_var).grid(row=2, column=2, padx=8)

        ttk.Label(stats, text=self.t("each_should_pay")).grid(row=0, column=3, padx=8)
        ttk.Label(stats, textvariable=self.each_var).grid(row=1, column=3, padx=8)
        ttk.Label(stats, text="(50%)").grid(row=2, column=3, padx=8)

        cols = ("description", "amount")
        self.exp_tree = ttk.Treeview(tab, columns=cols, show="headings", height=12)
        self.exp_tree.heading("description", text=self.t("description"))
        self.exp_tree.heading("amount", text=self.t("amount"))
        self.exp_tree.column("description", width=480, anchor="w")
        self.exp_tree.column("amount", width=120, anchor="e")
        self.exp_tree.grid(row=2, column=0, sticky="nsew")
        self.exp_tree.bind("<Double-1>", lambda *_: self.edit_selected_expense())
        tab.rowconfigure(2, weight=1)

        yscroll = ttk.Scrollbar(tab, orient="vertical", command=self.exp_tree.yview)
        self.exp_tree.configure(yscroll=yscroll.set)
        yscroll.grid(row=2, column=1, sticky="ns")

        bal = ttk.Frame(tab, padding=(0, 8))
        bal.grid(row=3, column=0, sticky="ew")
        self.balance_title_var = tk.StringVar()
        self.balance_var = tk.StringVar()
        self.balance_msg_var = tk.StringVar()
        ttk.Label(bal, textvariable=self.balance_title_var).grid(row=0, column=0, sticky="w")
        self.balance_label = tk.Label(bal, textvariable=self.balance_var, font=("TkDefaultFont", 12, "bold"))
        self.balance_label.grid(row=0, column=1, sticky="e", padx=12)
        ttk.Label(bal, textvariable=self.balance_msg_var).grid(row=1, column=0, columnspan=2, sticky="w")

    # ---------- Friends ----------
    def add_friend(self):
        """Add friend from the name/image entries"""
        if add_friend(self.ledger, self.new_friend_var.get(), self.new_image_var.get(),
                      default_image=self.settings.default_image):
            self.new_friend_var.set("")
            self.new_image_var.set("")
            self.refresh_all()

    def remove_selected_friend(self):
        """Remove the friend selected in the list"""
        sel = self.friends_list.curselection()
        if not sel:
            return
        if remove_friend_at(self.ledger, sel[0]):
            self.refresh_all()

    # ---------- Expenses ----------
    def _current_friend(self) -> Optional[str]:
        name = self.selected_friend.get()
        return name if name in self._other_friends() else None

    def _other_friends(self) -> List[str]:
        return [n for n in self.ledger.friend_names() if n != OWNER]

    def _selected_expense_id(self) -> Optional[int]:
        sel = self.exp_tree.selection()
        if not sel:
            messagebox.showinfo(self.t("expenses"), self.t("select_expense"))
            return None
        return int(sel[0])

    def add_expense(self):
        """Add blank expense for the selected friend and open it for editing"""
        friend = self._current_friend()
        if friend is None:
            messagebox.showinfo(self.t("expenses"), self.t("select_friend"))
            return
        e = add_expense(self.ledger, friend)
        self.refresh_expenses()
        self.exp_tree.selection_set(str(e.id))
        self.edit_selected_expense()

    def edit_selected_expense(self):
        """Edit selected expense"""
        eid = self._selected_expense_id()
        if eid is None:
            return
        e = self.ledger.find_expense(eid)
        if e is None:
            return
        dlg = ExpenseDialog(self.master, e, self.lang)
        self.master.wait_window(dlg)
        if dlg.result:
            description, amount = dlg.result
            update_expense(self.ledger, eid, "description", description)
            update_expense(self.ledger, eid, "amount", amount)
            self.refresh_expenses()

    def delete_selected_expense(self):
        """Delete selected expense"""
        eid = self._selected_expense_id()
        if eid is None:
            return
        if messagebox.askyesno(self.t("delete_expense"), self.t("delete_confirm")):
            remove_expense(self.ledger, eid)
            self.refresh_expenses()

    def set_payment(self):
        """Store the owner's direct payment for the selected friend"""
        friend = self._current_friend()
        if friend is None:
            return
        set_direct_payment(self.ledger, friend, safe_float(self.payment_var.get(), 0.0))
        self.refresh_expenses()

    # ---------- File ops ----------
    def export_excel_dialog(self):
        """Export to Excel file"""
        fp = filedialog.asksaveasfilename(
            title=self.t("export_excel"),
            defaultextension=".xlsx",
            filetypes=[("Excel Workbook", "*.xlsx")]
        )
        if not fp:
            return
        try:
            export_excel(self.ledger, fp, self.lang)
            messagebox.showinfo(self.t("export_excel"), self.t("exported", path=fp))
        except Exception as ex:
            logger.exception("Excel export to %s failed", fp)
            messagebox.showerror(self.t("export_failed"), str(ex))

    # ---------- Refresh ----------
    def refresh_all(self):
        """Refresh all UI elements"""
        self.refresh_friends()
        self.refresh_expenses()

    def refresh_friends(self):
        """Refresh friends list and selector"""
        self.friends_list.delete(0, tk.END)
        for f in self.ledger.friends:
            self.friends_list.insert(tk.END, format_friend(f.name, f.image))
        others = self._other_friends()
        self.friend_combo["values"] = others
        if self.selected_friend.get() not in others:
            self.selected_friend.set(others[0] if others else "")

    def refresh_expenses(self):
        """Refresh expense rows, summary figures and balance for the selected friend"""
        for iid in self.exp_tree.get_children():
            self.exp_tree.delete(iid)

        friend = self._current_friend()
        if friend is None:
            for var in (self.total_var, self.you_paid_pct_var, self.they_paid_var, self.they_paid_pct_var,
                        self.they_paid_title_var, self.each_var, self.balance_title_var,
                        self.balance_var, self.balance_msg_var):
                var.set("")
            self.payment_var.set("0")
            return

        for e in expenses_for(self.ledger, friend):
            self.exp_tree.insert("", "end", iid=str(e.id), values=(e.description, f"{e.amount:.2f}"))

        r = friend_report(self.ledger, friend)
        self.total_var.set(self.money(r["total_expenses"]))
        self.payment_var.set(f"{r['you_paid']:g}")
        self.you_paid_pct_var.set(f"({format_percent(r['you_paid_percent'])})")
        self.they_paid_title_var.set(self.t("their_payment", name=friend))
        self.they_paid_var.set(self.money(r["they_paid"]))
        self.they_paid_pct_var.set(f"({format_percent(r['they_paid_percent'])})")
        self.each_var.set(self.money(r["expected_share"]))

        b = r["balance"]
        self.balance_title_var.set(self.t("balance_with", name=friend))
        self.balance_var.set(format_signed_money(b, self.settings.currency_symbol))
        self.balance_label.configure(fg="green" if b > 0 else "red" if b < 0 else "black")
        self.balance_msg_var.set(balance_message(self.lang, friend, b, self.settings.currency_symbol))
