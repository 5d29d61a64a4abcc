"""
Static display labels for the SplitBills window, in English and Arabic
"""
from __future__ import annotations
from typing import Dict

from utils import format_money

LANGUAGES = ("en", "ar")

LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "Split Bills",
        "subtitle": "Track individual expenses with friends",
        "friends": "Friends",
        "expenses": "Expenses",
        "friend_name": "Friend's name",
        "image_url": "Image URL (optional)",
        "add_friend": "Add Friend",
        "remove_friend": "Remove Selected",
        "friend": "Friend",
        "add_expense": "Add Expense",
        "edit_expense": "Edit Expense",
        "delete_expense": "Delete",
        "description": "Description",
        "amount": "Amount",
        "total_expenses": "Total Expenses",
        "your_payment": "Your Payment",
        "their_payment": "{name}'s Payment",
        "each_should_pay": "Each Should Pay",
        "set_payment": "Set",
        "balance": "Balance",
        "balance_with": "Balance with {name}",
        "owes_you": "{name} owes you {amount}",
        "you_owe": "You owe {name} {amount}",
        "settled": "You are all settled up!",
        "file": "File",
        "export_excel": "Export Excel…",
        "exit": "Exit",
        "settings": "Settings",
        "toggle_language": "العربية",
        "summary": "Summary",
        "total": "TOTAL",
        "ok": "OK",
        "cancel": "Cancel",
        "select_friend": "Add a friend first.",
        "select_expense": "Select an expense row first.",
        "delete_confirm": "Delete selected expense?",
        "exported": "Exported: {path}",
        "export_failed": "Export failed",
    },
    "ar": {
        "title": "تقسيم الفواتير",
        "subtitle": "تتبع المصاريف الفردية مع الأصدقاء",
        "friends": "الأصدقاء",
        "expenses": "المصاريف",
        "friend_name": "اسم الصديق",
        "image_url": "رابط الصورة (اختياري)",
        "add_friend": "إضافة صديق",
        "remove_friend": "حذف المحدد",
        "friend": "الصديق",
        "add_expense": "إضافة مصروف",
        "edit_expense": "تعديل المصروف",
        "delete_expense": "حذف",
        "description": "الوصف",
        "amount": "المبلغ",
        "total_expenses": "إجمالي المصاريف",
        "your_payment": "دفعتك",
        "their_payment": "دفعة {name}",
        "each_should_pay": "حصة كل شخص",
        "set_payment": "تعيين",
        "balance": "الرصيد",
        "balance_with": "الرصيد مع {name}",
        "owes_you": "{name} مدين لك بمبلغ {amount}",
        "you_owe": "أنت مدين لـ {name} بمبلغ {amount}",
        "settled": "لا توجد أي ديون بينكما!",
        "file": "ملف",
        "export_excel": "تصدير إلى Excel…",
        "exit": "خروج",
        "settings": "الإعدادات",
        "toggle_language": "English",
        "summary": "الملخص",
        "total": "المجموع",
        "ok": "موافق",
        "cancel": "إلغاء",
        "select_friend": "أضف صديقاً أولاً.",
        "select_expense": "اختر مصروفاً أولاً.",
        "delete_confirm": "حذف المصروف المحدد؟",
        "exported": "تم التصدير: {path}",
        "export_failed": "فشل التصدير",
    },
}


def label(lang: str, key: str, **kwargs) -> str:
    """Look up a label, falling back to English and then to the key itself"""
    text = LABELS.get(lang, {}).get(key) or LABELS["en"].get(key, key)
    return text.format(**kwargs) if kwargs else text


def toggle_language(lang: str) -> str:
    return "ar" if lang == "en" else "en"


def balance_message(lang: str, friend: str, balance: float, symbol: str = "$") -> str:
    """Sentence describing who owes whom"""
    if balance > 0:
        return label(lang, "owes_you", name=friend, amount=format_money(balance, symbol))
    if balance < 0:
        return label(lang, "you_owe", name=friend, amount=format_money(abs(balance), symbol))
    return label(lang, "settled")
