"""
Excel export functionality for SplitBills
"""
from __future__ import annotations
import logging
import re

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from models import Ledger
from computations import expenses_for, friend_reports
from labels import label

logger = logging.getLogger(__name__)

_INVALID_TITLE_CHARS = re.compile(r"[\\/*?:\[\]]")


def _style_header(ws, row=1):
    """Apply header styling to worksheet row"""
    header_font = Font(bold=True, color="FFFFFF")
    fill = PatternFill("solid", fgColor="4F46E5")
    align = Alignment(horizontal="center", vertical="center")
    thin = Side(style="thin", color="A0A0A0")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    for cell in ws[row]:
        cell.font = header_font
        cell.fill = fill
        cell.alignment = align
        cell.border = border


def _autosize_columns(ws, min_width=10, max_width=45):
    """Auto-size columns based on content"""
    for col in range(1, ws.max_column + 1):
        letter = get_column_letter(col)
        max_len = 0
        for cell in ws[letter]:
            if cell.value is None:
                continue
            max_len = max(max_len, len(str(cell.value)))
        ws.column_dimensions[letter].width = max(min_width, min(max_width, max_len + 2))


def sheet_title(name: str, taken) -> str:
    """Excel-safe, unique sheet title (max 31 chars)"""
    base = _INVALID_TITLE_CHARS.sub("_", name).strip("'") or "_"
    title = base[:31]
    n = 2
    while title in taken:
        suffix = f" ({n})"
        title = base[:31 - len(suffix)] + suffix
        n += 1
    return title


def export_excel(ledger: Ledger, filepath: str, lang: str = "en") -> None:
    """
    Export ledger to Excel file:
    - Summary sheet with one row per friend
    - One sheet per friend listing the shared expenses
    """
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title(label(lang, "summary"), set())

    reports = friend_reports(ledger)
    ws.append([
        label(lang, "friend"),
        label(lang, "total_expenses"),
        label(lang, "your_payment"),
        label(lang, "their_payment", name=label(lang, "friend")),
        label(lang, "each_should_pay"),
        label(lang, "balance"),
    ])
    _style_header(ws, 1)
    ws.freeze_panes = "A2"
    for r in reports:
        ws.append([r["friend"], r["total_expenses"], r["you_paid"], r["they_paid"],
                   r["expected_share"], r["balance"]])
    for row in range(2, ws.max_row + 1):
        for c in range(2, 7):
            ws.cell(row, c).number_format = "0.00"
    _autosize_columns(ws)

    taken = {ws.title}
    for r in reports:
        ws = wb.create_sheet(sheet_title(r["friend"], taken))
        taken.add(ws.title)
        ws.append(["ID", label(lang, "description"), label(lang, "amount")])
        _style_header(ws, 1)
        ws.freeze_panes = "A2"
        rows = expenses_for(ledger, r["friend"])
        for e in rows:
            ws.append([e.id, e.description, float(e.amount)])
        ws.append([label(lang, "total"), "", f"=SUM(C2:C{len(rows) + 1})" if rows else 0])
        ws.cell(ws.max_row, 1).font = Font(bold=True)
        for row in range(2, ws.max_row + 1):
            ws.cell(row, 3).number_format = "0.00"
        _autosize_columns(ws)

    wb.save(filepath)
    logger.info("Exported %d friend sheet(s) to %s", len(reports), filepath)
