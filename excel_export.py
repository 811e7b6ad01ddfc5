"""
Excel export functionality for BankLedger
"""
from __future__ import annotations

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from models import LedgerSummary, TransactionKind


def _style_header(ws, row=1):
    """Apply header styling to worksheet row"""
    header_font = Font(bold=True, color="FFFFFF")
    fill = PatternFill("solid", fgColor="4F81BD")
    align = Alignment(horizontal="center", vertical="center")
    thin = Side(style="thin", color="A0A0A0")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    for cell in ws[row]:
        cell.font = header_font
        cell.fill = fill
        cell.alignment = align
        cell.border = border


def _autosize_columns(ws, min_width=10, max_width=60):
    """Auto-size columns based on content"""
    for col in range(1, ws.max_column + 1):
        letter = get_column_letter(col)
        max_len = 0
        for cell in ws[letter]:
            if cell.value is None:
                continue
            max_len = max(max_len, len(str(cell.value)))
        ws.column_dimensions[letter].width = max(min_width, min(max_width, max_len + 2))


def _raw(v):
    # raw request values may be anything; keep numbers numeric, stringify the rest
    if v is None or isinstance(v, (int, float, str)):
        return v
    return str(v)


def export_excel(summary: LedgerSummary, filepath: str) -> None:
    """
    Export a ledger summary to Excel with three sheets:
    - Summary (account, balances, outcome, audit message)
    - Applied
    - Rejected
    """
    wb = Workbook()
    wb.remove(wb.active)

    ws = wb.create_sheet("Summary")
    ws.append(["Field", "Value"])
    _style_header(ws, 1)
    rows = [
        ("Account Number", summary.account_number),
        ("Account Holder", summary.holder_name),
        ("Currency", summary.currency),
        ("Initial Balance", _raw(summary.initial_balance)),
        ("Final Balance", summary.final_balance),
        ("Applied", len(summary.applied)),
        ("Rejected", len(summary.rejected)),
        ("Outcome", summary.outcome.value),
        ("Audit Log", summary.audit_log),
    ]
    for row in rows:
        ws.append(list(row))
    for r in (5, 6):
        if isinstance(ws.cell(r, 2).value, float):
            ws.cell(r, 2).number_format = "0.00"
    _autosize_columns(ws)

    ws = wb.create_sheet("Applied")
    ws.append(["ID", "Type", "Amount", "Balance After"])
    _style_header(ws, 1)
    ws.freeze_panes = "A2"
    for e in summary.applied:
        ws.append([e.sequence, e.kind.value, e.amount, e.balance_after])
    for r in range(2, ws.max_row + 1):
        ws.cell(r, 3).number_format = "0.00"
        ws.cell(r, 4).number_format = "0.00"
    if summary.applied:
        _append_totals(ws, summary)
    _autosize_columns(ws)

    ws = wb.create_sheet("Rejected")
    ws.append(["ID", "Type", "Amount", "Category", "Reason"])
    _style_header(ws, 1)
    ws.freeze_panes = "A2"
    for e in summary.rejected:
        ws.append([
            e.sequence,
            _raw(e.request.kind),
            _raw(e.request.amount),
            e.rejection.reason.value,
            e.rejection.message,
        ])
    _autosize_columns(ws)

    wb.save(filepath)


def _append_totals(ws, summary: LedgerSummary) -> None:
    """Footer rows with applied deposit and withdrawal totals"""
    ws.append([""] * 4)
    for label, kind in (("TOTAL DEPOSITS", TransactionKind.DEPOSIT),
                        ("TOTAL WITHDRAWALS", TransactionKind.WITHDRAW)):
        total = sum(e.amount for e in summary.applied if e.kind is kind)
        ws.append([label, "", total, ""])
        ws.cell(ws.max_row, 1).font = Font(bold=True)
        ws.cell(ws.max_row, 3).number_format = "0.00"
