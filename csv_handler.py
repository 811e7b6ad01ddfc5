"""
CSV export and import functionality for BankLedger
"""
from __future__ import annotations
import csv
from typing import List

from models import LedgerSummary, TransactionRequest


def import_transactions_from_csv(filepath: str) -> List[TransactionRequest]:
    """
    Import transaction requests from CSV file
    CSV columns: type, amount (blank cells are treated as missing)
    """
    transactions = []

    with open(filepath, 'r', encoding='utf-8', newline='') as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or 'amount' not in reader.fieldnames:
            raise ValueError(f"{filepath}: CSV header must contain an 'amount' column")

        for row in reader:
            kind = (row.get('type') or '').strip() or None
            amount = row.get('amount')
            if amount is not None and not amount.strip():
                amount = None
            transactions.append(TransactionRequest(kind=kind, amount=amount))

    return transactions


def export_entries_to_csv(summary: LedgerSummary, filepath: str) -> None:
    """
    Export processed entries (input order) to CSV file
    CSV columns: id, type, amount, status, balance_after, reason
    """
    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(['id', 'type', 'amount', 'status', 'balance_after', 'reason'])

        for e in summary.entries():
            writer.writerow([
                e.sequence,
                '' if e.request.kind is None else e.request.kind,
                '' if e.request.amount is None else e.request.amount,
                e.status.value,
                '' if e.balance_after is None else f"{e.balance_after:.2f}",
                e.rejection.message if e.rejection else '',
            ])
