"""
Input documents and JSON serialization for BankLedger
"""
from __future__ import annotations
import json
from typing import Any, Dict, List

from models import Account, AccountInput, LedgerEntry, LedgerSummary, TransactionRequest


def _pick(d: dict, *keys: str, default: Any = None) -> Any:
    for k in keys:
        if k in d:
            return d[k]
    return default


def dict_to_account_input(d: dict) -> AccountInput:
    """Convert an input document (camelCase or snake_case keys) to AccountInput"""
    account = Account(
        account_number=str(_pick(d, "accountNumber", "account_number", default="")),
        holder_name=str(_pick(d, "accountHolderName", "holder_name", default="")),
        currency=str(_pick(d, "currency", default="")),
    )
    raw_txs = _pick(d, "transactions", default=[])
    if not isinstance(raw_txs, list):
        raise ValueError(f"'transactions' must be a list, got {type(raw_txs).__name__}")
    txs = []
    for i, t in enumerate(raw_txs, start=1):
        if not isinstance(t, dict):
            raise ValueError(f"transaction {i} must be an object, got {type(t).__name__}: {t!r}")
        txs.append(TransactionRequest.from_dict(t))
    return AccountInput(
        account=account,
        initial_balance=_pick(d, "initialBalance", "initial_balance"),
        transactions=txs,
    )


def account_input_to_dict(inp: AccountInput) -> dict:
    """Convert AccountInput to the input document format"""
    txs: List[Dict[str, Any]] = []
    for t in inp.transactions:
        d: Dict[str, Any] = {}
        if t.kind is not None:
            d["type"] = t.kind
        d["amount"] = t.amount
        txs.append(d)
    return {
        "accountNumber": inp.account.account_number,
        "accountHolderName": inp.account.holder_name,
        "initialBalance": inp.initial_balance,
        "currency": inp.account.currency,
        "transactions": txs,
    }


def load_account_input(path: str) -> AccountInput:
    """Load account input from JSON file"""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    return dict_to_account_input(data)


def save_account_input(inp: AccountInput, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(account_input_to_dict(inp), f, ensure_ascii=False, indent=2)


def demo_account_input() -> AccountInput:
    """Ten transactions covering every rule, starting from a string balance"""
    return dict_to_account_input({
        "accountNumber": "123456789",
        "accountHolderName": "Jane Doe",
        "initialBalance": "1000.50",
        "currency": "USD",
        "transactions": [
            {"type": "Deposit", "amount": 500},
            {"type": "Withdraw", "amount": 250.50},
            {"type": "Deposit", "amount": 0},
            {"type": "Withdraw", "amount": -100},
            {"type": "Deposit", "amount": "abc"},
            {"type": "Transfer", "amount": 100},
            {"type": "Deposit", "amount": 200},
            {"type": "Withdraw", "amount": 5000},
            {"amount": 50},
            {"type": "Withdraw", "amount": 300},
        ],
    })


def crash_account_input() -> AccountInput:
    """Corrupted initial balance; the whole batch fails"""
    return dict_to_account_input({
        "accountNumber": "999",
        "accountHolderName": "Corrupt User",
        "initialBalance": "NOT A NUMBER",
        "currency": "USD",
        "transactions": [{"type": "Deposit", "amount": 100}],
    })


def _entry_to_dict(e: LedgerEntry) -> dict:
    d: Dict[str, Any] = {"id": e.sequence}
    if e.request.kind is not None:
        d["type"] = e.request.kind
    d["amount"] = e.request.amount
    if e.applied:
        d["finalBalance"] = e.balance_after
        d["status"] = e.status.value
    else:
        d["reason"] = e.rejection.message
        d["reasonCode"] = e.rejection.reason.name
    return d


def summary_to_dict(summary: LedgerSummary) -> dict:
    """Convert LedgerSummary to a dictionary for JSON output"""
    return {
        "accountNumber": summary.account_number,
        "accountHolderName": summary.holder_name,
        "currency": summary.currency,
        "initialBalance": summary.initial_balance,
        "finalBalance": summary.final_balance,
        "appliedTransactions": [_entry_to_dict(e) for e in summary.applied],
        "rejectedTransactions": [_entry_to_dict(e) for e in summary.rejected],
        "outcome": summary.outcome.value,
        "auditLog": summary.audit_log,
    }
