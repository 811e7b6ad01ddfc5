"""
Business logic for BankLedger: transaction validation and the balance fold
"""
from __future__ import annotations
import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from models import (
    Account,
    EntryStatus,
    LedgerEntry,
    LedgerSummary,
    Outcome,
    Rejection,
    RejectionReason,
    TransactionKind,
    TransactionRequest,
)
from utils import display, format_money, format_number, to_number

log = logging.getLogger("bankledger.computations")

AUDIT_COMPLETED = "Processing completed successfully."

_KINDS = {
    "deposit": TransactionKind.DEPOSIT,
    "withdraw": TransactionKind.WITHDRAW,
}


def system_failure_message(name: str, message: str) -> str:
    return f"Processing failed due to a System Error: {name} - {message}"


def parse_initial_balance(raw: Any) -> Optional[float]:
    """Parse the starting balance; None unless it is a finite number >= 0"""
    v = to_number(raw)
    if v is None or v < 0:
        return None
    return v


def check_kind(raw: Any) -> Union[TransactionKind, Rejection]:
    """Validate the transaction type: present, then deposit/withdraw (trimmed, any case)"""
    if isinstance(raw, TransactionKind):
        return raw
    if not raw:
        return Rejection(RejectionReason.MISSING_TYPE, "Transaction type is missing.")
    kind = _KINDS.get(str(raw).strip().lower())
    if kind is None:
        return Rejection(RejectionReason.UNKNOWN_TYPE, f"Transaction type is unknown: {display(raw)}.")
    return kind


def check_amount(raw: Any) -> Union[float, Rejection]:
    """Validate the amount: numeric, then strictly positive"""
    v = to_number(raw)
    if v is None:
        return Rejection(RejectionReason.INVALID_AMOUNT, f"Amount is not a valid number: {display(raw)}.")
    if v <= 0:
        return Rejection(
            RejectionReason.NON_POSITIVE_AMOUNT,
            f"Amount is zero or negative: {format_number(v)}.",
        )
    return v


def check_funds(kind: TransactionKind, amount: float, balance: float) -> Optional[Rejection]:
    if kind is TransactionKind.WITHDRAW and amount > balance:
        return Rejection(
            RejectionReason.INSUFFICIENT_FUNDS,
            f"Withdrawal amount (${format_money(amount)}) is greater than "
            f"available balance (${format_money(balance)}).",
        )
    return None


def validate_transaction(
    request: TransactionRequest, balance: float
) -> Union[Tuple[TransactionKind, float], Rejection]:
    """
    Run the rules in order; the first failing rule wins.
    Returns (kind, amount) when the transaction may be applied.
    """
    kind = check_kind(request.kind)
    if isinstance(kind, Rejection):
        return kind
    amount = check_amount(request.amount)
    if isinstance(amount, Rejection):
        return amount
    rejection = check_funds(kind, amount, balance)
    if rejection is not None:
        return rejection
    return kind, amount


def apply_transaction(
    balance: float, sequence: int, request: TransactionRequest
) -> Tuple[float, LedgerEntry]:
    """
    Single fold step: returns the new running balance and the entry for this request.
    A rejected request leaves the balance untouched.
    """
    result = validate_transaction(request, balance)
    if isinstance(result, Rejection):
        log.debug("transaction %d rejected: %s", sequence, result.message)
        return balance, LedgerEntry(
            sequence=sequence,
            request=request,
            status=EntryStatus.REJECTED,
            rejection=result,
        )

    kind, amount = result
    new_balance = balance + amount if kind is TransactionKind.DEPOSIT else balance - amount
    log.debug("transaction %d applied: %s %s -> %s", sequence, kind.value, amount, new_balance)
    return new_balance, LedgerEntry(
        sequence=sequence,
        request=request,
        status=EntryStatus.APPLIED,
        kind=kind,
        amount=amount,
        balance_after=new_balance,
    )


def _as_request(tx: Union[TransactionRequest, Mapping[str, Any]]) -> TransactionRequest:
    if isinstance(tx, TransactionRequest):
        return tx
    return TransactionRequest.from_dict(tx)


def process_transactions(
    account: Account,
    initial_balance_raw: Any,
    transactions: Iterable[Union[TransactionRequest, Mapping[str, Any]]],
) -> LedgerSummary:
    """
    Validate and apply transactions in input order.
    Always returns a summary: rejections are recorded per entry, system
    failures (bad initial balance, unexpected faults) end the batch and are
    reported through outcome/audit_log.
    """
    applied: List[LedgerEntry] = []
    rejected: List[LedgerEntry] = []

    def summary(initial: Any, final: Optional[float], outcome: Outcome, audit: str) -> LedgerSummary:
        return LedgerSummary(
            account_number=account.account_number,
            holder_name=account.holder_name,
            currency=account.currency,
            initial_balance=initial,
            final_balance=final,
            applied=applied,
            rejected=rejected,
            outcome=outcome,
            audit_log=audit,
        )

    try:
        initial = parse_initial_balance(initial_balance_raw)
    except Exception as ex:
        audit = system_failure_message(type(ex).__name__, str(ex))
        log.exception("account %s: initial balance unreadable", account.account_number)
        return summary(initial_balance_raw, None, Outcome.SYSTEM_FAILURE, audit)
    if initial is None:
        audit = system_failure_message(
            "InvalidInitialBalance",
            f"Initial balance is invalid or negative: {display(initial_balance_raw)}",
        )
        log.error("account %s: %s", account.account_number, audit)
        return summary(initial_balance_raw, None, Outcome.SYSTEM_FAILURE, audit)

    balance = initial
    try:
        for sequence, tx in enumerate(transactions, start=1):
            balance, entry = apply_transaction(balance, sequence, _as_request(tx))
            (applied if entry.applied else rejected).append(entry)
    except Exception as ex:
        audit = system_failure_message(type(ex).__name__, str(ex))
        log.exception("account %s: batch aborted", account.account_number)
        return summary(initial, balance, Outcome.SYSTEM_FAILURE, audit)

    log.info(
        "account %s: %d applied, %d rejected, final balance %s",
        account.account_number, len(applied), len(rejected), format_money(balance),
    )
    return summary(initial, balance, Outcome.COMPLETED, AUDIT_COMPLETED)
