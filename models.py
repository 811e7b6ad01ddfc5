"""
Data models for BankLedger
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional


class TransactionKind(str, Enum):
    DEPOSIT = "Deposit"
    WITHDRAW = "Withdraw"


class EntryStatus(str, Enum):
    APPLIED = "Applied"
    REJECTED = "Rejected"


class Outcome(str, Enum):
    COMPLETED = "Completed"
    SYSTEM_FAILURE = "SystemFailure"


class RejectionReason(str, Enum):
    """Rule that rejected a transaction; exactly one per rejection"""
    MISSING_TYPE = "type missing"
    UNKNOWN_TYPE = "unknown type"
    INVALID_AMOUNT = "amount is not a valid number"
    NON_POSITIVE_AMOUNT = "amount is zero or negative"
    INSUFFICIENT_FUNDS = "insufficient funds"


@dataclass
class Account:
    """Bank account echoed into the summary"""
    account_number: str
    holder_name: str
    currency: str


@dataclass
class TransactionRequest:
    """Raw transaction as supplied by the caller (values not yet validated)"""
    kind: Any = None
    amount: Any = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "TransactionRequest":
        kind = d.get("type", d.get("kind"))
        return cls(kind=kind, amount=d.get("amount"))


@dataclass
class Rejection:
    reason: RejectionReason
    message: str


@dataclass
class LedgerEntry:
    """One processed transaction"""
    sequence: int  # 1-based position in the input list
    request: TransactionRequest
    status: EntryStatus
    kind: Optional[TransactionKind] = None
    amount: Optional[float] = None  # normalized, applied entries only
    balance_after: Optional[float] = None
    rejection: Optional[Rejection] = None

    @property
    def applied(self) -> bool:
        return self.status is EntryStatus.APPLIED


@dataclass
class AccountInput:
    """Complete input of one ledger run"""
    account: Account
    initial_balance: Any
    transactions: List[TransactionRequest] = field(default_factory=list)


@dataclass
class LedgerSummary:
    """Result of processing a batch of transactions"""
    account_number: str
    holder_name: str
    currency: str
    initial_balance: Any  # parsed float, or the raw value when invalid
    final_balance: Optional[float]
    applied: List[LedgerEntry]
    rejected: List[LedgerEntry]
    outcome: Outcome
    audit_log: str

    @property
    def succeeded(self) -> bool:
        return self.outcome is Outcome.COMPLETED

    def entries(self) -> List[LedgerEntry]:
        """Applied and rejected entries merged back into input order"""
        return sorted(self.applied + self.rejected, key=lambda e: e.sequence)
