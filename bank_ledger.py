"""
BankLedger
- Validate a batch of deposits/withdrawals against an account balance.
- Print the resulting summary (applied, rejected, final balance, audit message).
- Optionally export the processed entries to CSV or an Excel report.

Run:
  python bank_ledger.py                       # bundled demonstration input
  python bank_ledger.py --input account.json
  python bank_ledger.py --csv txs.csv --initial-balance 100 --account-number 42

Dependencies:
  pip install openpyxl
"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional

from models import Account, AccountInput, LedgerSummary
from config import crash_account_input, demo_account_input, load_account_input, summary_to_dict
from computations import process_transactions
from csv_handler import export_entries_to_csv, import_transactions_from_csv
from excel_export import export_excel

log = logging.getLogger("bankledger")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bank_ledger",
        description="Validate and apply bank transactions, then print the account summary.",
    )
    src = p.add_mutually_exclusive_group()
    src.add_argument("--input", metavar="FILE", help="account input JSON document")
    src.add_argument("--csv", metavar="FILE", help="transactions CSV (type,amount)")
    src.add_argument("--crash-demo", action="store_true",
                     help="run the demonstration input with a corrupted initial balance")
    p.add_argument("--initial-balance", default="0", help="starting balance for --csv (default: 0)")
    p.add_argument("--account-number", default="", help="account number for --csv")
    p.add_argument("--holder", default="", help="account holder name for --csv")
    p.add_argument("--currency", default="USD", help="currency code for --csv (default: USD)")
    p.add_argument("--export-csv", metavar="PATH", help="write processed entries to CSV")
    p.add_argument("--export-excel", metavar="PATH", help="write an Excel report")
    p.add_argument("-v", "--verbose", action="store_true", help="log every transaction")
    return p


def load_input(args: argparse.Namespace) -> AccountInput:
    """Resolve the account input selected on the command line"""
    if args.input:
        return load_account_input(args.input)
    if args.csv:
        return AccountInput(
            account=Account(args.account_number, args.holder, args.currency),
            initial_balance=args.initial_balance,
            transactions=import_transactions_from_csv(args.csv),
        )
    if args.crash_demo:
        return crash_account_input()
    return demo_account_input()


def run(inp: AccountInput) -> LedgerSummary:
    summary = process_transactions(inp.account, inp.initial_balance, inp.transactions)
    if not summary.succeeded:
        log.critical("CRITICAL SYSTEM ERROR: %s", summary.audit_log)
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application"""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        inp = load_input(args)
    except (OSError, ValueError) as ex:
        log.error("cannot read input: %s", ex)
        return 2

    summary = run(inp)

    print("=" * 55)
    print("PROCESSING COMPLETE")
    print("=" * 55)
    print(json.dumps(summary_to_dict(summary), indent=2, default=str))

    try:
        if args.export_csv:
            export_entries_to_csv(summary, args.export_csv)
            print(f"Exported CSV: {args.export_csv}")
        if args.export_excel:
            export_excel(summary, args.export_excel)
            print(f"Exported Excel: {args.export_excel}")
    except OSError as ex:
        log.error("export failed: %s", ex)
        return 2

    return 0 if summary.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
