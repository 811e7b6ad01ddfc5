import csv

import pytest

from computations import process_transactions
from config import demo_account_input
from csv_handler import export_entries_to_csv, import_transactions_from_csv


def test_import(tmp_path):
    path = tmp_path / "txs.csv"
    path.write_text("type,amount\nDeposit,100\n,50\nWithdraw,\nTransfer,abc\n", encoding="utf-8")
    txs = import_transactions_from_csv(str(path))
    assert [(t.kind, t.amount) for t in txs] == [
        ("Deposit", "100"),
        (None, "50"),
        ("Withdraw", None),
        ("Transfer", "abc"),
    ]


def test_import_requires_amount_column(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("type,value\nDeposit,1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        import_transactions_from_csv(str(path))


def test_imported_rows_process(account, tmp_path):
    path = tmp_path / "txs.csv"
    path.write_text("type,amount\nDeposit,100\n,50\nwithdraw, 30 \n", encoding="utf-8")
    summary = process_transactions(account, "0", import_transactions_from_csv(str(path)))
    assert summary.final_balance == 70.0
    assert [e.sequence for e in summary.rejected] == [2]


def test_export(tmp_path):
    inp = demo_account_input()
    summary = process_transactions(inp.account, inp.initial_balance, inp.transactions)
    path = tmp_path / "out.csv"
    export_entries_to_csv(summary, str(path))

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["id"] for r in rows] == [str(i) for i in range(1, 11)]
    assert rows[0]["status"] == "Applied"
    assert rows[0]["balance_after"] == "1500.50"
    assert rows[8]["type"] == ""
    assert rows[8]["reason"] == "Transaction type is missing."
    assert rows[9]["balance_after"] == "1150.00"
