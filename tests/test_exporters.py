"""
Tests for the Excel exporter.
"""
import pandas as pd
import pytest

from core.denominations import break_into_denominations
from core.exceptions import ExportError
from core.exporters import build_result_row, create_output_filename, export_to_excel
from core.schema import (
    InvalidOutcome,
    ProcessedTransaction,
    TransactionRecord,
    ValidationErrorKind,
    ValidOutcome,
)


@pytest.fixture
def processed():
    return [
        ProcessedTransaction(
            record=TransactionRecord(line_number=1, account=1001, received=100, cashback=37),
            outcome=ValidOutcome(deposit=63, cashback=37),
            breakdown=break_into_denominations(37),
        ),
        ProcessedTransaction(
            record=TransactionRecord(line_number=2, account=1002, received=20, cashback=30),
            outcome=InvalidOutcome(reason=ValidationErrorKind.CASHBACK_EXCEEDS_RECEIVED),
        ),
    ]


def test_build_result_row_valid(processed):
    row = build_result_row(processed[0])
    assert row["Status"] == "VALID"
    assert row["Deposit ($)"] == 63
    assert row["Error"] is None
    assert row["20s"] == 1
    assert row["1s"] == 2


def test_build_result_row_invalid(processed):
    row = build_result_row(processed[1])
    assert row["Status"] == "INVALID"
    assert row["Deposit ($)"] is None
    assert row["Error"] == "amount received must be >= amount returned."
    assert "50s" not in row


def test_export_to_excel(processed, tmp_path):
    output_path = str(tmp_path / "nested" / "results.xlsx")
    assert export_to_excel(processed, output_path) == output_path

    df = pd.read_excel(output_path, sheet_name="Transactions")
    assert list(df.columns) == [
        "Line", "Account", "Received ($)", "Cash back ($)", "Status", "Deposit ($)", "Error",
        "50s", "20s", "10s", "5s", "1s",
    ]
    assert list(df["Status"]) == ["VALID", "INVALID"]
    assert df.loc[0, "Deposit ($)"] == 63
    assert df.loc[1, "Error"] == "amount received must be >= amount returned."


def test_export_empty(tmp_path):
    output_path = str(tmp_path / "empty.xlsx")
    export_to_excel([], output_path)
    assert len(pd.read_excel(output_path)) == 0


def test_export_failure_raises(processed, tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    with pytest.raises(ExportError) as exc_info:
        export_to_excel(processed, str(blocker / "results.xlsx"))
    assert "output_path" in exc_info.value.details


def test_create_output_filename(tmp_path):
    path = create_output_filename(str(tmp_path / "exports"))
    assert path.startswith(str(tmp_path / "exports"))
    assert path.endswith(".xlsx")
    assert (tmp_path / "exports").is_dir()
