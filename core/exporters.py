"""
Excel exporter for processed transactions.
One row per record with its outcome and cash back bills.
"""
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from core.config import get_settings
from core.exceptions import ExportError
from core.logger import setup_logger
from core.schema import ProcessedTransaction
from core.validation import describe_error

logger = setup_logger(__name__)

DEFAULT_SHEET_NAME = "Transactions"


def build_result_row(processed: ProcessedTransaction) -> Dict[str, Any]:
    """
    Flatten one processed transaction into a spreadsheet row.

    Args:
        processed: Record with its outcome

    Returns:
        Ordered column -> value mapping
    """
    record = processed.record
    outcome = processed.outcome

    row: Dict[str, Any] = {
        "Line": record.line_number,
        "Account": record.account,
        "Received ($)": record.received,
        "Cash back ($)": record.cashback,
        "Status": "VALID" if outcome.is_valid else "INVALID",
        "Deposit ($)": outcome.deposit if outcome.is_valid else None,
        "Error": None if outcome.is_valid else describe_error(outcome.reason),
    }
    for item in processed.breakdown:
        row[f"{item.denomination}s"] = item.count

    return row


def export_to_excel(
    processed: Sequence[ProcessedTransaction],
    output_path: str,
    sheet_name: str = DEFAULT_SHEET_NAME
) -> str:
    """
    Export processed transactions to an Excel workbook.

    Args:
        processed: Processed transactions in input order
        output_path: Output file path
        sheet_name: Sheet name

    Returns:
        Path to created file

    Raises:
        ExportError: If export fails
    """
    logger.info(f"Exporting {len(processed)} transactions to {output_path}")

    rows: List[Dict[str, Any]] = [build_result_row(item) for item in processed]
    denomination_columns = [f"{d}s" for d in get_settings().denominations]
    columns = [
        "Line", "Account", "Received ($)", "Cash back ($)", "Status", "Deposit ($)", "Error",
        *denomination_columns,
    ]
    output_df = pd.DataFrame(rows, columns=columns)

    try:
        # Ensure output directory exists
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            output_df.to_excel(writer, sheet_name=sheet_name, index=False)

            worksheet = writer.sheets[sheet_name]

            # Auto-fit columns (approximate)
            for idx, col in enumerate(output_df.columns):
                values_len = output_df[col].astype(str).map(len).max() if len(output_df) else 0
                max_len = max(values_len, len(str(col)))
                worksheet.set_column(idx, idx, min(max_len + 2, 50))

        logger.info(f"Successfully exported to {output_path}")
        return output_path

    except Exception as e:
        logger.error(f"Failed to export Excel: {e}")
        raise ExportError(
            "Failed to export to Excel",
            details={"output_path": output_path, "error": str(e)}
        )


def create_output_filename(base_path: Optional[str] = None) -> str:
    """
    Create timestamped output filename.

    Args:
        base_path: Base directory path (defaults to configured export directory)

    Returns:
        Full output file path
    """
    if base_path is None:
        base_path = get_settings().export_dir

    # Create directory if needed
    Path(base_path).mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")
    filename = f"transactions_processed_{timestamp}.xlsx"

    return str(Path(base_path) / filename)
