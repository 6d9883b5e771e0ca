"""
Console report formatting.
Every function returns lines without trailing newlines; an empty string is a blank line.
"""
from typing import List, Optional

from core.schema import ProcessedTransaction, TransactionRecord
from core.validation import describe_error

TITLE = "Banked Bums"


def format_banner(source_name: str) -> List[str]:
    """Opening lines printed before the source is read."""
    welcome = f"Welcome to {TITLE}"
    return [
        welcome,
        "-" * len(welcome),
        "",
        f"Reading file '{source_name}' ...",
        "",
        "Line: account, $received, $cashback",
        "",
    ]


def format_record_line(record: TransactionRecord) -> str:
    """Echo of the raw record, e.g. '1: 1001, $100, $37'."""
    return f"{record.line_number}: {record.account}, ${record.received}, ${record.cashback}"


def format_error_line(message: str) -> str:
    return f"Error: {message}"


def format_result(
    processed: ProcessedTransaction,
    max_received: Optional[int] = None,
    max_returned: Optional[int] = None
) -> List[str]:
    """
    Format the block printed for one processed transaction.

    Args:
        processed: Record with its outcome
        max_received: Limit quoted in the received error message
        max_returned: Limit quoted in the cash back error message

    Returns:
        Echo line, then the deposit and bills or the error, then a blank line
    """
    lines = [format_record_line(processed.record)]
    outcome = processed.outcome

    if outcome.is_valid:
        lines.append(f"Deposit amount ($): {outcome.deposit}")
        lines.append(f"Cash back ($): {outcome.cashback}")
        for item in processed.breakdown:
            lines.append(f"{item.denomination}s: {item.count}")
    else:
        lines.append(format_error_line(describe_error(outcome.reason, max_received, max_returned)))

    lines.append("")
    return lines


def format_summary(records_read: int, source_name: str) -> List[str]:
    """Closing lines with the record count."""
    return [
        f"{records_read} line(s) read from file '{source_name}'.",
        "",
        f"End of {TITLE}",
    ]


def format_open_error() -> str:
    return format_error_line("unable to open input file.")
