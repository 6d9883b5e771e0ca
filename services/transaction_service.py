"""
Transaction processing service.
Reads records, validates them, breaks cash back into bills and reports each one.
"""
import sys
from typing import Iterable, List, Optional, TextIO

from core.config import get_settings
from core.denominations import break_into_denominations
from core.exceptions import FileProcessingError
from core.exporters import create_output_filename, export_to_excel
from core.logger import setup_logger
from core.parsing import RecordReader, open_transaction_source
from core.reporting import format_banner, format_open_error, format_result, format_summary
from core.schema import ProcessedTransaction, ProcessingSummary, TransactionRecord
from core.validation import validate_transaction

logger = setup_logger(__name__)


class TransactionService:
    """Service running transaction records through validation and reporting."""

    def __init__(self):
        """Initialize transaction service."""
        self.settings = get_settings()

    def process_record(self, record: TransactionRecord) -> ProcessedTransaction:
        """
        Validate a single record and compute its cash back bills.

        Args:
            record: Parsed transaction

        Returns:
            ProcessedTransaction; breakdown is empty when the record is invalid
        """
        outcome = validate_transaction(
            record,
            max_received=self.settings.max_received,
            max_returned=self.settings.max_returned,
        )

        breakdown = []
        if outcome.is_valid:
            breakdown = break_into_denominations(outcome.cashback, self.settings.denominations)

        return ProcessedTransaction(record=record, outcome=outcome, breakdown=breakdown)

    def _write(self, output: TextIO, lines: List[str]) -> None:
        for line in lines:
            output.write(line + "\n")

    def process_lines(
        self,
        lines: Iterable[str],
        output: TextIO,
        source_name: str,
        collected: Optional[List[ProcessedTransaction]] = None
    ) -> ProcessingSummary:
        """
        Process every record in a line source, writing the report as it goes.

        Args:
            lines: Text lines to parse
            output: Stream receiving the report
            source_name: Name quoted in the summary line
            collected: Optional list receiving each processed transaction

        Returns:
            Counters for the run
        """
        summary = ProcessingSummary(source_name=source_name)
        reader = RecordReader(lines, stop_on_malformed=self.settings.stop_on_malformed)

        for record in reader:
            processed = self.process_record(record)
            self._write(
                output,
                format_result(processed, self.settings.max_received, self.settings.max_returned)
            )

            summary.records_read += 1
            if processed.outcome.is_valid:
                summary.valid_count += 1
                summary.total_deposit += processed.outcome.deposit
                summary.total_cashback += processed.outcome.cashback
            else:
                summary.invalid_count += 1

            if collected is not None:
                collected.append(processed)

        summary.stopped_early = reader.stopped_early
        self._write(output, format_summary(summary.records_read, source_name))

        logger.info(
            f"Processed {summary.records_read} records from {source_name}: "
            f"{summary.valid_count} valid, {summary.invalid_count} invalid"
        )
        return summary

    def process_file(
        self,
        file_path: Optional[str] = None,
        output: Optional[TextIO] = None,
        export: bool = False,
        export_path: Optional[str] = None
    ) -> ProcessingSummary:
        """
        Process a transaction file through the full pipeline.

        Args:
            file_path: Path to the text file (defaults to configured input file)
            output: Report stream (defaults to stdout)
            export: Write an Excel workbook of the results
            export_path: Workbook path (defaults to a timestamped file in the export directory)

        Returns:
            Counters for the run

        Raises:
            FileProcessingError: If the input file cannot be opened
            ExportError: If the workbook cannot be written
        """
        file_path = file_path or self.settings.input_file
        if output is None:
            output = sys.stdout

        self._write(output, format_banner(file_path))

        collected: Optional[List[ProcessedTransaction]] = [] if export else None
        try:
            with open_transaction_source(file_path) as handle:
                summary = self.process_lines(handle, output, file_path, collected)
        except FileProcessingError as e:
            self._write(output, [format_open_error()])
            logger.error(e.message)
            raise

        if export:
            target = export_path or create_output_filename(self.settings.export_dir)
            summary.export_path = export_to_excel(collected, target)

        return summary
