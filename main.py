"""
Main entry point for the Banked Bums transaction processor.

This module loads configuration, parses the command line and runs
the transaction file through the processing service.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to Python path for module imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv
from pydantic import ValidationError

from core.config import get_settings
from core.exceptions import ConfigurationError, ExportError, FileProcessingError
from core.logger import set_level, setup_logger
from services.transaction_service import TransactionService

# Load environment variables from .env file
_env_file = PROJECT_ROOT / ".env"
if _env_file.exists():
    load_dotenv(_env_file)

logger = setup_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Validate bank transactions and break cash back into bills."
    )
    parser.add_argument(
        "input_file", nargs="?", default=None,
        help="Transaction file with 'account received cashback' per line. Defaults to INPUT_FILE."
    )
    parser.add_argument(
        "--export", nargs="?", const="", default=None, metavar="PATH",
        help="Write results to an Excel workbook. Defaults to a timestamped file in EXPORT_DIR."
    )
    parser.add_argument(
        "--skip-malformed", action="store_true",
        help="Skip malformed lines instead of stopping at the first one."
    )
    parser.add_argument(
        "--log-level", default=None, type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override LOG_LEVEL."
    )
    return parser.parse_args(argv)


def load_settings():
    """Load settings, converting validation failures to ConfigurationError."""
    try:
        return get_settings()
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid configuration",
            details={"errors": [err["msg"] for err in e.errors()]}
        )


def main(argv: Optional[List[str]] = None):
    """Main application entry point."""
    args = parse_args(argv)

    try:
        settings = load_settings()
        if args.skip_malformed:
            settings.stop_on_malformed = False

        log_level = args.log_level or settings.log_level
        set_level(log_level)

        logger.info(f"Starting {settings.app_name}")
        logger.info(f"Limits: received <= {settings.max_received}, returned <= {settings.max_returned}")
        logger.info(f"Denominations: {settings.denominations}")

        service = TransactionService()
        summary = service.process_file(
            args.input_file,
            export=args.export is not None,
            export_path=args.export or None,
        )

        if summary.export_path:
            logger.info(f"Results exported to {summary.export_path}")

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e.message}")
        if e.details:
            logger.error(f"Details: {e.details}")
        sys.exit(1)

    except FileProcessingError as e:
        logger.error(f"Input error: {e.message}")
        sys.exit(1)

    except ExportError as e:
        logger.error(f"Export error: {e.message}")
        if e.details:
            logger.error(f"Details: {e.details}")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Failed to process transactions: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
