"""
Business rule validation for transaction records.
Rules are evaluated in a fixed order and the first failure is reported.
"""
from typing import Optional

from core.config import get_settings
from core.logger import setup_logger
from core.schema import (
    ERROR_MESSAGES,
    InvalidOutcome,
    TransactionOutcome,
    TransactionRecord,
    ValidationErrorKind,
    ValidOutcome,
)

logger = setup_logger(__name__)


def validate_amounts(
    received: int,
    cashback: int,
    max_received: Optional[int] = None,
    max_returned: Optional[int] = None
) -> TransactionOutcome:
    """
    Check received and cash back amounts against the business rules.

    Args:
        received: Amount received
        cashback: Amount to return
        max_received: Optional custom received limit (defaults to configured value)
        max_returned: Optional custom cash back limit (defaults to configured value)

    Returns:
        ValidOutcome with the deposit, or InvalidOutcome naming the first violated rule
    """
    settings = get_settings()
    if max_received is None:
        max_received = settings.max_received
    if max_returned is None:
        max_returned = settings.max_returned

    if received <= 0:
        return InvalidOutcome(reason=ValidationErrorKind.RECEIVED_NOT_POSITIVE)
    if received > max_received:
        return InvalidOutcome(reason=ValidationErrorKind.RECEIVED_EXCEEDS_MAX)
    if cashback < 0:
        return InvalidOutcome(reason=ValidationErrorKind.CASHBACK_NEGATIVE)
    if cashback > max_returned:
        return InvalidOutcome(reason=ValidationErrorKind.CASHBACK_EXCEEDS_MAX)
    if received < cashback:
        return InvalidOutcome(reason=ValidationErrorKind.CASHBACK_EXCEEDS_RECEIVED)

    return ValidOutcome(deposit=received - cashback, cashback=cashback)


def validate_transaction(
    record: TransactionRecord,
    max_received: Optional[int] = None,
    max_returned: Optional[int] = None
) -> TransactionOutcome:
    """
    Validate a parsed transaction record.

    Args:
        record: Transaction to check
        max_received: Optional custom received limit
        max_returned: Optional custom cash back limit

    Returns:
        Validation outcome
    """
    outcome = validate_amounts(record.received, record.cashback, max_received, max_returned)
    if not outcome.is_valid:
        logger.debug(f"Record {record.line_number} rejected: {outcome.reason.value}")
    return outcome


def describe_error(
    kind: ValidationErrorKind,
    max_received: Optional[int] = None,
    max_returned: Optional[int] = None
) -> str:
    """
    Build the user-facing message for a rule violation.

    Args:
        kind: Violated rule
        max_received: Optional custom received limit
        max_returned: Optional custom cash back limit

    Returns:
        Message such as "amount received must be <= $10000."
    """
    settings = get_settings()
    return ERROR_MESSAGES[kind].format(
        max_received=settings.max_received if max_received is None else max_received,
        max_returned=settings.max_returned if max_returned is None else max_returned,
    )
