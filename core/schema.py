"""
Pydantic schemas for transaction records and processing results.
"""
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TransactionRecord(BaseModel):
    """One parsed input line: account, amount received, cash back requested."""
    model_config = ConfigDict(frozen=True)

    line_number: int = Field(..., ge=1, description="1-based ordinal among records read")
    account: int = Field(..., description="Account identifier, not validated")
    received: int = Field(..., description="Amount received in whole dollars")
    cashback: int = Field(..., description="Amount returned in whole dollars")


class ValidationErrorKind(str, Enum):
    """Business rules a transaction can violate, in evaluation order."""
    RECEIVED_NOT_POSITIVE = "ReceivedNotPositive"
    RECEIVED_EXCEEDS_MAX = "ReceivedExceedsMax"
    CASHBACK_NEGATIVE = "CashbackNegative"
    CASHBACK_EXCEEDS_MAX = "CashbackExceedsMax"
    CASHBACK_EXCEEDS_RECEIVED = "CashbackExceedsReceived"


# User-facing messages; limit figures are filled from settings
ERROR_MESSAGES = {
    ValidationErrorKind.RECEIVED_NOT_POSITIVE: "amount received must be > $0.",
    ValidationErrorKind.RECEIVED_EXCEEDS_MAX: "amount received must be <= ${max_received}.",
    ValidationErrorKind.CASHBACK_NEGATIVE: "amount returned must be >= $0.",
    ValidationErrorKind.CASHBACK_EXCEEDS_MAX: "amount returned must be <= ${max_returned}.",
    ValidationErrorKind.CASHBACK_EXCEEDS_RECEIVED: "amount received must be >= amount returned.",
}


class ValidOutcome(BaseModel):
    """Transaction passed every rule."""
    model_config = ConfigDict(frozen=True)

    deposit: int = Field(..., ge=0)
    cashback: int = Field(..., ge=0)

    @property
    def is_valid(self) -> bool:
        return True


class InvalidOutcome(BaseModel):
    """Transaction failed the first rule named by reason."""
    model_config = ConfigDict(frozen=True)

    reason: ValidationErrorKind

    @property
    def is_valid(self) -> bool:
        return False


TransactionOutcome = Union[ValidOutcome, InvalidOutcome]


class DenominationCount(BaseModel):
    """Number of bills of one denomination."""
    model_config = ConfigDict(frozen=True)

    denomination: int = Field(..., ge=1)
    count: int = Field(..., ge=0)


class ProcessedTransaction(BaseModel):
    """A record together with its validation outcome and cash back bills."""
    model_config = ConfigDict(frozen=True)

    record: TransactionRecord
    outcome: TransactionOutcome
    breakdown: List[DenominationCount] = Field(
        default_factory=list,
        description="Empty when the transaction is invalid"
    )


class ProcessingSummary(BaseModel):
    """Counters for a completed run."""
    source_name: str
    records_read: int = 0
    valid_count: int = 0
    invalid_count: int = 0
    total_deposit: int = 0
    total_cashback: int = 0
    stopped_early: bool = Field(
        default=False,
        description="True when reading ended at a malformed line"
    )
    export_path: Optional[str] = None
