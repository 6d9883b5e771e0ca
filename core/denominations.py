"""
Cash back breakdown into bills, largest denomination first.
"""
from typing import List, Optional, Sequence, Tuple

from core.config import get_settings
from core.schema import DenominationCount


def get_bills(amount: int, value: int) -> Tuple[int, int]:
    """
    Take as many bills of one value as fit into an amount.

    Args:
        amount: Amount still to pay out
        value: Bill value

    Returns:
        Tuple of (bill count, remaining amount)
    """
    return amount // value, amount % value


def break_into_denominations(
    amount: int,
    denominations: Optional[Sequence[int]] = None
) -> List[DenominationCount]:
    """
    Break an amount into bills using the greedy largest-first rule.

    Every denomination is listed, including those with a zero count.

    Args:
        amount: Non-negative amount to break down
        denominations: Descending bill values ending in 1 (defaults to configured set)

    Returns:
        One DenominationCount per denomination, in the given order

    Raises:
        ValueError: If amount is negative or a remainder is left over
    """
    if amount < 0:
        raise ValueError(f"Cannot break down a negative amount: {amount}")

    if denominations is None:
        denominations = get_settings().denominations

    remaining = amount
    breakdown = []
    for value in denominations:
        count, remaining = get_bills(remaining, value)
        breakdown.append(DenominationCount(denomination=value, count=count))

    if remaining:
        raise ValueError(
            f"Denominations {list(denominations)} leave {remaining} of {amount} unpaid"
        )

    return breakdown


def breakdown_total(breakdown: Sequence[DenominationCount]) -> int:
    """Sum the value of all bills in a breakdown."""
    return sum(item.denomination * item.count for item in breakdown)
