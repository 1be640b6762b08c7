"""
Allocation Validator
اعتبارسنجی لیست توکن‌های مبدا و درصدها

ترتیب چک‌ها ثابت است و اولین خطا برگردانده می‌شود:
۱. طول برابر و غیرخالی
۲. فرمت آدرس هر توکن
۳. توکن تکراری
۴. هر درصد بین 0 و 100
۵. جمع درصدها دقیقاً 100
"""

from dataclasses import dataclass
from typing import List, Sequence

from swap_split.core.exceptions import (
    DuplicateSourceError,
    LengthMismatchError,
    PercentageOutOfRangeError,
    PercentageSumMismatchError,
)
from swap_split.core.services.address_validator import validate_address

MIN_PERCENTAGE = 0
MAX_PERCENTAGE = 100
TOTAL_PERCENTAGE = 100


@dataclass(frozen=True)
class ValidatedAllocation:
    from_token: str
    percentage: int


def _check_lengths(from_tokens: Sequence, percentages: Sequence) -> None:
    if len(from_tokens) != len(percentages):
        raise LengthMismatchError(
            f"from_token has {len(from_tokens)} entries but percentage has {len(percentages)}",
            field="percentage",
        )
    if not from_tokens:
        raise LengthMismatchError(
            "At least one from_token is required",
            field="from_token",
        )


def _check_unique(tokens: List[str]) -> None:
    seen = set()
    for i, token in enumerate(tokens):
        if token in seen:
            raise DuplicateSourceError(
                f"from_token {token} appears more than once",
                field="from_token",
                index=i,
            )
        seen.add(token)


def _check_range(percentages: Sequence) -> None:
    for i, p in enumerate(percentages):
        # bool is an int subclass
        if not isinstance(p, int) or isinstance(p, bool) or not MIN_PERCENTAGE <= p <= MAX_PERCENTAGE:
            raise PercentageOutOfRangeError(
                f"percentage[{i}] must be an integer between {MIN_PERCENTAGE} and {MAX_PERCENTAGE}",
                field="percentage",
                index=i,
            )


def _check_total(percentages: Sequence[int]) -> None:
    total = sum(percentages)
    if total != TOTAL_PERCENTAGE:
        raise PercentageSumMismatchError(
            f"percentages must sum to {TOTAL_PERCENTAGE}, got {total}",
            field="percentage",
        )


def validate_allocations(
    from_tokens: Sequence[str],
    percentages: Sequence[int],
) -> List[ValidatedAllocation]:
    """اعتبارسنجی و جفت کردن توکن‌ها با درصدها (به ترتیب ورودی)"""
    _check_lengths(from_tokens, percentages)

    tokens = [
        validate_address(token, field="from_token", index=i)
        for i, token in enumerate(from_tokens)
    ]

    _check_unique(tokens)
    _check_range(percentages)
    _check_total(percentages)

    return [
        ValidatedAllocation(from_token=token, percentage=int(p))
        for token, p in zip(tokens, percentages)
    ]
