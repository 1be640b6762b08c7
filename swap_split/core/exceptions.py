"""
Subscription Errors
خطاهای ثبت و خواندن اشتراک سواپ
"""

from typing import Optional


class SubscriptionError(Exception):
    """خطای پایه اشتراک"""

    reason = "SubscriptionError"

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        index: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.field = field
        self.index = index

    def to_detail(self) -> dict:
        return {
            "reason": self.reason,
            "message": self.message,
            "field": self.field,
            "index": self.index,
        }


# === Validation (client errors) ===

class SubscriptionValidationError(SubscriptionError):
    """ورودی نامعتبر - قبل از دسترسی به دیتابیس"""
    reason = "ValidationFailed"


class InvalidFormatError(SubscriptionValidationError):
    reason = "InvalidFormat"


class LengthMismatchError(SubscriptionValidationError):
    reason = "LengthMismatch"


class DuplicateSourceError(SubscriptionValidationError):
    reason = "DuplicateSource"


class PercentageOutOfRangeError(SubscriptionValidationError):
    reason = "PercentageOutOfRange"


class PercentageSumMismatchError(SubscriptionValidationError):
    reason = "PercentageSumMismatch"


class SelfReferentialSwapError(SubscriptionValidationError):
    reason = "SelfReferentialSwap"


# === State ===

class SubscriptionAlreadyActiveError(SubscriptionError):
    """کیف پول از قبل اشتراک فعال دارد"""
    reason = "AlreadyActive"

    def __init__(self, wallet_address: str):
        super().__init__(
            f"Wallet {wallet_address} already has an active subscription",
            field="wallet_address",
        )
        self.wallet_address = wallet_address


class SubscriptionNotFoundError(SubscriptionError):
    reason = "NotFound"

    def __init__(self, wallet_address: str):
        super().__init__(
            f"No active subscription for wallet {wallet_address}",
            field="wallet_address",
        )
        self.wallet_address = wallet_address


# === Storage ===

class StorageFailureError(SubscriptionError):
    """خطای دیتابیس - جزئیات فقط در لاگ"""
    reason = "StorageFailure"

    def __init__(self, message: str = "Storage failure"):
        super().__init__(message)
