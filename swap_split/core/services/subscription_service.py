"""
Subscription Service
سرویس اشتراک تقسیم سواپ: اعتبارسنجی کامل قبل از هر دسترسی به دیتابیس
"""

from typing import List, Optional

from pydantic import BaseModel, StrictInt, StrictStr
from sqlalchemy.ext.asyncio import AsyncSession

from swap_split.core.exceptions import SelfReferentialSwapError
from swap_split.core.services.address_validator import validate_address
from swap_split.core.services.allocation_validator import validate_allocations
from swap_split.core.services.subscription_repository import (
    create_subscription,
    deactivate_subscription,
    find_subscription_by_wallet,
)
from swap_split.database.models import SwapSubscription


class SubscriptionRequest(BaseModel):
    wallet_address: StrictStr
    to_token: StrictStr
    from_token: List[StrictStr]
    percentage: List[StrictInt]


async def subscribe(session: AsyncSession, request: SubscriptionRequest) -> SwapSubscription:
    """
    ثبت اشتراک جدید

    ترتیب: wallet -> to_token -> from_token/percentage -> to_token در from_token
    """
    wallet_address = validate_address(request.wallet_address, field="wallet_address")
    to_token = validate_address(request.to_token, field="to_token")
    allocations = validate_allocations(request.from_token, request.percentage)

    for i, allocation in enumerate(allocations):
        if allocation.from_token == to_token:
            raise SelfReferentialSwapError(
                "to_token cannot also be a from_token",
                field="from_token",
                index=i,
            )

    return await create_subscription(session, wallet_address, to_token, allocations)


async def get_subscription(session: AsyncSession, wallet_address: str) -> Optional[SwapSubscription]:
    """گرفتن اشتراک کیف پول (None یعنی اشتراکی نیست، نه خطا)"""
    wallet_address = validate_address(wallet_address, field="wallet_address")
    return await find_subscription_by_wallet(session, wallet_address)


async def unsubscribe(session: AsyncSession, wallet_address: str) -> SwapSubscription:
    """غیرفعال کردن اشتراک"""
    wallet_address = validate_address(wallet_address, field="wallet_address")
    return await deactivate_subscription(session, wallet_address)
