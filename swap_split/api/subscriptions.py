"""
Subscriptions API
API ثبت و خواندن اشتراک تقسیم سواپ
"""
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from swap_split.api.rate_limit import limiter
from swap_split.core.config import get_settings
from swap_split.core.exceptions import (
    StorageFailureError,
    SubscriptionAlreadyActiveError,
    SubscriptionError,
    SubscriptionNotFoundError,
    SubscriptionValidationError,
)
from swap_split.core.services.subscription_service import (
    SubscriptionRequest,
    get_subscription,
    subscribe,
    unsubscribe,
)
from swap_split.database.connection import get_session
from swap_split.database.models import SwapSubscription

settings = get_settings()
router = APIRouter(prefix="/subscriptions", tags=["subscriptions"])


# === Pydantic Models ===

class AllocationResponse(BaseModel):
    from_token: str
    percentage: int


class SubscriptionCreatedResponse(BaseModel):
    wallet_address: str
    to_token: str
    is_active: bool
    created_at: datetime


class SubscriptionResponse(SubscriptionCreatedResponse):
    allocations: List[AllocationResponse]


def _to_response(subscription: SwapSubscription) -> SubscriptionResponse:
    return SubscriptionResponse(
        wallet_address=subscription.wallet_address,
        to_token=subscription.to_token,
        is_active=subscription.is_active,
        created_at=subscription.created_at,
        allocations=[
            AllocationResponse(from_token=a.from_token, percentage=a.percentage)
            for a in subscription.allocations
        ],
    )


def _http_error(e: SubscriptionError) -> HTTPException:
    """نگاشت خطای دامنه به وضعیت HTTP"""
    if isinstance(e, SubscriptionValidationError):
        return HTTPException(status_code=400, detail=e.to_detail())
    if isinstance(e, SubscriptionAlreadyActiveError):
        return HTTPException(status_code=409, detail=e.to_detail())
    if isinstance(e, SubscriptionNotFoundError):
        return HTTPException(status_code=404, detail=e.to_detail())
    if isinstance(e, StorageFailureError):
        return HTTPException(status_code=500, detail=e.to_detail())
    return HTTPException(status_code=500, detail={"reason": e.reason, "message": "Internal server error"})


@router.post("", response_model=SubscriptionCreatedResponse)
@limiter.limit(settings.subscribe_rate_limit)
async def create_subscription_endpoint(
    request: Request,
    payload: SubscriptionRequest,
    session: AsyncSession = Depends(get_session),
):
    """ثبت اشتراک جدید"""
    try:
        subscription = await subscribe(session, payload)
    except SubscriptionError as e:
        raise _http_error(e)

    return SubscriptionCreatedResponse(
        wallet_address=subscription.wallet_address,
        to_token=subscription.to_token,
        is_active=subscription.is_active,
        created_at=subscription.created_at,
    )


@router.get("", response_model=Optional[SubscriptionResponse])
async def get_subscription_endpoint(
    wallet_address: str,
    session: AsyncSession = Depends(get_session),
):
    """گرفتن اشتراک کیف پول (null اگر وجود ندارد)"""
    try:
        subscription = await get_subscription(session, wallet_address)
    except SubscriptionError as e:
        raise _http_error(e)

    if not subscription:
        return None

    return _to_response(subscription)


@router.delete("", response_model=SubscriptionResponse)
async def delete_subscription_endpoint(
    wallet_address: str,
    session: AsyncSession = Depends(get_session),
):
    """غیرفعال کردن اشتراک"""
    try:
        subscription = await unsubscribe(session, wallet_address)
    except SubscriptionError as e:
        raise _http_error(e)

    return _to_response(subscription)
