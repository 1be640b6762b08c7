"""
Subscription Repository
نوشتن اتمیک اشتراک + سهم‌ها و خواندن آن برای یک کیف پول

هر تابع session را صریحاً می‌گیرد و در یک تراکنش جدا اجرا می‌شود:
یا همه ردیف‌ها commit می‌شوند یا هیچ‌کدام.
"""

import logging
from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from swap_split.core.exceptions import (
    StorageFailureError,
    SubscriptionAlreadyActiveError,
    SubscriptionNotFoundError,
)
from swap_split.core.services.allocation_validator import ValidatedAllocation
from swap_split.database.models import SwapSubscription, SwapSubscriptionFromToken

logger = logging.getLogger(__name__)


def _transaction(session: AsyncSession):
    """
    Savepoint if the caller already opened a transaction, otherwise a new one.
    Either way the block commits or rolls back as a unit.
    """
    if session.in_transaction():
        return session.begin_nested()
    return session.begin()


async def _get_for_update(
    session: AsyncSession,
    wallet_address: str,
) -> Optional[SwapSubscription]:
    result = await session.execute(
        select(SwapSubscription)
        .where(SwapSubscription.wallet_address == wallet_address)
        .with_for_update()
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def _has_active_subscription(session: AsyncSession, wallet_address: str) -> bool:
    try:
        async with _transaction(session):
            result = await session.execute(
                select(SwapSubscription.is_active)
                .where(SwapSubscription.wallet_address == wallet_address)
            )
            return bool(result.scalar_one_or_none())
    except SQLAlchemyError:
        logger.exception("Could not re-check subscription for %s", wallet_address)
        return False


async def create_subscription(
    session: AsyncSession,
    wallet_address: str,
    to_token: str,
    allocations: Sequence[ValidatedAllocation],
) -> SwapSubscription:
    """
    ثبت اشتراک جدید (یا فعال‌سازی مجدد اشتراک غیرفعال)

    - اشتراک فعال موجود: SubscriptionAlreadyActiveError
    - هر خطای دیتابیس: rollback کامل و StorageFailureError
    """
    try:
        async with _transaction(session):
            subscription = await _get_for_update(session, wallet_address)

            if subscription is not None and subscription.is_active:
                raise SubscriptionAlreadyActiveError(wallet_address)

            rows = [
                SwapSubscriptionFromToken(
                    from_token=a.from_token,
                    percentage=a.percentage,
                )
                for a in allocations
            ]

            if subscription is None:
                subscription = SwapSubscription(
                    wallet_address=wallet_address,
                    to_token=to_token,
                    is_active=True,
                    allocations=rows,
                )
                session.add(subscription)
            else:
                # old rows are deleted before the new ones go in, the same
                # (wallet, from_token) keys may come back
                subscription.allocations.clear()
                await session.flush()

                subscription.to_token = to_token
                subscription.is_active = True
                subscription.created_at = datetime.utcnow()
                subscription.allocations.extend(rows)

            await session.flush()

    except IntegrityError as e:
        # Lost a race with a concurrent subscribe for the same wallet
        if await _has_active_subscription(session, wallet_address):
            logger.warning("Concurrent subscribe lost for %s", wallet_address)
            raise SubscriptionAlreadyActiveError(wallet_address) from e
        logger.exception("Integrity error creating subscription for %s", wallet_address)
        raise StorageFailureError() from e

    except SQLAlchemyError as e:
        logger.exception("Storage error creating subscription for %s", wallet_address)
        raise StorageFailureError() from e

    logger.info(
        "Subscription created: wallet=%s to_token=%s sources=%d",
        wallet_address, to_token, len(allocations),
    )
    return subscription


async def find_subscription_by_wallet(
    session: AsyncSession,
    wallet_address: str,
) -> Optional[SwapSubscription]:
    """گرفتن اشتراک با همه سهم‌ها؛ None اگر وجود ندارد"""
    try:
        async with _transaction(session):
            result = await session.execute(
                select(SwapSubscription)
                .where(SwapSubscription.wallet_address == wallet_address)
                .execution_options(populate_existing=True)
            )
            return result.scalar_one_or_none()
    except SQLAlchemyError as e:
        logger.exception("Storage error reading subscription for %s", wallet_address)
        raise StorageFailureError() from e


async def deactivate_subscription(
    session: AsyncSession,
    wallet_address: str,
) -> SwapSubscription:
    """غیرفعال کردن اشتراک فعال"""
    try:
        async with _transaction(session):
            subscription = await _get_for_update(session, wallet_address)

            if subscription is None or not subscription.is_active:
                raise SubscriptionNotFoundError(wallet_address)

            subscription.is_active = False
            await session.flush()

    except SQLAlchemyError as e:
        logger.exception("Storage error deactivating subscription for %s", wallet_address)
        raise StorageFailureError() from e

    logger.info("Subscription deactivated: wallet=%s", wallet_address)
    return subscription
