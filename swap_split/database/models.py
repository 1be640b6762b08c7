"""
Database Models
مدل‌های دیتابیس برای اشتراک تقسیم سواپ
"""

from datetime import datetime

from sqlalchemy import (
    MetaData,
    Column, String, SmallInteger, DateTime, ForeignKey, Boolean,
    CheckConstraint, PrimaryKeyConstraint, true,
)
from sqlalchemy.orm import DeclarativeBase, relationship


# 0x + 64 hex digits
ADDRESS_COLUMN_LENGTH = 66


# === Naming Convention for Constraints (Standard) ===
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """کلاس پایه برای همه مدل‌ها"""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# === Models ===

class SwapSubscription(Base):
    """اشتراک سواپ - یک اشتراک برای هر کیف پول"""
    __tablename__ = "swap_subscription"

    wallet_address = Column(String(ADDRESS_COLUMN_LENGTH), primary_key=True)
    to_token = Column(String(ADDRESS_COLUMN_LENGTH), nullable=False)
    is_active = Column(Boolean, default=True, server_default=true(), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    allocations = relationship(
        "SwapSubscriptionFromToken",
        back_populates="subscription",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by="SwapSubscriptionFromToken.from_token",
    )


class SwapSubscriptionFromToken(Base):
    """سهم هر توکن مبدا از اشتراک"""
    __tablename__ = "swap_subscription_from_token"
    __table_args__ = (
        PrimaryKeyConstraint("wallet_address", "from_token"),
        CheckConstraint(
            "percentage >= 0 AND percentage <= 100",
            name="percentage_range",
        ),
    )

    wallet_address = Column(
        String(ADDRESS_COLUMN_LENGTH),
        ForeignKey("swap_subscription.wallet_address", ondelete="CASCADE"),
        nullable=False,
    )
    from_token = Column(String(ADDRESS_COLUMN_LENGTH), nullable=False)
    percentage = Column(SmallInteger, nullable=False)

    subscription = relationship("SwapSubscription", back_populates="allocations")
