"""Subscription record: a user's paid access to a service over a month range."""
from __future__ import annotations

import uuid

from sqlalchemy import BigInteger, Column, Date, DateTime, Text, Uuid
from sqlalchemy.sql import func

from subscriptions_api.models.base import Base


class Subscription(Base):
    __tablename__ = "subscriptions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    service_name = Column(Text, nullable=False)
    price = Column(BigInteger, nullable=False)
    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<Subscription(id={self.id}, service_name='{self.service_name}', user_id={self.user_id})>"
