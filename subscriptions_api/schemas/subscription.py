from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from subscriptions_api.core.dates import format_month_year, parse_month_year
from subscriptions_api.models import Subscription

# price column is a signed 64-bit BIGINT
MAX_PRICE = 2**63 - 1


class SubscriptionWrite(BaseModel):
    """Body accepted by create and full-replace update; dates are MM-YYYY."""

    service_name: str = Field(min_length=1)
    price: int = Field(ge=0, le=MAX_PRICE, strict=True)
    user_id: UUID
    start_date: date
    end_date: Optional[date] = None

    @field_validator("service_name")
    @classmethod
    def validate_service_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("service_name must not be blank")
        return value

    @field_validator("start_date", mode="before")
    @classmethod
    def parse_start_date(cls, value: Any) -> date:
        return parse_month_year(value, field="start date")

    @field_validator("end_date", mode="before")
    @classmethod
    def parse_end_date(cls, value: Any) -> Optional[date]:
        if value is None:
            return None
        return parse_month_year(value, field="end date")

    def to_model(self, subscription_id: Optional[UUID] = None) -> Subscription:
        return Subscription(
            id=subscription_id,
            service_name=self.service_name,
            price=self.price,
            user_id=self.user_id,
            start_date=self.start_date,
            end_date=self.end_date,
        )


class SubscriptionCreate(SubscriptionWrite):
    pass


class SubscriptionUpdate(SubscriptionWrite):
    """Full replacement; any ``id`` in the body is ignored in favour of the path."""


class SubscriptionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    service_name: str
    price: int
    user_id: UUID
    start_date: date
    end_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_serializer("start_date")
    def serialize_start_date(self, value: date) -> str:
        return format_month_year(value)

    @field_serializer("end_date")
    def serialize_end_date(self, value: Optional[date]) -> Optional[str]:
        return format_month_year(value) if value is not None else None


class TotalCostResponse(BaseModel):
    total_cost: int
