"""Per-request wiring: session -> repository -> service."""
from fastapi import Depends
from sqlalchemy.orm import Session

from subscriptions_api.database import get_db
from subscriptions_api.repositories import SQLAlchemySubscriptionRepository, SubscriptionRepository
from subscriptions_api.services import SubscriptionService


def get_subscription_repository(db: Session = Depends(get_db)) -> SubscriptionRepository:
    return SQLAlchemySubscriptionRepository(db)


def get_subscription_service(
    repository: SubscriptionRepository = Depends(get_subscription_repository),
) -> SubscriptionService:
    return SubscriptionService(repository)


__all__ = ["get_subscription_repository", "get_subscription_service"]
