from subscriptions_api.repositories.subscription_repository import (
    SQLAlchemySubscriptionRepository,
    SubscriptionRepository,
)

__all__ = ["SQLAlchemySubscriptionRepository", "SubscriptionRepository"]
