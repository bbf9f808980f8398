from subscriptions_api.services.subscription_service import SubscriptionService

__all__ = ["SubscriptionService"]
