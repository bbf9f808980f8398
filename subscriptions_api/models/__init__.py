"""
SQLAlchemy models for the subscription service.
"""
from subscriptions_api.models.base import Base
from subscriptions_api.models.subscription import Subscription

__all__ = ["Base", "Subscription"]
