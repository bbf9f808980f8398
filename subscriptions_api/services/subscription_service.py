from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from subscriptions_api.core.dates import parse_month_year
from subscriptions_api.models import Subscription
from subscriptions_api.repositories import SubscriptionRepository

logger = logging.getLogger(__name__)


class SubscriptionService:
    def __init__(self, repository: SubscriptionRepository):
        self.repository = repository

    def create_subscription(self, subscription: Subscription) -> Subscription:
        logger.info(f"Service: creating subscription for user {subscription.user_id}")
        return self.repository.create(subscription)

    def get_subscription(self, subscription_id: uuid.UUID) -> Subscription:
        logger.info(f"Service: getting subscription {subscription_id}")
        return self.repository.get_by_id(subscription_id)

    def update_subscription(self, subscription: Subscription) -> Subscription:
        logger.info(f"Service: updating subscription {subscription.id}")
        return self.repository.update(subscription)

    def delete_subscription(self, subscription_id: uuid.UUID) -> None:
        logger.info(f"Service: deleting subscription {subscription_id}")
        self.repository.delete(subscription_id)

    def list_subscriptions(self) -> List[Subscription]:
        logger.info("Service: listing all subscriptions")
        return self.repository.list()

    def calculate_total_cost(
        self,
        user_id: Optional[uuid.UUID],
        service_name: Optional[str],
        start_month_year: str,
        end_month_year: str,
    ) -> int:
        """
        Total price of live subscriptions active at any point between two
        MM-YYYY months (both inclusive). Raises ``InvalidMonthYearError`` for
        a malformed month.
        """
        logger.info(f"Service: calculating total cost from {start_month_year} to {end_month_year}")
        start_date = parse_month_year(start_month_year, field="start date")
        end_date = parse_month_year(end_month_year, field="end date")
        return self.repository.calculate_total_cost(user_id, service_name, start_date, end_date)
