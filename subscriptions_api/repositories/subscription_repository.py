"""
Subscription persistence.

``SubscriptionRepository`` is the contract the service layer depends on;
``SQLAlchemySubscriptionRepository`` implements it against a SQLAlchemy
session. Rows are never physically removed: delete stamps ``deleted_at`` and
every query filters on ``not_deleted()`` so marked rows stay invisible.
"""
from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from subscriptions_api.core.exceptions import RepositoryError, SubscriptionNotFoundError
from subscriptions_api.models import Subscription

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("service_name", "price", "user_id", "start_date", "end_date")


def not_deleted():
    """Predicate shared by every read path: the row has no soft-delete marker."""
    return Subscription.deleted_at.is_(None)


class SubscriptionRepository(ABC):
    """Storage contract for subscription records."""

    @abstractmethod
    def create(self, subscription: Subscription) -> Subscription:
        """Persist a new record, assigning its id first."""

    @abstractmethod
    def get_by_id(self, subscription_id: uuid.UUID) -> Subscription:
        """Return the live record or raise ``SubscriptionNotFoundError``."""

    @abstractmethod
    def update(self, subscription: Subscription) -> Subscription:
        """Overwrite every mutable field of the live record with the same id."""

    @abstractmethod
    def delete(self, subscription_id: uuid.UUID) -> None:
        """Soft-delete the live record; raise ``SubscriptionNotFoundError`` if there is none."""

    @abstractmethod
    def list(self) -> List[Subscription]:
        """Return all live records."""

    @abstractmethod
    def calculate_total_cost(
        self,
        user_id: Optional[uuid.UUID],
        service_name: Optional[str],
        start_date: date,
        end_date: date,
    ) -> int:
        """Sum prices of live records whose active months overlap [start_date, end_date]."""


class SQLAlchemySubscriptionRepository(SubscriptionRepository):
    def __init__(self, db: Session):
        self.db = db

    def _live(self) -> Query:
        return self.db.query(Subscription).filter(not_deleted())

    def _fail(self, action: str, exc: SQLAlchemyError) -> RepositoryError:
        self.db.rollback()
        logger.error(f"Failed to {action}: {exc}")
        return RepositoryError(f"Failed to {action}")

    def create(self, subscription: Subscription) -> Subscription:
        if subscription.id is None:
            subscription.id = uuid.uuid4()
        logger.info(
            f"Creating subscription {subscription.id} for user {subscription.user_id} "
            f"to service {subscription.service_name}"
        )
        try:
            self.db.add(subscription)
            self.db.commit()
            self.db.refresh(subscription)
        except SQLAlchemyError as exc:
            raise self._fail("create subscription", exc) from exc
        return subscription

    def get_by_id(self, subscription_id: uuid.UUID) -> Subscription:
        try:
            subscription = self._live().filter(Subscription.id == subscription_id).first()
        except SQLAlchemyError as exc:
            raise self._fail(f"get subscription {subscription_id}", exc) from exc
        if subscription is None:
            raise SubscriptionNotFoundError(subscription_id)
        return subscription

    def update(self, subscription: Subscription) -> Subscription:
        logger.info(f"Updating subscription {subscription.id}")
        stored = self.get_by_id(subscription.id)
        for field in MUTABLE_FIELDS:
            setattr(stored, field, getattr(subscription, field))
        try:
            self.db.commit()
            self.db.refresh(stored)
        except SQLAlchemyError as exc:
            raise self._fail(f"update subscription {subscription.id}", exc) from exc
        return stored

    def delete(self, subscription_id: uuid.UUID) -> None:
        logger.info(f"Deleting subscription {subscription_id}")
        try:
            affected = (
                self._live()
                .filter(Subscription.id == subscription_id)
                .update({Subscription.deleted_at: datetime.now(timezone.utc)}, synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail(f"delete subscription {subscription_id}", exc) from exc
        if not affected:
            raise SubscriptionNotFoundError(subscription_id)

    def list(self) -> List[Subscription]:
        try:
            return self._live().all()
        except SQLAlchemyError as exc:
            raise self._fail("list subscriptions", exc) from exc

    def calculate_total_cost(
        self,
        user_id: Optional[uuid.UUID],
        service_name: Optional[str],
        start_date: date,
        end_date: date,
    ) -> int:
        logger.info(
            f"Calculating total cost for period {start_date:%m-%Y} to {end_date:%m-%Y} "
            f"(user={user_id}, service={service_name})"
        )
        query = (
            self.db.query(func.coalesce(func.sum(Subscription.price), 0))
            .filter(not_deleted())
            .filter(
                Subscription.start_date <= end_date,
                or_(Subscription.end_date.is_(None), Subscription.end_date >= start_date),
            )
        )
        if user_id is not None:
            query = query.filter(Subscription.user_id == user_id)
        if service_name is not None:
            query = query.filter(Subscription.service_name == service_name)

        try:
            total = query.scalar()
        except SQLAlchemyError as exc:
            raise self._fail("calculate total cost", exc) from exc
        return int(total or 0)
