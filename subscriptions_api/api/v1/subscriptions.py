"""
Subscriptions API Routes
CRUD over subscription records
"""
from __future__ import annotations

import logging
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from subscriptions_api.api.dependencies import get_subscription_service
from subscriptions_api.core.exceptions import NotFoundError, RepositoryError
from subscriptions_api.schemas.subscription import SubscriptionCreate, SubscriptionRead, SubscriptionUpdate
from subscriptions_api.services import SubscriptionService

logger = logging.getLogger(__name__)

router = APIRouter()


def parse_subscription_id(subscription_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(subscription_id)
    except ValueError:
        logger.info(f"Invalid subscription id: {subscription_id!r}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid subscription ID")


@router.post("", response_model=SubscriptionRead, status_code=status.HTTP_201_CREATED)
def create_subscription(
    payload: SubscriptionCreate,
    service: SubscriptionService = Depends(get_subscription_service),
) -> SubscriptionRead:
    """Create a subscription; the id is assigned by the server."""
    logger.info("Controller: creating subscription")
    try:
        subscription = service.create_subscription(payload.to_model())
    except RepositoryError as exc:
        logger.error(f"Error creating subscription: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create subscription",
        )
    logger.info(f"Subscription created successfully: {subscription.id}")
    return SubscriptionRead.model_validate(subscription)


@router.get("", response_model=List[SubscriptionRead])
def list_subscriptions(
    service: SubscriptionService = Depends(get_subscription_service),
) -> List[SubscriptionRead]:
    """List all subscriptions that have not been deleted."""
    logger.info("Controller: listing all subscriptions")
    try:
        subscriptions = service.list_subscriptions()
    except RepositoryError as exc:
        logger.error(f"Error listing subscriptions: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list subscriptions",
        )
    return [SubscriptionRead.model_validate(s) for s in subscriptions]


@router.get("/{subscription_id}", response_model=SubscriptionRead)
def get_subscription(
    subscription_id: str,
    service: SubscriptionService = Depends(get_subscription_service),
) -> SubscriptionRead:
    sub_id = parse_subscription_id(subscription_id)
    logger.info(f"Controller: getting subscription {sub_id}")
    try:
        subscription = service.get_subscription(sub_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subscription not found")
    except RepositoryError as exc:
        logger.error(f"Error getting subscription: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get subscription",
        )
    return SubscriptionRead.model_validate(subscription)


@router.put("/{subscription_id}", response_model=SubscriptionRead)
def update_subscription(
    subscription_id: str,
    payload: SubscriptionUpdate,
    service: SubscriptionService = Depends(get_subscription_service),
) -> SubscriptionRead:
    """Replace every mutable field; the id always comes from the path."""
    sub_id = parse_subscription_id(subscription_id)
    logger.info(f"Controller: updating subscription {sub_id}")
    try:
        subscription = service.update_subscription(payload.to_model(subscription_id=sub_id))
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subscription not found")
    except RepositoryError as exc:
        logger.error(f"Error updating subscription: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update subscription",
        )
    return SubscriptionRead.model_validate(subscription)


@router.delete("/{subscription_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_subscription(
    subscription_id: str,
    service: SubscriptionService = Depends(get_subscription_service),
) -> Response:
    """
    Soft-delete: the row stays in storage but disappears from every read.

    Not idempotent: an unknown or already deleted id returns 404.
    """
    sub_id = parse_subscription_id(subscription_id)
    logger.info(f"Controller: deleting subscription {sub_id}")
    try:
        service.delete_subscription(sub_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subscription not found")
    except RepositoryError as exc:
        logger.error(f"Error deleting subscription: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete subscription",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
