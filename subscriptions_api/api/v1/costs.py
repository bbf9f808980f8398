from __future__ import annotations

import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from subscriptions_api.api.dependencies import get_subscription_service
from subscriptions_api.core.exceptions import RepositoryError, ValidationError
from subscriptions_api.schemas.subscription import TotalCostResponse
from subscriptions_api.services import SubscriptionService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/cost", response_model=TotalCostResponse)
def calculate_total_cost(
    start_date: str = Query(..., description="Start month (MM-YYYY)"),
    end_date: str = Query(..., description="End month (MM-YYYY)"),
    user_id: Optional[uuid.UUID] = Query(None),
    service_name: Optional[str] = Query(None),
    service: SubscriptionService = Depends(get_subscription_service),
) -> TotalCostResponse:
    """Total price of subscriptions active at any point in the given month range."""
    logger.info("Controller: calculating total cost")
    if service_name is not None and not service_name.strip():
        service_name = None
    try:
        total_cost = service.calculate_total_cost(user_id, service_name, start_date, end_date)
    except ValidationError as exc:
        logger.info(f"Rejected cost query: {exc}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except RepositoryError as exc:
        logger.error(f"Error calculating cost: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to calculate cost",
        )
    logger.info(f"Total cost calculated: {total_cost}")
    return TotalCostResponse(total_cost=total_cost)
