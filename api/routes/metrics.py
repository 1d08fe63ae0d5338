"""Diet metrics routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging
from dataclasses import asdict

from api.dependencies import get_db
from api.responses import NOT_FOUND
from domain.schemas.metrics_schemas import MetricsResponse
from services.metrics_service import MetricsService

router = APIRouter(prefix="/users/{user_id}", tags=["Metrics"])
logger = logging.getLogger("dailydiet.api.metrics")


@router.get("/metrics", response_model=MetricsResponse, responses=NOT_FOUND)
def get_metrics(user_id: str, db: Session = Depends(get_db)):
    """
    Meal totals for a user and `daysInSequence`, the number of consecutive
    in-diet meals at the end of the user's meal list.
    """
    metrics = MetricsService.get_metrics(db, user_id)
    return MetricsResponse(**asdict(metrics))
