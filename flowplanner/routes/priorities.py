"""
Smart priority API: ranked pending activities and personalized recommendations.
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import User
from ..schemas import RecommendationsOut, ScoredActivityOut
from ..services.scheduler_service import scored_to_dict, scheduler_service
from .dependencies import get_user

router = APIRouter()


@router.get("/{user_id}", response_model=List[ScoredActivityOut])
async def get_ranked_activities(
    db: Session = Depends(get_db),
    user: User = Depends(get_user),
):
    """Pending activities ordered by smart priority, highest first."""
    try:
        ranked = scheduler_service.ranked_activities(db, user.id)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return [scored_to_dict(item, score) for item, score in ranked]


@router.get("/{user_id}/recommendations", response_model=RecommendationsOut)
async def get_recommendations(
    db: Session = Depends(get_db),
    user: User = Depends(get_user),
):
    """Top priorities, quick wins and suggestions per time of day."""
    try:
        return scheduler_service.recommendations(db, user.id)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
