"""
Flow protection API: personality presets, low-stimulus mode, personality
assessment and time-of-day focus recommendations.
"""

from typing import List, Optional
from datetime import datetime
from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import User
from ..schemas import (
    ApplyPresetRequest, ApplyPresetResponse, FlowRecommendationOut, FlowStrategySchema,
    PersonalityAssessmentIn, PersonalityAssessmentOut
)
from ..scheduling.flow.advisor import assess_personality_type, low_stimulus_mode
from ..scheduling.flow.presets import get_preset, load_presets
from ..services.flow_service import flow_service
from .dependencies import get_user

router = APIRouter()


@router.get("/presets", response_model=List[FlowStrategySchema])
async def list_personality_presets():
    return [preset.to_dict() for preset in load_presets()]


@router.get("/low-stimulus")
async def get_low_stimulus_mode():
    """Overrides applied on top of a strategy for low-stimulus days."""
    return low_stimulus_mode()


@router.post("/assess", response_model=PersonalityAssessmentOut)
async def assess_personality(assessment: PersonalityAssessmentIn = Body(...)):
    personality_type = assess_personality_type(
        preferred_start_time=assessment.preferred_start_time,
        most_productive_hours=assessment.most_productive_hours,
        task_switch_tolerance=assessment.task_switch_tolerance,
        collaboration_preference=assessment.collaboration_preference,
        energy_fluctuations=assessment.energy_fluctuations,
    )
    return {"personality_type": personality_type, "preset": get_preset(personality_type).to_dict()}


@router.get("/{user_id}/strategy", response_model=Optional[FlowStrategySchema])
async def get_current_strategy(
    db: Session = Depends(get_db),
    user: User = Depends(get_user),
):
    record = flow_service.current_strategy(db, user.id)
    if not record:
        return None
    return flow_service.to_strategy(record).to_dict()


@router.post("/{user_id}/apply-preset", response_model=ApplyPresetResponse)
async def apply_preset(
    request: ApplyPresetRequest = Body(...),
    db: Session = Depends(get_db),
    user: User = Depends(get_user),
):
    try:
        record = flow_service.apply_preset(db, user.id, request.personality_type, request.low_stimulus)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid personality type")
    return {
        "success": True,
        "message": "Flow strategy applied successfully",
        "strategy": flow_service.to_strategy(record).to_dict(),
    }


@router.get("/{user_id}/recommendations", response_model=FlowRecommendationOut)
async def get_flow_recommendations(
    at: Optional[datetime] = Query(None, description="Moment to evaluate; defaults to now"),
    db: Session = Depends(get_db),
    user: User = Depends(get_user),
):
    return flow_service.recommendations_for(db, user.id, at).to_dict()
