"""
Smart scheduling API: preview and auto-schedule a day, and manage the
committed time blocks the scheduler plans around.
"""

from typing import List
from datetime import date as _date
from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import User
from ..schemas import ScheduleRequest, ScheduleResultOut, TimeBlockCreate, TimeBlockOut
from ..services.scheduler_service import result_to_dict, scheduler_service
from .dependencies import get_user

router = APIRouter()


@router.post("/{user_id}/preview", response_model=ScheduleResultOut)
async def preview_schedule(
    request: ScheduleRequest = Body(...),
    db: Session = Depends(get_db),
    user: User = Depends(get_user),
):
    """Plan the requested day without saving any blocks."""
    try:
        options = scheduler_service.resolve_options(db, user.id, request.options, request.use_flow_strategy)
        result = scheduler_service.preview_schedule(db, user.id, request.date, options, request.activity_ids)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return result_to_dict(request.date, result, saved=False)


@router.post("/{user_id}/auto", response_model=ScheduleResultOut)
async def auto_schedule(
    request: ScheduleRequest = Body(...),
    db: Session = Depends(get_db),
    user: User = Depends(get_user),
):
    """Plan the requested day and save the produced task and break blocks."""
    try:
        options = scheduler_service.resolve_options(db, user.id, request.options, request.use_flow_strategy)
        result = scheduler_service.auto_schedule(db, user.id, request.date, options, request.activity_ids)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return result_to_dict(request.date, result, saved=True)


@router.get("/{user_id}/blocks", response_model=List[TimeBlockOut])
async def list_blocks(
    date: _date = Query(..., description="Day to list committed time blocks for"),
    db: Session = Depends(get_db),
    user: User = Depends(get_user),
):
    return scheduler_service.blocks_for_day(db, user.id, date)


@router.post("/{user_id}/blocks", response_model=TimeBlockOut, status_code=201)
async def create_block(
    block_in: TimeBlockCreate = Body(...),
    db: Session = Depends(get_db),
    user: User = Depends(get_user),
):
    """Add committed time (a meeting, an external event) for the scheduler to plan around."""
    return scheduler_service.create_block(db, user.id, block_in)
