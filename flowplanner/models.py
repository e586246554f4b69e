from sqlalchemy import String, Integer, Boolean, Enum, ForeignKey, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.ext.mutable import MutableDict, MutableList
from datetime import datetime
from typing import Optional
import enum

from .database import Base
from .scheduling.core.constants import BlockType, PriorityTier

# Enums

class ActivityStatus(str, enum.Enum):
    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

# Activities in these states are never offered to the scheduler
CLOSED_STATUSES = (ActivityStatus.COMPLETED, ActivityStatus.CANCELLED)

# Models

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    username: Mapped[str] = mapped_column(String, unique=True, index=True)
    email: Mapped[str] = mapped_column(String, unique=True, index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    activities = relationship("Activity", back_populates="owner")
    time_blocks = relationship("TimeBlock", back_populates="owner")
    flow_strategies = relationship("FlowStrategy", back_populates="user")


class Activity(Base):
    __tablename__ = "activities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String, index=True)
    description: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    # urgent / high / normal / low; other values score as an unknown tier
    priority: Mapped[str] = mapped_column(String, default=PriorityTier.NORMAL.value)
    status: Mapped[ActivityStatus] = mapped_column(Enum(ActivityStatus), default=ActivityStatus.PLANNED)
    estimated_duration: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)  # minutes
    due_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    collaborators: Mapped[Optional[list[int]]] = mapped_column(MutableList.as_mutable(JSON), default=list)

    created_by: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = relationship("User", back_populates="activities")
    time_blocks = relationship("TimeBlock", back_populates="activity")


class TimeBlock(Base):
    """Committed time on a user's calendar: scheduled tasks, breaks, meetings."""
    __tablename__ = "time_blocks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    activity_id: Mapped[Optional[int]] = mapped_column(ForeignKey("activities.id"), nullable=True)
    title: Mapped[str] = mapped_column(String)
    description: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    start_time: Mapped[datetime] = mapped_column(DateTime, index=True)
    end_time: Mapped[datetime] = mapped_column(DateTime)
    duration: Mapped[int] = mapped_column(Integer)  # minutes
    block_type: Mapped[str] = mapped_column(String, default=BlockType.TASK.value)
    is_scheduled: Mapped[bool] = mapped_column(Boolean, default=False)
    is_completed: Mapped[bool] = mapped_column(Boolean, default=False)
    priority: Mapped[str] = mapped_column(String, default=PriorityTier.NORMAL.value)
    color: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    created_by: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    owner = relationship("User", back_populates="time_blocks")
    activity = relationship("Activity", back_populates="time_blocks")


class FlowStrategy(Base):
    """A personality preset applied to a user; only one is active at a time."""
    __tablename__ = "flow_strategies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)

    personality_type: Mapped[str] = mapped_column(String)
    strategy_name: Mapped[str] = mapped_column(String)
    description: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    working_hours: Mapped[dict] = mapped_column(MutableDict.as_mutable(JSON))
    max_task_switches: Mapped[int] = mapped_column(Integer)
    focus_block_duration: Mapped[int] = mapped_column(Integer)
    break_duration: Mapped[int] = mapped_column(Integer)
    preferred_task_types: Mapped[Optional[list[str]]] = mapped_column(MutableList.as_mutable(JSON), default=list)
    energy_pattern: Mapped[dict] = mapped_column(MutableDict.as_mutable(JSON))
    notification_settings: Mapped[dict] = mapped_column(MutableDict.as_mutable(JSON))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="flow_strategies")
