"""Roadmap models for generated learning paths."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pathwise.core.database import Base, UTCDateTime


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Roadmap(Base):
    """Roadmap header. Immutable once generated."""

    __tablename__ = "user_roadmaps"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String)
    goal: Mapped[str] = mapped_column(Text)

    # Time budget
    total_days: Mapped[int] = mapped_column(Integer)
    hours_per_day: Mapped[float] = mapped_column(Float)

    skill_level: Mapped[str] = mapped_column(String(20))
    focus_areas: Mapped[list[str]] = mapped_column(JSON, default=list)
    is_custom: Mapped[bool] = mapped_column(Boolean, default=True)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow)

    topics: Mapped[list["RoadmapTopic"]] = relationship(
        back_populates="roadmap",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="RoadmapTopic.order_index",
    )


class RoadmapTopic(Base):
    """One ordered unit of a roadmap."""

    __tablename__ = "roadmap_topics"
    __table_args__ = (
        UniqueConstraint("roadmap_id", "order_index", name="uq_roadmap_topic_order"),
        Index("idx_roadmap_topics_roadmap_order", "roadmap_id", "order_index"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    roadmap_id: Mapped[str] = mapped_column(
        ForeignKey("user_roadmaps.id", ondelete="CASCADE"), index=True
    )

    title: Mapped[str] = mapped_column(String)
    description: Mapped[str] = mapped_column(Text, default="")
    order_index: Mapped[int] = mapped_column(Integer)
    estimated_hours: Mapped[float] = mapped_column(Float)

    # Learning content
    learning_objectives: Mapped[list[str]] = mapped_column(JSON, default=list)
    video_suggestions: Mapped[list[str]] = mapped_column(JSON, default=list)
    practice_questions: Mapped[list[dict]] = mapped_column(JSON, default=list)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow)

    roadmap: Mapped[Roadmap] = relationship(back_populates="topics")
