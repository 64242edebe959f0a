"""Per-topic completion tracking."""

from datetime import datetime

from sqlalchemy import Boolean, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from pathwise.core.database import Base, UTCDateTime
from pathwise.models.roadmap import new_id, utcnow


class ProgressRecord(Base):
    """Completion flag for one (roadmap, topic) pair.

    No foreign keys: records may reference roadmaps or topics that do not exist.
    """

    __tablename__ = "roadmap_progress"
    __table_args__ = (UniqueConstraint("roadmap_id", "topic_id", name="uq_progress_roadmap_topic"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    roadmap_id: Mapped[str] = mapped_column(String, index=True)
    topic_id: Mapped[str] = mapped_column(String)
    completed: Mapped[bool] = mapped_column(Boolean, default=False)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime(), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), default=utcnow, onupdate=utcnow
    )
