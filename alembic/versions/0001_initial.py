"""Create roadmap, topic and progress tables

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "user_roadmaps",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("goal", sa.Text(), nullable=False),
        sa.Column("total_days", sa.Integer(), nullable=False),
        sa.Column("hours_per_day", sa.Float(), nullable=False),
        sa.Column("skill_level", sa.String(length=20), nullable=False),
        sa.Column("focus_areas", sa.JSON(), nullable=False),
        sa.Column("is_custom", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "roadmap_topics",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "roadmap_id",
            sa.String(length=36),
            sa.ForeignKey("user_roadmaps.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False),
        sa.Column("estimated_hours", sa.Float(), nullable=False),
        sa.Column("learning_objectives", sa.JSON(), nullable=False),
        sa.Column("video_suggestions", sa.JSON(), nullable=False),
        sa.Column("practice_questions", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("roadmap_id", "order_index", name="uq_roadmap_topic_order"),
    )
    op.create_index("ix_roadmap_topics_roadmap_id", "roadmap_topics", ["roadmap_id"])
    op.create_index(
        "idx_roadmap_topics_roadmap_order", "roadmap_topics", ["roadmap_id", "order_index"]
    )

    # No foreign keys: progress may reference missing roadmaps/topics
    op.create_table(
        "roadmap_progress",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("roadmap_id", sa.String(), nullable=False),
        sa.Column("topic_id", sa.String(), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("roadmap_id", "topic_id", name="uq_progress_roadmap_topic"),
    )
    op.create_index("ix_roadmap_progress_roadmap_id", "roadmap_progress", ["roadmap_id"])


def downgrade() -> None:
    op.drop_index("ix_roadmap_progress_roadmap_id", table_name="roadmap_progress")
    op.drop_table("roadmap_progress")
    op.drop_index("idx_roadmap_topics_roadmap_order", table_name="roadmap_topics")
    op.drop_index("ix_roadmap_topics_roadmap_id", table_name="roadmap_topics")
    op.drop_table("roadmap_topics")
    op.drop_table("user_roadmaps")
