"""Database schema for vidcontest.

Tables for users, contest videos, judge feedback and the denormalized
per-video feedback summaries, with unique constraints that enforce the
one-row-per-key invariants.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class User(Base):
    """Platform account (contestant, judge or admin)."""

    __tablename__ = "users"

    user_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    username: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    role: Mapped[str] = mapped_column(String(16), nullable=False, default="user")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)


class Video(Base):
    """Contest video submission."""

    __tablename__ = "videos"

    video_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    uploaded_by: Mapped[str | None] = mapped_column(
        String(64), ForeignKey("users.user_id"), nullable=True
    )
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="active")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)


class Feedback(Base):
    """Judge scores and comments for a video.

    Invariant: UNIQUE(video_id, judge_id)
    A judge may update but never duplicate their feedback for a video.
    """

    __tablename__ = "feedback"

    feedback_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    video_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("videos.video_id"), nullable=False
    )
    judge_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("users.user_id"), nullable=False
    )
    score_voice: Mapped[int] = mapped_column(Integer, nullable=False)
    score_creativity: Mapped[int] = mapped_column(Integer, nullable=False)
    score_presentation: Mapped[int] = mapped_column(Integer, nullable=False)
    comments: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    __table_args__ = (
        UniqueConstraint("video_id", "judge_id", name="uq_feedback_video_judge"),
    )


class FeedbackSummary(Base):
    """Aggregated judge feedback for a video.

    Invariant: UNIQUE(video_id)
    Written only by the feedback aggregation job (upsert keyed on video_id).
    """

    __tablename__ = "feedback_summary"

    summary_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    video_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("videos.video_id"), nullable=False, unique=True
    )
    avg_voice: Mapped[float] = mapped_column(Float, nullable=False)
    avg_creativity: Mapped[float] = mapped_column(Float, nullable=False)
    avg_presentation: Mapped[float] = mapped_column(Float, nullable=False)
    feedback_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    aggregated_text: Mapped[str] = mapped_column(Text, nullable=False)
    category_label: Mapped[str] = mapped_column(String(255), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)
