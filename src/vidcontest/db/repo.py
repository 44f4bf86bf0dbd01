"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping domain logic pure.
Returns domain models (not SQLAlchemy entities) to external callers.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import func
from sqlalchemy.orm import Session

from vidcontest.aggregation.labels import NEEDS_IMPROVEMENT
from vidcontest.db.schema import Feedback, FeedbackSummary, User, Video
from vidcontest.models.domain import (
    FeedbackEntity,
    FeedbackSummaryEntity,
    RankedSummaryEntity,
    VideoAverageEntity,
    VideoEntity,
)

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]


# ============================================================================
# Converters: SQLAlchemy -> Domain
# ============================================================================


def _video_to_entity(video: Video) -> VideoEntity:
    """Convert SQLAlchemy Video to domain entity."""
    return VideoEntity(
        video_id=video.video_id,
        title=video.title,
        uploaded_by=video.uploaded_by,
        status=video.status,
        created_at=video.created_at,
    )


def _feedback_to_entity(feedback: Feedback) -> FeedbackEntity:
    """Convert SQLAlchemy Feedback to domain entity."""
    return FeedbackEntity(
        feedback_id=feedback.feedback_id,
        video_id=feedback.video_id,
        judge_id=feedback.judge_id,
        score_voice=feedback.score_voice,
        score_creativity=feedback.score_creativity,
        score_presentation=feedback.score_presentation,
        comments=feedback.comments,
        created_at=feedback.created_at,
        updated_at=feedback.updated_at,
    )


def _summary_to_entity(summary: FeedbackSummary) -> FeedbackSummaryEntity:
    """Convert SQLAlchemy FeedbackSummary to domain entity."""
    return FeedbackSummaryEntity(
        summary_id=summary.summary_id,
        video_id=summary.video_id,
        avg_voice=summary.avg_voice,
        avg_creativity=summary.avg_creativity,
        avg_presentation=summary.avg_presentation,
        feedback_count=summary.feedback_count,
        aggregated_text=summary.aggregated_text,
        category_label=summary.category_label,
        updated_at=summary.updated_at,
    )


# ============================================================================
# User / Video Repository
# ============================================================================


def get_video(session: DbSession, video_id: str) -> VideoEntity | None:
    """Get video by ID."""
    video = session.query(Video).filter(Video.video_id == video_id).first()
    return _video_to_entity(video) if video else None


# ============================================================================
# Feedback Repository
# ============================================================================


def get_feedback_for_video(session: DbSession, video_id: str) -> list[FeedbackEntity]:
    """Get all feedback for a video, newest first."""
    rows = (
        session.query(Feedback)
        .filter(Feedback.video_id == video_id)
        .order_by(Feedback.created_at.desc())
        .all()
    )
    return [_feedback_to_entity(f) for f in rows]


def find_feedback_by_video_and_judge(
    session: DbSession, video_id: str, judge_id: str
) -> FeedbackEntity | None:
    """Get one judge's feedback for a video."""
    feedback = (
        session.query(Feedback)
        .filter(Feedback.video_id == video_id, Feedback.judge_id == judge_id)
        .first()
    )
    return _feedback_to_entity(feedback) if feedback else None


def get_feedback_for_judge(
    session: DbSession, judge_id: str, *, limit: int = 20, offset: int = 0
) -> list[FeedbackEntity]:
    """Get a page of a judge's feedback, newest first."""
    rows = (
        session.query(Feedback)
        .filter(Feedback.judge_id == judge_id)
        .order_by(Feedback.created_at.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )
    return [_feedback_to_entity(f) for f in rows]


def count_feedback_for_judge(session: DbSession, judge_id: str) -> int:
    """Count all feedback submitted by a judge."""
    return session.query(Feedback).filter(Feedback.judge_id == judge_id).count()


def get_all_feedback(
    session: DbSession, *, limit: int = 20, offset: int = 0
) -> list[FeedbackEntity]:
    """Get a page of all feedback across videos and judges, newest first."""
    rows = (
        session.query(Feedback)
        .order_by(Feedback.created_at.desc(), Feedback.feedback_id)
        .offset(offset)
        .limit(limit)
        .all()
    )
    return [_feedback_to_entity(f) for f in rows]


def count_feedback(session: DbSession) -> int:
    """Count all feedback records."""
    return session.query(Feedback).count()


def create_feedback(session: DbSession, entity: FeedbackEntity) -> FeedbackEntity:
    """Create a new feedback record."""
    feedback = Feedback(
        feedback_id=entity.feedback_id,
        video_id=entity.video_id,
        judge_id=entity.judge_id,
        score_voice=entity.score_voice,
        score_creativity=entity.score_creativity,
        score_presentation=entity.score_presentation,
        comments=entity.comments,
    )
    session.add(feedback)
    session.flush()
    return _feedback_to_entity(feedback)


def update_feedback(
    session: DbSession,
    feedback_id: str,
    *,
    score_voice: int,
    score_creativity: int,
    score_presentation: int,
    comments: str | None,
) -> FeedbackEntity | None:
    """Replace scores and comments of an existing feedback record."""
    feedback = session.query(Feedback).filter(Feedback.feedback_id == feedback_id).first()
    if feedback is None:
        return None
    feedback.score_voice = score_voice
    feedback.score_creativity = score_creativity
    feedback.score_presentation = score_presentation
    feedback.comments = comments
    feedback.updated_at = datetime.now(timezone.utc)
    session.flush()
    return _feedback_to_entity(feedback)


def delete_feedback(session: DbSession, feedback_id: str) -> bool:
    """Delete a feedback record. Returns False if it did not exist."""
    feedback = session.query(Feedback).filter(Feedback.feedback_id == feedback_id).first()
    if feedback is None:
        return False
    session.delete(feedback)
    return True


# ============================================================================
# Score Averages (store-side aggregate)
# ============================================================================


def _video_averages_query(session: DbSession):
    feedback_count = func.count(Feedback.feedback_id)
    return (
        session.query(
            Feedback.video_id,
            func.avg(Feedback.score_voice),
            func.avg(Feedback.score_creativity),
            func.avg(Feedback.score_presentation),
            feedback_count,
        )
        .group_by(Feedback.video_id)
        .having(feedback_count > 0)
    )


def _row_to_average(row) -> VideoAverageEntity:
    video_id, avg_voice, avg_creativity, avg_presentation, feedback_count = row
    return VideoAverageEntity(
        video_id=video_id,
        avg_voice=avg_voice,
        avg_creativity=avg_creativity,
        avg_presentation=avg_presentation,
        feedback_count=feedback_count,
    )


def get_video_averages(session: DbSession) -> list[VideoAverageEntity]:
    """Get score averages for every video with at least one feedback record.

    Videos without feedback never appear in the result.
    """
    rows = _video_averages_query(session).order_by(Feedback.video_id).all()
    return [_row_to_average(row) for row in rows]


def get_video_average(session: DbSession, video_id: str) -> VideoAverageEntity | None:
    """Get score averages for one video, or None when it has no feedback."""
    row = _video_averages_query(session).filter(Feedback.video_id == video_id).first()
    return _row_to_average(row) if row else None


# ============================================================================
# Feedback Summary Repository
# ============================================================================


def find_summary_by_video(session: DbSession, video_id: str) -> FeedbackSummaryEntity | None:
    """Get the feedback summary for a video."""
    summary = (
        session.query(FeedbackSummary).filter(FeedbackSummary.video_id == video_id).first()
    )
    return _summary_to_entity(summary) if summary else None


def upsert_summary(session: DbSession, entity: FeedbackSummaryEntity) -> FeedbackSummaryEntity:
    """Insert or update the summary keyed by video_id.

    Always stamps updated_at with the current time. New rows get a fresh
    summary_id; existing rows keep theirs.
    """
    now = datetime.now(timezone.utc)
    summary = (
        session.query(FeedbackSummary)
        .filter(FeedbackSummary.video_id == entity.video_id)
        .first()
    )

    if summary is None:
        summary = FeedbackSummary(summary_id=str(uuid.uuid4()), video_id=entity.video_id)
        session.add(summary)

    summary.avg_voice = entity.avg_voice
    summary.avg_creativity = entity.avg_creativity
    summary.avg_presentation = entity.avg_presentation
    summary.feedback_count = entity.feedback_count
    summary.aggregated_text = entity.aggregated_text
    summary.category_label = entity.category_label
    summary.updated_at = now
    session.flush()

    return _summary_to_entity(summary)


def list_summaries(
    session: DbSession, *, limit: int = 20, offset: int = 0
) -> list[FeedbackSummaryEntity]:
    """Get a page of summaries, most recently updated first."""
    rows = (
        session.query(FeedbackSummary)
        .order_by(FeedbackSummary.updated_at.desc(), FeedbackSummary.video_id)
        .offset(offset)
        .limit(limit)
        .all()
    )
    return [_summary_to_entity(s) for s in rows]


def count_summaries(session: DbSession) -> int:
    """Count all summaries."""
    return session.query(FeedbackSummary).count()


def get_best_summaries(session: DbSession, limit: int = 10) -> list[RankedSummaryEntity]:
    """Get top summaries by voice average, excluding "Needs Improvement".

    Each entry carries the video's title and its uploader's username.
    """
    rows = (
        session.query(FeedbackSummary, Video.title, User.username)
        .join(Video, Video.video_id == FeedbackSummary.video_id)
        .outerjoin(User, User.user_id == Video.uploaded_by)
        .filter(FeedbackSummary.category_label != NEEDS_IMPROVEMENT)
        .order_by(FeedbackSummary.avg_voice.desc())
        .limit(limit)
        .all()
    )
    return [
        RankedSummaryEntity(summary=_summary_to_entity(s), title=title, uploader=username)
        for s, title, username in rows
    ]


def delete_summary(session: DbSession, video_id: str) -> bool:
    """Delete a video's summary (used when the video itself is deleted)."""
    summary = (
        session.query(FeedbackSummary).filter(FeedbackSummary.video_id == video_id).first()
    )
    if summary is None:
        return False
    session.delete(summary)
    return True


# ============================================================================
# Batch Operations
# ============================================================================


def commit(session: DbSession) -> None:
    """Commit current transaction."""
    session.commit()


def rollback(session: DbSession) -> None:
    """Roll back current transaction."""
    session.rollback()
