"""Domain models for vidcontest.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy and used throughout
the application for clean separation from the database layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


# ============================================================================
# Videos
# ============================================================================


@dataclass
class VideoEntity:
    """Domain model for a contest video."""

    video_id: str
    title: str
    uploaded_by: str | None = None
    status: str = "active"
    created_at: datetime | None = None


# ============================================================================
# Judge Feedback Domain
# ============================================================================


@dataclass
class FeedbackEntity:
    """One judge's scores and comments for one video."""

    feedback_id: str
    video_id: str
    judge_id: str
    score_voice: int
    score_creativity: int
    score_presentation: int
    comments: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class VideoAverageEntity:
    """Per-video score averages, computed by the store."""

    video_id: str
    avg_voice: float
    avg_creativity: float
    avg_presentation: float
    feedback_count: int


@dataclass
class FeedbackSummaryEntity:
    """Denormalized summary of all judge feedback for a video."""

    video_id: str
    avg_voice: float
    avg_creativity: float
    avg_presentation: float
    aggregated_text: str
    category_label: str
    feedback_count: int = 0
    summary_id: str | None = None
    updated_at: datetime | None = None


@dataclass
class RankedSummaryEntity:
    """A summary with the video title and uploader, for leaderboards."""

    summary: FeedbackSummaryEntity
    title: str
    uploader: str | None = None
