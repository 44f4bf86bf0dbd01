"""Pydantic models for the vidcontest API."""

from datetime import datetime

from pydantic import BaseModel


class FeedbackSubmission(BaseModel):
    """Judge feedback submission.

    Scores are range-checked by the domain layer so the API can return
    the same message for every invalid score.
    """

    video_id: str
    score_voice: int | float
    score_creativity: int | float
    score_presentation: int | float
    comments: str | None = None


class FeedbackDetail(BaseModel):
    """Feedback record for API response."""

    feedback_id: str
    video_id: str
    judge_id: str
    score_voice: int
    score_creativity: int
    score_presentation: int
    comments: str | None
    created_at: datetime | None
    updated_at: datetime | None


class FeedbackSubmitted(BaseModel):
    """Response for feedback submission."""

    message: str
    feedback: FeedbackDetail


class VideoFeedbackList(BaseModel):
    """All feedback for one video."""

    video_id: str
    feedback: list[FeedbackDetail]


class Pagination(BaseModel):
    """Page metadata for list responses."""

    page: int
    limit: int
    total: int
    pages: int


class FeedbackPage(BaseModel):
    """A page of feedback records."""

    feedback: list[FeedbackDetail]
    pagination: Pagination


class VideoStats(BaseModel):
    """Store-computed score averages for a video."""

    video_id: str
    avg_voice: float
    avg_creativity: float
    avg_presentation: float
    feedback_count: int


class VideoStatsResponse(BaseModel):
    """Stats wrapper; stats is null when the video has no feedback."""

    stats: VideoStats | None


class FeedbackSummaryDetail(BaseModel):
    """Aggregated feedback summary for API response."""

    video_id: str
    avg_voice: float
    avg_creativity: float
    avg_presentation: float
    feedback_count: int
    aggregated_text: str
    category_label: str
    updated_at: datetime | None


class BestSummaryDetail(FeedbackSummaryDetail):
    """Summary leaderboard entry with video title and uploader."""

    title: str
    uploader: str | None


class SummaryPage(BaseModel):
    """A page of feedback summaries."""

    summaries: list[FeedbackSummaryDetail]
    pagination: Pagination


class AggregationResponse(BaseModel):
    """Result of an aggregation run."""

    message: str
    processed: int
    updated: int
