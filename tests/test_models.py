"""Tests for pydantic API models."""

import pytest
from pydantic import ValidationError

from vidcontest.models.types import (
    AggregationResponse,
    FeedbackSubmission,
    FeedbackSummaryDetail,
)


class TestFeedbackSubmission:
    """Test FeedbackSubmission model."""

    def test_comments_optional(self):
        submission = FeedbackSubmission(
            video_id="video-1", score_voice=5, score_creativity=6, score_presentation=7
        )
        assert submission.comments is None

    def test_scores_required(self):
        with pytest.raises(ValidationError):
            FeedbackSubmission(video_id="video-1", score_voice=5, score_creativity=6)

    def test_non_numeric_score_rejected(self):
        with pytest.raises(ValidationError):
            FeedbackSubmission(
                video_id="video-1",
                score_voice="loud",
                score_creativity=6,
                score_presentation=7,
            )


class TestSummaryModels:
    """Test summary response models."""

    def test_summary_detail(self):
        detail = FeedbackSummaryDetail(
            video_id="video-1",
            avg_voice=8.0,
            avg_creativity=7.5,
            avg_presentation=7.5,
            feedback_count=2,
            aggregated_text="Great voice.",
            category_label="Strong Voice & Presentation, Well-Rounded Talent",
            updated_at=None,
        )
        assert detail.model_dump()["feedback_count"] == 2

    def test_aggregation_response(self):
        response = AggregationResponse(message="done", processed=3, updated=2)
        assert response.processed == 3
        assert response.updated == 2
