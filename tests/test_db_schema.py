"""Tests for database schema invariants.

1. One feedback row per (video_id, judge_id)
2. One feedback summary per video_id
"""

import pytest
from sqlalchemy.exc import IntegrityError

from vidcontest.db.schema import Base, Feedback, FeedbackSummary


def make_summary(summary_id, video_id="video-a"):
    return FeedbackSummary(
        summary_id=summary_id,
        video_id=video_id,
        avg_voice=7.0,
        avg_creativity=7.0,
        avg_presentation=7.0,
        feedback_count=1,
        aggregated_text="Text.",
        category_label="Well-Rounded Talent",
    )


class TestSchemaCreation:
    """Test that schema can be created without errors."""

    def test_all_tables_created(self, engine):
        """All required tables should exist after creation."""
        table_names = Base.metadata.tables.keys()
        expected_tables = {"users", "videos", "feedback", "feedback_summary"}
        assert expected_tables.issubset(table_names)


class TestFeedbackUniqueness:
    """Invariant: feedback unique per (video_id, judge_id)."""

    def test_can_create_feedback(self, session, contest):
        """Basic feedback creation should work."""
        contest.add_feedback("video-a", "judge-1", 5, 6, 7, "Comment text here.")
        assert session.query(Feedback).count() == 1

    def test_duplicate_feedback_rejected(self, session, contest):
        """Second row for the same judge and video should be rejected."""
        contest.add_feedback("video-a", "judge-1", 5, 6, 7)

        session.add(
            Feedback(
                feedback_id="another-id",  # Different ID
                video_id="video-a",  # Same video
                judge_id="judge-1",  # Same judge - should fail
                score_voice=1,
                score_creativity=1,
                score_presentation=1,
            )
        )
        with pytest.raises(IntegrityError):
            session.commit()

    def test_other_judge_allowed(self, session, contest):
        """Different judges can score the same video."""
        contest.add_feedback("video-a", "judge-1", 5, 6, 7)
        contest.add_feedback("video-a", "judge-2", 5, 6, 7)
        assert session.query(Feedback).count() == 2


class TestSummaryUniqueness:
    """Invariant: at most one summary per video."""

    def test_duplicate_summary_rejected(self, session, contest):
        """Two summaries for one video should be rejected."""
        session.add(make_summary("summary-1"))
        session.commit()

        session.add(make_summary("summary-2"))
        with pytest.raises(IntegrityError):
            session.commit()

    def test_summaries_for_different_videos(self, session, contest):
        """Different videos each get their own summary."""
        session.add_all([make_summary("summary-1", "video-a"), make_summary("summary-2", "video-b")])
        session.commit()
        assert session.query(FeedbackSummary).count() == 2
