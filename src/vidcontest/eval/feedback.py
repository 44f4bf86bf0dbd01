"""Judge feedback submission.

A judge has at most one feedback record per video: submitting again
replaces the earlier scores and comments.
Domain logic is pure - database operations go through repo.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from vidcontest.db import repo
from vidcontest.db.repo import DbSession
from vidcontest.models.domain import FeedbackEntity

MIN_SCORE = 0
MAX_SCORE = 10


class FeedbackValidationError(ValueError):
    """Raised when submitted scores are out of range or not integers."""


@dataclass
class FeedbackInput:
    """Input for feedback submission."""

    video_id: str
    judge_id: str
    score_voice: int
    score_creativity: int
    score_presentation: int
    comments: str | None = None


@dataclass
class FeedbackResult:
    """Result of feedback submission."""

    feedback: FeedbackEntity
    created: bool


def validate_score(value: object) -> int:
    """Return the score as an int, or raise if it is not a whole number in range.

    Raises:
        FeedbackValidationError: If the score is invalid.
    """
    if isinstance(value, bool):
        raise FeedbackValidationError("Scores must be integers between 0 and 10")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or not MIN_SCORE <= value <= MAX_SCORE:
        raise FeedbackValidationError("Scores must be integers between 0 and 10")
    return value


def submit_feedback(session: DbSession, feedback_input: FeedbackInput) -> FeedbackResult:
    """Create or update a judge's feedback for a video.

    Args:
        session: Database session.
        feedback_input: Scores and comments from the judge.

    Returns:
        FeedbackResult with the stored feedback and whether it was new.

    Raises:
        FeedbackValidationError: If any score is invalid.
        ValueError: If the video does not exist.
    """
    scores = {
        "score_voice": validate_score(feedback_input.score_voice),
        "score_creativity": validate_score(feedback_input.score_creativity),
        "score_presentation": validate_score(feedback_input.score_presentation),
    }
    comments = feedback_input.comments or ""

    if repo.get_video(session, feedback_input.video_id) is None:
        raise ValueError(f"Video not found: {feedback_input.video_id}")

    existing = repo.find_feedback_by_video_and_judge(
        session, feedback_input.video_id, feedback_input.judge_id
    )

    if existing is not None:
        feedback = repo.update_feedback(
            session, existing.feedback_id, comments=comments, **scores
        )
        created = False
    else:
        feedback = repo.create_feedback(
            session,
            FeedbackEntity(
                feedback_id=str(uuid.uuid4()),
                video_id=feedback_input.video_id,
                judge_id=feedback_input.judge_id,
                comments=comments,
                **scores,
            ),
        )
        created = True

    repo.commit(session)
    return FeedbackResult(feedback=feedback, created=created)
