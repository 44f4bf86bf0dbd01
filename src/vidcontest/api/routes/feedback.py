"""Judge feedback API endpoints.

POST /api/feedback - Submit or update the caller's feedback for a video
GET /api/videos/{video_id}/feedback - List feedback for a video
GET /api/judge/feedback - Caller's own feedback history
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from vidcontest.api.app import get_db_session
from vidcontest.api.context import RequestContext, require_judge
from vidcontest.api.pagination import PageParams, build_pagination, page_params
from vidcontest.db import repo
from vidcontest.db.repo import DbSession
from vidcontest.eval.feedback import (
    FeedbackInput,
    FeedbackValidationError,
    submit_feedback,
)
from vidcontest.models.domain import FeedbackEntity
from vidcontest.models.types import (
    FeedbackDetail,
    FeedbackSubmission,
    FeedbackSubmitted,
    FeedbackPage,
    VideoFeedbackList,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def feedback_to_detail(feedback: FeedbackEntity) -> FeedbackDetail:
    """Convert FeedbackEntity to FeedbackDetail."""
    return FeedbackDetail(
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


@router.post("/feedback", response_model=FeedbackSubmitted, status_code=201)
def create_feedback(
    submission: FeedbackSubmission,
    response: Response,
    context: RequestContext = Depends(require_judge),
    session: DbSession = Depends(get_db_session),
) -> FeedbackSubmitted:
    """Submit feedback for a video as the calling judge.

    Returns 201 when the feedback is new and 200 when it replaced the
    judge's earlier feedback for the same video.

    Raises:
        HTTPException: 400 for invalid scores, 404 if video not found.
    """
    feedback_input = FeedbackInput(
        video_id=submission.video_id,
        judge_id=context.user_id,
        score_voice=submission.score_voice,
        score_creativity=submission.score_creativity,
        score_presentation=submission.score_presentation,
        comments=submission.comments,
    )

    try:
        result = submit_feedback(session, feedback_input)
    except FeedbackValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=404, detail="Video not found") from e

    if result.created:
        message = "Feedback submitted successfully"
    else:
        response.status_code = status.HTTP_200_OK
        message = "Feedback updated successfully"

    logger.info(f"{message}: video={submission.video_id} judge={context.user_id}")
    return FeedbackSubmitted(message=message, feedback=feedback_to_detail(result.feedback))


@router.get("/videos/{video_id}/feedback", response_model=VideoFeedbackList)
def list_video_feedback(
    video_id: str,
    session: DbSession = Depends(get_db_session),
) -> VideoFeedbackList:
    """List all judge feedback for a video, newest first.

    Raises:
        HTTPException: 404 if video not found.
    """
    if repo.get_video(session, video_id) is None:
        raise HTTPException(status_code=404, detail="Video not found")

    feedback = repo.get_feedback_for_video(session, video_id)
    return VideoFeedbackList(
        video_id=video_id,
        feedback=[feedback_to_detail(f) for f in feedback],
    )


@router.get("/judge/feedback", response_model=FeedbackPage)
def list_my_feedback(
    params: PageParams = Depends(page_params),
    context: RequestContext = Depends(require_judge),
    session: DbSession = Depends(get_db_session),
) -> FeedbackPage:
    """Page through the calling judge's own feedback."""
    feedback = repo.get_feedback_for_judge(
        session, context.user_id, limit=params.limit, offset=params.offset
    )
    total = repo.count_feedback_for_judge(session, context.user_id)
    return FeedbackPage(
        feedback=[feedback_to_detail(f) for f in feedback],
        pagination=build_pagination(params, total),
    )
