"""Admin API endpoints.

POST /api/admin/aggregate-feedback - Run the feedback aggregation job
GET /api/admin/feedback - Page through all feedback
DELETE /api/admin/feedback/{feedback_id} - Delete a feedback record
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from vidcontest.aggregation.feedback import run_aggregation
from vidcontest.api.app import get_db_session
from vidcontest.api.context import RequestContext, require_admin
from vidcontest.api.pagination import PageParams, build_pagination, page_params
from vidcontest.api.routes.feedback import feedback_to_detail
from vidcontest.db import repo
from vidcontest.db.repo import DbSession
from vidcontest.models.types import AggregationResponse, FeedbackPage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")


@router.post("/aggregate-feedback", response_model=AggregationResponse)
def aggregate_feedback(
    context: RequestContext = Depends(require_admin),
    session: DbSession = Depends(get_db_session),
) -> AggregationResponse:
    """Run the feedback aggregation job synchronously.

    Raises:
        HTTPException: 500 if the job could not fetch video averages.
    """
    logger.info(f"Feedback aggregation triggered by {context.user_id}")
    try:
        result = run_aggregation(session)
    except Exception as e:
        raise HTTPException(status_code=500, detail="Failed to aggregate feedback") from e

    return AggregationResponse(
        message="Feedback aggregation completed successfully",
        processed=result.processed,
        updated=result.updated,
    )


@router.get("/feedback", response_model=FeedbackPage)
def list_all_feedback(
    params: PageParams = Depends(page_params),
    context: RequestContext = Depends(require_admin),
    session: DbSession = Depends(get_db_session),
) -> FeedbackPage:
    """Page through every judge's feedback, newest first."""
    feedback = repo.get_all_feedback(session, limit=params.limit, offset=params.offset)
    total = repo.count_feedback(session)
    return FeedbackPage(
        feedback=[feedback_to_detail(f) for f in feedback],
        pagination=build_pagination(params, total),
    )


@router.delete("/feedback/{feedback_id}")
def delete_feedback(
    feedback_id: str,
    context: RequestContext = Depends(require_admin),
    session: DbSession = Depends(get_db_session),
) -> dict:
    """Delete one feedback record.

    The video's summary is left as is until the next aggregation run.

    Raises:
        HTTPException: 404 if feedback not found.
    """
    if not repo.delete_feedback(session, feedback_id):
        raise HTTPException(status_code=404, detail="Feedback not found")
    repo.commit(session)

    logger.info(f"Feedback {feedback_id} deleted by {context.user_id}")
    return {"message": "Feedback deleted successfully"}
