"""Feedback summary API endpoints.

GET /api/videos/{video_id}/stats - Score averages for a video
GET /api/videos/{video_id}/summary - Aggregated summary for a video
GET /api/summaries - Page through summaries
GET /api/summaries/best - Top summaries by voice score
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from vidcontest.api.app import get_db_session
from vidcontest.api.pagination import PageParams, build_pagination, page_params
from vidcontest.db import repo
from vidcontest.db.repo import DbSession
from vidcontest.models.domain import FeedbackSummaryEntity, RankedSummaryEntity
from vidcontest.models.types import (
    BestSummaryDetail,
    FeedbackSummaryDetail,
    SummaryPage,
    VideoStats,
    VideoStatsResponse,
)

router = APIRouter()

BEST_SUMMARIES_LIMIT = 10


def summary_to_detail(summary: FeedbackSummaryEntity) -> FeedbackSummaryDetail:
    """Convert FeedbackSummaryEntity to FeedbackSummaryDetail."""
    return FeedbackSummaryDetail(
        video_id=summary.video_id,
        avg_voice=summary.avg_voice,
        avg_creativity=summary.avg_creativity,
        avg_presentation=summary.avg_presentation,
        feedback_count=summary.feedback_count,
        aggregated_text=summary.aggregated_text,
        category_label=summary.category_label,
        updated_at=summary.updated_at,
    )


def ranked_to_detail(ranked: RankedSummaryEntity) -> BestSummaryDetail:
    """Convert RankedSummaryEntity to BestSummaryDetail."""
    return BestSummaryDetail(
        **summary_to_detail(ranked.summary).model_dump(),
        title=ranked.title,
        uploader=ranked.uploader,
    )


@router.get("/videos/{video_id}/stats", response_model=VideoStatsResponse)
def get_video_stats(
    video_id: str,
    session: DbSession = Depends(get_db_session),
) -> VideoStatsResponse:
    """Get live score averages for a video.

    Raises:
        HTTPException: 404 if video not found.
    """
    if repo.get_video(session, video_id) is None:
        raise HTTPException(status_code=404, detail="Video not found")

    average = repo.get_video_average(session, video_id)
    if average is None:
        return VideoStatsResponse(stats=None)

    return VideoStatsResponse(
        stats=VideoStats(
            video_id=average.video_id,
            avg_voice=float(average.avg_voice),
            avg_creativity=float(average.avg_creativity),
            avg_presentation=float(average.avg_presentation),
            feedback_count=average.feedback_count,
        )
    )


@router.get("/videos/{video_id}/summary", response_model=FeedbackSummaryDetail)
def get_video_summary(
    video_id: str,
    session: DbSession = Depends(get_db_session),
) -> FeedbackSummaryDetail:
    """Get the aggregated feedback summary for a video.

    Raises:
        HTTPException: 404 if no summary exists yet.
    """
    summary = repo.find_summary_by_video(session, video_id)
    if summary is None:
        raise HTTPException(status_code=404, detail="Summary not found")
    return summary_to_detail(summary)


@router.get("/summaries", response_model=SummaryPage)
def list_summaries(
    params: PageParams = Depends(page_params),
    session: DbSession = Depends(get_db_session),
) -> SummaryPage:
    """Page through summaries, most recently updated first."""
    summaries = repo.list_summaries(session, limit=params.limit, offset=params.offset)
    total = repo.count_summaries(session)
    return SummaryPage(
        summaries=[summary_to_detail(s) for s in summaries],
        pagination=build_pagination(params, total),
    )


@router.get("/summaries/best", response_model=list[BestSummaryDetail])
def list_best_summaries(
    session: DbSession = Depends(get_db_session),
) -> list[BestSummaryDetail]:
    """Top summaries by voice average, excluding "Needs Improvement"."""
    ranked = repo.get_best_summaries(session, limit=BEST_SUMMARIES_LIMIT)
    return [ranked_to_detail(r) for r in ranked]
