"""Feedback aggregation job.

Refreshes one FeedbackSummary per video from the current judge feedback.
Safe to re-run: with unchanged feedback every run writes the same values
(only updated_at moves).

Per-video failures are logged and skipped; only a failure to fetch the
list of video averages aborts the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from vidcontest.aggregation.comments import aggregate_comments
from vidcontest.aggregation.labels import generate_category_label
from vidcontest.db import repo
from vidcontest.db.repo import DbSession
from vidcontest.models.domain import FeedbackSummaryEntity, VideoAverageEntity

logger = logging.getLogger(__name__)


@dataclass
class AggregationResult:
    """Counts reported by one aggregation run."""

    processed: int
    updated: int


class FeedbackAggregator:
    """Builds feedback summaries for every video that has judge feedback."""

    def __init__(self, session: DbSession):
        self.session = session

    def run_aggregation(self) -> AggregationResult:
        """Process every video with feedback.

        Returns:
            AggregationResult where processed counts every video attempted
            and updated counts videos that have a summary after success.

        Raises:
            Exception: Whatever the store raises when the video averages
                cannot be fetched at all.
        """
        logger.info("Starting feedback aggregation")

        try:
            video_averages = repo.get_video_averages(self.session)
        except Exception:
            logger.exception("Feedback aggregation failed: could not fetch video averages")
            raise

        processed = 0
        updated = 0

        for video_average in video_averages:
            processed += 1
            try:
                self.process_video_feedback(video_average)
                repo.commit(self.session)
                if repo.find_summary_by_video(self.session, video_average.video_id):
                    updated += 1
            except Exception:
                logger.exception(f"Error processing video {video_average.video_id}")
                repo.rollback(self.session)

        logger.info(f"Aggregation completed. Processed: {processed}, Updated: {updated}")
        return AggregationResult(processed=processed, updated=updated)

    def process_video_feedback(
        self, video_average: VideoAverageEntity
    ) -> FeedbackSummaryEntity | None:
        """Build and upsert the summary for one video.

        Text and label are both computed before anything is written, so a
        failure leaves no partial summary behind.

        Args:
            video_average: Store-computed averages for the video.

        Returns:
            The written summary, or None when the video has no feedback.
        """
        if not video_average.feedback_count:
            return None

        avg_voice = float(video_average.avg_voice)
        avg_creativity = float(video_average.avg_creativity)
        avg_presentation = float(video_average.avg_presentation)

        feedback = repo.get_feedback_for_video(self.session, video_average.video_id)

        summary = FeedbackSummaryEntity(
            video_id=video_average.video_id,
            avg_voice=avg_voice,
            avg_creativity=avg_creativity,
            avg_presentation=avg_presentation,
            feedback_count=int(video_average.feedback_count),
            aggregated_text=aggregate_comments(feedback),
            category_label=generate_category_label(
                avg_voice, avg_creativity, avg_presentation
            ),
        )

        written = repo.upsert_summary(self.session, summary)
        logger.debug(f"Summary for video {written.video_id}: {written.category_label}")
        return written


def run_aggregation(session: DbSession) -> AggregationResult:
    """Run one aggregation pass with the given session."""
    return FeedbackAggregator(session).run_aggregation()
