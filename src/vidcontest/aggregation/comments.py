"""Judge comment aggregation.

Turns the free-text comments of a video's judges into a short summary.
Pure functions - no database access.
"""

from __future__ import annotations

import re
from typing import Sequence

from vidcontest.models.domain import FeedbackEntity

NO_FEEDBACK_TEXT = "No feedback available yet."
NO_COMMENTS_TEXT = "Judges provided scores but no detailed comments."

# Comments must be longer than this (after trimming) to be used
MIN_COMMENT_LENGTH = 10
# Sentence fragments must be longer than this (after trimming) to be kept;
# kept fragments are joined untrimmed
MIN_SENTENCE_LENGTH = 5
MAX_COMMENTS = 2
MAX_SENTENCES = 2

_TAG_RE = re.compile(r"<[^>]*>")
_SENTENCE_END_RE = re.compile(r"[.!?]+")


def strip_html(text: str | None) -> str:
    """Remove HTML tags and surrounding whitespace."""
    if not text:
        return ""
    return _TAG_RE.sub("", text).strip()


def _has_usable_comment(feedback: FeedbackEntity) -> bool:
    comments = feedback.comments
    return isinstance(comments, str) and len(comments.strip()) > MIN_COMMENT_LENGTH


def summarize_comment(comment: str) -> str:
    """Reduce one comment to its first two meaningful sentences.

    Args:
        comment: Raw judge comment, possibly containing HTML.

    Returns:
        Up to two sentence fragments joined with ". ", ending in a period.
    """
    text = strip_html(comment)
    sentences = [
        fragment
        for fragment in _SENTENCE_END_RE.split(text)
        if len(fragment.strip()) > MIN_SENTENCE_LENGTH
    ]
    return ". ".join(sentences[:MAX_SENTENCES]).strip() + "."


def aggregate_comments(feedback_list: Sequence[FeedbackEntity] | None) -> str:
    """Build the aggregated text for a video from its judge feedback.

    The two longest usable comments are each cut down to two sentences,
    then identical results are collapsed and the rest joined with a space.

    Args:
        feedback_list: All feedback records for one video.

    Returns:
        Summary text, or one of the fallback strings when there is nothing
        to summarize.
    """
    if not feedback_list:
        return NO_FEEDBACK_TEXT

    # sorted() is stable, so equal lengths keep their original order
    usable = [f for f in feedback_list if _has_usable_comment(f)]
    top = sorted(usable, key=lambda f: len(f.comments), reverse=True)[:MAX_COMMENTS]

    if not top:
        return NO_COMMENTS_TEXT

    parts = [summarize_comment(f.comments) for f in top]
    unique_parts = list(dict.fromkeys(parts))
    return " ".join(unique_parts)
