"""Tests for judge comment aggregation."""

from vidcontest.aggregation.comments import (
    NO_COMMENTS_TEXT,
    NO_FEEDBACK_TEXT,
    aggregate_comments,
    strip_html,
    summarize_comment,
)
from vidcontest.models.domain import FeedbackEntity


def make_feedback(comments, judge_id="judge-1"):
    return FeedbackEntity(
        feedback_id=f"fb-{judge_id}",
        video_id="video-1",
        judge_id=judge_id,
        score_voice=5,
        score_creativity=5,
        score_presentation=5,
        comments=comments,
    )


class TestFallbackText:
    """The two fallback strings are distinct."""

    def test_empty_list(self):
        """No feedback at all."""
        assert aggregate_comments([]) == "No feedback available yet."
        assert aggregate_comments(None) == NO_FEEDBACK_TEXT

    def test_only_short_comments(self):
        """Feedback exists but every comment is 10 chars or fewer."""
        feedback = [
            make_feedback("", "j1"),
            make_feedback("   ", "j2"),
            make_feedback("Nice one!!", "j3"),  # exactly 10 chars
            make_feedback("   short     ", "j4"),
        ]
        assert aggregate_comments(feedback) == "Judges provided scores but no detailed comments."

    def test_missing_comments_treated_as_unusable(self):
        """None comments do not raise."""
        assert aggregate_comments([make_feedback(None)]) == NO_COMMENTS_TEXT

    def test_eleven_chars_is_usable(self):
        """Length threshold is strictly greater than 10."""
        result = aggregate_comments([make_feedback("Great voice")])
        assert result == "Great voice."


class TestTopTwoSelection:
    """Only the two longest comments are used."""

    def test_picks_two_longest(self):
        """Lengths 50, 30, 90 -> 90 and 50 are used, 30 dropped."""
        c50 = "Fifty char comment about the singer voice quality."
        c30 = "Thirty char comment here okay."
        c90 = (
            "Ninety char comment praising stage presence. "
            "Lots of energy and a confident final chorus!!"
        )
        assert len(c50) == 50
        assert len(c30) == 30
        assert len(c90) == 90

        result = aggregate_comments(
            [make_feedback(c50, "j1"), make_feedback(c30, "j2"), make_feedback(c90, "j3")]
        )

        assert result.startswith("Ninety char comment praising stage presence")
        assert "Fifty char comment" in result
        assert "Thirty char" not in result

    def test_ties_keep_original_order(self):
        """Equal lengths keep input order."""
        first = "Alpha singer was good"
        second = "Bravo singer was good"
        third = "Other singer was good"
        result = aggregate_comments(
            [make_feedback(first, "j1"), make_feedback(second, "j2"), make_feedback(third, "j3")]
        )
        assert result == "Alpha singer was good. Bravo singer was good."

    def test_duplicate_summaries_collapsed(self):
        """Identical per-comment summaries appear once."""
        comment = "Wonderful tone. Great control. Loved it."
        result = aggregate_comments([make_feedback(comment, "j1"), make_feedback(comment, "j2")])
        assert result == "Wonderful tone.  Great control."

    def test_whitespace_differences_not_collapsed(self):
        """Summaries differing only in inner spacing are both kept."""
        first = "Wonderful tone. Great control."
        second = "Wonderful tone.   Great control!"
        result = aggregate_comments([make_feedback(first, "j1"), make_feedback(second, "j2")])
        assert result == "Wonderful tone.    Great control. Wonderful tone.  Great control."


class TestCommentSummary:
    """Per-comment sentence extraction."""

    def test_html_removed(self):
        """Tags are stripped before sentences are split."""
        result = aggregate_comments([make_feedback("<b>Great</b> voice! Needs work.")])
        assert "<" not in result
        assert result == "Great voice.  Needs work."

    def test_first_two_sentences_only(self):
        """Third sentence is dropped."""
        result = summarize_comment("First sentence. Second sentence! Third sentence?")
        assert result == "First sentence.  Second sentence."

    def test_short_fragments_skipped(self):
        """Fragments of 5 chars or fewer do not count as sentences."""
        result = summarize_comment("Wow. Okay!! The pitch was perfect. Breath control too.")
        assert result == "The pitch was perfect.  Breath control too."

    def test_repeated_punctuation_is_one_break(self):
        """Runs of terminators split once."""
        result = summarize_comment("Amazing range!!! Really?! Keep going")
        assert result == "Amazing range.  Really."

    def test_no_sentences_left(self):
        """A long comment with only short fragments yields a lone period."""
        assert summarize_comment("Good. Nice. Fine. Cool!") == "."


class TestStripHtml:
    """HTML stripping."""

    def test_removes_tags(self):
        assert strip_html("<p>Hello <i>there</i></p>") == "Hello there"

    def test_empty_input(self):
        assert strip_html(None) == ""
        assert strip_html("") == ""

    def test_trims(self):
        assert strip_html("  <br/> text  ") == "text"
