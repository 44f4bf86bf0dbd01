"""Tests for the aggregation command-line entry point."""

from pathlib import Path

from sqlalchemy.exc import OperationalError

from vidcontest.aggregation import cli
from vidcontest.core.settings import sqlite_url
from vidcontest.db import repo
from vidcontest.db.schema import Feedback, User, Video
from vidcontest.db.session import get_session, init_db


def seed(database_url: str) -> None:
    init_db(database_url)
    session = get_session(database_url)
    try:
        session.add(User(user_id="judge-1", username="judge-1", role="judge"))
        session.add(Video(video_id="video-1", title="Song"))
        session.add(
            Feedback(
                feedback_id="fb-1",
                video_id="video-1",
                judge_id="judge-1",
                score_voice=8,
                score_creativity=8,
                score_presentation=8,
                comments="Confident delivery and a great ending.",
            )
        )
        session.commit()
    finally:
        session.close()


class TestCliMain:
    """Exit codes and side effects of vidcontest-aggregate."""

    def test_success_exits_zero(self, tmp_path: Path):
        database_url = sqlite_url(tmp_path / "cli.db")
        seed(database_url)

        exit_code = cli.main(["--database-url", database_url, "--log-level", "DEBUG"])

        assert exit_code == 0
        session = get_session(database_url)
        try:
            summary = repo.find_summary_by_video(session, "video-1")
            assert summary is not None
            assert summary.category_label == (
                "Strong Voice & Presentation, Highly Creative, "
                "Excellent Performance, Well-Rounded Talent"
            )
        finally:
            session.close()

    def test_empty_database_exits_zero(self, tmp_path: Path):
        """A fresh database is initialized and nothing is processed."""
        database_url = sqlite_url(tmp_path / "nested" / "empty.db")

        assert cli.main(["--database-url", database_url]) == 0
        assert (tmp_path / "nested" / "empty.db").exists()

    def test_fatal_failure_exits_one(self, tmp_path: Path, monkeypatch):
        def broken(session):
            raise OperationalError("SELECT", {}, Exception("connection refused"))

        monkeypatch.setattr(cli, "run_aggregation", broken)

        exit_code = cli.main(["--database-url", sqlite_url(tmp_path / "cli.db")])

        assert exit_code == 1

    def test_database_url_from_environment(self, tmp_path: Path, monkeypatch):
        database_url = sqlite_url(tmp_path / "env.db")
        seed(database_url)
        monkeypatch.setenv("VIDCONTEST_DATABASE_URL", database_url)

        assert cli.main([]) == 0

        session = get_session(database_url)
        try:
            assert repo.count_summaries(session) == 1
        finally:
            session.close()
