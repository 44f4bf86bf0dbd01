"""Shared pytest fixtures for vidcontest tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from vidcontest.db.schema import Base, Feedback, User, Video


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def contest(session):
    """Seed three judges, one contestant and empty videos.

    Returns a callable that adds feedback rows:
        contest.add_feedback(video_id, judge_id, voice, creativity, presentation, comments)
    """

    class Contest:
        judges = ["judge-1", "judge-2", "judge-3"]
        videos = ["video-a", "video-b", "video-c"]

        def add_feedback(self, video_id, judge_id, voice, creativity, presentation, comments=""):
            session.add(
                Feedback(
                    feedback_id=f"{video_id}:{judge_id}",
                    video_id=video_id,
                    judge_id=judge_id,
                    score_voice=voice,
                    score_creativity=creativity,
                    score_presentation=presentation,
                    comments=comments,
                )
            )
            session.commit()

    session.add(User(user_id="singer-1", username="singer-1", role="user"))
    for judge_id in Contest.judges:
        session.add(User(user_id=judge_id, username=judge_id, role="judge"))
    for video_id in Contest.videos:
        session.add(Video(video_id=video_id, title=f"Title {video_id}", uploaded_by="singer-1"))
    session.commit()

    return Contest()
