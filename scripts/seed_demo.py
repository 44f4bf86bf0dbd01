#!/usr/bin/env python3
"""Seed a demo contest database and aggregate its feedback.

Usage:
    python scripts/seed_demo.py

This script:
1. Initializes the demo database
2. Seeds judges, a contestant and a few videos
3. Records judge feedback for the videos
4. Runs the feedback aggregation job and prints the summaries
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from vidcontest.aggregation.feedback import run_aggregation  # noqa: E402
from vidcontest.core.settings import sqlite_url  # noqa: E402
from vidcontest.db import repo  # noqa: E402
from vidcontest.db.schema import Feedback, User, Video  # noqa: E402
from vidcontest.db.session import get_session, init_db  # noqa: E402

# Constants
DEMO_DB_URL = sqlite_url(PROJECT_ROOT / "demo.db")

DEMO_JUDGES = ["judge-ana", "judge-ben", "judge-chloe"]
DEMO_CONTESTANT = "singer-dan"

# video_id -> (title, [(judge, voice, creativity, presentation, comments)])
DEMO_FEEDBACK = {
    "video-aria": (
        "Aria in the rain",
        [
            ("judge-ana", 9, 6, 8, "<p>Powerful, controlled voice. Stage presence is great!</p>"),
            ("judge-ben", 7, 9, 7, "Very original arrangement! The bridge felt a bit rushed."),
        ],
    ),
    "video-ballad": (
        "Late night ballad",
        [
            ("judge-ana", 5, 5, 5, "Okay."),
            ("judge-chloe", 5, 4, 6, ""),
        ],
    ),
    "video-cover": (
        "Acoustic cover",
        [
            ("judge-ben", 8, 9, 9, "Lovely tone throughout. Creative reharmonization. Confident."),
            ("judge-chloe", 8, 9, 8, "Tight performance with a fresh take on the chorus!"),
        ],
    ),
    "video-empty": ("Waiting for judges", []),
}


def seed_database() -> None:
    """Seed users, videos and feedback if the demo data is missing."""
    session = get_session(DEMO_DB_URL)

    try:
        if session.query(Video).count() > 0:
            print("Demo videos already exist")
            return

        print("Creating users...")
        session.add(User(user_id=DEMO_CONTESTANT, username=DEMO_CONTESTANT, role="user"))
        for judge_id in DEMO_JUDGES:
            session.add(User(user_id=judge_id, username=judge_id, role="judge"))

        print("Creating videos and feedback...")
        for video_id, (title, feedback) in DEMO_FEEDBACK.items():
            session.add(Video(video_id=video_id, title=title, uploaded_by=DEMO_CONTESTANT))
            for judge_id, voice, creativity, presentation, comments in feedback:
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
            print(f"  Created video: {video_id} ({len(feedback)} feedback)")

        session.commit()
        print("Database seeded successfully!")

    finally:
        session.close()


def aggregate() -> None:
    """Run the aggregation job and print every summary."""
    session = get_session(DEMO_DB_URL)

    try:
        result = run_aggregation(session)
        print(f"Processed: {result.processed}, Updated: {result.updated}")

        for summary in repo.list_summaries(session, limit=50):
            print(f"  {summary.video_id}: {summary.category_label}")
            print(f"    {summary.aggregated_text}")

    finally:
        session.close()


def main() -> int:
    """Main entry point."""
    print("=" * 60)
    print("vidcontest Demo Seeding Script")
    print("=" * 60)

    print("\n[1/3] Initializing database...")
    init_db(DEMO_DB_URL)

    print("\n[2/3] Seeding database...")
    seed_database()

    print("\n[3/3] Aggregating feedback...")
    aggregate()

    print("\n" + "=" * 60)
    print("Demo seeding complete!")
    print(f"Database: {DEMO_DB_URL}")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
