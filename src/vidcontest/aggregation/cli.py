"""Command-line entry point for the feedback aggregation job.

Usage:
    vidcontest-aggregate [--database-url URL] [--log-level LEVEL]

Exits 0 when the run completes (even if some videos were skipped) and 1
when the run could not start or the video averages could not be fetched.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from vidcontest.aggregation.feedback import run_aggregation
from vidcontest.core.log import configure_logging
from vidcontest.core.settings import get_settings
from vidcontest.db.session import get_db_session, init_db

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="vidcontest-aggregate",
        description="Aggregate judge feedback into per-video summaries.",
    )
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="SQLAlchemy database URL (default: from VIDCONTEST_DATABASE_URL)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: from VIDCONTEST_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one aggregation pass.

    Args:
        argv: Command-line arguments, defaults to sys.argv[1:].

    Returns:
        Process exit code.
    """
    args = _parse_args(argv)
    configure_logging(args.log_level)

    try:
        init_db(args.database_url)
        with get_db_session(args.database_url) as session:
            result = run_aggregation(session)
    except Exception:
        logger.exception("Aggregation failed")
        return 1

    logger.info(f"Aggregation result: processed={result.processed}, updated={result.updated}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
