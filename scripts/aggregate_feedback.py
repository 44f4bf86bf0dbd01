#!/usr/bin/env python3
"""Run the feedback aggregation job from a source checkout.

Usage:
    python scripts/aggregate_feedback.py [--database-url URL] [--log-level LEVEL]

Exit codes:
    0: Aggregation completed
    1: Aggregation could not run
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from vidcontest.aggregation.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
