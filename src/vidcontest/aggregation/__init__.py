"""Aggregation module for judge feedback summaries.

- Reads judge feedback through repo and writes one summary per video
- Label and comment derivation are pure functions
- Forbidden: writes to feedback, HTTP concerns
"""
