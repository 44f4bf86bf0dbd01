"""API module for vidcontest.

- Validates inputs, reads/writes DB through repo
- Returns payloads for the contest UI
- Forbidden: authentication, uploads, HTML rendering
"""
