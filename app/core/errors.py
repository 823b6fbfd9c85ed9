# app/core/errors.py
from __future__ import annotations


class LeaderboardError(Exception):
    """Base for errors that abort a leaderboard computation."""

    status_code: int = 500
    retryable: bool = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(LeaderboardError):
    """Missing or malformed caller input. Not worth retrying."""

    status_code = 400


class UpstreamUnavailable(LeaderboardError):
    """Scoreboard fetch failed (status, timeout or malformed payload). Poller may retry."""

    status_code = 502
    retryable = True
