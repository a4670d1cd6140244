"""Derived statistics computed on demand from sessions. Nothing here is stored."""

from collections.abc import Iterable
from datetime import datetime

from poker_tracker.schemas.domain import AppState, PlaySession
from poker_tracker.schemas.schemas import StatsSummary

SECONDS_PER_HOUR = 3600
MINUTES_PER_HOUR = 60


def session_net(session: PlaySession) -> float | None:
    """Account end minus account start, or None until the session is settled."""
    if session.account_end is None:
        return None
    return session.account_end - session.account_start


def hands_played(session: PlaySession) -> int | None:
    """Hands end minus hands start, or None until the end counter is recorded."""
    if session.hands_end is None:
        return None
    return session.hands_end - session.hands_start


def duration_minutes(session: PlaySession, now: datetime | None = None) -> int:
    """Whole minutes from start to end; an open session runs until ``now``."""
    end_time = session.end_time or now or datetime.now(tz=session.start_time.tzinfo)
    seconds = (end_time - session.start_time).total_seconds()
    return int(seconds // 60)


def format_duration(minutes: int) -> str:
    """Render minutes as e.g. '1h 30m'."""
    hours, remaining = divmod(minutes, MINUTES_PER_HOUR)
    return f"{hours}h {remaining}m"


def hands_per_hour(session: PlaySession, now: datetime | None = None) -> float:
    """Hands played per hour of play; 0 without a positive duration or end counter."""
    minutes = duration_minutes(session, now)
    played = hands_played(session)
    if minutes <= 0 or played is None:
        return 0.0
    return played / (minutes / MINUTES_PER_HOUR)


def is_completed(session: PlaySession) -> bool:
    """A session counts towards aggregates once both account figures exist."""
    return session.account_end is not None


def aggregate_stats(sessions: Iterable[PlaySession]) -> StatsSummary:
    """Aggregate completed sessions for reporting.

    Incomplete sessions are skipped entirely. Hands and hours only
    accumulate from completed sessions that have the relevant end values.
    """
    completed = [s for s in sessions if is_completed(s)]
    if not completed:
        return StatsSummary()

    total_net = 0.0
    total_hands = 0
    total_hours = 0.0
    for session in completed:
        total_net += session_net(session) or 0.0
        played = hands_played(session)
        if played is not None:
            total_hands += played
        if session.end_time is not None:
            elapsed = session.end_time - session.start_time
            total_hours += elapsed.total_seconds() / SECONDS_PER_HOUR

    total_sessions = len(completed)
    return StatsSummary(
        total_sessions=total_sessions,
        total_net=total_net,
        total_hands=total_hands,
        total_hours=total_hours,
        avg_net_per_session=total_net / total_sessions,
        hands_per_hour=total_hands / total_hours if total_hours > 0 else 0.0,
    )


def total_net(state: AppState) -> float:
    """Sum of nets over every completed session in the store, ignoring filters."""
    return sum(
        net for net in (session_net(s) for s in state.sessions) if net is not None
    )
