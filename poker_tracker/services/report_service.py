"""Reports projection: filtering sessions and summarizing them."""

from collections.abc import Iterable
from datetime import datetime

from loguru import logger

from poker_tracker.schemas.domain import AppState, PlaySession, ReportFilter
from poker_tracker.schemas.schemas import ReportResponse, SessionRow
from poker_tracker.services.stats_service import (
    SECONDS_PER_HOUR,
    aggregate_stats,
    hands_played,
    session_net,
    total_net,
)


def matches_filter(session: PlaySession, report_filter: ReportFilter) -> bool:
    """Check one session against every criterion the filter sets."""
    if report_filter.stake_label and report_filter.stake_label not in session.limit:
        return False
    if report_filter.format_label and session.format != report_filter.format_label:
        return False
    if report_filter.straddle:
        return session.straddle == (report_filter.straddle == "true")
    return True


def filter_sessions(
    sessions: Iterable[PlaySession], report_filter: ReportFilter
) -> list[PlaySession]:
    """Keep the sessions matching the filter, in their original order."""
    return [s for s in sessions if matches_filter(s, report_filter)]


def filter_options(state: AppState) -> tuple[list[str], list[str]]:
    """Distinct stake labels and formats seen in sessions, in first-seen order."""
    stakes = list(dict.fromkeys(s.limit for s in state.sessions))
    formats = list(dict.fromkeys(s.format for s in state.sessions))
    return stakes, formats


def _session_row(session: PlaySession) -> SessionRow:
    duration_hours = None
    if session.end_time is not None:
        elapsed = session.end_time - session.start_time
        # One decimal place, as shown in the history table
        duration_hours = round(elapsed.total_seconds() / SECONDS_PER_HOUR, 1)
    return SessionRow(
        session=session,
        net=session_net(session),
        hands=hands_played(session),
        duration_hours=duration_hours,
    )


def build_report(
    state: AppState, report_filter: ReportFilter, now: datetime | None = None
) -> ReportResponse:
    """Filter the store's sessions and summarize them."""
    filtered = filter_sessions(state.sessions, report_filter)
    stats = aggregate_stats(filtered)
    stake_options, format_options = filter_options(state)
    logger.debug(
        f"Report built: {len(filtered)}/{len(state.sessions)} sessions match {report_filter}"
    )
    return ReportResponse(
        filter=report_filter,
        stake_options=stake_options,
        format_options=format_options,
        summary=stats,
        overall_net=total_net(state),
        sessions=[_session_row(s) for s in filtered],
        generated_at=now or datetime.now(),
    )
