"""Pydantic request/response schemas for API endpoints."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from poker_tracker.schemas.domain import (
    ColorTag,
    LocalDateTime,
    PlaySession,
    ReportFilter,
    TableRating,
)


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SessionDraft(ApiModel):
    """Initial values for the session entry form."""

    date: dt.date
    start_time: LocalDateTime
    hands_start: int
    limit: str
    format: str
    straddle: bool
    account_start: float


class StartSessionRequest(ApiModel):
    """Start a live session. Omitted values fall back to the form draft."""

    date: dt.date | None = None
    start_time: LocalDateTime | None = None
    hands_start: int | None = None
    limit: str | None = None
    format: str | None = None
    straddle: bool | None = None
    account_start: float | None = None


class EndSessionRequest(ApiModel):
    """Close the current session. Hands end and account end are required."""

    end_time: LocalDateTime | None = None
    hands_end: int | None = None
    account_end: float | None = None


class SessionForm(ApiModel):
    """A whole session, as entered in one go or edited from the reports table."""

    date: dt.date
    start_time: LocalDateTime
    end_time: LocalDateTime | None = None
    hands_start: int = 0
    hands_end: int | None = None
    limit: str = ""
    format: str = ""
    straddle: bool = False
    account_start: float = 0.0
    account_end: float | None = None


class CurrentSessionResponse(ApiModel):
    """The in-progress session with its live figures."""

    session: PlaySession
    duration_minutes: int
    duration_display: str
    hands_played: int | None
    hands_per_hour: int
    net: float | None


class PlayerForm(ApiModel):
    name: str = ""
    color_tag: ColorTag = ColorTag.GREEN
    total_hands: int = 0
    vpip: float = 0.0
    pfr: float = 0.0
    note: str = ""
    exploits: str = ""
    stakes: list[str] = Field(default_factory=list)


class ColorTagInfo(ApiModel):
    value: ColorTag
    label: str
    color: str


class StakeCreate(ApiModel):
    name: str
    format: str


class FormatCreate(ApiModel):
    name: str


class TableRatingForm(ApiModel):
    """Players are picked by id and copied into the rating when it is saved."""

    table_name: str = ""
    rating: int = Field(ge=1, le=5)
    notes: str = ""
    player_ids: list[str] = Field(default_factory=list)


class TableRatingView(ApiModel):
    table: TableRating
    label: str
    severity: str


class StatsSummary(ApiModel):
    """Aggregate statistics over the completed sessions of a report."""

    total_sessions: int = 0
    total_net: float = 0.0
    total_hands: int = 0
    total_hours: float = 0.0
    avg_net_per_session: float = 0.0
    hands_per_hour: float = 0.0


class SessionRow(ApiModel):
    """One history row; None marks a figure the session does not have yet."""

    session: PlaySession
    net: float | None
    hands: int | None
    duration_hours: float | None


class ReportResponse(ApiModel):
    filter: ReportFilter
    stake_options: list[str]
    format_options: list[str]
    summary: StatsSummary
    overall_net: float
    sessions: list[SessionRow]
    generated_at: dt.datetime
