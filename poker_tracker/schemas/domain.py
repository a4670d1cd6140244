"""Domain records held by the store and persisted as camelCase JSON."""

import datetime as dt
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from poker_tracker.core.config import COLOR_TAGS


def _as_local_naive(value: dt.datetime) -> dt.datetime:
    """Convert an aware timestamp to local wall-clock time without tzinfo."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


# Session times are kept naive local so they can always be subtracted
LocalDateTime = Annotated[dt.datetime, AfterValidator(_as_local_naive)]


class DomainModel(BaseModel):
    """Immutable record serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class ColorTag(StrEnum):
    """Fixed classification of an opponent's playing style."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"

    @property
    def label(self) -> str:
        return COLOR_TAGS[self.value][0]

    @property
    def color(self) -> str:
        return COLOR_TAGS[self.value][1]


class PlaySession(DomainModel):
    """One completed or in-progress play session."""

    id: str
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
    is_active: bool = True


class Player(DomainModel):
    """A tracked opponent."""

    id: str
    name: str
    color_tag: ColorTag = ColorTag.GREEN
    total_hands: int = 0
    vpip: float = 0.0
    pfr: float = 0.0
    note: str = ""
    exploits: str = ""
    stakes: list[str] | None = None
    # Reserved; no command writes it yet
    ai_summary: str | None = None


class Stake(DomainModel):
    id: str
    name: str
    format: str


class GameFormat(DomainModel):
    id: str
    name: str


class TableRating(DomainModel):
    """A judgment of one table.

    ``players`` are copies of the Player records taken when the table was
    rated. Later edits to those players do not show up here.
    """

    id: str
    table_name: str
    players: list[Player] = Field(default_factory=list)
    rating: int = Field(ge=1, le=5)
    notes: str = ""


class AppState(DomainModel):
    """Aggregate root held by the store."""

    sessions: list[PlaySession] = Field(default_factory=list)
    players: list[Player] = Field(default_factory=list)
    stakes: list[Stake] = Field(default_factory=list)
    formats: list[GameFormat] = Field(default_factory=list)
    table_ratings: list[TableRating] = Field(default_factory=list)
    current_session: PlaySession | None = None
    # Carried for compatibility with saved blobs; use stats_service.total_net
    total_net: float = 0.0


class PartialAppState(DomainModel):
    """Any subset of AppState fields, as read back from storage.

    Only the fields that were actually provided end up in
    ``model_fields_set``; those are the ones LOAD_DATA merges.
    """

    sessions: list[PlaySession] | None = None
    players: list[Player] | None = None
    stakes: list[Stake] | None = None
    formats: list[GameFormat] | None = None
    table_ratings: list[TableRating] | None = None
    current_session: PlaySession | None = None
    total_net: float | None = None


class SessionDefaults(DomainModel):
    """Preferred stake and format for new sessions."""

    limit: str = ""
    format: str = ""


class ReportFilter(DomainModel):
    """Reports filter; straddle is tri-state text so it round-trips as-is."""

    stake_label: str = ""
    format_label: str = ""
    straddle: Literal["", "true", "false"] = ""
