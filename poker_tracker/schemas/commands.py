"""Commands accepted by the store, as a tagged union on ``type``."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from poker_tracker.schemas.domain import (
    GameFormat,
    PartialAppState,
    Player,
    PlaySession,
    Stake,
    TableRating,
)


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True)


class AddSession(_Command):
    type: Literal["ADD_SESSION"] = "ADD_SESSION"
    payload: PlaySession


class UpdateSession(_Command):
    type: Literal["UPDATE_SESSION"] = "UPDATE_SESSION"
    payload: PlaySession


class DeleteSession(_Command):
    type: Literal["DELETE_SESSION"] = "DELETE_SESSION"
    payload: str


class SetCurrentSession(_Command):
    type: Literal["SET_CURRENT_SESSION"] = "SET_CURRENT_SESSION"
    payload: PlaySession | None = None


class AddPlayer(_Command):
    type: Literal["ADD_PLAYER"] = "ADD_PLAYER"
    payload: Player


class UpdatePlayer(_Command):
    type: Literal["UPDATE_PLAYER"] = "UPDATE_PLAYER"
    payload: Player


class DeletePlayer(_Command):
    type: Literal["DELETE_PLAYER"] = "DELETE_PLAYER"
    payload: str


class AddStake(_Command):
    type: Literal["ADD_STAKE"] = "ADD_STAKE"
    payload: Stake


class AddFormat(_Command):
    type: Literal["ADD_FORMAT"] = "ADD_FORMAT"
    payload: GameFormat


class AddTableRating(_Command):
    type: Literal["ADD_TABLE_RATING"] = "ADD_TABLE_RATING"
    payload: TableRating


class UpdateTableRating(_Command):
    type: Literal["UPDATE_TABLE_RATING"] = "UPDATE_TABLE_RATING"
    payload: TableRating


class DeleteTableRating(_Command):
    type: Literal["DELETE_TABLE_RATING"] = "DELETE_TABLE_RATING"
    payload: str


class LoadData(_Command):
    type: Literal["LOAD_DATA"] = "LOAD_DATA"
    payload: PartialAppState


type Command = Annotated[
    AddSession
    | UpdateSession
    | DeleteSession
    | SetCurrentSession
    | AddPlayer
    | UpdatePlayer
    | DeletePlayer
    | AddStake
    | AddFormat
    | AddTableRating
    | UpdateTableRating
    | DeleteTableRating
    | LoadData,
    Field(discriminator="type"),
]


# Runtime check for dispatch; keep in sync with Command
COMMAND_TYPES = (
    AddSession,
    UpdateSession,
    DeleteSession,
    SetCurrentSession,
    AddPlayer,
    UpdatePlayer,
    DeletePlayer,
    AddStake,
    AddFormat,
    AddTableRating,
    UpdateTableRating,
    DeleteTableRating,
    LoadData,
)
