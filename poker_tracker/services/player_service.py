"""Opponent roster: adding, editing and removing tracked players."""

from loguru import logger

from poker_tracker.core.config import PLAYER_STAKE_OPTIONS
from poker_tracker.core.exceptions import (
    ConfirmationRequiredError,
    NotFoundError,
    ValidationError,
)
from poker_tracker.schemas.commands import AddPlayer, DeletePlayer, UpdatePlayer
from poker_tracker.schemas.domain import AppState, ColorTag, Player
from poker_tracker.schemas.schemas import ColorTagInfo, PlayerForm
from poker_tracker.services.store import Store, new_id


def color_tag_options() -> list[ColorTagInfo]:
    """Every color tag with its label and swatch, in display order."""
    return [ColorTagInfo(value=tag, label=tag.label, color=tag.color) for tag in ColorTag]


def stake_options() -> list[str]:
    """Stake buckets a player can be marked as seen at."""
    return list(PLAYER_STAKE_OPTIONS)


def get_player_by_id(state: AppState, player_id: str) -> Player:
    for player in state.players:
        if player.id == player_id:
            return player
    raise NotFoundError(
        message=f"Player {player_id} not found", details={"player_id": player_id}
    )


def _validate(form: PlayerForm) -> None:
    if not form.name.strip():
        raise ValidationError(
            message="Player name is required", details={"missing": ["name"]}
        )
    unknown = [stake for stake in form.stakes if stake not in PLAYER_STAKE_OPTIONS]
    if unknown:
        raise ValidationError(
            message=f"Unknown stakes: {', '.join(unknown)}",
            details={"unknown": unknown},
        )


def add_player(store: Store, form: PlayerForm) -> Player:
    _validate(form)
    player = Player(id=new_id(), **form.model_dump())
    store.dispatch(AddPlayer(payload=player))
    logger.info(f"Added player {player.name} ({player.color_tag.label})")
    return player


def update_player(store: Store, player_id: str, form: PlayerForm) -> Player:
    """Replace a player's editable fields. The AI summary is left as it was."""
    _validate(form)
    existing = get_player_by_id(store.state, player_id)
    updated = existing.model_copy(update=form.model_dump())
    store.dispatch(UpdatePlayer(payload=updated))
    logger.info(f"Updated player {updated.name}")
    return updated


def delete_player(store: Store, player_id: str, *, confirm: bool) -> None:
    """Remove a player from the roster.

    Table ratings keep their own copy of the player and are not touched.
    """
    if not confirm:
        raise ConfirmationRequiredError(
            message="Deleting a player must be confirmed",
            details={"player_id": player_id},
        )
    player = get_player_by_id(store.state, player_id)
    store.dispatch(DeletePlayer(payload=player_id))
    logger.warning(f"Deleted player {player.name}")
