from fastapi import APIRouter, Response
from loguru import logger

from poker_tracker.api.deps import StoreDep
from poker_tracker.schemas.domain import Player
from poker_tracker.schemas.errors import ERROR_RESPONSES
from poker_tracker.schemas.schemas import ColorTagInfo, PlayerForm
from poker_tracker.services import player_service

router = APIRouter()


@router.get("/", response_model=list[Player])
def read_players(store: StoreDep) -> list[Player]:
    """Retrieve the tracked players in the order they were added."""
    players = store.state.players
    logger.debug(f"Retrieved {len(players)} players")
    return players


@router.get("/color-tags", response_model=list[ColorTagInfo])
def read_color_tags() -> list[ColorTagInfo]:
    """The fixed color tags with their labels and swatches."""
    return player_service.color_tag_options()


@router.get("/stake-options", response_model=list[str])
def read_stake_options() -> list[str]:
    """Stake buckets offered on the player form."""
    return player_service.stake_options()


@router.get("/{player_id}", response_model=Player, responses=ERROR_RESPONSES)
def read_player(player_id: str, store: StoreDep) -> Player:
    """Retrieve a specific player by ID."""
    logger.info(f"Fetching player with ID: {player_id}")
    return player_service.get_player_by_id(store.state, player_id)


@router.post("/", response_model=Player, status_code=201, responses=ERROR_RESPONSES)
def create_player(form: PlayerForm, store: StoreDep) -> Player:
    return player_service.add_player(store, form)


@router.put("/{player_id}", response_model=Player, responses=ERROR_RESPONSES)
def update_player(player_id: str, form: PlayerForm, store: StoreDep) -> Player:
    return player_service.update_player(store, player_id, form)


@router.delete("/{player_id}", status_code=204, responses=ERROR_RESPONSES)
def delete_player(player_id: str, store: StoreDep, confirm: bool = False) -> Response:
    """Remove a player. Requires ``confirm=true``; table ratings keep their copy."""
    player_service.delete_player(store, player_id, confirm=confirm)
    return Response(status_code=204)
