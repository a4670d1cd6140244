"""Stake and format lists offered as choices on the session forms."""

from fastapi import APIRouter
from loguru import logger

from poker_tracker.api.deps import StoreDep
from poker_tracker.schemas.commands import AddFormat, AddStake
from poker_tracker.schemas.domain import GameFormat, Stake
from poker_tracker.schemas.schemas import FormatCreate, StakeCreate
from poker_tracker.services.store import new_id

router = APIRouter()


@router.get("/stakes", response_model=list[Stake])
def read_stakes(store: StoreDep) -> list[Stake]:
    return store.state.stakes


@router.post("/stakes", response_model=Stake, status_code=201)
def create_stake(body: StakeCreate, store: StoreDep) -> Stake:
    stake = Stake(id=new_id(), name=body.name, format=body.format)
    store.dispatch(AddStake(payload=stake))
    logger.info(f"Added stake {stake.name} ({stake.format})")
    return stake


@router.get("/formats", response_model=list[GameFormat])
def read_formats(store: StoreDep) -> list[GameFormat]:
    return store.state.formats


@router.post("/formats", response_model=GameFormat, status_code=201)
def create_format(body: FormatCreate, store: StoreDep) -> GameFormat:
    game_format = GameFormat(id=new_id(), name=body.name)
    store.dispatch(AddFormat(payload=game_format))
    logger.info(f"Added format {game_format.name}")
    return game_format
