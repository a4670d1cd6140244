from fastapi import APIRouter, Response
from loguru import logger

from poker_tracker.api.deps import BridgeDep
from poker_tracker.core.exceptions import ConfirmationRequiredError
from poker_tracker.schemas.domain import SessionDefaults
from poker_tracker.schemas.errors import ERROR_RESPONSES

router = APIRouter()


@router.get("/settings/defaults", response_model=SessionDefaults)
def read_defaults(bridge: BridgeDep) -> SessionDefaults:
    """Preferred stake and format used to pre-fill new sessions."""
    return bridge.load_defaults()


@router.put("/settings/defaults", response_model=SessionDefaults)
def update_defaults(defaults: SessionDefaults, bridge: BridgeDep) -> SessionDefaults:
    bridge.save_defaults(defaults)
    return defaults


@router.delete("/data", status_code=204, responses=ERROR_RESPONSES)
def clear_all_data(bridge: BridgeDep, confirm: bool = False) -> Response:
    """Erase every session, player and rating. Requires ``confirm=true``."""
    if not confirm:
        raise ConfirmationRequiredError(message="Clearing all data must be confirmed")
    logger.warning("Clearing all data on user request")
    bridge.clear_all()
    return Response(status_code=204)
