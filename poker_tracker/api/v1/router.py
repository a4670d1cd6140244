from fastapi import APIRouter
from loguru import logger

from poker_tracker.api.v1.endpoints import (
    players,
    reference,
    reports,
    sessions,
    settings,
    tables,
)

logger.info("Initializing API v1 router")
api_router = APIRouter(prefix="/api/v1")

logger.debug("Registering sessions endpoint")
api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
logger.debug("Registering players endpoint")
api_router.include_router(players.router, prefix="/players", tags=["players"])
logger.debug("Registering tables endpoint")
api_router.include_router(tables.router, prefix="/tables", tags=["tables"])
logger.debug("Registering reports endpoint")
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
api_router.include_router(reference.router, tags=["reference"])
api_router.include_router(settings.router, tags=["settings"])
logger.success("API v1 router initialized successfully")
