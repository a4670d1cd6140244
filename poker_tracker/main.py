"""FastAPI application serving the poker tracker's views over one shared store."""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from poker_tracker.api.v1.router import api_router
from poker_tracker.core.config import TICK_INTERVAL_SECONDS
from poker_tracker.core.db import create_db_and_tables, engine
from poker_tracker.core.error_handlers import register_exception_handlers
from poker_tracker.core.logging_config import configure_logging
from poker_tracker.services.persistence_service import PersistenceBridge
from poker_tracker.services.stats_service import total_net
from poker_tracker.services.store import Store
from poker_tracker.services.ticker import ActiveSessionTicker


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the store, load saved data, and flush it again on shutdown."""
    configure_logging()
    logger.info("Starting poker tracker...")
    create_db_and_tables(engine)

    store = Store()
    bridge = PersistenceBridge(store, engine)
    logger.info("Loading saved data...")
    bridge.load()
    bridge.start()

    ticker = ActiveSessionTicker(store, interval=TICK_INTERVAL_SECONDS)
    ticker.attach(asyncio.get_running_loop())

    app.state.store = store
    app.state.bridge = bridge
    app.state.ticker = ticker
    logger.success("Application startup complete")
    yield
    logger.info("Shutting down poker tracker...")
    await ticker.detach()
    bridge.stop()
    logger.success("Data flushed, shutdown complete")


app = FastAPI(title="Poker Tracker", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(api_router)


@app.get("/")
def read_root() -> dict[str, str | float]:
    """Welcome message with the all-time net across every settled session."""
    logger.debug("Root endpoint accessed")
    return {
        "message": "Welcome to the Poker Tracker API",
        "totalNet": total_net(app.state.store.state),
    }
