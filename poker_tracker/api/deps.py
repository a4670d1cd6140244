from typing import Annotated

from fastapi import Depends, Request

from poker_tracker.services.persistence_service import PersistenceBridge
from poker_tracker.services.store import Store
from poker_tracker.services.ticker import ActiveSessionTicker


def get_store(request: Request) -> Store:
    """Provide the store built at startup."""
    return request.app.state.store


def get_bridge(request: Request) -> PersistenceBridge:
    """Provide the persistence bridge built at startup."""
    return request.app.state.bridge


def get_ticker(request: Request) -> ActiveSessionTicker:
    """Provide the duration ticker attached at startup."""
    return request.app.state.ticker


StoreDep = Annotated[Store, Depends(get_store)]
BridgeDep = Annotated[PersistenceBridge, Depends(get_bridge)]
TickerDep = Annotated[ActiveSessionTicker, Depends(get_ticker)]
