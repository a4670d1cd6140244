"""
Session tracking API endpoints.

This module backs the session entry form and the history table: starting
and ending a live session, recording a finished one, and editing or
deleting recorded sessions.
"""

from fastapi import APIRouter, Response
from loguru import logger

from poker_tracker.api.deps import BridgeDep, StoreDep, TickerDep
from poker_tracker.schemas.domain import PlaySession
from poker_tracker.schemas.errors import ERROR_RESPONSES
from poker_tracker.schemas.schemas import (
    CurrentSessionResponse,
    EndSessionRequest,
    SessionDraft,
    SessionForm,
    StartSessionRequest,
)
from poker_tracker.services import session_service

router = APIRouter()


@router.get("/", response_model=list[PlaySession])
def read_sessions(store: StoreDep) -> list[PlaySession]:
    """List every recorded session in entry order."""
    sessions = store.state.sessions
    logger.debug(f"Retrieved {len(sessions)} sessions")
    return sessions


@router.get("/draft", response_model=SessionDraft)
def read_draft(store: StoreDep, bridge: BridgeDep) -> SessionDraft:
    """Initial values for the session entry form."""
    return session_service.draft_session(store.state, bridge.load_defaults())


@router.post(
    "/start", response_model=PlaySession, status_code=201, responses=ERROR_RESPONSES
)
def start_session(
    request: StartSessionRequest, store: StoreDep, bridge: BridgeDep
) -> PlaySession:
    """Start a live session and make it current."""
    draft = session_service.draft_session(store.state, bridge.load_defaults())
    return session_service.start_session(store, request, draft)


@router.get("/current", response_model=CurrentSessionResponse | None)
def read_current_session(
    store: StoreDep, ticker: TickerDep
) -> CurrentSessionResponse | None:
    """The session in progress with its live duration, or null."""
    state = store.state
    if state.current_session is None:
        logger.debug("No session in progress")
        return None
    display = ticker.display_for(state.current_session.id)
    return session_service.current_session_view(state, display=display)


@router.post(
    "/current/end", response_model=PlaySession, responses=ERROR_RESPONSES
)
def end_current_session(request: EndSessionRequest, store: StoreDep) -> PlaySession:
    """Close the current session with its ending hands and bankroll."""
    return session_service.end_session(store, request)


@router.post("/reset", status_code=204)
def reset_current_session(store: StoreDep) -> Response:
    """Clear the current session pointer so a new session can be started."""
    session_service.reset_current_session(store)
    return Response(status_code=204)


@router.post("/", response_model=PlaySession, status_code=201, responses=ERROR_RESPONSES)
def submit_session(form: SessionForm, store: StoreDep) -> PlaySession:
    """Record a finished session in one step."""
    return session_service.submit_session(store, form)


@router.get("/{session_id}", response_model=PlaySession, responses=ERROR_RESPONSES)
def read_session(session_id: str, store: StoreDep) -> PlaySession:
    """Retrieve one recorded session by id."""
    logger.info(f"Fetching session with ID: {session_id}")
    return session_service.get_session_by_id(store.state, session_id)


@router.put("/{session_id}", response_model=PlaySession, responses=ERROR_RESPONSES)
def edit_session(session_id: str, form: SessionForm, store: StoreDep) -> PlaySession:
    """Edit a recorded session."""
    return session_service.edit_session(store, session_id, form)


@router.delete("/{session_id}", status_code=204, responses=ERROR_RESPONSES)
def delete_session(session_id: str, store: StoreDep, confirm: bool = False) -> Response:
    """Delete a recorded session. Requires ``confirm=true``."""
    session_service.delete_session(store, session_id, confirm=confirm)
    return Response(status_code=204)
