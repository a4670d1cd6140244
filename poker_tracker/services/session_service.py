"""Session entry workflow: drafting, starting, ending, editing and deleting."""

from datetime import datetime

from loguru import logger

from poker_tracker.core.config import DEFAULT_FORMAT_NAME, STRADDLE_FORMAT_NAME
from poker_tracker.core.exceptions import (
    ConfirmationRequiredError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from poker_tracker.schemas.commands import (
    AddSession,
    DeleteSession,
    SetCurrentSession,
    UpdateSession,
)
from poker_tracker.schemas.domain import AppState, PlaySession, SessionDefaults
from poker_tracker.schemas.schemas import (
    CurrentSessionResponse,
    EndSessionRequest,
    SessionDraft,
    SessionForm,
    StartSessionRequest,
)
from poker_tracker.services.stats_service import (
    duration_minutes,
    format_duration,
    hands_played,
    hands_per_hour,
    session_net,
)
from poker_tracker.services.store import Store, new_id


def _require(fields: dict[str, object]) -> None:
    """Raise ValidationError naming every field whose value is missing."""
    missing = [name for name, value in fields.items() if value is None or value == ""]
    if missing:
        raise ValidationError(
            message=f"Missing required fields: {', '.join(missing)}",
            details={"missing": missing},
        )


def get_session_by_id(state: AppState, session_id: str) -> PlaySession:
    for session in state.sessions:
        if session.id == session_id:
            return session
    raise NotFoundError(
        message=f"Session {session_id} not found", details={"session_id": session_id}
    )


def draft_session(
    state: AppState, defaults: SessionDefaults, now: datetime | None = None
) -> SessionDraft:
    """Initial values for a new session.

    The saved defaults pick stake and format. When the last recorded session
    has an ending hand counter, the new one continues from its hand counter
    and bankroll.
    """
    now = now or datetime.now()
    game_format = defaults.format or DEFAULT_FORMAT_NAME
    hands_start = 0
    account_start = 0.0
    if state.sessions:
        last = state.sessions[-1]
        if last.hands_end is not None:
            hands_start = last.hands_end
            account_start = last.account_end if last.account_end is not None else 0.0
    return SessionDraft(
        date=now.date(),
        start_time=now,
        hands_start=hands_start,
        limit=defaults.limit,
        format=game_format,
        straddle=game_format == STRADDLE_FORMAT_NAME,
        account_start=account_start,
    )


def start_session(
    store: Store, request: StartSessionRequest, draft: SessionDraft
) -> PlaySession:
    """Record a new live session and make it the current one."""
    values = draft.model_dump()
    values.update(request.model_dump(exclude_none=True))
    _require({"limit": values["limit"]})

    with store.transaction() as state:
        current = state.current_session
        if current is not None:
            raise ConflictError(
                message="A session is already in progress",
                details={"session_id": current.id},
            )
        session = PlaySession(id=new_id(), is_active=True, **values)
        store.dispatch(AddSession(payload=session))
        store.dispatch(SetCurrentSession(payload=session))
    logger.info(f"Started session {session.id} at {session.limit} ({session.format})")
    return session


def end_session(
    store: Store, request: EndSessionRequest, now: datetime | None = None
) -> PlaySession:
    """Close the current session with its ending figures."""
    with store.transaction() as state:
        current = state.current_session
        if current is None:
            raise NotFoundError(message="No session in progress")
        _require({"handsEnd": request.hands_end, "accountEnd": request.account_end})
        end_time = (
            request.end_time or now or datetime.now(tz=current.start_time.tzinfo)
        )
        ended = current.model_copy(
            update={
                "end_time": end_time,
                "hands_end": request.hands_end,
                "account_end": request.account_end,
                "is_active": False,
            }
        )
        store.dispatch(UpdateSession(payload=ended))
        store.dispatch(SetCurrentSession(payload=None))
    logger.info(f"Ended session {ended.id}: net {session_net(ended)}")
    return ended


def reset_current_session(store: Store) -> None:
    """Forget the current session pointer without touching the history."""
    store.dispatch(SetCurrentSession(payload=None))


def submit_session(store: Store, form: SessionForm) -> PlaySession:
    """Record an already finished session in one step."""
    _require(
        {
            "limit": form.limit,
            "handsEnd": form.hands_end,
            "accountEnd": form.account_end,
        }
    )
    session = PlaySession(id=new_id(), is_active=False, **form.model_dump())
    store.dispatch(AddSession(payload=session))
    logger.info(f"Recorded finished session {session.id}")
    return session


def edit_session(store: Store, session_id: str, form: SessionForm) -> PlaySession:
    """Replace the editable fields of an existing session."""
    existing = get_session_by_id(store.state, session_id)
    updated = existing.model_copy(update=form.model_dump())
    store.dispatch(UpdateSession(payload=updated))
    logger.info(f"Edited session {session_id}")
    return updated


def delete_session(store: Store, session_id: str, *, confirm: bool) -> None:
    if not confirm:
        raise ConfirmationRequiredError(
            message="Deleting a session must be confirmed",
            details={"session_id": session_id},
        )
    get_session_by_id(store.state, session_id)
    store.dispatch(DeleteSession(payload=session_id))
    logger.warning(f"Deleted session {session_id}")


def current_session_view(
    state: AppState, now: datetime | None = None, display: str | None = None
) -> CurrentSessionResponse | None:
    """Live figures for the current session, or None when nothing is in progress.

    ``display`` is the duration text last rendered by the ticker; it is
    computed here when not given.
    """
    session = state.current_session
    if session is None:
        return None
    minutes = duration_minutes(session, now)
    return CurrentSessionResponse(
        session=session,
        duration_minutes=minutes,
        duration_display=display or format_duration(minutes),
        hands_played=hands_played(session),
        hands_per_hour=round(hands_per_hour(session, now)),
        net=session_net(session),
    )
