"""Application state store: command reduction and change notification."""

from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
import threading
import uuid
from typing import Any, Protocol

from loguru import logger

from poker_tracker.core.config import DEFAULT_FORMATS, DEFAULT_STAKES
from poker_tracker.schemas.commands import (
    COMMAND_TYPES,
    AddFormat,
    AddPlayer,
    AddSession,
    AddStake,
    AddTableRating,
    Command,
    DeletePlayer,
    DeleteSession,
    DeleteTableRating,
    LoadData,
    SetCurrentSession,
    UpdatePlayer,
    UpdateSession,
    UpdateTableRating,
)
from poker_tracker.schemas.domain import AppState, GameFormat, Stake

type Listener = Callable[[AppState], None]


class _HasId(Protocol):
    @property
    def id(self) -> str: ...


def initial_state() -> AppState:
    """Build the pristine state: seeded stakes and formats, nothing else."""
    return AppState(
        stakes=[Stake(id=i, name=name, format=fmt) for i, name, fmt in DEFAULT_STAKES],
        formats=[GameFormat(id=i, name=name) for i, name in DEFAULT_FORMATS],
    )


def _replace_by_id[T: _HasId](items: Sequence[T], item: T) -> list[T] | None:
    """Return a copy of items with the matching record swapped, or None if absent."""
    if not any(existing.id == item.id for existing in items):
        return None
    return [item if existing.id == item.id else existing for existing in items]


def _remove_by_id[T: _HasId](items: Sequence[T], item_id: str) -> list[T] | None:
    """Return a copy of items without the matching record, or None if absent."""
    remaining = [existing for existing in items if existing.id != item_id]
    if len(remaining) == len(items):
        return None
    return remaining


def _with(state: AppState, field: str, value: list[Any] | None) -> AppState:
    if value is None:
        return state
    return state.model_copy(update={field: value})


def reduce(state: AppState, command: Command) -> AppState:  # noqa: PLR0911
    """Apply one command and return the next state.

    Pure: the input state is never mutated. Commands that target an id
    which does not exist return ``state`` itself.
    """
    match command:
        case AddSession(payload=session):
            return state.model_copy(update={"sessions": [*state.sessions, session]})
        case UpdateSession(payload=session):
            return _with(state, "sessions", _replace_by_id(state.sessions, session))
        case DeleteSession(payload=session_id):
            return _with(state, "sessions", _remove_by_id(state.sessions, session_id))
        case SetCurrentSession(payload=session):
            return state.model_copy(update={"current_session": session})
        case AddPlayer(payload=player):
            return state.model_copy(update={"players": [*state.players, player]})
        case UpdatePlayer(payload=player):
            return _with(state, "players", _replace_by_id(state.players, player))
        case DeletePlayer(payload=player_id):
            return _with(state, "players", _remove_by_id(state.players, player_id))
        case AddStake(payload=stake):
            return state.model_copy(update={"stakes": [*state.stakes, stake]})
        case AddFormat(payload=game_format):
            return state.model_copy(update={"formats": [*state.formats, game_format]})
        case AddTableRating(payload=rating):
            return state.model_copy(
                update={"table_ratings": [*state.table_ratings, rating]}
            )
        case UpdateTableRating(payload=rating):
            return _with(
                state, "table_ratings", _replace_by_id(state.table_ratings, rating)
            )
        case DeleteTableRating(payload=rating_id):
            return _with(
                state, "table_ratings", _remove_by_id(state.table_ratings, rating_id)
            )
        case LoadData(payload=partial):
            update = {name: getattr(partial, name) for name in partial.model_fields_set}
            return state.model_copy(update=update)
        case _:
            logger.warning(f"Ignoring unsupported command: {command!r}")
            return state


class Store:
    """Holds the canonical AppState and serializes command application.

    Listeners are called with the new state inside the dispatch lock, so
    they observe changes in command order. The lock is re-entrant: a caller
    holding ``transaction()`` can check the state and dispatch several
    commands without another thread interleaving.
    """

    def __init__(self, state: AppState | None = None) -> None:
        self._state = state if state is not None else initial_state()
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> AppState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @contextmanager
    def transaction(self) -> Iterator[AppState]:
        """Hold the dispatch lock and yield the state as of entry."""
        with self._lock:
            yield self._state

    def dispatch(self, command: object) -> bool:
        """Apply a command. Returns False if the command type is not supported."""
        if not isinstance(command, COMMAND_TYPES):
            logger.warning(
                f"Rejected unsupported command {type(command).__name__}; state unchanged"
            )
            return False

        with self._lock:
            new_state = reduce(self._state, command)
            if new_state is self._state:
                logger.debug(f"{command.type} left state unchanged")
                return True
            self._state = new_state
            logger.debug(f"Applied {command.type}")
            for listener in list(self._listeners):
                listener(new_state)
        return True


def new_id() -> str:
    """Random unique id for a new record."""
    return uuid.uuid4().hex
