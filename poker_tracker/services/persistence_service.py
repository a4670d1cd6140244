"""Synchronization between the store and the key/value store."""

from collections.abc import Callable

from loguru import logger
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from poker_tracker.core.config import DEFAULTS_KEY, FILTERS_KEY, STATE_KEY
from poker_tracker.dao.storage_dao import delete_value, get_value, set_value
from poker_tracker.schemas.commands import LoadData
from poker_tracker.schemas.domain import (
    AppState,
    PartialAppState,
    ReportFilter,
    SessionDefaults,
)
from poker_tracker.services.store import Store, initial_state


def has_content(state: AppState) -> bool:
    """True once at least one session or player has been recorded."""
    return bool(state.sessions or state.players)


class PersistenceBridge:
    """Mirrors the store into one reserved key and keeps two side blobs.

    ``load`` runs once at startup. After ``start`` every state change is
    written back, except while the state has no sessions and no players:
    writing then would clobber a previously saved blob with the blank
    seed state before it has been loaded.
    """

    def __init__(self, store: Store, engine: Engine) -> None:
        self.store = store
        self.engine = engine
        self._unsubscribe: Callable[[], None] | None = None

    def _read(self, key: str) -> str | None:
        with Session(self.engine) as session:
            return get_value(session, key)

    def _write(self, key: str, value: str) -> None:
        with Session(self.engine) as session:
            set_value(session, key, value)
            session.commit()

    def load(self) -> bool:
        """Load the saved state into the store. Returns True if something was loaded."""
        try:
            raw = self._read(STATE_KEY)
        except SQLAlchemyError as e:
            logger.error(f"Could not read saved data: {e!s}")
            return False

        if raw is None:
            logger.info("No saved data found, starting from defaults")
            return False

        try:
            partial = PartialAppState.model_validate_json(raw)
        except PydanticValidationError as e:
            logger.error(f"Error loading saved data, keeping defaults: {e!s}")
            return False

        self.store.dispatch(LoadData(payload=partial))
        logger.success(
            f"Loaded saved data: {len(self.store.state.sessions)} sessions, "
            + f"{len(self.store.state.players)} players"
        )
        return True

    def save(self, state: AppState) -> bool:
        """Write the state under the main key. Returns False if skipped or failed."""
        if not has_content(state):
            logger.debug("State is empty, skipping save")
            return False
        try:
            self._write(STATE_KEY, state.model_dump_json(by_alias=True))
        except SQLAlchemyError as e:
            logger.exception(f"Failed to save data: {e!s}")
            return False
        logger.debug(
            f"Data saved: {len(state.sessions)} sessions, {len(state.players)} players"
        )
        return True

    def start(self) -> None:
        """Begin writing back every state change."""
        if self._unsubscribe is None:
            self._unsubscribe = self.store.subscribe(self.save)

    def stop(self) -> None:
        """Flush the current state and stop observing the store."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.save(self.store.state)

    def clear_all(self) -> None:
        """Reset the store to its seeded state and drop the saved blob."""
        seeded = initial_state()
        self.store.dispatch(
            LoadData(
                payload=PartialAppState(
                    **{name: getattr(seeded, name) for name in AppState.model_fields}
                )
            )
        )
        with Session(self.engine) as session:
            deleted = delete_value(session, STATE_KEY)
            session.commit()
        logger.warning(f"All data cleared (saved blob removed: {deleted})")

    # Side blobs: read and written only on explicit user action

    def _load_blob[M: BaseModel](self, key: str, model: type[M]) -> M:
        try:
            raw = self._read(key)
        except SQLAlchemyError as e:
            logger.error(f"Could not read {key}: {e!s}")
            return model()
        if raw is None:
            return model()
        try:
            return model.model_validate_json(raw)
        except PydanticValidationError as e:
            logger.error(f"Ignoring malformed {key}: {e!s}")
            return model()

    def load_defaults(self) -> SessionDefaults:
        return self._load_blob(DEFAULTS_KEY, SessionDefaults)

    def save_defaults(self, defaults: SessionDefaults) -> None:
        self._write(DEFAULTS_KEY, defaults.model_dump_json(by_alias=True))
        logger.info(f"Saved default settings: {defaults}")

    def load_filter(self) -> ReportFilter:
        return self._load_blob(FILTERS_KEY, ReportFilter)

    def save_filter(self, report_filter: ReportFilter) -> None:
        self._write(FILTERS_KEY, report_filter.model_dump_json(by_alias=True))
        logger.debug(f"Saved report filter: {report_filter}")
