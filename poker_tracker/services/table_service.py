"""Table ratings and their display labels."""

from loguru import logger

from poker_tracker.core.exceptions import ConfirmationRequiredError, NotFoundError
from poker_tracker.schemas.commands import (
    AddTableRating,
    DeleteTableRating,
    UpdateTableRating,
)
from poker_tracker.schemas.domain import AppState, Player, TableRating
from poker_tracker.schemas.schemas import TableRatingForm, TableRatingView
from poker_tracker.services.store import Store, new_id

EXCELLENT_RATING = 4
GOOD_RATING = 3
AVERAGE_RATING = 2


def rating_label(rating: int) -> str:
    if rating >= EXCELLENT_RATING:
        return "Excellent Table"
    if rating >= GOOD_RATING:
        return "Good Table"
    if rating >= AVERAGE_RATING:
        return "Average Table"
    return "Poor Table"


def rating_severity(rating: int) -> str:
    if rating >= EXCELLENT_RATING:
        return "success"
    if rating >= GOOD_RATING:
        return "warning"
    return "error"


def to_view(table: TableRating) -> TableRatingView:
    return TableRatingView(
        table=table, label=rating_label(table.rating), severity=rating_severity(table.rating)
    )


def snapshot_players(state: AppState, player_ids: list[str]) -> list[Player]:
    """Copy the selected players as they are right now, in roster order.

    Ids that match no player are dropped.
    """
    wanted = set(player_ids)
    return [player.model_copy() for player in state.players if player.id in wanted]


def get_rating_by_id(state: AppState, rating_id: str) -> TableRating:
    for table in state.table_ratings:
        if table.id == rating_id:
            return table
    raise NotFoundError(
        message=f"Table rating {rating_id} not found", details={"rating_id": rating_id}
    )


def rate_table(store: Store, form: TableRatingForm) -> TableRating:
    table = TableRating(
        id=new_id(),
        table_name=form.table_name,
        players=snapshot_players(store.state, form.player_ids),
        rating=form.rating,
        notes=form.notes,
    )
    store.dispatch(AddTableRating(payload=table))
    logger.info(f"Rated table '{table.table_name}' {table.rating}/5")
    return table


def update_rating(store: Store, rating_id: str, form: TableRatingForm) -> TableRating:
    """Re-rate a table. The player list is re-snapshotted from the current roster."""
    existing = get_rating_by_id(store.state, rating_id)
    updated = existing.model_copy(
        update={
            "table_name": form.table_name,
            "players": snapshot_players(store.state, form.player_ids),
            "rating": form.rating,
            "notes": form.notes,
        }
    )
    store.dispatch(UpdateTableRating(payload=updated))
    logger.info(f"Updated rating for table '{updated.table_name}'")
    return updated


def delete_rating(store: Store, rating_id: str, *, confirm: bool) -> None:
    if not confirm:
        raise ConfirmationRequiredError(
            message="Deleting a table rating must be confirmed",
            details={"rating_id": rating_id},
        )
    get_rating_by_id(store.state, rating_id)
    store.dispatch(DeleteTableRating(payload=rating_id))
    logger.warning(f"Deleted table rating {rating_id}")
