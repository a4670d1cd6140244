from fastapi import APIRouter, Response
from loguru import logger

from poker_tracker.api.deps import StoreDep
from poker_tracker.schemas.errors import ERROR_RESPONSES
from poker_tracker.schemas.schemas import TableRatingForm, TableRatingView
from poker_tracker.services import table_service

router = APIRouter()


@router.get("/", response_model=list[TableRatingView])
def read_tables(store: StoreDep) -> list[TableRatingView]:
    """Every rated table with its rating label."""
    tables = store.state.table_ratings
    logger.debug(f"Retrieved {len(tables)} table ratings")
    return [table_service.to_view(table) for table in tables]


@router.post(
    "/", response_model=TableRatingView, status_code=201, responses=ERROR_RESPONSES
)
def rate_table(form: TableRatingForm, store: StoreDep) -> TableRatingView:
    """Rate a table, copying the selected players as they are now."""
    return table_service.to_view(table_service.rate_table(store, form))


@router.put("/{rating_id}", response_model=TableRatingView, responses=ERROR_RESPONSES)
def update_table(
    rating_id: str, form: TableRatingForm, store: StoreDep
) -> TableRatingView:
    return table_service.to_view(table_service.update_rating(store, rating_id, form))


@router.delete("/{rating_id}", status_code=204, responses=ERROR_RESPONSES)
def delete_table(rating_id: str, store: StoreDep, confirm: bool = False) -> Response:
    table_service.delete_rating(store, rating_id, confirm=confirm)
    return Response(status_code=204)
