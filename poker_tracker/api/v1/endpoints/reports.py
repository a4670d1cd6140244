"""
Reports API endpoints.

The filter is stored under its own key, so the reports view comes back
with the same selection after a restart.
"""

from fastapi import APIRouter

from poker_tracker.api.deps import BridgeDep, StoreDep
from poker_tracker.schemas.domain import ReportFilter
from poker_tracker.schemas.schemas import ReportResponse
from poker_tracker.services.report_service import build_report

router = APIRouter()


@router.get("/", response_model=ReportResponse)
def read_report(store: StoreDep, bridge: BridgeDep) -> ReportResponse:
    """Summary statistics and history for the sessions matching the saved filter."""
    return build_report(store.state, bridge.load_filter())


@router.get("/filter", response_model=ReportFilter)
def read_filter(bridge: BridgeDep) -> ReportFilter:
    return bridge.load_filter()


@router.put("/filter", response_model=ReportFilter)
def update_filter(report_filter: ReportFilter, bridge: BridgeDep) -> ReportFilter:
    bridge.save_filter(report_filter)
    return report_filter


@router.delete("/filter", response_model=ReportFilter)
def clear_filter(bridge: BridgeDep) -> ReportFilter:
    """Reset every criterion; the cleared filter is saved too."""
    cleared = ReportFilter()
    bridge.save_filter(cleared)
    return cleared
