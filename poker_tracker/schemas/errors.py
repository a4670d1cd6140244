"""Error response schemas for API documentation."""

from typing import Any

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Standard error detail structure."""

    code: str
    message: str
    details: dict[
        str, str | int | float | bool | list[str] | list[dict[str, str | int]] | None
    ] = {}


class ErrorResponse(BaseModel):
    """Standard error response wrapper."""

    error: ErrorDetail


# Shared ``responses=`` mapping for routes that can refuse or miss
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
}
