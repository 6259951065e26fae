"""Translation of action failures into HTTP errors."""

from typing import TypeVar

from fastapi import HTTPException, status

from asset_tracker.domain.entities import ActionResult
from asset_tracker.domain.exceptions import InventoryError

T = TypeVar("T")

ERROR_STATUS_CODES: dict[str, int] = {
    "validation_error": 422,
    "not_found": status.HTTP_404_NOT_FOUND,
    "invalid_target": 422,
    "conflict": status.HTTP_409_CONFLICT,
    "service_unavailable": status.HTTP_503_SERVICE_UNAVAILABLE,
    "failed": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _http_error(error_code: str | None, message: str | None) -> HTTPException:
    status_code = ERROR_STATUS_CODES.get(
        error_code or "failed", status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    return HTTPException(
        status_code=status_code,
        detail={"message": message or "Request failed", "error_code": error_code or "failed"},
    )


def unwrap(result: ActionResult[T]) -> T:
    """Return the payload of a successful result or raise the matching HTTPException."""
    if not result.success:
        raise _http_error(result.error_code, result.message)
    return result.data


def http_error_for(exc: InventoryError) -> HTTPException:
    return _http_error(exc.error_code, exc.message)
