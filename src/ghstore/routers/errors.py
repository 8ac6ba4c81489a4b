"""Mapping of service failures onto HTTP errors."""

from fastapi import HTTPException

from ghstore.exceptions import AppBaseError, HostResponseError, OperationalError


def to_http_exception(error: BaseException | None, message: str | None = None) -> HTTPException:
    """
    Translate a service error into an HTTPException.

    A host 404 stays a 404; other host and transport failures become 502
    because the failure is upstream. Validation errors keep their own status.
    """
    detail = message or str(error)
    if isinstance(error, HostResponseError):
        if error.host_status == 404:
            return HTTPException(status_code=404, detail=detail)
        return HTTPException(status_code=502, detail=detail)
    if isinstance(error, OperationalError):
        return HTTPException(status_code=502, detail=detail)
    if isinstance(error, AppBaseError):
        return HTTPException(status_code=error.status_code, detail=detail)
    return HTTPException(status_code=500, detail=detail)
