"""Translation of domain exceptions into HTTP errors.

NIC failures keep their kind so clients can branch on it::

    {"detail": {"kind": "invalid_day", "message": "Invalid day in NIC"}}
"""
from __future__ import annotations

from fastapi import HTTPException

from staffdesk.normalization.nic_codec import NICError
from staffdesk.staff.service import DuplicateAppointmentError, StaffNotFoundError, StaffValidationError


def nic_error_detail(exc: NICError) -> dict[str, str]:
    return {"kind": exc.kind.value, "message": str(exc)}


def to_http_exception(exc: Exception) -> HTTPException:
    if isinstance(exc, NICError):
        return HTTPException(status_code=422, detail=nic_error_detail(exc))
    if isinstance(exc, StaffNotFoundError):
        return HTTPException(status_code=404, detail="Staff not found")
    if isinstance(exc, DuplicateAppointmentError):
        return HTTPException(status_code=409, detail=str(exc))
    if isinstance(exc, StaffValidationError):
        return HTTPException(status_code=422, detail=str(exc))
    raise TypeError(f"No HTTP mapping for {type(exc).__name__}")
