"""Staff record routes.

GET    /staff              — list all staff, ordered by name
POST   /staff              — add a staff record
GET    /staff/statistics   — totals grouped by designation and gender
POST   /staff/search       — filter by name, designation, age range, NIC ...
GET    /staff/{id}         — staff record detail
PUT    /staff/{id}         — replace a staff record
DELETE /staff/{id}         — delete a staff record

NIC numbers are passed to the service exactly as entered.  A rejected NIC
answers 422 with the failure kind in ``detail.kind``.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from staffdesk.api.deps import get_staff_service
from staffdesk.api.errors import to_http_exception
from staffdesk.db.models import Staff
from staffdesk.normalization.nic_codec import NICError
from staffdesk.normalization.phone_normalizer import format_phone_display
from staffdesk.staff.schemas import StaffIn, StaffSearch
from staffdesk.staff.service import (
    DuplicateAppointmentError,
    StaffNotFoundError,
    StaffService,
    StaffValidationError,
)

router = APIRouter(prefix="/staff", tags=["staff"])

_DOMAIN_ERRORS = (NICError, StaffNotFoundError, DuplicateAppointmentError, StaffValidationError)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.get("", summary="List all staff")
def list_staff(service: StaffService = Depends(get_staff_service)):
    return [_staff_dict(s, service) for s in service.list_all()]


@router.post("", status_code=201, summary="Add a staff record")
def add_staff(body: StaffIn, service: StaffService = Depends(get_staff_service)):
    try:
        staff = service.create(body)
    except _DOMAIN_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return _staff_dict(staff, service)


@router.get("/statistics", summary="Staff counts by designation and gender")
def get_statistics(service: StaffService = Depends(get_staff_service)):
    return service.statistics().model_dump()


@router.post("/search", summary="Search staff records")
def search_staff(body: StaffSearch, service: StaffService = Depends(get_staff_service)):
    return [_staff_dict(s, service) for s in service.search(body)]


@router.get("/{staff_id}", summary="Get staff record detail")
def get_staff(staff_id: int, service: StaffService = Depends(get_staff_service)):
    try:
        staff = service.get(staff_id)
    except StaffNotFoundError as exc:
        raise to_http_exception(exc) from exc
    return _staff_dict(staff, service)


@router.put("/{staff_id}", summary="Update a staff record")
def update_staff(staff_id: int, body: StaffIn, service: StaffService = Depends(get_staff_service)):
    try:
        staff = service.update(staff_id, body)
    except _DOMAIN_ERRORS as exc:
        raise to_http_exception(exc) from exc
    return _staff_dict(staff, service)


@router.delete("/{staff_id}", summary="Delete a staff record")
def delete_staff(staff_id: int, service: StaffService = Depends(get_staff_service)):
    try:
        service.delete(staff_id)
    except StaffNotFoundError as exc:
        raise to_http_exception(exc) from exc
    return {"id": staff_id, "deleted": True}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _staff_dict(s: Staff, service: StaffService) -> dict:
    return {
        "id": s.id,
        "appointment_number": s.appointment_number,
        "full_name": s.full_name,
        "gender": s.gender,
        "date_of_birth": s.date_of_birth.isoformat(),
        "age": service.age_of(s),
        "nic_number": s.nic_number,
        "marital_status": s.marital_status,
        "address_line1": s.address_line1,
        "address_line2": s.address_line2,
        "address_line3": s.address_line3,
        "contact_number": s.contact_number,
        "contact_number_display": format_phone_display(s.contact_number),
        "email": s.email,
        "designation": s.designation,
        "date_of_first_appointment": s.date_of_first_appointment.isoformat(),
        "date_of_retirement": s.date_of_retirement.isoformat(),
        "increment_date": s.increment_date,
        "salary_code": s.salary_code,
        "basic_salary": s.basic_salary,
        "increment_amount": s.increment_amount,
        "image_path": s.image_path,
        "created_at": s.created_at.isoformat() if s.created_at else None,
        "updated_at": s.updated_at.isoformat() if s.updated_at else None,
    }
