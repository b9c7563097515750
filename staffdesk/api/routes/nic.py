"""NIC conversion routes.

POST /nic/normalize — canonical 12-digit form of a legacy or canonical NIC
POST /nic/info      — birth year, day of year, sex, birth date and age

Used by the staff form to pre-fill gender and date of birth from the NIC.
The raw value is passed to the codec untrimmed.
"""
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from staffdesk.api.errors import nic_error_detail
from staffdesk.normalization.date_normalizer import format_display_date
from staffdesk.normalization.nic_codec import NICError, derive_nic_info, format_nic, normalize_nic

router = APIRouter(prefix="/nic", tags=["nic"])


class NICBody(BaseModel):
    nic: str


@router.post("/normalize", summary="Convert a NIC to the 12-digit format")
def normalize(body: NICBody):
    try:
        canonical = normalize_nic(body.nic)
    except NICError as exc:
        raise HTTPException(status_code=422, detail=nic_error_detail(exc)) from exc
    return {"canonical": canonical, "formatted": format_nic(canonical)}


@router.post("/info", summary="Decode birth year, day of year and sex from a NIC")
def info(body: NICBody):
    try:
        nic_info = derive_nic_info(body.nic)
    except NICError as exc:
        raise HTTPException(status_code=422, detail=nic_error_detail(exc)) from exc

    birth_date = nic_info.birth_date()
    return {
        "birth_year": nic_info.birth_year,
        "day_of_year": nic_info.day_of_year,
        "sex": nic_info.sex.value,
        "canonical_form": nic_info.canonical_form,
        "formatted": format_nic(nic_info.canonical_form),
        "birth_date": format_display_date(birth_date) if birth_date else None,
        "age": nic_info.age_on(date.today()),
    }
