from __future__ import annotations

from datetime import date
from typing import Generic, TypeVar

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from staffdesk.db import models
from staffdesk.normalization.date_normalizer import shift_years
from staffdesk.normalization.nic_codec import NICError, normalize_nic
from staffdesk.staff.schemas import DesignationCount, GenderCount, StaffSearch, StaffStatistics

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def create(self, **kwargs) -> ModelT:
        entity = self.model(**kwargs)
        self.db.add(entity)
        self.db.flush()
        return entity

    def get(self, entity_id: int) -> ModelT | None:
        return self.db.get(self.model, entity_id)

    def list(self, limit: int = 100, offset: int = 0) -> list[ModelT]:
        stmt = select(self.model).offset(offset).limit(limit)
        return self.db.execute(stmt).scalars().all()

    def update(self, entity: ModelT, **kwargs) -> ModelT:
        for key, value in kwargs.items():
            setattr(entity, key, value)
        self.db.flush()
        return entity

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.flush()


class StaffRepository(BaseRepository[models.Staff]):
    model = models.Staff

    def list(self, limit: int | None = None, offset: int = 0) -> list[models.Staff]:
        stmt = select(models.Staff).order_by(models.Staff.full_name, models.Staff.id).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return self.db.execute(stmt).scalars().all()

    def get_by_appointment_number(self, appointment_number: str) -> models.Staff | None:
        stmt = select(models.Staff).where(models.Staff.appointment_number == appointment_number)
        return self.db.execute(stmt).scalars().first()

    def search(self, criteria: StaffSearch, *, today: date | None = None) -> list[models.Staff]:
        """Return staff matching every non-empty field of *criteria*.

        Age bounds are whole years on *today* (defaults to the current
        date) and are applied as birth-date bounds.  A ``nic_number`` that
        is a complete NIC in either format also matches its canonical form.
        """
        staff = models.Staff
        stmt = select(staff)

        if criteria.query:
            pattern = f"%{criteria.query}%"
            stmt = stmt.where(or_(staff.full_name.ilike(pattern), staff.appointment_number.ilike(pattern)))

        for field in ("designation", "gender", "marital_status", "salary_code"):
            value = getattr(criteria, field)
            if value:
                stmt = stmt.where(getattr(staff, field) == value)

        if criteria.nic_number:
            fragment = criteria.nic_number.replace(" ", "").upper()
            try:
                canonical = normalize_nic(criteria.nic_number)
            except NICError:
                stmt = stmt.where(staff.nic_number.like(f"%{fragment}%"))
            else:
                stmt = stmt.where(or_(staff.nic_number == canonical, staff.nic_number.like(f"%{fragment}%")))

        reference = today or date.today()
        if criteria.age_min is not None:
            stmt = stmt.where(staff.date_of_birth <= shift_years(reference, -criteria.age_min))
        if criteria.age_max is not None:
            stmt = stmt.where(staff.date_of_birth > shift_years(reference, -(criteria.age_max + 1)))

        stmt = stmt.order_by(staff.full_name, staff.id)
        return self.db.execute(stmt).scalars().all()

    def statistics(self) -> StaffStatistics:
        staff = models.Staff
        total = self.db.execute(select(func.count()).select_from(staff)).scalar_one()

        designation_rows = self.db.execute(
            select(staff.designation, func.count()).group_by(staff.designation).order_by(staff.designation)
        ).all()
        gender_rows = self.db.execute(
            select(staff.gender, func.count()).group_by(staff.gender).order_by(staff.gender)
        ).all()

        return StaffStatistics(
            total=total,
            by_designation=[DesignationCount(designation=name, count=count) for name, count in designation_rows],
            by_gender=[GenderCount(gender=name, count=count) for name, count in gender_rows],
        )
