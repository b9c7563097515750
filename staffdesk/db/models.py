from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Float, Index, Integer, String, Text, func, text as sql_text
from sqlalchemy.orm import Mapped, mapped_column

from staffdesk.db.base import Base


class Staff(Base):
    __tablename__ = "staff"
    __table_args__ = (
        Index("idx_staff_name", "full_name"),
        Index("idx_staff_nic", "nic_number"),
        Index("idx_staff_designation", "designation"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Identification & personal details
    appointment_number: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    gender: Mapped[str] = mapped_column(String(16), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    nic_number: Mapped[str] = mapped_column(String(12), nullable=False)
    marital_status: Mapped[str] = mapped_column(
        String(16), nullable=False, default="Single", server_default=sql_text("'Single'")
    )
    address_line1: Mapped[str] = mapped_column(Text, nullable=False)
    address_line2: Mapped[str | None] = mapped_column(Text, nullable=True)
    address_line3: Mapped[str | None] = mapped_column(Text, nullable=True)
    contact_number: Mapped[str] = mapped_column(String(32), nullable=False)
    email: Mapped[str | None] = mapped_column(String(254), nullable=True)

    # Employment details
    designation: Mapped[str] = mapped_column(String(64), nullable=False)
    date_of_first_appointment: Mapped[date] = mapped_column(Date, nullable=False)
    date_of_retirement: Mapped[date] = mapped_column(Date, nullable=False)
    increment_date: Mapped[str] = mapped_column(String(5), nullable=False)

    # Salary
    salary_code: Mapped[str] = mapped_column(String(8), nullable=False)
    basic_salary: Mapped[float] = mapped_column(Float, nullable=False, default=0.0, server_default=sql_text("0"))
    increment_amount: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0, server_default=sql_text("0")
    )

    image_path: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )
