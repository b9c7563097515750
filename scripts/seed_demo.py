#!/usr/bin/env python3
"""Seed demo data: 8 staff records across designations and both NIC formats.

Usage:
    python scripts/seed_demo.py          # uses DATABASE_URL from env / .env
    DATABASE_URL=... python scripts/seed_demo.py
"""
from __future__ import annotations

import sys

from sqlalchemy import create_engine
from sqlalchemy.orm import Session

# Ensure project root is on sys.path
sys.path.insert(0, ".")

from staffdesk.core.settings import get_settings
from staffdesk.db.base import Base
from staffdesk.db import models  # noqa: F401
from staffdesk.staff.schemas import StaffIn
from staffdesk.staff.service import DuplicateAppointmentError, StaffService


def seed(session: Session) -> None:
    """Insert demo staff records; records already present are skipped."""

    service = StaffService(session)

    demo_staff = [
        # (appointment no, name, gender, dob, nic, designation, salary code, basic salary)
        ("DFO/001", "Sunil Perera", "Male", "11-07-1974", "741922757V", "District Forest Officer", "S1", 185000.0),
        ("ADFO/002", "Kamal Silva", "Male", "03-05-1986", "861234567V", "Asst.District Forest Officer", "S2", 142500.0),
        ("MSO/003", "Nadeesha Fernando", "Female", "17-07-1991", "916980123V", "Management Service Officer", "A1", 68900.0),
        ("DO/004", "Ishara Jayasinghe", "Female", "21-03-1993", "199358001234", "Development Officer", "A2", 61250.0),
        ("RFO/005", "Ruwan Bandara", "Male", "02-02-1980", "800330456V", "Range Forest officer", "D1", 74300.0),
        ("BFO/006", "Priyanka Herath", "Female", "15-09-1988", "887590112V", "Beat forest officer", "D2", 52800.0),
        ("EO/007", "Chaminda Rathnayake", "Male", "30-12-1977", "773645678X", "extension officer", "D3", 48600.0),
        ("GL/008", "Saman Kumara", "Male", "01-01-2000", "200000101234", "garden labour", "S3", 38250.0),
    ]

    created = 0
    for number, name, gender, dob, nic, designation, salary_code, basic in demo_staff:
        payload = StaffIn(
            appointment_number=number,
            full_name=name,
            gender=gender,
            date_of_birth=dob,
            nic_number=nic,
            address_line1="District Forest Office",
            address_line2="Kandy Road",
            address_line3="Kurunegala",
            contact_number="0771234567",
            designation=designation,
            date_of_first_appointment="01-01-2015",
            increment_date="01-01",
            salary_code=salary_code,
            basic_salary=basic,
            increment_amount=round(basic * 0.03, 2),
        )
        try:
            service.create(payload)
        except DuplicateAppointmentError:
            continue
        created += 1

    session.commit()
    print(f"Seeded {created} staff records.")


def main() -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    Base.metadata.create_all(engine)

    with Session(engine) as session:
        seed(session)


if __name__ == "__main__":
    main()
