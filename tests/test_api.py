"""Tests for the FastAPI routes.

Covers:
- POST /staff — create, NIC normalization, error kinds, duplicates
- GET /staff, GET /staff/{id} — list ordering, detail, 404
- PUT /staff/{id}, DELETE /staff/{id}
- POST /staff/search, GET /staff/statistics
- POST /nic/normalize, POST /nic/info
"""
from __future__ import annotations


def _create(client, payload) -> dict:
    response = client.post("/staff", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


# ---------------------------------------------------------------------------
# Staff
# ---------------------------------------------------------------------------


def test_create_staff_stores_canonical_nic(client, make_staff_payload):
    body = _create(client, make_staff_payload())

    assert isinstance(body["id"], int)
    assert body["nic_number"] == "197419202757"
    assert body["contact_number"] == "+94771234567"
    assert body["contact_number_display"] == "077 123 4567"
    assert body["email"] == "sunil.perera@example.lk"
    assert body["date_of_birth"] == "1974-07-11"
    assert body["date_of_retirement"] == "2034-07-11"
    assert body["increment_date"] == "01-03"
    assert isinstance(body["age"], int)


def test_create_staff_accepts_display_dates(client, make_staff_payload):
    body = _create(client, make_staff_payload(date_of_birth="11-07-1974", date_of_first_appointment="01-03-2001"))
    assert body["date_of_birth"] == "1974-07-11"
    assert body["date_of_first_appointment"] == "2001-03-01"


def test_create_staff_invalid_nic_reports_kind(client, make_staff_payload):
    response = client.post("/staff", json=make_staff_payload(nic_number="123456789Z"))

    assert response.status_code == 422
    assert response.json()["detail"] == {"kind": "invalid_format", "message": "Invalid NIC format"}


def test_create_staff_nic_day_out_of_range(client, make_staff_payload):
    response = client.post("/staff", json=make_staff_payload(nic_number="743672757V"))

    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "invalid_day"


def test_create_staff_invalid_phone(client, make_staff_payload):
    response = client.post("/staff", json=make_staff_payload(contact_number="12345"))

    assert response.status_code == 422
    assert "contact_number" in response.json()["detail"]


def test_create_staff_schema_violation(client, make_staff_payload):
    response = client.post("/staff", json=make_staff_payload(designation="Chief Ranger"))
    assert response.status_code == 422


def test_create_staff_duplicate_appointment_number(client, make_staff_payload):
    _create(client, make_staff_payload())
    response = client.post("/staff", json=make_staff_payload(full_name="Someone Else"))
    assert response.status_code == 409


def test_list_staff_ordered_by_name(client, make_staff_payload):
    _create(client, make_staff_payload())
    _create(
        client,
        make_staff_payload(appointment_number="ADFO/002", full_name="Kamal Silva", nic_number="861234567V"),
    )

    response = client.get("/staff")
    assert response.status_code == 200
    assert [s["full_name"] for s in response.json()] == ["Kamal Silva", "Sunil Perera"]


def test_get_staff_detail_and_404(client, make_staff_payload):
    created = _create(client, make_staff_payload())

    response = client.get(f"/staff/{created['id']}")
    assert response.status_code == 200
    assert response.json()["appointment_number"] == "DFO/001"

    missing = client.get("/staff/9999")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Staff not found"


def test_update_staff(client, make_staff_payload):
    created = _create(client, make_staff_payload())

    response = client.put(
        f"/staff/{created['id']}",
        json=make_staff_payload(full_name="Sunil K. Perera", basic_salary=190000.0),
    )
    assert response.status_code == 200
    body = response.json()
    assert body["full_name"] == "Sunil K. Perera"
    assert body["basic_salary"] == 190000.0
    assert body["nic_number"] == "197419202757"


def test_update_staff_invalid_nic(client, make_staff_payload):
    created = _create(client, make_staff_payload())

    response = client.put(f"/staff/{created['id']}", json=make_staff_payload(nic_number="12345"))
    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "invalid_length"


def test_update_missing_staff(client, make_staff_payload):
    response = client.put("/staff/9999", json=make_staff_payload())
    assert response.status_code == 404


def test_delete_staff(client, make_staff_payload):
    created = _create(client, make_staff_payload())

    response = client.delete(f"/staff/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"id": created["id"], "deleted": True}

    assert client.get(f"/staff/{created['id']}").status_code == 404
    assert client.delete(f"/staff/{created['id']}").status_code == 404


def test_search_staff(client, make_staff_payload):
    _create(client, make_staff_payload())
    _create(
        client,
        make_staff_payload(
            appointment_number="MSO/003",
            full_name="Nadeesha Fernando",
            gender="Female",
            date_of_birth="1991-07-17",
            nic_number="916980123V",
            designation="Management Service Officer",
            salary_code="A1",
        ),
    )

    by_nic = client.post("/staff/search", json={"nic_number": "916980123V"})
    assert by_nic.status_code == 200
    assert [s["full_name"] for s in by_nic.json()] == ["Nadeesha Fernando"]

    by_designation = client.post("/staff/search", json={"designation": "District Forest Officer"})
    assert [s["full_name"] for s in by_designation.json()] == ["Sunil Perera"]

    everyone = client.post("/staff/search", json={})
    assert len(everyone.json()) == 2


def test_search_staff_invalid_age_bounds(client):
    response = client.post("/staff/search", json={"age_min": 50, "age_max": 40})
    assert response.status_code == 422


def test_search_staff_age_bound_beyond_limit(client, make_staff_payload):
    _create(client, make_staff_payload())

    assert client.post("/staff/search", json={"age_max": 5000}).status_code == 422
    assert client.post("/staff/search", json={"age_min": 151}).status_code == 422

    widest = client.post("/staff/search", json={"age_min": 0, "age_max": 150})
    assert widest.status_code == 200
    assert [s["full_name"] for s in widest.json()] == ["Sunil Perera"]


def test_staff_statistics(client, make_staff_payload):
    _create(client, make_staff_payload())
    _create(
        client,
        make_staff_payload(
            appointment_number="MSO/003",
            full_name="Nadeesha Fernando",
            gender="Female",
            nic_number="916980123V",
            designation="Management Service Officer",
        ),
    )

    response = client.get("/staff/statistics")
    assert response.status_code == 200
    assert response.json() == {
        "total": 2,
        "by_designation": [
            {"designation": "District Forest Officer", "count": 1},
            {"designation": "Management Service Officer", "count": 1},
        ],
        "by_gender": [
            {"gender": "Female", "count": 1},
            {"gender": "Male", "count": 1},
        ],
    }


# ---------------------------------------------------------------------------
# NIC
# ---------------------------------------------------------------------------


def test_nic_normalize(client):
    response = client.post("/nic/normalize", json={"nic": "741922757V"})

    assert response.status_code == 200
    assert response.json() == {"canonical": "197419202757", "formatted": "1974 192 0275 7"}


def test_nic_normalize_invalid_length(client):
    response = client.post("/nic/normalize", json={"nic": "12345"})

    assert response.status_code == 422
    assert response.json()["detail"] == {"kind": "invalid_length", "message": "Invalid NIC length"}


def test_nic_info_female(client):
    response = client.post("/nic/info", json={"nic": "916980123V"})

    assert response.status_code == 200
    body = response.json()
    assert body["birth_year"] == 1991
    assert body["day_of_year"] == 198
    assert body["sex"] == "Female"
    assert body["canonical_form"] == "199169800123"
    assert body["birth_date"] == "17-07-1991"
    assert isinstance(body["age"], int)


def test_nic_info_day_without_calendar_date(client):
    response = client.post("/nic/info", json={"nic": "743662757V"})

    assert response.status_code == 200
    assert response.json()["birth_date"] is None
    assert response.json()["age"] is None


def test_nic_info_year_outside_calendar(client):
    response = client.post("/nic/info", json={"nic": "000010001234"})

    assert response.status_code == 200
    body = response.json()
    assert body["birth_year"] == 0
    assert body["birth_date"] is None
    assert body["age"] is None


def test_nic_info_invalid_marker(client):
    response = client.post("/nic/info", json={"nic": "123456789Z"})

    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "invalid_format"
