"""Integration tests for the /attendance endpoints."""
import pytest


@pytest.fixture
def emp_id(make_employee):
    return make_employee(name="Ada", salary=3000.0)


def _set(client, emp_id, day, status):
    return client.put("/attendance", json={"employee_id": emp_id, "date": day, "status": status})


def test_set_attendance_upserts_one_row_per_day(client, emp_id):
    first = _set(client, emp_id, "2024-03-05", "sick").json()
    second = _set(client, emp_id, "2024-03-05", "vacation").json()
    assert first["id"] == second["id"]
    assert second["status"] == "vacation"


def test_set_attendance_unknown_employee_returns_404(client):
    assert _set(client, 99999, "2024-03-05", "sick").status_code == 404


def test_set_attendance_bad_status_returns_422(client, emp_id):
    assert _set(client, emp_id, "2024-03-05", "holiday").status_code == 422


def test_delete_attendance_by_id(client, emp_id):
    record = _set(client, emp_id, "2024-03-05", "sick").json()
    assert client.delete(f"/attendance/{record['id']}").status_code == 204
    assert client.delete(f"/attendance/{record['id']}").status_code == 404


def test_delete_attendance_by_employee_and_day(client, emp_id):
    _set(client, emp_id, "2024-03-05", "sick")
    assert client.delete(f"/attendance/employees/{emp_id}/2024-03-05").status_code == 204
    assert client.delete(f"/attendance/employees/{emp_id}/2024-03-05").status_code == 404


def test_daily_roster_lists_every_employee(client, emp_id, make_employee):
    other = make_employee(name="Budi")
    _set(client, emp_id, "2024-03-05", "sick")
    body = client.get("/attendance/daily/2024-03-05").json()
    assert body["date"] == "2024-03-05"
    statuses = {item["employee_id"]: item["status"] for item in body["items"]}
    assert statuses == {emp_id: "sick", other: None}


def test_bulk_set_with_null_status_clears_row(client, emp_id, make_employee):
    other = make_employee(name="Budi")
    _set(client, emp_id, "2024-03-05", "sick")
    resp = client.put("/attendance/daily/2024-03-05", json={"entries": [
        {"employee_id": emp_id, "status": None},
        {"employee_id": other, "status": "vacation"},
    ]})
    assert resp.status_code == 200
    statuses = {item["employee_id"]: item["status"] for item in resp.json()["items"]}
    assert statuses == {emp_id: None, other: "vacation"}


def test_stored_row_report_counts_only_stored_rows(client, emp_id):
    _set(client, emp_id, "2024-03-05", "sick")
    _set(client, emp_id, "2024-03-08", "worked")
    body = client.get(f"/attendance/reports/{emp_id}/2024/3").json()
    assert body == {"worked": 1, "sick": 1, "vacation": 0, "total": 2}


def test_smart_report_for_past_month(client, emp_id):
    _set(client, emp_id, "2024-03-05", "sick")
    _set(client, emp_id, "2024-03-06", "sick")
    _set(client, emp_id, "2024-03-20", "vacation")
    resp = client.get(f"/attendance/smart-reports/{emp_id}/2024/3", params={"today": "2024-06-01"})
    assert resp.status_code == 200
    assert resp.json() == {"workdays": 21, "worked": 18, "sick": 2, "vacation": 1}


def test_smart_report_for_future_month_is_zero(client, emp_id):
    resp = client.get(f"/attendance/smart-reports/{emp_id}/2024/3", params={"today": "2024-02-01"})
    assert resp.json() == {"workdays": 0, "worked": 0, "sick": 0, "vacation": 0}


def test_smart_report_rejects_month_13(client, emp_id):
    assert client.get(f"/attendance/smart-reports/{emp_id}/2024/13").status_code == 422


def test_vacation_balance(client, emp_id):
    _set(client, emp_id, "2024-03-20", "vacation")
    _set(client, emp_id, "2024-07-01", "vacation")
    body = client.get(
        f"/attendance/vacation-balance/{emp_id}/2024", params={"today": "2024-12-31"},
    ).json()
    assert body == {"allowance": 14, "used": 2, "remaining": 12, "year": 2024}


def test_smart_report_rejects_year_zero(client, emp_id):
    assert client.get(f"/attendance/smart-reports/{emp_id}/0/1").status_code == 422
