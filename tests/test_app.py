from __future__ import annotations

from datetime import date

from hr_console.container import build_container
from hr_console.main import create_app
from hr_console.store.seed import build_demo_state


def _client():
    container = build_container(initial_state=build_demo_state(today=date(2024, 8, 20)))
    app = create_app(container=container, settings_module="hr_console.config.testing")
    return app.test_client(), container


def test_list_employees_with_filters():
    client, _ = _client()

    resp = client.get("/api/employees?department=Engineering&search=lee")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert [e["employee_id"] for e in body["employees"]] == [105]
    assert body["employees"][0]["department"] == "Engineering"


def test_add_employee_and_validation_error():
    client, container = _client()

    resp = client.post(
        "/api/employees",
        json={"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com", "department": "Finance", "salary": 5},
    )
    assert resp.status_code == 201
    assert resp.get_json()["employee"]["employee_id"] == 106

    resp = client.post("/api/employees", json={"first_name": "Bob", "last_name": "X", "email": "b@x", "department": "Legal"})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert len(container.store.state.employees) == 6


def test_delete_employee_cascades():
    client, container = _client()

    resp = client.delete("/api/employees/101")

    assert resp.status_code == 200
    state = container.store.state
    assert all(r.employee_id != 101 for r in state.leave_requests)
    assert all(r.employee_id != 101 for r in state.attendance_records)
    assert client.get("/api/employees/101").status_code == 404


def test_submit_leave_ignores_status_in_body():
    client, _ = _client()

    resp = client.post(
        "/api/leave",
        json={"employee_id": "102", "start_date": "2024-09-01", "end_date": "2024-09-03", "leave_type": "Sick", "status": "Approved"},
    )

    assert resp.status_code == 201
    leave = resp.get_json()["leave_request"]
    assert leave["status"] == "Pending"
    assert leave["request_id"] == 6
    assert leave["start_date"] == "2024-09-01"


def test_submit_leave_reports_validation_message():
    client, container = _client()
    before = container.store.state

    resp = client.post("/api/leave", json={"employee_id": 101, "start_date": "2024-08-10", "end_date": "2024-08-05"})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "End date cannot be before start date."
    assert container.store.state is before

    resp = client.post("/api/leave", json={"employee_id": "", "start_date": "2024-08-01", "end_date": "2024-08-05"})
    assert resp.get_json()["message"] == "Please select an employee."


def test_leave_status_update_and_filter():
    client, _ = _client()

    assert client.post("/api/leave/3/status", json={"status": "Approved"}).status_code == 200

    body = client.get("/api/leave?status=Approved&search=chris").get_json()
    assert [r["request_id"] for r in body["leave_requests"]] == [3]


def test_attendance_check_in_out_roundtrip():
    client, _ = _client()

    resp = client.post("/api/attendance/102/check-in")
    assert resp.status_code == 200
    assert resp.get_json()["clock_status"] == "Checked In"

    resp = client.post("/api/attendance/102/check-out")
    assert resp.get_json()["clock_status"] == "Checked Out"

    log = client.get("/api/attendance/102/log").get_json()["records"]
    assert len(log) == 2


def test_attendance_roster_and_unknown_employee():
    client, _ = _client()

    roster = client.get("/api/attendance?search=emily").get_json()["roster"]
    assert roster == [{"employee": roster[0]["employee"], "status": "Checked In"}]
    assert client.post("/api/attendance/999/check-in").status_code == 404


def test_performance_review_score_is_recomputed():
    client, _ = _client()

    resp = client.post(
        "/api/performance",
        json={
            "employee_id": 103,
            "reviewer_id": 101,
            "review_date": "2024-08-01",
            "ratings": {"quality": 4, "communication": 3, "punctuality": 5, "teamwork": 4},
            "overall_score": 1,
        },
    )

    assert resp.status_code == 201
    assert resp.get_json()["review"]["overall_score"] == 4.0


def test_payroll_filter_and_payslip():
    client, _ = _client()

    body = client.get("/api/payroll?search=jones").get_json()
    assert [r["employee_id"] for r in body["payroll_records"]] == [103]

    slip = client.get("/api/payroll/3/payslip").get_json()["payslip"]
    assert slip["employee"]["first_name"] == "Emily"
    assert client.get("/api/payroll/42/payslip").status_code == 404


def test_non_text_fields_are_rejected_with_400():
    client, container = _client()
    before = container.store.state

    resp = client.post(
        "/api/employees",
        json={"first_name": 7, "last_name": "X", "email": "x@example.com", "department": "Sales"},
    )
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "First name must be text"

    resp = client.post("/api/leave", json={"employee_id": 101, "start_date": 20240805, "end_date": "2024-08-07"})
    assert resp.status_code == 400
    assert "Start date" in resp.get_json()["message"]

    assert container.store.state is before


def test_non_finite_salary_is_rejected():
    client, container = _client()

    resp = client.post(
        "/api/employees",
        json={"first_name": "Ada", "last_name": "L", "email": "a@example.com", "department": "Sales", "salary": "nan"},
    )

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Salary must be a number"
    assert len(container.store.state.employees) == 5


def test_leave_status_update_unexpected_error_returns_500(monkeypatch):
    client, container = _client()

    def boom(request_id, status):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr(container.leave_service, "update_status", boom)

    resp = client.post("/api/leave/1/status", json={"status": "Approved"})

    assert resp.status_code == 500
    assert resp.get_json()["success"] is False


def test_get_review_by_id():
    client, _ = _client()

    body = client.get("/api/performance/1").get_json()
    assert body["review"]["employee_id"] == 105
    assert body["review"]["ratings"]["punctuality"] == 5
    assert client.get("/api/performance/99").status_code == 404
