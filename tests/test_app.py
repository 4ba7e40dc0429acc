import pytest

from src.dayflow.dayflow.main import create_app


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, email, password):
    return client.post("/auth/login", json={"email": email, "password": password})


def test_login_and_me(client):
    resp = _login(client, "admin@dayflow.com", "admin123")
    assert resp.status_code == 200
    assert resp.get_json()["data"]["employeeId"] == "EMP001"
    assert "password" not in resp.get_json()["data"]

    me = client.get("/me").get_json()["data"]
    assert me["fullName"] == "Priya Sharma"

    client.post("/auth/logout")
    assert client.get("/me").status_code == 401


def test_wrong_password_is_401(client):
    resp = _login(client, "admin@dayflow.com", "nope")
    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "message": "Incorrect password"}


def test_signup_verify_login(client):
    resp = client.post(
        "/auth/signup",
        json={
            "employeeId": "EMP030",
            "email": "new@dayflow.com",
            "password": "welcome123",
            "confirmPassword": "welcome123",
            "firstName": "Neha",
            "lastName": "Joshi",
        },
    )
    assert resp.status_code == 201
    assert _login(client, "new@dayflow.com", "welcome123").status_code == 401

    assert client.post("/auth/verify", json={"email": "new@dayflow.com"}).status_code == 200
    assert _login(client, "new@dayflow.com", "welcome123").status_code == 200


def test_duplicate_signup_is_409(client):
    resp = client.post(
        "/auth/signup",
        json={
            "employeeId": "EMP002",
            "email": "other@dayflow.com",
            "password": "welcome123",
            "confirmPassword": "welcome123",
            "firstName": "A",
            "lastName": "B",
        },
    )
    assert resp.status_code == 409


def test_profile_update_refuses_email_change(client):
    _login(client, "rahul@dayflow.com", "employee123")
    assert client.patch("/me", json={"phone": "+91 1"}).get_json()["data"]["phone"] == "+91 1"
    assert client.patch("/me", json={"email": "x@dayflow.com"}).status_code == 400


def test_admin_routes_need_admin(client):
    assert client.get("/admin/employees").status_code == 401
    _login(client, "rahul@dayflow.com", "employee123")
    assert client.get("/admin/employees").status_code == 403


def test_admin_adds_and_deletes_employee(client):
    _login(client, "admin@dayflow.com", "admin123")
    resp = client.post(
        "/admin/employees",
        json={
            "employeeId": "EMP040",
            "email": "kiran@dayflow.com",
            "password": "start1234",
            "firstName": "Kiran",
            "lastName": "Das",
            "department": "Sales",
        },
    )
    assert resp.status_code == 201
    created = resp.get_json()["data"]
    assert created["isVerified"] is True

    assert client.delete(f"/admin/employees/{created['id']}").status_code == 200
    assert client.delete(f"/admin/employees/{created['id']}").status_code == 404
    assert client.delete("/admin/employees/1").status_code == 400


def test_attendance_flow(client):
    _login(client, "rahul@dayflow.com", "employee123")
    assert client.post("/attendance/check-out").status_code == 409

    assert client.post("/attendance/check-in").get_json()["data"]["employeeId"] == "EMP002"
    out = client.post("/attendance/check-out").get_json()["data"]
    assert out["checkOut"] is not None
    assert out["hours"] >= 0

    history = client.get("/attendance/history").get_json()
    assert len(history["data"]) == 1
    assert history["today"]["id"] == out["id"]


def test_admin_attendance_exports(client):
    _login(client, "rahul@dayflow.com", "employee123")
    client.post("/attendance/check-in")
    client.post("/auth/logout")

    _login(client, "admin@dayflow.com", "admin123")
    report = client.get("/admin/attendance").get_json()
    assert [r["employeeId"] for r in report["data"]] == ["EMP002"]
    assert report["counts"]["present"] == 1

    csv_resp = client.get("/admin/attendance.csv")
    assert csv_resp.mimetype == "text/csv"
    assert csv_resp.get_data(as_text=True).startswith("Employee,Employee ID,Date")

    xlsx = client.get("/admin/attendance.xlsx")
    assert xlsx.status_code == 200
    assert xlsx.data[:2] == b"PK"

    assert client.get("/admin/attendance?date=yesterday").status_code == 400


def test_leave_flow(client):
    _login(client, "rahul@dayflow.com", "employee123")
    resp = client.post(
        "/leaves",
        json={"type": "Sick Leave", "startDate": "2024-01-08", "endDate": "2024-01-08", "reason": "Fever"},
    )
    assert resp.status_code == 201
    leave_id = resp.get_json()["data"]["id"]
    assert resp.get_json()["data"]["days"] == 1

    bad = client.post(
        "/leaves",
        json={"startDate": "2024-01-10", "endDate": "2024-01-08", "reason": "x"},
    )
    assert bad.status_code == 400
    client.post("/auth/logout")

    _login(client, "admin@dayflow.com", "admin123")
    listing = client.get("/admin/leaves?status=pending").get_json()
    assert listing["data"][0]["employeeName"] == "Rahul Kumar"

    assert client.post(f"/admin/leaves/{leave_id}/approve").get_json()["data"]["status"] == "approved"
    assert client.post(f"/admin/leaves/{leave_id}/reject").status_code == 409
    assert client.post("/admin/leaves/leave_nope/approve").status_code == 404


def test_payroll_flow(client):
    _login(client, "rahul@dayflow.com", "employee123")
    mine = client.get("/payroll").get_json()["data"]
    assert [r["month"] for r in mine] == ["2024-01"]

    slip = client.get("/payroll/2024-01/payslip.txt")
    assert slip.status_code == 200
    assert "Net Salary: ₹88,000" in slip.get_data(as_text=True)
    assert "payslip_2024-01_EMP002.txt" in slip.headers["Content-Disposition"]
    assert client.get("/payroll/2023-12/payslip.txt").status_code == 404
    client.post("/auth/logout")

    _login(client, "admin@dayflow.com", "admin123")
    admin_view = client.get("/admin/payroll?month=2024-01").get_json()
    assert admin_view["summary"]["total_net"] == 555000

    assert client.post("/admin/payroll/2024-01/process").get_json()["data"] == {"processed": 1}
    assert client.post("/admin/payroll/2024-01/process").get_json()["data"] == {"processed": 0}

    created = client.post(
        "/admin/payroll",
        json={"employeeId": "EMP002", "month": "2024-02", "baseSalary": 85000, "allowances": 15000, "deductions": 12000},
    )
    assert created.status_code == 201
    assert created.get_json()["data"]["netSalary"] == 88000
    duplicate = client.post("/admin/payroll", json={"employeeId": "EMP002", "month": "2024-02", "baseSalary": 1})
    assert duplicate.status_code == 409

    csv_text = client.get("/admin/payroll.csv?month=2024-02").get_data(as_text=True)
    assert csv_text.splitlines()[1].startswith("EMP002,Rahul Kumar,Engineering")


def test_profile_update_rejects_non_text_values(client):
    _login(client, "rahul@dayflow.com", "employee123")
    assert client.patch("/me", json={"department": 5}).status_code == 400
    assert client.patch("/me", json={"firstName": 5}).status_code == 400
    assert client.get("/me").get_json()["data"]["department"] == "Engineering"
    client.post("/auth/logout")

    _login(client, "admin@dayflow.com", "admin123")
    assert client.get("/admin/employees?search=x").status_code == 200
    batch = client.post("/admin/payroll", json={"department": "Sales", "month": "2024-03", "baseSalary": 1000})
    assert batch.status_code == 201


def test_non_finite_salary_is_400(client):
    _login(client, "admin@dayflow.com", "admin123")
    for value in ("nan", "inf", "-inf"):
        resp = client.post("/admin/payroll", json={"employeeId": "EMP002", "month": "2024-03", "baseSalary": value})
        assert resp.status_code == 400
    client.post("/auth/logout")

    _login(client, "rahul@dayflow.com", "employee123")
    assert client.get("/payroll/2024-03/payslip.txt").status_code == 404


def test_history_limit_must_be_positive(client):
    _login(client, "rahul@dayflow.com", "employee123")
    client.post("/attendance/check-in")
    assert client.get("/attendance/history?limit=0").status_code == 400
    assert client.get("/attendance/history?limit=-1").status_code == 400
    assert len(client.get("/attendance/history?limit=1").get_json()["data"]) == 1
