import pytest
from fastapi import status

def test_register_employee(client):
    """Registration echoes the record with the full allowance."""
    response = client.post("/employees", json={
        "name": "Asha Rao",
        "email": "asha@example.com",
        "department": "Engineering",
        "joiningDate": "2024-01-15",
    })
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data == {
        "id": 1,
        "name": "Asha Rao",
        "email": "asha@example.com",
        "department": "Engineering",
        "joiningDate": "2024-01-15",
        "leaveBalance": 20,
    }

def test_register_assigns_increasing_ids(create_employee):
    ids = [create_employee()["id"] for _ in range(3)]
    assert ids == [1, 2, 3]

def test_register_missing_field(client):
    response = client.post("/employees", json={"name": "A", "email": "a@example.com", "department": "X"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    body = response.json()
    assert body["error"] == "All fields are required."
    assert body["code"] == "VALIDATION_ERROR"

def test_register_duplicate_email(client, create_employee):
    create_employee(email="dup@example.com")
    response = client.post("/employees", json={
        "name": "Other",
        "email": "dup@example.com",
        "department": "Sales",
        "joiningDate": "2024-02-01",
    })
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["code"] == "CONFLICT"
    assert len(client.get("/employees").json()) == 1

def test_register_bad_joining_date(client):
    response = client.post("/employees", json={
        "name": "A",
        "email": "a@example.com",
        "department": "X",
        "joiningDate": "someday",
    })
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "Invalid joiningDate format."

def test_register_wrong_type_is_bad_request(client):
    response = client.post("/employees", json={
        "name": 123,
        "email": "a@example.com",
        "department": "X",
        "joiningDate": "2024-01-01",
    })
    assert response.status_code == status.HTTP_400_BAD_REQUEST

def test_get_employee(client, create_employee):
    created = create_employee()
    response = client.get(f"/employees/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created

def test_get_unknown_employee(client):
    response = client.get("/employees/404")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["error"] == "Employee not found."

def test_get_balance(client, create_employee):
    employee = create_employee()
    response = client.get(f"/employees/{employee['id']}/balance")
    assert response.status_code == 200
    assert response.json() == {"employeeId": employee["id"], "leaveBalance": 20}

def test_get_balance_unknown_employee(client):
    response = client.get("/employees/12/balance")
    assert response.status_code == status.HTTP_404_NOT_FOUND

def test_employee_leave_balance_tracks_approvals(client, create_employee):
    employee = create_employee()
    leave = client.post("/leaves/apply", json={
        "employeeId": employee["id"], "startDate": "2024-03-04", "endDate": "2024-03-08"
    }).json()
    client.put(f"/leaves/{leave['id']}/status", json={"status": "Approved"})
    assert client.get(f"/employees/{employee['id']}").json()["leaveBalance"] == 15

def test_list_employee_leaves(client, create_employee):
    employee = create_employee()
    for start, end in [("2024-03-04", "2024-03-05"), ("2024-04-01", "2024-04-01")]:
        client.post("/leaves/apply", json={"employeeId": employee["id"], "startDate": start, "endDate": end})
    client.put("/leaves/1/status", json={"status": "Rejected"})

    all_leaves = client.get(f"/employees/{employee['id']}/leaves").json()
    assert [l["id"] for l in all_leaves] == [1, 2]

    pending = client.get(f"/employees/{employee['id']}/leaves", params={"status": "Pending"}).json()
    assert [l["id"] for l in pending] == [2]

def test_list_employee_leaves_bad_status(client, create_employee):
    employee = create_employee()
    response = client.get(f"/employees/{employee['id']}/leaves", params={"status": "Nope"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST

def test_state_resets_between_app_lifetimes(client, create_employee):
    assert create_employee()["id"] == 1

def test_register_email_differing_in_case(client, create_employee):
    create_employee(email="ravi@example.com")
    response = client.post("/employees", json={
        "name": "Ravi Two",
        "email": "Ravi@example.com",
        "department": "Sales",
        "joiningDate": "2024-02-01",
    })
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["id"] == 2
