import pytest
import os

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["ANNUAL_LEAVE_ALLOWANCE"] = "20"
os.environ["API_PREFIX"] = ""

from leavedesk.main import app
from leavedesk.store import LeaveStore
from leavedesk.services.employee_registry import EmployeeRegistry
from leavedesk.services.leave_ledger import LeaveLedger
from fastapi.testclient import TestClient

ALLOWANCE = 20

@pytest.fixture(scope="function")
def store():
    """A fresh, empty store for each test."""
    return LeaveStore()

@pytest.fixture(scope="function")
def registry(store):
    return EmployeeRegistry(store)

@pytest.fixture(scope="function")
def ledger(store, registry):
    return LeaveLedger(store, registry=registry, allowance=ALLOWANCE)

@pytest.fixture(scope="function")
def employee(registry):
    """An employee who joined at the start of 2024."""
    return registry.register(
        name="Asha Rao",
        email="asha@example.com",
        department="Engineering",
        joining_date="2024-01-01",
    )

@pytest.fixture(scope="function")
def client():
    """TestClient running the app lifespan, so every test starts with an empty store."""
    with TestClient(app) as c:
        yield c

@pytest.fixture(scope="function")
def create_employee(client):
    """Helper fixture to register employees over HTTP."""
    counter = {"n": 0}

    def _create_employee(**overrides):
        counter["n"] += 1
        payload = {
            "name": f"Employee {counter['n']}",
            "email": f"employee{counter['n']}@example.com",
            "department": "Operations",
            "joiningDate": "2024-01-01",
        }
        payload.update(overrides)
        response = client.post("/employees", json=payload)
        assert response.status_code == 200, response.text
        return response.json()
    return _create_employee
