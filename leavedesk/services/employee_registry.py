from typing import Any, List, Optional

from leavedesk.core.exceptions import ConflictError, NotFoundError, ValidationError
from leavedesk.core.validation import parse_calendar_date, require_fields
from leavedesk.models import Employee
from leavedesk.services.base import BaseService


class EmployeeRegistry(BaseService):
    """
    Issues employee identities and answers lookups.
    Employees are immutable once registered and ids are never reused.
    """

    def register(
        self,
        name: Any,
        email: Any,
        department: Any,
        joining_date: Any
    ) -> Employee:
        require_fields(
            "All fields are required.",
            name=name,
            email=email,
            department=department,
            joiningDate=joining_date,
        )

        email = str(email).strip()
        with self.store.lock:
            if self._email_taken(email):
                raise ConflictError("Email already exists.", details={"email": email})

            joining = parse_calendar_date(joining_date)
            if joining is None:
                raise ValidationError("Invalid joiningDate format.")

            employee = Employee(
                id=self.store.next_employee_id(),
                name=str(name).strip(),
                email=email,
                department=str(department).strip(),
                joining_date=joining,
            )
            self.store.employees[employee.id] = employee
            return employee

    def find(self, employee_id: int) -> Optional[Employee]:
        with self.store.lock:
            return self.store.employees.get(employee_id)

    def get(self, employee_id: int) -> Employee:
        employee = self.find(employee_id)
        if employee is None:
            raise NotFoundError("Employee not found.")
        return employee

    def list(self) -> List[Employee]:
        with self.store.lock:
            return sorted(self.store.employees.values(), key=lambda e: e.id)

    def _email_taken(self, email: str) -> bool:
        return any(e.email == email for e in self.store.employees.values())
