from .employee import Employee
from .leave_request import LeaveRequest, LeaveStatus

__all__ = [
    "Employee",
    "LeaveRequest",
    "LeaveStatus",
]
