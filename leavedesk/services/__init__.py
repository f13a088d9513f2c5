from .employee_registry import EmployeeRegistry
from .leave_ledger import LeaveLedger, day_count

__all__ = [
    "EmployeeRegistry",
    "LeaveLedger",
    "day_count",
]
