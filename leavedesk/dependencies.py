"""
Service providers for routers.

Each request gets lightweight service objects bound to the application's
single LeaveStore, so all of them share one lock and one set of counters.
"""
from fastapi import Depends

from leavedesk.store import LeaveStore, get_store
from leavedesk.services.employee_registry import EmployeeRegistry
from leavedesk.services.leave_ledger import LeaveLedger


def get_registry(store: LeaveStore = Depends(get_store)) -> EmployeeRegistry:
    return EmployeeRegistry(store)


def get_ledger(
    store: LeaveStore = Depends(get_store),
    registry: EmployeeRegistry = Depends(get_registry),
) -> LeaveLedger:
    return LeaveLedger(store, registry=registry)


__all__ = [
    "get_store",
    "get_registry",
    "get_ledger",
]
