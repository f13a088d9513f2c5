import itertools
import threading
from typing import Dict

from fastapi import Request

from leavedesk.models import Employee, LeaveRequest


class LeaveStore:
    """
    In-process state for the whole service: employees, leave requests and
    their id counters.

    Lives from startup to shutdown and is never persisted. All registry and
    ledger operations hold `lock` for their full duration, so at most one
    mutation is in flight and no read observes a half-applied one.
    """

    def __init__(self):
        self.employees: Dict[int, Employee] = {}
        self.leave_requests: Dict[int, LeaveRequest] = {}
        self.lock = threading.RLock()
        self._employee_ids = itertools.count(1)
        self._leave_ids = itertools.count(1)

    def next_employee_id(self) -> int:
        return next(self._employee_ids)

    def next_leave_id(self) -> int:
        return next(self._leave_ids)


def init_store() -> LeaveStore:
    """
    Creates the store for one application lifetime.
    Called from the FastAPI lifespan; the result is kept on app.state.
    """
    return LeaveStore()


def get_store(request: Request) -> LeaveStore:
    """
    Store Provider: hands the application's store to request handlers.
    """
    return request.app.state.store
