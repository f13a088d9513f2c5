"""
Leave Ledger

The request lifecycle and balance arithmetic. Balance is never stored: it is
the allowance minus the inclusive day counts of the employee's Approved
requests, recomputed on every call.

Lifecycle:
- apply:  validates and records a request as Pending
- decide: moves a Pending request to Approved or Rejected, exactly once

The allowance is checked twice. At apply time only Approved history counts,
so several Pending requests may each fit on their own; approval re-checks
against the balance at that moment, which keeps the sum of Approved days
within the allowance whatever order decisions arrive in.
"""
from datetime import date, datetime
from typing import Any, List, Optional

from leavedesk.core.config import settings
from leavedesk.core.exceptions import ConflictError, NotFoundError, ValidationError
from leavedesk.core.validation import parse_calendar_date, require_fields
from leavedesk.models import LeaveRequest, LeaveStatus
from leavedesk.models.leave_request import LeaveDecision
from leavedesk.services.base import BaseService
from leavedesk.services.employee_registry import EmployeeRegistry
from leavedesk.store import LeaveStore

DECISION_STATUSES = (LeaveStatus.APPROVED.value, LeaveStatus.REJECTED.value)


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def day_count(start: date, end: date) -> int:
    """Inclusive number of calendar days from start to end."""
    return (_as_date(end) - _as_date(start)).days + 1


class LeaveLedger(BaseService):
    def __init__(
        self,
        store: LeaveStore,
        registry: Optional[EmployeeRegistry] = None,
        allowance: Optional[int] = None
    ):
        super().__init__(store)
        self.registry = registry or EmployeeRegistry(store)
        self.allowance = allowance if allowance is not None else settings.annual_leave_allowance

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def current_balance(self, employee_id: int) -> Optional[int]:
        """Remaining days for the employee, or None if there is no such employee."""
        with self.store.lock:
            if self.registry.find(employee_id) is None:
                return None
            used = sum(
                day_count(leave.start_date, leave.end_date)
                for leave in self.store.leave_requests.values()
                if leave.employee_id == employee_id and leave.status == LeaveStatus.APPROVED
            )
            return self.allowance - used

    def balance_of(self, employee_id: int) -> int:
        balance = self.current_balance(employee_id)
        if balance is None:
            raise NotFoundError("Employee not found.")
        return balance

    def overlaps(self, employee_id: int, start: date, end: date) -> bool:
        """True if [start, end] shares a day with any non-Rejected request of the employee."""
        start, end = _as_date(start), _as_date(end)
        with self.store.lock:
            return any(
                leave.employee_id == employee_id
                and leave.status != LeaveStatus.REJECTED
                and start <= leave.end_date
                and end >= leave.start_date
                for leave in self.store.leave_requests.values()
            )

    def get(self, leave_id: int) -> LeaveRequest:
        with self.store.lock:
            leave = self.store.leave_requests.get(leave_id)
        if leave is None:
            raise NotFoundError("Leave request not found.")
        return leave

    def requests_for(self, employee_id: int, status: Optional[str] = None) -> List[LeaveRequest]:
        wanted = None
        if status is not None:
            try:
                wanted = LeaveStatus(status)
            except ValueError:
                raise ValidationError(
                    "Status must be Pending, Approved or Rejected.",
                    details={"status": status}
                )

        with self.store.lock:
            self.registry.get(employee_id)
            leaves = [
                leave for leave in self.store.leave_requests.values()
                if leave.employee_id == employee_id and (wanted is None or leave.status == wanted)
            ]
        return sorted(leaves, key=lambda leave: leave.id)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def apply(self, employee_id: Any, start_date: Any, end_date: Any) -> LeaveRequest:
        """
        Record a new Pending leave request.

        Checks run in a fixed order and the first failure is reported:
        required fields, employee exists, dates parse, end not before start,
        start not before joining date, no overlap, enough balance.
        """
        require_fields(
            "employeeId, startDate and endDate are required.",
            employeeId=employee_id,
            startDate=start_date,
            endDate=end_date,
        )

        with self.store.lock:
            employee = self.registry.find(employee_id)
            if employee is None:
                raise NotFoundError("Employee not found.")

            start = parse_calendar_date(start_date)
            end = parse_calendar_date(end_date)
            if start is None or end is None:
                raise ValidationError("Invalid date format.")

            if end < start:
                raise ValidationError("endDate cannot be before startDate.")

            if start < employee.joining_date:
                raise ValidationError(
                    "Cannot apply leave before joining date.",
                    details={"joiningDate": employee.joining_date.isoformat()}
                )

            if self.overlaps(employee.id, start, end):
                raise ConflictError("Leave request overlaps with existing leave.")

            requested = day_count(start, end)
            balance = self.current_balance(employee.id)
            if requested > balance:
                raise ValidationError(
                    "Leave days exceed available leave balance.",
                    details={"requested": requested, "available": balance}
                )

            leave = LeaveRequest(
                id=self.store.next_leave_id(),
                employee_id=employee.id,
                start_date=start,
                end_date=end,
                status=LeaveStatus.PENDING,
            )
            self.store.leave_requests[leave.id] = leave
            return leave

    def decide(self, leave_id: int, status: Any) -> LeaveDecision:
        """Approve or reject a Pending request. Terminal requests cannot be decided again."""
        if status not in DECISION_STATUSES:
            raise ValidationError("Status must be Approved or Rejected.")
        target = LeaveStatus(status)

        with self.store.lock:
            leave = self.store.leave_requests.get(leave_id)
            if leave is None:
                raise NotFoundError("Leave request not found.")

            if leave.status.is_terminal:
                raise ConflictError(
                    "Leave request is already processed.",
                    details={"status": leave.status.value}
                )

            if target == LeaveStatus.APPROVED:
                requested = day_count(leave.start_date, leave.end_date)
                balance = self.current_balance(leave.employee_id)
                if requested > balance:
                    raise ValidationError(
                        "Insufficient leave balance to approve.",
                        details={"requested": requested, "available": balance}
                    )

            leave = leave.model_copy(update={"status": target})
            self.store.leave_requests[leave.id] = leave

            return LeaveDecision(
                leave_request_id=leave.id,
                status=leave.status,
                leave_balance_remaining=self.current_balance(leave.employee_id),
            )
