from typing import List, Optional
from fastapi import APIRouter, Depends
import logging

from leavedesk.dependencies import get_ledger, get_registry
from leavedesk.models import Employee
from leavedesk.schemas.employee import BalanceResponse, EmployeeCreate, EmployeeResponse
from leavedesk.schemas.leave import LeaveRequestResponse
from leavedesk.services.employee_registry import EmployeeRegistry
from leavedesk.services.leave_ledger import LeaveLedger

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


def _to_response(employee: Employee, ledger: LeaveLedger) -> EmployeeResponse:
    # leaveBalance is always the derived balance, never a stored copy
    return EmployeeResponse(
        **employee.model_dump(),
        leave_balance=ledger.balance_of(employee.id),
    )


@router.post("", response_model=EmployeeResponse)
def register_employee(
    payload: EmployeeCreate,
    registry: EmployeeRegistry = Depends(get_registry),
    ledger: LeaveLedger = Depends(get_ledger),
):
    employee = registry.register(
        name=payload.name,
        email=payload.email,
        department=payload.department,
        joining_date=payload.joining_date,
    )
    logger.info(f"Registered employee {employee.id}", extra={"department": employee.department})
    return _to_response(employee, ledger)


@router.get("", response_model=List[EmployeeResponse])
def list_employees(
    registry: EmployeeRegistry = Depends(get_registry),
    ledger: LeaveLedger = Depends(get_ledger),
):
    return [_to_response(employee, ledger) for employee in registry.list()]


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(
    employee_id: int,
    registry: EmployeeRegistry = Depends(get_registry),
    ledger: LeaveLedger = Depends(get_ledger),
):
    return _to_response(registry.get(employee_id), ledger)


@router.get("/{employee_id}/balance", response_model=BalanceResponse)
def get_leave_balance(employee_id: int, ledger: LeaveLedger = Depends(get_ledger)):
    return BalanceResponse(employee_id=employee_id, leave_balance=ledger.balance_of(employee_id))


@router.get("/{employee_id}/leaves", response_model=List[LeaveRequestResponse])
def list_employee_leaves(
    employee_id: int,
    status: Optional[str] = None,
    ledger: LeaveLedger = Depends(get_ledger),
):
    return [
        LeaveRequestResponse(**leave.model_dump())
        for leave in ledger.requests_for(employee_id, status=status)
    ]
