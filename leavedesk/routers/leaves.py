from fastapi import APIRouter, Depends
import logging

from leavedesk.dependencies import get_ledger
from leavedesk.schemas.leave import (
    LeaveApplyRequest,
    LeaveDecisionResponse,
    LeaveRequestResponse,
    LeaveStatusUpdate,
)
from leavedesk.services.leave_ledger import LeaveLedger

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/leaves", tags=["leaves"])


@router.post("/apply", response_model=LeaveRequestResponse)
def apply_leave(payload: LeaveApplyRequest, ledger: LeaveLedger = Depends(get_ledger)):
    leave = ledger.apply(
        employee_id=payload.employee_id,
        start_date=payload.start_date,
        end_date=payload.end_date,
    )
    logger.info(
        f"Leave request {leave.id} submitted",
        extra={
            "employee_id": leave.employee_id,
            "start_date": leave.start_date.isoformat(),
            "end_date": leave.end_date.isoformat(),
        },
    )
    return LeaveRequestResponse(**leave.model_dump())


@router.get("/{leave_id}", response_model=LeaveRequestResponse)
def get_leave_request(leave_id: int, ledger: LeaveLedger = Depends(get_ledger)):
    return LeaveRequestResponse(**ledger.get(leave_id).model_dump())


@router.put("/{leave_id}/status", response_model=LeaveDecisionResponse)
def decide_leave(
    leave_id: int,
    payload: LeaveStatusUpdate,
    ledger: LeaveLedger = Depends(get_ledger),
):
    decision = ledger.decide(leave_id, payload.status)
    logger.info(
        f"Leave request {decision.leave_request_id} {decision.status.value.lower()}",
        extra={"leave_balance_remaining": decision.leave_balance_remaining},
    )
    return LeaveDecisionResponse(**decision.model_dump())
