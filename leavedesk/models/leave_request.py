import enum
from datetime import date
from pydantic import BaseModel, ConfigDict

class LeaveStatus(str, enum.Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not LeaveStatus.PENDING

class LeaveRequest(BaseModel):
    # Status changes only through LeaveLedger.decide, which stores a new copy
    model_config = ConfigDict(frozen=True)

    id: int
    employee_id: int
    start_date: date
    end_date: date
    status: LeaveStatus = LeaveStatus.PENDING

class LeaveDecision(BaseModel):
    leave_request_id: int
    status: LeaveStatus
    leave_balance_remaining: int
