from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr
from pydantic.alias_generators import to_camel
from datetime import date
from typing import Optional, Union

from leavedesk.models.leave_request import LeaveStatus

class LeaveApplyRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # No coercion: "1" is not employee 1, and 0 counts as missing in LeaveLedger.apply
    employee_id: Optional[Union[StrictInt, StrictStr]] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

class LeaveStatusUpdate(BaseModel):
    status: Optional[str] = None

class LeaveRequestResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    employee_id: int
    start_date: date
    end_date: date
    status: LeaveStatus

class LeaveDecisionResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    leave_request_id: int
    status: LeaveStatus
    leave_balance_remaining: int
