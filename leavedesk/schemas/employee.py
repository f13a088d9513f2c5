from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import date
from typing import Optional

class EmployeeCreate(BaseModel):
    # Presence and format are checked by EmployeeRegistry so every failure maps to 400
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    joining_date: Optional[str] = None

class EmployeeResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    email: str
    department: str
    joining_date: date
    leave_balance: int

class BalanceResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    employee_id: int
    leave_balance: int
