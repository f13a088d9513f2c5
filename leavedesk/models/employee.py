from datetime import date
from pydantic import BaseModel, ConfigDict

class Employee(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
    department: str
    joining_date: date
