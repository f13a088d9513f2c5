import os
from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv

load_dotenv()

class Config(BaseModel):
    app_name: str = "Leave Desk"
    environment: str = os.getenv("APP_ENV", "development")
    version: str = "1.0.0"
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    request_id_header: str = "X-Request-ID"

    # Leave policy (process-wide, not per request)
    annual_leave_allowance: int = Field(default=int(os.getenv("ANNUAL_LEAVE_ALLOWANCE", "20")))

    @field_validator("annual_leave_allowance")
    @classmethod
    def allowance_must_be_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("annual_leave_allowance must be a positive number of days")
        return value

settings = Config()
