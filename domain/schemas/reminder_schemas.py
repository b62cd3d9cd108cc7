from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime


class ReminderResponse(BaseModel):
    pending: bool
    message: Optional[str] = None
    order_date: Optional[date] = None
    issued_at: Optional[datetime] = None


class ReminderRunResponse(BaseModel):
    evaluated: int
    reminded: int
