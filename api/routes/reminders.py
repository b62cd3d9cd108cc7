"""Deadline reminder routes"""

from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_now, require_admin, require_employee
from api.responses import AUTH_ERROR_RESPONSES
from domain.models import Profile
from domain.schemas.reminder_schemas import ReminderResponse, ReminderRunResponse
from services.reminder_service import ReminderService

router = APIRouter(prefix="/reminders", tags=["Reminders"], responses=AUTH_ERROR_RESPONSES)
logger = logging.getLogger("smartcanteen.api.reminders")


@router.get("/me", response_model=ReminderResponse)
def my_reminder(
    profile: Profile = Depends(require_employee),
    now: datetime = Depends(get_now),
):
    """The caller's pending reminder, if one was issued today"""
    reminder = ReminderService.pending_for(profile, now)
    if reminder is None:
        return ReminderResponse(pending=False)
    return ReminderResponse(
        pending=True,
        message=reminder.message,
        order_date=reminder.order_date,
        issued_at=reminder.issued_at,
    )


@router.delete("/me")
def dismiss_reminder(profile: Profile = Depends(require_employee)):
    return {"status": "ok", "dismissed": ReminderService.dismiss(profile)}


@router.post("/run", response_model=ReminderRunResponse)
def run_reminders(
    admin: Profile = Depends(require_admin),
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
):
    """Evaluate reminders now instead of waiting for the next scheduled tick"""
    result = ReminderService.run(db, now)
    return ReminderRunResponse(evaluated=result.evaluated, reminded=result.reminded)
