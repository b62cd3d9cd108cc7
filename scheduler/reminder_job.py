"""
Periodic deadline reminder job.

Runs on a fixed interval and hands each evaluation to ReminderService with
its own database session.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.orm import Session

from app.config import settings
from core.clock import local_now
from services.reminder_service import ReminderRun, ReminderService

logger = logging.getLogger("smartcanteen.scheduler.reminders")


class ReminderJob:
    """Background job evaluating the reminder rule for all opted-in employees."""

    def __init__(
        self,
        session_factory: Callable[[], Session],
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Args:
            session_factory: creates a fresh SQLAlchemy session per run
            clock: returns "now"; defaults to the canteen's configured zone
        """
        self.session_factory = session_factory
        self.clock = clock or (lambda: local_now(settings.time_zone))

    def run(self) -> Optional[ReminderRun]:
        """Entry point called by the scheduler. Failures are logged, not raised."""
        db = self.session_factory()
        try:
            return ReminderService.run(db, self.clock())
        except Exception as e:
            # keep the schedule alive; the next tick re-evaluates
            logger.exception(f"reminder_job_failed error={e}")
            return None
        finally:
            db.close()
