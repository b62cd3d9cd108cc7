"""
APScheduler configuration and management.

Provides centralized scheduler configuration for background jobs
like the deadline reminder check.
"""

import logging
from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .reminder_job import ReminderJob

logger = logging.getLogger("smartcanteen.scheduler")


class SchedulerManager:
    """
    Manages APScheduler lifecycle and job registration.

    Holds the single application scheduler, registers jobs on initialization
    and shuts the scheduler down with the app.
    """

    def __init__(self) -> None:
        self.scheduler: Optional[AsyncIOScheduler] = None
        self._reminder_job: Optional[ReminderJob] = None

    def initialize(
        self,
        reminder_job: ReminderJob,
        interval_seconds: int = 60,
        timezone: Optional[str] = None,
    ) -> None:
        """
        Initialize and configure scheduler with jobs.

        Args:
            reminder_job: Reminder job instance
            interval_seconds: Seconds between reminder evaluations
            timezone: Scheduler time zone, host local zone when None
        """
        if self.scheduler is not None:
            logger.warning("Scheduler already initialized")
            return

        self._reminder_job = reminder_job

        options = {
            "job_defaults": {
                "coalesce": True,  # Combine missed runs
                "max_instances": 1,  # One instance at a time
                "misfire_grace_time": interval_seconds,
            },
        }
        if timezone:
            options["timezone"] = timezone
        self.scheduler = AsyncIOScheduler(**options)

        self._register_reminder_job(interval_seconds)

        logger.info("Scheduler initialized successfully")

    def _register_reminder_job(self, interval_seconds: int) -> None:
        if self.scheduler is None or self._reminder_job is None:
            raise RuntimeError("Scheduler not initialized")

        self.scheduler.add_job(
            self._reminder_job.run,
            trigger=IntervalTrigger(seconds=interval_seconds),
            id="deadline_reminder",
            name="Order Deadline Reminder",
            replace_existing=True,
        )

        logger.info(f"Reminder job registered every {interval_seconds}s")

    def start(self) -> None:
        """Start scheduler (begin executing jobs)."""
        if self.scheduler is None:
            raise RuntimeError("Scheduler not initialized")

        if self.scheduler.running:
            logger.warning("Scheduler already running")
            return

        self.scheduler.start()
        logger.info("Scheduler started")

    def shutdown(self, wait: bool = True) -> None:
        """
        Shutdown scheduler gracefully.

        Args:
            wait: If True, wait for running jobs to complete
        """
        if self.scheduler is None:
            logger.warning("Scheduler not initialized")
            return

        if not self.scheduler.running:
            logger.warning("Scheduler not running")
            return

        self.scheduler.shutdown(wait=wait)
        logger.info(f"Scheduler shutdown (wait={wait})")

    def get_jobs(self) -> list[dict[str, str]]:
        if self.scheduler is None:
            return []

        return [
            {
                "id": job.id,
                "name": job.name,
                "next_run": str(getattr(job, "next_run_time", None)),
                "trigger": str(job.trigger),
            }
            for job in self.scheduler.get_jobs()
        ]


scheduler_manager = SchedulerManager()
