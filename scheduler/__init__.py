"""Background jobs"""

from .reminder_job import ReminderJob
from .scheduler_config import SchedulerManager, scheduler_manager

__all__ = ["ReminderJob", "SchedulerManager", "scheduler_manager"]
