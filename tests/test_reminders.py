"""
Tests for deadline reminders: evaluation, the inbox, the scheduled job and the routes.
"""

from datetime import date, datetime, timedelta

import pytest
from apscheduler.triggers.interval import IntervalTrigger

from app.exceptions import DataAccessError
from domain.enums import Role
from domain.models import Profile, SessionLocal
from repositories import ProfileRepository
from scheduler import ReminderJob, SchedulerManager
from services.reminder_service import (
    Reminder,
    ReminderInbox,
    ReminderService,
    reminder_inbox,
    reminder_message,
)
from test_fixtures import TODAY, client, db_session, login, make_admin, make_profile, set_now

AT_SIX = datetime(2026, 10, 19, 18, 0)


# =============================================================================
# SERVICE
# =============================================================================


def test_run_reminds_opted_in_employees_once_per_day(db_session):
    due = make_profile(db_session)
    make_profile(db_session, notification_enabled=False)
    make_profile(db_session, role=Role.ADMIN)

    result = ReminderService.run(db_session, AT_SIX)
    assert (result.evaluated, result.reminded) == (1, 1)

    db_session.refresh(due)
    assert due.last_reminded_on == TODAY

    reminder = reminder_inbox.peek(due.profile_id)
    assert reminder.message == reminder_message(21)
    assert reminder.order_date == date(2026, 10, 20)

    again = ReminderService.run(db_session, AT_SIX + timedelta(minutes=30))
    assert (again.evaluated, again.reminded) == (1, 0)


def test_failed_commit_posts_no_reminders(db_session, monkeypatch):
    make_profile(db_session)
    inbox = ReminderInbox()

    def failing_commit(self):
        raise DataAccessError()

    monkeypatch.setattr(ProfileRepository, "commit", failing_commit)

    with pytest.raises(DataAccessError):
        ReminderService.run(db_session, AT_SIX, inbox=inbox)
    assert len(inbox) == 0
    db_session.rollback()


def test_run_outside_band_reminds_nobody(db_session):
    make_profile(db_session)
    assert ReminderService.run(db_session, datetime(2026, 10, 19, 16, 59)).reminded == 0
    assert ReminderService.run(db_session, datetime(2026, 10, 19, 21, 0)).reminded == 0
    assert len(reminder_inbox) == 0


def test_shown_state_resets_next_day(db_session):
    profile = make_profile(db_session, last_reminded_on=TODAY - timedelta(days=1))
    assert ReminderService.evaluate(profile, AT_SIX) is True

    profile = make_profile(db_session, last_reminded_on=TODAY)
    assert ReminderService.evaluate(profile, AT_SIX) is False


def test_reminder_message_names_the_cutoff():
    assert reminder_message(21) == (
        "Don't forget to confirm your meal preferences for tomorrow before 9:00 PM!"
    )


# =============================================================================
# INBOX
# =============================================================================


def test_inbox_drops_reminders_from_earlier_days():
    inbox = ReminderInbox()
    reminder = Reminder(
        profile_id="p-1",
        message="m",
        order_date=date(2026, 10, 20),
        issued_at=AT_SIX,
    )
    inbox.post(reminder)

    assert inbox.peek("p-1", today=TODAY) is reminder
    assert inbox.peek("p-1", today=TODAY + timedelta(days=1)) is None
    assert len(inbox) == 0


def test_inbox_keeps_one_reminder_per_profile():
    inbox = ReminderInbox()
    inbox.post(Reminder("p-1", "first", date(2026, 10, 20), AT_SIX))
    inbox.post(Reminder("p-1", "second", date(2026, 10, 20), AT_SIX))

    assert len(inbox) == 1
    assert inbox.peek("p-1").message == "second"
    assert inbox.dismiss("p-1") is True
    assert inbox.dismiss("p-1") is False


# =============================================================================
# SCHEDULED JOB
# =============================================================================


def test_job_runs_with_its_own_session(db_session):
    profile = make_profile(db_session)

    result = ReminderJob(SessionLocal, clock=lambda: AT_SIX).run()
    assert result.reminded == 1

    db_session.expire_all()
    assert db_session.get(Profile, profile.profile_id).last_reminded_on == TODAY


def test_job_failure_is_logged_not_raised(caplog):
    def broken_clock():
        raise RuntimeError("clock unavailable")

    assert ReminderJob(SessionLocal, clock=broken_clock).run() is None
    assert "reminder_job_failed" in caplog.text


def test_scheduler_registers_interval_job():
    manager = SchedulerManager()
    manager.initialize(ReminderJob(SessionLocal), interval_seconds=30)

    job = manager.scheduler.get_job("deadline_reminder")
    assert job is not None
    assert isinstance(job.trigger, IntervalTrigger)
    assert job.trigger.interval == timedelta(seconds=30)
    assert [j["id"] for j in manager.get_jobs()] == ["deadline_reminder"]


def test_scheduler_start_requires_initialize():
    with pytest.raises(RuntimeError):
        SchedulerManager().start()


# =============================================================================
# ROUTES
# =============================================================================


def test_pending_reminder_round_trip(db_session):
    employee = make_profile(db_session)
    admin_headers = login(make_admin(db_session).email)
    headers = login(employee.email)
    set_now(AT_SIX)

    assert client.get("/reminders/me", headers=headers).json()["pending"] is False

    r = client.post("/reminders/run", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"evaluated": 1, "reminded": 1}

    body = client.get("/reminders/me", headers=headers).json()
    assert body["pending"] is True
    assert "9:00 PM" in body["message"]
    assert body["order_date"] == "2026-10-20"

    r = client.delete("/reminders/me", headers=headers)
    assert r.json() == {"status": "ok", "dismissed": True}
    assert client.get("/reminders/me", headers=headers).json()["pending"] is False

    # dismissed today stays dismissed today
    assert client.post("/reminders/run", headers=admin_headers).json()["reminded"] == 0


def test_pending_reminder_expires_next_day(db_session):
    employee = make_profile(db_session)
    headers = login(employee.email)
    set_now(AT_SIX)
    ReminderService.run(db_session, AT_SIX)

    set_now(AT_SIX + timedelta(days=1))
    assert client.get("/reminders/me", headers=headers).json()["pending"] is False


def test_employee_cannot_trigger_run(db_session):
    headers = login(make_profile(db_session).email)
    assert client.post("/reminders/run", headers=headers).status_code == 403
