"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
application at an in-memory SQLite database before anything is imported.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["SCHEDULER_ENABLED"] = "false"
os.environ["TIME_ZONE"] = ""
os.environ["CUTOFF_HOUR"] = "21"
os.environ["ADMIN_EMAILS"] = '["admin@example.com"]'


@pytest.fixture(autouse=True)
def fresh_database():
    """Each test starts with empty tables, no sessions and no pending reminders."""
    from domain.models import Base, engine
    from services.auth_service import session_store
    from services.reminder_service import reminder_inbox
    from main import app

    Base.metadata.create_all(bind=engine)
    try:
        yield
    finally:
        app.dependency_overrides.clear()
        session_store.clear()
        reminder_inbox.clear()
        Base.metadata.drop_all(bind=engine)
