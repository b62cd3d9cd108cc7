"""
Session handling.

One SessionStore per process holds every open login session. A session is
opened on login and closed on logout; routes resolve the caller from the
bearer token on each request instead of reading ambient state.
"""

import logging
import secrets
import threading
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Tuple
from uuid import UUID

from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import Profile
from repositories import ProfileRepository

logger = logging.getLogger("smartcanteen.auth")


class SessionStore:
    """Maps opaque bearer tokens to a profile id until the session expires."""

    def __init__(self, ttl_minutes: int = 720) -> None:
        self.ttl = timedelta(minutes=ttl_minutes)
        # token -> (profile_id, expires_at)
        self._sessions: Dict[str, Tuple[UUID, datetime]] = {}
        self._lock = threading.Lock()

    def open(self, profile_id: UUID) -> str:
        token = secrets.token_urlsafe(32)
        now = datetime.now(timezone.utc)
        with self._lock:
            purged = self._purge_expired(now)
            self._sessions[token] = (profile_id, now + self.ttl)
        logger.info(f"session_opened profile_id={profile_id} purged={purged}")
        return token

    def resolve(self, token: str) -> Optional[UUID]:
        """Profile id for a live token, None when unknown or expired"""
        with self._lock:
            entry = self._sessions.get(token)
            if entry is None:
                return None
            profile_id, expires_at = entry
            if datetime.now(timezone.utc) >= expires_at:
                del self._sessions[token]
                logger.info(f"session_expired profile_id={profile_id}")
                return None
            return profile_id

    def close(self, token: str) -> bool:
        with self._lock:
            entry = self._sessions.pop(token, None)
        if entry is not None:
            logger.info(f"session_closed profile_id={entry[0]}")
        return entry is not None

    def _purge_expired(self, now: datetime) -> int:
        # caller holds the lock
        expired = [t for t, (_, expires_at) in self._sessions.items() if now >= expires_at]
        for token in expired:
            del self._sessions[token]
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)


session_store = SessionStore(ttl_minutes=settings.session_ttl_minutes)


class AuthService:
    """Login, logout and caller resolution"""

    @staticmethod
    def login(db: Session, email: str, store: SessionStore = session_store) -> Tuple[str, Profile]:
        """
        Open a session for the profile registered under ``email``.

        Credentials are checked by the identity provider in front of this
        service; here we only resolve the profile.

        Raises:
            UnauthorizedError: no profile with that email
        """
        profile = ProfileRepository(db).get_by_email(email)
        if profile is None:
            logger.warning(f"login_rejected email={email}")
            raise UnauthorizedError("Unknown account", code="INVALID_CREDENTIALS")

        token = store.open(profile.profile_id)
        logger.info(f"login profile_id={profile.profile_id} role={profile.role.value}")
        return token, profile

    @staticmethod
    def logout(token: str, store: SessionStore = session_store) -> bool:
        return store.close(token)

    @staticmethod
    def resolve_profile(
        db: Session, token: Optional[str], store: SessionStore = session_store
    ) -> Profile:
        if not token:
            raise UnauthorizedError("Missing bearer token")

        profile_id = store.resolve(token)
        if profile_id is None:
            raise UnauthorizedError("Session expired or invalid", code="INVALID_SESSION")

        profile = ProfileRepository(db).get_by_id(profile_id)
        if profile is None:
            # profile was deleted while the session was open
            store.close(token)
            raise UnauthorizedError("Session expired or invalid", code="INVALID_SESSION")
        return profile
