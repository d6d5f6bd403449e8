"""
showcase/auth.py

Register-number login. There are no credentials: a well-formed register
number yields a StudentSession, and logout destroys it. Routes receive the
session explicitly instead of reading a global "logged in" flag.
"""

import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional, Set

from utils.errors import SessionRequiredError, ShowcaseValidationError

logger = logging.getLogger(__name__)

REGISTER_NUMBER_LENGTH = 10

YEAR_LABELS = {
    "25": "1st Year",
    "24": "2nd Year",
    "23": "3rd Year",
    "22": "Final Year",
}


@dataclass
class StudentSession:
    token: str
    register_number: str
    year_prefix: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    liked_projects: Set[str] = field(default_factory=set)

    @property
    def year_label(self) -> str:
        return YEAR_LABELS[self.year_prefix]

    @property
    def year(self) -> str:
        return "20" + self.year_prefix

    def as_dict(self) -> dict:
        return {
            "token": self.token,
            "register_number": self.register_number,
            "year": self.year,
            "year_label": self.year_label,
            "created_at": self.created_at.isoformat(),
            "liked_projects": sorted(self.liked_projects),
        }


def validate_register_number(reg_num: str) -> str:
    reg_num = (reg_num or "").strip()
    if len(reg_num) != REGISTER_NUMBER_LENGTH:
        raise ShowcaseValidationError("Register number must be 10 characters long")
    if reg_num[:2] not in YEAR_LABELS:
        raise ShowcaseValidationError("Invalid register number format. Must start with 25, 24, 23, or 22")
    return reg_num


class SessionManager:
    def __init__(self):
        self._sessions: Dict[str, StudentSession] = {}
        self._lock = threading.Lock()

    def login(self, register_number: str) -> StudentSession:
        reg_num = validate_register_number(register_number)
        session = StudentSession(token=uuid.uuid4().hex, register_number=reg_num, year_prefix=reg_num[:2])
        with self._lock:
            self._sessions[session.token] = session
        logger.info("Session opened for %s", reg_num)
        return session

    def logout(self, token: Optional[str]) -> bool:
        with self._lock:
            session = self._sessions.pop(token or "", None)
        if session is not None:
            logger.info("Session closed for %s", session.register_number)
        return session is not None

    def get(self, token: Optional[str]) -> Optional[StudentSession]:
        with self._lock:
            return self._sessions.get(token or "")

    def require(self, token: Optional[str]) -> StudentSession:
        session = self.get(token)
        if session is None:
            raise SessionRequiredError()
        return session

    def toggle_like(self, session: StudentSession, project_id: str, store) -> tuple:
        """Flip one like for this session; returns (liked, project)."""
        store.get(project_id)
        # set membership and the store counter change together
        with self._lock:
            if project_id in session.liked_projects:
                session.liked_projects.discard(project_id)
                return False, store.adjust_likes(project_id, -1)
            session.liked_projects.add(project_id)
            return True, store.adjust_likes(project_id, 1)
