"""In-memory admin sessions keyed by bearer token."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.security import credentials_match, generate_token

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Base class for authentication-related exceptions."""


class InvalidCredentialsError(AuthError):
    pass


@dataclass(frozen=True)
class AdminSession:
    token: str
    email: str


class SessionStore:
    """Issues and tracks tokens for the single configured admin account.

    Sessions never expire; they live until ``logout`` or process exit. Several
    tokens may be live for the admin at the same time.
    """

    def __init__(self, admin_email: str, admin_password: str) -> None:
        self._admin_email = admin_email
        self._admin_password = admin_password
        self._sessions: dict[str, AdminSession] = {}

    def login(self, email: str, password: str) -> str:
        # Evaluate both comparisons so timing does not reveal which field was wrong.
        email_ok = credentials_match(email, self._admin_email)
        password_ok = credentials_match(password, self._admin_password)
        if not (email_ok and password_ok):
            logger.warning("Rejected admin login attempt")
            raise InvalidCredentialsError()
        token = generate_token()
        self._sessions[token] = AdminSession(token=token, email=email)
        logger.info("Admin %s logged in", email)
        return token

    def validate(self, token: str | None) -> AdminSession | None:
        if not token:
            return None
        return self._sessions.get(token)

    def logout(self, token: str | None) -> None:
        if not token:
            return
        if self._sessions.pop(token, None) is not None:
            logger.info("Admin session closed")

    def __len__(self) -> int:
        return len(self._sessions)
