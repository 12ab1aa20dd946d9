import json
import logging
from typing import Any

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials

from .core.security import bearer_scheme
from .repositories.json_store import JsonDatasetStore
from .services.sessions import AdminSession, SessionStore

logger = logging.getLogger(__name__)


def get_session_store(request: Request) -> SessionStore:
    store = getattr(request.app.state, "session_store", None)
    if store is None:
        raise RuntimeError("Session store not configured")
    return store


def get_dataset_store(request: Request) -> JsonDatasetStore:
    store = getattr(request.app.state, "dataset_store", None)
    if store is None:
        raise RuntimeError("Dataset store not configured")
    return store


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    if credentials is None:
        return None
    return credentials.credentials


def require_admin(
    token: str | None = Depends(get_bearer_token),
    sessions: SessionStore = Depends(get_session_store),
) -> AdminSession:
    session = sessions.validate(token)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {token}")


async def read_json_body(request: Request) -> dict[str, Any]:
    """Return the request body as a JSON object.

    Empty, unparseable or non-object bodies all read as ``{}``.
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError):
        logger.debug("Ignoring malformed JSON body on %s %s", request.method, request.url.path)
        return {}
    if not isinstance(payload, dict):
        logger.debug("Ignoring non-object JSON body on %s %s", request.method, request.url.path)
        return {}
    return payload
