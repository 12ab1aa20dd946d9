from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..dependencies import get_bearer_token, get_session_store, read_json_body
from ..schemas.auth import Acknowledgement, LoginFailure, LoginRequest, LoginResponse
from ..services.sessions import InvalidCredentialsError, SessionStore

router = APIRouter(prefix="/api", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": LoginFailure}},
)
async def login(
    body: dict[str, Any] = Depends(read_json_body),
    sessions: SessionStore = Depends(get_session_store),
):
    try:
        credentials = LoginRequest.model_validate(body)
        token = sessions.login(credentials.email, credentials.password)
    except (ValidationError, InvalidCredentialsError):
        failure = LoginFailure(message="Invalid credentials")
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content=failure.model_dump())
    return LoginResponse(token=token)


@router.post("/logout", response_model=Acknowledgement)
async def logout(
    token: str | None = Depends(get_bearer_token),
    sessions: SessionStore = Depends(get_session_store),
) -> Acknowledgement:
    sessions.logout(token)
    return Acknowledgement()
