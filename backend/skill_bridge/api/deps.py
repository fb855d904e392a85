from dataclasses import dataclass

from fastapi import Depends, Header, HTTPException

from skill_bridge.core.database import SessionLocal
from skill_bridge.services.auth import verify_auth_token
from skill_bridge.services.requester import AssessmentRequester


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@dataclass
class AuthContext:
    """Session handle restored from the request's access token."""

    user_id: str | None
    token: str | None

    @property
    def authenticated(self) -> bool:
        return self.user_id is not None


def get_auth_context(x_auth_token: str | None = Header(default=None)) -> AuthContext:
    if not x_auth_token:
        return AuthContext(user_id=None, token=None)
    user_id = verify_auth_token(x_auth_token)
    if not user_id:
        return AuthContext(user_id=None, token=None)
    return AuthContext(user_id=user_id, token=x_auth_token)


def require_auth(
    x_auth_token: str | None = Header(default=None),
    context: AuthContext = Depends(get_auth_context),
) -> AuthContext:
    if not x_auth_token:
        raise HTTPException(status_code=401, detail="Missing X-Auth-Token header")
    if not context.authenticated:
        raise HTTPException(status_code=401, detail="Invalid or expired auth token")
    return context


def get_current_user_id(context: AuthContext = Depends(require_auth)) -> str:
    return context.user_id


def get_requester(context: AuthContext = Depends(require_auth)):
    requester = AssessmentRequester(auth_token=context.token)
    try:
        yield requester
    finally:
        requester.close()


def get_generation_client():
    """HTTP client for the generation endpoint; None lets each call open its own."""
    return None
