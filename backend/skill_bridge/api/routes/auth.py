from datetime import datetime
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from skill_bridge.api.deps import get_current_user_id, get_db
from skill_bridge.core.config import settings
from skill_bridge.core.ratelimit import auth_login_rate_limiter
from skill_bridge.models.entities import AuthSession, StudentAccount
from skill_bridge.schemas.api import (
    AuthActionOut,
    AuthLoginIn,
    AuthLogoutIn,
    AuthMeOut,
    AuthOut,
    AuthRefreshIn,
    AuthRegisterIn,
)
from skill_bridge.services.auth import (
    create_access_token,
    create_refresh_token,
    expiry_from_now,
    hash_password,
    hash_token,
    password_policy_issues,
    verify_password,
)
from skill_bridge.services.profiles import ensure_user_record, get_user_record

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth")


def _normalize_username(value: str) -> str:
    return value.strip().lower()


def _normalize_email(value: str | None) -> str | None:
    if value is None:
        return None
    email = value.strip().lower()
    return email or None


def _request_context(request: Request) -> tuple[str | None, str | None]:
    ip_address = request.client.host if request.client else None
    user_agent = request.headers.get("user-agent")
    return ip_address, user_agent


def _issue_session_tokens(db: Session, *, user_id: str, request: Request) -> dict:
    refresh_raw = create_refresh_token()
    now = datetime.utcnow()
    refresh_expires_at = expiry_from_now(settings.auth_refresh_token_ttl_seconds)
    ip_address, user_agent = _request_context(request)

    db.add(
        AuthSession(
            user_id=user_id,
            refresh_token_hash=hash_token(refresh_raw),
            created_at=now,
            expires_at=refresh_expires_at,
            ip_address=ip_address,
            user_agent=user_agent,
        )
    )
    db.commit()

    return {
        "auth_token": create_access_token(user_id),
        "refresh_token": refresh_raw,
        "access_expires_at": expiry_from_now(settings.auth_token_ttl_seconds),
        "refresh_expires_at": refresh_expires_at,
    }


def _profile_completed(db: Session, user_id: str) -> bool:
    record = get_user_record(db, user_id)
    return bool(record and record.profile_completed)


@router.post("/register", response_model=AuthOut)
def register(payload: AuthRegisterIn, request: Request, db: Session = Depends(get_db)):
    username = _normalize_username(payload.username)
    email = _normalize_email(payload.email)
    if len(username) < 3:
        raise HTTPException(status_code=400, detail="Username must be at least 3 characters")
    issues = password_policy_issues(payload.password)
    if issues:
        raise HTTPException(status_code=400, detail=f"Password needs {', '.join(issues)}")

    existing = db.query(StudentAccount).filter(StudentAccount.username == username).one_or_none()
    if existing:
        raise HTTPException(status_code=409, detail="Username already exists")
    if email:
        existing_email = db.query(StudentAccount).filter(StudentAccount.email == email).one_or_none()
        if existing_email:
            raise HTTPException(status_code=409, detail="Email already exists")

    salt, digest = hash_password(payload.password)
    db.add(
        StudentAccount(
            username=username,
            email=email,
            password_salt=salt,
            password_hash=digest,
            created_at=datetime.utcnow(),
        )
    )
    db.commit()
    ensure_user_record(db, username, email=email, display_name=(payload.display_name or "").strip() or None)
    logger.info("Registered account %s", username)

    tokens = _issue_session_tokens(db, user_id=username, request=request)
    return {"user_id": username, **tokens, "profile_completed": False}


@router.post("/login", response_model=AuthOut)
def login(payload: AuthLoginIn, request: Request, db: Session = Depends(get_db)):
    username = _normalize_username(payload.username)
    ip_address, _ = _request_context(request)
    throttle_key = f"{username}:{ip_address}"
    auth_login_rate_limiter.check(throttle_key)

    account = db.query(StudentAccount).filter(StudentAccount.username == username).one_or_none()
    if not account or not account.is_active:
        raise HTTPException(status_code=401, detail="Invalid username or password")
    if not verify_password(payload.password, account.password_salt, account.password_hash):
        raise HTTPException(status_code=401, detail="Invalid username or password")

    auth_login_rate_limiter.clear(throttle_key)
    account.last_login_at = datetime.utcnow()
    db.commit()
    ensure_user_record(db, username, email=account.email)

    tokens = _issue_session_tokens(db, user_id=username, request=request)
    return {"user_id": username, **tokens, "profile_completed": _profile_completed(db, username)}


@router.post("/refresh", response_model=AuthOut)
def refresh(payload: AuthRefreshIn, request: Request, db: Session = Depends(get_db)):
    session = (
        db.query(AuthSession)
        .filter(AuthSession.refresh_token_hash == hash_token(payload.refresh_token))
        .one_or_none()
    )
    if not session or session.revoked_at or session.expires_at < datetime.utcnow():
        raise HTTPException(status_code=401, detail="Invalid or expired refresh token")

    # Refresh tokens rotate on every use.
    session.revoked_at = datetime.utcnow()
    db.commit()
    tokens = _issue_session_tokens(db, user_id=session.user_id, request=request)
    return {
        "user_id": session.user_id,
        **tokens,
        "profile_completed": _profile_completed(db, session.user_id),
    }


@router.post("/logout", response_model=AuthActionOut)
def logout(payload: AuthLogoutIn, db: Session = Depends(get_db)):
    session = (
        db.query(AuthSession)
        .filter(AuthSession.refresh_token_hash == hash_token(payload.refresh_token))
        .one_or_none()
    )
    if session and not session.revoked_at:
        session.revoked_at = datetime.utcnow()
        db.commit()
    return {"ok": True, "message": "Signed out."}


@router.get("/me", response_model=AuthMeOut)
def me(user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    record = get_user_record(db, user_id)
    if not record:
        return {"user_id": user_id}
    return {
        "user_id": user_id,
        "email": record.email,
        "display_name": record.display_name,
        "profile_completed": record.profile_completed,
    }
