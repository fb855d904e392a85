from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from skill_bridge.core.config import settings
from skill_bridge.core.database import engine
from skill_bridge.services.generation import generation_is_configured

router = APIRouter(prefix="/meta")


@router.get("/ai")
def ai_meta():
    return {
        "ai_enabled": generation_is_configured(),
        "model": settings.gemini_model,
        "json_mode": settings.generation_json_mode,
    }


@router.get("/health")
def health_meta():
    db_ok = False
    db_error = None
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_ok = True
    except SQLAlchemyError as exc:
        db_error = str(exc)
    return {
        "ok": db_ok,
        "database": {"ok": db_ok, "error": db_error},
        "ai": {
            "enabled": generation_is_configured(),
            "model": settings.gemini_model,
        },
    }
