from __future__ import annotations

from datetime import datetime
import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skill_bridge.models.entities import AssessmentRecord, UserRecord
from skill_bridge.services.results import (
    get_assessment_progress,
    migrate_assessment_results,
    normalize_analysis,
    should_retake_assessment,
)

logger = logging.getLogger(__name__)


def save_assessment(
    db: Session,
    user: UserRecord,
    *,
    responses: dict[str, Any],
    analysis: dict[str, Any],
) -> dict[str, Any]:
    """Persist the raw analysis and the normalized result; a retake overwrites both."""
    now = datetime.utcnow()
    results = normalize_analysis(analysis, user.interests or [], completed_at=now)
    stored = {**results, "fullAnalysis": analysis}

    record = db.query(AssessmentRecord).filter(AssessmentRecord.user_id == user.user_id).one_or_none()
    if record is None:
        record = AssessmentRecord(user_id=user.user_id)
        db.add(record)
    record.responses = dict(responses)
    record.analysis = analysis
    record.completed_at = now

    user.assessment_results = stored
    user.assessment_completed_at = now
    user.updated_at = now
    db.commit()
    return stored


def get_assessment_results(db: Session, user_id: str) -> dict[str, Any] | None:
    user = db.query(UserRecord).filter(UserRecord.user_id == user_id).one_or_none()
    if user is None:
        return None

    current = user.assessment_results
    # An empty career list is still a normalized result.
    if current and isinstance(current.get("topCareerMatches"), list):
        return current

    legacy = db.query(AssessmentRecord).filter(AssessmentRecord.user_id == user_id).one_or_none()
    if legacy is not None:
        try:
            migrated = migrate_assessment_results(legacy.analysis, completed_at=legacy.completed_at)
            user.assessment_results = migrated
            db.commit()
            return migrated
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Assessment result migration failed for user %s", user_id)

    return current or None


def has_completed_assessment(db: Session, user_id: str) -> bool:
    try:
        user = db.query(UserRecord).filter(UserRecord.user_id == user_id).one_or_none()
    except SQLAlchemyError:
        logger.exception("Assessment completion check failed for user %s", user_id)
        return False
    return bool(user and user.assessment_results)


def get_assessment_status(db: Session, user_id: str) -> dict[str, Any]:
    try:
        results = get_assessment_results(db, user_id)
    except SQLAlchemyError:
        logger.exception("Assessment status lookup failed for user %s", user_id)
        return {"completed": False, "results": None, "needs_retake": False, "progress": 0}
    return {
        "completed": bool(results),
        "results": results,
        "needs_retake": should_retake_assessment(results) if results else False,
        "progress": get_assessment_progress(results),
    }
