"""In-memory assessment sessions.

Steps run intro -> assessment (question i of N) -> submitting -> results, with
`completed` entered directly when the user already has a stored result. A
session lives only in this process; a reload starts a new one.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
import logging
from threading import Lock
from typing import Any
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skill_bridge.services.profiles import get_user_record, profile_payload
from skill_bridge.services.requester import AssessmentRequester
from skill_bridge.services.result_store import save_assessment

logger = logging.getLogger(__name__)

PROFILE_LOAD_ERROR = "Failed to load profile. Please try again."
SUBMIT_ERROR = "Failed to analyze responses. Please try again."
SESSION_TTL = timedelta(hours=12)


class SessionStep(str, Enum):
    loading = "loading"
    intro = "intro"
    assessment = "assessment"
    submitting = "submitting"
    results = "results"
    completed = "completed"


class SessionStateError(ValueError):
    pass


class ProfileIncompleteError(ValueError):
    pass


def answer_satisfies(question: dict[str, Any], value: Any) -> bool:
    if not question.get("required"):
        return True
    if question.get("type") == "multi-select":
        return isinstance(value, list) and len(value) > 0
    return value is not None and value != ""


@dataclass
class AssessmentSession:
    user_id: str
    id: str = field(default_factory=lambda: uuid4().hex)
    step: SessionStep = SessionStep.loading
    profile: dict[str, Any] = field(default_factory=dict)
    question_set: dict[str, Any] | None = None
    current_index: int = 0
    responses: dict[str, Any] = field(default_factory=dict)
    analysis: dict[str, Any] | None = None
    results: dict[str, Any] | None = None
    error: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def questions(self) -> list[dict[str, Any]]:
        questions = (self.question_set or {}).get("questions") or []
        return [question for question in questions if isinstance(question, dict)]

    @property
    def current_question(self) -> dict[str, Any] | None:
        if self.step != SessionStep.assessment:
            return None
        questions = self.questions
        if 0 <= self.current_index < len(questions):
            return questions[self.current_index]
        return None

    @property
    def is_last_question(self) -> bool:
        return self.current_index >= len(self.questions) - 1

    def can_proceed(self) -> bool:
        question = self.current_question
        if question is None:
            return False
        return answer_satisfies(question, self.responses.get(str(question.get("id"))))

    def _require(self, *steps: SessionStep) -> None:
        if self.step not in steps:
            allowed = ", ".join(step.value for step in steps)
            raise SessionStateError(f"Action not allowed in step '{self.step.value}' (expected {allowed})")

    def load_questions(self, question_set: dict[str, Any]) -> None:
        self.question_set = question_set
        self.current_index = 0
        self.step = SessionStep.intro

    def start(self) -> None:
        self._require(SessionStep.intro)
        if not self.questions:
            raise SessionStateError("No assessment questions are available")
        self.step = SessionStep.assessment
        self.current_index = 0
        self.error = None

    def answer(self, question_id: str, value: Any) -> None:
        self._require(SessionStep.assessment)
        known_ids = {str(question.get("id")) for question in self.questions}
        if question_id not in known_ids:
            raise SessionStateError(f"Unknown question '{question_id}'")
        self.responses[question_id] = value

    def advance(self) -> bool:
        """Move to the next question; returns True when the last answer was accepted for submission."""
        self._require(SessionStep.assessment)
        if not self.can_proceed():
            raise SessionStateError("Current question requires an answer")
        if self.is_last_question:
            self.step = SessionStep.submitting
            return True
        self.current_index += 1
        return False

    def back(self) -> None:
        self._require(SessionStep.assessment)
        if self.current_index > 0:
            self.current_index -= 1

    def finish(self, analysis: dict[str, Any], results: dict[str, Any]) -> None:
        self._require(SessionStep.submitting)
        self.analysis = analysis
        self.results = results
        self.error = None
        self.step = SessionStep.results

    def fail_submission(self, message: str) -> None:
        self._require(SessionStep.submitting)
        self.error = message
        self.step = SessionStep.assessment

    def reset_for_retake(self) -> None:
        self._require(SessionStep.results, SessionStep.completed, SessionStep.intro)
        self.step = SessionStep.intro
        self.current_index = 0
        self.responses = {}
        self.analysis = None
        self.error = None


class SessionRegistry:
    def __init__(self) -> None:
        self._sessions: dict[str, AssessmentSession] = {}
        self._lock = Lock()

    def add(self, session: AssessmentSession) -> AssessmentSession:
        cutoff = datetime.utcnow() - SESSION_TTL
        with self._lock:
            for stale_id in [key for key, value in self._sessions.items() if value.created_at < cutoff]:
                del self._sessions[stale_id]
            self._sessions[session.id] = session
        return session

    def get(self, session_id: str, user_id: str) -> AssessmentSession | None:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None or session.user_id != user_id:
            return None
        return session

    def discard(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()


session_registry = SessionRegistry()


def open_session(
    db: Session,
    user_id: str,
    requester: AssessmentRequester,
    registry: SessionRegistry = session_registry,
) -> AssessmentSession:
    session = registry.add(AssessmentSession(user_id=user_id))
    try:
        user = get_user_record(db, user_id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Profile load failed for user %s", user_id)
        session.error = PROFILE_LOAD_ERROR
        session.step = SessionStep.intro
        return session

    if user is None or not user.profile_completed:
        registry.discard(session.id)
        raise ProfileIncompleteError("Complete your profile before taking the assessment")

    session.profile = profile_payload(user)
    if user.assessment_results:
        session.results = user.assessment_results
        session.step = SessionStep.completed
        return session

    session.load_questions(requester.request_question_set(session.profile))
    return session


def submit_session(
    db: Session,
    session: AssessmentSession,
    requester: AssessmentRequester,
) -> AssessmentSession:
    analysis = requester.request_analysis(session.profile, session.responses)
    try:
        user = get_user_record(db, session.user_id)
        if user is None:
            raise ProfileIncompleteError("User profile not found")
        results = save_assessment(db, user, responses=session.responses, analysis=analysis)
    except (SQLAlchemyError, TypeError, ValueError):
        db.rollback()
        logger.exception("Saving assessment failed for user %s", session.user_id)
        session.fail_submission(SUBMIT_ERROR)
        return session
    session.finish(analysis, results)
    return session


def advance_session(
    db: Session,
    session: AssessmentSession,
    requester: AssessmentRequester,
) -> AssessmentSession:
    if session.advance():
        submit_session(db, session, requester)
    return session


def retake_session(session: AssessmentSession, requester: AssessmentRequester) -> AssessmentSession:
    session.reset_for_retake()
    if not session.questions:
        session.load_questions(requester.request_question_set(session.profile))
    return session


def serialize_session(session: AssessmentSession) -> dict[str, Any]:
    return {
        "session_id": session.id,
        "step": session.step.value,
        "question_set": session.question_set,
        "current_index": session.current_index,
        "total_questions": len(session.questions),
        "current_question": session.current_question,
        "can_proceed": session.can_proceed(),
        "responses": session.responses,
        "analysis": session.analysis,
        "results": session.results,
        "error": session.error,
    }
