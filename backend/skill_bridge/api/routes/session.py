from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from skill_bridge.api.deps import get_current_user_id, get_db, get_requester
from skill_bridge.schemas.api import AnswerIn, AssessmentSessionOut
from skill_bridge.services.requester import AssessmentRequester
from skill_bridge.services.session import (
    AssessmentSession,
    ProfileIncompleteError,
    SessionStateError,
    advance_session,
    open_session,
    retake_session,
    serialize_session,
    session_registry,
)

router = APIRouter(prefix="/assessment/sessions")


def _load_session(session_id: str, user_id: str) -> AssessmentSession:
    session = session_registry.get(session_id, user_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Assessment session not found")
    return session


@router.post("", response_model=AssessmentSessionOut)
def create_session(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    requester: AssessmentRequester = Depends(get_requester),
):
    try:
        session = open_session(db, user_id, requester)
    except ProfileIncompleteError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return serialize_session(session)


@router.get("/{session_id}", response_model=AssessmentSessionOut)
def get_session(session_id: str, user_id: str = Depends(get_current_user_id)):
    return serialize_session(_load_session(session_id, user_id))


@router.post("/{session_id}/start", response_model=AssessmentSessionOut)
def start_session(session_id: str, user_id: str = Depends(get_current_user_id)):
    session = _load_session(session_id, user_id)
    try:
        session.start()
    except SessionStateError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return serialize_session(session)


@router.put("/{session_id}/responses/{question_id}", response_model=AssessmentSessionOut)
def answer_question(
    session_id: str,
    question_id: str,
    payload: AnswerIn,
    user_id: str = Depends(get_current_user_id),
):
    session = _load_session(session_id, user_id)
    try:
        session.answer(question_id, payload.value)
    except SessionStateError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return serialize_session(session)


@router.post("/{session_id}/next", response_model=AssessmentSessionOut)
def next_question(
    session_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    requester: AssessmentRequester = Depends(get_requester),
):
    session = _load_session(session_id, user_id)
    try:
        advance_session(db, session, requester)
    except SessionStateError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return serialize_session(session)


@router.post("/{session_id}/previous", response_model=AssessmentSessionOut)
def previous_question(session_id: str, user_id: str = Depends(get_current_user_id)):
    session = _load_session(session_id, user_id)
    try:
        session.back()
    except SessionStateError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return serialize_session(session)


@router.post("/{session_id}/retake", response_model=AssessmentSessionOut)
def retake(
    session_id: str,
    user_id: str = Depends(get_current_user_id),
    requester: AssessmentRequester = Depends(get_requester),
):
    session = _load_session(session_id, user_id)
    try:
        retake_session(session, requester)
    except SessionStateError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return serialize_session(session)
