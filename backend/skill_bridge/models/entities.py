from enum import Enum
from uuid import uuid4
from datetime import datetime
from sqlalchemy import JSON, Column, String, Text, Boolean, Integer, DateTime
from skill_bridge.core.database import Base


def _uuid_str() -> str:
    return str(uuid4())


class EducationStage(str, Enum):
    tenth_completed = "10th-completed"
    tenth_appearing = "10th-appearing"
    twelfth_completed = "12th-completed"
    twelfth_appearing = "12th-appearing"
    diploma = "diploma"
    graduation_pursuing = "graduation-pursuing"
    graduation_completed = "graduation-completed"
    postgraduation_pursuing = "postgraduation-pursuing"
    postgraduation_completed = "postgraduation-completed"
    working_professional = "working-professional"
    career_gap = "career-gap"
    other = "other"


class UserRecord(Base):
    """Profile document for one account, with the embedded normalized assessment result."""

    __tablename__ = "users"

    user_id = Column(String(120), primary_key=True)
    email = Column(String(255), nullable=True)
    display_name = Column(String(160), nullable=True)
    age = Column(Integer, nullable=True)
    course = Column(String(40), nullable=True)
    stream = Column(String(40), nullable=True)
    interests = Column(JSON, nullable=False, default=list)
    location = Column(String(160), nullable=True)
    phone = Column(String(40), nullable=True)
    profile_completed = Column(Boolean, default=False, nullable=False)
    assessment_results = Column(JSON, nullable=True)
    assessment_completed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class AssessmentRecord(Base):
    """Raw analysis and responses of the latest submission; overwritten on retake."""

    __tablename__ = "assessments"

    user_id = Column(String(120), primary_key=True)
    responses = Column(JSON, nullable=False, default=dict)
    analysis = Column(JSON, nullable=True)
    completed_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class StudentAccount(Base):
    __tablename__ = "student_accounts"

    id = Column(String(36), primary_key=True, default=_uuid_str)
    username = Column(String(120), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=True, unique=True, index=True)
    password_salt = Column(String(200), nullable=False)
    password_hash = Column(String(200), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    last_login_at = Column(DateTime, nullable=True)


class AuthSession(Base):
    __tablename__ = "auth_sessions"

    id = Column(String(36), primary_key=True, default=_uuid_str)
    user_id = Column(String(120), nullable=False, index=True)
    refresh_token_hash = Column(String(128), nullable=False, unique=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    expires_at = Column(DateTime, nullable=False)
    revoked_at = Column(DateTime, nullable=True)
    ip_address = Column(String(64), nullable=True)
    user_agent = Column(Text, nullable=True)
