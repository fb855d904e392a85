from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from skill_bridge.models.entities import EducationStage, UserRecord

MIN_AGE = 10
MAX_AGE = 100

COURSE_LABELS: dict[str, str] = {
    EducationStage.tenth_completed.value: "10th Class Completed",
    EducationStage.tenth_appearing.value: "Currently in 10th Class",
    EducationStage.twelfth_completed.value: "12th Class Completed",
    EducationStage.twelfth_appearing.value: "Currently in 12th Class",
    EducationStage.diploma.value: "Diploma Course",
    EducationStage.graduation_pursuing.value: "Currently in Graduation",
    EducationStage.graduation_completed.value: "Graduation Completed",
    EducationStage.postgraduation_pursuing.value: "Currently in Post Graduation",
    EducationStage.postgraduation_completed.value: "Post Graduation Completed",
    EducationStage.working_professional.value: "Working Professional",
    EducationStage.career_gap.value: "Career Gap",
    EducationStage.other.value: "Other",
}

_SCHOOL_STREAMS = {
    "science-pcm": "Science (Physics, Chemistry, Maths)",
    "science-pcb": "Science (Physics, Chemistry, Biology)",
    "commerce": "Commerce",
    "arts": "Arts/Humanities",
    "vocational": "Vocational",
}

_GRADUATION_STREAMS = {
    "engineering": "Engineering",
    "medical": "Medical/MBBS",
    "bsc": "B.Sc (Science)",
    "bca": "BCA (Computer Applications)",
    "bcom": "B.Com (Commerce)",
    "ba": "B.A (Arts)",
    "bba": "BBA (Business Administration)",
    "law": "Law (LLB)",
    "other": "Other",
}

STREAM_OPTIONS: dict[str, dict[str, str]] = {
    EducationStage.tenth_completed.value: {
        "science": "Science (PCM/PCB)",
        "commerce": "Commerce",
        "arts": "Arts/Humanities",
        "vocational": "Vocational Course",
    },
    EducationStage.twelfth_completed.value: _SCHOOL_STREAMS,
    EducationStage.twelfth_appearing.value: _SCHOOL_STREAMS,
    EducationStage.graduation_pursuing.value: _GRADUATION_STREAMS,
    EducationStage.graduation_completed.value: _GRADUATION_STREAMS,
}

INTEREST_OPTIONS = [
    "Technology & Programming",
    "Medicine & Healthcare",
    "Engineering & Innovation",
    "Business & Entrepreneurship",
    "Arts & Creative Design",
    "Teaching & Education",
    "Science & Research",
    "Finance & Banking",
    "Law & Legal Studies",
    "Media & Communication",
    "Sports & Fitness",
    "Travel & Tourism",
    "Agriculture & Environment",
    "Social Work & NGO",
    "Government & Civil Services",
    "Music & Entertainment",
    "Fashion & Beauty",
    "Food & Hospitality",
    "Real Estate & Construction",
    "Marketing & Advertising",
]


def profile_options() -> dict[str, Any]:
    return {
        "courses": [{"value": value, "label": label} for value, label in COURSE_LABELS.items()],
        "streams": {
            course: [{"value": value, "label": label} for value, label in options.items()]
            for course, options in STREAM_OPTIONS.items()
        },
        "interests": list(INTEREST_OPTIONS),
    }


def profile_issues(
    *,
    display_name: str | None,
    age: int | None,
    course: str | None,
    stream: str | None,
) -> list[str]:
    issues: list[str] = []
    if not (display_name or "").strip() or age is None or not course:
        issues.append("Please fill in all required fields")
        return issues
    if age < MIN_AGE or age > MAX_AGE:
        issues.append(f"Please enter a valid age between {MIN_AGE} and {MAX_AGE}")
    if course not in COURSE_LABELS:
        issues.append("Unknown education status")
    elif stream and course in STREAM_OPTIONS and stream not in STREAM_OPTIONS[course]:
        issues.append("Stream does not match the selected education status")
    return issues


def get_user_record(db: Session, user_id: str) -> UserRecord | None:
    return db.query(UserRecord).filter(UserRecord.user_id == user_id).one_or_none()


def ensure_user_record(
    db: Session,
    user_id: str,
    *,
    email: str | None = None,
    display_name: str | None = None,
) -> UserRecord:
    record = get_user_record(db, user_id)
    if record:
        return record
    now = datetime.utcnow()
    record = UserRecord(
        user_id=user_id,
        email=email,
        display_name=display_name,
        interests=[],
        profile_completed=False,
        created_at=now,
        updated_at=now,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def complete_profile(db: Session, record: UserRecord, fields: dict[str, Any]) -> UserRecord:
    record.display_name = (fields.get("display_name") or "").strip()
    record.age = fields.get("age")
    record.course = fields.get("course")
    record.stream = fields.get("stream") or ""
    record.interests = list(dict.fromkeys(fields.get("interests") or []))
    record.location = fields.get("location") or ""
    record.phone = fields.get("phone")
    record.profile_completed = True
    record.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(record)
    return record


def profile_payload(record: UserRecord) -> dict[str, Any]:
    """Profile fields in the shape sent to the generation prompts and handlers."""
    return {
        "displayName": record.display_name or "",
        "age": record.age,
        "course": record.course or "",
        "stream": record.stream or "",
        "interests": list(record.interests or []),
        "location": record.location or "",
    }


def serialize_profile(record: UserRecord) -> dict[str, Any]:
    return {
        "user_id": record.user_id,
        "email": record.email,
        "display_name": record.display_name,
        "age": record.age,
        "course": record.course,
        "stream": record.stream,
        "interests": list(record.interests or []),
        "location": record.location,
        "phone": record.phone,
        "profile_completed": record.profile_completed,
        "has_assessment_results": bool(record.assessment_results),
        "created_at": record.created_at,
        "updated_at": record.updated_at,
    }
