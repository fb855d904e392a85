from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from skill_bridge.api.deps import get_current_user_id, get_db
from skill_bridge.schemas.api import ProfileOptionsOut, UserProfileIn, UserProfileOut
from skill_bridge.services.profiles import (
    complete_profile,
    ensure_user_record,
    get_user_record,
    profile_issues,
    profile_options,
    serialize_profile,
)

router = APIRouter(prefix="/user")


@router.get("/profile/options", response_model=ProfileOptionsOut)
def get_profile_options():
    return profile_options()


@router.get("/profile", response_model=UserProfileOut)
def get_profile(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    record = get_user_record(db, user_id)
    if not record:
        raise HTTPException(status_code=404, detail="Profile not found")
    return serialize_profile(record)


@router.put("/profile", response_model=UserProfileOut)
def update_profile(
    payload: UserProfileIn,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    issues = profile_issues(
        display_name=payload.display_name,
        age=payload.age,
        course=payload.course,
        stream=payload.stream,
    )
    if issues:
        raise HTTPException(status_code=400, detail=issues[0])

    record = ensure_user_record(db, user_id)
    record = complete_profile(db, record, payload.model_dump())
    return serialize_profile(record)
