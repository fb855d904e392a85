from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from skill_bridge.api.deps import get_current_user_id, get_db
from skill_bridge.schemas.api import (
    AssessmentStatusOut,
    CareerPathListOut,
    CareerRecommendationOut,
    CollegeListOut,
    CourseListOut,
    ExamListOut,
    IndustryInsightsOut,
    LearningPhaseOut,
    LibraryResourceListOut,
    SkillGapOut,
)
from skill_bridge.services.career_paths import career_paths
from skill_bridge.services.colleges import (
    default_colleges,
    default_exams,
    distinct_values,
    filter_colleges,
    filter_exams,
    score_colleges,
    score_exams,
)
from skill_bridge.services.courses import course_categories, default_courses, filter_courses, score_courses
from skill_bridge.services.reports import (
    career_recommendations,
    industry_insights,
    learning_path,
    skill_gap_analysis,
)
from skill_bridge.services.resources import (
    RESOURCE_TYPES,
    default_resources,
    featured_resources,
    filter_resources,
    resource_categories,
    score_resources,
)
from skill_bridge.services.result_store import get_assessment_results, get_assessment_status

router = APIRouter(prefix="/user")


def _results_or_empty(db: Session, user_id: str) -> dict:
    return get_assessment_results(db, user_id) or {}


@router.get("/assessment/status", response_model=AssessmentStatusOut)
def assessment_status(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return get_assessment_status(db, user_id)


@router.get("/assessment/results")
def assessment_results(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    results = get_assessment_results(db, user_id)
    if not results:
        raise HTTPException(status_code=404, detail="No assessment results found")
    return results


@router.get("/assessment/recommendations", response_model=List[CareerRecommendationOut])
def assessment_recommendations(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return career_recommendations(_results_or_empty(db, user_id))


@router.get("/assessment/skill-gaps", response_model=List[SkillGapOut])
def assessment_skill_gaps(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return skill_gap_analysis(_results_or_empty(db, user_id))


@router.get("/assessment/learning-path", response_model=List[LearningPhaseOut])
def assessment_learning_path(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return learning_path(_results_or_empty(db, user_id))


@router.get("/assessment/insights", response_model=IndustryInsightsOut)
def assessment_insights(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return industry_insights(_results_or_empty(db, user_id))


@router.get("/courses", response_model=CourseListOut)
def list_courses(
    search: str | None = None,
    category: str | None = None,
    difficulty: str | None = None,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    results = get_assessment_results(db, user_id)
    personalized = bool(results and results.get("topCareerMatches"))
    courses = score_courses(results) if personalized else default_courses()
    return {
        "personalized": personalized,
        "categories": course_categories(courses),
        "courses": filter_courses(courses, search=search, category=category, difficulty=difficulty),
    }


@router.get("/colleges", response_model=CollegeListOut)
def list_colleges(
    search: str | None = None,
    state: str | None = None,
    type: str | None = None,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    results = get_assessment_results(db, user_id)
    colleges = score_colleges(results) if results else default_colleges()
    return {
        "personalized": bool(results),
        "states": distinct_values(colleges, "state"),
        "types": distinct_values(colleges, "type"),
        "colleges": filter_colleges(colleges, search=search, state=state, college_type=type),
    }


@router.get("/exams", response_model=ExamListOut)
def list_exams(
    search: str | None = None,
    type: str | None = None,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    results = get_assessment_results(db, user_id)
    exams = score_exams(results) if results else default_exams()
    return {
        "personalized": bool(results),
        "types": distinct_values(exams, "type"),
        "exams": filter_exams(exams, search=search, exam_type=type),
    }


@router.get("/resources", response_model=LibraryResourceListOut)
def list_resources(
    search: str | None = None,
    category: str | None = None,
    type: str | None = None,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    results = get_assessment_results(db, user_id)
    resources = score_resources(results) if results else default_resources()
    return {
        "personalized": bool(results),
        "categories": resource_categories(resources),
        "types": RESOURCE_TYPES,
        "featured": featured_resources(resources),
        "resources": filter_resources(resources, search=search, category=category, resource_type=type),
    }


@router.get("/career-paths", response_model=CareerPathListOut)
def list_career_paths(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    results = get_assessment_results(db, user_id)
    return {"personalized": bool(results), "paths": career_paths(results)}
