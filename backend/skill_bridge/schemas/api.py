from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union


AnswerValue = Union[int, float, str, List[str]]


class AuthRegisterIn(BaseModel):
    username: str
    email: Optional[str] = None
    password: str
    display_name: Optional[str] = None


class AuthLoginIn(BaseModel):
    username: str
    password: str


class AuthOut(BaseModel):
    user_id: str
    auth_token: Optional[str] = None
    refresh_token: Optional[str] = None
    access_expires_at: Optional[datetime] = None
    refresh_expires_at: Optional[datetime] = None
    profile_completed: bool = False


class AuthRefreshIn(BaseModel):
    refresh_token: str


class AuthLogoutIn(BaseModel):
    refresh_token: str


class AuthActionOut(BaseModel):
    ok: bool
    message: str


class AuthMeOut(BaseModel):
    user_id: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    profile_completed: bool = False


class UserProfileIn(BaseModel):
    display_name: Optional[str] = None
    age: Optional[int] = None
    course: Optional[str] = None
    stream: Optional[str] = None
    interests: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    phone: Optional[str] = None


class UserProfileOut(BaseModel):
    user_id: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    age: Optional[int] = None
    course: Optional[str] = None
    stream: Optional[str] = None
    interests: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    phone: Optional[str] = None
    profile_completed: bool = False
    has_assessment_results: bool = False
    created_at: datetime
    updated_at: datetime


class OptionOut(BaseModel):
    value: str
    label: str


class ProfileOptionsOut(BaseModel):
    courses: List[OptionOut]
    streams: Dict[str, List[OptionOut]]
    interests: List[str]


class GenerateAssessmentIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: Optional[str] = None
    user_profile: Optional[Dict[str, Any]] = Field(default=None, alias="userProfile")


class GenerateAnalysisIn(GenerateAssessmentIn):
    responses: Optional[Dict[str, Any]] = None


class AnswerIn(BaseModel):
    value: Optional[AnswerValue] = None


class AssessmentSessionOut(BaseModel):
    session_id: str
    step: str
    question_set: Optional[Dict[str, Any]] = None
    current_index: int = 0
    total_questions: int = 0
    current_question: Optional[Dict[str, Any]] = None
    can_proceed: bool = False
    responses: Dict[str, Any] = Field(default_factory=dict)
    analysis: Optional[Dict[str, Any]] = None
    results: Optional[Dict[str, Any]] = None
    error: Optional[str] = None


class AssessmentStatusOut(BaseModel):
    completed: bool
    results: Optional[Dict[str, Any]] = None
    needs_retake: bool
    progress: int = 0


class CareerRecommendationOut(BaseModel):
    career: str
    match_percentage: float
    priority: str
    reason: str


class ResourceOut(BaseModel):
    type: str
    title: str
    url: Optional[str] = None


class SkillGapOut(BaseModel):
    skill: str
    importance: str
    time_to_learn: str
    resources: List[ResourceOut]


class LearningResourceOut(BaseModel):
    type: str
    title: str
    priority: str


class LearningPhaseOut(BaseModel):
    phase: str
    duration: str
    skills: List[str]
    milestones: List[str]
    resources: List[LearningResourceOut]


class IndustryInsightsOut(BaseModel):
    trends: List[str]
    outlook: str
    key_skills: List[str]
    average_salary: str
    job_growth: str


class CourseOut(BaseModel):
    id: str
    title: str
    description: str
    provider: str
    duration: str
    difficulty: str
    rating: float
    students: int
    price: float
    currency: str
    skills: List[str]
    category: str
    url: str
    certificate: bool
    relevance_score: Optional[int] = None


class CourseListOut(BaseModel):
    personalized: bool
    categories: List[str]
    courses: List[CourseOut]


class CollegeOut(BaseModel):
    id: str
    name: str
    location: str
    state: str
    type: str
    courses: List[str]
    nirf_ranking: Optional[int] = None
    fees: str
    seats: int
    cutoff: str
    website: str
    established: int
    accreditation: List[str]
    facilities: List[str]
    relevance_score: Optional[int] = None


class CollegeListOut(BaseModel):
    personalized: bool
    states: List[str]
    types: List[str]
    colleges: List[CollegeOut]


class ExamOut(BaseModel):
    id: str
    name: str
    full_name: str
    type: str
    conducted_by: str
    application_start: str
    application_end: str
    exam_date: str
    result_date: str
    eligibility: str
    pattern: str
    syllabus: List[str]
    website: str
    fees: str
    is_recommended: bool = False
    relevance_score: Optional[int] = None


class ExamListOut(BaseModel):
    personalized: bool
    types: List[str]
    exams: List[ExamOut]


class LibraryResourceOut(BaseModel):
    id: str
    title: str
    description: str
    type: str
    category: str
    tags: List[str]
    author: str
    published_date: str
    read_time: str
    download_url: Optional[str] = None
    external_url: Optional[str] = None
    is_premium: bool
    rating: float
    downloads: int
    relevance_score: Optional[int] = None


class LibraryResourceListOut(BaseModel):
    personalized: bool
    categories: List[str]
    types: List[str]
    featured: List[LibraryResourceOut]
    resources: List[LibraryResourceOut]


class CareerPathActionOut(BaseModel):
    type: str
    title: str
    description: str
    url: Optional[str] = None


class CareerPathStepOut(BaseModel):
    id: str
    title: str
    description: str
    duration: str
    difficulty: str
    skills_required: List[str]
    skills_gained: List[str]
    average_salary: str
    job_titles: List[str]
    actions: List[CareerPathActionOut]
    prerequisites: List[str]
    is_current_step: bool
    is_completed: bool


class CareerPathOut(BaseModel):
    id: str
    title: str
    description: str
    industry: str
    match_percentage: int
    total_duration: str
    average_starting_salary: str
    average_mid_level_salary: str
    average_senior_salary: str
    job_growth_rate: str
    steps: List[CareerPathStepOut]


class CareerPathListOut(BaseModel):
    personalized: bool
    paths: List[CareerPathOut]
