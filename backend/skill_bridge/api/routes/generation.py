import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from skill_bridge.api.deps import get_current_user_id, get_generation_client
from skill_bridge.core.ratelimit import ai_rate_limiter
from skill_bridge.schemas.api import GenerateAnalysisIn, GenerateAssessmentIn
from skill_bridge.services.assessment import generate_analysis, generate_question_set

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/generate")


@router.post("/assessment")
def generate_assessment(
    payload: GenerateAssessmentIn,
    user_id: str = Depends(get_current_user_id),
    client=Depends(get_generation_client),
):
    if not payload.prompt or payload.user_profile is None:
        return JSONResponse(status_code=400, content={"error": "Prompt and user profile are required"})
    ai_rate_limiter.check(f"user:{user_id}:generate")
    logger.info("Generating question set for user %s", user_id)
    return {"assessment": generate_question_set(payload.prompt, client=client)}


@router.post("/analysis")
def generate_assessment_analysis(
    payload: GenerateAnalysisIn,
    user_id: str = Depends(get_current_user_id),
    client=Depends(get_generation_client),
):
    if not payload.prompt or payload.user_profile is None or payload.responses is None:
        return JSONResponse(
            status_code=400,
            content={"error": "Prompt, user profile, and responses are required"},
        )
    ai_rate_limiter.check(f"user:{user_id}:generate")
    logger.info("Generating analysis for user %s", user_id)
    return {"analysis": generate_analysis(payload.prompt, client=client)}
