"""Projection of raw analyses into the normalized result used by report views."""
from __future__ import annotations

import calendar
from datetime import datetime, timezone
from typing import Any

from skill_bridge.core.config import settings

PERSONALITY_TYPE_CHARS = 100
PROGRESS_COMPONENTS = 5


def iso_timestamp(value: datetime | None = None) -> str:
    stamp = value or datetime.utcnow()
    if stamp.tzinfo is not None:
        stamp = stamp.astimezone(timezone.utc).replace(tzinfo=None)
    return stamp.isoformat(timespec="milliseconds") + "Z"


def parse_timestamp(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def months_before(moment: datetime, months: int) -> datetime:
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def _industry_trends(career: dict[str, Any]) -> dict[str, str]:
    return {
        "growth": "Positive",
        "demand": "High",
        "averageSalary": career.get("averageSalary") or "Competitive",
    }


def _learning_path(action_plan: list[dict[str, Any]], empty_actions: str) -> list[str]:
    path = []
    for plan in action_plan:
        actions = _as_list(plan.get("actions"))
        joined = ", ".join(str(action) for action in actions) or empty_actions
        path.append(f"{plan.get('timeline', '')}: {joined}")
    return path


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _personality_type(overall: Any) -> str:
    if not isinstance(overall, str):
        return "Analytical"
    return overall[:PERSONALITY_TYPE_CHARS] or "Analytical"


def normalize_analysis(
    analysis: dict[str, Any] | None,
    interests: list[str] | None = None,
    completed_at: datetime | None = None,
) -> dict[str, Any]:
    """Build the normalized AssessmentResult from a freshly produced analysis."""
    analysis = analysis or {}
    careers = [career for career in _as_list(analysis.get("recommendedCareers")) if isinstance(career, dict)]
    return {
        "topCareerMatches": [
            {
                "career": career.get("title"),
                "matchPercentage": career.get("match"),
                "requiredSkills": _as_list(career.get("keySkills")),
                "industryTrends": _industry_trends(career),
            }
            for career in careers
        ],
        "skillGaps": _as_list(analysis.get("skillDevelopment")),
        "recommendedLearningPath": _learning_path(
            [plan for plan in _as_list(analysis.get("actionPlan")) if isinstance(plan, dict)],
            "",
        ),
        "personalityType": _personality_type(analysis.get("overallAnalysis")),
        "interests": list(interests or []),
        "completedAt": iso_timestamp(completed_at),
    }


def migrate_assessment_results(
    legacy: dict[str, Any] | None,
    completed_at: datetime | None = None,
) -> dict[str, Any]:
    """Reshape a legacy raw analysis into the normalized form.

    `completedAt` comes from the legacy record when it is known; otherwise
    the migration time is stamped.
    """
    if not legacy:
        return {
            "topCareerMatches": [],
            "skillGaps": [],
            "recommendedLearningPath": [],
            "personalityType": "Unknown",
            "interests": [],
            "completedAt": iso_timestamp(completed_at),
        }

    careers = [career for career in _as_list(legacy.get("recommendedCareers")) if isinstance(career, dict)]
    return {
        "topCareerMatches": [
            {
                "career": career.get("title") or "Unknown Career",
                "matchPercentage": career.get("match") or 70,
                "requiredSkills": _as_list(career.get("keySkills")),
                "industryTrends": _industry_trends(career),
            }
            for career in careers
        ],
        "skillGaps": _as_list(legacy.get("skillDevelopment")),
        "recommendedLearningPath": _learning_path(
            [plan for plan in _as_list(legacy.get("actionPlan")) if isinstance(plan, dict)],
            "Continue learning",
        ),
        "personalityType": _personality_type(legacy.get("overallAnalysis")),
        "interests": [],
        "completedAt": iso_timestamp(completed_at),
    }


def validate_assessment_results(results: Any) -> bool:
    if not isinstance(results, dict):
        return False
    return (
        isinstance(results.get("topCareerMatches"), list)
        and isinstance(results.get("skillGaps"), list)
        and isinstance(results.get("recommendedLearningPath"), list)
        and isinstance(results.get("personalityType"), str)
        and isinstance(results.get("interests"), list)
    )


def should_retake_assessment(results: dict[str, Any], now: datetime | None = None) -> bool:
    completed = parse_timestamp((results or {}).get("completedAt"))
    if completed is None:
        return True
    reference = parse_timestamp(now) or datetime.utcnow()
    cutoff = months_before(reference, settings.assessment_retake_months)
    return completed < cutoff


def get_assessment_progress(results: dict[str, Any] | None) -> int:
    if not results:
        return 0
    score = sum(
        1
        for present in (
            results.get("topCareerMatches"),
            results.get("skillGaps"),
            results.get("personalityType"),
            results.get("interests"),
            results.get("recommendedLearningPath"),
        )
        if present
    )
    return round(score / PROGRESS_COMPONENTS * 100)
