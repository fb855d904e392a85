from __future__ import annotations

from typing import Any
from urllib.parse import quote

HIGH_PRIORITY_MATCH = 85
MEDIUM_PRIORITY_MATCH = 70
CRITICAL_SKILL_MATCH = 80

INDUSTRY_TRENDS = [
    "Increasing demand for digital skills",
    "Remote work opportunities growing",
    "AI and automation changing job requirements",
    "Emphasis on continuous learning",
]


def _matches(results: dict[str, Any]) -> list[dict[str, Any]]:
    return [match for match in (results.get("topCareerMatches") or []) if isinstance(match, dict)]


def _match_value(match: dict[str, Any]) -> float:
    value = match.get("matchPercentage")
    return float(value) if isinstance(value, (int, float)) else 0.0


def career_recommendations(results: dict[str, Any]) -> list[dict[str, Any]]:
    recommendations = []
    for match in _matches(results):
        percentage = _match_value(match)
        if percentage >= HIGH_PRIORITY_MATCH:
            priority, reason = "high", "Excellent match for your skills and interests"
        elif percentage >= MEDIUM_PRIORITY_MATCH:
            priority, reason = "medium", "Good alignment with your profile"
        else:
            priority, reason = "low", "Based on your assessment results"
        recommendations.append(
            {
                "career": str(match.get("career") or ""),
                "match_percentage": percentage,
                "priority": priority,
                "reason": reason,
            }
        )
    return recommendations


def skill_gap_analysis(results: dict[str, Any]) -> list[dict[str, Any]]:
    high_match_skills = [
        str(skill).lower()
        for match in _matches(results)
        if _match_value(match) >= CRITICAL_SKILL_MATCH
        for skill in (match.get("requiredSkills") or [])
    ]
    gaps = []
    for skill in results.get("skillGaps") or []:
        label = str(skill)
        lowered = label.lower()
        critical = any(lowered in required for required in high_match_skills)
        slow_to_learn = "programming" in lowered or "data" in lowered
        gaps.append(
            {
                "skill": label,
                "importance": "critical" if critical else "important",
                "time_to_learn": "3-6 months" if slow_to_learn else "1-3 months",
                "resources": [
                    {
                        "type": "course",
                        "title": f"Learn {label}",
                        "url": f"/courses?search={quote(label, safe='')}",
                    },
                    {"type": "practice", "title": f"{label} Practice Projects"},
                ],
            }
        )
    return gaps


def learning_path(results: dict[str, Any]) -> list[dict[str, Any]]:
    if not _matches(results):
        return []
    gaps = [str(skill) for skill in (results.get("skillGaps") or [])]
    return [
        {
            "phase": "Foundation (Months 1-3)",
            "duration": "3 months",
            "skills": gaps[0:3] or ["Basic skills"],
            "milestones": [
                "Complete foundational courses",
                "Build first portfolio project",
                "Join relevant communities",
            ],
            "resources": [
                {"type": "course", "title": "Foundations Course", "priority": "high"},
                {"type": "project", "title": "Beginner Project", "priority": "high"},
            ],
        },
        {
            "phase": "Development (Months 4-8)",
            "duration": "5 months",
            "skills": gaps[3:6] or ["Intermediate skills"],
            "milestones": [
                "Complete intermediate projects",
                "Gain practical experience",
                "Start networking in the field",
            ],
            "resources": [
                {"type": "project", "title": "Advanced Project", "priority": "high"},
                {"type": "certification", "title": "Professional Certification", "priority": "medium"},
            ],
        },
        {
            "phase": "Specialization (Months 9-12)",
            "duration": "4 months",
            "skills": ["Advanced specialization", "Leadership", "Industry expertise"],
            "milestones": [
                "Complete capstone project",
                "Apply for target positions",
                "Become job-ready",
            ],
            "resources": [
                {"type": "project", "title": "Capstone Project", "priority": "high"},
                {"type": "course", "title": "Advanced Specialization", "priority": "medium"},
            ],
        },
    ]


def industry_insights(results: dict[str, Any]) -> dict[str, Any]:
    matches = _matches(results)
    if not matches:
        return {
            "trends": ["Complete your assessment to see industry insights"],
            "outlook": "Assessment needed",
            "key_skills": [],
            "average_salary": "N/A",
            "job_growth": "N/A",
        }
    top = matches[0]
    trends = top.get("industryTrends") or {}
    return {
        "trends": list(INDUSTRY_TRENDS),
        "outlook": "Positive growth expected in the coming years",
        "key_skills": [str(skill) for skill in (top.get("requiredSkills") or [])],
        "average_salary": trends.get("averageSalary") or "Competitive",
        "job_growth": trends.get("growth") or "Steady growth",
    }
