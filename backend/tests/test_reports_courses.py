from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skill_bridge.services.courses import (
    course_categories,
    default_courses,
    filter_courses,
    score_courses,
)
from skill_bridge.services.reports import (
    career_recommendations,
    industry_insights,
    learning_path,
    skill_gap_analysis,
)

RESULTS = {
    "topCareerMatches": [
        {
            "career": "UX/UI Designer",
            "matchPercentage": 88,
            "requiredSkills": ["Figma Prototyping", "Python"],
            "industryTrends": {"growth": "Positive", "demand": "High", "averageSalary": "₹5-15 LPA"},
        },
        {"career": "Content Creator", "matchPercentage": 72, "requiredSkills": ["Writing"]},
        {"career": "Photographer", "matchPercentage": 60, "requiredSkills": []},
    ],
    "skillGaps": ["Figma", "Data Storytelling", "Writing", "SEO"],
    "recommendedLearningPath": [],
    "personalityType": "Creative",
    "interests": ["Design"],
}


def test_recommendation_priorities():
    recommendations = career_recommendations(RESULTS)
    assert [(item["career"], item["priority"]) for item in recommendations] == [
        ("UX/UI Designer", "high"),
        ("Content Creator", "medium"),
        ("Photographer", "low"),
    ]
    assert recommendations[0]["reason"] == "Excellent match for your skills and interests"


def test_skill_gap_importance_and_learning_time():
    gaps = {gap["skill"]: gap for gap in skill_gap_analysis(RESULTS)}
    assert gaps["Figma"]["importance"] == "critical"
    # Writing is only required by a career matched below 80.
    assert gaps["Writing"]["importance"] == "important"
    assert gaps["Data Storytelling"]["time_to_learn"] == "3-6 months"
    assert gaps["SEO"]["time_to_learn"] == "1-3 months"
    assert gaps["Data Storytelling"]["resources"][0]["url"] == "/courses?search=Data%20Storytelling"
    assert gaps["SEO"]["resources"][1] == {"type": "practice", "title": "SEO Practice Projects"}


def test_learning_path_phases_use_skill_gaps():
    phases = learning_path(RESULTS)
    assert [phase["duration"] for phase in phases] == ["3 months", "5 months", "4 months"]
    assert phases[0]["skills"] == ["Figma", "Data Storytelling", "Writing"]
    assert phases[1]["skills"] == ["SEO"]
    assert learning_path({}) == []


def test_industry_insights_from_top_match():
    insights = industry_insights(RESULTS)
    assert insights["key_skills"] == ["Figma Prototyping", "Python"]
    assert insights["average_salary"] == "₹5-15 LPA"
    assert insights["job_growth"] == "Positive"
    assert industry_insights({})["outlook"] == "Assessment needed"


def test_courses_ranked_by_relevance():
    results = {
        "skillGaps": ["Figma"],
        "topCareerMatches": [{"requiredSkills": ["Python", "Figma"]}],
    }
    ranked = score_courses(results)
    assert [(course["id"], course["relevance_score"]) for course in ranked[:3]] == [
        ("ux-design", 30),
        ("ds-python", 10),
        ("ml-fundamentals", 10),
    ]
    assert ranked[-1]["relevance_score"] == 0


def test_course_filters():
    courses = score_courses(RESULTS)
    assert {course["id"] for course in filter_courses(courses, search="python")} == {"ds-python", "ml-fundamentals"}
    assert [course["id"] for course in filter_courses(courses, category="Design")] == ["ux-design"]
    assert all(course["difficulty"] == "Intermediate" for course in filter_courses(courses, difficulty="Intermediate"))
    assert len(filter_courses(courses, category="all", difficulty="all")) == 6


def test_default_catalog():
    courses = default_courses()
    assert [course["id"] for course in courses] == ["programming-basics", "business-basics"]
    assert course_categories(courses) == ["Programming", "Business"]
