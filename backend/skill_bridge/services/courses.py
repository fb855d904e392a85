from __future__ import annotations

from copy import deepcopy
from typing import Any

SKILL_GAP_POINTS = 20
REQUIRED_SKILL_POINTS = 10

PERSONALIZED_CATALOG: list[dict[str, Any]] = [
    {
        "id": "ds-python",
        "title": "Python for Data Science",
        "description": "Master Python programming for data analysis, visualization, and machine learning.",
        "provider": "DataCamp",
        "duration": "40 hours",
        "difficulty": "Beginner",
        "rating": 4.7,
        "students": 45000,
        "price": 49,
        "currency": "USD",
        "skills": ["Python", "Data Analysis", "Pandas", "NumPy"],
        "category": "Data Science",
        "url": "https://datacamp.com",
        "certificate": True,
    },
    {
        "id": "ml-fundamentals",
        "title": "Machine Learning Fundamentals",
        "description": "Learn the core concepts of machine learning with hands-on projects.",
        "provider": "Coursera",
        "duration": "60 hours",
        "difficulty": "Intermediate",
        "rating": 4.8,
        "students": 32000,
        "price": 79,
        "currency": "USD",
        "skills": ["Machine Learning", "Statistics", "Python", "Scikit-learn"],
        "category": "Data Science",
        "url": "https://coursera.org",
        "certificate": True,
    },
    {
        "id": "react-development",
        "title": "Complete React Developer Course",
        "description": "Build modern web applications with React, Redux, and TypeScript.",
        "provider": "Udemy",
        "duration": "50 hours",
        "difficulty": "Intermediate",
        "rating": 4.6,
        "students": 28000,
        "price": 89,
        "currency": "USD",
        "skills": ["React", "JavaScript", "TypeScript", "Redux"],
        "category": "Web Development",
        "url": "https://udemy.com",
        "certificate": True,
    },
    {
        "id": "digital-marketing",
        "title": "Digital Marketing Strategy",
        "description": "Learn to create and execute effective digital marketing campaigns.",
        "provider": "LinkedIn Learning",
        "duration": "25 hours",
        "difficulty": "Beginner",
        "rating": 4.5,
        "students": 18000,
        "price": 39,
        "currency": "USD",
        "skills": ["Digital Marketing", "SEO", "Social Media", "Analytics"],
        "category": "Marketing",
        "url": "https://linkedin.com/learning",
        "certificate": True,
    },
    {
        "id": "ux-design",
        "title": "UX/UI Design Masterclass",
        "description": "Design user-friendly interfaces and create amazing user experiences.",
        "provider": "Figma Academy",
        "duration": "35 hours",
        "difficulty": "Beginner",
        "rating": 4.9,
        "students": 22000,
        "price": 69,
        "currency": "USD",
        "skills": ["UX Design", "UI Design", "Figma", "Prototyping"],
        "category": "Design",
        "url": "https://figma.com",
        "certificate": True,
    },
    {
        "id": "aws-fundamentals",
        "title": "AWS Cloud Practitioner",
        "description": "Get started with Amazon Web Services and cloud computing concepts.",
        "provider": "AWS Training",
        "duration": "20 hours",
        "difficulty": "Beginner",
        "rating": 4.4,
        "students": 15000,
        "price": 199,
        "currency": "USD",
        "skills": ["AWS", "Cloud Computing", "DevOps", "Infrastructure"],
        "category": "Cloud Computing",
        "url": "https://aws.amazon.com/training",
        "certificate": True,
    },
]

DEFAULT_CATALOG: list[dict[str, Any]] = [
    {
        "id": "programming-basics",
        "title": "Programming Fundamentals",
        "description": "Learn the basics of programming with multiple languages and concepts.",
        "provider": "freeCodeCamp",
        "duration": "30 hours",
        "difficulty": "Beginner",
        "rating": 4.6,
        "students": 50000,
        "price": 0,
        "currency": "USD",
        "skills": ["Programming", "Logic", "Problem Solving"],
        "category": "Programming",
        "url": "https://freecodecamp.org",
        "certificate": True,
    },
    {
        "id": "business-basics",
        "title": "Introduction to Business",
        "description": "Understand fundamental business concepts and principles.",
        "provider": "Khan Academy",
        "duration": "20 hours",
        "difficulty": "Beginner",
        "rating": 4.3,
        "students": 25000,
        "price": 0,
        "currency": "USD",
        "skills": ["Business", "Management", "Strategy"],
        "category": "Business",
        "url": "https://khanacademy.org",
        "certificate": False,
    },
]


def _covers(course: dict[str, Any], needle: str) -> bool:
    lowered = needle.lower()
    return any(lowered in skill.lower() for skill in course["skills"])


def score_courses(results: dict[str, Any]) -> list[dict[str, Any]]:
    """Rank the catalog by how many skill gaps and required skills each course covers."""
    required = [
        str(skill)
        for match in (results.get("topCareerMatches") or [])
        if isinstance(match, dict)
        for skill in (match.get("requiredSkills") or [])
    ]
    gaps = [str(gap) for gap in (results.get("skillGaps") or [])]

    scored = []
    for course in deepcopy(PERSONALIZED_CATALOG):
        score = sum(SKILL_GAP_POINTS for gap in gaps if _covers(course, gap))
        score += sum(REQUIRED_SKILL_POINTS for skill in required if _covers(course, skill))
        course["relevance_score"] = score
        scored.append(course)
    # sorted() is stable, so ties keep catalog order.
    return sorted(scored, key=lambda course: course["relevance_score"], reverse=True)


def default_courses() -> list[dict[str, Any]]:
    return deepcopy(DEFAULT_CATALOG)


def filter_courses(
    courses: list[dict[str, Any]],
    *,
    search: str | None = None,
    category: str | None = None,
    difficulty: str | None = None,
) -> list[dict[str, Any]]:
    filtered = courses
    if search:
        needle = search.lower()
        filtered = [
            course
            for course in filtered
            if needle in course["title"].lower()
            or needle in course["description"].lower()
            or _covers(course, needle)
        ]
    if category and category != "all":
        filtered = [course for course in filtered if course["category"] == category]
    if difficulty and difficulty != "all":
        filtered = [course for course in filtered if course["difficulty"] == difficulty]
    return filtered


def course_categories(courses: list[dict[str, Any]]) -> list[str]:
    return list(dict.fromkeys(course["category"] for course in courses))
