from __future__ import annotations

from copy import deepcopy
from typing import Any

STEM_KEYWORDS = ("technology", "science", "mathematics", "engineering", "programming")
BUSINESS_KEYWORDS = ("business", "management", "finance", "marketing")
CREATIVE_KEYWORDS = ("design", "art", "creative", "writing", "media")
ANALYTICAL_KEYWORDS = ("analysis", "problem", "logic")
DETAILED_ANSWER_MIN_CHARS = 50

BUCKET_STEM = "stem"
BUCKET_BUSINESS = "business"
BUCKET_CREATIVE = "creative"
BUCKET_GENERAL = "general"

_Q_SUBJECTS = {
    "id": "q1",
    "type": "mcq",
    "category": "Academic Preferences",
    "question": "Which type of subjects do you find most engaging?",
    "options": [
        "Mathematics and Logic",
        "Languages and Literature",
        "Science and Research",
        "Arts and Creativity",
    ],
    "required": True,
}
_Q_ENVIRONMENT = {
    "id": "q2",
    "type": "text",
    "category": "Career Goals",
    "question": "Describe your ideal work environment in 2-3 sentences.",
    "placeholder": "E.g., I prefer working in teams, outdoor settings, creative spaces...",
    "required": True,
}
_Q_BALANCE = {
    "id": "q3",
    "type": "scale",
    "category": "Work Preferences",
    "question": "How important is work-life balance to you?",
    "scaleRange": {
        "min": 1,
        "max": 10,
        "minLabel": "Not Important",
        "maxLabel": "Very Important",
    },
    "required": True,
}

HANDLER_QUESTION_SET: dict[str, Any] = {
    "title": "Career Assessment",
    "description": "Discover your ideal career path through this comprehensive assessment",
    "estimatedTime": 15,
    "questions": [_Q_SUBJECTS, _Q_ENVIRONMENT, _Q_BALANCE],
}

CLIENT_QUESTION_SET: dict[str, Any] = {
    "title": "Career Assessment",
    "description": "Discover your ideal career path through this comprehensive assessment",
    "estimatedTime": 15,
    "questions": [
        _Q_SUBJECTS,
        _Q_ENVIRONMENT,
        _Q_BALANCE,
        {
            "id": "q4",
            "type": "mcq",
            "category": "Personality",
            "question": "You prefer to work:",
            "options": ["Alone", "In small groups", "In large teams", "Varies by project"],
            "required": True,
        },
        {
            "id": "q5",
            "type": "multi-select",
            "category": "Skills",
            "question": "Which skills do you want to develop further? (Select all that apply)",
            "options": [
                "Technical Skills",
                "Leadership",
                "Communication",
                "Creative Skills",
                "Analytical Thinking",
                "Problem Solving",
            ],
            "required": True,
        },
    ],
}

HANDLER_ANALYSIS: dict[str, Any] = {
    "overallAnalysis": (
        "Based on your responses, you show strong analytical thinking and problem-solving abilities. "
        "You prefer structured environments and enjoy working with data and technology."
    ),
    "recommendedCareers": [
        {
            "title": "Software Developer",
            "match": 85,
            "description": "Your logical thinking and interest in technology make this a great fit",
            "growthPath": "Junior Developer → Senior Developer → Tech Lead → Engineering Manager",
            "averageSalary": "₹6-20 LPA",
            "keySkills": ["Programming", "Problem Solving", "Logical Thinking"],
            "educationPath": "B.Tech Computer Science or related field",
        },
        {
            "title": "Data Analyst",
            "match": 78,
            "description": "Your analytical skills and attention to detail suit data-driven roles",
            "growthPath": "Junior Analyst → Senior Analyst → Data Scientist → Analytics Manager",
            "averageSalary": "₹5-15 LPA",
            "keySkills": ["Data Analysis", "Statistics", "Critical Thinking"],
            "educationPath": "B.Sc Statistics/Mathematics or B.Tech with analytics specialization",
        },
    ],
    "courseRecommendations": [
        {
            "course": "B.Tech Computer Science",
            "institution": "Government Engineering Colleges/IITs/NITs",
            "duration": "4 years",
            "eligibility": "12th with PCM, JEE qualification",
            "careerOutcomes": ["Software Developer", "System Analyst", "Product Manager"],
        }
    ],
    "skillDevelopment": [
        "Programming Languages (Python, Java)",
        "Data Analysis and Statistics",
        "Problem Solving",
        "Communication Skills",
    ],
    "actionPlan": [
        {
            "timeline": "Next 3 months",
            "actions": [
                "Start learning a programming language (Python recommended)",
                "Complete online courses in data analysis",
                "Work on small projects to build portfolio",
            ],
        },
        {
            "timeline": "6-12 months",
            "actions": [
                "Apply for relevant degree programs",
                "Join coding communities and hackathons",
                "Build 2-3 substantial projects",
            ],
        },
        {
            "timeline": "1-2 years",
            "actions": [
                "Complete internships in target field",
                "Network with professionals",
                "Prepare for campus placements",
            ],
        },
    ],
    "scholarships": [
        "National Scholarship Portal schemes",
        "Merit-based scholarships in engineering colleges",
        "Industry-sponsored scholarships for STEM fields",
    ],
    "resources": [
        "Codecademy for programming basics",
        "Khan Academy for mathematics",
        "GitHub for project hosting",
        "LinkedIn Learning for professional skills",
    ],
}

CAREER_PAIRS: dict[str, tuple[dict[str, Any], dict[str, Any]]] = {
    BUCKET_STEM: (
        {
            "title": "Software Developer",
            "match": 88,
            "description": "Your interest in technology and logical thinking make this an excellent career choice",
            "growthPath": "Junior Developer → Senior Developer → Tech Lead → Engineering Manager",
            "averageSalary": "₹6-25 LPA",
            "keySkills": ["Programming", "Problem Solving", "Logical Thinking", "Technology"],
            "educationPath": "B.Tech Computer Science, B.Sc Computer Science, or coding bootcamps",
        },
        {
            "title": "Data Analyst",
            "match": 82,
            "description": "Your analytical mindset suits data-driven decision making roles",
            "growthPath": "Junior Analyst → Senior Analyst → Data Scientist → Analytics Manager",
            "averageSalary": "₹5-20 LPA",
            "keySkills": ["Data Analysis", "Statistics", "Excel", "Python"],
            "educationPath": "B.Sc Statistics/Mathematics, B.Tech, or specialized analytics courses",
        },
    ),
    BUCKET_BUSINESS: (
        {
            "title": "Business Analyst",
            "match": 85,
            "description": "Your interest in business processes and problem-solving aligns well with this role",
            "growthPath": "Junior BA → Senior BA → Product Manager → Business Unit Head",
            "averageSalary": "₹5-18 LPA",
            "keySkills": ["Business Analysis", "Communication", "Problem Solving", "Data Analysis"],
            "educationPath": "BBA, B.Com, or MBA for advanced roles",
        },
        {
            "title": "Digital Marketing Specialist",
            "match": 78,
            "description": "Combines business acumen with digital skills for modern marketing",
            "growthPath": "Marketing Executive → Senior Specialist → Marketing Manager → Head of Marketing",
            "averageSalary": "₹4-15 LPA",
            "keySkills": ["Digital Marketing", "Analytics", "Communication", "Creativity"],
            "educationPath": "Any degree with digital marketing certifications",
        },
    ),
    BUCKET_CREATIVE: (
        {
            "title": "UX/UI Designer",
            "match": 83,
            "description": "Your creative interests and user-focused thinking suit design roles perfectly",
            "growthPath": "Junior Designer → Senior Designer → Lead Designer → Design Manager",
            "averageSalary": "₹4-18 LPA",
            "keySkills": ["Design", "User Research", "Prototyping", "Creative Thinking"],
            "educationPath": "Design degree or specialized UX/UI courses and portfolio development",
        },
        {
            "title": "Content Creator",
            "match": 77,
            "description": "Leverage your creativity to build engaging content across platforms",
            "growthPath": "Content Writer → Content Manager → Content Strategy Lead → Creative Director",
            "averageSalary": "₹3-15 LPA",
            "keySkills": ["Writing", "Creativity", "Social Media", "Marketing"],
            "educationPath": "Mass Communication, English, or relevant skill-based courses",
        },
    ),
    BUCKET_GENERAL: (
        {
            "title": "Project Manager",
            "match": 80,
            "description": "Your organizational skills and leadership potential make this a great fit",
            "growthPath": "Assistant PM → Project Manager → Senior PM → Program Manager",
            "averageSalary": "₹6-22 LPA",
            "keySkills": ["Project Management", "Leadership", "Communication", "Organization"],
            "educationPath": "Any bachelor's degree with PMP certification",
        },
        {
            "title": "Business Development Associate",
            "match": 75,
            "description": "Combine relationship building with business growth opportunities",
            "growthPath": "BDA → Senior BDA → BD Manager → VP Business Development",
            "averageSalary": "₹4-16 LPA",
            "keySkills": ["Communication", "Sales", "Relationship Building", "Business Acumen"],
            "educationPath": "BBA, B.Com, or MBA preferred",
        },
    ),
}

HEURISTIC_SCHOLARSHIPS = [
    "National Scholarship Portal (NSP) schemes",
    "Merit-based scholarships in target institutions",
    "Industry-sponsored scholarships and programs",
    "Government schemes for your category/region",
]

HEURISTIC_RESOURCES = [
    "Coursera and edX for online learning",
    "LinkedIn Learning for professional skills",
    "Industry-specific platforms and communities",
    "Books and resources recommended for your field",
    "Professional networking events and conferences",
]


def handler_question_set() -> dict[str, Any]:
    return deepcopy(HANDLER_QUESTION_SET)


def client_question_set() -> dict[str, Any]:
    return deepcopy(CLIENT_QUESTION_SET)


def handler_analysis() -> dict[str, Any]:
    return deepcopy(HANDLER_ANALYSIS)


def _matches_any(interests: list[str], keywords: tuple[str, ...]) -> bool:
    return any(keyword in str(interest).lower() for interest in interests for keyword in keywords)


def classify_interests(interests: list[str]) -> str:
    # First match wins: STEM, then business, then creative.
    if _matches_any(interests, STEM_KEYWORDS):
        return BUCKET_STEM
    if _matches_any(interests, BUSINESS_KEYWORDS):
        return BUCKET_BUSINESS
    if _matches_any(interests, CREATIVE_KEYWORDS):
        return BUCKET_CREATIVE
    return BUCKET_GENERAL


def _string_answers(responses: dict[str, Any]) -> list[str]:
    return [value for value in responses.values() if isinstance(value, str)]


def shows_analytical_thinking(responses: dict[str, Any]) -> bool:
    return any(
        keyword in value.lower()
        for value in _string_answers(responses)
        for keyword in ANALYTICAL_KEYWORDS
    )


def has_detailed_answers(responses: dict[str, Any]) -> bool:
    return any(len(value) > DETAILED_ANSWER_MIN_CHARS for value in _string_answers(responses))


def _course_label(interests: list[str]) -> str:
    if _matches_any(interests, STEM_KEYWORDS):
        return "B.Tech Computer Science"
    if _matches_any(interests, BUSINESS_KEYWORDS):
        return "BBA/MBA"
    return "Relevant Specialization"


def heuristic_analysis(profile: dict[str, Any], responses: dict[str, Any]) -> dict[str, Any]:
    """Personalized analysis built from the profile's interests and the raw answers."""
    interests = [str(item) for item in (profile.get("interests") or [])]
    responses = responses or {}
    analytical = shows_analytical_thinking(responses)
    detailed = has_detailed_answers(responses)

    bucket = classify_interests(interests)
    # An analytical answer pulls an otherwise non-STEM profile toward technical roles.
    if analytical:
        bucket = BUCKET_STEM
    primary, secondary = (deepcopy(career) for career in CAREER_PAIRS[bucket])

    course = profile.get("course") or ""
    overall = (
        f"Based on your profile and interests in {', '.join(interests)}, "
        f"{'your detailed responses show strong self-awareness and' if detailed else 'you show'} "
        "potential for roles that combine analytical thinking with your natural interests. "
        f"Your educational background in {course} provides a solid foundation for multiple career paths. "
        f"{'Your analytical mindset and' if analytical else 'You demonstrate'} problem-solving abilities "
        "and show interest in continuous learning, which are valuable traits in today's dynamic job market."
    )

    return {
        "overallAnalysis": overall,
        "recommendedCareers": [primary, secondary],
        "courseRecommendations": [
            {
                "course": _course_label(interests),
                "institution": "Top universities and colleges in your region",
                "duration": "3-4 years",
                "eligibility": "Based on current academic performance and entrance exams",
                "careerOutcomes": [
                    primary["title"],
                    secondary["title"],
                    "Related roles in the same field",
                ],
            }
        ],
        "skillDevelopment": [
            *primary["keySkills"],
            "Communication Skills",
            "Leadership",
            "Time Management",
        ],
        "actionPlan": [
            {
                "timeline": "Next 3 months",
                "actions": [
                    f"Research {primary['title']} role requirements",
                    "Start building relevant skills through online courses",
                    "Connect with professionals in your field of interest",
                    "Work on small projects to build experience",
                ],
            },
            {
                "timeline": "6-12 months",
                "actions": [
                    "Complete relevant certifications",
                    "Build a portfolio showcasing your skills",
                    "Apply for internships in target companies",
                    "Join professional communities and networks",
                ],
            },
            {
                "timeline": "1-2 years",
                "actions": [
                    "Complete formal education/training programs",
                    "Gain practical experience through internships or entry-level roles",
                    "Build a strong professional network",
                    "Apply for full-time positions in target companies",
                ],
            },
        ],
        "scholarships": list(HEURISTIC_SCHOLARSHIPS),
        "resources": list(HEURISTIC_RESOURCES),
    }
