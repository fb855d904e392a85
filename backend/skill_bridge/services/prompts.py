from __future__ import annotations

import json
from typing import Any


QUESTION_SET_EXAMPLE = """{
  "title": "Personalized Career Assessment",
  "description": "A tailored assessment to discover your ideal career path based on your profile and preferences",
  "estimatedTime": 15,
  "questions": [
    {
      "id": "q1",
      "type": "mcq",
      "category": "Academic Preferences",
      "question": "Which type of subjects do you find most engaging?",
      "options": ["Mathematics and Logic", "Languages and Literature", "Science and Research", "Arts and Creativity"],
      "required": true
    },
    {
      "id": "q2",
      "type": "text",
      "category": "Career Goals",
      "question": "Describe your ideal work environment in 2-3 sentences.",
      "placeholder": "E.g., I prefer working in teams, outdoor settings, creative spaces...",
      "required": true
    },
    {
      "id": "q3",
      "type": "scale",
      "category": "Work Preferences",
      "question": "How important is work-life balance to you?",
      "scaleRange": {
        "min": 1,
        "max": 10,
        "minLabel": "Not Important",
        "maxLabel": "Very Important"
      },
      "required": true
    }
  ]
}"""

ANALYSIS_EXAMPLE = """{
  "overallAnalysis": "Detailed analysis of their personality, strengths, and career fit based on responses",
  "recommendedCareers": [
    {
      "title": "Software Engineer",
      "match": 95,
      "description": "Why this career fits them",
      "growthPath": "Career progression path",
      "averageSalary": "₹8-25 LPA",
      "keySkills": ["Programming", "Problem Solving", "Logical Thinking"],
      "educationPath": "Recommended courses/degrees"
    }
  ],
  "courseRecommendations": [
    {
      "course": "B.Tech Computer Science",
      "institution": "IIT/NIT/Top Engineering Colleges",
      "duration": "4 years",
      "eligibility": "Requirements",
      "careerOutcomes": ["Software Developer", "Data Scientist", "Product Manager"]
    }
  ],
  "skillDevelopment": [
    "Programming Languages (Python, Java)",
    "Data Analysis",
    "Communication Skills"
  ],
  "actionPlan": [
    {
      "timeline": "Next 3 months",
      "actions": ["Specific actionable steps"]
    },
    {
      "timeline": "6-12 months",
      "actions": ["Medium-term goals"]
    },
    {
      "timeline": "1-2 years",
      "actions": ["Long-term objectives"]
    }
  ],
  "scholarships": [
    "Relevant scholarship opportunities based on their profile"
  ],
  "resources": [
    "Recommended books, courses, websites, and other resources"
  ]
}"""


def _profile_block(profile: dict[str, Any]) -> str:
    interests = profile.get("interests") or []
    return "\n".join(
        [
            "Student Profile:",
            f"- Name: {profile.get('displayName') or ''}",
            f"- Age: {profile.get('age') or ''}",
            f"- Current Status: {profile.get('course') or ''}",
            f"- Stream/Field: {profile.get('stream') or ''}",
            f"- Interests: {', '.join(str(item) for item in interests)}",
            f"- Location: {profile.get('location') or ''}",
        ]
    )


def build_question_set_prompt(profile: dict[str, Any]) -> str:
    return f"""
You are an expert career counselor creating a personalized career assessment for a student. Based on their profile, generate a comprehensive assessment with 15-20 questions.

{_profile_block(profile)}

Create questions that cover:
1. Academic preferences and strengths
2. Work environment preferences
3. Personality traits and soft skills
4. Career aspirations and goals
5. Practical considerations (salary, work-life balance, etc.)
6. Specific questions based on their current educational status
7. Questions related to their stated interests

Mix different question types:
- Multiple choice (mcq)
- Text responses (text)
- Rating scales (scale)
- Multi-select options (multi-select)

Return ONLY a JSON object in this exact format:
{QUESTION_SET_EXAMPLE}

Make sure:
- Questions are specific to their educational level and interests
- Include both general career questions and ones specific to their field
- Questions help identify suitable career paths in their area of study
- Mix of question types for comprehensive assessment
- All questions are clear and actionable for career guidance
"""


def build_analysis_prompt(profile: dict[str, Any], responses: dict[str, Any]) -> str:
    return f"""
You are an expert career counselor. Analyze this student's profile and assessment responses to provide personalized career guidance.

{_profile_block(profile)}

Assessment Responses:
{json.dumps(responses, indent=2, ensure_ascii=False)}

Provide comprehensive career guidance in this JSON format:
{ANALYSIS_EXAMPLE}

Make recommendations specific to:
- Their current educational level
- Available colleges/courses in India (especially government colleges)
- Realistic career paths in Indian job market
- Their stated interests and assessment responses
- Location-specific opportunities if relevant
"""
