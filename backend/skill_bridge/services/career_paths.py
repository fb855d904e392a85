"""Step-by-step career progressions shown once a student has assessment results."""
from __future__ import annotations

from copy import deepcopy
from typing import Any

ACTION_TYPES = ("course", "certification", "project", "networking")


def _action(action_type: str, title: str, description: str, url: str | None = None) -> dict[str, Any]:
    return {"type": action_type, "title": title, "description": description, "url": url}


CAREER_PATH_CATALOG: list[dict[str, Any]] = [
    {
        "id": "data-science",
        "title": "Data Science Career Path",
        "description": "Transform data into actionable insights and drive business decisions",
        "industry": "Technology",
        "match_percentage": 92,
        "total_duration": "18-24 months",
        "average_starting_salary": "$70,000 - $90,000",
        "average_mid_level_salary": "$100,000 - $130,000",
        "average_senior_salary": "$140,000 - $180,000",
        "job_growth_rate": "+22% (Much faster than average)",
        "steps": [
            {
                "id": "foundations",
                "title": "Data Science Foundations",
                "description": "Learn programming fundamentals and basic statistics",
                "duration": "3-4 months",
                "difficulty": "Beginner",
                "skills_required": ["Basic Math", "Computer Literacy"],
                "skills_gained": ["Python", "SQL", "Statistics", "Data Visualization"],
                "average_salary": "N/A (Learning Phase)",
                "job_titles": ["Student", "Aspiring Data Analyst"],
                "actions": [
                    _action("course", "Python for Data Science", "Master Python programming for data analysis", "/courses?search=python+data+science"),
                    _action("course", "SQL Fundamentals", "Learn database querying and management", "/courses?search=sql"),
                    _action("project", "Data Cleaning Project", "Practice data preprocessing with real datasets"),
                ],
                "prerequisites": [],
            },
            {
                "id": "junior-analyst",
                "title": "Junior Data Analyst",
                "description": "Apply analytical skills to solve business problems",
                "duration": "6-12 months",
                "difficulty": "Intermediate",
                "skills_required": ["Python", "SQL", "Statistics", "Excel"],
                "skills_gained": ["Tableau/PowerBI", "A/B Testing", "Machine Learning Basics", "Business Acumen"],
                "average_salary": "$55,000 - $70,000",
                "job_titles": ["Junior Data Analyst", "Business Analyst", "Research Analyst"],
                "actions": [
                    _action("certification", "Tableau Desktop Specialist", "Get certified in data visualization", "https://www.tableau.com/learn/certification"),
                    _action("project", "Sales Dashboard", "Create interactive dashboards for business stakeholders"),
                    _action("networking", "Join Data Science Community", "Connect with professionals on LinkedIn and local meetups"),
                ],
                "prerequisites": ["foundations"],
            },
            {
                "id": "data-scientist",
                "title": "Data Scientist",
                "description": "Build predictive models and advanced analytics solutions",
                "duration": "12-18 months",
                "difficulty": "Advanced",
                "skills_required": ["Machine Learning", "Statistics", "Python/R", "SQL"],
                "skills_gained": ["Deep Learning", "MLOps", "Cloud Platforms", "Advanced Statistics"],
                "average_salary": "$85,000 - $120,000",
                "job_titles": ["Data Scientist", "Machine Learning Engineer", "Analytics Consultant"],
                "actions": [
                    _action("course", "Machine Learning Specialization", "Master ML algorithms and model building", "/courses?search=machine+learning"),
                    _action("certification", "AWS Machine Learning Specialty", "Cloud ML certification", "https://aws.amazon.com/certification/"),
                    _action("project", "End-to-End ML Pipeline", "Build and deploy a complete ML solution"),
                ],
                "prerequisites": ["junior-analyst"],
            },
            {
                "id": "senior-data-scientist",
                "title": "Senior Data Scientist / ML Lead",
                "description": "Lead data science initiatives and mentor junior team members",
                "duration": "18+ months",
                "difficulty": "Advanced",
                "skills_required": ["Advanced ML", "Leadership", "Business Strategy", "Architecture"],
                "skills_gained": ["Team Leadership", "Strategic Planning", "Research", "Innovation"],
                "average_salary": "$130,000 - $180,000",
                "job_titles": ["Senior Data Scientist", "ML Engineering Manager", "Head of Analytics"],
                "actions": [
                    _action("course", "Leadership in Tech", "Develop management and leadership skills"),
                    _action("networking", "Industry Conferences", "Speak at conferences and build thought leadership"),
                    _action("project", "Research Publication", "Contribute to industry knowledge through research"),
                ],
                "prerequisites": ["data-scientist"],
            },
        ],
    },
    {
        "id": "software-development",
        "title": "Software Development Career Path",
        "description": "Build applications and systems that power the digital world",
        "industry": "Technology",
        "match_percentage": 88,
        "total_duration": "15-20 months",
        "average_starting_salary": "$65,000 - $85,000",
        "average_mid_level_salary": "$90,000 - $120,000",
        "average_senior_salary": "$125,000 - $170,000",
        "job_growth_rate": "+13% (Faster than average)",
        "steps": [
            {
                "id": "programming-basics",
                "title": "Programming Fundamentals",
                "description": "Master programming concepts and web development basics",
                "duration": "2-3 months",
                "difficulty": "Beginner",
                "skills_required": ["Basic Computer Skills"],
                "skills_gained": ["JavaScript", "HTML/CSS", "Git", "Problem Solving"],
                "average_salary": "N/A (Learning Phase)",
                "job_titles": ["Student", "Coding Bootcamp Student"],
                "actions": [
                    _action("course", "Full Stack Web Development", "Learn HTML, CSS, JavaScript, and Node.js", "/courses?search=web+development"),
                    _action("project", "Personal Portfolio Website", "Build your first website to showcase projects"),
                ],
                "prerequisites": [],
            },
            {
                "id": "junior-developer",
                "title": "Junior Software Developer",
                "description": "Build web applications and contribute to development teams",
                "duration": "8-12 months",
                "difficulty": "Intermediate",
                "skills_required": ["JavaScript", "HTML/CSS", "Git", "Basic Programming"],
                "skills_gained": ["React/Vue", "Database Design", "API Development", "Testing"],
                "average_salary": "$60,000 - $80,000",
                "job_titles": ["Junior Developer", "Frontend Developer", "Full Stack Developer"],
                "actions": [
                    _action("course", "React Development", "Master modern frontend frameworks", "/courses?search=react"),
                    _action("project", "E-commerce Application", "Build a full-stack web application"),
                    _action("certification", "AWS Cloud Practitioner", "Learn cloud deployment basics"),
                ],
                "prerequisites": ["programming-basics"],
            },
            {
                "id": "software-engineer",
                "title": "Software Engineer",
                "description": "Design and implement complex software solutions",
                "duration": "12-18 months",
                "difficulty": "Advanced",
                "skills_required": ["Full Stack Development", "System Design", "Database Management"],
                "skills_gained": ["Microservices", "DevOps", "System Architecture", "Performance Optimization"],
                "average_salary": "$90,000 - $125,000",
                "job_titles": ["Software Engineer", "Backend Engineer", "DevOps Engineer"],
                "actions": [
                    _action("course", "System Design & Architecture", "Learn to design scalable systems"),
                    _action("certification", "Kubernetes Administration", "Master container orchestration"),
                ],
                "prerequisites": ["junior-developer"],
            },
        ],
    },
    {
        "id": "ux-design",
        "title": "UX/UI Design Career Path",
        "description": "Create intuitive and engaging user experiences",
        "industry": "Design & Technology",
        "match_percentage": 85,
        "total_duration": "12-18 months",
        "average_starting_salary": "$55,000 - $70,000",
        "average_mid_level_salary": "$75,000 - $100,000",
        "average_senior_salary": "$105,000 - $140,000",
        "job_growth_rate": "+8% (As fast as average)",
        "steps": [
            {
                "id": "design-fundamentals",
                "title": "Design Fundamentals",
                "description": "Learn design principles and user-centered design thinking",
                "duration": "2-3 months",
                "difficulty": "Beginner",
                "skills_required": ["Creativity", "Visual Thinking"],
                "skills_gained": ["Design Theory", "Figma", "User Research", "Wireframing"],
                "average_salary": "N/A (Learning Phase)",
                "job_titles": ["Design Student", "Aspiring Designer"],
                "actions": [
                    _action("course", "UX Design Fundamentals", "Learn the basics of user experience design", "/courses?search=ux+design"),
                    _action("project", "App Redesign Case Study", "Redesign an existing app's user interface"),
                ],
                "prerequisites": [],
            },
            {
                "id": "junior-designer",
                "title": "Junior UX/UI Designer",
                "description": "Create user interfaces and conduct basic user research",
                "duration": "6-9 months",
                "difficulty": "Intermediate",
                "skills_required": ["Figma", "Design Theory", "Basic Research"],
                "skills_gained": ["Prototyping", "User Testing", "Design Systems", "Collaboration"],
                "average_salary": "$50,000 - $65,000",
                "job_titles": ["Junior UX Designer", "UI Designer", "Product Designer"],
                "actions": [
                    _action("certification", "Google UX Design Certificate", "Industry-recognized UX certification"),
                    _action("project", "Mobile App Design", "Design a complete mobile application"),
                ],
                "prerequisites": ["design-fundamentals"],
            },
        ],
    },
]


def career_paths(results: dict[str, Any] | None) -> list[dict[str, Any]]:
    """Return the progressions ordered by match, best first.

    Nothing is offered until the student has a stored result. The first step
    of every path is marked current; no step is marked completed.
    """
    if not results:
        return []
    paths = deepcopy(CAREER_PATH_CATALOG)
    for path in paths:
        for index, step in enumerate(path["steps"]):
            step["is_current_step"] = index == 0
            step["is_completed"] = False
    return sorted(paths, key=lambda path: path["match_percentage"], reverse=True)
