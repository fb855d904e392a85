"""Career resource library scored against skill gaps and career matches."""
from __future__ import annotations

from copy import deepcopy
from typing import Any

RESOURCE_TYPES = ["guide", "template", "tool", "article", "video", "ebook", "checklist"]

GAP_BONUS = 15
CAREER_BONUS = 10
FEATURED_THRESHOLD = 80

RESOURCE_CATALOG: list[dict[str, Any]] = [
    {
        "id": "career-roadmap-template",
        "title": "Personal Career Roadmap Template",
        "description": "A comprehensive template to plan your career progression with milestones, skills, and timelines.",
        "type": "template",
        "category": "Career Planning",
        "tags": ["career planning", "goal setting", "roadmap", "professional development"],
        "author": "Career Development Team",
        "published_date": "2024-01-15",
        "read_time": "15 min setup",
        "download_url": "/resources/career-roadmap-template.pdf",
        "is_premium": False,
        "rating": 4.8,
        "downloads": 15420,
        "base_score": 95,
    },
    {
        "id": "skill-gap-analyzer",
        "title": "Skill Gap Analysis Worksheet",
        "description": "Identify and prioritize skills you need to develop for your target career path.",
        "type": "tool",
        "category": "Skill Development",
        "tags": ["skill assessment", "gap analysis", "self evaluation", "learning plan"],
        "author": "HR Experts",
        "published_date": "2024-02-01",
        "read_time": "20 min",
        "download_url": "/resources/skill-gap-analyzer.xlsx",
        "is_premium": False,
        "rating": 4.7,
        "downloads": 12350,
        "base_score": 90,
    },
    {
        "id": "interview-prep-guide",
        "title": "Complete Interview Preparation Guide",
        "description": "Master behavioral, technical, and case interviews with proven strategies and practice questions.",
        "type": "guide",
        "category": "Job Search",
        "tags": ["interviews", "job search", "communication", "preparation"],
        "author": "Recruitment Specialists",
        "published_date": "2024-01-20",
        "read_time": "45 min",
        "download_url": "/resources/interview-prep-guide.pdf",
        "is_premium": False,
        "rating": 4.9,
        "downloads": 23100,
        "base_score": 85,
    },
    {
        "id": "ats-resume-template",
        "title": "ATS-Friendly Resume Templates",
        "description": "Professional resume templates optimized for applicant tracking systems across industries.",
        "type": "template",
        "category": "Job Search",
        "tags": ["resume", "ats", "job applications", "templates"],
        "author": "Career Coaches",
        "published_date": "2024-02-10",
        "read_time": "10 min",
        "download_url": "/resources/ats-resume-templates.docx",
        "is_premium": False,
        "rating": 4.6,
        "downloads": 31200,
        "base_score": 88,
    },
    {
        "id": "tech-industry-guide",
        "title": "Breaking Into Tech: Industry Guide",
        "description": "Everything you need to know about careers in technology, from roles to required skills.",
        "type": "ebook",
        "category": "Industry Guides",
        "tags": ["technology", "software", "data", "career change"],
        "author": "Tech Industry Experts",
        "published_date": "2024-01-05",
        "read_time": "2 hours",
        "download_url": "/resources/tech-industry-guide.pdf",
        "is_premium": True,
        "rating": 4.8,
        "downloads": 8900,
        "base_score": 82,
    },
    {
        "id": "networking-masterclass",
        "title": "Professional Networking Masterclass",
        "description": "Learn how to build meaningful professional relationships online and offline.",
        "type": "video",
        "category": "Professional Development",
        "tags": ["networking", "linkedin", "relationships", "communication"],
        "author": "Networking Experts",
        "published_date": "2024-02-15",
        "read_time": "90 min",
        "external_url": "https://www.linkedin.com/learning",
        "is_premium": False,
        "rating": 4.5,
        "downloads": 6700,
        "base_score": 78,
    },
    {
        "id": "salary-negotiation-toolkit",
        "title": "Salary Negotiation Toolkit",
        "description": "Research tools, scripts, and strategies to negotiate your worth confidently.",
        "type": "tool",
        "category": "Career Advancement",
        "tags": ["salary", "negotiation", "compensation", "career growth"],
        "author": "Compensation Specialists",
        "published_date": "2024-01-25",
        "read_time": "30 min",
        "download_url": "/resources/salary-negotiation-toolkit.pdf",
        "is_premium": False,
        "rating": 4.7,
        "downloads": 11200,
        "base_score": 80,
    },
    {
        "id": "personal-branding-checklist",
        "title": "Personal Branding Checklist",
        "description": "Step-by-step checklist to build a strong personal brand across platforms.",
        "type": "checklist",
        "category": "Professional Development",
        "tags": ["personal branding", "online presence", "portfolio", "linkedin"],
        "author": "Branding Consultants",
        "published_date": "2024-02-05",
        "read_time": "15 min",
        "download_url": "/resources/personal-branding-checklist.pdf",
        "is_premium": False,
        "rating": 4.4,
        "downloads": 7800,
        "base_score": 75,
    },
    {
        "id": "leadership-development-plan",
        "title": "Leadership Development Plan",
        "description": "A structured plan to grow leadership skills for management and senior roles.",
        "type": "template",
        "category": "Leadership",
        "tags": ["leadership", "management", "team building", "soft skills"],
        "author": "Leadership Coaches",
        "published_date": "2024-01-30",
        "read_time": "25 min",
        "download_url": "/resources/leadership-development-plan.pdf",
        "is_premium": True,
        "rating": 4.6,
        "downloads": 5400,
        "base_score": 73,
    },
    {
        "id": "remote-work-success-guide",
        "title": "Remote Work Success Guide",
        "description": "Tips and tools to stay productive, connected, and visible while working remotely.",
        "type": "guide",
        "category": "Work-Life Balance",
        "tags": ["remote work", "productivity", "time management", "collaboration"],
        "author": "Workplace Experts",
        "published_date": "2024-02-20",
        "read_time": "35 min",
        "download_url": "/resources/remote-work-guide.pdf",
        "is_premium": False,
        "rating": 4.5,
        "downloads": 9300,
        "base_score": 70,
    },
]

DEFAULT_RESOURCES: list[dict[str, Any]] = [
    {
        "id": "career-starter-kit",
        "title": "Career Starter Kit",
        "description": "Essential resources for beginning your career journey.",
        "type": "guide",
        "category": "Career Planning",
        "tags": ["career planning", "beginners", "job search"],
        "author": "Career Team",
        "published_date": "2024-01-01",
        "read_time": "30 min",
        "download_url": "/resources/career-starter-kit.pdf",
        "is_premium": False,
        "rating": 4.5,
        "downloads": 5000,
    },
    {
        "id": "job-search-basics",
        "title": "Job Search Basics",
        "description": "Fundamentals of finding and applying for jobs effectively.",
        "type": "article",
        "category": "Job Search",
        "tags": ["job search", "applications", "resume"],
        "author": "Career Team",
        "published_date": "2024-01-01",
        "read_time": "10 min",
        "external_url": "https://www.indeed.com/career-advice",
        "is_premium": False,
        "rating": 4.3,
        "downloads": 3000,
    },
]


def _gap_names(results: dict[str, Any]) -> list[str]:
    return [gap.lower() for gap in (results.get("skillGaps") or []) if isinstance(gap, str) and gap]


def _career_names(results: dict[str, Any]) -> list[str]:
    return [
        str(match.get("career") or "").lower()
        for match in (results.get("topCareerMatches") or [])
        if isinstance(match, dict) and match.get("career")
    ]


def score_resources(results: dict[str, Any]) -> list[dict[str, Any]]:
    gaps = _gap_names(results)
    careers = _career_names(results)
    scored = []
    for resource in deepcopy(RESOURCE_CATALOG):
        tags = [tag.lower() for tag in resource["tags"]]
        title = resource["title"].lower()
        description = resource["description"].lower()
        score = resource.pop("base_score")
        for gap in gaps:
            if gap in title or any(gap in tag for tag in tags):
                score += GAP_BONUS
        for career in careers:
            if career in description or any(tag in career for tag in tags):
                score += CAREER_BONUS
        resource["relevance_score"] = score
        scored.append(resource)
    return sorted(scored, key=lambda resource: resource["relevance_score"], reverse=True)


def default_resources() -> list[dict[str, Any]]:
    return deepcopy(DEFAULT_RESOURCES)


def featured_resources(resources: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [
        resource
        for resource in resources
        if (resource.get("relevance_score") or 0) > FEATURED_THRESHOLD
    ]


def filter_resources(
    resources: list[dict[str, Any]],
    *,
    search: str | None = None,
    category: str | None = None,
    resource_type: str | None = None,
) -> list[dict[str, Any]]:
    filtered = resources
    if search:
        needle = search.lower()
        filtered = [
            resource
            for resource in filtered
            if needle in resource["title"].lower()
            or needle in resource["description"].lower()
            or any(needle in tag.lower() for tag in resource["tags"])
        ]
    if category and category != "all":
        filtered = [resource for resource in filtered if resource["category"] == category]
    if resource_type and resource_type != "all":
        filtered = [resource for resource in filtered if resource["type"] == resource_type]
    return filtered


def resource_categories(resources: list[dict[str, Any]]) -> list[str]:
    return list(dict.fromkeys(resource["category"] for resource in resources))
