"""Government colleges and entrance exams, ranked by the career tracks in an assessment result."""
from __future__ import annotations

from copy import deepcopy
from typing import Any

TRACK_STEM = "stem"
TRACK_BUSINESS = "business"
TRACK_MEDICAL = "medical"

TRACK_KEYWORDS: dict[str, tuple[str, ...]] = {
    TRACK_STEM: ("engineer", "developer", "scientist", "data"),
    TRACK_BUSINESS: ("business", "management", "analyst"),
    TRACK_MEDICAL: ("doctor", "medical", "health"),
}

# Each catalog entry carries `relevance`: (track, score) pairs checked in order,
# then `fallback_relevance` when none of the tracks apply.
COLLEGE_CATALOG: list[dict[str, Any]] = [
    {
        "id": "iit-delhi",
        "name": "Indian Institute of Technology Delhi",
        "location": "New Delhi",
        "state": "Delhi",
        "type": "IIT",
        "courses": ["Computer Science", "Electrical Engineering", "Mechanical Engineering", "Civil Engineering"],
        "nirf_ranking": 2,
        "fees": "₹2.5-3 Lakhs/year",
        "seats": 1200,
        "cutoff": "JEE Advanced Rank 1-500",
        "website": "https://home.iitd.ac.in",
        "established": 1961,
        "accreditation": ["NAAC A++", "NBA"],
        "facilities": ["Research Labs", "Industry Partnerships", "International Exchange"],
        "relevance": ((TRACK_STEM, 95),),
        "fallback_relevance": 70,
    },
    {
        "id": "iit-bombay",
        "name": "Indian Institute of Technology Bombay",
        "location": "Mumbai",
        "state": "Maharashtra",
        "type": "IIT",
        "courses": ["Computer Science", "Electronics", "Chemical Engineering", "Aerospace"],
        "nirf_ranking": 3,
        "fees": "₹2.5-3 Lakhs/year",
        "seats": 1100,
        "cutoff": "JEE Advanced Rank 1-400",
        "website": "https://www.iitb.ac.in",
        "established": 1958,
        "accreditation": ["NAAC A++", "NBA"],
        "facilities": ["Innovation Hub", "Startup Incubator", "Research Centers"],
        "relevance": ((TRACK_STEM, 98),),
        "fallback_relevance": 75,
    },
    {
        "id": "nit-trichy",
        "name": "National Institute of Technology Tiruchirappalli",
        "location": "Tiruchirappalli",
        "state": "Tamil Nadu",
        "type": "NIT",
        "courses": ["Computer Science", "Electronics", "Mechanical", "Chemical Engineering"],
        "nirf_ranking": 8,
        "fees": "₹1.5-2 Lakhs/year",
        "seats": 800,
        "cutoff": "JEE Main Rank 500-5000",
        "website": "https://www.nitt.edu",
        "established": 1964,
        "accreditation": ["NAAC A+", "NBA"],
        "facilities": ["Central Library", "Industry Interface", "Sports Complex"],
        "relevance": ((TRACK_STEM, 88),),
        "fallback_relevance": 65,
    },
    {
        "id": "du",
        "name": "University of Delhi",
        "location": "New Delhi",
        "state": "Delhi",
        "type": "Central University",
        "courses": ["Economics", "Political Science", "Commerce", "English", "Mathematics"],
        "nirf_ranking": 12,
        "fees": "₹20,000-50,000/year",
        "seats": 3000,
        "cutoff": "CUET Score 650+",
        "website": "https://www.du.ac.in",
        "established": 1922,
        "accreditation": ["NAAC A++"],
        "facilities": ["Multiple Colleges", "Research Departments", "Cultural Centers"],
        "relevance": ((TRACK_BUSINESS, 85), (TRACK_STEM, 70)),
        "fallback_relevance": 80,
    },
    {
        "id": "jnu",
        "name": "Jawaharlal Nehru University",
        "location": "New Delhi",
        "state": "Delhi",
        "type": "Central University",
        "courses": ["International Studies", "Social Sciences", "Languages", "Life Sciences"],
        "nirf_ranking": 18,
        "fees": "₹15,000-40,000/year",
        "seats": 1500,
        "cutoff": "JNUEE Score based",
        "website": "https://www.jnu.ac.in",
        "established": 1969,
        "accreditation": ["NAAC A++"],
        "facilities": ["International Programs", "Research Centers", "Language Schools"],
        "relevance": ((TRACK_BUSINESS, 75),),
        "fallback_relevance": 65,
    },
    {
        "id": "aiims-delhi",
        "name": "All India Institute of Medical Sciences Delhi",
        "location": "New Delhi",
        "state": "Delhi",
        "type": "Government",
        "courses": ["MBBS", "MD", "MS", "Nursing", "Pharmacy"],
        "nirf_ranking": 1,
        "fees": "₹1,500-5,000/year",
        "seats": 100,
        "cutoff": "NEET Rank 1-50",
        "website": "https://www.aiims.ac.in",
        "established": 1956,
        "accreditation": ["NAAC A++", "MCI"],
        "facilities": ["Super Specialty Hospital", "Research Institute", "Trauma Center"],
        "relevance": ((TRACK_MEDICAL, 100),),
        "fallback_relevance": 30,
    },
    {
        "id": "anna-university",
        "name": "Anna University",
        "location": "Chennai",
        "state": "Tamil Nadu",
        "type": "State University",
        "courses": ["Engineering", "Technology", "Architecture", "Applied Sciences"],
        "nirf_ranking": 25,
        "fees": "₹50,000-1 Lakh/year",
        "seats": 2000,
        "cutoff": "TNEA Rank 1000-10000",
        "website": "https://www.annauniv.edu",
        "established": 1978,
        "accreditation": ["NAAC A+", "NBA"],
        "facilities": ["Industry Collaboration", "Research Parks", "Innovation Centers"],
        "relevance": ((TRACK_STEM, 80),),
        "fallback_relevance": 60,
    },
]

DEFAULT_COLLEGES: list[dict[str, Any]] = [
    {
        "id": "iit-delhi-default",
        "name": "Indian Institute of Technology Delhi",
        "location": "New Delhi",
        "state": "Delhi",
        "type": "IIT",
        "courses": ["Computer Science", "Electrical Engineering", "Mechanical Engineering"],
        "nirf_ranking": 2,
        "fees": "₹2.5-3 Lakhs/year",
        "seats": 1200,
        "cutoff": "JEE Advanced Rank 1-500",
        "website": "https://home.iitd.ac.in",
        "established": 1961,
        "accreditation": ["NAAC A++", "NBA"],
        "facilities": ["Research Labs", "Industry Partnerships"],
    },
    {
        "id": "du-default",
        "name": "University of Delhi",
        "location": "New Delhi",
        "state": "Delhi",
        "type": "Central University",
        "courses": ["Economics", "Political Science", "Commerce"],
        "nirf_ranking": 12,
        "fees": "₹20,000-50,000/year",
        "seats": 3000,
        "cutoff": "CUET Score 650+",
        "website": "https://www.du.ac.in",
        "established": 1922,
        "accreditation": ["NAAC A++"],
        "facilities": ["Multiple Colleges", "Research Departments"],
    },
]

_JEE_MAIN = {
    "name": "JEE Main",
    "full_name": "Joint Entrance Examination Main",
    "type": "Engineering",
    "conducted_by": "NTA",
    "application_start": "December 2024",
    "application_end": "January 2025",
    "exam_date": "January-April 2025",
    "result_date": "May 2025",
    "eligibility": "12th with PCM, 75% aggregate",
    "pattern": "Computer Based Test - 300 marks",
    "syllabus": ["Physics", "Chemistry", "Mathematics"],
    "website": "https://jeemain.nta.nic.in",
    "fees": "₹650-3000",
}
_CUET_UG = {
    "name": "CUET UG",
    "full_name": "Common University Entrance Test Undergraduate",
    "type": "General",
    "conducted_by": "NTA",
    "application_start": "March 2025",
    "application_end": "April 2025",
    "exam_date": "May-June 2025",
    "result_date": "July 2025",
    "eligibility": "12th pass from recognized board",
    "pattern": "Computer Based Test",
    "syllabus": ["Domain subjects", "General Test", "Languages"],
    "website": "https://cuet.samarth.ac.in",
    "fees": "₹650-2750",
}

# `recommended_for` names the track that flags an exam as recommended; None means always.
EXAM_CATALOG: list[dict[str, Any]] = [
    {
        "id": "jee-main",
        **_JEE_MAIN,
        "recommended_for": TRACK_STEM,
        "relevance": ((TRACK_STEM, 95),),
        "fallback_relevance": 40,
    },
    {
        "id": "jee-advanced",
        "name": "JEE Advanced",
        "full_name": "Joint Entrance Examination Advanced",
        "type": "Engineering",
        "conducted_by": "IIT Roorkee",
        "application_start": "May 2025",
        "application_end": "May 2025",
        "exam_date": "June 2025",
        "result_date": "June 2025",
        "eligibility": "JEE Main qualified, Top 2.5 lakh",
        "pattern": "Computer Based Test - 2 papers",
        "syllabus": ["Physics", "Chemistry", "Mathematics"],
        "website": "https://jeeadv.ac.in",
        "fees": "₹2800",
        "recommended_for": TRACK_STEM,
        "relevance": ((TRACK_STEM, 90),),
        "fallback_relevance": 35,
    },
    {
        "id": "neet-ug",
        "name": "NEET UG",
        "full_name": "National Eligibility Entrance Test Undergraduate",
        "type": "Medical",
        "conducted_by": "NTA",
        "application_start": "February 2025",
        "application_end": "March 2025",
        "exam_date": "May 2025",
        "result_date": "June 2025",
        "eligibility": "12th with PCB, 50% aggregate",
        "pattern": "Pen & Paper - 720 marks",
        "syllabus": ["Physics", "Chemistry", "Biology"],
        "website": "https://neet.nta.nic.in",
        "fees": "₹1700-8800",
        "recommended_for": TRACK_MEDICAL,
        "relevance": ((TRACK_MEDICAL, 100),),
        "fallback_relevance": 25,
    },
    {
        "id": "cuet-ug",
        **_CUET_UG,
        "recommended_for": None,
        "relevance": (),
        "fallback_relevance": 85,
    },
    {
        "id": "cat",
        "name": "CAT",
        "full_name": "Common Admission Test",
        "type": "Management",
        "conducted_by": "IIM",
        "application_start": "August 2024",
        "application_end": "September 2024",
        "exam_date": "November 2024",
        "result_date": "January 2025",
        "eligibility": "Bachelor's degree, 50% aggregate",
        "pattern": "Computer Based Test - 3 hours",
        "syllabus": ["QA", "VARC", "LRDI"],
        "website": "https://iimcat.ac.in",
        "fees": "₹2300-4600",
        "recommended_for": TRACK_BUSINESS,
        "relevance": ((TRACK_BUSINESS, 90),),
        "fallback_relevance": 50,
    },
    {
        "id": "cmat",
        "name": "CMAT",
        "full_name": "Common Management Admission Test",
        "type": "Management",
        "conducted_by": "NTA",
        "application_start": "December 2024",
        "application_end": "January 2025",
        "exam_date": "February 2025",
        "result_date": "March 2025",
        "eligibility": "Bachelor's degree",
        "pattern": "Computer Based Test - 3 hours",
        "syllabus": ["QA", "LR", "Language", "General Awareness"],
        "website": "https://cmat.nta.nic.in",
        "fees": "₹2000",
        "recommended_for": TRACK_BUSINESS,
        "relevance": ((TRACK_BUSINESS, 75),),
        "fallback_relevance": 40,
    },
]

DEFAULT_EXAMS: list[dict[str, Any]] = [
    {"id": "jee-main-default", **_JEE_MAIN},
    {"id": "cuet-ug-default", **_CUET_UG},
]


def career_tracks(results: dict[str, Any] | None) -> set[str]:
    careers = [
        str(match.get("career") or "").lower()
        for match in ((results or {}).get("topCareerMatches") or [])
        if isinstance(match, dict)
    ]
    return {
        track
        for track, keywords in TRACK_KEYWORDS.items()
        if any(keyword in career for career in careers for keyword in keywords)
    }


def _relevance(entry: dict[str, Any], tracks: set[str]) -> int:
    for track, score in entry["relevance"]:
        if track in tracks:
            return score
    return entry["fallback_relevance"]


def _ranked(catalog: list[dict[str, Any]], tracks: set[str]) -> list[dict[str, Any]]:
    ranked = []
    for entry in deepcopy(catalog):
        entry["relevance_score"] = _relevance(entry, tracks)
        del entry["relevance"], entry["fallback_relevance"]
        recommended_for = entry.pop("recommended_for", False)
        if recommended_for is not False:
            entry["is_recommended"] = recommended_for is None or recommended_for in tracks
        ranked.append(entry)
    return sorted(ranked, key=lambda entry: entry["relevance_score"], reverse=True)


def score_colleges(results: dict[str, Any]) -> list[dict[str, Any]]:
    return _ranked(COLLEGE_CATALOG, career_tracks(results))


def score_exams(results: dict[str, Any]) -> list[dict[str, Any]]:
    return _ranked(EXAM_CATALOG, career_tracks(results))


def default_colleges() -> list[dict[str, Any]]:
    return deepcopy(DEFAULT_COLLEGES)


def default_exams() -> list[dict[str, Any]]:
    return deepcopy(DEFAULT_EXAMS)


def filter_colleges(
    colleges: list[dict[str, Any]],
    *,
    search: str | None = None,
    state: str | None = None,
    college_type: str | None = None,
) -> list[dict[str, Any]]:
    filtered = colleges
    if search:
        needle = search.lower()
        filtered = [
            college
            for college in filtered
            if needle in college["name"].lower()
            or needle in college["location"].lower()
            or any(needle in course.lower() for course in college["courses"])
        ]
    if state and state != "all":
        filtered = [college for college in filtered if college["state"] == state]
    if college_type and college_type != "all":
        filtered = [college for college in filtered if college["type"] == college_type]
    return filtered


def filter_exams(
    exams: list[dict[str, Any]],
    *,
    search: str | None = None,
    exam_type: str | None = None,
) -> list[dict[str, Any]]:
    filtered = exams
    if search:
        needle = search.lower()
        filtered = [
            exam
            for exam in filtered
            if needle in exam["name"].lower()
            or needle in exam["full_name"].lower()
            or needle in exam["type"].lower()
        ]
    if exam_type and exam_type != "all":
        filtered = [exam for exam in filtered if exam["type"] == exam_type]
    return filtered


def distinct_values(entries: list[dict[str, Any]], key: str) -> list[str]:
    return list(dict.fromkeys(entry[key] for entry in entries))
