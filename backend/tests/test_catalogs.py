from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skill_bridge.services.career_paths import career_paths
from skill_bridge.services.colleges import (
    career_tracks,
    default_colleges,
    distinct_values,
    filter_colleges,
    filter_exams,
    score_colleges,
    score_exams,
)
from skill_bridge.services.resources import (
    featured_resources,
    filter_resources,
    resource_categories,
    score_resources,
)


def _results(*careers, gaps=()):
    return {
        "topCareerMatches": [{"career": career, "matchPercentage": 80} for career in careers],
        "skillGaps": list(gaps),
    }


def test_career_tracks_come_from_career_titles():
    assert career_tracks(_results("Software Developer")) == {"stem"}
    assert career_tracks(_results("Business Analyst", "Health Educator")) == {"business", "medical"}
    assert career_tracks(_results("UX/UI Designer")) == set()
    assert career_tracks(None) == set()


def test_engineering_matches_rank_technical_institutes_first():
    colleges = score_colleges(_results("Software Engineer"))
    assert [college["id"] for college in colleges] == [
        "iit-bombay",
        "iit-delhi",
        "nit-trichy",
        "anna-university",
        "du",
        "jnu",
        "aiims-delhi",
    ]
    assert colleges[0]["relevance_score"] == 98
    assert "relevance" not in colleges[0]


def test_colleges_without_a_track_favour_delhi_university():
    colleges = score_colleges(_results("Content Creator"))
    assert [(college["id"], college["relevance_score"]) for college in colleges[:3]] == [
        ("du", 80),
        ("iit-bombay", 75),
        ("iit-delhi", 70),
    ]


def test_business_track_outranks_stem_for_delhi_university():
    colleges = {college["id"]: college["relevance_score"] for college in score_colleges(_results("Data Analyst"))}
    # "Data Analyst" is both stem and business; business is checked first.
    assert colleges["du"] == 85
    assert colleges["iit-delhi"] == 95


def test_medical_track_flags_neet():
    exams = score_exams(_results("Medical Officer"))
    assert exams[0]["id"] == "neet-ug"
    flags = {exam["id"]: exam["is_recommended"] for exam in exams}
    assert flags == {
        "neet-ug": True,
        "cuet-ug": True,
        "jee-main": False,
        "jee-advanced": False,
        "cat": False,
        "cmat": False,
    }


def test_stem_exam_order():
    exams = score_exams(_results("Data Scientist"))
    assert [exam["id"] for exam in exams] == ["jee-main", "jee-advanced", "cuet-ug", "cat", "cmat", "neet-ug"]


def test_college_filters():
    colleges = score_colleges(_results("Software Engineer"))
    assert [college["id"] for college in filter_colleges(colleges, state="Tamil Nadu")] == [
        "nit-trichy",
        "anna-university",
    ]
    assert [college["id"] for college in filter_colleges(colleges, search="mbbs")] == ["aiims-delhi"]
    assert [college["id"] for college in filter_colleges(colleges, search="mumbai", college_type="IIT")] == ["iit-bombay"]
    assert len(filter_colleges(colleges, state="all", college_type="all")) == 7
    assert distinct_values(colleges, "state") == ["Maharashtra", "Delhi", "Tamil Nadu"]


def test_exam_filters_and_defaults():
    exams = score_exams(_results("Software Engineer"))
    assert [exam["id"] for exam in filter_exams(exams, exam_type="Management")] == ["cat", "cmat"]
    assert [exam["id"] for exam in filter_exams(exams, search="undergraduate")] == ["cuet-ug", "neet-ug"]
    defaults = default_colleges()
    defaults[0]["name"] = "changed"
    assert default_colleges()[0]["name"] == "Indian Institute of Technology Delhi"


def test_resources_score_skill_gaps_and_careers():
    resources = score_resources(_results("Data Analyst", gaps=["Leadership", "Communication"]))
    assert [(resource["id"], resource["relevance_score"]) for resource in resources] == [
        ("interview-prep-guide", 100),
        ("career-roadmap-template", 95),
        ("networking-masterclass", 93),
        ("tech-industry-guide", 92),
        ("skill-gap-analyzer", 90),
        ("ats-resume-template", 88),
        ("leadership-development-plan", 88),
        ("salary-negotiation-toolkit", 80),
        ("personal-branding-checklist", 75),
        ("remote-work-success-guide", 70),
    ]
    assert "base_score" not in resources[0]
    featured = featured_resources(resources)
    assert len(featured) == 7
    assert all(resource["relevance_score"] > 80 for resource in featured)


def test_resource_filters():
    resources = score_resources(_results())
    assert [resource["id"] for resource in filter_resources(resources, search="linkedin")] == [
        "networking-masterclass",
        "personal-branding-checklist",
    ]
    assert [resource["id"] for resource in filter_resources(resources, category="Job Search")] == [
        "ats-resume-template",
        "interview-prep-guide",
    ]
    assert len(filter_resources(resources, resource_type="template")) == 3
    assert resource_categories(resources)[0] == "Career Planning"


def test_career_paths_need_results():
    assert career_paths(None) == []
    assert career_paths({}) == []

    paths = career_paths(_results("UX/UI Designer"))
    assert [path["id"] for path in paths] == ["data-science", "software-development", "ux-design"]
    steps = paths[0]["steps"]
    assert [step["is_current_step"] for step in steps] == [True, False, False, False]
    assert steps[1]["prerequisites"] == ["foundations"]
    assert steps[0]["actions"][2]["url"] is None
