import json
from pathlib import Path
import sys

import httpx

sys.path.append(str(Path(__file__).resolve().parents[1]))

from conftest import gemini_reply
from skill_bridge.core.config import settings

PROFILE = {"displayName": "Asha", "age": 19, "course": "graduation-pursuing", "interests": ["Design"]}


def test_generate_assessment_requires_auth(client):
    response = client.post("/api/generate/assessment", json={"prompt": "p", "userProfile": PROFILE})
    assert response.status_code == 401


def test_generate_assessment_rejects_missing_input(client, register, gemini):
    headers = register()["headers"]
    response = client.post("/api/generate/assessment", headers=headers, json={"prompt": "", "userProfile": PROFILE})
    assert response.status_code == 400
    assert response.json() == {"error": "Prompt and user profile are required"}

    response = client.post("/api/generate/assessment", headers=headers, json={"prompt": "p"})
    assert response.status_code == 400


def test_generate_analysis_rejects_missing_responses(client, register, gemini):
    headers = register()["headers"]
    response = client.post("/api/generate/analysis", headers=headers, json={"prompt": "p", "userProfile": PROFILE})
    assert response.status_code == 400
    assert response.json() == {"error": "Prompt, user profile, and responses are required"}


def test_missing_api_key_is_a_server_error(client, register, monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", None)
    headers = register()["headers"]
    response = client.post("/generate/assessment", headers=headers, json={"prompt": "p", "userProfile": PROFILE})
    assert response.status_code == 500
    assert response.json() == {"error": "Gemini API key not configured"}


def test_question_set_recovered_from_prose(client, register, gemini):
    question_set = {
        "title": "Custom",
        "description": "d",
        "estimatedTime": 10,
        "questions": [{"id": "q1", "type": "text", "question": "Why?", "required": True}],
    }
    gemini["reply"] = lambda request: httpx.Response(
        200, json=gemini_reply(f"Sure! ```json\n{json.dumps(question_set)}\n``` Hope this helps.")
    )
    headers = register()["headers"]
    response = client.post("/api/generate/assessment", headers=headers, json={"prompt": "make questions", "userProfile": PROFILE})
    assert response.status_code == 200
    assert response.json() == {"assessment": question_set}

    sent = gemini["requests"][0]
    assert sent.url.path.endswith(f"/models/{settings.gemini_model}:generateContent")
    assert sent.url.params["key"] == "test-key"
    body = json.loads(sent.content)
    assert body["contents"][0]["parts"][0]["text"] == "make questions"
    assert body["generationConfig"]["temperature"] == settings.generation_temperature
    assert body["generationConfig"]["maxOutputTokens"] == settings.generation_max_output_tokens


def test_unparsable_question_set_returns_three_question_default(client, register, gemini):
    gemini["reply"] = lambda request: httpx.Response(200, json=gemini_reply("I cannot help with that."))
    headers = register()["headers"]
    response = client.post("/api/generate/assessment", headers=headers, json={"prompt": "p", "userProfile": PROFILE})
    assert response.status_code == 200
    questions = response.json()["assessment"]["questions"]
    assert [question["id"] for question in questions] == ["q1", "q2", "q3"]
    assert questions[2]["scaleRange"]["max"] == 10


def test_analysis_without_required_fields_returns_default(client, register, gemini):
    gemini["reply"] = lambda request: httpx.Response(200, json=gemini_reply('{"recommendedCareers": []}'))
    headers = register()["headers"]
    response = client.post(
        "/api/generate/analysis",
        headers=headers,
        json={"prompt": "p", "userProfile": PROFILE, "responses": {"q1": "x"}},
    )
    assert response.status_code == 200
    careers = response.json()["analysis"]["recommendedCareers"]
    assert careers[0]["title"] == "Software Developer"
    assert careers[0]["match"] == 85


def test_valid_analysis_passes_through(client, register, gemini):
    analysis = {"overallAnalysis": "Strong fit", "recommendedCareers": [{"title": "Nurse", "match": 90}]}
    gemini["reply"] = lambda request: httpx.Response(200, json=gemini_reply(json.dumps(analysis)))
    headers = register()["headers"]
    response = client.post(
        "/api/generate/analysis",
        headers=headers,
        json={"prompt": "p", "userProfile": PROFILE, "responses": {}},
    )
    assert response.status_code == 200
    assert response.json() == {"analysis": analysis}


def test_upstream_error_status_is_forwarded(client, register, gemini):
    gemini["reply"] = lambda request: httpx.Response(429, json={"error": {"message": "quota"}})
    headers = register()["headers"]
    response = client.post("/api/generate/assessment", headers=headers, json={"prompt": "p", "userProfile": PROFILE})
    assert response.status_code == 429
    assert response.json() == {"error": "Failed to generate assessment questions"}


def test_upstream_transport_failure_is_bad_gateway(client, register, gemini):
    def fail(request):
        raise httpx.ConnectError("connection refused", request=request)

    gemini["reply"] = fail
    headers = register()["headers"]
    response = client.post(
        "/api/generate/analysis",
        headers=headers,
        json={"prompt": "p", "userProfile": PROFILE, "responses": {}},
    )
    assert response.status_code == 502
    assert response.json() == {"error": "Failed to analyze assessment responses"}


def test_empty_candidates_is_a_server_error(client, register, gemini):
    gemini["reply"] = lambda request: httpx.Response(200, json={"candidates": []})
    headers = register()["headers"]
    response = client.post("/api/generate/assessment", headers=headers, json={"prompt": "p", "userProfile": PROFILE})
    assert response.status_code == 500
    assert response.json() == {"error": "No content generated from Gemini"}


def test_generation_is_rate_limited_per_user(client, register, gemini, monkeypatch):
    from skill_bridge.core.ratelimit import ai_rate_limiter

    monkeypatch.setattr(ai_rate_limiter, "limit", 2)
    headers = register()["headers"]
    body = {"prompt": "p", "userProfile": PROFILE}
    assert client.post("/generate/assessment", headers=headers, json=body).status_code == 200
    assert client.post("/generate/assessment", headers=headers, json=body).status_code == 200
    response = client.post("/generate/assessment", headers=headers, json=body)
    assert response.status_code == 429
    assert response.json()["detail"]["message"] == "Rate limit exceeded"


def test_json_mode_requests_json_mime_type(monkeypatch):
    from skill_bridge.services.generation import build_generation_body

    assert "responseMimeType" not in build_generation_body("p")["generationConfig"]
    monkeypatch.setattr(settings, "generation_json_mode", True)
    assert build_generation_body("p")["generationConfig"]["responseMimeType"] == "application/json"


def test_prompts_embed_profile_and_responses():
    from skill_bridge.services.prompts import build_analysis_prompt, build_question_set_prompt

    question_prompt = build_question_set_prompt(PROFILE)
    assert "- Name: Asha" in question_prompt
    assert "- Interests: Design" in question_prompt

    analysis_prompt = build_analysis_prompt(PROFILE, {"q1": "Arts and Creativity"})
    assert '"q1": "Arts and Creativity"' in analysis_prompt


def test_analysis_with_non_string_summary_returns_default(client, register, gemini):
    analysis = {"overallAnalysis": 42, "recommendedCareers": [{"title": "Nurse", "match": 90}]}
    gemini["reply"] = lambda request: httpx.Response(200, json=gemini_reply(json.dumps(analysis)))
    headers = register()["headers"]
    response = client.post(
        "/api/generate/analysis",
        headers=headers,
        json={"prompt": "p", "userProfile": PROFILE, "responses": {}},
    )
    assert response.status_code == 200
    assert response.json()["analysis"]["recommendedCareers"][0]["title"] == "Software Developer"


def test_analysis_with_empty_career_list_is_accepted(client, register, gemini):
    analysis = {"overallAnalysis": "Still exploring", "recommendedCareers": []}
    gemini["reply"] = lambda request: httpx.Response(200, json=gemini_reply(json.dumps(analysis)))
    headers = register()["headers"]
    response = client.post(
        "/api/generate/analysis",
        headers=headers,
        json={"prompt": "p", "userProfile": PROFILE, "responses": {}},
    )
    assert response.json() == {"analysis": analysis}


def test_analysis_validation_requires_text_summary():
    from skill_bridge.services.assessment import is_valid_analysis

    assert not is_valid_analysis({"overallAnalysis": 42, "recommendedCareers": []})
    assert not is_valid_analysis({"overallAnalysis": "   ", "recommendedCareers": []})
    assert not is_valid_analysis({"overallAnalysis": "ok", "recommendedCareers": {}})
    assert is_valid_analysis({"overallAnalysis": "ok", "recommendedCareers": []})
