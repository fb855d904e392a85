from pathlib import Path
import sys

import httpx

sys.path.append(str(Path(__file__).resolve().parents[1]))

from conftest import gemini_reply
from skill_bridge.core.config import settings
from skill_bridge.services.requester import AssessmentRequester

PROFILE = {
    "displayName": "Asha",
    "age": 19,
    "course": "graduation-pursuing",
    "stream": "bca",
    "interests": ["Design", "Art"],
    "location": "Pune",
}


def _mock_requester(handler) -> AssessmentRequester:
    return AssessmentRequester(
        client=httpx.Client(transport=httpx.MockTransport(handler)),
        base_url="http://internal/api",
        auth_token="token-123",
    )


def test_request_sends_prompt_profile_and_auth_header():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["token"] = request.headers.get("X-Auth-Token")
        seen["body"] = request.read()
        return httpx.Response(200, json={"assessment": {"title": "T", "questions": []}})

    result = _mock_requester(handler).request_question_set(PROFILE)
    assert result == {"title": "T", "questions": []}
    assert seen["path"] == "/api/generate/assessment"
    assert seen["token"] == "token-123"
    assert b'"userProfile"' in seen["body"]
    assert b"Asha" in seen["body"]


def test_handler_error_status_falls_back_to_five_questions():
    requester = _mock_requester(lambda request: httpx.Response(500, json={"error": "boom"}))
    questions = requester.request_question_set(PROFILE)["questions"]
    assert [question["id"] for question in questions] == ["q1", "q2", "q3", "q4", "q5"]
    assert questions[4]["type"] == "multi-select"


def test_transport_failure_falls_back_to_heuristic_analysis():
    def handler(request):
        raise httpx.ConnectError("down", request=request)

    analysis = _mock_requester(handler).request_analysis(PROFILE, {"q2": "I like quiet studios"})
    assert analysis["recommendedCareers"][0]["title"] == "UX/UI Designer"
    assert analysis["recommendedCareers"][0]["match"] == 83


def test_missing_payload_key_falls_back():
    requester = _mock_requester(lambda request: httpx.Response(200, json={"unexpected": True}))
    assert len(requester.request_question_set(PROFILE)["questions"]) == 5
    analysis = requester.request_analysis(PROFILE, {})
    assert analysis["recommendedCareers"][0]["title"] == "UX/UI Designer"


def test_non_json_body_falls_back():
    requester = _mock_requester(lambda request: httpx.Response(200, text="<html>oops</html>"))
    assert len(requester.request_question_set(PROFILE)["questions"]) == 5


def test_handler_default_is_not_replaced_by_client_default(client, register, gemini):
    gemini["reply"] = lambda request: httpx.Response(200, json=gemini_reply("not json at all"))
    token = register()["payload"]["auth_token"]
    requester = AssessmentRequester(client=client, base_url="/api", auth_token=token)
    questions = requester.request_question_set(PROFILE)["questions"]
    assert [question["id"] for question in questions] == ["q1", "q2", "q3"]


def test_handler_configuration_error_yields_client_defaults(client, register, monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", None)
    token = register()["payload"]["auth_token"]
    requester = AssessmentRequester(client=client, base_url="/api", auth_token=token)

    assert len(requester.request_question_set(PROFILE)["questions"]) == 5
    analysis = requester.request_analysis(PROFILE, {"q1": "Arts and Creativity"})
    assert analysis["recommendedCareers"][0]["title"] == "UX/UI Designer"


def test_unauthenticated_requester_gets_client_defaults(client):
    requester = AssessmentRequester(client=client, base_url="/api")
    assert len(requester.request_question_set(PROFILE)["questions"]) == 5
