from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skill_bridge.services.fallbacks import handler_question_set

FIVE_ANSWERS = {
    "q1": "Arts and Creativity",
    "q2": "A calm studio with room to sketch",
    "q3": 8,
    "q4": "In small groups",
    "q5": ["Creative Skills", "Communication"],
}


def _walk_to_submission(client, headers, session_id, answers):
    base = f"/api/assessment/sessions/{session_id}"
    state = client.post(f"{base}/start", headers=headers).json()
    while state["step"] == "assessment":
        question = state["current_question"]
        state = client.put(
            f"{base}/responses/{question['id']}",
            headers=headers,
            json={"value": answers[question["id"]]},
        ).json()
        assert state["can_proceed"] is True
        response = client.post(f"{base}/next", headers=headers)
        assert response.status_code == 200
        state = response.json()
    return state


def test_session_requires_completed_profile(client, register):
    headers = register()["headers"]
    response = client.post("/api/assessment/sessions", headers=headers)
    assert response.status_code == 409


def test_unavailable_handlers_still_reach_results(client, profiled_user, internal_handler):
    headers = profiled_user()["headers"]
    state = client.post("/api/assessment/sessions", headers=headers).json()
    assert state["step"] == "intro"
    assert state["total_questions"] == 5

    final = _walk_to_submission(client, headers, state["session_id"], FIVE_ANSWERS)
    assert final["step"] == "results"
    assert final["analysis"]["recommendedCareers"][0]["title"] == "UX/UI Designer"
    assert final["results"]["topCareerMatches"][0]["matchPercentage"] == 83
    assert internal_handler["calls"] == ["/api/generate/assessment", "/api/generate/analysis"]

    status = client.get("/user/assessment/status", headers=headers).json()
    assert status["completed"] is True
    assert status["needs_retake"] is False


def test_handler_question_set_is_used_when_available(client, profiled_user, internal_handler):
    internal_handler["assessment"] = handler_question_set()
    headers = profiled_user()["headers"]
    state = client.post("/api/assessment/sessions", headers=headers).json()
    assert [question["id"] for question in state["question_set"]["questions"]] == ["q1", "q2", "q3"]


def test_cannot_advance_without_required_answer(client, profiled_user):
    headers = profiled_user()["headers"]
    session_id = client.post("/api/assessment/sessions", headers=headers).json()["session_id"]
    base = f"/api/assessment/sessions/{session_id}"
    client.post(f"{base}/start", headers=headers)

    response = client.post(f"{base}/next", headers=headers)
    assert response.status_code == 400

    state = client.put(f"{base}/responses/q1", headers=headers, json={"value": "Science and Research"}).json()
    assert state["can_proceed"] is True
    state = client.post(f"{base}/next", headers=headers).json()
    assert state["current_index"] == 1
    state = client.post(f"{base}/previous", headers=headers).json()
    assert state["current_index"] == 0
    assert state["responses"] == {"q1": "Science and Research"}


def test_sessions_are_private_to_their_owner(client, profiled_user):
    owner = profiled_user("student1")["headers"]
    other = profiled_user("student2")["headers"]
    session_id = client.post("/api/assessment/sessions", headers=owner).json()["session_id"]
    assert client.get(f"/api/assessment/sessions/{session_id}", headers=other).status_code == 404
    assert client.get(f"/api/assessment/sessions/{session_id}", headers=owner).status_code == 200


def test_returning_user_sees_completed_and_can_retake(client, profiled_user, internal_handler):
    headers = profiled_user()["headers"]
    state = client.post("/api/assessment/sessions", headers=headers).json()
    _walk_to_submission(client, headers, state["session_id"], FIVE_ANSWERS)

    again = client.post("/api/assessment/sessions", headers=headers).json()
    assert again["step"] == "completed"
    assert again["results"]["topCareerMatches"][0]["career"] == "UX/UI Designer"

    retake = client.post(f"/api/assessment/sessions/{again['session_id']}/retake", headers=headers).json()
    assert retake["step"] == "intro"
    assert retake["responses"] == {}
    assert retake["total_questions"] == 5
