"""Tests for the Flask JSON API."""

HEALTHCARE_SMALL = {"industry": "healthcare", "company_size": "small"}
TECH_ENTERPRISE = {"industry": "technology", "company_size": "enterprise"}


def _closest(question, preferred):
    values = [opt["value"] for opt in question["options"]]
    return min(values, key=lambda v: abs(v - preferred))


def _complete(client, preferred, max_steps=100):
    """Drive the wizard through the API until it completes."""
    for _ in range(max_steps):
        state = client.get("/api/assessment").get_json()
        if state["is_complete"]:
            return state
        question = state["current_question"]
        client.post("/api/assessment/answers", json={
            "question_id": question["id"],
            "value": _closest(question, preferred)
        })
        payload = client.post("/api/assessment/next").get_json()
        if payload["is_complete"]:
            return payload
    raise AssertionError("Assessment did not complete")


class TestCatalogRoutes:
    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.get_json()["status"] == "ok"

    def test_catalog(self, client):
        data = client.get("/api/catalog").get_json()
        assert len(data["domains"]) == 7
        assert data["question_count"] == 20
        assert data["maturity_levels"][0]["level"] == "optimizing"

    def test_unknown_route_is_json_404(self, client):
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.get_json()["error"] == "not_found"


class TestProfileRoutes:
    def test_fresh_state(self, client):
        data = client.get("/api/assessment").get_json()
        assert data["state"] == "no_profile"
        assert data["current_question"] is None

    def test_set_profile(self, client):
        response = client.post("/api/assessment/profile", json=TECH_ENTERPRISE)
        assert response.status_code == 201

        data = response.get_json()
        assert data["state"] == "profile_set"
        assert data["question_count"] == 10
        assert data["current_question"]["id"] == "data-storage"
        assert data["current_domain"]["name"] == "Data Infrastructure"

    def test_invalid_profile(self, client):
        response = client.post("/api/assessment/profile", json={"industry": "aerospace", "company_size": "small"})
        assert response.status_code == 400

        data = response.get_json()
        assert data["error"] == "invalid_profile"
        assert data["field"] == "industry"


class TestAnswerRoutes:
    def test_missing_fields(self, client):
        client.post("/api/assessment/profile", json=TECH_ENTERPRISE)
        response = client.post("/api/assessment/answers", json={"question_id": "data-storage"})
        assert response.status_code == 400
        assert response.get_json()["error"] == "bad_request"

    def test_answer_before_profile(self, client):
        response = client.post("/api/assessment/answers", json={"question_id": "data-storage", "value": 3})
        assert response.status_code == 400
        assert response.get_json()["error"] == "invalid_session_state"

    def test_unknown_question(self, client):
        client.post("/api/assessment/profile", json=TECH_ENTERPRISE)
        response = client.post("/api/assessment/answers", json={"question_id": "nope", "value": 3})
        assert response.status_code == 400
        assert response.get_json()["error"] == "unknown_question"

    def test_invalid_value(self, client):
        client.post("/api/assessment/profile", json=TECH_ENTERPRISE)
        response = client.post("/api/assessment/answers", json={"question_id": "data-storage", "value": 7})
        assert response.status_code == 400
        assert response.get_json()["error"] == "invalid_answer_value"

    def test_answers_persist_between_requests(self, client):
        client.post("/api/assessment/profile", json=HEALTHCARE_SMALL)
        client.post("/api/assessment/answers", json={"question_id": "data-storage", "value": 3})

        questions = client.get("/api/assessment/questions").get_json()["questions"]
        ids = [q["id"] for q in questions]
        assert ids[-2:] == ["healthcare-data-privacy", "advanced-data-integration"]
        assert questions[0]["answer"] == 3

    def test_navigation_persists(self, client):
        client.post("/api/assessment/profile", json=TECH_ENTERPRISE)
        client.post("/api/assessment/next")
        client.post("/api/assessment/next")
        assert client.get("/api/assessment").get_json()["current_index"] == 2

        client.post("/api/assessment/previous")
        assert client.get("/api/assessment").get_json()["current_index"] == 1


class TestResultRoutes:
    def test_result_not_ready(self, client):
        client.post("/api/assessment/profile", json=TECH_ENTERPRISE)
        response = client.get("/api/assessment/result")
        assert response.status_code == 404

    def test_full_run(self, client):
        client.post("/api/assessment/profile", json=TECH_ENTERPRISE)
        payload = _complete(client, 4)

        assert payload["state"] == "complete"
        assert payload["result"]["total_score"] == 100

        response = client.get("/api/assessment/result").get_json()
        result = response["result"]
        assert result["maturity_level"] == "optimizing"
        assert result == payload["result"]
        assert response["maturity"]["level"] == "optimizing"
        assert response["maturity"]["level_color"] == "#17a2b8"
        assert response["maturity"]["next_step"]

    def test_reset(self, client):
        client.post("/api/assessment/profile", json=TECH_ENTERPRISE)
        _complete(client, 2)

        data = client.post("/api/assessment/reset").get_json()
        assert data["state"] == "no_profile"
        assert client.get("/api/assessment/result").status_code == 404


class TestSnapshotRoutes:
    def test_export_and_import(self, app, client):
        client.post("/api/assessment/profile", json=HEALTHCARE_SMALL)
        _complete(client, 3)
        snapshot = client.get("/api/assessment/snapshot").get_json()

        assert snapshot["version"] == 1
        assert snapshot["is_complete"] is True
        assert snapshot["result"] is not None

        other = app.test_client()
        data = other.put("/api/assessment/snapshot", json=snapshot).get_json()
        assert data["state"] == "complete"
        restored = other.get("/api/assessment/result").get_json()["result"]
        assert restored["total_score"] == snapshot["result"]["total_score"]

    def test_invalid_import(self, client):
        response = client.put("/api/assessment/snapshot", json={"profile": {"industry": "technology"}})
        assert response.status_code == 400
        assert response.get_json()["error"] == "invalid_snapshot"

    def test_import_rejects_never_asked_follow_up(self, client):
        response = client.put("/api/assessment/snapshot", json={
            "profile": HEALTHCARE_SMALL,
            "answers": {"healthcare-data-privacy": 4}
        })
        assert response.status_code == 400
        assert response.get_json()["error"] == "invalid_snapshot"
        assert client.get("/api/assessment").get_json()["state"] == "no_profile"

    def test_import_rejects_incomplete_completed_run(self, client):
        response = client.put("/api/assessment/snapshot", json={
            "profile": TECH_ENTERPRISE,
            "answers": {},
            "is_complete": True
        })
        assert response.status_code == 400


class TestPreviewRoute:
    def test_preview_does_not_touch_session(self, client):
        response = client.post("/api/assessment/preview", json={
            "profile": HEALTHCARE_SMALL,
            "answers": {"data-storage": 3}
        })
        ids = [q["id"] for q in response.get_json()["questions"]]
        assert "healthcare-data-privacy" in ids

        assert client.get("/api/assessment").get_json()["state"] == "no_profile"

    def test_preview_invalid_profile(self, client):
        response = client.post("/api/assessment/preview", json={"profile": {}})
        assert response.status_code == 400
        assert response.get_json()["error"] == "invalid_profile"

    def test_preview_ignores_answers_for_gated_questions(self, client):
        response = client.post("/api/assessment/preview", json={
            "profile": HEALTHCARE_SMALL,
            "answers": {"healthcare-data-privacy": 4}
        })
        ids = [q["id"] for q in response.get_json()["questions"]]
        assert "healthcare-data-privacy" not in ids

    def test_preview_rejects_non_object_answers(self, client):
        response = client.post("/api/assessment/preview", json={
            "profile": HEALTHCARE_SMALL,
            "answers": ["data-storage"]
        })
        assert response.status_code == 400
        assert response.get_json()["error"] == "bad_request"
