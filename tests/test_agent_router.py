"""HTTP tests for /api/agent."""

import json

import pytest
from fastapi.testclient import TestClient

from app import app
from conftest import FakeBackend
from core.dependencies import get_agent_service
from core.gemini import GeminiBackend
from routers import agent_router
from services.agent_service import AgentService
from services.sample_plan import SAMPLE_PLAN, SAMPLE_RAW

SAMPLE_PLAN_JSON = SAMPLE_PLAN.model_dump(mode="json", by_alias=True)


@pytest.fixture
def use_service():
    """Install an AgentService for the duration of a test."""

    def install(service) -> TestClient:
        app.dependency_overrides[get_agent_service] = lambda: service
        return TestClient(app)

    yield install
    app.dependency_overrides.clear()


class ExplodingService:
    async def run(self, payload):
        raise RuntimeError("service blew up")


def test_sample_mode_without_credential(use_service, brief_payload) -> None:
    client = use_service(AgentService(GeminiBackend(api_key=None)))

    response = client.post("/api/agent", json=brief_payload)

    assert response.status_code == 200
    body = response.json()
    assert body["usedSample"] is True
    assert body["plan"] == SAMPLE_PLAN_JSON
    assert body["raw"] == SAMPLE_RAW


def test_short_objective_is_rejected(use_service, brief_payload) -> None:
    backend = FakeBackend(output="{}")
    client = use_service(AgentService(backend))
    brief_payload["objective"] = "hi"

    response = client.post("/api/agent", json=brief_payload)

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid payload"
    assert body["issues"]["fieldErrors"]["objective"] == ["Objective is too short"]
    assert backend.prompts == []


def test_every_issue_is_reported(use_service, full_brief_payload) -> None:
    client = use_service(AgentService(FakeBackend(output="{}")))
    full_brief_payload["focusAreas"] = ["growth"]
    full_brief_payload["budget"]["amount"] = 0
    full_brief_payload["media"][0]["kind"] = "audio"

    response = client.post("/api/agent", json=full_brief_payload)

    assert response.status_code == 400
    assert set(response.json()["issues"]["fieldErrors"]) == {"focusAreas.0", "budget.amount", "media.0.kind"}


@pytest.mark.parametrize("body", ["not json", "", "{\"objective\": "])
def test_unparsable_body_is_rejected(use_service, body: str) -> None:
    client = use_service(AgentService(FakeBackend(output="{}")))

    response = client.post("/api/agent", content=body, headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json()["issues"]["formErrors"] == ["Request body must be valid JSON"]


def test_non_object_body_is_rejected(use_service) -> None:
    client = use_service(AgentService(FakeBackend(output="{}")))

    response = client.post("/api/agent", json=["objective"])

    assert response.status_code == 400
    assert response.json()["issues"]["formErrors"]


def test_live_plan(use_service, full_brief_payload, plan_json, plan_data) -> None:
    client = use_service(AgentService(FakeBackend(output=plan_json)))

    response = client.post("/api/agent", json=full_brief_payload)

    assert response.status_code == 200
    body = response.json()
    assert body["usedSample"] is False
    assert body["raw"] == plan_json
    assert body["plan"] == plan_data


def test_prose_output_falls_back(use_service, brief_payload) -> None:
    client = use_service(AgentService(FakeBackend(output="Focus on loyalty first, then ads.")))

    response = client.post("/api/agent", json=brief_payload)

    assert response.status_code == 200
    assert response.json()["usedSample"] is True
    assert response.json()["plan"] == SAMPLE_PLAN_JSON


def test_snake_case_plan_output_falls_back(use_service, brief_payload, plan_data) -> None:
    snake_case = {
        "executive_summary": plan_data["executiveSummary"],
        "task_matrix": [],
        "automations": [],
        "channel_playbooks": [],
        "ad_strategy": [],
        "seo_plan": plan_data["seoPlan"],
        "loyalty_plan": plan_data["loyaltyPlan"],
    }
    client = use_service(AgentService(FakeBackend(output=json.dumps(snake_case))))

    response = client.post("/api/agent", json=brief_payload)

    assert response.status_code == 200
    assert response.json()["usedSample"] is True
    assert response.json()["plan"] == SAMPLE_PLAN_JSON


def test_unexpected_failure_falls_back(use_service, brief_payload) -> None:
    client = use_service(ExplodingService())

    response = client.post("/api/agent", json=brief_payload)

    assert response.status_code == 200
    assert response.json()["usedSample"] is True


def test_fallback_failure_is_500(use_service, brief_payload, monkeypatch) -> None:
    def broken_sample():
        raise RuntimeError("sample unavailable")

    monkeypatch.setattr(agent_router, "get_sample_response", broken_sample)
    client = use_service(ExplodingService())

    response = client.post("/api/agent", json=brief_payload)

    assert response.status_code == 500
    assert response.json() == {"error": "Agent unavailable"}


def test_sample_endpoint(use_service) -> None:
    client = use_service(AgentService(GeminiBackend(api_key=None)))

    response = client.get("/api/agent/sample")

    assert response.status_code == 200
    assert response.json()["usedSample"] is True
    assert response.json()["plan"] == SAMPLE_PLAN_JSON


def test_root() -> None:
    response = TestClient(app).get("/")

    assert response.status_code == 200
    assert "message" in response.json()
