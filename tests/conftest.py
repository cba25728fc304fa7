import json
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from planwizard.main import app
from planwizard.run_utils import state
from planwizard.utils.deps import get_prompt_relay


class FakeRelay:
    """Stands in for PromptRelay; records prompts and replays a canned reply."""

    def __init__(self, reply: str = "", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


AI_PLAN = {
    "executiveSummary": "Acme becomes the smartest shop in Retail.",
    "quickWins": [
        {
            "action": "Launch a support bot",
            "impact": "Faster answers",
            "tools": ["Intercom"],
            "timeframe": "30 days",
        }
    ],
    "strategicInitiatives": [
        {
            "initiative": "Demand forecasting",
            "description": "Predict stock levels",
            "timeframe": "3-6 months",
            "budget": "$20,000",
            "roi": "150%",
        }
    ],
    "implementationRoadmap": {
        "phase1": "Pilot",
        "phase2": "Scale",
        "phase3": "Optimize",
    },
    "techStack": [
        {"tool": "OpenAI API", "purpose": "Chat", "integration": "Webhook"}
    ],
    "successMetrics": [
        {"metric": "CSAT", "target": "90%", "measurement": "Monthly survey"}
    ],
}


@pytest.fixture
def ai_plan_json() -> str:
    return json.dumps(AI_PLAN)


@pytest.fixture(autouse=True)
def _clear_sessions():
    state.SESSIONS.clear()
    yield
    state.SESSIONS.clear()


@pytest.fixture
def make_client():
    def _make(relay=None) -> TestClient:
        app.dependency_overrides[get_prompt_relay] = lambda: relay
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
