"""Shared fixtures for the agent pipeline tests."""

import json
from typing import Any, Dict, List, Optional

import pytest


class FakeBackend:
    """Stands in for GeminiBackend: records prompts, returns ``output`` or raises ``error``."""

    def __init__(self, output: Optional[str] = None, error: Optional[BaseException] = None):
        self.output = output
        self.error = error
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def brief_payload() -> Dict[str, Any]:
    """Wire-shaped brief, as the dashboard posts it."""
    return {
        "objective": "Launch winter drop and grow loyalty signups",
        "focusAreas": ["catalog", "loyalty"],
        "targetChannels": ["instagram"],
        "tasks": ["List new arrivals"],
        "media": [],
    }


@pytest.fixture
def full_brief_payload(brief_payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        **brief_payload,
        "focusAreas": ["catalog", "sales", "loyalty", "ads"],
        "targetChannels": ["instagram", "meta-ads", "google-ads"],
        "tasks": ["List new arrivals with price testing", "Launch Meta and Google campaigns"],
        "tone": "Energetic merchandiser",
        "constraints": "Respect brand tone, stay compliant, and surface approvals as needed.",
        "budget": {"amount": 5000, "currency": "USD", "cadence": "monthly", "platform": "both"},
        "media": [
            {
                "id": "m1",
                "name": "banner.png",
                "kind": "image",
                "dataUrl": "data:image/png;base64,iVBORw0KGgo=",
            },
            {
                "id": "m2",
                "name": "lookbook.mp4",
                "kind": "video",
                "dataUrl": "data:video/mp4;base64,AAAAIGZ0eXA=",
                "notes": "Auto-trim to 15s snippets",
            },
        ],
    }


@pytest.fixture
def plan_data() -> Dict[str, Any]:
    return {
        "executiveSummary": "Ship the winter drop and convert buyers into loyalty members.",
        "taskMatrix": [
            {
                "title": "List new arrivals",
                "owner": "Agent",
                "cadence": "Weekly",
                "successMetric": "All winter SKUs live by Friday",
            }
        ],
        "automations": [
            {
                "title": "Welcome points",
                "description": "Reward first purchase",
                "trigger": "First order",
                "action": "Credit 500 points",
            }
        ],
        "channelPlaybooks": [
            {"channel": "instagram", "content": "Daily winter drop reels", "cadence": "Daily"}
        ],
        "adStrategy": [],
        "seoPlan": "Optimise winter collection pages.",
        "loyaltyPlan": "Double points during launch week.",
    }


@pytest.fixture
def plan_json(plan_data: Dict[str, Any]) -> str:
    return json.dumps(plan_data)
