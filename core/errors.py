from typing import Any, Dict, List


class AgentError(Exception):
    """Base class for every failure the agent pipeline knows how to classify."""


class BriefValidationError(AgentError):
    """The request body does not satisfy the brief contract.

    ``issues`` holds every violation, grouped the way the HTTP layer reports them:
    ``{"formErrors": [...], "fieldErrors": {"budget.amount": [...], ...}}``.
    """

    def __init__(self, issues: Dict[str, Any]):
        self.issues = issues
        super().__init__(f"Invalid payload: {self.summary()}")

    def summary(self) -> str:
        parts: List[str] = list(self.issues.get("formErrors", []))
        for field, messages in self.issues.get("fieldErrors", {}).items():
            parts.append(f"{field}: {'; '.join(messages)}")
        return ", ".join(parts)


class BackendUnavailable(AgentError):
    """No credential is configured, so the generation backend is never called."""


class BackendError(AgentError):
    """The generation backend call failed, timed out, was rejected or came back empty."""


class MalformedPlan(AgentError):
    """Backend output could not be read as a complete plan document."""
