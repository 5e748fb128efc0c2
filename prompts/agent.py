from typing import List, Sequence

from core.schemas import Brief, Budget, MediaAttachment

NO_NOTES_PLACEHOLDER = "No notes provided"

CADENCE_UNITS = {"daily": "day", "weekly": "week", "monthly": "month"}
PLATFORM_SPLITS = {
    "meta": "Meta only",
    "google": "Google only",
    "both": "split across Meta and Google",
}

AGENT_PERSONA_PROMPT = """
  **AI Persona:**

  You are StorePilot, an autonomous e-commerce operator. You turn a merchant's campaign brief into an operational plan covering catalog work, sales pushes, loyalty rewards, SEO, automations, paid ads and customer support. Your plans are concrete: every task has an owner, a cadence and a measurable success metric.
"""

PLAN_OUTPUT_FORMAT_PROMPT = """
  **Output Format (JSON):**

  Respond with a single JSON document and nothing else: no Markdown fences, no commentary before or after it. The document must match this shape exactly. Every key is required; arrays may be empty but every item must carry every listed key as a string.

  {
    "executiveSummary": "string // Two or three sentences summarising the plan",
    "taskMatrix": [
      {
        "title": "string // The task",
        "owner": "string // Who runs it (e.g. 'Agent', 'Merchandiser', 'Support lead')",
        "cadence": "string // How often (e.g. 'Daily', 'Weekly', 'Launch week')",
        "successMetric": "string // How success is measured"
      }
    ],
    "automations": [
      {
        "title": "string",
        "description": "string",
        "trigger": "string // Event that starts the automation",
        "action": "string // What the automation does"
      }
    ],
    "channelPlaybooks": [
      {
        "channel": "string",
        "content": "string // Content plan for the channel",
        "cadence": "string"
      }
    ],
    "adStrategy": [
      {
        "platform": "string",
        "audience": "string",
        "creatives": "string",
        "budgetNotes": "string"
      }
    ],
    "seoPlan": "string",
    "loyaltyPlan": "string"
  }
"""


def derive_media_tokens(media: Sequence[MediaAttachment]) -> List[str]:
    """One prompt line per attachment; the embedded payload is never read."""
    tokens = []
    for item in media:
        descriptor = f"Notes: {item.notes}" if item.notes else NO_NOTES_PLACEHOLDER
        tokens.append(f"{item.kind.upper()} - {item.name} ({descriptor})")
    return tokens


def _format_amount(amount: float) -> str:
    return str(int(amount)) if float(amount).is_integer() else repr(float(amount))


def _format_budget(budget: Budget) -> str:
    line = f"{_format_amount(budget.amount)} {budget.currency} per {CADENCE_UNITS[budget.cadence]}"
    if budget.platform:
        line += f", {PLATFORM_SPLITS[budget.platform]}"
    return line


def _bullets(items: Sequence[str], empty: str) -> str:
    if not items:
        return f"- {empty}"
    return "\n".join(f"- {item}" for item in items)


def build_agent_prompt(brief: Brief, media_tokens: Sequence[str]) -> str:
    """
    Render a brief and its media tokens into the instruction sent to the backend.

    Identical inputs always produce identical text: values are emitted in input order
    and nothing time- or environment-dependent is included.
    """
    sections = [
        AGENT_PERSONA_PROMPT.strip(),
        "**Brief:**",
        f"Objective: {brief.objective.strip()}",
        f"Focus areas: {', '.join(brief.focus_areas) if brief.focus_areas else 'None specified'}",
        f"Target channels: {', '.join(brief.target_channels) if brief.target_channels else 'None specified'}",
        "Tasks:\n" + _bullets(brief.tasks, "No tasks specified, propose the most valuable ones"),
    ]
    if brief.tone:
        sections.append(f"Tone: {brief.tone}")
    if brief.constraints:
        sections.append(f"Constraints: {brief.constraints}")
    if brief.budget:
        sections.append(
            f"Budget: {_format_budget(brief.budget)}. "
            "Allocate spend in adStrategy[].budgetNotes and keep the total within this budget."
        )
    sections.append("Media assets:\n" + _bullets(media_tokens, "None supplied"))
    sections.append(PLAN_OUTPUT_FORMAT_PROMPT.strip())
    return "\n\n".join(sections) + "\n"
