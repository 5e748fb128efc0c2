from typing import Optional

from pydantic import ValidationError

from core.errors import MalformedPlan
from core.logger import get_logger
from core.schemas import Plan

logger = get_logger(__name__)

JSON_FENCE = "```json"


def _extract_json_block(text: str) -> Optional[str]:
    """Return the body of a ```json fence when the whole output is that fence."""
    stripped = text.strip()
    if not stripped.startswith(JSON_FENCE) or not stripped.endswith("```"):
        return None
    body = stripped[len(JSON_FENCE) : -3]
    return body.strip() if body.strip() else None


def parse_plan(raw: str) -> Plan:
    """
    Read backend output as a Plan.

    Missing keys, wrong types and non-JSON text all raise MalformedPlan; nothing is
    defaulted. A single ```json fence around the document is tolerated.
    """
    document = _extract_json_block(raw)
    if document is not None:
        logger.info("Parsing JSON block from backend response.")
    else:
        document = raw

    try:
        plan = Plan.model_validate_json(document, by_alias=True, by_name=False)
    except ValidationError as e:
        logger.warning(f"Backend output is not a valid plan ({e.error_count()} issue(s)).")
        logger.debug(f"Plan validation errors: {e.errors(include_url=False)}")
        raise MalformedPlan(f"Backend output is not a valid plan: {e.error_count()} issue(s)") from e

    logger.info(
        f"Parsed plan: {len(plan.task_matrix)} tasks, {len(plan.automations)} automations, "
        f"{len(plan.channel_playbooks)} playbooks, {len(plan.ad_strategy)} ad lines."
    )
    return plan
