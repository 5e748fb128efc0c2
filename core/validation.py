from typing import Any, Dict, List

from pydantic import ValidationError

from core.errors import BriefValidationError
from core.logger import get_logger
from core.schemas import Brief

logger = get_logger(__name__)


def flatten_issues(error: ValidationError) -> Dict[str, Any]:
    """
    Group pydantic errors into form-level and per-field messages.

    Field paths are dotted wire names with list indices, e.g. ``media.0.kind``.
    Errors without a location (the body itself is not an object) land in ``formErrors``.
    """
    form_errors: List[str] = []
    field_errors: Dict[str, List[str]] = {}
    for item in error.errors():
        path = ".".join(str(part) for part in item["loc"])
        if not path:
            form_errors.append(item["msg"])
            continue
        field_errors.setdefault(path, []).append(item["msg"])
    return {"formErrors": form_errors, "fieldErrors": field_errors}


def validate_brief(payload: Any) -> Brief:
    """
    Turn an untyped request body into a Brief, or raise BriefValidationError listing
    every violated constraint. Unknown keys are ignored. Pure: no I/O.
    """
    if isinstance(payload, Brief):
        payload = payload.model_dump(by_alias=True)

    try:
        # wire names only; snake_case attribute names are not part of the request shape
        brief = Brief.model_validate(payload, by_alias=True, by_name=False)
    except ValidationError as e:
        issues = flatten_issues(e)
        logger.info(f"Brief rejected with {e.error_count()} issue(s): {list(issues['fieldErrors'])}")
        raise BriefValidationError(issues) from e

    logger.info(
        f"Brief accepted: focus={brief.focus_areas}, channels={len(brief.target_channels)}, "
        f"tasks={len(brief.tasks)}, media={len(brief.media)}, budget={'yes' if brief.budget else 'no'}"
    )
    return brief
