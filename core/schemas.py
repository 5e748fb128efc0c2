from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError
from typing_extensions import Annotated

# An objective shorter than this (ignoring surrounding whitespace) carries no usable intent.
OBJECTIVE_MIN_LENGTH = 8

FocusArea = Literal["catalog", "sales", "loyalty", "seo", "automation", "ads", "support"]
MediaKind = Literal["image", "video"]
BudgetCadence = Literal["daily", "weekly", "monthly"]
AdPlatform = Literal["meta", "google", "both"]


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python, immutable once built.

    Snake_case names are for building models in code; wire input is validated with
    ``by_alias=True, by_name=False``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class MediaAttachment(WireModel):
    id: StrictStr
    name: StrictStr
    kind: MediaKind
    data_url: StrictStr
    notes: Optional[StrictStr] = None


class Budget(WireModel):
    amount: Annotated[StrictFloat, Field(gt=0, allow_inf_nan=False)]
    currency: StrictStr
    cadence: BudgetCadence
    platform: Optional[AdPlatform] = None


class Brief(WireModel):
    objective: StrictStr
    focus_areas: List[FocusArea]
    tone: Optional[StrictStr] = None
    constraints: Optional[StrictStr] = None
    target_channels: List[StrictStr]
    tasks: List[StrictStr]
    media: List[MediaAttachment]
    budget: Optional[Budget] = None

    @field_validator("objective")
    @classmethod
    def objective_has_content(cls, value: str) -> str:
        if len(value.strip()) < OBJECTIVE_MIN_LENGTH:
            raise PydanticCustomError("objective_too_short", "Objective is too short")
        return value

    @field_validator("focus_areas")
    @classmethod
    def focus_areas_as_set(cls, value: List[str]) -> List[str]:
        # set semantics, first-seen order kept so prompts stay reproducible
        return list(dict.fromkeys(value))


class TaskItem(WireModel):
    title: StrictStr
    owner: StrictStr
    cadence: StrictStr
    success_metric: StrictStr


class Automation(WireModel):
    title: StrictStr
    description: StrictStr
    trigger: StrictStr
    action: StrictStr


class ChannelPlaybook(WireModel):
    channel: StrictStr
    content: StrictStr
    cadence: StrictStr


class AdStrategy(WireModel):
    platform: StrictStr
    audience: StrictStr
    creatives: StrictStr
    budget_notes: StrictStr


class Plan(WireModel):
    """Operational plan produced for a brief. Every field is required; lists may be empty."""

    executive_summary: StrictStr
    task_matrix: List[TaskItem]
    automations: List[Automation]
    channel_playbooks: List[ChannelPlaybook]
    ad_strategy: List[AdStrategy]
    seo_plan: StrictStr
    loyalty_plan: StrictStr


class AgentResponse(WireModel):
    plan: Plan
    raw: StrictStr
    used_sample: bool


class ErrorResponse(BaseModel):
    error: str


class ValidationErrorResponse(ErrorResponse):
    issues: Dict[str, Any]
