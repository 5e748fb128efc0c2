import asyncio
from typing import Any, Optional

from core.errors import BackendError, BackendUnavailable, MalformedPlan
from core.logger import get_logger
from core.schemas import AgentResponse, Brief
from core.validation import validate_brief
from prompts.agent import build_agent_prompt, derive_media_tokens
from services.plan_parser import parse_plan
from services.sample_plan import get_sample_response

logger = get_logger(__name__)


class AgentService:
    """
    Brief in, plan out.

    Validation errors propagate to the caller. Once the brief is valid every other
    failure is absorbed and answered with the sample plan (``used_sample=True``).
    ``backend`` is anything with ``async generate(prompt) -> str``.
    """

    def __init__(self, backend, max_concurrency: Optional[int] = None):
        self.backend = backend
        self._semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None
        logger.info(f"AgentService initialized (max_concurrency={max_concurrency}).")

    async def run(self, payload: Any) -> AgentResponse:
        brief = validate_brief(payload)
        return await self.generate_plan(brief)

    async def generate_plan(self, brief: Brief) -> AgentResponse:
        try:
            media_tokens = derive_media_tokens(brief.media)
            prompt = build_agent_prompt(brief, media_tokens)
            logger.debug(f"Agent prompt: {prompt[:200]}...")

            raw = await self._call_backend(prompt)
            plan = parse_plan(raw)
            response = AgentResponse(plan=plan, raw=raw, used_sample=False)
        except BackendUnavailable as e:
            logger.info(f"Generation backend not configured, serving sample plan. ({e})")
            return get_sample_response()
        except (BackendError, MalformedPlan) as e:
            logger.warning(f"Live generation failed, serving sample plan: {e}")
            return get_sample_response()
        except Exception as e:
            logger.error(f"Unexpected error while generating plan: {str(e)}", exc_info=True)
            return get_sample_response()

        logger.info("Live plan generated.")
        return response

    async def _call_backend(self, prompt: str) -> str:
        if self._semaphore is None:
            return await self.backend.generate(prompt)
        async with self._semaphore:
            return await self.backend.generate(prompt)
