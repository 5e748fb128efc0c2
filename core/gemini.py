import asyncio
from typing import Optional

from google import genai
from google.genai import types

from core.config import DEFAULT_MAX_OUTPUT_TOKENS, DEFAULT_MODEL, Settings
from core.errors import BackendError, BackendUnavailable
from core.logger import get_logger

logger = get_logger(__name__)


class GeminiBackend:
    """
    Renders a prompt to free text under an output-token ceiling.

    The credential is handed in at construction. Without one, ``generate`` raises
    BackendUnavailable before any client is created. ``client`` may be injected
    (anything exposing ``aio.models.generate_content``), otherwise a
    ``genai.Client`` is created on first use.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS,
        timeout: Optional[float] = None,
        client=None,
        enable_thinking: bool = False,
    ):
        self.api_key = api_key
        self.model = model
        self.max_output_tokens = max_output_tokens
        self.timeout = timeout
        self.enable_thinking = enable_thinking
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings, client=None) -> "GeminiBackend":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            max_output_tokens=settings.max_output_tokens,
            timeout=settings.backend_timeout,
            client=client,
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self):
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def _build_config(self, max_output_tokens: int) -> types.GenerateContentConfig:
        config = types.GenerateContentConfig(
            max_output_tokens=max_output_tokens,
            response_mime_type="application/json",
        )
        if not self.enable_thinking:
            # thinking tokens count against max_output_tokens, so keep the whole budget for the plan
            config.thinking_config = types.ThinkingConfig(thinking_budget=0)
        return config

    async def generate(self, prompt: str, max_output_tokens: Optional[int] = None) -> str:
        # 1) sample mode: no credential, no network
        if not self.configured:
            raise BackendUnavailable("GEMINI_API_KEY is not configured")

        # 2) contents and config
        contents = [types.Content(role="user", parts=[types.Part.from_text(text=prompt)])]
        config = self._build_config(max_output_tokens or self.max_output_tokens)

        # 3) model call
        logger.info(f"Calling Gemini ({self.model}) with a {len(prompt)} character prompt...")
        try:
            call = self._get_client().aio.models.generate_content(
                model=self.model, contents=contents, config=config
            )
            if self.timeout:
                response = await asyncio.wait_for(call, timeout=self.timeout)
            else:
                response = await call
            text = response.text
        except asyncio.TimeoutError as e:
            logger.warning(f"Gemini call timed out after {self.timeout}s")
            raise BackendError(f"Gemini call timed out after {self.timeout}s") from e
        except Exception as e:
            logger.error(f"Gemini API call error: {str(e)}", exc_info=True)
            raise BackendError(f"Gemini call failed: {str(e)}") from e

        if not text or not text.strip():
            logger.error("Gemini response text is empty or contains only whitespace.")
            raise BackendError("Gemini returned an empty response")

        logger.info("Gemini API call successful.")
        logger.debug(f"Gemini response text (raw): {text[:200]}...")
        return text
