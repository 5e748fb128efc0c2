import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_MAX_OUTPUT_TOKENS = 1400
DEFAULT_MAX_CONCURRENCY = 4


def _optional_str(env: Mapping[str, str], key: str) -> Optional[str]:
    value = env.get(key, "").strip()
    return value or None


def _positive_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    value = int(raw)
    if value <= 0:
        raise ValueError(f"{key} must be a positive integer, got {raw!r}")
    return value


def _optional_positive_float(env: Mapping[str, str], key: str) -> Optional[float]:
    raw = env.get(key, "").strip()
    if not raw:
        return None
    value = float(raw)
    if value <= 0:
        raise ValueError(f"{key} must be a positive number, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, read once from the environment.

    A missing ``gemini_api_key`` is the normal sample mode, not an error.
    """

    gemini_api_key: Optional[str] = field(default=None, repr=False)
    gemini_model: str = DEFAULT_MODEL
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS
    backend_timeout: Optional[float] = None
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY

    @property
    def backend_configured(self) -> bool:
        return self.gemini_api_key is not None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            gemini_api_key=_optional_str(env, "GEMINI_API_KEY"),
            gemini_model=_optional_str(env, "GEMINI_MODEL") or DEFAULT_MODEL,
            max_output_tokens=_positive_int(env, "AGENT_MAX_OUTPUT_TOKENS", DEFAULT_MAX_OUTPUT_TOKENS),
            backend_timeout=_optional_positive_float(env, "AGENT_BACKEND_TIMEOUT_SECONDS"),
            max_concurrency=_positive_int(env, "AGENT_MAX_CONCURRENCY", DEFAULT_MAX_CONCURRENCY),
        )
