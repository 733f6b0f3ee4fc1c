from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class LLMConfig:
    """Settings for the Groq venue suggester, overridable from the environment."""

    api_key: str = os.getenv("GROQ_API_KEY", "")
    model: str = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")
    timeout: float = 10.0
    max_tokens: int = 512
    # Some variety between suggestions for the same pair of groups
    temperature: float = 0.5
    enabled: bool = _env_flag("VENUE_AI_ENABLED", True)


DEFAULT_LLM_CONFIG = LLMConfig()
