from __future__ import annotations

import json
import logging
from typing import Any

from groq import Groq

from ..venues.models import AIVenueRequest, AIVenueResult
from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are a friendly and helpful venue suggestion expert for groups who have just \
matched. Your goal is to suggest ONE specific, real venue for them to meet up.

1. If candidate venues are listed (sorted by neighborhood similarity), pick the \
one that best fits the groups' vibes and composition. Prefer candidates with a \
description and URL, and copy them into your answer.
2. If no candidates are listed, suggest a specific, realistic venue in the \
requested neighborhood with a plausible description and website.
3. Consider the group composition:
   - "all-boys": sports bars, breweries, gaming lounges, steakhouses
   - "all-girls": wine bars, brunch spots, trendy cafes, rooftop lounges
   - "mixed": casual restaurants, coffee shops, cocktail bars, food halls
   - "any": popular restaurants, well-known cafes, versatile venues
4. Match the vibes: "chill" = casual spots, "party" = lively venues, \
"upscale" = fancy restaurants, etc.
5. Keep the reasoning warm, concise, and explain why the venue fits their vibe \
and composition.

Return ONLY valid JSON in this exact format:
{"venue_suggestion": "<venue name>", "reasoning": "<one or two sentences>", \
"venue_url": "<url or null>", "venue_description": "<description or null>"}"""


def _build_user_message(
    request: AIVenueRequest,
    candidates: list[dict[str, Any]],
) -> str:
    lines = ["## Group Preferences"]
    lines.append(f"- Neighborhoods: {', '.join(request.neighborhoods) or 'any'}")
    lines.append(f"- Vibes: {', '.join(request.vibes) or 'any'}")
    lines.append(f"- Group composition: {request.group_intent.value}")

    lines.append("\n## Candidate Venues")
    if not candidates:
        lines.append("None found in the database.")
        return "\n".join(lines)

    lines.append("| Name | Neighborhood | Similarity | Description | URL |")
    lines.append("|---|---|---|---|---|")
    for c in candidates:
        lines.append(
            f"| {c['name']} | {c['neighborhood']} | {c.get('similarity', 0):.0f} "
            f"| {c.get('description') or ''} | {c.get('url') or ''} |"
        )

    return "\n".join(lines)


def suggest_venue(
    request: AIVenueRequest,
    candidates: list[dict[str, Any]],
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> AIVenueResult | None:
    """
    Ask the Groq LLM to suggest a single venue for two matched groups.

    Returns ``None`` on any failure (disabled, timeout, bad JSON, API error).
    """
    if not config.enabled or not config.api_key:
        return None

    try:
        client = Groq(api_key=config.api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": _build_user_message(request, candidates),
                },
            ],
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            response_format={"type": "json_object"},
        )

        content = response.choices[0].message.content or ""
        return AIVenueResult.model_validate(json.loads(content))

    except Exception:
        logger.warning("Groq venue suggestion failed, falling back to static suggestion", exc_info=True)
        return None
