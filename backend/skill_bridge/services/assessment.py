"""Internal generation handlers: one external call, JSON recovery, fixed fallback on bad output."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from skill_bridge.services.fallbacks import handler_analysis, handler_question_set
from skill_bridge.services.generation import (
    MAX_LOGGED_TEXT_CHARS,
    call_generation,
    extract_json_object,
)

logger = logging.getLogger(__name__)


def is_valid_question_set(parsed: dict[str, Any] | None) -> bool:
    return bool(parsed) and isinstance(parsed.get("questions"), list)


def is_valid_analysis(parsed: dict[str, Any] | None) -> bool:
    if not parsed:
        return False
    overall = parsed.get("overallAnalysis")
    return isinstance(overall, str) and bool(overall.strip()) and isinstance(parsed.get("recommendedCareers"), list)


def generate_question_set(prompt: str, *, client: httpx.Client | None = None) -> dict[str, Any]:
    text = call_generation(
        prompt,
        failure_message="Failed to generate assessment questions",
        client=client,
    )
    parsed = extract_json_object(text)
    if not is_valid_question_set(parsed):
        logger.warning(
            "Question set output unusable, returning default set. Generated text: %s",
            text[:MAX_LOGGED_TEXT_CHARS],
        )
        return handler_question_set()
    return parsed


def generate_analysis(prompt: str, *, client: httpx.Client | None = None) -> dict[str, Any]:
    text = call_generation(
        prompt,
        failure_message="Failed to analyze assessment responses",
        client=client,
    )
    parsed = extract_json_object(text)
    if not is_valid_analysis(parsed):
        logger.warning(
            "Analysis output unusable, returning default analysis. Generated text: %s",
            text[:MAX_LOGGED_TEXT_CHARS],
        )
        return handler_analysis()
    return parsed
