from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from skill_bridge.core.config import settings

logger = logging.getLogger(__name__)

MAX_LOGGED_TEXT_CHARS = 500


class GenerationError(RuntimeError):
    """Failure reaching the generation endpoint, carrying the HTTP status to report."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def generation_is_configured() -> bool:
    return bool(settings.gemini_api_key and settings.gemini_model)


def build_generation_body(prompt: str) -> dict[str, Any]:
    generation_config: dict[str, Any] = {
        "temperature": settings.generation_temperature,
        "topK": settings.generation_top_k,
        "topP": settings.generation_top_p,
        "maxOutputTokens": settings.generation_max_output_tokens,
    }
    if settings.generation_json_mode:
        generation_config["responseMimeType"] = "application/json"
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": generation_config,
    }


def first_candidate_text(data: Any) -> str | None:
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str) or not text:
        return None
    return text


def call_generation(
    prompt: str,
    *,
    failure_message: str,
    client: httpx.Client | None = None,
) -> str:
    """Send one prompt to the generateContent endpoint and return the first text candidate.

    Raises GenerationError for a missing key (500), a non-2xx reply (upstream
    status), a transport failure (502) and an empty candidate list (500).
    """
    if not settings.gemini_api_key:
        raise GenerationError("Gemini API key not configured", status_code=500)

    url = f"{settings.gemini_api_base}/models/{settings.gemini_model}:generateContent"
    owns_client = client is None
    http = client or httpx.Client(timeout=settings.generation_timeout_seconds)
    try:
        response = http.post(
            url,
            params={"key": settings.gemini_api_key},
            headers={"Content-Type": "application/json"},
            json=build_generation_body(prompt),
        )
    except httpx.HTTPError as exc:
        logger.warning("Gemini transport error: %s", exc)
        raise GenerationError(failure_message, status_code=502) from exc
    finally:
        if owns_client:
            http.close()

    if response.is_error:
        logger.warning(
            "Gemini API error (%s): %s",
            response.status_code,
            response.text[:MAX_LOGGED_TEXT_CHARS],
        )
        raise GenerationError(failure_message, status_code=response.status_code)

    try:
        data = response.json()
    except ValueError:
        data = None
    text = first_candidate_text(data)
    if text is None:
        raise GenerationError("No content generated from Gemini", status_code=500)
    return text


def _balanced_object_end(text: str, start: int) -> int | None:
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return None


def extract_json_object(text: str) -> dict[str, Any] | None:
    """Recover the first JSON object embedded in free-form generated text.

    Each `{` is tried in order as a start; the candidate ends where the
    brace depth (ignoring braces inside JSON strings) returns to zero.
    """
    if not text:
        return None
    start = text.find("{")
    while start != -1:
        end = _balanced_object_end(text, start)
        if end is not None:
            try:
                parsed = json.loads(text[start : end + 1])
            except json.JSONDecodeError:
                parsed = None
            if isinstance(parsed, dict):
                return parsed
        start = text.find("{", start + 1)
    return None
