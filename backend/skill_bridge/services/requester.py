"""Client-side requesters for the internal generation handlers.

Any failure to obtain a payload from the handler (transport error, non-2xx
status, missing payload key) is absorbed here: question sets fall back to the
five-question default and analyses to the interest-based heuristic analysis.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from skill_bridge.core.config import settings
from skill_bridge.services.fallbacks import client_question_set, heuristic_analysis
from skill_bridge.services.prompts import build_analysis_prompt, build_question_set_prompt

logger = logging.getLogger(__name__)


class AssessmentRequester:
    def __init__(
        self,
        client: httpx.Client | None = None,
        *,
        base_url: str | None = None,
        auth_token: str | None = None,
    ):
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=settings.internal_api_timeout_seconds)
        self.base_url = (base_url if base_url is not None else settings.internal_api_base).rstrip("/")
        self.auth_token = auth_token

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any] | None:
        headers = {"Content-Type": "application/json"}
        if self.auth_token:
            headers["X-Auth-Token"] = self.auth_token
        try:
            response = self.client.post(f"{self.base_url}{path}", json=payload, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", path, exc)
            return None
        if response.is_error:
            logger.warning(
                "Request to %s returned %s: %s",
                path,
                response.status_code,
                response.text[:500],
            )
            return None
        try:
            data = response.json()
        except ValueError:
            logger.warning("Request to %s returned a non-JSON body", path)
            return None
        return data if isinstance(data, dict) else None

    def request_question_set(self, profile: dict[str, Any]) -> dict[str, Any]:
        data = self._post(
            "/generate/assessment",
            {"prompt": build_question_set_prompt(profile), "userProfile": profile},
        )
        assessment = (data or {}).get("assessment")
        if not isinstance(assessment, dict):
            logger.warning("No assessment in handler response, using default question set")
            return client_question_set()
        return assessment

    def request_analysis(self, profile: dict[str, Any], responses: dict[str, Any]) -> dict[str, Any]:
        data = self._post(
            "/generate/analysis",
            {
                "prompt": build_analysis_prompt(profile, responses),
                "userProfile": profile,
                "responses": responses,
            },
        )
        analysis = (data or {}).get("analysis")
        if not isinstance(analysis, dict) or not analysis:
            logger.warning("No analysis in handler response, using heuristic analysis")
            return heuristic_analysis(profile, responses)
        return analysis
