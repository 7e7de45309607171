"""
Advisory Client - Asks the remote service for the best shut-the-box move.

The service is an opaque boundary. Transport failures, error statuses
and payloads that fail schema validation all surface as
AdviceUnavailable, which callers treat as "no recommendation".
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import os

import httpx
from pydantic import ValidationError

from ..games.shut_the_box.state import ShutTheBoxState
from .schemas import BestActionRequest, BestActionResponse

logger = logging.getLogger(__name__)

# Environment configuration
ADVISOR_URL = os.getenv("TABLETOP_ADVISOR_URL", "http://localhost:8000/shut-the-box")
ADVISOR_TIMEOUT = float(os.getenv("TABLETOP_ADVISOR_TIMEOUT", "2.0"))

FIND_BEST_ACTION_PATH = "/find-best-action"


class AdviceUnavailable(Exception):
    """The advisory service could not give a usable answer."""


@dataclass
class AdvisoryClient:
    """
    Client for the best-move service.

    Usage:
        client = AdvisoryClient()
        tiles = client.find_best_action(state)  # None if no advice
    """
    base_url: str = ADVISOR_URL
    timeout: float = ADVISOR_TIMEOUT
    transport: httpx.BaseTransport | None = None

    def fetch_best_action(self, state: ShutTheBoxState) -> list[int] | None:
        """
        Ask for the best move.

        Returns the tile values to shut, or None if the service says no
        legal move exists. Raises AdviceUnavailable on any failure.
        """
        request = BestActionRequest.from_state(state)

        try:
            with httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = client.post(FIND_BEST_ACTION_PATH, json=request.model_dump())
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as e:
            raise AdviceUnavailable(f"Advisory request failed: {e}") from e
        except ValueError as e:
            raise AdviceUnavailable(f"Advisory response is not JSON: {e}") from e

        try:
            parsed = BestActionResponse.model_validate(payload)
        except ValidationError as e:
            raise AdviceUnavailable(f"Invalid advisory response: {payload!r}") from e

        return parsed.action

    def find_best_action(self, state: ShutTheBoxState) -> list[int] | None:
        """Best move, or None when there is none or the service is unavailable."""
        try:
            return self.fetch_best_action(state)
        except AdviceUnavailable as e:
            logger.warning("No recommendation available: %s", e)
            return None
