"""Search flow of the page: one POST to the proxy endpoint per submitted email.

The reply body is read as text and decoded before the status code is looked
at, so an empty or non-JSON reply is reported as such even when the status
says the request failed.
"""
import json
import logging
from dataclasses import dataclass
from typing import Optional

import httpx
from pydantic import ValidationError

from leakchecker import config
from leakchecker.errors import (
    EmptyResponse,
    MalformedResponse,
    NetworkError,
    SearchError,
    ServiceError,
)
from leakchecker.models import BreachQueryResult

logger = logging.getLogger(__name__)


class BreachCheckClient:
    def __init__(
        self,
        endpoint_url: Optional[str] = None,
        anon_key: str = config.ANON_KEY,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint_url = endpoint_url or config.check_endpoint_url()
        self.anon_key = anon_key
        self.transport = transport

    @property
    def headers(self):
        return {
            "Authorization": f"Bearer {self.anon_key}",
            "apikey": self.anon_key,
            "Content-Type": "application/json",
        }

    async def check(self, email: str) -> BreachQueryResult:
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.endpoint_url,
                    headers=self.headers,
                    content=json.dumps({"email": email}),
                )
        except httpx.HTTPError as e:
            raise NetworkError(str(e) or None) from e

        text = response.text
        if not text:
            raise EmptyResponse()
        try:
            data = json.loads(text)
        except ValueError as e:
            raise MalformedResponse() from e

        if not response.is_success:
            error = data.get("error") if isinstance(data, dict) else None
            raise ServiceError(error, status=response.status_code)

        try:
            return BreachQueryResult.model_validate(data)
        except ValidationError as e:
            raise MalformedResponse() from e


@dataclass
class SearchState:
    email: str = ""
    loading: bool = False
    searched: bool = False
    result: Optional[BreachQueryResult] = None
    error: Optional[str] = None


async def run_search(client: BreachCheckClient, email: str, state: Optional[SearchState] = None) -> SearchState:
    """Submit handler. A blank email leaves the state untouched and sends nothing."""
    state = state or SearchState()
    email = email.strip()
    state.email = email
    if not email:
        return state

    state.loading = True
    state.error = None
    state.result = None
    state.searched = False
    try:
        state.result = await client.check(email)
        state.searched = True
    except SearchError as e:
        logger.warning("Search failed: %s", e)
        state.error = str(e)
    except Exception:
        logger.exception("Search failed unexpectedly")
        state.error = SearchError.message
    finally:
        state.loading = False
    return state
