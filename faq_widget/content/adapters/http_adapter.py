import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from ..exceptions import DecodeError, NetworkError
from ..interface import ContentEndpoint, ContentSource
from ..schemas import QueryPayload, QueryRequest, WelcomePayload
from ...domain.models import Topic

logger = logging.getLogger(__name__)


class HttpContentSource(ContentSource):
    """
    Reads FAQ content from the remote service over HTTP.

    Every call is a fresh round trip; this class does no caching. A shared
    httpx.AsyncClient may be injected (tests pass one built on a
    MockTransport); otherwise a short-lived client is opened per call.
    """

    def __init__(self, endpoint: ContentEndpoint, client: Optional[httpx.AsyncClient] = None):
        self.endpoint = endpoint
        self._client = client

    async def fetch_welcome(self) -> WelcomePayload:
        data = await self._send("GET", self.endpoint.welcome_url)
        try:
            return WelcomePayload.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"Invalid welcome payload: {e}") from e

    async def fetch_topic(self, key: str) -> Topic:
        body = QueryRequest(key=key).model_dump()
        data = await self._send("POST", self.endpoint.query_url, json=body)
        try:
            payload = QueryPayload.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"Invalid payload for topic '{key}': {e}") from e

        return Topic(key=key, message=payload.message, subtopics=payload.sub or {})

    async def _send(self, method: str, url: str, **kwargs) -> Any:
        """
        Performs one request and returns the decoded JSON body.
        Transport problems, malformed URLs and non-2xx statuses become NetworkError,
        unparseable bodies become DecodeError.
        """
        logger.debug(f"{method} {url}")
        try:
            if self._client is not None:
                response = await self._client.request(
                    method, url, timeout=self.endpoint.timeout, **kwargs
                )
            else:
                async with httpx.AsyncClient(timeout=self.endpoint.timeout) as client:
                    response = await client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"{method} {url} returned {e.response.status_code}"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"{method} {url} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"{method} {url} returned a non-JSON body") from e
