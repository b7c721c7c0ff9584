from typing import Dict, Optional

from ..exceptions import NetworkError
from ..interface import ContentSource
from ..schemas import QueryPayload, WelcomePayload
from ...data.sample_faq import SAMPLE_QUERIES, SAMPLE_WELCOME
from ...domain.models import Topic


class StaticContentSource(ContentSource):
    """
    Serves FAQ content from an in-memory dictionary.
    Defaults to the bundled sample content; used for local development.
    """

    def __init__(
        self,
        welcome: Optional[WelcomePayload] = None,
        queries: Optional[Dict[str, QueryPayload]] = None,
    ):
        self._welcome = welcome or SAMPLE_WELCOME
        self._queries: Dict[str, QueryPayload] = (
            queries if queries is not None else SAMPLE_QUERIES
        )

    async def fetch_welcome(self) -> WelcomePayload:
        return self._welcome

    async def fetch_topic(self, key: str) -> Topic:
        if key not in self._queries:
            # Mirrors what the remote service answers for an unknown key (404)
            raise NetworkError(f"Topic '{key}' not found.")
        payload = self._queries[key]
        return Topic(key=key, message=payload.message, subtopics=payload.sub or {})
