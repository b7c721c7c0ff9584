from abc import ABC, abstractmethod

from pydantic import BaseModel

from ..config import Settings
from ..domain.models import Topic
from .schemas import WelcomePayload


class ContentEndpoint(BaseModel):
    """
    Location of the remote FAQ service: a base address plus the two
    operation paths. Passed into HttpContentSource at construction time.
    """
    base_url: str
    welcome_path: str = "/api/welcome"
    query_path: str = "/api/query"
    timeout: float = 10.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "ContentEndpoint":
        return cls(
            base_url=settings.FAQ_API_BASE_URL,
            welcome_path=settings.FAQ_WELCOME_PATH,
            query_path=settings.FAQ_QUERY_PATH,
            timeout=settings.FAQ_REQUEST_TIMEOUT,
        )

    @property
    def welcome_url(self) -> str:
        return self.base_url.rstrip("/") + self.welcome_path

    @property
    def query_url(self) -> str:
        return self.base_url.rstrip("/") + self.query_path


class ContentSource(ABC):
    """
    Abstract Base Class interface that defines the contract for any FAQ
    content provider (remote HTTP service, bundled sample data, test fakes).
    """

    @abstractmethod
    async def fetch_welcome(self) -> WelcomePayload:
        """
        Fetches the welcome message and the ordered list of topic keys.
        Raises NetworkError or DecodeError.
        """
        pass

    @abstractmethod
    async def fetch_topic(self, key: str) -> Topic:
        """
        Fetches the full content of one topic.
        Raises NetworkError or DecodeError.
        """
        pass
