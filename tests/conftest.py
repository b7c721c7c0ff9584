import asyncio
from typing import Dict, List, Optional, Set

import pytest

from faq_widget.content.exceptions import NetworkError
from faq_widget.content.interface import ContentSource
from faq_widget.content.schemas import WelcomePayload
from faq_widget.domain.models import FAQContent, Topic
from faq_widget.navigation.model import NavigationModel

SCENARIO_WELCOME = WelcomePayload(message="Hi!", queries=["About Us", "Products"])

SCENARIO_TOPICS = {
    "About Us": Topic(
        key="About Us",
        message="We export...",
        subtopics={"Mission": "Quality first."},
    ),
    "Products": Topic(
        key="Products",
        message="Tea, spices and coffee.",
        subtopics={"Tea": "Black and green tea.", "Spices": "Whole or ground."},
    ),
}


class FakeContentSource(ContentSource):
    """
    In-memory ContentSource that records every call.

    `fail_on` makes fetch_topic raise NetworkError for those keys.
    `gate`, when set, holds fetch_welcome until the test releases it.
    """

    def __init__(
        self,
        welcome: WelcomePayload = SCENARIO_WELCOME,
        topics: Optional[Dict[str, Topic]] = None,
        fail_on: Optional[Set[str]] = None,
        gate: Optional[asyncio.Event] = None,
    ):
        self.welcome = welcome
        self.topics = topics if topics is not None else SCENARIO_TOPICS
        self.fail_on = fail_on or set()
        self.gate = gate
        self.calls: List[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch_welcome(self) -> WelcomePayload:
        self.calls.append("welcome")
        if self.gate is not None:
            await self.gate.wait()
        return self.welcome

    async def fetch_topic(self, key: str) -> Topic:
        self.calls.append(key)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            # Yield so an overlapping fetch would show up in max_in_flight
            await asyncio.sleep(0)
            if key in self.fail_on:
                raise NetworkError(f"boom on {key}")
            return self.topics[key]
        finally:
            self.in_flight -= 1


@pytest.fixture()
def scenario_content() -> FAQContent:
    return FAQContent(welcome=SCENARIO_WELCOME.message, topics=SCENARIO_TOPICS)


@pytest.fixture()
def fake_source() -> FakeContentSource:
    return FakeContentSource()


@pytest.fixture()
def model(scenario_content) -> NavigationModel:
    """An open model with the scenario content published."""
    navigation = NavigationModel()
    navigation.publish(scenario_content)
    navigation.open()
    return navigation


@pytest.fixture()
def source_factory():
    return FakeContentSource
