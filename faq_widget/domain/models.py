"""
Domain Layer - Static FAQ Content

This module defines the immutable content model the widget navigates:
Topics with optional Sub-topics, aggregated into a single FAQContent
snapshot per load cycle. These dataclasses are built by the content loader
from the remote service payloads and are never mutated afterwards.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class Topic:
    """
    A top-level FAQ entry.

    Attributes:
        key: Unique identifier within the FAQ set. Also the button label.
        message: Display text shown when the topic is opened.
        subtopics: Ordered mapping of sub-key -> sub-message. Empty when the
            topic is a leaf.
    """
    key: str
    message: str
    subtopics: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the mapping so a loaded Topic cannot be edited in place.
        object.__setattr__(self, "subtopics", MappingProxyType(dict(self.subtopics)))

    @property
    def subtopic_keys(self) -> Tuple[str, ...]:
        return tuple(self.subtopics)

    def has_subtopic(self, sub: str) -> bool:
        return sub in self.subtopics

    def subtopic_message(self, sub: str) -> Optional[str]:
        return self.subtopics.get(sub)


@dataclass(frozen=True)
class FAQContent:
    """
    The fully loaded snapshot: welcome text plus every Topic.

    Created once per load cycle and replaced wholesale on reload. Topic
    order follows the order of keys returned by the welcome call.

    Attributes:
        welcome: Greeting shown on the Welcome view.
        topics: Ordered mapping of topic key -> Topic (O(1) lookup).
    """
    welcome: str
    topics: Mapping[str, Topic] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "topics", MappingProxyType(dict(self.topics)))

    @property
    def topic_keys(self) -> Tuple[str, ...]:
        return tuple(self.topics)

    def get_topic(self, key: str) -> Optional[Topic]:
        return self.topics.get(key)

    def has_subtopic(self, key: str, sub: str) -> bool:
        topic = self.topics.get(key)
        return topic is not None and topic.has_subtopic(sub)
