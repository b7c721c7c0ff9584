"""
Content Loader - One Load Cycle

Turns the two ContentSource reads into a single FAQContent snapshot.

Fetch policy: topics are fetched SEQUENTIALLY, in the order the welcome call
lists them. Each request starts only after the previous one completed, so at
most one request is in flight against the remote service and completion
order is deterministic. Fetching in parallel (asyncio.gather) would change
latency and request ordering, not the result; it is deliberately not done.

Publication policy: all-or-nothing. If any fetch fails the exception
propagates and no FAQContent is built.
"""

import logging
from typing import Dict

from ..domain.models import FAQContent, Topic
from .interface import ContentSource

logger = logging.getLogger(__name__)


async def load_faq_content(source: ContentSource) -> FAQContent:
    """
    Runs one full load cycle against `source`.

    Raises:
        NetworkError / DecodeError from the source. Nothing partial is returned.
    """
    welcome = await source.fetch_welcome()
    logger.info(f"Welcome loaded, fetching {len(welcome.queries)} topics")

    topics: Dict[str, Topic] = {}
    for key in welcome.queries:
        if key in topics:
            logger.warning(f"Duplicate topic key '{key}' in welcome payload, skipping")
            continue
        topics[key] = await source.fetch_topic(key)

    return FAQContent(welcome=welcome.message, topics=topics)
