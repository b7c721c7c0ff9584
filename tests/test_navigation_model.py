import random

import pytest

from faq_widget.domain.models import FAQContent, Topic
from faq_widget.navigation.exceptions import InvalidSelection
from faq_widget.navigation.model import NavigationModel
from faq_widget.navigation.transitions import NavigationTransition
from faq_widget.state.models import Message, SubtopicView, TopicView, WelcomeView


def test_open_starts_on_seeded_welcome(model):
    assert model.state.is_open
    assert model.state.view == WelcomeView()
    assert model.state.history == []
    assert model.state.transcript == [Message(sender="bot", text="Hi!")]


def test_select_topic_pushes_welcome(model):
    transition = model.select_topic("About Us")

    assert transition == NavigationTransition.PUSH
    assert model.state.view == TopicView(key="About Us")
    assert model.state.history == [WelcomeView()]


def test_select_subtopic_pushes_topic(model):
    model.select_topic("About Us")
    model.select_subtopic("About Us", "Mission")

    assert model.state.view == SubtopicView(key="About Us", sub="Mission")
    assert model.state.history == [WelcomeView(), TopicView(key="About Us")]


def test_scenario_back_twice_returns_to_intact_welcome(model, scenario_content):
    model.select_topic("About Us")
    model.select_subtopic("About Us", "Mission")

    assert model.go_back() == NavigationTransition.POP
    assert model.state.view == TopicView(key="About Us")
    assert model.go_back() == NavigationTransition.POP

    assert model.state.view == WelcomeView()
    assert model.state.history == []
    assert model.content.topic_keys == ("About Us", "Products")
    assert model.content == scenario_content


def test_back_on_empty_history_is_silent_noop(model):
    assert model.go_back() == NavigationTransition.HOLD
    assert model.state.view == WelcomeView()


def test_transcript_echoes_selection_then_answer(model):
    model.select_topic("Products")

    assert model.state.transcript[-2:] == [
        Message(sender="user", text="Products"),
        Message(sender="bot", text="Tea, spices and coffee."),
    ]

    model.select_subtopic("Products", "Tea")

    assert model.state.transcript[-2:] == [
        Message(sender="user", text="Tea"),
        Message(sender="bot", text="Black and green tea."),
    ]
    assert len(model.state.transcript) == 5


def test_back_leaves_transcript_alone(model):
    model.select_topic("Products")
    before = list(model.state.transcript)

    model.go_back()

    assert model.state.transcript == before


def test_go_home_from_any_state(model):
    model.select_topic("About Us")
    model.select_subtopic("About Us", "Mission")

    assert model.go_home() == NavigationTransition.RESET
    assert model.state.view == WelcomeView()
    assert model.state.history == []
    assert model.state.transcript == [Message(sender="bot", text="Hi!")]


def test_close_clears_everything(model):
    model.select_topic("About Us")

    model.close()

    assert not model.state.is_open
    assert model.state.view == WelcomeView()
    assert model.state.history == []
    assert model.state.transcript == []


def test_close_then_open_matches_first_open(model, scenario_content):
    fresh = NavigationModel()
    fresh.publish(scenario_content)
    fresh.open()

    model.select_topic("Products")
    model.select_subtopic("Products", "Spices")
    model.close()
    model.open()

    assert model.state == fresh.state


def test_unknown_topic_is_noop(model):
    before = model.state.model_copy(deep=True)

    assert model.select_topic("Careers") == NavigationTransition.HOLD
    assert model.state == before


def test_unknown_subtopic_is_noop(model):
    model.select_topic("About Us")
    before = model.state.model_copy(deep=True)

    assert model.select_subtopic("About Us", "Vision") == NavigationTransition.HOLD
    assert model.select_subtopic("Careers", "Mission") == NavigationTransition.HOLD
    assert model.state == before


def test_selection_before_content_is_noop():
    navigation = NavigationModel()
    navigation.open()

    assert navigation.select_topic("About Us") == NavigationTransition.HOLD
    assert navigation.state.view == WelcomeView()
    assert navigation.state.transcript == []


def test_strict_selection_raises(scenario_content):
    navigation = NavigationModel(strict_selection=True)
    navigation.publish(scenario_content)
    navigation.open()

    with pytest.raises(InvalidSelection) as excinfo:
        navigation.select_subtopic("About Us", "Vision")

    assert excinfo.value.key == "About Us"
    assert excinfo.value.sub == "Vision"
    assert navigation.state.view == WelcomeView()


def test_reselecting_active_topic_does_not_push_it(model):
    model.select_topic("About Us")

    assert model.select_topic("About Us") == NavigationTransition.HOLD
    assert model.state.history == [WelcomeView()]
    # The click is still echoed
    assert model.state.transcript[-2].text == "About Us"


def test_transcript_disabled_stays_empty(scenario_content):
    navigation = NavigationModel(transcript_enabled=False)
    navigation.publish(scenario_content)
    navigation.open()
    navigation.select_topic("About Us")

    assert navigation.state.transcript == []
    assert navigation.state.view == TopicView(key="About Us")


def test_publish_seeds_empty_transcript_once(scenario_content):
    navigation = NavigationModel()
    navigation.open()

    navigation.publish(scenario_content)
    navigation.publish(scenario_content)

    assert navigation.state.transcript == [Message(sender="bot", text="Hi!")]


def test_publish_keeps_navigation_that_still_resolves(model, scenario_content):
    model.select_topic("About Us")

    assert model.publish(scenario_content) == NavigationTransition.HOLD
    assert model.state.view == TopicView(key="About Us")


def test_publish_resets_navigation_that_no_longer_resolves(model):
    model.select_topic("About Us")
    model.select_subtopic("About Us", "Mission")
    reloaded = FAQContent(
        welcome="Hello again!",
        topics={"About Us": Topic(key="About Us", message="We export more.")},
    )

    assert model.publish(reloaded) == NavigationTransition.RESET
    assert model.state.is_open
    assert model.state.view == WelcomeView()
    assert model.state.history == []
    assert model.state.transcript == [Message(sender="bot", text="Hello again!")]


def test_loaded_content_is_immutable(scenario_content):
    with pytest.raises(TypeError):
        scenario_content.topics["Careers"] = Topic(key="Careers", message="Join us")
    with pytest.raises(TypeError):
        scenario_content.topics["About Us"].subtopics["Vision"] = "Growth"


def test_reselecting_earlier_view_unwinds_history(model):
    model.select_topic("About Us")
    model.select_subtopic("About Us", "Mission")

    assert model.select_topic("About Us") == NavigationTransition.POP
    assert model.state.view == TopicView(key="About Us")
    assert model.state.history == [WelcomeView()]
    assert model.state.transcript[-2:] == [
        Message(sender="user", text="About Us"),
        Message(sender="bot", text="We export..."),
    ]


def test_publish_replaces_stale_welcome(model):
    reloaded = FAQContent(
        welcome="Hello again!",
        topics={"About Us": Topic(key="About Us", message="We export more.")},
    )

    assert model.publish(reloaded) == NavigationTransition.HOLD
    assert model.state.transcript == [Message(sender="bot", text="Hello again!")]


def test_publish_keeps_conversation_beyond_the_welcome(model, scenario_content):
    model.select_topic("Products")
    model.go_back()
    before = list(model.state.transcript)

    model.publish(scenario_content)

    assert model.state.transcript == before


@pytest.mark.parametrize("seed", range(25))
def test_random_walk_always_backs_out_to_welcome(model, seed):
    rng = random.Random(seed)
    topic_keys = list(model.content.topic_keys) + ["Careers"]

    for _ in range(rng.randint(1, 30)):
        action = rng.choice(["topic", "subtopic", "back"])
        if action == "topic":
            model.select_topic(rng.choice(topic_keys))
        elif action == "subtopic":
            key = rng.choice(topic_keys)
            topic = model.content.get_topic(key)
            subs = list(topic.subtopic_keys) if topic else []
            model.select_subtopic(key, rng.choice(subs + ["Nope"]))
        else:
            model.go_back()

        assert model.state.view not in model.state.history
        assert len(set(model.state.history)) == len(model.state.history)

    steps = 0
    while model.state.history:
        model.go_back()
        steps += 1
        assert steps <= 100

    assert model.state.view == WelcomeView()
    assert model.go_back() == NavigationTransition.HOLD
