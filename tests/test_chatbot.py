"""Tests for the offline chat knowledge resolver"""

import dataclasses

import pytest

from cultura.chatbot import (
    DEFAULT_RESPONSE,
    ChatKnowledgeResolver,
    ScoringWeights,
)
from cultura.errors import ConfigurationError
from cultura.knowledge import KnowledgeRecord
from cultura.store import KnowledgeStore
from conftest import make_record

# Rules 4 and 5 only fire when keyword scoring stays below the threshold
STRICT = ScoringWeights(min_score=10_000)


class TestNameRules:
    """Exact entity name (1.0) and name substring (0.95)."""

    def test_exact_name_for_every_entity(self, resolver, store):
        for entity in store:
            result = resolver.resolve(f"  {entity.name.upper()} ")
            assert result.confidence == 1.0
            assert result.entity == entity

    def test_name_substring(self, resolver):
        result = resolver.resolve("Tell me about Bihu festival")
        assert result.confidence >= 0.95
        assert result.entity.id == "bihu"
        assert "Upper Assam" in result.response
        assert any(ritual in result.response for ritual in result.entity.rituals)
        assert result.sources == (result.entity.attribution,)


class TestKeywordScoring:
    """Per-keyword rules and the name-token bonus."""

    @pytest.fixture
    def general(self):
        return KnowledgeRecord(key="t", keywords=("hornbill festival",), response="r", sources=())

    def test_exact_keyword(self, resolver, general):
        assert resolver.score(general, "Hornbill Festival") == 100

    def test_query_contains_keyword(self, resolver, general):
        assert resolver.score(general, "the hornbill festival of kohima") == 50

    def test_query_token_inside_keyword(self, resolver, general):
        assert resolver.score(general, "hornbill dances") == 25

    def test_short_tokens_ignored(self, resolver, general):
        assert resolver.score(general, "fe xy") == 0

    def test_partial_overlap(self, resolver, general):
        assert resolver.score(general, "ll") == 10

    def test_first_applicable_rule_only(self, resolver):
        record = KnowledgeRecord(key="t", keywords=("drum",), response="r", sources=())
        assert resolver.score(record, "drum") == 100

    def test_name_token_bonus(self, resolver):
        record = resolver.knowledge_base["bihu-festival"]
        without_entity = dataclasses.replace(record, entity=None)
        assert resolver.score(record, "bihu") - resolver.score(without_entity, "bihu") == 30

    def test_adding_a_matching_keyword_never_lowers_the_score(self, resolver):
        record = resolver.knowledge_base["hornbill-festival"]
        for query in ("hornbill", "naga tribes", "kohima winter", "log drum"):
            extended = dataclasses.replace(record, keywords=record.keywords + (query.split()[0],))
            assert resolver.score(extended, query) >= resolver.score(record, query)

    def test_keyword_match_confidence(self, resolver):
        result = resolver.resolve("gamosa")
        assert result.entity.id == "bihu"
        assert result.confidence == pytest.approx(0.9)

    def test_rank_is_sorted_and_positive(self, resolver):
        ranked = resolver.rank("bihu")
        scores = [score for _, score in ranked]
        assert scores == sorted(scores, reverse=True)
        assert all(score > 0 for score in scores)
        assert ranked[0][0].key == "bihu-festival"

    def test_top_entities(self, resolver):
        top = resolver.top_entities("bihu")
        assert 1 <= len(top) <= 3
        assert top[0].id == "bihu"
        assert resolver.top_entities("bihu", k=1) == top[:1]
        assert resolver.top_entities("") == []


class TestFallbackRules:
    """State match (0.8), category match (0.6), default (0.3)."""

    def test_state_match(self, store):
        result = ChatKnowledgeResolver(store, STRICT).resolve("tell me about sikkim")
        assert result.confidence == 0.8
        assert result.entity is None
        assert result.sources == ("CULTURA Cultural Database",)
        assert "Cultural Heritage of Sikkim" in result.response
        assert "Pang Lhabsol" in result.response and "Thukpa" in result.response

    def test_state_match_lists_at_most_three(self, store):
        result = ChatKnowledgeResolver(store, STRICT).resolve("what about assam?")
        assert "Bihu Festival" in result.response
        assert "Masor Tenga" in result.response
        assert "Muga Silk Weaving" not in result.response

    def test_multi_word_state(self, store):
        result = ChatKnowledgeResolver(store, STRICT).resolve("arunachal pradesh traditions")
        assert "Cultural Heritage of Arunachal Pradesh" in result.response

    def test_category_match(self, store, resolver):
        result = ChatKnowledgeResolver(store, STRICT).resolve("any good food?")
        assert result.confidence == 0.6
        assert result.entity is None
        assert result.response == resolver.knowledge_base["food-cuisine"].response

    def test_dance_maps_to_festivals(self, store, resolver):
        result = ChatKnowledgeResolver(store, STRICT).resolve("show me some dance")
        assert result.response == resolver.knowledge_base["festivals"].response

    def test_nonsense_gets_default(self, resolver):
        result = resolver.resolve("asdkjaslkdj nonsense")
        assert result.confidence == 0.3
        assert result.response == DEFAULT_RESPONSE
        assert result.entity is None
        assert result.sources == ("CULTURA Knowledge Base",)

    @pytest.mark.parametrize("query", ["", "   ", "?", "🙂", "qq"])
    def test_always_answers(self, resolver, query):
        result = resolver.resolve(query)
        assert result.response
        assert 0.0 <= result.confidence <= 1.0

    def test_non_string_query_rejected(self, resolver):
        with pytest.raises(ConfigurationError):
            resolver.resolve(None)


class TestHelpers:

    def test_can_answer_offline(self, resolver):
        assert resolver.can_answer_offline("Tell me about Bihu festival")
        assert resolver.can_answer_offline("What FOOD do people eat?")
        assert not resolver.can_answer_offline("Why is the sky blue")
        assert not resolver.can_answer_offline("   ")

    def test_resolve_has_no_side_effects(self, resolver):
        before = dict(resolver.knowledge_base)
        first = resolver.resolve("hornbill")
        assert resolver.resolve("hornbill") == first
        assert dict(resolver.knowledge_base) == before

    def test_sample_questions(self, resolver):
        questions = resolver.get_sample_questions()
        assert len(questions) == 20
        assert questions[0] == "Tell me about Bihu festival"

    def test_available_topics(self, resolver, store):
        topics = resolver.get_available_topics()
        assert len(topics) == len(store) + 3
        general = topics[-3]
        assert general == {
            "key": "northeast-culture",
            "name": "Northeast Culture",
            "type": "general",
            "keywords": ["northeast", "culture", "heritage", "tribes", "diversity"],
        }
        assert topics[0]["name"] == "Bihu Festival"

    def test_reload(self, resolver):
        resolver.reload(KnowledgeStore.from_records([make_record()]))
        assert resolver.resolve("test festival").entity.id == "test-fest"
        assert "bihu-festival" not in resolver.knowledge_base

    def test_result_to_dict(self, resolver):
        data = resolver.resolve("Losar").to_dict()
        assert data["entity"]["id"] == "losar"
        assert data["confidence"] == 1.0
