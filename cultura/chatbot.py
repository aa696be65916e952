"""Offline chat resolver: answers cultural questions from the knowledge base"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

from . import config
from .errors import ConfigurationError
from .knowledge import KnowledgeRecord, build_knowledge_base
from .store import CulturalEntity, KnowledgeStore

logger = logging.getLogger(__name__)

KNOWLEDGE_BASE_SOURCE = "CULTURA Knowledge Base"
CULTURAL_DATABASE_SOURCE = "CULTURA Cultural Database"

KNOWN_STATES = (
    "assam", "arunachal pradesh", "manipur", "meghalaya",
    "mizoram", "nagaland", "sikkim", "tripura",
)

# Generic category word -> general topic record
CATEGORY_TOPICS = {
    "festival": "festivals",
    "food": "food-cuisine",
    "culture": "northeast-culture",
    "dance": "festivals",
    "art": "northeast-culture",
}

SAMPLE_QUESTIONS = (
    "Tell me about Bihu festival",
    "What is Lai Haraoba?",
    "Describe the Hornbill Festival",
    "What is Wangala festival?",
    "Tell me about Chapchar Kut",
    "What is Losar festival?",
    "Tell me about traditional food of Northeast India",
    "What are the main festivals of Assam?",
    "Tell me about Sattriya dance",
    "What is Masor Tenga?",
    "Describe Manipuri classical dance",
    "What makes Northeast Indian culture unique?",
    "Tell me about bamboo crafts",
    "What is Axone?",
    "Describe Cheraw dance",
    "What are the eight Northeast states?",
    "Tell me about Muga silk",
    "What is Thukpa?",
    "Describe Assam silk weaving",
    "What is Eromba?",
)

DEFAULT_RESPONSE = """I'd love to help you learn about Northeast Indian culture! Here are some topics I can discuss in detail:

🎭 **Festivals**: Bihu (Assam), Lai Haraoba (Manipur), Hornbill Festival (Nagaland), Wangala (Meghalaya), Chapchar Kut (Mizoram)

🍽️ **Traditional Food**: Masor Tenga, Eromba, Axone, Jadoh, Thukpa, Bamboo Shoot Curry

🎨 **Arts & Crafts**: Assam Silk Weaving, Bamboo Crafts, Manipuri Pottery, Naga Wood Carving

💃 **Dance Forms**: Bihu Dance, Manipuri Classical, Cheraw (Bamboo Dance), Sattriya, Cham Dance

🏛️ **Cultural Heritage**: Traditional rituals, tribal customs, and community practices

Try asking me about any of these topics! For example: "Tell me about Bihu festival" or "What is Masor Tenga?\""""


@dataclass(frozen=True)
class ScoringWeights:
    """Weights and thresholds for keyword scoring"""

    exact: int = config.SCORE_EXACT
    contains: int = config.SCORE_CONTAINS
    token_in_keyword: int = config.SCORE_TOKEN_IN_KEYWORD
    partial: int = config.SCORE_PARTIAL
    name_token_bonus: int = config.SCORE_NAME_TOKEN_BONUS
    min_token_length: int = config.MIN_TOKEN_LENGTH
    min_score: int = config.MIN_MATCH_SCORE
    max_keyword_confidence: float = config.MAX_KEYWORD_CONFIDENCE
    state_match_limit: int = config.STATE_MATCH_LIMIT


@dataclass(frozen=True)
class ChatResult:
    response: str
    sources: Tuple[str, ...] = field(default_factory=tuple)
    confidence: float = 0.0
    entity: Optional[CulturalEntity] = None

    def to_dict(self) -> Dict:
        return {
            "response": self.response,
            "sources": list(self.sources),
            "confidence": self.confidence,
            "entity": self.entity.to_dict() if self.entity else None,
        }


def _normalize(query: str) -> str:
    if not isinstance(query, str):
        raise ConfigurationError(f"Query must be a string, got {type(query).__name__}")
    return query.lower().strip()


class ChatKnowledgeResolver:
    """
    Answers a free-text query from the knowledge base, no network involved.

    Rules, first match wins:
      1. query equals an entity name              confidence 1.0
      2. query contains an entity name            confidence 0.95
      3. best keyword score >= min_score          confidence min(0.9, score/100)
      4. query mentions a known state             confidence 0.8
      5. query mentions a category word           confidence 0.6
      6. generic guidance                         confidence 0.3
    """

    def __init__(self, store: KnowledgeStore = None, weights: ScoringWeights = None):
        self.weights = weights or ScoringWeights()
        self.reload(store or KnowledgeStore())

    def reload(self, store: KnowledgeStore):
        """Rebuild the knowledge base from a (re)loaded store"""
        self.store = store
        self.knowledge_base: Mapping[str, KnowledgeRecord] = build_knowledge_base(store)
        self._entity_records = [r for r in self.knowledge_base.values() if r.entity is not None]

    # ── Scoring ─────────────────────────────────────────────────────────────

    def _tokens(self, normalized: str) -> List[str]:
        return [t for t in normalized.split() if len(t) >= self.weights.min_token_length]

    def score(self, record: KnowledgeRecord, query: str) -> int:
        """Keyword score of one record; each keyword counts under its first matching rule"""
        w = self.weights
        q = _normalize(query)
        tokens = self._tokens(q)
        total = 0

        for keyword in record.keywords:
            if q == keyword:
                total += w.exact
            elif keyword in q:
                total += w.contains
            elif any(token in keyword for token in tokens):
                total += w.token_in_keyword
            elif q in keyword:
                total += w.partial

        if record.entity is not None:
            name_words = record.entity.name.lower().split()
            for token in tokens:
                for word in name_words:
                    if word in token or token in word:
                        total += w.name_token_bonus

        return total

    def rank(self, query: str) -> List[Tuple[KnowledgeRecord, int]]:
        """Records with a positive score, best first (ties keep knowledge-base order)"""
        q = _normalize(query)
        if not q:
            return []
        scored = [(record, self.score(record, q)) for record in self.knowledge_base.values()]
        scored = [pair for pair in scored if pair[1] > 0]
        return sorted(scored, key=lambda pair: pair[1], reverse=True)

    def top_entities(self, query: str, k: int = None) -> List[CulturalEntity]:
        """Best-scoring entities for a query, used as grounding context"""
        k = config.GROUNDING_CONTEXT_SIZE if k is None else k
        entities = [record.entity for record, _ in self.rank(query) if record.entity is not None]
        return entities[:k]

    # ── Rules ───────────────────────────────────────────────────────────────

    def _match_name(self, q: str) -> Optional[ChatResult]:
        for record in self._entity_records:
            if record.entity.name.lower() == q:
                return ChatResult(record.response, record.sources, 1.0, record.entity)
        for record in self._entity_records:
            if record.entity.name.lower() in q:
                return ChatResult(record.response, record.sources, 0.95, record.entity)
        return None

    def _match_keywords(self, q: str) -> Optional[ChatResult]:
        ranked = self.rank(q)
        if not ranked:
            return None
        best, best_score = ranked[0]
        if best_score < self.weights.min_score:
            logger.debug(f"Best keyword score {best_score} for {best.key!r} is below threshold")
            return None
        confidence = min(self.weights.max_keyword_confidence, best_score / 100)
        return ChatResult(best.response, best.sources, confidence, best.entity)

    def _match_state(self, q: str) -> Optional[ChatResult]:
        for state in KNOWN_STATES:
            if state not in q:
                continue
            records = [r for r in self._entity_records if r.entity.state.lower() == state]
            records = records[:self.weights.state_match_limit]
            if not records:
                continue

            title = " ".join(word.capitalize() for word in state.split())
            lines = "\n".join(
                f"- **{r.entity.name}** ({r.entity.type}): {r.entity.description[:100]}..."
                for r in records
            )
            response = (
                f"🏔️ **Cultural Heritage of {title}**\n\n"
                f"Here are some key cultural elements from {title}:\n\n"
                f"{lines}\n\n"
                "Ask me about any specific festival, food, or tradition for detailed information!"
            )
            return ChatResult(response, (CULTURAL_DATABASE_SOURCE,), 0.8)
        return None

    def _match_category(self, q: str) -> Optional[ChatResult]:
        for category, key in CATEGORY_TOPICS.items():
            if category in q and key in self.knowledge_base:
                record = self.knowledge_base[key]
                return ChatResult(record.response, record.sources, 0.6)
        return None

    def resolve(self, query: str) -> ChatResult:
        """Best offline answer for a query; always returns a result"""
        q = _normalize(query)
        if q:
            for rule in (self._match_name, self._match_keywords, self._match_state, self._match_category):
                result = rule(q)
                if result is not None:
                    return result
        return ChatResult(DEFAULT_RESPONSE, (KNOWLEDGE_BASE_SOURCE,), 0.3)

    # ── Helpers for the UI layer ────────────────────────────────────────────

    def can_answer_offline(self, query: str) -> bool:
        """True when some keyword of some record appears in the query"""
        q = _normalize(query)
        if not q:
            return False
        return any(
            keyword in q
            for record in self.knowledge_base.values()
            for keyword in record.keywords
        )

    @staticmethod
    def get_sample_questions() -> List[str]:
        return list(SAMPLE_QUESTIONS)

    def get_available_topics(self) -> List[Dict]:
        topics = []
        for key, record in self.knowledge_base.items():
            topics.append({
                "key": key,
                "name": record.entity.name if record.entity else key.replace("-", " ").title(),
                "type": record.entity.type if record.entity else "general",
                "keywords": list(record.keywords[:5]),
            })
        return topics
