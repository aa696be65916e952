"""Chat orchestrator: chooses between the offline resolver and the remote LLM"""

import logging
import threading
from typing import List, Optional

import anthropic

from . import config
from .chatbot import KNOWLEDGE_BASE_SOURCE, ChatKnowledgeResolver
from .conversation import ChatMessage, Conversation, Source
from .errors import ConfigurationError, ServiceError
from .llm import LLMClient

logger = logging.getLogger(__name__)

# Orchestrator states
IDLE = "idle"
CHECKING = "checking"
OFFLINE_ANSWERED = "offline_answered"
API_ATTEMPTING = "api_attempting"
ANSWERED = "answered"

# Values of last_source
SOURCE_OFFLINE = "offline"
SOURCE_LLM = "llm"
SOURCE_OFFLINE_FALLBACK = "offline-fallback"


class ChatOrchestrator:
    """
    Turns each user message into exactly one assistant message.

    Decision chain in submit():
      1. Blank input or a submission already in flight -> ignored
      2. Offline match signal -> offline resolver answer
      3. Otherwise -> remote LLM grounded in the top resolver matches
      4. Any LLM failure -> offline resolver answer

    The user always gets an answer; service errors are logged, never raised.
    """

    def __init__(self, resolver: ChatKnowledgeResolver = None,
                 llm_client: Optional[LLMClient] = None,
                 conversation: Conversation = None,
                 grounding_size: int = None,
                 use_remote: bool = True):
        logger.info("Initializing CULTURA chat orchestrator...")
        self.resolver = resolver or ChatKnowledgeResolver()
        if llm_client is None and use_remote:
            llm_client = LLMClient()
        self.llm = llm_client
        self.conversation = conversation if conversation is not None else Conversation()
        self.grounding_size = config.GROUNDING_CONTEXT_SIZE if grounding_size is None else grounding_size

        self.state = IDLE
        self.last_source = ""
        self.last_transitions: List[str] = []
        self._lock = threading.Lock()

    @property
    def is_busy(self) -> bool:
        return self._lock.locked()

    def _transition(self, state: str):
        logger.debug(f"Orchestrator {self.state} -> {state}")
        self.state = state
        self.last_transitions.append(state)

    # ── Answer paths ────────────────────────────────────────────────────────

    def _answer_offline(self, query: str, source: str) -> ChatMessage:
        result = self.resolver.resolve(query)
        entity_id = result.entity.id if result.entity else None
        sources = [Source(name, KNOWLEDGE_BASE_SOURCE, entity_id) for name in result.sources]
        self.last_source = source
        return self.conversation.add_message("assistant", result.response, sources, is_offline=True)

    def _answer_remote(self, query: str) -> ChatMessage:
        if self.llm is None:
            logger.info("No language model configured, answering offline")
            return self._answer_offline(query, SOURCE_OFFLINE_FALLBACK)

        context = self.resolver.top_entities(query, self.grounding_size)
        try:
            text = self.llm.generate(query, context)
        except ServiceError as e:
            logger.warning(f"Language model unavailable ({type(e).__name__}, {e.code}): {e}")
            return self._answer_offline(query, SOURCE_OFFLINE_FALLBACK)
        except anthropic.AnthropicError as e:
            logger.warning(f"Unexpected language model failure ({type(e).__name__}): {e}")
            return self._answer_offline(query, SOURCE_OFFLINE_FALLBACK)

        sources = [Source(e.name, e.attribution, e.id) for e in context]
        self.last_source = SOURCE_LLM
        return self.conversation.add_message("assistant", text, sources, is_offline=False)

    # ── Public API ──────────────────────────────────────────────────────────

    def submit(self, text: str) -> Optional[ChatMessage]:
        """
        Answer one user message and return the appended assistant message,
        or None when the input was blank or another submission is pending.
        """
        if not isinstance(text, str):
            raise ConfigurationError(f"Message must be a string, got {type(text).__name__}")
        query = text.strip()
        if not query:
            return None

        if not self._lock.acquire(blocking=False):
            logger.info("Submission ignored: a response is still pending")
            return None

        try:
            self.last_transitions = []
            self.last_source = ""
            self.conversation.add_message("user", query)
            self._transition(CHECKING)

            if self.resolver.can_answer_offline(query):
                self._transition(OFFLINE_ANSWERED)
                reply = self._answer_offline(query, SOURCE_OFFLINE)
            else:
                self._transition(API_ATTEMPTING)
                reply = self._answer_remote(query)

            self._transition(ANSWERED)
            logger.info(f"Answered via {self.last_source}")
            return reply
        finally:
            self._transition(IDLE)
            self._lock.release()

    def get_greeting(self) -> str:
        messages = self.conversation.messages
        return messages[0].content if messages else ""
