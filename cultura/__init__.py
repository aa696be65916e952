"""CULTURA - cultural heritage assistant for Northeast India"""

__version__ = "0.1.0"
__author__ = "CULTURA Heritage Team"
__powered_by__ = "BHASHINI · Anthropic Claude"

from .agent import ChatOrchestrator
from .chatbot import ChatKnowledgeResolver, ChatResult, ScoringWeights
from .conversation import ChatMessage, Conversation, Source
from .errors import (
    AuthenticationError,
    ConfigurationError,
    CulturaError,
    NetworkError,
    RateLimitError,
    ServiceError,
)
from .store import CulturalEntity, KnowledgeStore
from .translator import TranslationResolver, TranslationResult

__all__ = [
    "ChatOrchestrator",
    "ChatKnowledgeResolver",
    "ChatResult",
    "ScoringWeights",
    "ChatMessage",
    "Conversation",
    "Source",
    "AuthenticationError",
    "ConfigurationError",
    "CulturaError",
    "NetworkError",
    "RateLimitError",
    "ServiceError",
    "CulturalEntity",
    "KnowledgeStore",
    "TranslationResolver",
    "TranslationResult",
]
