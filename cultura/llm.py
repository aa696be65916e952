"""Remote LLM client (Anthropic Messages API) for grounded cultural answers"""

import logging
from typing import List, Sequence

import anthropic

from . import config
from .errors import AuthenticationError, NetworkError, RateLimitError, ServiceError
from .store import CulturalEntity

logger = logging.getLogger(__name__)

SYSTEM_PROMPT_TEMPLATE = """You are CULTURA, an AI assistant specialized in Northeast Indian cultural heritage. You have access to verified cultural data from government sources and tribal communities.

ETHICAL GUIDELINES:
- Always attribute information to source communities
- Show respect for indigenous knowledge
- Avoid cultural appropriation or misrepresentation
- If uncertain, say so - never hallucinate cultural facts
- Keep responses concise and informative (2-3 paragraphs max)

CULTURAL CONTEXT:
{context}

Provide accurate, respectful responses about Northeast Indian culture. Always cite the community source when referencing specific cultural practices."""

MISSING_KEY_MESSAGE = (
    "Anthropic API key is not configured. Please add ANTHROPIC_API_KEY to your .env file."
)
INVALID_KEY_MESSAGE = "Invalid API key. Please check your Anthropic API key."
RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again in a moment."
NETWORK_MESSAGE = "Could not reach the language model. Please check your connection."


def format_context(entities: Sequence[CulturalEntity]) -> str:
    """Serialize grounding entities for the system prompt"""
    return "\n\n".join(
        f"[{e.name} - {e.region}]: {e.description}\n"
        f"Rituals: {', '.join(e.rituals)}\n"
        f"Attribution: {e.attribution}"
        for e in entities
    )


def build_system_prompt(entities: Sequence[CulturalEntity]) -> str:
    return SYSTEM_PROMPT_TEMPLATE.format(context=format_context(entities))


class LLMClient:
    """
    Thin wrapper over the Anthropic SDK.
    Every failure is re-raised as a ServiceError subclass with a readable message.
    """

    def __init__(self, api_key: str = None, model: str = None, max_tokens: int = None,
                 timeout: float = None, client=None):
        self.api_key = config.ANTHROPIC_API_KEY if api_key is None else api_key
        self.model = model or config.LLM_MODEL_NAME
        self.max_tokens = max_tokens or config.LLM_MAX_TOKENS
        self.timeout = config.REQUEST_TIMEOUT if timeout is None else timeout
        self._client = client

    @property
    def is_configured(self) -> bool:
        return self._client is not None or bool(self.api_key)

    def _get_client(self):
        """Lazy initialization of the Anthropic client"""
        if self._client is None:
            if not self.api_key:
                raise AuthenticationError(MISSING_KEY_MESSAGE, details={"reason": "missing_credentials"})
            # Retries are the caller's business: a failed call falls back offline
            self._client = anthropic.Anthropic(
                api_key=self.api_key, timeout=self.timeout, max_retries=0,
            )
        return self._client

    def generate(self, user_message: str, context: Sequence[CulturalEntity] = ()) -> str:
        """Answer one user turn grounded in the given entities"""
        client = self._get_client()
        logger.info(f"Calling {self.model} with {len(context)} grounding entities")

        try:
            message = client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=build_system_prompt(context),
                messages=[{"role": "user", "content": user_message}],
            )
        except (anthropic.AuthenticationError, anthropic.PermissionDeniedError) as e:
            raise AuthenticationError(INVALID_KEY_MESSAGE, details={"status": e.status_code}) from e
        except anthropic.RateLimitError as e:
            raise RateLimitError(RATE_LIMIT_MESSAGE, details={"status": e.status_code}) from e
        except anthropic.APITimeoutError as e:
            raise NetworkError("Request to the language model timed out",
                               details={"timeout": self.timeout}) from e
        except anthropic.APIConnectionError as e:
            raise NetworkError(NETWORK_MESSAGE) from e
        except anthropic.APIStatusError as e:
            raise ServiceError(
                f"Language model request failed (HTTP {e.status_code})",
                code="HTTP_ERROR", details={"status": e.status_code},
            ) from e

        text = _message_text(message.content)
        if not text:
            raise ServiceError("Language model returned an empty response", code="INVALID_RESPONSE")
        logger.info(f"Language model response received ({len(text)} chars)")
        return text


def _message_text(blocks: List) -> str:
    return "".join(
        getattr(block, "text", "") for block in blocks
        if getattr(block, "type", "text") == "text"
    ).strip()
