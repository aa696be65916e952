"""Append-only chat transcript"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, Iterator, Optional, Tuple

from . import config

logger = logging.getLogger(__name__)

GREETING = (
    "Namaste! I'm CULTURA, your AI companion for Northeast Indian cultural heritage. "
    "I can answer questions about festivals, rituals, traditions, and cultural practices "
    "from all 8 Northeast states.\n\n"
    "🎭 Try asking me about: Bihu Festival, Lai Haraoba, Hornbill Festival, Wangala, or Chapchar Kut!"
)

ROLES = ("user", "assistant")


@dataclass(frozen=True)
class Source:
    """Citation attached to an assistant message"""

    name: str
    attribution: str
    entity_id: Optional[str] = None

    def to_dict(self) -> Dict:
        return {"name": self.name, "attribution": self.attribution, "entity_id": self.entity_id}


@dataclass(frozen=True)
class ChatMessage:
    """Single conversation message"""

    role: str  # 'user' or 'assistant'
    content: str
    sources: Tuple[Source, ...] = ()
    is_offline: bool = False
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def __post_init__(self):
        if self.role not in ROLES:
            raise ValueError(f"Unknown message role: {self.role!r}")
        # Accept any iterable of sources but always store a tuple
        object.__setattr__(self, "sources", tuple(self.sources))

    def to_dict(self) -> Dict:
        return {
            "role": self.role,
            "content": self.content,
            "sources": [s.to_dict() for s in self.sources],
            "is_offline": self.is_offline,
            "timestamp": self.timestamp,
        }


class Conversation:
    """
    Ordered transcript of a chat session.
    Messages can be added but never edited or removed; nothing is written to disk.
    """

    def __init__(self, greeting: Optional[str] = GREETING):
        self._messages = []
        self.session_start = datetime.now().isoformat()
        if greeting:
            self.add(ChatMessage("assistant", greeting))

    def add(self, message: ChatMessage) -> ChatMessage:
        self._messages.append(message)
        return message

    def add_message(self, role: str, content: str, sources: Iterable[Source] = (),
                    is_offline: bool = False) -> ChatMessage:
        return self.add(ChatMessage(role, content, tuple(sources), is_offline))

    @property
    def messages(self) -> Tuple[ChatMessage, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(tuple(self._messages))

    def get_context_string(self, n: int = None) -> str:
        """Recent messages as 'User: ...' / 'Assistant: ...' lines"""
        n = config.MAX_CONTEXT_MESSAGES if n is None else n
        recent = self._messages[-n:] if n > 0 else []
        return "\n".join(
            f"{'User' if msg.role == 'user' else 'Assistant'}: {msg.content}"
            for msg in recent
        )

    def get_summary(self) -> Dict:
        user_messages = sum(1 for msg in self._messages if msg.role == "user")
        assistant_messages = sum(1 for msg in self._messages if msg.role == "assistant")
        offline_messages = sum(1 for msg in self._messages if msg.is_offline)

        return {
            "total_messages": len(self._messages),
            "user_messages": user_messages,
            "assistant_messages": assistant_messages,
            "offline_messages": offline_messages,
            "session_start": self.session_start,
        }
