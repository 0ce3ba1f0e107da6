from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Optional

from portfolio.assistant.base import AssistantReply, AssistantStrategy
from portfolio.highlight.state import HighlightStore


logger = logging.getLogger("portfolio.assistant.bridge")

GREETING = (
    "Hi! I'm Ryan's AI assistant. I can tell you about his skills, experience, and achievements. "
    "What would you like to know?"
)
APOLOGY = "I'm sorry, I'm having trouble connecting right now. Please try again in a moment."
ERROR_BANNER = "Failed to get a response. Please try again."


@dataclass
class ChatMessage:
    role: str  # user | assistant
    content: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    related_skills: list[str] = field(default_factory=list)
    related_experiences: list[str] = field(default_factory=list)

    def to_turn(self) -> dict:
        return {"role": self.role, "content": self.content}


class AssistantBridge:
    """
    One visitor's chat session. Sends the running conversation to the
    configured strategy and pushes the returned tags into the highlight
    store. Input is refused while a reply is pending.
    """

    def __init__(self, strategy: AssistantStrategy, store: HighlightStore):
        self.strategy = strategy
        self.store = store
        self.messages: list[ChatMessage] = [ChatMessage(role="assistant", content=GREETING)]
        self.is_typing = False
        self.error: Optional[str] = None

    @property
    def accepts_input(self) -> bool:
        return not self.is_typing

    def history(self) -> list[dict]:
        return [m.to_turn() for m in self.messages if m.role in {"user", "assistant"}]

    async def submit(self, text: str) -> Optional[ChatMessage]:
        query = str(text or "").strip()
        if not query or self.is_typing:
            return None

        self.messages.append(ChatMessage(role="user", content=query))
        self.is_typing = True
        self.error = None

        try:
            reply: AssistantReply = await self.strategy.answer(self.history())
        except Exception as exc:
            logger.warning("assistant request failed | err=%s", exc)
            self.error = ERROR_BANNER
            message = ChatMessage(role="assistant", content=APOLOGY)
            self.messages.append(message)
            return message
        finally:
            self.is_typing = False

        message = ChatMessage(
            role="assistant",
            content=reply.content,
            related_skills=list(reply.skills),
            related_experiences=list(reply.experiences),
        )
        self.messages.append(message)
        self.store.highlight_from_ai(reply.skills, reply.experiences)
        return message

    def dismiss_error(self) -> None:
        self.error = None
