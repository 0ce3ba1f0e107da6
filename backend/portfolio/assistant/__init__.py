from __future__ import annotations

from core import config
from core.state import AssistantStrategyName
from portfolio.assistant.base import AssistantReply, AssistantStrategy
from portfolio.assistant.bridge import AssistantBridge, ChatMessage
from portfolio.assistant.errors import (
    AssistantConfigurationError,
    AssistantError,
    AssistantUpstreamError,
)
from portfolio.assistant.local import LocalAssistant
from portfolio.assistant.remote import RemoteAssistant


def build_assistant(strategy: str | None = None) -> AssistantStrategy:
    name = str(strategy or config.ASSISTANT_STRATEGY).strip().lower()
    if name == AssistantStrategyName.LOCAL.value:
        return LocalAssistant()
    if name == AssistantStrategyName.REMOTE.value:
        return RemoteAssistant()
    raise AssistantConfigurationError(f"Unknown assistant strategy: {name}")


__all__ = [
    "AssistantBridge",
    "AssistantConfigurationError",
    "AssistantError",
    "AssistantReply",
    "AssistantStrategy",
    "AssistantUpstreamError",
    "ChatMessage",
    "LocalAssistant",
    "RemoteAssistant",
    "build_assistant",
]
