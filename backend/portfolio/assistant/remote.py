from __future__ import annotations

import logging
from typing import Any, Sequence

from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from core import config
from core.logger import log_event
from portfolio.assistant.base import AssistantReply
from portfolio.assistant.errors import AssistantConfigurationError, AssistantUpstreamError
from portfolio.assistant.metadata import extract_tag_block
from portfolio.prompts import SYSTEM_PROMPT


logger = logging.getLogger("portfolio.assistant.remote")

EMPTY_COMPLETION_REPLY = "Sorry, I could not generate a response."


class RemoteAssistant:
    """
    Answers through OpenAI chat completions with the whole resume in the
    system prompt. Related skills/experiences come back in a trailing
    fenced json block that is stripped from the visible answer.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        client: Any = None,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        timeout_sec: float = 30.0,
    ):
        self._api_key = api_key
        self.model = model or config.MODEL_NAME
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout_sec = timeout_sec
        self._client = client

    @property
    def api_key(self) -> str:
        if self._api_key is not None:
            return str(self._api_key).strip()
        return config.openai_api_key()

    def _get_client(self):
        if self._client is None:
            # No automatic retries: a failed request surfaces to the visitor.
            self._client = AsyncOpenAI(api_key=self.api_key, max_retries=0, timeout=self.timeout_sec)
        return self._client

    async def answer(self, messages: Sequence[dict]) -> AssistantReply:
        if not self.api_key:
            raise AssistantConfigurationError()

        conversation = [
            {"role": str(m.get("role")), "content": str(m.get("content") or "")}
            for m in messages
        ]
        client = self._get_client()

        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=[{"role": "system", "content": SYSTEM_PROMPT}, *conversation],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except APIStatusError as exc:
            logger.error("completion request rejected | status=%s err=%s", exc.status_code, exc)
            raise AssistantUpstreamError(exc.status_code) from exc
        except APIConnectionError as exc:
            logger.error("completion request failed | err=%s", exc)
            raise AssistantUpstreamError(502) from exc

        choices = getattr(response, "choices", None) or []
        raw = str(choices[0].message.content or "").strip() if choices else ""
        if not raw:
            raw = EMPTY_COMPLETION_REPLY

        content, skills, experiences = extract_tag_block(raw)
        log_event(
            "assistant",
            "remote_answer",
            model=self.model,
            messages=conversation,
            content=content,
            skills=skills,
            experiences=experiences,
        )
        return AssistantReply(content=content or EMPTY_COMPLETION_REPLY, skills=skills, experiences=experiences)
