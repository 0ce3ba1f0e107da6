from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence


@dataclass
class AssistantReply:
    content: str
    skills: list[str] = field(default_factory=list)
    experiences: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "content": self.content,
            "skills": list(self.skills),
            "experiences": list(self.experiences),
        }


class AssistantStrategy(Protocol):
    async def answer(self, messages: Sequence[dict]) -> AssistantReply:
        ...
