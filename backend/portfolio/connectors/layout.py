from __future__ import annotations

from typing import Mapping, Optional, Protocol

from portfolio.connectors.geometry import Point, Rect


class LayoutProbe(Protocol):
    """Viewport-relative measurements of rendered skill tokens and cards."""

    def measure_skill(self, skill_name: str) -> Optional[Rect]:
        ...

    def measure_experience(self, experience_id: str) -> Optional[Rect]:
        ...

    def scroll_offset(self) -> Point:
        ...


class StaticLayout:
    """Fixed rectangles, for tests and for client-reported measurements."""

    def __init__(
        self,
        skills: Mapping[str, Rect] | None = None,
        experiences: Mapping[str, Rect] | None = None,
        scroll: Point | None = None,
    ):
        self.skills: dict[str, Rect] = dict(skills or {})
        self.experiences: dict[str, Rect] = dict(experiences or {})
        self.scroll = scroll or Point(0.0, 0.0)
        self.reads = 0

    def measure_skill(self, skill_name: str) -> Optional[Rect]:
        self.reads += 1
        return self.skills.get(skill_name)

    def measure_experience(self, experience_id: str) -> Optional[Rect]:
        self.reads += 1
        return self.experiences.get(experience_id)

    def scroll_offset(self) -> Point:
        return self.scroll
