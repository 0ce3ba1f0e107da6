from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from core import config
from portfolio.highlight.matching import related_experience_ids, skill_matches, toggle_skill_selection
from portfolio.highlight.state import HighlightStore
from portfolio.resume.data import EXPERIENCES, SKILLS
from portfolio.resume.models import CATEGORY_COLORS, Experience, Skill


logger = logging.getLogger("portfolio.views.skills")

TOKEN_MIN_PX = 60.0
TOKEN_MAX_PX = 110.0

CATEGORIES: tuple[tuple[Optional[str], str], ...] = (
    (None, "All"),
    ("language", "Languages"),
    ("framework", "Frameworks"),
    ("cloud", "Cloud"),
    ("database", "Database"),
    ("specialty", "Specialties"),
)


def token_size(proficiency: float) -> float:
    size = TOKEN_MIN_PX + (float(proficiency) / 100.0) * (TOKEN_MAX_PX - TOKEN_MIN_PX)
    return max(TOKEN_MIN_PX, min(TOKEN_MAX_PX, size))


@dataclass(frozen=True)
class SkillToken:
    name: str
    category: str
    color: str
    size: float
    index: int
    is_active: bool
    is_highlighted: bool

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "category": self.category,
            "color": self.color,
            "size": self.size,
            "index": self.index,
            "is_active": self.is_active,
            "is_highlighted": self.is_highlighted,
        }


class SkillSelectionView:
    def __init__(
        self,
        store: HighlightStore,
        skills: Sequence[Skill] = SKILLS,
        experiences: Sequence[Experience] = EXPERIENCES,
        settle_delay: float = config.FILTER_SETTLE_SEC,
    ):
        self.store = store
        self.skills = tuple(skills)
        self.experiences = tuple(experiences)
        self.settle_delay = settle_delay
        self.filter: Optional[str] = None
        self._generation = 0
        self._pending_restore: list[str] = []

    @property
    def categories(self) -> tuple[tuple[Optional[str], str], ...]:
        return CATEGORIES

    def legend(self) -> dict[str, str]:
        return dict(CATEGORY_COLORS)

    def visible_skills(self) -> list[Skill]:
        if self.filter is None:
            return list(self.skills)
        return [skill for skill in self.skills if skill.category == self.filter]

    def is_active(self, skill_name: str) -> bool:
        return any(skill_matches(skill_name, name) for name in self.store.active_skills)

    def is_highlighted(self, skill_name: str) -> bool:
        return any(skill_matches(skill_name, name) for name in self.store.highlighted_skills)

    def tokens(self) -> list[SkillToken]:
        return [
            SkillToken(
                name=skill.name,
                category=skill.category,
                color=skill.color,
                size=token_size(skill.proficiency),
                index=index,
                is_active=self.is_active(skill.name),
                is_highlighted=self.is_highlighted(skill.name),
            )
            for index, skill in enumerate(self.visible_skills())
        ]

    def click(self, skill_name: str) -> list[str]:
        return toggle_skill_selection(self.store, skill_name, self.experiences)

    @property
    def show_clear_all(self) -> bool:
        return bool(self.store.active_skills)

    def clear_all(self) -> None:
        self._generation += 1
        self._pending_restore = []
        self.store.set_active_skills([])
        self.store.set_highlighted_experiences([])

    async def set_filter(self, category: Optional[str]) -> list[str]:
        """
        Switch category. Active skills are dropped first and the ones still
        visible are restored once the new token layout has settled.

        A clear-all or another filter switch during the settle supersedes the
        pending restore. Skills activated during the settle are kept.
        """
        previous = list(self._pending_restore)
        previous += [name for name in self.store.active_skills if name not in previous]
        self._generation += 1
        generation = self._generation
        self._pending_restore = []
        if not previous:
            self.filter = category
            return []

        self._pending_restore = previous
        self.store.set_active_skills([])
        self.store.set_highlighted_experiences([])
        self.filter = category

        await asyncio.sleep(self.settle_delay)

        if generation != self._generation:
            logger.debug("filter restore superseded | category=%s", category)
            return []
        self._pending_restore = []

        visible = [skill.name for skill in self.visible_skills()]
        restored = [name for name in previous if any(skill_matches(name, v) for v in visible)]
        current = self.store.active_skills
        merged = restored + [name for name in current if not any(skill_matches(name, r) for r in restored)]
        if merged != current:
            self.store.set_active_skills(merged)
            self.store.set_highlighted_experiences(related_experience_ids(merged, self.experiences))
        logger.debug("filter applied | category=%s restored=%s dropped=%s", category, len(restored), len(previous) - len(restored))
        return restored
