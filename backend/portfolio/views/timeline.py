from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from portfolio.highlight.matching import experience_matches, skill_matches, toggle_skill_selection
from portfolio.highlight.state import HighlightSnapshot, HighlightStore
from portfolio.resume.data import EXPERIENCES
from portfolio.resume.models import Experience


logger = logging.getLogger("portfolio.views.timeline")


@dataclass(frozen=True)
class SkillTag:
    name: str
    is_active: bool


@dataclass(frozen=True)
class ExperienceCard:
    experience: Experience
    index: int
    is_highlighted: bool
    is_active: bool
    is_expanded: bool
    tags: tuple[SkillTag, ...]

    def to_dict(self) -> dict:
        payload = self.experience.to_dict()
        payload.update({
            "index": self.index,
            "is_highlighted": self.is_highlighted,
            "is_active": self.is_active,
            "is_expanded": self.is_expanded,
            "tags": [{"name": tag.name, "is_active": tag.is_active} for tag in self.tags],
        })
        return payload


class ExperienceTimelineView:
    """
    Experience cards in source order. A card lights up when the assistant
    flagged it or when one of its tags is an active skill, and opens by
    itself when it lights up during a manual selection.
    """

    def __init__(
        self,
        store: HighlightStore,
        experiences: Sequence[Experience] = EXPERIENCES,
        on_layout_change: Optional[Callable[[], None]] = None,
    ):
        self.store = store
        self.experiences = tuple(experiences)
        self.on_layout_change = on_layout_change
        self._expanded: set[str] = set()
        self._highlighted: set[str] = self._compute_highlighted(store.snapshot())
        self._unsubscribe = store.subscribe(self._on_highlight_change)

    def _compute_highlighted(self, snapshot: HighlightSnapshot) -> set[str]:
        flagged = set(snapshot.highlighted_experiences)
        return {
            exp.id
            for exp in self.experiences
            if exp.id in flagged or experience_matches(exp, snapshot.active_skills)
        }

    def _on_highlight_change(self, snapshot: HighlightSnapshot, changed: frozenset) -> None:
        highlighted = self._compute_highlighted(snapshot)
        entered = highlighted - self._highlighted
        self._highlighted = highlighted

        if not snapshot.active_skills:
            return
        opened = [exp_id for exp_id in entered if exp_id not in self._expanded]
        if opened:
            self._expanded.update(opened)
            logger.debug("auto-expanded cards | ids=%s", sorted(opened))
            self._layout_changed()

    def _layout_changed(self) -> None:
        if self.on_layout_change is not None:
            self.on_layout_change()

    def is_highlighted(self, experience_id: str) -> bool:
        return experience_id in self._compute_highlighted(self.store.snapshot())

    def is_expanded(self, experience_id: str) -> bool:
        return experience_id in self._expanded

    def toggle_card(self, experience_id: str) -> bool:
        if experience_id in self._expanded:
            self._expanded.discard(experience_id)
        else:
            self._expanded.add(experience_id)
        self._layout_changed()
        return experience_id in self._expanded

    def click_tag(self, experience_id: str, skill_name: str) -> list[str]:
        # Tag clicks select skills; they never open or close the card.
        return toggle_skill_selection(self.store, skill_name, self.experiences)

    def hover(self, experience_id: Optional[str]) -> None:
        self.store.set_active_experience(experience_id)

    def cards(self) -> list[ExperienceCard]:
        snapshot = self.store.snapshot()
        highlighted = self._compute_highlighted(snapshot)
        return [
            ExperienceCard(
                experience=exp,
                index=index,
                is_highlighted=exp.id in highlighted,
                is_active=snapshot.active_experience == exp.id,
                is_expanded=exp.id in self._expanded,
                tags=tuple(
                    SkillTag(
                        name=tag,
                        is_active=any(skill_matches(tag, name) for name in snapshot.active_skills),
                    )
                    for tag in exp.skills
                ),
            )
            for index, exp in enumerate(self.experiences)
        ]

    def close(self) -> None:
        self._unsubscribe()
