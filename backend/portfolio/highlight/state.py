from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Iterable, Optional


logger = logging.getLogger("portfolio.highlight.state")

ACTIVE_SKILLS = "active_skills"
HIGHLIGHTED_SKILLS = "highlighted_skills"
HIGHLIGHTED_EXPERIENCES = "highlighted_experiences"
ACTIVE_EXPERIENCE = "active_experience"


@dataclass(frozen=True)
class HighlightSnapshot:
    active_skills: tuple[str, ...] = ()
    highlighted_skills: tuple[str, ...] = ()
    highlighted_experiences: tuple[str, ...] = ()
    active_experience: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            ACTIVE_SKILLS: list(self.active_skills),
            HIGHLIGHTED_SKILLS: list(self.highlighted_skills),
            HIGHLIGHTED_EXPERIENCES: list(self.highlighted_experiences),
            ACTIVE_EXPERIENCE: self.active_experience,
        }


HighlightListener = Callable[[HighlightSnapshot, frozenset], None]


def _ordered_unique(values: Iterable[str]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for value in values or ():
        seen.setdefault(str(value), None)
    return tuple(seen)


class HighlightStore:
    """
    Session-scoped highlight state shared by the skill view, the timeline
    and the connector engine.

    All writes go through the mutators below. Subscribers are told which
    fields changed after each effective mutation.
    """

    def __init__(self):
        self._lock = Lock()
        self._state = HighlightSnapshot()
        self._listeners: list[HighlightListener] = []

    # -------------------------
    # READ
    # -------------------------

    def snapshot(self) -> HighlightSnapshot:
        with self._lock:
            return self._state

    @property
    def active_skills(self) -> list[str]:
        return list(self.snapshot().active_skills)

    @property
    def highlighted_skills(self) -> list[str]:
        return list(self.snapshot().highlighted_skills)

    @property
    def highlighted_experiences(self) -> list[str]:
        return list(self.snapshot().highlighted_experiences)

    @property
    def active_experience(self) -> Optional[str]:
        return self.snapshot().active_experience

    # -------------------------
    # WRITE
    # -------------------------

    def toggle_active_skill(self, name: str) -> None:
        def _toggled(state: HighlightSnapshot) -> dict:
            current = state.active_skills
            if name in current:
                return {ACTIVE_SKILLS: tuple(skill for skill in current if skill != name)}
            return {ACTIVE_SKILLS: current + (name,)}

        self._mutate(_toggled)

    def set_active_skills(self, skills: Iterable[str]) -> None:
        self._apply(**{ACTIVE_SKILLS: _ordered_unique(skills)})

    def set_highlighted_skills(self, skills: Iterable[str]) -> None:
        self._apply(**{HIGHLIGHTED_SKILLS: _ordered_unique(skills)})

    def set_highlighted_experiences(self, experiences: Iterable[str]) -> None:
        self._apply(**{HIGHLIGHTED_EXPERIENCES: _ordered_unique(experiences)})

    def set_active_experience(self, experience_id: Optional[str]) -> None:
        self._apply(**{ACTIVE_EXPERIENCE: experience_id or None})

    def highlight_from_ai(self, skills: Iterable[str], experiences: Iterable[str]) -> None:
        self._apply(**{
            HIGHLIGHTED_SKILLS: _ordered_unique(skills),
            HIGHLIGHTED_EXPERIENCES: _ordered_unique(experiences),
        })

    def clear_highlights(self) -> None:
        self._apply(**{
            ACTIVE_SKILLS: (),
            HIGHLIGHTED_SKILLS: (),
            HIGHLIGHTED_EXPERIENCES: (),
            ACTIVE_EXPERIENCE: None,
        })

    # -------------------------
    # SUBSCRIPTIONS
    # -------------------------

    def subscribe(self, listener: HighlightListener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return _unsubscribe

    def _apply(self, **changes) -> None:
        self._mutate(lambda state: changes)

    def _mutate(self, compute: Callable[[HighlightSnapshot], dict]) -> None:
        with self._lock:
            previous = self._state
            changes = compute(previous)
            merged = previous.to_dict()
            merged.update(changes)
            updated = HighlightSnapshot(
                active_skills=tuple(merged[ACTIVE_SKILLS]),
                highlighted_skills=tuple(merged[HIGHLIGHTED_SKILLS]),
                highlighted_experiences=tuple(merged[HIGHLIGHTED_EXPERIENCES]),
                active_experience=merged[ACTIVE_EXPERIENCE],
            )
            changed = frozenset(
                key for key in changes if getattr(previous, key) != getattr(updated, key)
            )
            if not changed:
                return
            self._state = updated
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(updated, changed)
            except Exception:
                logger.exception("highlight listener failed | changed=%s", sorted(changed))
