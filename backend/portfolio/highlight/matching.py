from __future__ import annotations

from typing import Iterable, Sequence, TYPE_CHECKING

from portfolio.resume.data import EXPERIENCES
from portfolio.resume.models import Experience

if TYPE_CHECKING:
    from portfolio.highlight.state import HighlightStore


def _normalize_skill_name(name: str) -> str:
    return " ".join(str(name or "").strip().lower().split())


def skill_matches(left: str, right: str) -> bool:
    """Exact, case-insensitive skill name comparison."""
    key = _normalize_skill_name(left)
    return bool(key) and key == _normalize_skill_name(right)


def experience_matches(experience: Experience, skill_names: Iterable[str]) -> bool:
    wanted = {_normalize_skill_name(name) for name in skill_names}
    wanted.discard("")
    if not wanted:
        return False
    return any(_normalize_skill_name(tag) in wanted for tag in experience.skills)


def related_experience_ids(
    skill_names: Iterable[str],
    experiences: Sequence[Experience] = EXPERIENCES,
) -> list[str]:
    """
    Ids of experiences tagged with at least one of the given skills,
    in source order.
    """
    names = list(skill_names)
    if not names:
        return []
    return [exp.id for exp in experiences if experience_matches(exp, names)]


def toggle_skill_selection(
    store: "HighlightStore",
    skill_name: str,
    experiences: Sequence[Experience] = EXPERIENCES,
) -> list[str]:
    """
    Shared click path for skill tokens and timeline tags: toggle the skill,
    then republish the experiences matching the whole active set.
    """
    store.toggle_active_skill(skill_name)
    related = related_experience_ids(store.active_skills, experiences)
    store.set_highlighted_experiences(related)
    return related
