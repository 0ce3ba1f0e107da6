from portfolio.highlight.matching import (
    experience_matches,
    related_experience_ids,
    skill_matches,
    toggle_skill_selection,
)
from portfolio.highlight.state import HighlightSnapshot, HighlightStore

__all__ = [
    "HighlightSnapshot",
    "HighlightStore",
    "experience_matches",
    "related_experience_ids",
    "skill_matches",
    "toggle_skill_selection",
]
