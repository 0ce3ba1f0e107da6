from portfolio.resume.data import (
    EDUCATION,
    EXPERIENCES,
    KNOWLEDGE_BASE,
    PROFILE,
    REFERENCES,
    SKILLS,
)
from portfolio.resume.models import (
    CATEGORY_COLORS,
    Education,
    Experience,
    Profile,
    Reference,
    Skill,
)

__all__ = [
    "CATEGORY_COLORS",
    "EDUCATION",
    "EXPERIENCES",
    "Education",
    "Experience",
    "KNOWLEDGE_BASE",
    "PROFILE",
    "Profile",
    "REFERENCES",
    "Reference",
    "SKILLS",
    "Skill",
]
