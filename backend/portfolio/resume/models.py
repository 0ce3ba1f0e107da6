from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from core.state import SkillCategory


CATEGORY_COLORS: dict[str, str] = {
    SkillCategory.LANGUAGE.value: "#6C63FF",
    SkillCategory.FRAMEWORK.value: "#00D9FF",
    SkillCategory.CLOUD.value: "#FF6B6B",
    SkillCategory.DATABASE.value: "#4ECB71",
    SkillCategory.SPECIALTY.value: "#FFB347",
}
DEFAULT_COLOR = CATEGORY_COLORS[SkillCategory.LANGUAGE.value]


@dataclass(frozen=True)
class Skill:
    id: str
    name: str
    category: str
    proficiency: int  # 0-100, drives token size only

    @property
    def color(self) -> str:
        return CATEGORY_COLORS.get(self.category, DEFAULT_COLOR)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Experience:
    id: str
    title: str
    company: str
    location: str
    start_date: str
    end_date: str
    description: str
    highlights: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["highlights"] = list(self.highlights)
        payload["skills"] = list(self.skills)
        return payload


@dataclass(frozen=True)
class Reference:
    id: str
    name: str
    role: str
    affiliation: str
    text: str
    phone: Optional[str] = None
    email: Optional[str] = None
    linkedin: Optional[str] = None
    photo: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Profile:
    name: str
    title: str
    years_experience: str
    email: str
    location: str
    summary: str
    languages: tuple[str, ...] = ()
    phone: Optional[str] = None

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["languages"] = list(self.languages)
        return payload


@dataclass(frozen=True)
class Education:
    degree: str
    field: str
    school: str
    years: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Accomplishment:
    title: str
    description: str
    skills: tuple[str, ...] = ()
