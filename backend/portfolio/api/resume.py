from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from core.state import SkillCategory
from portfolio.highlight.matching import related_experience_ids
from portfolio.resume.data import EDUCATION, EXPERIENCES, PROFILE, REFERENCES, SKILLS
from portfolio.views.skills import token_size

router = APIRouter()

_CATEGORIES = {category.value for category in SkillCategory}


@router.get("/resume")
def get_resume():
    return {
        "profile": PROFILE.to_dict(),
        "education": EDUCATION.to_dict(),
        "experiences": [exp.to_dict() for exp in EXPERIENCES],
        "skills": [skill.to_dict() for skill in SKILLS],
        "references": [ref.to_dict() for ref in REFERENCES],
    }


@router.get("/skills")
def list_skills(category: Optional[str] = None):
    if category is not None and category not in _CATEGORIES:
        raise HTTPException(status_code=400, detail=f"Unknown category: {category}")

    items = [skill for skill in SKILLS if category is None or skill.category == category]
    return {
        "category": category,
        "items": [
            {
                **skill.to_dict(),
                "color": skill.color,
                "size": token_size(skill.proficiency),
            }
            for skill in items
        ],
    }


@router.get("/experiences/related")
def related_experiences(skills: list[str] = Query(default=[])):
    return {
        "skills": skills,
        "experiences": related_experience_ids(skills),
    }
