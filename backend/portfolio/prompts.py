# ----------- Assistant Prompt -----------

from portfolio.resume.data import EDUCATION, EXPERIENCES, KNOWLEDGE_BASE, PROFILE, REFERENCES, SKILLS


RESPONSE_GUIDELINES = """
## Response Guidelines

1. Be conversational, friendly, and professional
2. Reference specific experiences, projects, or metrics when relevant
3. If asked about skills, mention specific technologies and where {first_name} has used them
4. If asked "why hire {first_name}?", emphasize the combination of technical depth and business impact
5. Keep responses concise but informative (2-4 paragraphs max for most questions)
6. If you don't know something specific, say so honestly rather than making things up
"""

TAG_BLOCK_INSTRUCTIONS = """
At the end of your response, if there are specific skills or experiences that are highly relevant to your answer, include them in a JSON block like this (but only if truly relevant):
```json
{{"skills": ["Skill1", "Skill2"], "experiences": ["{example_a}", "{example_b}"]}}
```

Valid experience IDs are: {experience_ids}
Valid skill names should match exactly: {skill_names}
"""


def _skills_by_category() -> str:
    labels = {
        "language": "Languages",
        "framework": "Frameworks",
        "cloud": "Cloud",
        "database": "Databases",
        "specialty": "Specialties",
    }
    lines = []
    for category, label in labels.items():
        names = [skill.name for skill in SKILLS if skill.category == category]
        if names:
            lines.append(f"**{label}:** {', '.join(names)}")
    return "\n".join(lines)


def _experience_section() -> str:
    blocks = []
    for exp in EXPERIENCES:
        bullets = "\n".join(f"- {item}" for item in exp.highlights)
        blocks.append(
            f"### {exp.company} - {exp.title} ({exp.start_date}-{exp.end_date})\n"
            f"{bullets}\n"
            f"- Technologies: {', '.join(exp.skills)}"
        )
    return "\n\n".join(blocks)


def build_system_prompt() -> str:
    first_name = PROFILE.name.split()[0]
    accomplishments = "\n".join(
        f"{i}. **{item.title}** - {item.description}"
        for i, item in enumerate(KNOWLEDGE_BASE["key_accomplishments"], start=1)
    )
    traits = "\n".join(f"- {trait}" for trait in KNOWLEDGE_BASE["personality_traits"])
    quotes = "\n".join(
        f'- "{ref.text}" - {ref.name}, {ref.role} at {ref.affiliation}' for ref in REFERENCES
    )
    experience_ids = [exp.id for exp in EXPERIENCES]

    return "\n".join([
        f"You are an AI assistant for {PROFILE.name}'s portfolio website. Your job is to answer questions "
        f"about {first_name} in a helpful, professional, and slightly enthusiastic way, while remaining "
        "honest and accurate.",
        "",
        f"## About {PROFILE.name}",
        "",
        f"**Current Role:** {EXPERIENCES[0].title} at {EXPERIENCES[0].company}",
        f"**Experience:** {PROFILE.years_experience}",
        f"**Location:** {PROFILE.location}",
        f"**Education:** {EDUCATION.degree} in {EDUCATION.field} from {EDUCATION.school} ({EDUCATION.years})",
        f"**Languages:** {', '.join(PROFILE.languages)}",
        "",
        "## Career Summary",
        "",
        PROFILE.summary,
        "",
        "## Work Experience",
        "",
        _experience_section(),
        "",
        "## Key Accomplishments",
        "",
        accomplishments,
        "",
        "## Technical Skills",
        "",
        _skills_by_category(),
        "",
        "## Personality & Work Style",
        "",
        traits,
        "",
        "## What Colleagues Say",
        "",
        quotes,
        RESPONSE_GUIDELINES.format(first_name=first_name),
        TAG_BLOCK_INSTRUCTIONS.format(
            example_a=experience_ids[0],
            example_b=experience_ids[1] if len(experience_ids) > 1 else experience_ids[0],
            experience_ids=", ".join(experience_ids),
            skill_names=", ".join(skill.name for skill in SKILLS),
        ),
    ])


SYSTEM_PROMPT = build_system_prompt()
