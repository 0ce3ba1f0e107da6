from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Sequence

from core import config
from core.logger import log_event
from portfolio.assistant.base import AssistantReply
from portfolio.resume.data import EDUCATION, KNOWLEDGE_BASE, PROFILE


@dataclass(frozen=True)
class CannedAnswer:
    keywords: tuple[str, ...]
    content: str
    skills: tuple[str, ...] = ()
    experiences: tuple[str, ...] = ()


_ANSWERS = KNOWLEDGE_BASE["interview_answers"]

KEYWORD_TABLE: tuple[CannedAnswer, ...] = (
    CannedAnswer(
        keywords=("cloud", "aws", "azure", "gcp", "firebase"),
        content=(
            "Ryan has hands-on experience with all three major clouds. He has used Azure at Visyfy and "
            "Optilogic, GCP and AWS at Vivint, and Firebase for mobile and backend work. At Optilogic he "
            "re-architected the automation fleet onto self-hosted runners and cut monthly spend by 99.6%."
        ),
        skills=("Azure", "GCP", "AWS", "Firebase"),
        experiences=("visyfy", "vivint", "optilogic"),
    ),
    CannedAnswer(
        keywords=("test", "automation", "qa", "pytest", "playwright", "sdet"),
        content=(
            "Test automation is one of Ryan's core specialties. At Optilogic he moved QA from reactive and "
            "manual to proactive and autonomous, which made bug discovery 240% faster. At Vivint he migrated "
            "the CI/CD pipeline to a custom test scheduler for a 30% regression speed-up."
        ),
        skills=("Test Automation", "PyTest", "Playwright", "CI/CD"),
        experiences=("vivint", "optilogic"),
    ),
    CannedAnswer(
        keywords=("encryption", "quantum", "security", "hipaa"),
        content=(
            "At Visyfy Ryan built, end to end, a HIPAA-compliant social networking platform protected by "
            "patented post-quantum encryption, designed for long-term quantum resilience."
        ),
        skills=("Post-quantum Encryption", "Backend Systems"),
        experiences=("visyfy",),
    ),
    CannedAnswer(
        keywords=("artificial intelligence", "ai integration", "paralegal", "llm", "agent"),
        content=(
            "Ryan developed and tested an AI paralegal agent for personal injury law, covering client "
            "communication, document management, scheduling and medical coordination."
        ),
        skills=("AI Integration", "Python", "Backend Systems"),
        experiences=("visyfy",),
    ),
    CannedAnswer(
        keywords=("react", "frontend", "mobile", "ios", "javascript", "typescript"),
        content=(
            "Ryan is an expert in JavaScript and TypeScript and builds web and mobile apps with React and "
            "React Native, including the iOS client of the Visyfy platform."
        ),
        skills=("JavaScript", "TypeScript", "React", "React Native", "iOS", "Mobile Dev"),
        experiences=("visyfy", "optilogic"),
    ),
    CannedAnswer(
        keywords=("python",),
        content=(
            "Python runs through Ryan's whole career: automation frameworks at Vivint and Optilogic, "
            "PyTest suites, and backend services going back to his early engineering roles."
        ),
        skills=("Python", "PyTest"),
        experiences=("vivint", "optilogic", "prior"),
    ),
    CannedAnswer(
        keywords=("embedded", "firmware", "c++", "hardware"),
        content=(
            "Ryan started in embedded systems at Northrop Grumman, Raytheon, Smarter AI and Dyno Nobel, and "
            "at Vivint he wrote a firmware version handler that lifted automation success rates by 20%."
        ),
        skills=("Embedded Systems", "C/C++"),
        experiences=("vivint", "prior"),
    ),
    CannedAnswer(
        keywords=("hire", "why should", "stand out"),
        content=_ANSWERS["why_hire"],
        skills=("Test Automation", "AI Integration", "Post-quantum Encryption"),
        experiences=("visyfy", "optilogic"),
    ),
    CannedAnswer(
        keywords=("strength", "best at"),
        content=_ANSWERS["strengths"],
    ),
    CannedAnswer(
        keywords=("work style", "team", "remote", "culture"),
        content=_ANSWERS["work_style"],
    ),
    CannedAnswer(
        keywords=("education", "degree", "school", "university"),
        content=(
            f"Ryan holds a {EDUCATION.degree} in {EDUCATION.field} from {EDUCATION.school} "
            f"({EDUCATION.years})."
        ),
    ),
    CannedAnswer(
        keywords=("contact", "email", "reach"),
        content=f"You can reach Ryan at {PROFILE.email}. He is based in {PROFILE.location}.",
    ),
    CannedAnswer(
        keywords=("experience", "career", "worked", "job"),
        content=(
            "Ryan has 9+ years of engineering experience: Principal Engineer at Visyfy, Senior Automation "
            "Engineer at Vivint, Senior SDET at Optilogic, and earlier roles across defense, AI and "
            "industrial companies."
        ),
        experiences=("visyfy", "vivint", "optilogic", "prior"),
    ),
)

DEFAULT_ANSWER = CannedAnswer(
    keywords=(),
    content=(
        "Great question! Ryan is a Principal Engineer with 9+ years of experience in secure, scalable "
        "systems, test automation and AI integration. Try asking about his cloud experience, test "
        "automation work, or why you should hire him."
    ),
)


def match_canned_answer(query: str, table: Sequence[CannedAnswer] = KEYWORD_TABLE) -> CannedAnswer:
    text = str(query or "").lower()
    for entry in table:
        if any(keyword in text for keyword in entry.keywords):
            return entry
    return DEFAULT_ANSWER


class LocalAssistant:
    """Keyword lookup over canned answers, with a short thinking pause."""

    def __init__(
        self,
        thinking_delay: float | None = None,
        table: Sequence[CannedAnswer] = KEYWORD_TABLE,
    ):
        self.thinking_delay = config.ASSISTANT_THINKING_DELAY_SEC if thinking_delay is None else thinking_delay
        self.table = tuple(table)

    async def answer(self, messages: Sequence[dict]) -> AssistantReply:
        query = ""
        for message in reversed(list(messages)):
            if message.get("role") == "user":
                query = str(message.get("content") or "")
                break

        await asyncio.sleep(max(0.0, float(self.thinking_delay)))

        entry = match_canned_answer(query, self.table)
        log_event("assistant", "local_answer", matched=bool(entry.keywords), skills=list(entry.skills))
        return AssistantReply(
            content=entry.content,
            skills=list(entry.skills),
            experiences=list(entry.experiences),
        )
