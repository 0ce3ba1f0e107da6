import asyncio

import pytest

from portfolio.assistant import LocalAssistant
from portfolio.connectors.geometry import Rect
from portfolio.connectors.layout import StaticLayout
from portfolio.page import PortfolioPage
from portfolio.resume.data import EXPERIENCES, SKILLS


def _layout() -> StaticLayout:
    return StaticLayout(
        skills={skill.name: Rect(20 + i * 40, 40, 80, 80) for i, skill in enumerate(SKILLS)},
        experiences={exp.id: Rect(0, 700 + i * 320, 800, 260) for i, exp in enumerate(EXPERIENCES)},
    )


def _page() -> PortfolioPage:
    return PortfolioPage(
        _layout(),
        assistant=LocalAssistant(thinking_delay=0),
        selection_delay=0.01,
        layout_delay=0.01,
        exit_duration=0.02,
    )


@pytest.mark.asyncio
async def test_filter_switch_keeps_only_visible_selection_and_connectors():
    page = _page()
    page.skills.settle_delay = 0.02

    page.skills.click("Python")
    page.skills.click("Docker")
    await asyncio.sleep(0.05)
    assert {p.skill for p in page.connectors.paths} == {"Python", "Docker"}

    await page.skills.set_filter("language")
    await asyncio.sleep(0.08)

    assert page.store.active_skills == ["Python"]
    assert page.store.highlighted_experiences == ["vivint", "optilogic", "prior"]
    assert {p.skill for p in page.connectors.paths} == {"Python"}
    page.close()


@pytest.mark.asyncio
async def test_card_expansion_triggers_connector_pass():
    page = _page()
    page.store.set_active_skills(["Playwright"])
    await asyncio.sleep(0.03)
    passes = page.connectors.passes

    page.timeline.toggle_card("visyfy")
    await asyncio.sleep(0.03)

    assert page.connectors.passes == passes + 1
    page.close()


@pytest.mark.asyncio
async def test_chat_answer_highlights_timeline():
    page = _page()

    await page.chat.submit("What cloud platforms does Ryan know?")

    assert "Azure" in page.store.highlighted_skills
    assert page.timeline.is_highlighted("vivint")
    assert any(token.is_highlighted for token in page.skills.tokens() if token.name == "AWS")
    page.close()
