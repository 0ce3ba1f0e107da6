import asyncio

import pytest

from portfolio.highlight.matching import related_experience_ids
from portfolio.highlight.state import HighlightStore
from portfolio.views.skills import SkillSelectionView, token_size


def test_token_size_is_linear_and_clamped():
    assert token_size(0) == 60
    assert token_size(100) == 110
    assert token_size(50) == 85
    assert token_size(-20) == 60
    assert token_size(250) == 110


def test_tokens_follow_filter_and_state(store: HighlightStore):
    view = SkillSelectionView(store)
    store.highlight_from_ai(["aws"], [])
    view.click("Python")

    tokens = {t.name: t for t in view.tokens()}
    assert len(tokens) == 23
    assert tokens["Python"].is_active
    assert tokens["AWS"].is_highlighted
    assert not tokens["Azure"].is_highlighted
    assert tokens["JavaScript"].size == pytest.approx(60 + 0.97 * 50)

    view.filter = "database"
    assert [t.name for t in view.tokens()] == ["Postgres", "NoSQL"]


def test_click_publishes_matching_experiences(store: HighlightStore):
    view = SkillSelectionView(store)

    view.click("Playwright")
    assert store.highlighted_experiences == ["optilogic"]

    view.click("iOS")
    assert store.active_skills == ["Playwright", "iOS"]
    assert store.highlighted_experiences == ["visyfy", "optilogic"]

    view.click("Playwright")
    view.click("iOS")
    assert store.active_skills == []
    assert store.highlighted_experiences == []


def test_clear_all_visibility(store: HighlightStore):
    view = SkillSelectionView(store)
    assert not view.show_clear_all

    view.click("Docker")
    assert view.show_clear_all

    store.highlight_from_ai(["Docker"], ["prior"])
    view.clear_all()
    assert not view.show_clear_all
    assert store.active_skills == []
    assert store.highlighted_experiences == []
    assert store.highlighted_skills == ["Docker"]


@pytest.mark.asyncio
async def test_filter_change_reactivates_visible_skills(store: HighlightStore):
    view = SkillSelectionView(store, settle_delay=0.01)
    view.click("Python")
    view.click("Docker")
    history = []
    store.subscribe(lambda snapshot, changed: history.append(snapshot.active_skills))

    restored = await view.set_filter("language")

    assert restored == ["Python"]
    assert store.active_skills == ["Python"]
    assert store.highlighted_experiences == ["vivint", "optilogic", "prior"]
    # deactivated first, then reactivated after the layout settled
    assert history[0] == ()
    assert history[-1] == ("Python",)


@pytest.mark.asyncio
async def test_filter_change_without_selection_is_immediate(store: HighlightStore):
    view = SkillSelectionView(store, settle_delay=5.0)

    assert await view.set_filter("cloud") == []
    assert view.filter == "cloud"
    assert [t.name for t in view.tokens()] == ["Azure", "GCP", "AWS", "Firebase"]


@pytest.mark.asyncio
async def test_filter_change_dropping_everything(store: HighlightStore):
    view = SkillSelectionView(store, settle_delay=0.0)
    view.click("Docker")

    assert await view.set_filter("database") == []
    assert store.active_skills == []
    assert store.highlighted_experiences == []


def test_categories_and_legend(store: HighlightStore):
    view = SkillSelectionView(store)
    assert [label for _, label in view.categories][0] == "All"
    assert view.legend()["cloud"] == "#FF6B6B"


def test_token_activity_ignores_case(store: HighlightStore):
    view = SkillSelectionView(store)

    related = view.click("python")

    assert related == ["vivint", "optilogic", "prior"]
    tokens = {t.name: t for t in view.tokens()}
    assert tokens["Python"].is_active
    assert view.is_active("PYTHON")


@pytest.mark.asyncio
async def test_filter_change_keeps_differently_cased_skill(store: HighlightStore):
    view = SkillSelectionView(store, settle_delay=0.0)
    view.click("python")

    assert await view.set_filter("language") == ["python"]
    assert store.active_skills == ["python"]
    assert store.highlighted_experiences == ["vivint", "optilogic", "prior"]


@pytest.mark.asyncio
async def test_clear_all_during_filter_settle_wins(store: HighlightStore):
    view = SkillSelectionView(store, settle_delay=0.05)
    view.click("Python")
    view.click("Docker")

    pending = asyncio.create_task(view.set_filter("language"))
    await asyncio.sleep(0.01)
    view.clear_all()

    assert await pending == []
    assert store.active_skills == []
    assert store.highlighted_experiences == []
    assert view.filter == "language"


@pytest.mark.asyncio
async def test_click_during_filter_settle_is_kept(store: HighlightStore):
    view = SkillSelectionView(store, settle_delay=0.05)
    view.click("Python")
    view.click("Docker")

    pending = asyncio.create_task(view.set_filter("language"))
    await asyncio.sleep(0.01)
    view.click("TypeScript")

    assert await pending == ["Python"]
    assert store.active_skills == ["Python", "TypeScript"]
    assert store.highlighted_experiences == related_experience_ids(["Python", "TypeScript"])


@pytest.mark.asyncio
async def test_second_filter_switch_supersedes_pending_restore(store: HighlightStore):
    view = SkillSelectionView(store, settle_delay=0.05)
    view.click("Python")
    view.click("Docker")

    first = asyncio.create_task(view.set_filter("language"))
    await asyncio.sleep(0.01)
    second = await view.set_filter(None)

    assert await first == []
    assert second == ["Python", "Docker"]
    assert store.active_skills == ["Python", "Docker"]
    assert view.filter is None
