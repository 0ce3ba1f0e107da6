from __future__ import annotations

from portfolio.assistant import AssistantBridge, AssistantStrategy, build_assistant
from portfolio.connectors.engine import ConnectorEngine
from portfolio.connectors.layout import LayoutProbe
from portfolio.highlight.state import HighlightStore
from portfolio.views.skills import SkillSelectionView
from portfolio.views.timeline import ExperienceTimelineView


class PortfolioPage:
    """Wires one visitor session: shared store, both views, connectors, chat."""

    def __init__(
        self,
        probe: LayoutProbe,
        assistant: AssistantStrategy | None = None,
        **engine_options,
    ):
        self.store = HighlightStore()
        self.connectors = ConnectorEngine(self.store, probe, **engine_options)
        self.skills = SkillSelectionView(self.store)
        self.timeline = ExperienceTimelineView(self.store, on_layout_change=self.connectors.on_layout_change)
        self.chat = AssistantBridge(assistant or build_assistant(), self.store)

    def close(self) -> None:
        self.timeline.close()
        self.connectors.close()
