from __future__ import annotations

import asyncio
import dataclasses
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

from core import config
from core.state import ConnectorStyle
from portfolio.connectors.geometry import (
    CONNECTION_SLOTS,
    MARKER_ABSORB_FROM,
    MARKER_CYCLE_SEC,
    MARKER_FADE_IN,
    MARKER_START_OFFSET_SEC,
    PathGeometry,
    Point,
    Rect,
    get_connection_point,
    marker_frame,
    route_circuit,
    route_curve,
    skill_anchor,
    stagger_delay,
)
from portfolio.connectors.layout import LayoutProbe
from portfolio.highlight.matching import experience_matches
from portfolio.highlight.state import ACTIVE_SKILLS, HighlightSnapshot, HighlightStore
from portfolio.resume.data import EXPERIENCES, SKILLS
from portfolio.resume.models import DEFAULT_COLOR, Experience, Skill
from portfolio.scheduling import DebouncedExecutor, sleep_frame


logger = logging.getLogger("portfolio.connectors.engine")


def _marker_keyframes() -> list[dict]:
    frames = []
    for at in (0.0, MARKER_FADE_IN, MARKER_ABSORB_FROM, 1.0):
        scale, opacity = marker_frame(at)
        frames.append({"at": at, "scale": scale, "opacity": opacity})
    return frames


@dataclass(frozen=True)
class ConnectionPath:
    id: str
    skill: str
    experience_id: str
    color: str
    start: Point
    end: Point
    geometry: PathGeometry
    delay: float
    exiting: bool = False

    @property
    def marker_begin(self) -> float:
        return round(self.delay + MARKER_START_OFFSET_SEC, 3)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "skill": self.skill,
            "experience_id": self.experience_id,
            "color": self.color,
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "geometry": self.geometry.to_dict(),
            "delay": self.delay,
            "exiting": self.exiting,
            "marker": {
                "begin": self.marker_begin,
                "duration": MARKER_CYCLE_SEC,
                "keyframes": _marker_keyframes(),
            },
        }


def _skill_color(skill_name: str, skills: Sequence[Skill]) -> str:
    key = skill_name.lower()
    for skill in skills:
        if skill.name.lower() == key:
            return skill.color
    return DEFAULT_COLOR


def _route(style: str, start: Point, end: Point) -> PathGeometry:
    if style == ConnectorStyle.CURVE.value:
        return route_curve(start, end)
    return route_circuit(start, end)


def compute_paths(
    active_skills: Iterable[str],
    probe: LayoutProbe,
    skills: Sequence[Skill] = SKILLS,
    experiences: Sequence[Experience] = EXPERIENCES,
    style: str = ConnectorStyle.CIRCUIT.value,
    slots: int = CONNECTION_SLOTS,
    stagger_step: float = config.CONNECTOR_STAGGER_SEC,
    max_stagger: float = config.CONNECTOR_MAX_STAGGER_SEC,
) -> list[ConnectionPath]:
    """
    Measure everything first, then pair each active skill with every
    experience tagged with it. Unmeasurable targets are skipped.
    """
    names = list(active_skills)
    if not names:
        return []

    scroll = probe.scroll_offset()
    token_rects: dict[str, Rect] = {}
    for name in names:
        rect = probe.measure_skill(name)
        if rect is not None:
            token_rects[name] = rect.offset(scroll.x, scroll.y)

    card_rects: dict[str, Rect] = {}
    for experience in experiences:
        rect = probe.measure_experience(experience.id)
        if rect is not None:
            card_rects[experience.id] = rect.offset(scroll.x, scroll.y)

    paths: list[ConnectionPath] = []
    for name in names:
        token = token_rects.get(name)
        if token is None:
            continue
        color = _skill_color(name, skills)
        start = skill_anchor(token)

        for experience in experiences:
            if not experience_matches(experience, [name]):
                continue
            card = card_rects.get(experience.id)
            if card is None:
                continue
            end = get_connection_point(name, experience.id, card, slots)
            paths.append(ConnectionPath(
                id=f"{name}-{experience.id}",
                skill=name,
                experience_id=experience.id,
                color=color,
                start=start,
                end=end,
                geometry=_route(style, start, end),
                delay=stagger_delay(len(paths), stagger_step, max_stagger),
            ))

    return paths


class ConnectorEngine:
    """
    Keeps the rendered connector set in step with the active skills.

    Recomputes are debounced per trigger class (selection, resize, layout)
    and never overlap. Paths whose skill goes away linger as `exiting`
    for `exit_duration` seconds before removal.
    """

    def __init__(
        self,
        store: HighlightStore,
        probe: LayoutProbe,
        skills: Sequence[Skill] = SKILLS,
        experiences: Sequence[Experience] = EXPERIENCES,
        style: str | None = None,
        selection_delay: float = config.SELECTION_SETTLE_SEC,
        resize_delay: float = config.RESIZE_DEBOUNCE_SEC,
        layout_delay: float = config.LAYOUT_DEBOUNCE_SEC,
        exit_duration: float = config.CONNECTOR_EXIT_SEC,
        frame_delay: float = 0.0,
        on_paths: Optional[Callable[[list[ConnectionPath]], None]] = None,
    ):
        self.store = store
        self.probe = probe
        self.skills = tuple(skills)
        self.experiences = tuple(experiences)
        self.style = str(style or config.CONNECTOR_STYLE).lower()
        self.selection_delay = selection_delay
        self.resize_delay = resize_delay
        self.layout_delay = layout_delay
        self.exit_duration = exit_duration
        self.frame_delay = frame_delay
        self.on_paths = on_paths

        self.paths: list[ConnectionPath] = []
        self.passes = 0
        self.dropped = 0

        self._calculating = False
        self._selection = DebouncedExecutor("connector-selection")
        self._resize = DebouncedExecutor("connector-resize")
        self._layout = DebouncedExecutor("connector-layout")
        self._exit_timers: dict[str, asyncio.TimerHandle] = {}
        self._unsubscribe = store.subscribe(self._on_highlight_change)

    # -------------------------
    # TRIGGERS
    # -------------------------

    def _on_highlight_change(self, snapshot: HighlightSnapshot, changed: frozenset) -> None:
        if ACTIVE_SKILLS in changed:
            self._request(self._selection, self.selection_delay)

    def on_resize(self) -> None:
        self._request(self._resize, self.resize_delay)

    def on_layout_change(self) -> None:
        self._request(self._layout, self.layout_delay)

    def _request(self, executor: DebouncedExecutor, delay: float) -> None:
        try:
            executor.schedule(self.recalculate, delay)
        except RuntimeError:
            logger.debug("connector recompute skipped, no running loop | executor=%s", executor.name)

    @property
    def pending(self) -> bool:
        return self._selection.pending or self._resize.pending or self._layout.pending

    # -------------------------
    # RECOMPUTE
    # -------------------------

    async def recalculate(self) -> list[ConnectionPath] | None:
        if self._calculating:
            self.dropped += 1
            logger.debug("connector recompute dropped, pass already running")
            return None

        self._calculating = True
        try:
            await sleep_frame(self.frame_delay)
            fresh = compute_paths(
                self.store.active_skills,
                self.probe,
                skills=self.skills,
                experiences=self.experiences,
                style=self.style,
            )
            self._merge(fresh)
            self.passes += 1
            logger.debug("connector pass | live=%s exiting=%s", len(fresh), len(self.paths) - len(fresh))
            return list(self.paths)
        finally:
            self._calculating = False

    def _merge(self, fresh: list[ConnectionPath]) -> None:
        fresh_ids = {path.id for path in fresh}
        lingering: list[ConnectionPath] = []

        for old in self.paths:
            if old.id in fresh_ids:
                self._cancel_exit(old.id)
                continue
            if old.exiting:
                lingering.append(old)
                continue
            lingering.append(dataclasses.replace(old, exiting=True))
            self._schedule_exit(old.id)

        self.paths = fresh + lingering
        self._emit()

    def _schedule_exit(self, path_id: str) -> None:
        loop = asyncio.get_running_loop()
        self._cancel_exit(path_id)
        self._exit_timers[path_id] = loop.call_later(self.exit_duration, self._finish_exit, path_id)

    def _cancel_exit(self, path_id: str) -> None:
        handle = self._exit_timers.pop(path_id, None)
        if handle is not None:
            handle.cancel()

    def _finish_exit(self, path_id: str) -> None:
        self._exit_timers.pop(path_id, None)
        remaining = [p for p in self.paths if not (p.exiting and p.id == path_id)]
        if len(remaining) != len(self.paths):
            self.paths = remaining
            self._emit()

    def _emit(self) -> None:
        if self.on_paths is None:
            return
        try:
            self.on_paths(list(self.paths))
        except Exception:
            logger.exception("connector paths callback failed")

    def close(self) -> None:
        self._unsubscribe()
        for executor in (self._selection, self._resize, self._layout):
            executor.cancel()
        for path_id in list(self._exit_timers):
            self._cancel_exit(path_id)
