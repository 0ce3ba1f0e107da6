from __future__ import annotations

from dataclasses import dataclass


CONNECTION_SLOTS = 5
CIRCUIT_LEAD_PX = 30.0
CIRCUIT_TAIL_PX = 20.0
CIRCUIT_MIN_OFFSET_PX = 4.0

MARKER_CYCLE_SEC = 2.0
MARKER_START_OFFSET_SEC = 0.5
MARKER_FADE_IN = 0.15
MARKER_ABSORB_FROM = 0.85


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2.0

    def offset(self, dx: float, dy: float) -> "Rect":
        return Rect(self.left + dx, self.top + dy, self.width, self.height)


@dataclass(frozen=True)
class PathGeometry:
    kind: str  # circuit | fallback | curve
    points: tuple[Point, ...]
    d: str

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "points": [p.to_dict() for p in self.points],
            "d": self.d,
        }


def stable_hash(value: str) -> int:
    """
    32-bit signed polynomial string hash (h * 31 + code). Changing this
    changes every rendered connector layout.
    """
    h = 0
    for ch in str(value or ""):
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def connection_slot(skill_name: str, experience_id: str, slots: int = CONNECTION_SLOTS) -> int:
    slots = max(1, int(slots))
    return abs(stable_hash(f"{skill_name}-{experience_id}")) % slots


def get_connection_point(
    skill_name: str,
    experience_id: str,
    card: Rect,
    slots: int = CONNECTION_SLOTS,
) -> Point:
    """One of `slots` evenly spaced points along the card's top edge."""
    slots = max(1, int(slots))
    slot = connection_slot(skill_name, experience_id, slots)
    x = card.left + card.width * (slot + 1) / (slots + 1)
    return Point(x, card.top)


def skill_anchor(token: Rect) -> Point:
    return Point(token.center_x, token.bottom)


def _fmt(value: float) -> str:
    return f"{round(float(value), 2):.2f}"


def polyline_d(points: tuple[Point, ...]) -> str:
    if not points:
        return ""
    head, *rest = points
    parts = [f"M {_fmt(head.x)} {_fmt(head.y)}"]
    parts.extend(f"L {_fmt(p.x)} {_fmt(p.y)}" for p in rest)
    return " ".join(parts)


def route_circuit(
    start: Point,
    end: Point,
    lead: float = CIRCUIT_LEAD_PX,
    tail: float = CIRCUIT_TAIL_PX,
    min_offset: float = CIRCUIT_MIN_OFFSET_PX,
) -> PathGeometry:
    """
    Down, 45-degree diagonal across the whole horizontal offset, down into
    the card. Falls back to down-then-direct when there is no room.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    span = abs(dx)

    if span < min_offset or dy < lead + span + tail:
        drop = min(lead, max(dy, 0.0) / 2.0)
        points = (start, Point(start.x, start.y + drop), end)
        return PathGeometry(kind="fallback", points=points, d=polyline_d(points))

    elbow = Point(start.x, start.y + lead)
    landing = Point(end.x, elbow.y + span)
    points = (start, elbow, landing, end)
    return PathGeometry(kind="circuit", points=points, d=polyline_d(points))


def route_curve(start: Point, end: Point) -> PathGeometry:
    mid_y = start.y + (end.y - start.y) * 0.5
    control_offset = (end.x - start.x) * 0.3

    c1 = Point(start.x, start.y + 50)
    c2 = Point(start.x + control_offset, mid_y - 50)
    mid = Point(start.x + (end.x - start.x) * 0.5, mid_y)
    c3 = Point(end.x - control_offset, end.y - 100)

    d = (
        f"M {_fmt(start.x)} {_fmt(start.y)} "
        f"C {_fmt(c1.x)} {_fmt(c1.y)}, {_fmt(c2.x)} {_fmt(c2.y)}, {_fmt(mid.x)} {_fmt(mid.y)} "
        f"S {_fmt(c3.x)} {_fmt(c3.y)}, {_fmt(end.x)} {_fmt(end.y)}"
    )
    return PathGeometry(kind="curve", points=(start, c1, c2, mid, c3, end), d=d)


def stagger_delay(index: int, step: float, cap: float) -> float:
    return round(min(max(0, int(index)) * float(step), float(cap)), 3)


def marker_frame(
    progress: float,
    fade_in: float = MARKER_FADE_IN,
    absorb_from: float = MARKER_ABSORB_FROM,
) -> tuple[float, float]:
    """
    (scale, opacity) of the travelling marker at a point in its cycle.
    It fades in at departure and shrinks away on arrival.
    """
    p = min(max(float(progress), 0.0), 1.0)
    if p >= absorb_from:
        remaining = 1.0 - (p - absorb_from) / max(1e-9, 1.0 - absorb_from)
        return round(remaining, 4), round(remaining, 4)
    opacity = 1.0 if fade_in <= 0 else min(1.0, p / fade_in)
    return 1.0, round(opacity, 4)
