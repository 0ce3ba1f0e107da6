import pytest

from portfolio.connectors.geometry import (
    Point,
    Rect,
    connection_slot,
    get_connection_point,
    marker_frame,
    route_circuit,
    route_curve,
    stable_hash,
    stagger_delay,
)
from portfolio.resume.data import EXPERIENCES


def test_stable_hash_matches_32bit_polynomial():
    assert stable_hash("") == 0
    assert stable_hash("a") == 97
    assert stable_hash("ab") == 97 * 31 + 98
    # wraps into signed 32-bit range
    long_value = stable_hash("Post-quantum Encryption-visyfy" * 4)
    assert -(2 ** 31) <= long_value < 2 ** 31


def test_connection_point_is_deterministic():
    card = Rect(left=100, top=800, width=600, height=240)
    points = {get_connection_point("Python", "vivint", card) for _ in range(20)}

    assert len(points) == 1
    point = points.pop()
    assert point.y == 800
    assert 100 < point.x < 700


def test_connection_point_lands_on_an_even_slot():
    card = Rect(left=0, top=0, width=600, height=100)
    slot = connection_slot("Docker", "prior", 5)
    point = get_connection_point("Docker", "prior", card, slots=5)

    assert point.x == pytest.approx(600 * (slot + 1) / 6)


def test_connection_points_spread_across_a_card():
    card = Rect(left=0, top=0, width=600, height=100)
    for experience in EXPERIENCES:
        slots = {connection_slot(skill, experience.id) for skill in experience.skills}
        assert len(slots) >= 2, experience.id
        assert len({get_connection_point(s, experience.id, card).x for s in experience.skills}) == len(slots)


def test_circuit_route_has_four_points_with_diagonal():
    start = Point(100, 100)
    end = Point(300, 600)
    geometry = route_circuit(start, end)

    assert geometry.kind == "circuit"
    assert len(geometry.points) == 4
    first, elbow, landing, last = geometry.points
    assert (first, last) == (start, end)
    assert elbow.x == start.x
    assert landing.x == end.x
    # 45 degrees: vertical run equals horizontal run
    assert landing.y - elbow.y == pytest.approx(abs(end.x - start.x))
    assert geometry.d.startswith("M 100.00 100.00 L")


def test_circuit_route_handles_leftward_offset():
    geometry = route_circuit(Point(500, 0), Point(300, 600))
    elbow, landing = geometry.points[1], geometry.points[2]
    assert landing.y - elbow.y == pytest.approx(200)


def test_circuit_route_falls_back_when_too_shallow():
    start = Point(100, 100)
    end = Point(500, 150)
    geometry = route_circuit(start, end)

    assert geometry.kind == "fallback"
    assert len(geometry.points) == 3
    assert geometry.points[1].x == start.x
    assert geometry.points[-1] == end


def test_circuit_route_falls_back_for_tiny_offset():
    geometry = route_circuit(Point(100, 100), Point(102, 900))
    assert geometry.kind == "fallback"
    assert len(geometry.points) == 3


def test_routes_are_deterministic():
    start, end = Point(40.5, 12.25), Point(610, 980)
    assert route_circuit(start, end) == route_circuit(start, end)
    assert route_curve(start, end) == route_curve(start, end)


def test_curve_route_starts_and_ends_on_endpoints():
    geometry = route_curve(Point(0, 0), Point(200, 400))

    assert geometry.kind == "curve"
    assert geometry.points[0] == Point(0, 0)
    assert geometry.points[-1] == Point(200, 400)
    assert " C " in geometry.d and " S " in geometry.d


def test_stagger_delay_is_capped():
    assert stagger_delay(0, 0.1, 1.0) == 0.0
    assert stagger_delay(3, 0.1, 1.0) == 0.3
    assert stagger_delay(40, 0.1, 1.0) == 1.0


def test_marker_fades_in_and_is_absorbed():
    assert marker_frame(0.0) == (1.0, 0.0)
    assert marker_frame(0.5) == (1.0, 1.0)
    scale, opacity = marker_frame(0.95)
    assert 0.0 < scale < 1.0 and 0.0 < opacity < 1.0
    assert marker_frame(1.0) == (0.0, 0.0)
