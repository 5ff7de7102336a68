import math

import pytest

from highway_graph.domain.models import EARTH_RADIUS_MILES, GeoPoint, path_length

POINTS = [
    GeoPoint(42.0, -73.0),
    GeoPoint(41.5, -73.5),
    GeoPoint(-33.8688, 151.2093),
    GeoPoint(51.5074, -0.1278),
    GeoPoint(0.0, 0.0),
    GeoPoint(89.9, 179.9),
]


@pytest.mark.parametrize("point", POINTS)
def test_distance_to_self_is_zero(point):
    assert point.distance_to(point) == 0.0


def test_distance_is_symmetric():
    for p in POINTS:
        for q in POINTS:
            assert p.distance_to(q) == q.distance_to(p)


def test_one_degree_of_latitude():
    d = GeoPoint(0.0, 10.0).distance_to(GeoPoint(1.0, 10.0))
    assert d == pytest.approx(EARTH_RADIUS_MILES * math.pi / 180, rel=1e-9)


def test_antipodal_points_are_half_a_circumference_apart():
    d = GeoPoint(0.0, 0.0).distance_to(GeoPoint(0.0, 180.0))
    assert d == pytest.approx(EARTH_RADIUS_MILES * math.pi, rel=1e-9)


def test_points_within_tolerance_are_equal():
    a = GeoPoint(42.0, -73.0)
    assert a.approx_equals(GeoPoint(42.000009, -73.000009))
    assert a.distance_to(GeoPoint(42.000009, -73.000009)) == 0.0


def test_points_just_outside_tolerance_are_not_equal():
    a = GeoPoint(42.0, -73.0)
    assert not a.approx_equals(GeoPoint(42.00002, -73.0))
    assert not a.approx_equals(GeoPoint(42.0, -73.00002))


def test_nearly_coincident_points_give_finite_distance():
    base = GeoPoint(43.123456, -75.654321)
    for offset in (1.1e-5, 2e-5, 5e-5, 1e-4):
        d = base.distance_to(GeoPoint(base.latitude + offset, base.longitude - offset))
        assert math.isfinite(d)
        assert d >= 0.0


def test_rounding_above_one_is_clamped():
    # Cosine of this pair rounds to 1.0000000000000002
    a = GeoPoint(88.63389401546573, -95.8292565618932)
    b = GeoPoint(88.63389401546573, -95.8292455618932)
    assert not a.approx_equals(b)

    d = a.distance_to(b)

    assert math.isfinite(d)
    assert 0.0 <= d < 0.001


def test_rounding_below_minus_one_is_clamped():
    a = GeoPoint(7.051905824060626, -25.008129573221623)
    b = GeoPoint(-7.051905824060626, 154.99187042677838)

    d = a.distance_to(b)

    assert math.isfinite(d)
    assert d == pytest.approx(EARTH_RADIUS_MILES * math.pi, rel=1e-6)


def test_str_matches_report_format():
    assert str(GeoPoint(42.5, -73.0)) == "(42.5,-73.0)"


def test_path_length_without_shape_points_is_direct_distance():
    a, b = GeoPoint(42.0, -73.0), GeoPoint(43.0, -72.5)
    assert path_length(a, (), b) == a.distance_to(b)


def test_path_length_sums_each_leg():
    a, mid, b = GeoPoint(42.0, -73.0), GeoPoint(42.25, -73.1), GeoPoint(42.5, -73.0)
    assert path_length(a, [mid], b) == a.distance_to(mid) + mid.distance_to(b)
    assert path_length(a, [mid], b) > a.distance_to(b)
