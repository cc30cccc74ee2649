import numpy as np
import pytest

from geometry import Point, Rectangle, as_point, as_rectangle


def test_contains_is_closed():
    rect = Rectangle(0, 0, 10, 5)

    assert rect.contains(Point(0, 0))
    assert rect.contains(Point(10, 5)), "Max corner must be inside"
    assert rect.contains(Point(3, 5))
    assert not rect.contains(Point(10.0001, 2))
    assert not rect.contains(Point(-1, 2))
    assert not rect.contains(None)


def test_intersects_counts_touching_edges():
    a = Rectangle(0, 0, 10, 10)

    assert a.intersects(Rectangle(5, 5, 10, 10))
    assert a.intersects(Rectangle(10, 0, 5, 5)), "Touching edge must count"
    assert a.intersects(Rectangle(10, 10, 0, 0)), "Touching corner must count"
    assert a.intersects(Rectangle(2, 2, 1, 1))
    assert not a.intersects(Rectangle(11, 0, 5, 5))
    assert not a.intersects(None)


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Rectangle(0, 0, -1, 5)
    with pytest.raises(ValueError):
        Rectangle(0, 0, 5, float("nan"))


def test_from_corners_normalises():
    rect = Rectangle.from_corners(10, 2, 4, 8)
    assert rect == Rectangle(4, 2, 6, 6)
    assert rect.corners() == (4, 2, 10, 8)
    assert rect.center == Point(7, 5)


def test_quadrants_tile_parent():
    rect = Rectangle(1, 2, 8, 4)
    ne, nw, sw, se = rect.quadrants()

    assert nw == Rectangle(1, 2, 4, 2)
    assert ne == Rectangle(5, 2, 4, 2)
    assert sw == Rectangle(1, 4, 4, 2)
    assert se == Rectangle(5, 4, 4, 2)
    assert sum(q.area for q in (ne, nw, sw, se)) == rect.area


def test_point_is_immutable_and_hashable():
    p = Point(1.5, 2.5)
    assert tuple(p) == (1.5, 2.5)
    assert p == Point(1.5, 2.5)
    assert len({p, Point(1.5, 2.5)}) == 1

    with pytest.raises(AttributeError):
        p.x = 3


def test_as_point_coercion():
    assert as_point(None) is None
    assert as_point((1, 2)) == Point(1.0, 2.0)
    assert as_point(np.array([3.0, 4.0])) == Point(3.0, 4.0)

    p = Point(5, 6)
    assert as_point(p) is p

    with pytest.raises(ValueError):
        as_point((1, 2, 3))
    with pytest.raises(ValueError):
        as_point(7)


def test_as_rectangle_coercion():
    assert as_rectangle(None) is None
    assert as_rectangle((0, 0, 2, 3)) == Rectangle(0.0, 0.0, 2.0, 3.0)

    with pytest.raises(ValueError):
        as_rectangle((0, 0, 2))
    with pytest.raises(ValueError):
        as_rectangle((0, 0, -2, 3))


if __name__ == "__main__":
    test_contains_is_closed()
    test_intersects_counts_touching_edges()
    test_invalid_size_raises()
    test_from_corners_normalises()
    test_quadrants_tile_parent()
    test_point_is_immutable_and_hashable()
    test_as_point_coercion()
    test_as_rectangle_coercion()
    print("All test Passed (geometry)")
