import pytest

from chartkit.geometry import BOX_ZERO, Box, BoxCorners, Point, new_box


def test_box_clone():
    a = Box(top=5, left=5, right=15, bottom=15)
    b = a.clone()
    assert a.equals(b)
    assert b.equals(a)


def test_box_equals():
    a = Box(top=5, left=5, right=15, bottom=15)
    b = Box(top=10, left=10, right=30, bottom=30)
    c = Box(top=5, left=5, right=15, bottom=15)
    assert a.equals(a)
    assert a.equals(c)
    assert c.equals(a)
    assert not a.equals(b)
    assert not c.equals(b)
    assert not b.equals(a)
    assert not b.equals(c)


def test_box_is_bigger_than():
    a = Box(top=5, left=5, right=25, bottom=25)
    b = Box(top=10, left=10, right=20, bottom=20)
    c = Box(top=1, left=1, right=30, bottom=30)
    assert a.is_bigger_than(b)
    assert not a.is_bigger_than(c)
    assert c.is_bigger_than(a)


def test_box_is_smaller_than():
    a = Box(top=5, left=5, right=25, bottom=25)
    b = Box(top=10, left=10, right=20, bottom=20)
    c = Box(top=1, left=1, right=30, bottom=30)
    assert not a.is_smaller_than(b)
    assert a.is_smaller_than(c)
    assert not c.is_smaller_than(a)


def test_box_grow():
    a = Box(top=1, left=2, right=15, bottom=15)
    b = Box(top=4, left=5, right=30, bottom=35)
    c = a.grow(b)
    assert not c.equals(b)
    assert not c.equals(a)
    assert (c.top, c.left, c.right, c.bottom) == (1, 2, 30, 35)


def test_box_fit():
    a = Box(top=64, left=64, right=192, bottom=192)
    b = Box(top=16, left=16, right=256, bottom=170)
    c = Box(top=16, left=16, right=170, bottom=256)

    fab = a.fit(b)
    assert fab.left == a.left
    assert fab.right == a.right
    assert fab.top < fab.bottom
    assert fab.left < fab.right
    assert abs(b.aspect() - fab.aspect()) < 0.02

    fac = a.fit(c)
    assert fac.top == a.top
    assert fac.bottom == a.bottom
    assert abs(c.aspect() - fac.aspect()) < 0.02


def test_box_constrain():
    a = Box(top=64, left=64, right=192, bottom=192)
    b = Box(top=16, left=16, right=256, bottom=170)
    c = Box(top=16, left=16, right=170, bottom=256)

    cab = a.constrain(b)
    assert (cab.top, cab.left, cab.right, cab.bottom) == (64, 64, 192, 170)

    cac = a.constrain(c)
    assert (cac.top, cac.left, cac.right, cac.bottom) == (64, 64, 170, 192)


def test_box_outer_constrain():
    box = new_box(0, 0, 100, 100)
    canvas = new_box(5, 5, 95, 95)
    taller = new_box(-10, 5, 50, 50)

    c = canvas.outer_constrain(box, taller)
    assert (c.top, c.left, c.right, c.bottom) == (15, 5, 95, 95), str(c)

    wider = new_box(5, 5, 110, 50)
    d = canvas.outer_constrain(box, wider)
    assert (d.top, d.left, d.right, d.bottom) == (5, 5, 85, 95), str(d)


def test_box_shift():
    b = Box(top=5, left=5, right=10, bottom=10)
    shifted = b.shift(1, 2)
    assert (shifted.top, shifted.left, shifted.right, shifted.bottom) == (7, 6, 11, 12)


def test_box_center():
    b = Box(top=10, left=10, right=20, bottom=30)
    assert b.center() == (15, 20)


def test_box_corners_center():
    bc = BoxCorners(
        top_left=Point(5, 5),
        top_right=Point(15, 5),
        bottom_right=Point(15, 15),
        bottom_left=Point(5, 15),
    )
    assert bc.center() == (10, 10)


def test_box_corners_rotate():
    bc = BoxCorners(
        top_left=Point(5, 5),
        top_right=Point(15, 5),
        bottom_right=Point(15, 15),
        bottom_left=Point(5, 15),
    )
    rotated = bc.rotate(45)
    assert rotated.top_left.equals(Point(10, 3)), str(rotated)


def test_box_corners_round_trip():
    b = Box(top=5, left=7, right=25, bottom=30)
    corners = b.corners()
    assert corners.box().equals(b)
    assert corners.width() == b.width()
    assert corners.height() == b.height()
    assert corners.equals(b.corners())


def test_is_zero_and_set_marker():
    assert Box().is_zero()
    assert not BOX_ZERO.is_zero()
    assert not Box(top=1).is_zero()


def test_get_edges_with_defaults():
    unset = Box()
    assert unset.get_top(7) == 7
    assert unset.get_left() == 0
    assert BOX_ZERO.get_right(7) == 0
    assert Box(bottom=3).get_bottom(7) == 3


def test_validate_rejects_negative_edges():
    new_box(0, 0, 10, 10).validate()
    with pytest.raises(ValueError, match="left"):
        Box(left=-1).validate()
    with pytest.raises(ValueError, match="bottom"):
        Box(bottom=-1).validate()


def test_point_distance_and_equality():
    assert Point(0, 0).distance_to(Point(3, 4)) == pytest.approx(5.0)
    assert Point(1, 2).equals(Point(1, 2))
    assert not Point(1, 2).equals(Point(2, 1))


def test_string_forms():
    assert str(Box(top=1, left=2, right=3, bottom=4)) == "box(1,2,3,4)"
    assert str(Point(1, 2)) == "P{1,2}"