from chartkit.defaults import (
    DEFAULT_ANNOTATION_PADDING,
    DEFAULT_BACKGROUND_PADDING,
)


def test_background_padding_resolves_own_values():
    assert DEFAULT_BACKGROUND_PADDING.get_top(99) == 5
    assert DEFAULT_BACKGROUND_PADDING.get_left(99) == 5
    assert DEFAULT_BACKGROUND_PADDING.get_right(99) == 5
    assert DEFAULT_BACKGROUND_PADDING.get_bottom(99) == 5


def test_annotation_padding_is_not_zero():
    assert not DEFAULT_ANNOTATION_PADDING.is_zero()
    assert DEFAULT_ANNOTATION_PADDING.equals(DEFAULT_BACKGROUND_PADDING)


def test_background_padding_has_no_extent():
    assert DEFAULT_BACKGROUND_PADDING.width() == 0
    assert DEFAULT_BACKGROUND_PADDING.height() == 0


def test_annotation_padding_shift():
    shifted = DEFAULT_ANNOTATION_PADDING.shift(1, 2)
    assert shifted.get_top(0) == 7
    assert shifted.get_left(0) == 6
    assert shifted.get_right(0) == 6
    assert shifted.get_bottom(0) == 7