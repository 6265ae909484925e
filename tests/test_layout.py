import pytest

from elements import NoParentError, UIContainer
from layout import DockBottomLayout, MarginLayout


def test_horizontal_margins_shrink_width_by_their_sum():
    parent = UIContainer(0, 0, 300, 200)
    child = UIContainer(0, 0, 1, 1)
    MarginLayout.install(child, margin_left=3, margin_right=3)
    parent.add(child)
    assert child.width == 300 - 6
    assert child.bounds == (3, 0, 297, 200)


def test_margin_layout_needs_a_parent():
    child = UIContainer(1, 2, 3, 4)
    MarginLayout.install(child, margin_left=3)
    with pytest.raises(NoParentError):
        child.layout()
    assert child.bounds == (1, 2, 3, 4)


def test_explicit_edges_override_parent_extent():
    parent = UIContainer(0, 0, 300, 200)
    child = UIContainer(0, 0, 1, 1)
    MarginLayout.install(child, left=10, top=0, right=0, bottom=50,
                         margin_left=2, margin_top=5, margin_bottom=1)
    parent.add(child)
    # an explicit zero is a value, not a missing edge
    assert child.bounds == (12, 5, 0, 49)


def test_install_wraps_the_previous_strategy(counting_layout):
    parent = UIContainer(0, 0, 100, 100)
    child = UIContainer(0, 0, 1, 1)
    inner = counting_layout()
    child.layout_strategy = inner
    strategy = MarginLayout.install(child, margin_top=4)
    assert child.layout_strategy is strategy
    assert strategy.wrapped is inner

    parent.add(child)
    assert inner.calls == 1
    assert child.top == 4


def test_stacked_margin_layouts_let_the_outer_one_win():
    parent = UIContainer(0, 0, 100, 100)
    child = UIContainer(0, 0, 1, 1)
    MarginLayout.install(child, margin_left=1)
    MarginLayout.install(child, margin_left=7)
    parent.add(child)
    assert child.left == 7


def test_layout_stays_dirty_until_bounds_settle():
    parent = UIContainer(0, 0, 100, 100)
    child = UIContainer(0, 0, 1, 1)
    MarginLayout.install(child, margin_left=5)
    parent.add(child)
    assert child.bounds == (5, 0, 100, 100)
    assert child.is_dirty

    child.layout()
    assert child.is_dirty is False


def test_grandchildren_follow_a_resized_ancestor(painter):
    top = UIContainer(0, 0, 100, 100)
    mid = UIContainer(0, 0, 1, 1)
    leaf = UIContainer(0, 0, 1, 1)
    MarginLayout.install(mid, margin_left=5, margin_right=5)
    MarginLayout.install(leaf, margin_left=5, margin_right=5)
    top.add(mid)
    mid.add(leaf)
    assert leaf.bounds == (5, 0, 85, 100)

    top.right = 200
    top.draw(painter)
    assert mid.bounds == (5, 0, 195, 100)
    assert leaf.bounds == (5, 0, 185, 100)

    top.draw(painter)
    assert not (top.is_dirty or mid.is_dirty or leaf.is_dirty)


def test_children_follow_a_resized_parent_on_next_draw(painter):
    parent = UIContainer(0, 0, 100, 100)
    child = UIContainer(0, 0, 1, 1)
    MarginLayout.install(child, margin_left=5, margin_top=5, margin_right=5, margin_bottom=5)
    parent.add(child)
    assert child.bounds == (5, 5, 95, 95)

    parent.right = 200
    parent.draw(painter)
    assert child.bounds == (5, 5, 195, 95)


def test_removed_child_keeps_its_bounds():
    parent = UIContainer(0, 0, 100, 100)
    child = UIContainer(0, 0, 1, 1)
    MarginLayout.install(child, margin_left=5)
    parent.add(child)
    parent.remove(child)
    assert child.bounds == (5, 0, 100, 100)
    assert child.is_dirty


def test_dock_bottom_pins_height_to_parent_bottom():
    parent = UIContainer(0, 0, 800, 600)
    bar = UIContainer(0, 0, 10, 10)
    bar.layout_strategy = DockBottomLayout(MarginLayout(), 29)
    parent.add(bar)
    assert bar.bounds == (0, 571, 800, 600)
