from __future__ import annotations

import pytest

from lightning.core.history import DEFAULT_WINDOW, Direction, RecentFiles


def test_record_prepends_displaced_path():
    h = RecentFiles()
    h.record("a.txt", "b.txt")
    h.record("b.txt", "c.txt")
    assert h.paths == ["b.txt", "a.txt"]


def test_record_is_noop_for_same_path():
    h = RecentFiles()
    h.record("a.txt", "a.txt")
    assert h.paths == []


def test_record_does_not_duplicate_or_reorder():
    h = RecentFiles(["a.txt", "b.txt"])
    h.record("b.txt", "c.txt")
    assert h.paths == ["a.txt", "b.txt"]


def test_record_skips_untitled():
    h = RecentFiles()
    h.record("", "a.txt")
    assert len(h) == 0


def test_constructor_drops_duplicates_and_empties():
    h = RecentFiles(["a", "", "b", "a"])
    assert h.paths == ["a", "b"]


def test_window_limits_visible_entries():
    h = RecentFiles([f"dir/f{i}.txt" for i in range(25)])
    assert len(h) == 25
    assert h.visible_count == DEFAULT_WINDOW
    assert h.visible() == [f"dir/f{i}.txt" for i in range(10)]


def test_display_names_are_file_names():
    h = RecentFiles(["/home/u/notes/todo.md", "relative/plan.txt", "bare"])
    assert h.display_names() == ["todo.md", "plan.txt", "bare"]


def test_navigate_on_empty_history_is_noop():
    h = RecentFiles()
    assert h.navigate(Direction.DOWN) is False
    assert h.navigate(Direction.UP) is False
    assert h.selected == 0
    assert h.selected_path() is None


@pytest.mark.parametrize("size", [1, 2, 7, 10, 13])
@pytest.mark.parametrize("direction", [Direction.UP, Direction.DOWN])
def test_full_cycle_returns_to_start(size, direction):
    h = RecentFiles([f"f{i}" for i in range(size)])
    h.selected = min(size, DEFAULT_WINDOW) // 2
    start = h.selected
    for _ in range(h.visible_count):
        h.navigate(direction)
    assert h.selected == start


def test_navigate_wraps_both_ways():
    h = RecentFiles(["a", "b", "c"])
    h.navigate(Direction.UP)
    assert h.selected_path() == "c"
    h.navigate(Direction.DOWN)
    assert h.selected_path() == "a"


def test_discard_clamps_cursor():
    h = RecentFiles(["a", "b", "c"])
    h.selected = 2
    h.discard("c")
    assert h.selected == 1
    h.discard("a")
    h.discard("b")
    assert h.selected == 0
    assert h.selected_path() is None


def test_custom_window():
    h = RecentFiles(["a", "b", "c", "d"], window=2)
    h.navigate(Direction.DOWN)
    h.navigate(Direction.DOWN)
    assert h.selected == 0
    assert h.visible() == ["a", "b"]


def test_window_must_be_positive():
    with pytest.raises(ValueError):
        RecentFiles(window=0)


def test_record_keeps_cursor_on_the_same_entry():
    h = RecentFiles(["a", "b", "c"])
    h.selected = 1
    h.record("z", "new")
    assert h.paths == ["z", "a", "b", "c"]
    assert h.selected_path() == "b"


def test_record_with_cursor_at_top_stays_at_top():
    h = RecentFiles(["a", "b"])
    h.record("z", "new")
    assert h.selected == 0
    assert h.selected_path() == "z"


def test_record_cursor_at_window_edge_stays_inside():
    h = RecentFiles(["a", "b", "c"], window=3)
    h.selected = 2
    h.record("z", "new")
    assert h.selected == 2
    assert h.selected < h.visible_count


def test_discard_above_cursor_keeps_cursor_on_entry():
    h = RecentFiles(["a", "b", "c"])
    h.selected = 2
    h.discard("a")
    assert h.selected_path() == "c"
