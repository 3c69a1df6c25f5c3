import pytest

from novadesk.window_manager import (
    DEFAULT_TRANSPARENCY,
    MAX_DESKTOPS,
    MAX_TITLE_LENGTH,
    MAX_WINDOWS_PER_DESKTOP,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SnapType,
    WindowManager,
)


@pytest.fixture
def wm():
    return WindowManager()


def test_ids_start_at_one_and_newest_first(wm):
    a = wm.create_window("A", 0, 0, 10, 10)
    b = wm.create_window("B", 0, 0, 10, 10)
    assert (a.id, b.id) == (1, 2)
    assert [w.id for w in wm.current.windows] == [b.id, a.id]


def test_create_defaults(wm):
    first = wm.create_window("Terminal", 100, 100, 400, 300)
    second = wm.create_window("Files", 200, 150, 500, 400)
    assert first.transparency == DEFAULT_TRANSPARENCY
    assert (first.z_order, second.z_order) == (0, 1)
    assert second.z_depth > first.z_depth
    assert first.visible and not first.focused


def test_desktop_full_returns_none(wm):
    for i in range(MAX_WINDOWS_PER_DESKTOP):
        assert wm.create_window(f"w{i}", 0, 0, 1, 1) is not None
    assert wm.create_window("extra", 0, 0, 1, 1) is None
    assert wm.current.window_count == MAX_WINDOWS_PER_DESKTOP


def test_title_truncated(wm):
    win = wm.create_window("x" * 200, 0, 0, 1, 1)
    assert len(win.title) == MAX_TITLE_LENGTH


def test_destroy_window(wm):
    a = wm.create_window("A", 0, 0, 10, 10)
    b = wm.create_window("B", 0, 0, 10, 10)
    wm.destroy_window(a.id)
    assert wm.find_window(a.id) is None
    assert wm.current.windows == [b]
    wm.destroy_window(999)
    assert wm.current.windows == [b]


def test_move_and_resize(wm):
    win = wm.create_window("A", 0, 0, 10, 10)
    wm.move_window(win.id, 33, 44)
    wm.resize_window(win.id, 55, 66)
    assert (win.x, win.y, win.width, win.height) == (33, 44, 55, 66)


def test_move_unknown_is_ignored(wm):
    win = wm.create_window("A", 5, 6, 10, 10)
    wm.move_window(win.id + 1, 1, 1)
    assert (win.x, win.y) == (5, 6)


def test_focus_is_exclusive(wm):
    a = wm.create_window("A", 0, 0, 10, 10)
    b = wm.create_window("B", 0, 0, 10, 10)
    wm.focus_window(a.id)
    wm.focus_window(b.id)
    assert [w.focused for w in wm.current.windows] == [True, False]
    wm.focus_window(999)
    assert not any(w.focused for w in wm.current.windows)


def test_snap_left_and_right(wm):
    a = wm.create_window("A", 100, 100, 400, 300)
    wm.snap_window(a.id, SnapType.LEFT)
    assert (a.x, a.width) == (0, 400 // 2)
    b = wm.create_window("B", 100, 100, 400, 300)
    wm.snap_window(b.id, SnapType.RIGHT)
    assert b.x == SCREEN_WIDTH // 2


def test_snap_top_and_bottom(wm):
    a = wm.create_window("A", 100, 100, 400, 300)
    wm.snap_window(a.id, SnapType.TOP)
    assert (a.y, a.height) == (0, 300 // 2)
    wm.snap_window(a.id, SnapType.BOTTOM)
    assert a.y == SCREEN_HEIGHT // 2


def test_snap_fullscreen(wm):
    a = wm.create_window("A", 100, 100, 400, 300)
    wm.snap_window(a.id, SnapType.FULLSCREEN)
    assert (a.x, a.y, a.width, a.height) == (0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)


def test_snap_unknown_type_changes_nothing(wm):
    a = wm.create_window("A", 100, 100, 400, 300)
    wm.snap_window(a.id, 42)
    assert (a.x, a.y, a.width, a.height) == (100, 100, 400, 300)


@pytest.mark.parametrize("count", [1, 2, 3, 5, 9, 10])
def test_tile_windows_fit_screen_without_overlap(wm, count):
    for i in range(count):
        wm.create_window(f"w{i}", 7, 7, 3, 3)
    wm.tile_windows()
    windows = wm.current.windows
    for w in windows:
        assert 0 <= w.x and w.x + w.width <= SCREEN_WIDTH
        assert 0 <= w.y and w.y + w.height <= SCREEN_HEIGHT
    assert len({(w.x, w.y) for w in windows}) == count
    assert len({(w.width, w.height) for w in windows}) == 1


def test_tile_single_window_fills_screen(wm):
    w = wm.create_window("A", 7, 7, 3, 3)
    wm.tile_windows()
    assert (w.x, w.y, w.width, w.height) == (0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)


def test_switch_desktop_range(wm):
    wm.switch_desktop(3)
    assert wm.current_desktop == 3
    wm.switch_desktop(MAX_DESKTOPS)
    wm.switch_desktop(-1)
    assert wm.current_desktop == 3


def test_desktops_hold_separate_windows(wm):
    a = wm.create_window("A", 0, 0, 1, 1)
    wm.switch_desktop(1)
    assert wm.find_window(a.id) is None
    b = wm.create_window("B", 0, 0, 1, 1)
    assert b.id == a.id + 1
    wm.switch_desktop(0)
    assert wm.find_window(a.id) is a


def test_swipe_gestures(wm):
    wm.handle_gesture(0, 1, 0)
    assert wm.current_desktop == 1
    wm.handle_gesture(0, -1, 0)
    wm.handle_gesture(0, -1, 0)
    assert wm.current_desktop == 0
    wm.handle_gesture(1, 1, 0)
    assert wm.current_desktop == 0


def test_render_lists_windows(wm):
    a = wm.create_window("Terminal", 100, 100, 400, 300)
    wm.create_window("Web Browser", 300, 200, 600, 500)
    wm.focus_window(a.id)
    text = wm.render()
    lines = text.splitlines()
    assert len(lines) == 3
    assert "Terminal" in lines[2] and "[FOCUSED]" in lines[2]
    assert "Web Browser" in lines[1] and "[FOCUSED]" not in lines[1]
    assert "alpha=0.92" in text