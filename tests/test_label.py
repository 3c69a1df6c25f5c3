import pytest

from novadesk.label import Label, set_high_contrast


@pytest.fixture(autouse=True)
def _normal_contrast():
    set_high_contrast(False)
    yield
    set_high_contrast(False)


def test_accessibility_label_defaults_to_text():
    lbl = Label(1, 2, "Device Manager")
    assert lbl.accessibility_label == "Device Manager"


def test_explicit_accessibility_label_kept():
    lbl = Label(1, 2, "Title", "Window Title")
    assert lbl.accessibility_label == "Window Title"


def test_render_normal_palette():
    out = Label(3, 4, "Hello").render()
    lines = out.split("\n")
    assert len(lines) == 3
    assert lines[0] == "\033[44;37m----\033[0m"
    assert lines[1] == "\033[44;37m| Hello |\033[0m at (3,4)"
    assert lines[2] == lines[0]


def test_render_high_contrast_palette():
    set_high_contrast(True)
    out = Label(0, 0, "X").render()
    assert "====" in out
    assert "\033[47;30m" in out
    assert "----" not in out


def test_focused_render_announces():
    lbl = Label(0, 0, "Text", "Spoken", focused=True)
    lines = lbl.render().split("\n")
    assert lines[-1] == "[ScreenReader] Focused: Spoken"
    assert "\033[7m" in lines[0]


def test_unfocused_render_is_silent():
    out = Label(0, 0, "Text").render()
    assert "[ScreenReader]" not in out