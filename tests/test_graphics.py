from novadesk.graphics import draw_circle, draw_line, draw_rect, gui_draw


def test_draw_line():
    assert draw_line(1, 2, 3, 4) == "[Graphics] Draw line from (1,2) to (3,4)"


def test_draw_rect():
    assert draw_rect(5, 6, 70, 80) == "[Graphics] Draw rect at (5,6) size 70x80"


def test_draw_circle(capsys):
    result = draw_circle(10, 20, 30)
    assert result == "[Graphics] Draw circle at (10,20) radius 30"
    assert capsys.readouterr().out == result + "\n"


def test_gui_draw_steps(capsys):
    steps = gui_draw()
    assert steps == [
        "[GUI] Drawing desktop and windows...",
        "[GUI] Desktop drawn.",
        "[GUI] Windows drawn.",
    ]
    assert capsys.readouterr().out.splitlines() == steps