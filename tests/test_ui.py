import io
import logging

from shadow4d.ui import (
    ANSI,
    BANNER_LINES,
    ColorizingStreamHandler,
    PlainFormatter,
    ProgressBar,
    Terminal,
    colorize,
    format_bar,
    render_banner,
    strip_ansi,
)


def test_colorize_wraps_and_resets():
    assert colorize("hi", "red") == f"{ANSI['red']}hi{ANSI['reset']}"
    assert colorize("hi") == "hi"
    assert colorize("hi", "no-such-style") == "hi"
    assert strip_ansi(colorize("hi", "green", "bold")) == "hi"


def test_format_bar_shape():
    assert format_bar(0, 8) == "[--------]   0%"
    assert format_bar(4, 8, "pack") == "pack [####----]  50%"
    assert format_bar(8, 8) == "[########] 100%"
    # clamps out-of-range values
    assert format_bar(99, 8) == "[########] 100%"


def test_progress_bar_animation_uses_pacing(out, pacing, terminal):
    ProgressBar(terminal, label_text="artifact", total_units=36).animate(0.72)

    frames = [strip_ansi(f) for f in out.getvalue().split("\r") if f]
    assert len(frames) == 37
    assert frames[0].startswith("artifact [" + "-" * 36 + "]")
    assert frames[-1] == "artifact [" + "#" * 36 + "] 100%\n"
    assert len(pacing.requested) == 37
    assert all(abs(p - 0.02) < 1e-9 for p in pacing.requested)


def test_progress_bar_context_manager_finishes_line(out, terminal):
    with ProgressBar(terminal, total_units=10) as bar:
        bar.increment(3)
        bar.update(20)
    text = strip_ansi(out.getvalue())
    assert text.endswith("100%\n")
    assert text.count("\n") == 1


def test_typewrite_pauses_once_per_character(out, pacing):
    term = Terminal(out, pacing=pacing, char_delay=0.01)
    term.typewrite("abc", "cyan")
    assert out.getvalue() == f"{ANSI['cyan']}abc{ANSI['reset']}\n"
    assert pacing.requested == [0.01, 0.01, 0.01]


def test_typewrite_without_delay_writes_a_plain_line(out, pacing):
    term = Terminal(out, pacing=pacing, char_delay=0)
    term.typewrite("fast")
    assert out.getvalue() == "fast\n"
    assert pacing.requested == []


def test_set_title_is_skipped_off_tty(out, terminal):
    terminal.set_title("shadow4d")
    assert out.getvalue() == ""


def test_banner(out, terminal):
    render_banner(terminal)
    lines = strip_ansi(out.getvalue()).splitlines()
    assert lines[: len(BANNER_LINES)] == list(BANNER_LINES)
    assert lines[-1] == ""


def test_banner_rows_have_no_trailing_whitespace():
    assert BANNER_LINES[1].endswith("\\/ \\")
    assert all(row == row.rstrip() for row in BANNER_LINES)


def test_colorizing_handler_writes_plain_text_off_tty():
    stream = io.StringIO()
    handler = ColorizingStreamHandler(stream)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    record = logging.LogRecord("shadow4d", logging.ERROR, __file__, 1,
                               colorize("broken", "red"), None, None)
    handler.emit(record)
    assert stream.getvalue() == "[ERROR] broken\n"


def test_plain_formatter_strips_ansi():
    record = logging.LogRecord("shadow4d", logging.INFO, __file__, 1,
                               colorize("ok", "green"), None, None)
    assert PlainFormatter("%(message)s").format(record) == "ok"
