"""Tests for terminal helpers: truncation, colors, tables, rendering and logging."""

import io
import logging

import pytest

from scout.ui import (
    CONTROL,
    ColorizingStreamHandler,
    Frame,
    TerminalRenderer,
    color_sgr,
    format_table,
    init_logger,
    paint,
    strip_ansi,
    truncate_from_end,
)


class TestTruncateFromEnd:
    @pytest.mark.parametrize("text, width, expected", [
        ("abcd", 5, "abcd"),
        ("abcd", 4, "abcd"),
        ("", 4, ""),
        ("abcd", 0, ""),
        ("abcd", 1, "."),
        ("ab", 1, "."),
        ("abcd", 2, ".."),
        ("abcd", 3, "..."),
        ("abcde", 4, "...e"),
        ("the quick brown", 8, "...brown"),
    ])
    def test_keeps_tail(self, text, width, expected):
        assert truncate_from_end(text, width) == expected


class TestColorSgr:
    def test_named(self):
        assert color_sgr("DarkRed") == "\x1b[31m"
        assert color_sgr("dark_red", background=True) == "\x1b[41m"

    def test_palette_index(self):
        assert color_sgr(236) == "\x1b[38;5;236m"

    def test_rgb(self):
        assert color_sgr((255, 69, 0)) == "\x1b[38;2;255;69;0m"
        assert color_sgr([1, 2, 3], background=True) == "\x1b[48;2;1;2;3m"

    @pytest.mark.parametrize("spec", ["mauve", 256, -1, True, (1, 2), (1, 2, 300)])
    def test_invalid(self, spec):
        with pytest.raises(ValueError):
            color_sgr(spec)

    def test_paint_resets(self):
        assert strip_ansi(paint(" g ", "White", "Blue")) == " g "


class TestFormatTable:
    def test_aligned_columns(self):
        text = format_table([["", "Google"], ["yt", "YouTube"]], ["Prefix", "Name"])
        assert text.splitlines() == [
            "Prefix  Name",
            "------  -------",
            "        Google",
            "yt      YouTube",
        ]


class TestTerminalRenderer:
    def _renderer(self, columns=40, max_lines=3):
        stream = io.StringIO()
        return TerminalRenderer(max_lines, stream=stream, columns=lambda: columns), stream

    def test_compose_pads_to_max_lines(self):
        renderer, _ = self._renderer()
        rows = renderer.compose(Frame("P", "S", "ab", suggestions=("one",)))
        assert [strip_ansi(row) for row in rows] == ["P ab_", "one", "", ""]

    def test_selected_row_is_highlighted(self):
        renderer, _ = self._renderer()
        rows = renderer.compose(Frame("P", "S", "ab", suggestions=("one", "two"), selected=1))
        assert rows[2] != "two"
        assert strip_ansi(rows[2]) == "two"
        assert rows[1] == "one"

    def test_only_max_lines_suggestions_shown(self):
        renderer, _ = self._renderer(max_lines=2)
        rows = renderer.compose(Frame("P", "S", "", suggestions=("a", "b", "c")))
        assert [strip_ansi(row) for row in rows[1:]] == ["a", "b"]

    def test_long_suggestion_truncated(self):
        renderer, _ = self._renderer(columns=10)
        rows = renderer.compose(Frame("P", "S", "", suggestions=("x" * 30 + "end",)))
        assert rows[1] == "...xxxxend"

    def test_narrow_terminal_uses_short_prompt(self):
        renderer, _ = self._renderer(columns=10)
        rows = renderer.compose(Frame("PROMPT", "S", "a" * 30))
        assert strip_ansi(rows[0]) == "S ...aaaa_"

    def test_draw_and_finish(self):
        renderer, stream = self._renderer()
        renderer.begin()
        renderer.draw(Frame("P", "S", "q"))
        renderer.finish("Opening https://example.com")
        out = stream.getvalue()
        assert out.startswith(CONTROL["hide_cursor"])
        assert "P\x1b[0m q_" in out
        assert "Opening https://example.com\r\n" in out
        assert out.endswith(CONTROL["show_cursor"])


class TestLogging:
    def test_stream_handler_uses_crlf(self):
        stream = io.StringIO()
        handler = ColorizingStreamHandler(stream=stream)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger = logging.getLogger("scout.tests.stream")
        logger.propagate = False
        logger.addHandler(handler)
        try:
            logger.warning("careful")
        finally:
            logger.removeHandler(handler)
        assert strip_ansi(stream.getvalue()) == "careful\r\n"

    def test_file_gets_debug_console_does_not(self, tmp_path):
        logfile = tmp_path / "scout.log"
        logger = init_logger("scout.tests.file", level="WARNING", logfile=str(logfile))
        try:
            assert logger.level == logging.DEBUG
            logger.debug("\x1b[31mfetching\x1b[0m")
            for handler in logger.handlers:
                handler.flush()
            assert "fetching" in logfile.read_text(encoding="utf-8")
            assert "\x1b[" not in logfile.read_text(encoding="utf-8")
            console = next(h for h in logger.handlers if isinstance(h, ColorizingStreamHandler))
            assert console.level == logging.WARNING
        finally:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)
