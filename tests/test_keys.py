"""Tests for key notation, the keybinding table and the key reader."""

import contextlib

import pytest
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from scout.errors import ConfigError
from scout.interface import (
    DEFAULT_KEYBINDS,
    BindableAction,
    InsertChar,
    KeyBindings,
    KeyReader,
    default_keybindings,
    format_key,
    key_names,
    parse_key,
)


class TestParseKey:
    @pytest.mark.parametrize("notation, expected", [
        ("a", "a"),
        ("?", "?"),
        ("", "c-@"),
        ("<C-w>", "c-w"),
        ("<c-W>", "c-w"),
        ("<M-x>", "m-x"),
        ("<A-x>", "m-x"),
        ("<F5>", "f5"),
        ("<f12>", "f12"),
        ("<CR>", "c-m"),
        ("<Enter>", "c-m"),
        ("<Tab>", "c-i"),
        ("<BackTab>", "s-tab"),
        ("<Esc>", "escape"),
        ("<BS>", "c-h"),
        ("<Up>", "up"),
        ("<Null>", "c-@"),
    ])
    def test_valid(self, notation, expected):
        assert parse_key(notation) == expected

    @pytest.mark.parametrize("notation", ["ab", "<Foo>", "<F25>", "<F0>", "<X-a>", "<C-ab>", "<C->"])
    def test_invalid(self, notation):
        with pytest.raises(ConfigError):
            parse_key(notation)

    @pytest.mark.parametrize("notation", ["a", "<C-w>", "<M-x>", "<F5>", "<CR>", "<BS>", "<Esc>", "<BackTab>"])
    def test_format_is_canonical(self, notation):
        assert format_key(parse_key(notation)) == notation


class TestKeyBindings:
    def test_defaults(self):
        bindings = default_keybindings()
        assert len(bindings) == len(DEFAULT_KEYBINDS)
        assert bindings.action_for("c-m") is BindableAction.SUBMIT
        assert bindings.action_for("c-u") is BindableAction.CLEAR_INPUT
        assert sorted(bindings.keys_for(BindableAction.EXIT)) == ["c-c", "escape"]

    def test_unbound_printable_inserts(self):
        bindings = default_keybindings()
        assert bindings.action_for("a") == InsertChar("a")
        assert bindings.action_for(" ") == InsertChar(" ")

    def test_unbound_special_key_is_ignored(self):
        assert default_keybindings().action_for("c-z") is None
        assert default_keybindings().action_for("f7") is None

    def test_bound_printable_overrides_insert(self):
        bindings = KeyBindings.from_config({"j": "SelectNext"})
        assert bindings.action_for("j") is BindableAction.SELECT_NEXT

    def test_unknown_action(self):
        with pytest.raises(ConfigError, match="Unknown action"):
            KeyBindings.from_config({"<C-x>": "Explode"})

    def test_action_must_be_string(self):
        with pytest.raises(ConfigError):
            KeyBindings.from_config({"<C-x>": 3})

    def test_to_config_round_trips(self):
        bindings = default_keybindings()
        assert KeyBindings.from_config(bindings.to_config()).to_config() == bindings.to_config()


class TestKeyNames:
    def test_plain_keys(self):
        presses = [KeyPress("a", "a"), KeyPress(Keys.ControlW, "\x17")]
        assert key_names(presses) == ["a", "c-w"]

    def test_escape_then_char_is_meta(self):
        assert key_names([KeyPress(Keys.Escape, "\x1b"), KeyPress("x", "x")]) == ["m-x"]

    def test_lone_escape(self):
        assert key_names([KeyPress(Keys.Escape, "\x1b")]) == ["escape"]

    def test_escape_then_special_key(self):
        presses = [KeyPress(Keys.Escape, "\x1b"), KeyPress(Keys.Up, "\x1b[A")]
        assert key_names(presses) == ["escape", "up"]

    def test_double_escape(self):
        presses = [KeyPress(Keys.Escape, "\x1b"), KeyPress(Keys.Escape, "\x1b")]
        assert key_names(presses) == ["escape", "escape"]


class FakeInput:
    """Just enough of prompt_toolkit's Input for KeyReader._run."""

    def __init__(self, batches):
        self._batches = list(batches)

    def read_keys(self):
        return self._batches.pop(0) if self._batches else []

    def flush_keys(self):
        return []

    def raw_mode(self):
        return contextlib.nullcontext()

    def fileno(self):
        return 0


class TestKeyReader:
    def test_posts_actions_until_submit(self):
        posted = []
        batches = [
            [KeyPress("h", "h"), KeyPress("i", "i")],
            [KeyPress(Keys.ControlZ, "\x1a"), KeyPress(Keys.Tab, "\t")],
            [KeyPress(Keys.ControlM, "\r"), KeyPress("z", "z")],
        ]
        reader = KeyReader(default_keybindings(), posted.append, input_=FakeInput(batches))
        reader._wait_for_input = lambda: True
        reader._run()
        assert posted == [
            InsertChar("h"),
            InsertChar("i"),
            BindableAction.SELECT_NEXT,
            BindableAction.SUBMIT,
        ]

    def test_stops_after_exit(self):
        posted = []
        reader = KeyReader(
            default_keybindings(), posted.append,
            input_=FakeInput([[KeyPress(Keys.ControlC, "\x03")]]))
        reader._wait_for_input = lambda: True
        reader._run()
        assert posted == [BindableAction.EXIT]
