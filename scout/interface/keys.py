#!/usr/bin/env python3
# scout/interface/keys.py
from __future__ import annotations

"""
Logical actions and the keybinding table.

Key notation (config side, vim-like, case-insensitive inside <>):
    a           the character itself
    <C-w>       ctrl+w            -> 'c-w'
    <M-x>/<A-x> meta/alt+x        -> 'm-x'
    <F5>        function key      -> 'f5'
    <CR>/<Enter>, <Tab>, <BackTab>, <Esc>, <BS>, <Up>, <Down>, <Left>,
    <Right>, <Home>, <End>, <PageUp>, <PageDown>, <Del>, <Insert>, <Null>

Internally keys are prompt_toolkit key names ('c-m', 'escape', 's-tab', ...)
so a KeyPress can be looked up directly. Meta combos are not a prompt_toolkit
key; the reader folds Escape+char into 'm-<char>'.
"""

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from prompt_toolkit.keys import Keys

from scout.errors import ConfigError


class BindableAction(str, Enum):
    SELECT_NEXT = "SelectNext"
    SELECT_PREV = "SelectPrev"
    DELETE_WORD = "DeleteWord"
    DELETE_CHAR = "DeleteChar"
    CLEAR_INPUT = "ClearInput"
    EXIT = "Exit"
    SUBMIT = "Submit"

    @classmethod
    def from_name(cls, name: str) -> "BindableAction":
        for action in cls:
            if action.value == name:
                return action
        raise ConfigError(
            f"Unknown action '{name}'. Valid actions: {', '.join(a.value for a in cls)}")


@dataclass(frozen=True, slots=True)
class InsertChar:
    """Type one printable character (the fallback for unbound keys)."""
    char: str


Action = Union[BindableAction, InsertChar]

# ---------- notation <-> key names ----------

_SPECIAL_KEYS: dict[str, str] = {
    "bs": Keys.ControlH.value,
    "backspace": Keys.ControlH.value,
    "cr": Keys.ControlM.value,
    "enter": Keys.ControlM.value,
    "tab": Keys.ControlI.value,
    "backtab": Keys.BackTab.value,
    "esc": Keys.Escape.value,
    "up": Keys.Up.value,
    "down": Keys.Down.value,
    "left": Keys.Left.value,
    "right": Keys.Right.value,
    "home": Keys.Home.value,
    "end": Keys.End.value,
    "pageup": Keys.PageUp.value,
    "pagedown": Keys.PageDown.value,
    "del": Keys.Delete.value,
    "delete": Keys.Delete.value,
    "insert": Keys.Insert.value,
    "null": Keys.ControlAt.value,
}

# Preferred spelling when writing a key name back out.
_KEY_NOTATION: dict[str, str] = {
    Keys.ControlH.value: "<BS>",
    Keys.ControlM.value: "<CR>",
    Keys.ControlI.value: "<Tab>",
    Keys.BackTab.value: "<BackTab>",
    Keys.Escape.value: "<Esc>",
    Keys.Up.value: "<Up>",
    Keys.Down.value: "<Down>",
    Keys.Left.value: "<Left>",
    Keys.Right.value: "<Right>",
    Keys.Home.value: "<Home>",
    Keys.End.value: "<End>",
    Keys.PageUp.value: "<PageUp>",
    Keys.PageDown.value: "<PageDown>",
    Keys.Delete.value: "<Del>",
    Keys.Insert.value: "<Insert>",
    Keys.ControlAt.value: "<Null>",
}

_FUNCTION_KEY_RE = re.compile(r"f(\d{1,2})")


def parse_key(notation: str) -> str:
    """Translate config notation into a key name; raises ConfigError."""
    if notation == "":
        return Keys.ControlAt.value
    if len(notation) == 1:
        return notation
    if not (notation.startswith("<") and notation.endswith(">")):
        raise ConfigError(f"Unrecognized keymap format: {notation}")

    inside = notation[1:-1]
    lowered = inside.lower()

    fkey = _FUNCTION_KEY_RE.fullmatch(lowered)
    if fkey:
        number = int(fkey.group(1))
        if not 1 <= number <= 24:
            raise ConfigError(f"Could not parse '{notation}' as a function key (e.g. <F12>)")
        return f"f{number}"

    if lowered in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[lowered]

    modifier, dash, key = inside.partition("-")
    if dash and len(key) == 1:
        modifier = modifier.lower()
        if modifier == "c":
            return f"c-{key.lower()}"
        if modifier in ("m", "a"):
            return f"m-{key}"
        raise ConfigError(f"Unrecognized control char in '{notation}'")
    if dash:
        raise ConfigError(f"Could not parse '{notation}' as a key combo (e.g. <C-x> or <M-x>)")
    raise ConfigError(f"Unrecognized special key: {notation}")


def format_key(key_name: str) -> str:
    """Inverse of parse_key (canonical spelling)."""
    if key_name in _KEY_NOTATION:
        return _KEY_NOTATION[key_name]
    if len(key_name) == 1:
        return key_name
    if _FUNCTION_KEY_RE.fullmatch(key_name):
        return f"<F{key_name[1:]}>"
    if key_name.startswith("c-"):
        return f"<C-{key_name[2:]}>"
    if key_name.startswith("m-"):
        return f"<M-{key_name[2:]}>"
    return f"<{key_name}>"


# ---------- keybinding table ----------

class KeyBindings:
    """Immutable key name -> action table."""

    __slots__ = ("_table",)

    def __init__(self, table: Mapping[str, BindableAction]) -> None:
        self._table = MappingProxyType(dict(table))

    @classmethod
    def from_config(cls, raw: Mapping[str, str]) -> "KeyBindings":
        """Build from {notation: action name}; raises ConfigError."""
        table: dict[str, BindableAction] = {}
        for notation, action_name in raw.items():
            if not isinstance(action_name, str):
                raise ConfigError(f"Keybind '{notation}' must map to an action name")
            table[parse_key(notation)] = BindableAction.from_name(action_name)
        return cls(table)

    def to_config(self) -> dict[str, str]:
        return {format_key(k): action.value for k, action in self._table.items()}

    def action_for(self, key_name: str) -> Optional[Action]:
        """Bound action, else InsertChar for printable characters, else None."""
        action = self._table.get(key_name)
        if action is not None:
            return action
        if len(key_name) == 1 and key_name.isprintable():
            return InsertChar(key_name)
        return None

    def keys_for(self, action: BindableAction) -> list[str]:
        return [k for k, a in self._table.items() if a is action]

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"KeyBindings({self.to_config()!r})"


DEFAULT_KEYBINDS: dict[str, str] = {
    "<C-c>": "Exit",
    "<Esc>": "Exit",
    "<CR>": "Submit",
    "<C-w>": "DeleteWord",
    "<C-u>": "ClearInput",
    "<C-n>": "SelectNext",
    "<Tab>": "SelectNext",
    "<Down>": "SelectNext",
    "<C-p>": "SelectPrev",
    "<BackTab>": "SelectPrev",
    "<Up>": "SelectPrev",
    "<BS>": "DeleteChar",
}


def default_keybindings() -> KeyBindings:
    return KeyBindings.from_config(DEFAULT_KEYBINDS)
