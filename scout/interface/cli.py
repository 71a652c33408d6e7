#!/usr/bin/env python3
# scout/interface/cli.py
from __future__ import annotations

"""
Interactive session frontend.

- KeyReader: background thread turning raw prompt_toolkit key presses into
  logical actions via the keybinding table. Owns no shared state; it only
  posts messages.
- run_session: wires reader, fetcher, renderer and orchestrator together for
  one prompt and returns how it ended.
"""

import logging
import os
import queue
import select
import threading
import time
from typing import Callable, Iterable, Optional

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from scout.engines import EngineRegistry
from scout.interface.handler import KeyMessage, LoopOutcome, Message, Orchestrator
from scout.interface.keys import Action, BindableAction, KeyBindings
from scout.interface.opener import open_url
from scout.suggest import SuggestionFetcher
from scout.ui import TerminalRenderer

_TERMINAL_ACTIONS = {BindableAction.SUBMIT, BindableAction.EXIT}


def key_names(presses: Iterable[KeyPress]) -> list[str]:
    """
    Turn key presses into key names.

    Terminals send alt+x as ESC followed by x in the same burst; fold that
    into 'm-x'. A lone Escape stays 'escape'.
    """
    names: list[str] = []
    escape_pending = False
    for press in presses:
        name = press.key.value if isinstance(press.key, Keys) else str(press.key)
        if escape_pending:
            escape_pending = False
            if len(name) == 1:
                names.append(f"m-{name}")
                continue
            names.append(Keys.Escape.value)
        if name == Keys.Escape.value:
            escape_pending = True
            continue
        names.append(name)
    if escape_pending:
        names.append(Keys.Escape.value)
    return names


class KeyReader:
    """
    Reads raw keys on a daemon thread and posts logical actions.

    Use as a context manager: entering puts the terminal in raw mode and
    starts the thread; leaving stops the thread and restores the terminal.
    The thread stops by itself after posting Submit or Exit.
    """

    def __init__(
        self,
        keybindings: KeyBindings,
        post: Callable[[Action], None],
        *,
        input_: Optional[Input] = None,
        poll_interval: float = 0.05,
    ) -> None:
        self.keybindings = keybindings
        self._post = post
        self._input = input_ if input_ is not None else create_input()
        self._poll_interval = poll_interval
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._raw_mode = None

    def setup(self) -> None:
        self._raw_mode = self._input.raw_mode()
        self._raw_mode.__enter__()
        self._thread = threading.Thread(target=self._run, name="key-reader", daemon=True)
        self._thread.start()

    def teardown(self) -> None:
        self._stop_event.set()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=1.0)
        if self._raw_mode is not None:
            self._raw_mode.__exit__(None, None, None)
            self._raw_mode = None

    def __enter__(self) -> "KeyReader":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()

    # ---------------- Thread body ----------------

    def _run(self) -> None:
        while not self._stop_event.is_set():
            for name in self._read_names():
                action = self.keybindings.action_for(name)
                if action is None:
                    continue
                self._post(action)
                if action in _TERMINAL_ACTIONS:
                    return

    def _read_names(self) -> list[str]:
        if self._wait_for_input():
            return key_names(self._input.read_keys())
        # idle: release a lone Escape the parser is holding back
        return key_names(self._input.flush_keys())

    def _wait_for_input(self) -> bool:
        if os.name == "nt":
            time.sleep(self._poll_interval)
            return True
        ready, _, _ = select.select([self._input.fileno()], [], [], self._poll_interval)
        return bool(ready)


def run_session(
    registry: EngineRegistry,
    keybindings: KeyBindings,
    *,
    timeout_seconds: float = 5.0,
    max_suggestions: int = 15,
    opener: Callable[[str], None] = open_url,
    logger: Optional[logging.Logger] = None,
) -> LoopOutcome:
    """Run one interactive prompt until the user submits or exits."""
    inbox: "queue.Queue[Message]" = queue.Queue()
    orchestrator = Orchestrator(
        registry,
        fetcher=SuggestionFetcher(timeout_seconds=timeout_seconds, logger=logger),
        renderer=TerminalRenderer(max_lines=max_suggestions),
        opener=opener,
        inbox=inbox,
        max_suggestions=max_suggestions,
        logger=logger,
    )
    with KeyReader(keybindings, lambda action: inbox.put(KeyMessage(action))):
        return orchestrator.run()
