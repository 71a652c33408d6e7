"""Shared fixtures: a small engine registry and fakes for the loop's collaborators."""

from typing import Callable, Optional

import pytest

from scout.engines import EngineDef, EngineRegistry, PromptStyle
from scout.suggest import JsonPathAdapter, SuggestionSet
from scout.ui import Frame


GOOGLE = EngineDef(
    id="",
    display_name="Google",
    search_url_template="https://www.google.com/search?q=%s",
    suggestion_url_template="https://www.google.com/complete/search?client=chrome&q=%s",
    prompt=PromptStyle(icon=" g ", text=" Google "),
)
YOUTUBE = EngineDef(
    id="yt",
    display_name="YouTube",
    search_url_template="https://www.youtube.com/results?search_query=%s",
    suggestion_url_template="https://suggestqueries.google.com/complete/search?client=firefox&ds=yt&q=%s",
    prompt=PromptStyle(icon=" ▶ ", icon_bg="Red", text=" YouTube "),
)
SUBREDDIT = EngineDef(
    id="r",
    display_name="Subreddit",
    search_url_template="https://www.reddit.com/r/%s",
    suggestion_url_template="https://www.reddit.com/api/subreddit_autocomplete.json?query=%s",
    space_becomes="",
    suggestion_adapter=JsonPathAdapter("names"),
)
NO_SUGGEST = EngineDef(
    id="ns",
    display_name="No Suggestions",
    search_url_template="https://example.com/?q=%s",
)


@pytest.fixture
def registry() -> EngineRegistry:
    return EngineRegistry([GOOGLE, YOUTUBE, SUBREDDIT, NO_SUGGEST])


class FakeFetcher:
    """Records dispatches; tests complete them by hand via `resolve`/`fail`."""

    def __init__(self) -> None:
        self.dispatches: list[tuple[EngineDef, str, Callable, Callable]] = []

    def dispatch(self, engine, term, on_result, on_error):
        self.dispatches.append((engine, term, on_result, on_error))
        return None

    @property
    def terms(self) -> list[str]:
        return [term for _, term, _, _ in self.dispatches]

    def resolve(self, index: int, *candidates: str) -> None:
        _, term, on_result, _ = self.dispatches[index]
        on_result(SuggestionSet(term=term, candidates=tuple(candidates)))

    def fail(self, index: int, error: Exception) -> None:
        self.dispatches[index][3](error)


class FakeRenderer:
    def __init__(self) -> None:
        self.frames: list[Frame] = []
        self.began = False
        self.finished: list[Optional[str]] = []

    def begin(self) -> None:
        self.began = True

    def draw(self, frame: Frame) -> None:
        self.frames.append(frame)

    def finish(self, message: Optional[str] = None) -> None:
        self.finished.append(message)


class FakeOpener:
    def __init__(self) -> None:
        self.urls: list[str] = []

    def __call__(self, url: str) -> None:
        self.urls.append(url)


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def opener() -> FakeOpener:
    return FakeOpener()
