#!/usr/bin/env python3
# scout/engines/defaults.py
from __future__ import annotations

"""
Built-in engine table, used on first run and whenever the config is unusable.
"""

from scout.engines.engine_types import EngineDef, PromptStyle
from scout.engines.registry import EngineRegistry

_GOOGLE_SUGGEST = "https://www.google.com/complete/search?client=chrome&q=%s"
_REDDIT_ORANGE = (255, 69, 0)

DEFAULT_ENGINES: tuple[EngineDef, ...] = (
    EngineDef(
        id="",
        display_name="Google",
        suggestion_url_template=_GOOGLE_SUGGEST,
        search_url_template="https://www.google.com/search?q=%s",
        prompt=PromptStyle(icon=" g ", icon_fg="White", icon_bg="Blue", text=" Google "),
    ),
    EngineDef(
        id="ddg",
        display_name="DuckDuckGo",
        suggestion_url_template="https://duckduckgo.com/ac/?q=%s&type=list",
        search_url_template="https://duckduckgo.com/?q=%s",
        prompt=PromptStyle(icon=" ♞ ", icon_fg="White", icon_bg=(222, 88, 51), text=" DuckDuckGo "),
    ),
    EngineDef(
        id="g",
        display_name="Google (I'm Feeling Lucky)",
        suggestion_url_template=_GOOGLE_SUGGEST,
        search_url_template="https://www.google.com/search?btnI&q=%s",
        prompt=PromptStyle(icon=" g ", icon_fg="White", icon_bg="Blue", text=" I'm Feeling Lucky "),
    ),
    EngineDef(
        id="red",
        display_name="Reddit",
        suggestion_url_template=_GOOGLE_SUGGEST,
        search_url_template="https://www.google.com/search?q=site:reddit.com+%s",
        prompt=PromptStyle(icon=" ⬬ ", icon_fg="White", icon_bg=_REDDIT_ORANGE, text=" Reddit "),
    ),
    EngineDef(
        id="wkt",
        display_name="Wiktionary",
        suggestion_url_template=(
            "https://en.wiktionary.org/w/api.php?action=opensearch&search=%s"
            "&limit=15&namespace=0&format=json"),
        search_url_template=(
            "https://www.wiktionary.org/search-redirect.php?family=wiktionary"
            "&language=en&search=%s&go=Go"),
        prompt=PromptStyle(icon="['w]", icon_fg="Black", icon_bg="White", text=" Wiktionary "),
    ),
    EngineDef(
        id="w",
        display_name="Wikipedia",
        suggestion_url_template=(
            "https://en.wikipedia.org/w/api.php?action=opensearch&search=%s"
            "&limit=15&namespace=0&format=json"),
        search_url_template=(
            "https://www.wikipedia.org/search-redirect.php?family=wikipedia"
            "&language=en&search=%s&go=Go"),
        prompt=PromptStyle(icon=" W ", icon_fg="Black", icon_bg="White", text=" Wikipedia "),
    ),
    EngineDef(
        id="yt",
        display_name="YouTube",
        suggestion_url_template="http://suggestqueries.google.com/complete/search?client=firefox&ds=yt&q=%s",
        search_url_template="https://www.youtube.com/results?q=%s",
        prompt=PromptStyle(icon=" ▶ ", icon_fg="White", icon_bg="Red", text=" YouTube "),
    ),
    EngineDef(
        id="r",
        display_name="Subreddit",
        suggestion_url_template="https://us-central1-subreddit-suggestions.cloudfunctions.net/suggest?query=%s",
        search_url_template="https://www.reddit.com/r/%s",
        space_becomes="",  # subreddit names have no spaces
        prompt=PromptStyle(icon=" ⬬ ", icon_fg="White", icon_bg=_REDDIT_ORANGE, text=" Subreddit "),
    ),
)


def default_registry() -> EngineRegistry:
    return EngineRegistry(DEFAULT_ENGINES)
