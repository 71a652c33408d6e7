#!/usr/bin/env python3
# scout/engines/engine_types.py
from __future__ import annotations

"""
Engine data structures.

This module defines:
- PromptStyle: colors and text for the prompt badge of an engine.
- EngineDef: a named search/suggestion URL template pair with styling.
- MatchResult: which engine an input line targets and with what term.
"""

from dataclasses import dataclass, field
from urllib.parse import quote, quote_plus

from scout.suggest.adapters import OpenSearchAdapter, SuggestionAdapter
from scout.ui.utils import ColorSpec, paint

# Placeholder substituted with the (encoded) search term in URL templates.
TERM_PLACEHOLDER = "%s"


@dataclass(frozen=True, slots=True)
class PromptStyle:
    """
    Prompt badge for an engine: an icon block followed by a text block.

    Colors use any form accepted by `scout.ui.color_sgr`.
    """
    icon: str = " > "
    icon_fg: ColorSpec = "White"
    icon_bg: ColorSpec = "Blue"
    text: str = ""
    text_fg: ColorSpec = "Black"
    text_bg: ColorSpec = "White"

    def render(self) -> str:
        return paint(self.icon, self.icon_fg, self.icon_bg) + paint(self.text, self.text_fg, self.text_bg)

    def render_short(self) -> str:
        """Icon only, for terminals too narrow for the full prompt."""
        return paint(self.icon, self.icon_fg, self.icon_bg)


@dataclass(frozen=True, slots=True)
class EngineDef:
    """
    One search engine.

    Important fields:
        id: Prefix token that selects this engine ("" for the default engine).
        display_name: Human-readable name.
        search_url_template: URL opened on submit; '%s' is the term.
        suggestion_url_template: Autocomplete endpoint; '' disables suggestions.
        space_becomes: What a space turns into in the search URL ('+', '_', '').
        prompt: Badge shown in front of the input line.
        suggestion_adapter: Decoder for the suggestion endpoint's response.
    """

    id: str
    display_name: str
    search_url_template: str
    suggestion_url_template: str = ""
    space_becomes: str = "+"
    prompt: PromptStyle = field(default_factory=PromptStyle)
    suggestion_adapter: SuggestionAdapter = field(default_factory=OpenSearchAdapter)

    @property
    def is_default(self) -> bool:
        return self.id == ""

    def suggestion_url(self, term: str) -> str:
        """Suggestion endpoint for `term` (percent-encoded, spaces as '+')."""
        return self.suggestion_url_template.replace(TERM_PLACEHOLDER, quote_plus(term))

    def search_url(self, term: str) -> str:
        """Search URL for `term`; words are encoded and joined with `space_becomes`."""
        encoded = self.space_becomes.join(quote(word, safe="") for word in term.split(" "))
        return self.search_url_template.replace(TERM_PLACEHOLDER, encoded)


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Result of prefix matching an input line; recomputed on every keystroke."""
    engine: EngineDef
    matched_prefix: str
    search_term: str
