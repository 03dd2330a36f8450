# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================

"""
Tracks which list is open while paragraphs stream through the HTML converter.

At most one list is open at a time. A list item whose type or nesting level
differs from the open list closes it and opens a new one.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Dict, Optional

from doc_import.run_styles import css_length
from shared.blog_doc import GlyphType, ListDefinition, ListLevel, ListType

ORDERED_LIST_TAG = "ol"
UNORDERED_LIST_TAG = "ul"

GLYPH_STYLES = {
    GlyphType.DECIMAL: "decimal",
    GlyphType.ALPHA: "lower-alpha",
    GlyphType.UPPER_ALPHA: "upper-alpha",
    GlyphType.ROMAN: "lower-roman",
    GlyphType.UPPER_ROMAN: "upper-roman",
}

SYMBOL_STYLES = {
    "●": "disc",
    "•": "disc",
    "○": "circle",
    "■": "square",
}

DEFAULT_BULLET_STYLE = "disc"


def list_type_for(level: ListLevel) -> ListType:
    if level.glyph_type == GlyphType.DECIMAL:
        return ListType.ORDERED
    return ListType.UNORDERED


def bullet_style_for(level: ListLevel) -> str:
    """Returns the CSS `list-style-type` value for a list level."""
    if level.glyph_type in GLYPH_STYLES:
        return GLYPH_STYLES[level.glyph_type]
    symbol = (level.glyph_symbol or "").strip()
    if not symbol:
        return DEFAULT_BULLET_STYLE
    return SYMBOL_STYLES.get(symbol, f"'{symbol}'")


def close_tag_for(list_type: ListType) -> str:
    tag = ORDERED_LIST_TAG if list_type == ListType.ORDERED else UNORDERED_LIST_TAG
    return f"</{tag}>"


def open_tag_for(list_type: ListType, bullet_style: str, indent: str) -> str:
    style = html.escape(f"list-style-type:{bullet_style}; margin-left:{indent}", quote=True)
    if list_type == ListType.ORDERED:
        return f'<{ORDERED_LIST_TAG} type="1" style="{style}">'
    return f'<{UNORDERED_LIST_TAG} style="{style}">'


@dataclass
class ListRunState:
    open_type: Optional[ListType] = None
    open_nesting_level: int = -1

    @property
    def is_open(self) -> bool:
        return self.open_type is not None


@dataclass(frozen=True)
class ListItemTags:
    tags: str
    list_type: ListType


class ListStateTracker:
    """Owns the list state of a single conversion run."""

    def __init__(self):
        self.state = ListRunState()
        self._flushed = False

    def _close_open_list(self) -> str:
        if not self.state.is_open:
            return ""
        tag = close_tag_for(self.state.open_type)
        self.state = ListRunState()
        return tag

    def on_list_item(
        self,
        list_id: str,
        nesting_level: int,
        lists: Dict[str, ListDefinition],
        indent: float | None = None,
    ) -> ListItemTags:
        """
        Returns the tags to emit before a list item's runs, ending in `<li>`.

        The caller emits `</li>` after the runs.
        """
        definition = lists.get(list_id) or ListDefinition()
        level = definition.level(nesting_level)
        list_type = list_type_for(level)

        tags = ""
        if (
            self.state.open_type != list_type
            or self.state.open_nesting_level != nesting_level
        ):
            tags += self._close_open_list()
            tags += open_tag_for(list_type, bullet_style_for(level), css_length(indent))
            self.state = ListRunState(open_type=list_type, open_nesting_level=nesting_level)
        return ListItemTags(tags=tags + "<li>", list_type=list_type)

    def on_non_list_paragraph(self) -> str:
        return self._close_open_list()

    def flush(self) -> str:
        """Closes any list still open at the end of the document. Call once."""
        if self._flushed:
            raise RuntimeError("ListStateTracker.flush() called twice")
        self._flushed = True
        return self._close_open_list()
