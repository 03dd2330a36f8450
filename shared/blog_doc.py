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

from enum import StrEnum
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


class Alignment(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class GlyphType(StrEnum):
    DECIMAL = "DECIMAL"
    ALPHA = "ALPHA"
    UPPER_ALPHA = "UPPER_ALPHA"
    ROMAN = "ROMAN"
    UPPER_ROMAN = "UPPER_ROMAN"
    OTHER = "OTHER"


class ListType(StrEnum):
    ORDERED = "ordered"
    UNORDERED = "unordered"


class EmbeddedObjectKind(StrEnum):
    POSITIONED = "positioned"
    INLINE = "inline"


@dataclass(frozen=True)
class RunStyle:
    bold: bool = False
    italic: bool = False
    underline: bool = False
    font_size_pt: Optional[float] = None
    # Channels are fractions in [0, 1], as delivered by the document API.
    color_rgb: Optional[Tuple[float, float, float]] = None
    font_family: Optional[str] = None


@dataclass(frozen=True)
class Run:
    text: str
    style: RunStyle = field(default_factory=RunStyle)


@dataclass(frozen=True)
class ParagraphStyle:
    indent_start: Optional[float] = None
    indent_first_line: Optional[float] = None
    alignment: Alignment = Alignment.LEFT

    @property
    def effective_indent(self) -> float:
        """First-line indent if non-zero, else the block indent, else zero."""
        if self.indent_first_line:
            return self.indent_first_line
        return self.indent_start or 0


@dataclass(frozen=True)
class BulletRef:
    list_id: str
    nesting_level: int = 0


@dataclass(frozen=True)
class Paragraph:
    style: ParagraphStyle = field(default_factory=ParagraphStyle)
    bullet: Optional[BulletRef] = None
    runs: List[Run] = field(default_factory=list)


@dataclass(frozen=True)
class ListLevel:
    glyph_type: GlyphType = GlyphType.OTHER
    glyph_symbol: Optional[str] = None
    glyph_format: Optional[str] = None


@dataclass(frozen=True)
class ListDefinition:
    nesting_levels: Dict[int, ListLevel] = field(default_factory=dict)

    def level(self, nesting_level: int) -> ListLevel:
        return self.nesting_levels.get(nesting_level, ListLevel())


@dataclass(frozen=True)
class EmbeddedObject:
    id: str
    source_url: str
    kind: EmbeddedObjectKind = EmbeddedObjectKind.INLINE


@dataclass(frozen=True)
class Document:
    """Normalized form of an external document, consumed by the HTML converter."""

    blocks: List[Paragraph] = field(default_factory=list)
    lists: Dict[str, ListDefinition] = field(default_factory=dict)
    inline_objects: Dict[str, EmbeddedObject] = field(default_factory=dict)
    positioned_objects: Dict[str, EmbeddedObject] = field(default_factory=dict)
    title: Optional[str] = None
    document_id: Optional[str] = None
