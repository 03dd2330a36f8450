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
Normalizes a Google Docs `documents.get` payload into the `Document` model.

Only the parts of the element tree the HTML converter understands are kept:
paragraphs with their text runs, list definitions, and embedded images.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from shared.blog_doc import (
    Alignment,
    BulletRef,
    Document,
    EmbeddedObject,
    EmbeddedObjectKind,
    GlyphType,
    ListDefinition,
    ListLevel,
    Paragraph,
    ParagraphStyle,
    Run,
    RunStyle,
)
from shared.errors import MalformedDocument

logger = logging.getLogger(__name__)

ALIGNMENTS = {
    "START": Alignment.LEFT,
    "CENTER": Alignment.CENTER,
    "END": Alignment.RIGHT,
    "JUSTIFIED": Alignment.JUSTIFY,
}

# Numbered glyphs the Docs API reports under more than one name.
GLYPH_ALIASES = {
    "ZERO_DECIMAL": GlyphType.DECIMAL,
}


def _get(data: Optional[dict], *path: str) -> Any:
    for key in path:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _magnitude(dimension: Optional[dict]) -> Optional[float]:
    value = _get(dimension, "magnitude")
    return float(value) if value is not None else None


def _to_alignment(value: Optional[str]) -> Alignment:
    return ALIGNMENTS.get(value or "START", Alignment.LEFT)


def _to_glyph_type(value: Optional[str]) -> GlyphType:
    if not value:
        return GlyphType.OTHER
    if value in GLYPH_ALIASES:
        return GLYPH_ALIASES[value]
    try:
        return GlyphType(value)
    except ValueError:
        return GlyphType.OTHER


def _to_color(text_style: dict) -> Optional[tuple[float, float, float]]:
    rgb = _get(text_style, "foregroundColor", "color", "rgbColor")
    if rgb is None:
        return None
    return (
        float(rgb.get("red", 0)),
        float(rgb.get("green", 0)),
        float(rgb.get("blue", 0)),
    )


def _to_run_style(data: Optional[dict]) -> RunStyle:
    data = data or {}
    return RunStyle(
        bold=bool(data.get("bold")),
        italic=bool(data.get("italic")),
        underline=bool(data.get("underline")),
        font_size_pt=_magnitude(data.get("fontSize")),
        color_rgb=_to_color(data),
        font_family=_get(data, "weightedFontFamily", "fontFamily"),
    )


def _to_run(text_run: Any) -> Run:
    if not isinstance(text_run, dict):
        raise MalformedDocument("Text runs must be JSON objects")
    text = text_run.get("content") or ""
    if not isinstance(text, str):
        raise MalformedDocument("Text run content must be a string")
    # Every paragraph's last run carries the paragraph terminator.
    if text.endswith("\n"):
        text = text[:-1]
    return Run(text=text, style=_to_run_style(text_run.get("textStyle")))


def _to_paragraph_style(data: Optional[dict]) -> ParagraphStyle:
    data = data or {}
    return ParagraphStyle(
        indent_start=_magnitude(data.get("indentStart")),
        indent_first_line=_magnitude(data.get("indentFirstLine")),
        alignment=_to_alignment(data.get("alignment")),
    )


def _to_bullet(data: Optional[dict]) -> Optional[BulletRef]:
    if data is None:
        return None
    return BulletRef(
        list_id=data.get("listId") or "",
        nesting_level=int(data.get("nestingLevel") or 0),
    )


def _to_paragraph(data: Any) -> Paragraph:
    if not isinstance(data, dict):
        raise MalformedDocument("Paragraphs must be JSON objects")
    elements = data.get("elements") or []
    if not isinstance(elements, list):
        raise MalformedDocument("Paragraph elements must be a list")

    runs = []
    for element in elements:
        if not isinstance(element, dict):
            raise MalformedDocument("Paragraph elements must be JSON objects")
        if "textRun" in element:
            runs.append(_to_run(element["textRun"]))
    return Paragraph(
        style=_to_paragraph_style(data.get("paragraphStyle")),
        bullet=_to_bullet(data.get("bullet")),
        runs=runs,
    )


def _to_list_level(data: dict) -> ListLevel:
    return ListLevel(
        glyph_type=_to_glyph_type(data.get("glyphType")),
        glyph_symbol=data.get("glyphSymbol") or None,
        glyph_format=data.get("glyphFormat") or None,
    )


def _to_list_definition(data: dict) -> ListDefinition:
    levels = _get(data, "listProperties", "nestingLevels") or []
    return ListDefinition(
        nesting_levels={index: _to_list_level(level) for index, level in enumerate(levels)}
    )


def _image_source(embedded_object: Optional[dict]) -> Optional[str]:
    image_properties = _get(embedded_object, "imageProperties") or {}
    return image_properties.get("contentUri") or image_properties.get("sourceUri")


def _to_embedded_objects(
    data: Optional[dict], properties_key: str, kind: EmbeddedObjectKind
) -> Dict[str, EmbeddedObject]:
    objects: Dict[str, EmbeddedObject] = {}
    for object_id, raw in (data or {}).items():
        source_url = _image_source(_get(raw, properties_key, "embeddedObject"))
        if not source_url:
            logger.debug("Skipping %s object %s without an image source", kind, object_id)
            continue
        objects[object_id] = EmbeddedObject(id=object_id, source_url=source_url, kind=kind)
    return objects


def normalize(raw_document: Any) -> Document:
    """
    Converts a raw Docs API document into a `Document`.

    Absent lists, inline objects and positioned objects are treated as empty.

    Raises:
        MalformedDocument: If `body.content` is missing or is not a list, or
            a paragraph, paragraph element or text run is not an object.
    """
    if not isinstance(raw_document, dict):
        raise MalformedDocument("Document payload must be a JSON object")
    content = _get(raw_document, "body", "content")
    if not isinstance(content, list):
        raise MalformedDocument("Document is missing its body content")

    blocks = []
    for element in content:
        if not isinstance(element, dict):
            raise MalformedDocument("Body content elements must be JSON objects")
        if "paragraph" in element:
            blocks.append(_to_paragraph(element["paragraph"]))

    return Document(
        blocks=blocks,
        lists={
            list_id: _to_list_definition(definition)
            for list_id, definition in (raw_document.get("lists") or {}).items()
        },
        inline_objects=_to_embedded_objects(
            raw_document.get("inlineObjects"),
            "inlineObjectProperties",
            EmbeddedObjectKind.INLINE,
        ),
        positioned_objects=_to_embedded_objects(
            raw_document.get("positionedObjects"),
            "positionedObjectProperties",
            EmbeddedObjectKind.POSITIONED,
        ),
        title=raw_document.get("title"),
        document_id=raw_document.get("documentId"),
    )
