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

"""Builders for Google Docs `documents.get` payloads, used by tests and scripts."""

from typing import List, Optional


def text_run(
    content: str,
    bold: bool = False,
    italic: bool = False,
    underline: bool = False,
    font_size: Optional[float] = None,
    rgb: Optional[dict] = None,
    font_family: Optional[str] = None,
) -> dict:
    text_style = {}
    if bold:
        text_style["bold"] = True
    if italic:
        text_style["italic"] = True
    if underline:
        text_style["underline"] = True
    if font_size is not None:
        text_style["fontSize"] = {"magnitude": font_size, "unit": "PT"}
    if rgb is not None:
        text_style["foregroundColor"] = {"color": {"rgbColor": rgb}}
    if font_family:
        text_style["weightedFontFamily"] = {"fontFamily": font_family, "weight": 400}
    return {"textRun": {"content": content, "textStyle": text_style}}


def paragraph(
    *elements: dict,
    list_id: Optional[str] = None,
    nesting_level: Optional[int] = None,
    alignment: Optional[str] = None,
    indent_start: Optional[float] = None,
    indent_first_line: Optional[float] = None,
) -> dict:
    style = {"namedStyleType": "NORMAL_TEXT"}
    if alignment:
        style["alignment"] = alignment
    if indent_start is not None:
        style["indentStart"] = {"magnitude": indent_start, "unit": "PT"}
    if indent_first_line is not None:
        style["indentFirstLine"] = {"magnitude": indent_first_line, "unit": "PT"}
    body = {"elements": list(elements), "paragraphStyle": style}
    if list_id is not None:
        bullet = {"listId": list_id}
        if nesting_level is not None:
            bullet["nestingLevel"] = nesting_level
        body["bullet"] = bullet
    return {"paragraph": body}


def list_definition(*levels: dict) -> dict:
    return {"listProperties": {"nestingLevels": list(levels)}}


def list_level(glyph_type: Optional[str] = None, glyph_symbol: Optional[str] = None) -> dict:
    level = {"glyphFormat": "%0."}
    if glyph_type:
        level["glyphType"] = glyph_type
    if glyph_symbol:
        level["glyphSymbol"] = glyph_symbol
    return level


def image_object(url: str, positioned: bool = False) -> dict:
    key = "positionedObjectProperties" if positioned else "inlineObjectProperties"
    return {key: {"embeddedObject": {"imageProperties": {"contentUri": url}}}}


def raw_document(
    content: List[dict],
    lists: Optional[dict] = None,
    inline_objects: Optional[dict] = None,
    positioned_objects: Optional[dict] = None,
    title: str = "Test document",
    document_id: str = "doc-1",
) -> dict:
    document = {
        "documentId": document_id,
        "title": title,
        "body": {"content": [{"sectionBreak": {}}] + list(content)},
    }
    if lists is not None:
        document["lists"] = lists
    if inline_objects is not None:
        document["inlineObjects"] = inline_objects
    if positioned_objects is not None:
        document["positionedObjects"] = positioned_objects
    return document
