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

from __future__ import annotations

import html
from typing import List, Optional

from shared.blog_doc import Run


def css_number(value: float) -> str:
    """Formats a number for CSS, dropping the decimal point for integral values."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{value:g}"


def css_length(value: Optional[float]) -> str:
    return f"{css_number(value or 0)}px"


def color_channel(value: Optional[float]) -> int:
    """Scales a 0-1 color channel to 0-255, rounding halves up."""
    scaled = int((value or 0) * 255 + 0.5)
    return min(255, max(0, scaled))


def css_color(rgb: tuple[float, float, float]) -> str:
    red, green, blue = (color_channel(channel) for channel in rgb)
    return f"rgb({red},{green},{blue})"


def style_declarations(run: Run) -> List[str]:
    style = run.style
    declarations = []
    if style.font_size_pt is not None:
        declarations.append(f"font-size:{css_length(style.font_size_pt)}")
    if style.color_rgb is not None:
        declarations.append(f"color:{css_color(style.color_rgb)}")
    if style.font_family:
        declarations.append(f"font-family:{style.font_family}")
    return declarations


def render(run: Run) -> str:
    """
    Renders one text run as inline HTML.

    Whitespace-only runs render as nothing. Emphasis nests bold innermost,
    then italic, then underline; size, color and font family go on an
    enclosing span.
    """
    if not run.text.strip():
        return ""

    text = html.escape(run.text, quote=False)
    if run.style.bold:
        text = f"<strong>{text}</strong>"
    if run.style.italic:
        text = f"<em>{text}</em>"
    if run.style.underline:
        text = f"<u>{text}</u>"

    declarations = style_declarations(run)
    if declarations:
        style = html.escape("; ".join(declarations), quote=True)
        text = f'<span style="{style}">{text}</span>'
    return text
