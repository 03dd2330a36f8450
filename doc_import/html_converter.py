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
Converts a normalized `Document` into blog-ready HTML.

The conversion is a single forward pass:
  1. Embedded images (positioned, then inline) are copied into object
     storage and emitted as a leading run of <img> tags.
  2. Paragraphs are emitted in order as <p> elements or list items, with
     list open/close transitions handled by `ListStateTracker`.
  3. Any list still open at the end of the document is closed.

The HTML is assembled in a local buffer and only returned once every step
succeeded, so callers never see a partially built document.
"""

from __future__ import annotations

import concurrent.futures
import html
import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from doc_import import run_styles
from doc_import.list_tracker import ListStateTracker
from doc_import.media_resolver import MediaResolver
from doc_import.run_styles import css_length
from shared.blog_doc import Document, EmbeddedObject, Paragraph
from shared.errors import MediaError
from shared.types import ConversionResult

logger = logging.getLogger(__name__)

IMAGE_ALT_TEXT = "Blog Image"
BLANK_PARAGRAPH_CONTENT = "&nbsp;"
DEFAULT_MEDIA_WORKERS = 4


def image_tag(url: str) -> str:
    return f'<img src="{html.escape(url, quote=True)}" alt="{IMAGE_ALT_TEXT}"/>'


def paragraph_open_tag(paragraph: Paragraph) -> str:
    style = paragraph.style
    return (
        f'<p style="text-align:{style.alignment}; '
        f'margin-left:{css_length(style.effective_indent)}">'
    )


def is_blank_paragraph(paragraph: Paragraph) -> bool:
    return len(paragraph.runs) == 1 and not paragraph.runs[0].text.strip()


def resolve_media(
    objects: List[EmbeddedObject],
    media_resolver: MediaResolver,
    naming_prefix: str,
    max_workers: int = DEFAULT_MEDIA_WORKERS,
) -> List[str]:
    """
    Resolves images concurrently and returns their stored URLs in source order.

    A failed image is logged and left out; the others are unaffected.
    """
    if not objects:
        return []

    urls: List[str] = []
    workers = max(1, min(max_workers, len(objects)))
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            (obj, executor.submit(media_resolver.resolve, obj.source_url, naming_prefix))
            for obj in objects
        ]
        for obj, future in futures:
            try:
                stored = future.result()
            except MediaError as e:
                logger.warning(
                    "Skipping %s image %s (%s): %s", obj.kind, obj.id, obj.source_url, e
                )
                continue
            urls.append(stored.url)
    return urls


def render_blocks(document: Document) -> str:
    tracker = ListStateTracker()
    parts: List[str] = []

    for paragraph in document.blocks:
        if paragraph.bullet is not None:
            opening = tracker.on_list_item(
                paragraph.bullet.list_id,
                paragraph.bullet.nesting_level,
                document.lists,
                indent=paragraph.style.effective_indent,
            )
            parts.append(opening.tags)
            close_tag = "</li>"
        else:
            parts.append(tracker.on_non_list_paragraph())
            if is_blank_paragraph(paragraph):
                parts.append(
                    f"{paragraph_open_tag(paragraph)}{BLANK_PARAGRAPH_CONTENT}</p>"
                )
                continue
            parts.append(paragraph_open_tag(paragraph))
            close_tag = "</p>"

        parts.extend(run_styles.render(run) for run in paragraph.runs)
        parts.append(close_tag)

    parts.append(tracker.flush())
    return "".join(parts)


def convert_document(
    document: Document,
    media_resolver: MediaResolver,
    post_id: Optional[str] = None,
    created_at: Optional[str] = None,
    max_workers: int = DEFAULT_MEDIA_WORKERS,
) -> ConversionResult:
    """
    Converts a document into HTML, copying its images into storage.

    Args:
        document (Document): The normalized document.
        media_resolver (MediaResolver): Uploads embedded images.
        post_id (str): Id of the post being created; also prefixes image keys.
            Generated when omitted.
        created_at (str): ISO-8601 creation time. Defaults to now (UTC).
        max_workers (int): Upper bound on concurrent image uploads.

    Returns:
        ConversionResult: The HTML and the stored image URLs, in document order.
    """
    post_id = post_id or str(uuid.uuid4())
    created_at = created_at or datetime.now(timezone.utc).isoformat()
    logger.info(
        "Converting document %s into post %s (%d blocks, %d positioned and %d inline objects)",
        document.document_id,
        post_id,
        len(document.blocks),
        len(document.positioned_objects),
        len(document.inline_objects),
    )

    embedded = list(document.positioned_objects.values()) + list(
        document.inline_objects.values()
    )
    media_urls = resolve_media(embedded, media_resolver, post_id, max_workers)
    body = render_blocks(document)
    content = "".join(image_tag(url) for url in media_urls) + body

    return ConversionResult(
        html=content,
        media_urls=media_urls,
        generated_post_id=post_id,
        created_at=created_at,
        title=document.title,
    )
