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

import logging
from typing import Optional

from doc_import import gdoc_adapter
from doc_import.fetch_utils import DocumentSource
from doc_import.html_converter import DEFAULT_MEDIA_WORKERS, convert_document
from doc_import.media_resolver import MediaResolver
from shared.types import ConversionResult

logger = logging.getLogger(__name__)


def import_google_doc(
    document_id: str,
    document_source: DocumentSource,
    media_resolver: MediaResolver,
    post_id: Optional[str] = None,
    max_workers: int = DEFAULT_MEDIA_WORKERS,
) -> ConversionResult:
    """
    Fetches a document and converts it into blog post HTML.

    Args:
        document_id (str): Id of the document in the external word processor.
        document_source (DocumentSource): Where to fetch the raw document from.
        media_resolver (MediaResolver): Uploads the document's images.
        post_id (str): Optional id for the new post; generated when omitted.
        max_workers (int): Upper bound on concurrent image uploads.

    Returns:
        ConversionResult: The converted post content.

    Raises:
        SourceFetchError: If the document cannot be retrieved.
        MalformedDocument: If the document has no body content.
    """
    raw_document = document_source.fetch_document(document_id)
    document = gdoc_adapter.normalize(raw_document)
    result = convert_document(
        document,
        media_resolver,
        post_id=post_id,
        max_workers=max_workers,
    )
    logger.info(
        "Imported document %s as post %s (%d chars, %d images)",
        document_id,
        result.generated_post_id,
        len(result.html),
        len(result.media_urls),
    )
    return result
