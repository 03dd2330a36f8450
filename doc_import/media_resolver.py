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
import uuid
from dataclasses import dataclass, field
from typing import Callable

from doc_import import fetch_utils
from shared.errors import MediaStoreError
from shared.storage import StorageClient
from shared.types import StoredMediaRef

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "blog_images"
IMAGE_CONTENT_TYPE = "image/png"


@dataclass
class MediaResolver:
    """
    Copies an embedded image into object storage.

    One fetch and one upload per call, no retries. Failures surface as
    `MediaFetchError` / `MediaStoreError` so the caller can skip the image.
    """

    storage_client: StorageClient
    key_prefix: str = DEFAULT_KEY_PREFIX
    fetch_bytes: Callable[[str], bytes] = field(default=fetch_utils.fetch_image_bytes)

    def make_key(self, naming_prefix: str) -> str:
        name = f"{naming_prefix}_{uuid.uuid4()}.png"
        return f"{self.key_prefix}/{name}" if self.key_prefix else name

    def resolve(self, source_url: str, naming_prefix: str) -> StoredMediaRef:
        """
        Fetches `source_url` and uploads it under a fresh, publicly readable key.

        Args:
            source_url (str): Where the document API exposes the image.
            naming_prefix (str): Caller-assigned prefix for the key, e.g. a post id.

        Returns:
            StoredMediaRef: The storage key and its public URL.
        """
        data = self.fetch_bytes(source_url)
        key = self.make_key(naming_prefix)
        try:
            self.storage_client.upload_bytes(
                key, data, content_type=IMAGE_CONTENT_TYPE, public_read=True
            )
        except Exception as e:
            raise MediaStoreError(key, f"Failed to store image {key}: {e}") from e
        url = self.storage_client.public_url(key)
        logger.info("Stored image %s as %s", source_url, url)
        return StoredMediaRef(key=key, url=url)
