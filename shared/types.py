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

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class StoredMediaRef:
    """An image that was copied into object storage."""

    key: str
    url: str


@dataclass(frozen=True)
class ConversionResult:
    html: str
    media_urls: List[str]
    generated_post_id: str
    created_at: str
    title: str | None = None


@dataclass
class BlogPostRecord:
    post_id: str
    created_at: str
    title: str
    author: str
    content: str
    images: List[str] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "postId": self.post_id,
            "createdAt": self.created_at,
            "title": self.title,
            "author": self.author,
            "content": self.content,
            "images": list(self.images),
        }
