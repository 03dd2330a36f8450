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

"""Errors raised while importing an external document into a blog post."""


class BlogImportError(Exception):
    pass


class MalformedDocument(BlogImportError):
    """The raw document tree is missing its body content or has the wrong shape."""


class SourceFetchError(BlogImportError):
    def __init__(self, document_id: str, message: str = ""):
        self.document_id = document_id
        super().__init__(message or f"Could not fetch document {document_id}")


class MediaError(BlogImportError):
    """Per-image failure. The converter skips the image and keeps going."""


class MediaFetchError(MediaError):
    def __init__(self, url: str, message: str = ""):
        self.url = url
        super().__init__(message or f"Failed to fetch image: {url}")


class MediaStoreError(MediaError):
    def __init__(self, key: str, message: str = ""):
        self.key = key
        super().__init__(message or f"Failed to store image: {key}")
