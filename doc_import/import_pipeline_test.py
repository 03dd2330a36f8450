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


import unittest
from unittest.mock import MagicMock

from blog_backend.storage import InMemoryStorageClient
from doc_import import import_pipeline
from doc_import.fetch_utils import InMemoryDocumentSource
from doc_import.media_resolver import MediaResolver
from doc_import.testing_utils import image_object, paragraph, raw_document, text_run
from shared.errors import MalformedDocument, SourceFetchError


class ImportGoogleDocTest(unittest.TestCase):

    def setUp(self):
        self.storage = InMemoryStorageClient()
        self.resolver = MediaResolver(
            storage_client=self.storage, fetch_bytes=MagicMock(return_value=b"img")
        )
        self.source = InMemoryDocumentSource(
            {
                "doc-1": raw_document(
                    [paragraph(text_run("Hello world\n"))],
                    inline_objects={"kix.img": image_object("https://img.test/a.png")},
                    title="My first post",
                ),
                "broken": {"title": "No body"},
            }
        )

    def test_import_converts_document(self):
        result = import_pipeline.import_google_doc(
            "doc-1", self.source, self.resolver, post_id="post-9"
        )
        self.assertEqual(result.generated_post_id, "post-9")
        self.assertEqual(result.title, "My first post")
        self.assertEqual(len(result.media_urls), 1)
        self.assertIn("/blog_images/post-9_", result.media_urls[0])
        self.assertTrue(
            result.html.endswith(
                '<p style="text-align:left; margin-left:0px">Hello world</p>'
            )
        )
        self.assertTrue(result.html.startswith(f'<img src="{result.media_urls[0]}"'))

    def test_missing_document(self):
        with self.assertRaises(SourceFetchError):
            import_pipeline.import_google_doc("missing", self.source, self.resolver)
        self.assertEqual(self.storage.stored_objects, {})

    def test_malformed_document(self):
        with self.assertRaises(MalformedDocument):
            import_pipeline.import_google_doc("broken", self.source, self.resolver)


if __name__ == "__main__":
    unittest.main()
