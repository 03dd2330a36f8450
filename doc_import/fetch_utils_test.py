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


import concurrent.futures
import time
import unittest
from unittest.mock import MagicMock, patch

import requests

from doc_import import fetch_utils
from shared.errors import MediaFetchError, SourceFetchError


def _response(content=b"", json_payload=None, error=None):
    response = MagicMock()
    response.content = content
    response.json.return_value = json_payload
    if error:
        response.raise_for_status.side_effect = error
    return response


class FetchImageBytesTest(unittest.TestCase):

    @patch("doc_import.fetch_utils.requests.get")
    def test_returns_content(self, mock_get):
        mock_get.return_value = _response(content=b"\x89PNG")
        self.assertEqual(fetch_utils.fetch_image_bytes("https://img.test/a.png"), b"\x89PNG")
        mock_get.assert_called_once_with(
            "https://img.test/a.png", timeout=fetch_utils.REQUEST_TIMEOUT
        )

    @patch("doc_import.fetch_utils.requests.get")
    def test_non_ok_response_raises(self, mock_get):
        mock_get.return_value = _response(error=requests.HTTPError("403 Forbidden"))
        with self.assertRaises(MediaFetchError) as ctx:
            fetch_utils.fetch_image_bytes("https://img.test/a.png")
        self.assertEqual(ctx.exception.url, "https://img.test/a.png")

    @patch("doc_import.fetch_utils.requests.get")
    def test_transport_error_raises(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("unreachable")
        with self.assertRaises(MediaFetchError):
            fetch_utils.fetch_image_bytes("https://img.test/a.png")


class GoogleDocsClientTest(unittest.TestCase):

    def setUp(self):
        patcher = patch("doc_import.fetch_utils.requests.Session")
        self.session = patcher.start().return_value
        self.addCleanup(patcher.stop)
        self.session.post.return_value = _response(
            json_payload={"access_token": "token-1", "expires_in": 3600}
        )
        self.client = fetch_utils.GoogleDocsClient(
            client_id="client", client_secret="secret", refresh_token="refresh"
        )

    def test_fetch_document_uses_bearer_token(self):
        self.session.get.return_value = _response(json_payload={"documentId": "doc-1"})

        document = self.client.fetch_document("doc-1")

        self.assertEqual(document, {"documentId": "doc-1"})
        token_request = self.session.post.call_args
        self.assertEqual(token_request.args[0], fetch_utils.GOOGLE_TOKEN_URL)
        self.assertEqual(token_request.kwargs["data"]["grant_type"], "refresh_token")
        self.assertEqual(token_request.kwargs["data"]["refresh_token"], "refresh")
        self.session.get.assert_called_once_with(
            f"{fetch_utils.DOCS_API_URL}/doc-1",
            headers={"Authorization": "Bearer token-1"},
            timeout=fetch_utils.REQUEST_TIMEOUT,
        )

    def test_access_token_is_cached(self):
        self.session.get.return_value = _response(json_payload={})
        self.client.fetch_document("doc-1")
        self.client.fetch_document("doc-2")
        self.assertEqual(self.session.post.call_count, 1)

    def test_concurrent_fetches_refresh_token_once(self):
        token_response = self.session.post.return_value

        def slow_token_exchange(*args, **kwargs):
            time.sleep(0.05)
            return token_response

        self.session.post.side_effect = slow_token_exchange
        self.session.get.return_value = _response(json_payload={})

        with concurrent.futures.ThreadPoolExecutor(max_workers=5) as executor:
            list(executor.map(self.client.fetch_document, [f"doc-{i}" for i in range(5)]))

        self.assertEqual(self.session.post.call_count, 1)
        self.assertEqual(self.session.get.call_count, 5)

    def test_not_found_raises_source_fetch_error(self):
        self.session.get.return_value = _response(error=requests.HTTPError("404"))
        with self.assertRaises(SourceFetchError) as ctx:
            self.client.fetch_document("missing")
        self.assertEqual(ctx.exception.document_id, "missing")

    def test_token_failure_raises_source_fetch_error(self):
        self.session.post.return_value = _response(error=requests.HTTPError("401"))
        with self.assertRaises(SourceFetchError):
            self.client.fetch_document("doc-1")
        self.session.get.assert_not_called()


class InMemoryDocumentSourceTest(unittest.TestCase):

    def test_serves_known_documents(self):
        source = fetch_utils.InMemoryDocumentSource({"doc-1": {"body": {"content": []}}})
        self.assertEqual(source.fetch_document("doc-1"), {"body": {"content": []}})

    def test_unknown_document_raises(self):
        with self.assertRaises(SourceFetchError):
            fetch_utils.InMemoryDocumentSource().fetch_document("nope")


if __name__ == "__main__":
    unittest.main()
