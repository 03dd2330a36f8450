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
import threading
import time
from dataclasses import dataclass, field
from typing import Optional, Protocol

import requests

from shared.errors import MediaFetchError, SourceFetchError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30  # seconds

GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
DOCS_API_URL = "https://docs.googleapis.com/v1/documents"
DOCS_READONLY_SCOPE = "https://www.googleapis.com/auth/documents.readonly"

# Refresh the access token slightly before Google expires it.
TOKEN_EXPIRY_MARGIN = 60  # seconds


def fetch_image_bytes(url: str, timeout: float = REQUEST_TIMEOUT) -> bytes:
    """
    Fetches the raw bytes of an image.

    Args:
        url (str): The image URL, as exposed by the document's embedded object.
        timeout (float): Request timeout in seconds.

    Returns:
        bytes: The response body.

    Raises:
        MediaFetchError: On a transport error or a non-OK response.
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise MediaFetchError(url, f"Failed to fetch image: {url} ({e})") from e
    return response.content


class DocumentSource(Protocol):
    """Anything that can return the raw element tree of a document."""

    def fetch_document(self, document_id: str) -> dict:
        ...


@dataclass
class InMemoryDocumentSource:
    """Test double serving documents from a dict."""

    documents: dict = field(default_factory=dict)

    def fetch_document(self, document_id: str) -> dict:
        document = self.documents.get(document_id)
        if document is None:
            raise SourceFetchError(document_id, f"Document not found: {document_id}")
        return document


@dataclass
class GoogleDocsClient:
    """
    Reads documents through the Google Docs REST API.

    Authenticates with a long-lived OAuth refresh token (see
    scripts/get_refresh_token.py) and caches the short-lived access token.
    """

    client_id: str
    client_secret: str
    refresh_token: str
    timeout: float = REQUEST_TIMEOUT

    def __post_init__(self):
        self._session = requests.Session()
        self._access_token: Optional[str] = None
        self._expires_at = 0.0
        # Routes run on a thread pool and share one client.
        self._token_lock = threading.Lock()

    def _get_access_token(self) -> str:
        with self._token_lock:
            if self._access_token and time.time() < self._expires_at:
                return self._access_token
            return self._refresh_access_token()

    def _refresh_access_token(self) -> str:
        response = self._session.post(
            GOOGLE_TOKEN_URL,
            data={
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "refresh_token": self.refresh_token,
                "grant_type": "refresh_token",
            },
            timeout=self.timeout,
        )
        response.raise_for_status()
        payload = response.json()
        self._access_token = payload["access_token"]
        self._expires_at = (
            time.time() + float(payload.get("expires_in", 3600)) - TOKEN_EXPIRY_MARGIN
        )
        return self._access_token

    def fetch_document(self, document_id: str) -> dict:
        """
        Fetches a document's full element tree.

        Raises:
            SourceFetchError: If the token exchange or the document request fails.
        """
        logger.info("Fetching Google Doc %s", document_id)
        try:
            token = self._get_access_token()
            response = self._session.get(
                f"{DOCS_API_URL}/{document_id}",
                headers={"Authorization": f"Bearer {token}"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            document = response.json()
        except (requests.RequestException, KeyError, ValueError) as e:
            logger.warning("Failed to fetch Google Doc %s: %s", document_id, e)
            raise SourceFetchError(document_id) from e
        logger.info("Fetched Google Doc %s", document_id)
        return document
