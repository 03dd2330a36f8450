"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import logging

from blog_backend.config import get_settings
from blog_backend.db import DbClient, InMemoryDbClient, SqlDbClient
from blog_backend.storage import InMemoryStorageClient, S3StorageClient
from doc_import import fetch_utils
from doc_import.fetch_utils import DocumentSource, GoogleDocsClient, InMemoryDocumentSource
from doc_import.media_resolver import MediaResolver
from shared.storage import StorageClient

logger = logging.getLogger(__name__)

_db_client: DbClient | None = None
_storage_client: StorageClient | None = None
_document_source: DocumentSource | None = None


def get_db_client() -> DbClient:
    """
    Return a singleton DB client so posts persist across requests.
    """
    global _db_client
    if _db_client:
        return _db_client

    settings = get_settings()
    if settings.use_in_memory_backends or not settings.database_url:
        logger.info("Using in-memory blog post store")
        _db_client = InMemoryDbClient()
    else:
        _db_client = SqlDbClient(settings.database_url)
    return _db_client


def get_storage_client() -> StorageClient:
    global _storage_client
    if _storage_client:
        return _storage_client

    settings = get_settings()
    if settings.use_in_memory_backends or not settings.s3_bucket:
        logger.info("Using in-memory image storage")
        _storage_client = InMemoryStorageClient()
    else:
        _storage_client = S3StorageClient(
            bucket=settings.s3_bucket,
            region=settings.aws_region or "",
            access_key_id=settings.aws_access_key_id,
            secret_access_key=settings.aws_secret_access_key,
            endpoint=settings.s3_endpoint or "",
        )
    return _storage_client


def get_document_source() -> DocumentSource:
    global _document_source
    if _document_source:
        return _document_source

    settings = get_settings()
    if settings.use_in_memory_backends or not settings.google_docs_configured:
        logger.info("Google Docs credentials missing; using in-memory document source")
        _document_source = InMemoryDocumentSource()
    else:
        _document_source = GoogleDocsClient(
            client_id=settings.google_client_id,
            client_secret=settings.google_client_secret,
            refresh_token=settings.google_refresh_token,
        )
    return _document_source


def get_media_resolver() -> MediaResolver:
    settings = get_settings()
    timeout = settings.media_fetch_timeout
    return MediaResolver(
        storage_client=get_storage_client(),
        key_prefix=settings.blog_image_prefix,
        fetch_bytes=lambda url: fetch_utils.fetch_image_bytes(url, timeout=timeout),
    )
