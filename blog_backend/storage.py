"""
Storage abstraction for S3-compatible object storage and in-memory testing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import boto3
from botocore.config import Config


def s3_public_url(bucket: str, region: str, path: str, endpoint: str = "") -> str:
    """
    Returns the stable public URL of an object.

    Uses AWS virtual-hosted naming unless a custom endpoint is configured,
    in which case the object is addressed by path under that endpoint.
    """
    if endpoint:
        return f"{endpoint.rstrip('/')}/{bucket}/{path}"
    return f"https://{bucket}.s3.{region}.amazonaws.com/{path}"


@dataclass
class InMemoryStorageClient:
    """Test double for storage interactions."""

    base_url: str = "https://example.test/storage"
    stored_objects: dict = None
    public_paths: set = None

    def __post_init__(self):
        if self.stored_objects is None:
            self.stored_objects = {}
        if self.public_paths is None:
            self.public_paths = set()

    def upload_bytes(
        self,
        path: str,
        data: bytes,
        content_type: str = "application/octet-stream",
        public_read: bool = False,
    ) -> None:
        self.stored_objects[path] = bytes(data)
        if public_read:
            self.public_paths.add(path)

    def public_url(self, path: str) -> str:
        return f"{self.base_url}/{path}"


@dataclass
class S3StorageClient:
    """
    S3 (or S3-compatible) storage client.
    """

    bucket: str
    region: str
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    endpoint: str = ""

    def __post_init__(self):
        config = Config(signature_version="s3v4")
        # Fall back to the default credential chain when no keys are given.
        self._client = boto3.client(
            "s3",
            endpoint_url=self.endpoint or None,
            region_name=self.region or None,
            aws_access_key_id=self.access_key_id or None,
            aws_secret_access_key=self.secret_access_key or None,
            config=config,
        )

    def upload_bytes(
        self,
        path: str,
        data: bytes,
        content_type: str = "application/octet-stream",
        public_read: bool = False,
    ) -> None:
        params = {
            "Bucket": self.bucket,
            "Key": path,
            "Body": data,
            "ContentType": content_type,
        }
        if public_read:
            params["ACL"] = "public-read"
        self._client.put_object(**params)

    def public_url(self, path: str) -> str:
        return s3_public_url(self.bucket, self.region, path, endpoint=self.endpoint)
