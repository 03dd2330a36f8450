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

"""Script for converting a Google Doc to blog HTML locally

Reads a `documents.get` JSON payload from disk (or fetches it by id when
Google credentials are set in the environment), converts it with in-memory
image storage and writes the HTML out. Images are written next to the HTML
under `local_image_bucket/` so the output can be opened in a browser.
"""

import argparse
import json
import os
import time

from blog_backend.config import get_settings
from blog_backend.storage import InMemoryStorageClient
from doc_import import gdoc_adapter, html_converter
from doc_import.fetch_utils import GoogleDocsClient
from doc_import.media_resolver import MediaResolver

LOCAL_IMAGE_BUCKET = "local_image_bucket"


if __name__ == "__main__":
    start_time = time.time()

    parser = argparse.ArgumentParser(
        description="Convert a Google Doc into blog HTML locally."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--json_file", help="Path to a saved documents.get payload.")
    source.add_argument("--doc_id", help="Google Doc id to fetch.")
    parser.add_argument(
        "--output", default="blog_post.html", help="Where to write the HTML."
    )
    parser.add_argument(
        "--post_id", default="local", help="Post id used to name stored images."
    )
    args = parser.parse_args()

    print("📄 Converting document locally...")
    if args.json_file:
        with open(args.json_file, "r", encoding="utf-8") as f:
            raw_document = json.load(f)
    else:
        settings = get_settings()
        if not settings.google_docs_configured:
            raise ValueError(
                "GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET and GOOGLE_REFRESH_TOKEN must be set"
            )
        client = GoogleDocsClient(
            client_id=settings.google_client_id,
            client_secret=settings.google_client_secret,
            refresh_token=settings.google_refresh_token,
        )
        raw_document = client.fetch_document(args.doc_id)

    output_dir = os.path.dirname(os.path.abspath(args.output))
    storage = InMemoryStorageClient(base_url=LOCAL_IMAGE_BUCKET)
    document = gdoc_adapter.normalize(raw_document)
    result = html_converter.convert_document(
        document, MediaResolver(storage_client=storage), post_id=args.post_id
    )

    for path, data in storage.stored_objects.items():
        image_path = os.path.join(output_dir, LOCAL_IMAGE_BUCKET, path)
        os.makedirs(os.path.dirname(image_path), exist_ok=True)
        with open(image_path, "wb") as f:
            f.write(data)

    with open(args.output, "w", encoding="utf-8") as f:
        f.write(result.html)

    print(f"  > {len(document.blocks)} blocks, {len(result.media_urls)} images")
    print(f"  > wrote {args.output} in {time.time() - start_time:.2f}s")
