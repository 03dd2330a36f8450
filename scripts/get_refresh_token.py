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

"""Script for obtaining a Google OAuth refresh token for the Docs API

Prints the consent URL for read-only Docs access, then exchanges the
authorization code pasted back for tokens. Store the printed refresh token
as GOOGLE_REFRESH_TOKEN.
"""

import argparse
from urllib.parse import urlencode

import requests

from doc_import.fetch_utils import DOCS_READONLY_SCOPE, GOOGLE_TOKEN_URL, REQUEST_TIMEOUT

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
DEFAULT_REDIRECT_URI = "http://localhost:8080"


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Obtain a refresh token for the Google Docs API."
    )
    parser.add_argument("client_id", type=str, help="OAuth client id.")
    parser.add_argument("client_secret", type=str, help="OAuth client secret.")
    parser.add_argument(
        "--redirect_uri",
        default=DEFAULT_REDIRECT_URI,
        help="Redirect URI registered for the OAuth client.",
    )
    args = parser.parse_args()

    params = {
        "client_id": args.client_id,
        "redirect_uri": args.redirect_uri,
        "response_type": "code",
        "scope": DOCS_READONLY_SCOPE,
        "access_type": "offline",
        "prompt": "consent",
    }
    print("🔑 Open this URL and authorize access:")
    print(f"{GOOGLE_AUTH_URL}?{urlencode(params)}")
    code = input("Paste the authorization code: ").strip()

    response = requests.post(
        GOOGLE_TOKEN_URL,
        data={
            "code": code,
            "client_id": args.client_id,
            "client_secret": args.client_secret,
            "redirect_uri": args.redirect_uri,
            "grant_type": "authorization_code",
        },
        timeout=REQUEST_TIMEOUT,
    )
    response.raise_for_status()
    tokens = response.json()
    refresh_token = tokens.get("refresh_token")
    if not refresh_token:
        raise ValueError(f"No refresh token in response: {sorted(tokens)}")
    print(f"GOOGLE_REFRESH_TOKEN={refresh_token}")
