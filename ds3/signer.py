# -*- coding: utf-8 -*-
# DS3 Python Library for S3 Compatible Bulk Object Storage, (C)
# 2026 DS3 SDK Authors.
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


"""
ds3.signer
~~~~~~~~~~

This module implements request signing with HMAC-SHA1 over the canonical
string of a request, i.e.

    Signature = Base64(HMAC-SHA1(SecretKey, UTF-8(StringToSign)))

    StringToSign = HTTP-Verb + "\\n" +
        Content-MD5 + "\\n" +
        Content-Type + "\\n" +
        Date + "\\n" +
        CanonicalizedAmzHeaders +
        CanonicalizedResource

:copyright: (c) 2026 by DS3 SDK Authors.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import absolute_import, annotations

import base64
import hashlib
import hmac
import re
from typing import Mapping, Optional

from .credentials import Credentials

_MULTI_SPACE_REGEX = re.compile(r"( +)")
_AMZ_PREFIX = "x-amz-"


def canonicalize_amz_headers(headers: Optional[Mapping[str, str]]) -> str:
    """
    Get canonicalized x-amz-* headers block. Each header is lower-cased,
    sorted by name and terminated by a newline.
    """
    amz_headers = {}
    for key, value in (headers or {}).items():
        key = key.lower()
        if key.startswith(_AMZ_PREFIX):
            amz_headers[key] = _MULTI_SPACE_REGEX.sub(" ", value.strip())
    return "".join(
        f"{key}:{value}\n" for key, value in sorted(amz_headers.items())
    )


def get_string_to_sign(
        verb: str,
        resource: str,
        date: str,
        content_type: str = "",
        content_md5: str = "",
        amz_headers: str = "",
) -> str:
    """Get canonical string of a request."""
    if not resource:
        raise ValueError("resource path is required")
    if not date:
        raise ValueError("date is required")
    return (
        f"{verb}\n{content_md5 or ''}\n{content_type or ''}\n{date}\n"
        f"{amz_headers or ''}{resource}"
    )


def _hmac_sha1(key: bytes, data: bytes) -> bytes:
    """Return HMAC-SHA1 digest of given key and data."""
    return hmac.new(key, data, hashlib.sha1).digest()


def sign(  # pylint: disable=too-many-positional-arguments
        credentials: Credentials,
        verb: str,
        resource: str,
        date: str,
        content_type: str = "",
        content_md5: str = "",
        amz_headers: str = "",
) -> str:
    """Compute base64 encoded signature of the canonical string."""
    string_to_sign = get_string_to_sign(
        verb, resource, date, content_type, content_md5, amz_headers,
    )
    digest = _hmac_sha1(
        credentials.secret_key.encode(), string_to_sign.encode(),
    )
    return base64.b64encode(digest).decode()


def get_authorization(access_id: str, signature: str) -> str:
    """Get Authorization header value."""
    return f"AWS {access_id}:{signature}"


def sign_v2(
        verb: str,
        resource: str,
        headers: dict[str, str],
        credentials: Credentials,
        date: str,
) -> dict[str, str]:
    """
    Sign a request. Date and Authorization headers are set on passed
    headers which is returned.
    """
    signature = sign(
        credentials,
        verb,
        resource,
        date,
        headers.get("Content-Type", ""),
        headers.get("Content-MD5", ""),
        canonicalize_amz_headers(headers),
    )
    headers["Date"] = date
    headers["Authorization"] = get_authorization(
        credentials.access_id, signature,
    )
    return headers
